"""
session_state.py

Keeps each visitor's SessionState in process memory, keyed by an id stored in
the signed Flask session cookie, and builds the controller that works on it
for the current request. Requests from the same visitor may overlap while a
gateway call sleeps; every event is applied to the latest stored state under
the store's lock, so no request can write back an outdated balance.
"""

import logging
import threading
import time
import uuid

from flask import current_app, session

from models.vault import SessionState
from services.storefront import StorefrontController

logger = logging.getLogger(__name__)

SESSION_KEY = 'vault_sid'


class SessionStore:
    def __init__(self, ttl_seconds=7200):
        self._states = {}
        self._last_seen = {}
        self.ttl_seconds = ttl_seconds
        self.lock = threading.Lock()

    def create(self, state):
        sid = uuid.uuid4().hex
        with self.lock:
            self._cleanup_expired()
            self._states[sid] = state
            self._last_seen[sid] = time.time()
        logger.info(f"Created vault session {sid}")
        return sid

    def get(self, sid):
        with self.lock:
            state = self._states.get(sid)
            if state is not None:
                self._last_seen[sid] = time.time()
            return state

    def update(self, sid, apply):
        """Replaces the stored state with `apply(current)` and returns the result."""
        with self.lock:
            current = self._states.get(sid)
            if current is None:
                raise KeyError(sid)
            new = apply(current)
            self._states[sid] = new
            self._last_seen[sid] = time.time()
            return new

    def discard(self, sid):
        with self.lock:
            self._states.pop(sid, None)
            self._last_seen.pop(sid, None)

    def __len__(self):
        return len(self._states)

    def _cleanup_expired(self):
        cutoff = time.time() - self.ttl_seconds
        expired = [sid for sid, seen in self._last_seen.items() if seen < cutoff]
        for sid in expired:
            del self._states[sid]
            del self._last_seen[sid]
        if expired:
            logger.info(f"Cleaned up {len(expired)} idle vault sessions")


def _store():
    return current_app.extensions['vault_sessions']


def new_state():
    """A fresh page-load state: starting credits and the unfiltered catalog."""
    catalog = current_app.extensions['vault_catalog']
    return SessionState.initial(
        credits=current_app.config['STARTING_CREDITS'],
        result_ids=[a.id for a in catalog.assets],
    )


def reset_state():
    store = _store()
    old_sid = session.get(SESSION_KEY)
    if old_sid:
        store.discard(old_sid)
    state = new_state()
    session[SESSION_KEY] = store.create(state)
    return state


def current_sid():
    """The visitor's session id, starting a new session if it is unknown."""
    sid = session.get(SESSION_KEY)
    if sid and _store().get(sid) is not None:
        return sid
    if sid:
        current_app.logger.warning(f"Unknown vault session {sid}, starting a new one")
    reset_state()
    return session[SESSION_KEY]


def get_controller():
    store = _store()
    sid = current_sid()
    return StorefrontController(
        state=store.get(sid),
        catalog=current_app.extensions['vault_catalog'],
        ads=current_app.extensions['vault_ads'],
        downloads=current_app.extensions['vault_downloads'],
        notification_ttl=current_app.config['NOTIFICATION_SECONDS'],
        commit=lambda apply: store.update(sid, apply),
    )
