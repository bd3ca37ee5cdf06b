"""Tests for the in-memory vault session store"""

from types import SimpleNamespace

import pytest

from models.vault import SessionState
from services.storefront import StorefrontController
from utils import session_state
from utils.session_state import SessionStore


@pytest.fixture
def store():
    return SessionStore(ttl_seconds=60)


def test_create_and_get(store):
    sid = store.create(SessionState.initial(credits=25))
    assert store.get(sid).credits == 25
    assert len(store) == 1


def test_update_applies_to_stored_state(store):
    sid = store.create(SessionState.initial(credits=25))
    new = store.update(sid, lambda s: s.evolve(credits=s.credits + 1))
    assert new.credits == 26
    assert store.get(sid).credits == 26


def test_update_unknown_session(store):
    with pytest.raises(KeyError):
        store.update('missing', lambda s: s)


def test_discard(store):
    sid = store.create(SessionState.initial(credits=25))
    store.discard(sid)
    store.discard(sid)
    assert store.get(sid) is None


def test_idle_sessions_cleaned_up_on_create(store, monkeypatch):
    clock = SimpleNamespace(now=1_000.0)
    monkeypatch.setattr(session_state, 'time', SimpleNamespace(time=lambda: clock.now))

    old = store.create(SessionState.initial(credits=25))
    clock.now += 61
    fresh = store.create(SessionState.initial(credits=25))

    assert store.get(old) is None
    assert store.get(fresh) is not None
    assert len(store) == 1


def test_controller_commits_against_latest_state(store, catalog, ads, downloads):
    sid = store.create(SessionState.initial(credits=25))
    controller = StorefrontController(
        store.get(sid), catalog, ads, downloads, commit=lambda apply: store.update(sid, apply))

    # Another request earns a credit after this controller loaded its state
    store.update(sid, lambda s: s.evolve(credits=s.credits + 1))
    outcome = controller.redeem('img_101')

    assert outcome.accepted
    assert outcome.credits == 7
    assert store.get(sid).credits == 7
