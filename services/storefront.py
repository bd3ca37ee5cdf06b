# services/storefront.py

"""
storefront.py

The storefront session as a state machine. `transition` is a pure function
from (state, event) to a new state, so every rule can be tested without a
browser. `StorefrontController` owns one state, runs the slow gateway calls
and feeds the resulting events back through `transition` in order.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from models.vault import ALL, Notification, NotificationKind
from services import ledger

logger = logging.getLogger(__name__)

NOTIFICATION_TTL = 2.0


class AssetNotFoundError(LookupError):
    def __init__(self, asset_id):
        super().__init__(f"Asset not found: {asset_id}")
        self.asset_id = asset_id


# --- Events ---

@dataclass(frozen=True)
class QueryChanged:
    text: str = ''
    type_filter: str = ALL
    tag_filter: str = ALL


@dataclass(frozen=True)
class ResultsLoaded:
    asset_ids: Tuple[str, ...]


@dataclass(frozen=True)
class AssetSelected:
    asset_id: str


@dataclass(frozen=True)
class SelectionCleared:
    pass


@dataclass(frozen=True)
class CreditsEarned:
    amount: int = 1


@dataclass(frozen=True)
class RedemptionRequested:
    asset_id: str
    cost: int


@dataclass(frozen=True)
class NotificationDismissed:
    pass


def _notify(key, kind, now, ttl, **params):
    return Notification(key=key, kind=kind, expires_at=now + ttl, params=params)


def transition(state, event, now=None, notification_ttl=NOTIFICATION_TTL):
    """Applies one event. Unknown events are a programming error."""
    now = time.time() if now is None else now

    if isinstance(event, QueryChanged):
        return state.evolve(
            query=event.text or '',
            type_filter=event.type_filter or ALL,
            tag_filter=event.tag_filter or ALL,
        )

    if isinstance(event, ResultsLoaded):
        # Results are applied as they arrive, even if the inputs moved on.
        return state.evolve(result_ids=tuple(event.asset_ids))

    if isinstance(event, AssetSelected):
        return state.evolve(selected_id=event.asset_id)

    if isinstance(event, SelectionCleared):
        return state.evolve(selected_id=None)

    if isinstance(event, CreditsEarned):
        return state.evolve(
            credits=ledger.earn(state.credits, event.amount),
            notification=_notify('credit_earned', NotificationKind.SUCCESS, now, notification_ttl,
                                 amount=event.amount),
        )

    if isinstance(event, RedemptionRequested):
        result = ledger.redeem(state.credits, event.cost)
        if not result.accepted:
            return state.evolve(
                notification=_notify('not_enough_credits', NotificationKind.ERROR, now, notification_ttl,
                                     cost=event.cost, credits=state.credits),
            )
        return state.evolve(
            credits=result.balance,
            notification=_notify('download_ready', NotificationKind.SUCCESS, now, notification_ttl),
        )

    if isinstance(event, NotificationDismissed):
        return state.evolve(notification=None)

    raise TypeError(f"Unsupported storefront event: {type(event).__name__}")


@dataclass(frozen=True)
class RedeemOutcome:
    accepted: bool
    credits: int
    download_url: Optional[str] = None


class StorefrontController:
    """
    Runs storefront actions against one visitor's state. When `commit` is
    given, every event is applied through it so the transition always sees
    the latest stored state, even if another request changed it while this
    one was waiting on a gateway.
    """

    def __init__(self, state, catalog, ads, downloads, notification_ttl=NOTIFICATION_TTL, clock=time.time,
                 commit=None):
        self.state = state
        self.catalog = catalog
        self.ads = ads
        self.downloads = downloads
        self.notification_ttl = notification_ttl
        self.clock = clock
        self._commit = commit

    def dispatch(self, event):
        def apply(current):
            return transition(current, event, now=self.clock(), notification_ttl=self.notification_ttl)

        self.state = self._commit(apply) if self._commit else apply(self.state)
        return self.state

    def _require(self, asset_id):
        asset = self.catalog.get(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        return asset

    def search(self, text='', type_filter=ALL, tag_filter=ALL):
        self.dispatch(QueryChanged(text, type_filter, tag_filter))
        results = self.catalog.query(text, type_filter, tag_filter)
        self.dispatch(ResultsLoaded(tuple(a.id for a in results)))
        return results

    def select(self, asset_id):
        asset = self._require(asset_id)
        self.dispatch(AssetSelected(asset.id))
        return asset

    def close_preview(self):
        self.dispatch(SelectionCleared())

    def watch_ad(self, amount=1):
        if amount < 0:
            raise ValueError("Earned credits cannot be negative.")
        earned = self.ads.watch(amount)
        self.dispatch(CreditsEarned(earned))
        return self.state.credits

    def redeem(self, asset_id):
        asset = self._require(asset_id)
        state = self.dispatch(RedemptionRequested(asset.id, asset.credits))
        if state.notification.kind is not NotificationKind.SUCCESS:
            logger.info(f"Redemption of {asset.id} rejected: {state.credits} < {asset.credits}")
            return RedeemOutcome(accepted=False, credits=state.credits)

        # Credits are already charged; the link is issued afterwards.
        download_url = self.downloads.issue(asset.id)
        logger.info(f"Redeemed {asset.id} for {asset.credits} credits, {state.credits} left")
        return RedeemOutcome(accepted=True, credits=state.credits, download_url=download_url)

    def dismiss_notification(self):
        self.dispatch(NotificationDismissed())

    def visible_notification(self):
        notification = self.state.notification
        if notification and notification.is_visible(self.clock()):
            return notification
        return None
