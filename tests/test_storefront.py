"""Tests for the storefront state machine and its controller"""

from unittest.mock import MagicMock

import pytest

from models.vault import NotificationKind, SessionState
from services.storefront import (
    AssetNotFoundError, AssetSelected, CreditsEarned, NotificationDismissed,
    QueryChanged, RedemptionRequested, ResultsLoaded, SelectionCleared,
    StorefrontController, transition,
)

NOW = 1_000.0


@pytest.fixture
def state():
    return SessionState.initial(credits=25)


@pytest.fixture
def controller(state, catalog, ads, downloads):
    return StorefrontController(state, catalog, ads, downloads, notification_ttl=2.0, clock=lambda: NOW)


class TestTransition:
    def test_query_changed_keeps_results_until_loaded(self, state):
        state = state.evolve(result_ids=('vid_001',))
        new = transition(state, QueryChanged('loop', 'video', 'all'), now=NOW)
        assert (new.query, new.type_filter, new.tag_filter) == ('loop', 'video', 'all')
        assert new.result_ids == ('vid_001',)

    def test_results_loaded_replaces_list(self, state):
        new = transition(state, ResultsLoaded(('img_101', 'img_102')), now=NOW)
        assert new.result_ids == ('img_101', 'img_102')

    def test_stale_results_still_applied(self, state):
        state = transition(state, QueryChanged('neon'), now=NOW)
        state = transition(state, QueryChanged('anime'), now=NOW)
        # The slower "neon" response lands last and wins
        state = transition(state, ResultsLoaded(('vid_001',)), now=NOW)
        state = transition(state, ResultsLoaded(('img_101',)), now=NOW)
        assert state.query == 'anime'
        assert state.result_ids == ('img_101',)

    def test_select_and_clear(self, state):
        selected = transition(state, AssetSelected('aud_301'), now=NOW)
        assert selected.selected_id == 'aud_301'
        assert transition(selected, SelectionCleared(), now=NOW).selected_id is None

    def test_earn_adds_credits_and_notifies(self, state):
        new = transition(state, CreditsEarned(1), now=NOW, notification_ttl=2.0)
        assert new.credits == 26
        assert new.notification.key == 'credit_earned'
        assert new.notification.kind == NotificationKind.SUCCESS
        assert new.notification.expires_at == NOW + 2.0

    def test_rejected_redemption_keeps_balance(self, state):
        new = transition(state, RedemptionRequested('vid_001', 49), now=NOW)
        assert new.credits == 25
        assert new.notification.key == 'not_enough_credits'
        assert new.notification.kind == NotificationKind.ERROR

    def test_earn_then_redeem_scenario(self, state):
        state = transition(state, CreditsEarned(1), now=NOW)
        state = transition(state, RedemptionRequested('img_101', 19), now=NOW)
        assert state.credits == 7
        assert state.notification.key == 'download_ready'

    def test_newer_notification_replaces_older(self, state):
        state = transition(state, CreditsEarned(1), now=NOW)
        state = transition(state, RedemptionRequested('vid_002', 59), now=NOW + 1)
        assert state.notification.key == 'not_enough_credits'
        assert state.notification.expires_at == NOW + 1 + 2.0

    def test_dismiss(self, state):
        state = transition(state, CreditsEarned(1), now=NOW)
        assert transition(state, NotificationDismissed(), now=NOW).notification is None

    def test_transition_does_not_mutate_input(self, state):
        transition(state, CreditsEarned(5), now=NOW)
        assert state.credits == 25

    def test_unknown_event_raises(self, state):
        with pytest.raises(TypeError):
            transition(state, object(), now=NOW)


class TestController:
    def test_search_updates_selection_and_results(self, controller):
        results = controller.search('anime', 'all', 'all')
        assert [a.id for a in results] == ['vid_001']
        assert controller.state.query == 'anime'
        assert controller.state.result_ids == ('vid_001',)

    def test_redeem_rejected(self, controller):
        downloads = MagicMock()
        controller.downloads = downloads
        outcome = controller.redeem('vid_001')
        assert outcome.accepted is False
        assert outcome.credits == 25
        assert outcome.download_url is None
        downloads.issue.assert_not_called()

    def test_watch_ad_then_redeem(self, controller):
        assert controller.watch_ad(1) == 26
        outcome = controller.redeem('img_101')
        assert outcome.accepted is True
        assert outcome.credits == 7
        assert outcome.download_url == 'https://example.com/download/img_101'

    def test_same_asset_can_be_redeemed_again(self, controller):
        first = controller.redeem('img_102')
        second = controller.redeem('img_102')
        assert first.accepted and second.accepted
        assert controller.state.credits == 25 - 9 - 9

    def test_unknown_asset(self, controller):
        with pytest.raises(AssetNotFoundError):
            controller.redeem('nope')
        with pytest.raises(AssetNotFoundError):
            controller.select('nope')

    def test_negative_ad_amount_rejected(self, controller):
        with pytest.raises(ValueError):
            controller.watch_ad(-3)
        assert controller.state.credits == 25

    def test_select_and_close_preview(self, controller):
        asset = controller.select('aud_301')
        assert asset.title == 'Ambient AI Pad — Dreamscape'
        assert controller.state.selected_id == 'aud_301'
        controller.close_preview()
        assert controller.state.selected_id is None

    def test_notification_expires(self, controller):
        controller.watch_ad(1)
        assert controller.visible_notification().key == 'credit_earned'
        controller.clock = lambda: NOW + 2.0
        assert controller.visible_notification() is None


def test_negative_starting_credits_rejected():
    with pytest.raises(ValueError):
        SessionState.initial(credits=-1)


def test_every_notification_kind_is_posted(state):
    earned = transition(state, CreditsEarned(1), now=NOW)
    rejected = transition(state, RedemptionRequested('vid_001', 49), now=NOW)
    assert {earned.notification.kind, rejected.notification.kind} == set(NotificationKind)
