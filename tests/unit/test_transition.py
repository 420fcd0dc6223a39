"""Tests for the transition state machine.

Most tests drive the controller with the manual-clock scheduler from conftest so
timing boundaries are exact; one class runs the real QTimer path under qtbot.
"""

from __future__ import annotations

import pytest

from shadeshift.core.constants import COMMIT_DELAY_MS, IDLE_DELAY_MS
from shadeshift.core.models import Theme, TransitionState
from shadeshift.theme.transition import QtScheduler, TransitionController


@pytest.fixture
def state():
    return TransitionState.idle(Theme.DARK)


@pytest.fixture
def commits(state):
    """Records commits and applies them to the shared state like the store does."""
    calls: list[Theme] = []

    def _commit(theme: Theme) -> None:
        calls.append(theme)
        state.committed_theme = theme

    _commit.calls = calls
    return _commit


@pytest.fixture
def controller(state, commits, scheduler):
    ctrl = TransitionController(state, commits, scheduler=scheduler)
    yield ctrl
    ctrl.dispose()


class TestConstruction:
    def test_commit_must_precede_idle(self, state, commits, scheduler):
        with pytest.raises(ValueError):
            TransitionController(state, commits, scheduler=scheduler, commit_delay_ms=500, idle_delay_ms=500)

    def test_starts_idle(self, controller):
        assert controller.is_animating is False


class TestSingleToggle:
    def test_start_sets_pending_and_animating(self, controller, state):
        target = controller.start()
        assert target is Theme.LIGHT
        assert state.pending_theme is Theme.LIGHT
        assert state.animating is True
        assert state.committed_theme is Theme.DARK

    def test_no_commit_before_timer_a(self, controller, state, commits, scheduler):
        controller.start()
        scheduler.advance(COMMIT_DELAY_MS - 1)
        assert state.committed_theme is Theme.DARK
        assert commits.calls == []

    def test_commit_at_timer_a(self, controller, state, commits, scheduler):
        controller.start()
        scheduler.advance(COMMIT_DELAY_MS)
        assert commits.calls == [Theme.LIGHT]
        assert state.committed_theme is Theme.LIGHT
        assert state.animating is True

    def test_stable_between_a_and_b(self, controller, state, commits, scheduler):
        controller.start()
        scheduler.advance(IDLE_DELAY_MS - 1)
        assert commits.calls == [Theme.LIGHT]
        assert state.animating is True

    def test_idle_after_timer_b(self, controller, state, scheduler):
        controller.start()
        scheduler.advance(IDLE_DELAY_MS)
        assert state.animating is False
        assert state.pending_theme == state.committed_theme == Theme.LIGHT

    def test_signals(self, controller, scheduler, qtbot):
        with qtbot.waitSignal(controller.transition_started) as started:
            controller.start()
        assert started.args == [Theme.LIGHT]
        with qtbot.waitSignal(controller.transition_finished, timeout=100):
            scheduler.advance(IDLE_DELAY_MS)

    def test_two_completed_toggles_round_trip(self, controller, state, scheduler):
        controller.start()
        scheduler.advance(IDLE_DELAY_MS)
        controller.start()
        scheduler.advance(IDLE_DELAY_MS)
        assert state.committed_theme is Theme.DARK
        assert state.animating is False

    def test_sequence_increments(self, controller, state):
        controller.start()
        controller.start()
        assert state.sequence == 2


class TestReentrantToggle:
    def test_second_toggle_inside_commit_delay(self, controller, state, commits, scheduler):
        controller.start()
        scheduler.advance(50)
        controller.start()

        # First call's Timer A would be due now; it must not commit
        scheduler.advance(COMMIT_DELAY_MS - 50)
        assert commits.calls == []

        scheduler.advance(49)
        assert commits.calls == []
        scheduler.advance(1)
        assert commits.calls == [Theme.LIGHT]

        scheduler.advance(IDLE_DELAY_MS)
        assert commits.calls == [Theme.LIGHT]
        assert state.committed_theme is Theme.LIGHT
        assert state.animating is False

    def test_idle_deferred_to_latest_call(self, controller, state, scheduler):
        controller.start()
        scheduler.advance(300)
        controller.start()
        scheduler.advance(IDLE_DELAY_MS - 300)
        assert state.animating is True
        scheduler.advance(300)
        assert state.animating is False

    def test_toggle_after_commit_flips_back(self, controller, state, commits, scheduler):
        controller.start()
        scheduler.advance(COMMIT_DELAY_MS)
        controller.start()
        assert state.pending_theme is Theme.DARK
        scheduler.advance(IDLE_DELAY_MS)
        assert commits.calls == [Theme.LIGHT, Theme.DARK]
        assert state.pending_theme == state.committed_theme == Theme.DARK

    def test_old_timers_are_cancelled(self, controller, scheduler):
        controller.start()
        controller.start()
        assert scheduler.pending_count == 2


class TestDisposal:
    def test_dispose_mid_transition_freezes_state(self, controller, state, commits, scheduler):
        controller.start()
        controller.dispose()
        scheduler.advance(IDLE_DELAY_MS)
        assert commits.calls == []
        assert state.committed_theme is Theme.DARK
        assert scheduler.pending_count == 0

    def test_start_after_dispose_is_noop(self, controller, state, scheduler):
        controller.dispose()
        controller.start()
        assert state.animating is False
        assert scheduler.pending_count == 0

    def test_dispose_twice(self, controller):
        controller.dispose()
        controller.dispose()
        assert controller.disposed

    def test_context_manager_disposes(self, state, commits, scheduler):
        with TransitionController(state, commits, scheduler=scheduler) as ctrl:
            ctrl.start()
        scheduler.advance(IDLE_DELAY_MS)
        assert commits.calls == []
        assert ctrl.disposed


class TestQtScheduler:
    def test_real_timers_commit_then_idle(self, qtbot, state, commits):
        ctrl = TransitionController(state, commits, commit_delay_ms=20, idle_delay_ms=60)
        ctrl.start()
        assert state.committed_theme is Theme.DARK
        qtbot.waitUntil(lambda: commits.calls == [Theme.LIGHT], timeout=2000)
        qtbot.waitUntil(lambda: not state.animating, timeout=2000)
        assert state.pending_theme is Theme.LIGHT
        ctrl.dispose()

    def test_cancelled_handle_never_fires(self, qtbot):
        fired = []
        handle = QtScheduler().schedule(10, lambda: fired.append(1))
        handle.cancel()
        qtbot.wait(50)
        assert fired == []
        assert not handle.active

    def test_handle_released_after_firing(self, qtbot):
        fired = []
        handle = QtScheduler().schedule(5, lambda: fired.append(1))
        qtbot.waitUntil(lambda: fired == [1], timeout=1000)
        assert not handle.active
        handle.cancel()
