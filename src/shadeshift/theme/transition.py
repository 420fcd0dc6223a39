# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Two-phase theme transition state machine.

Idle --start()--> Animating. Timer A commits the pending theme, Timer B returns
to Idle. A start() while animating restarts both timers; every start() bumps a
sequence number and timer callbacks from an older sequence do nothing.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from shadeshift.core.constants import COMMIT_DELAY_MS, IDLE_DELAY_MS
from shadeshift.core.models import Theme, TransitionState

logger = logging.getLogger("shadeshift.theme.transition")


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class _QtTimerHandle:
    """Owns one single-shot QTimer until it fires or is cancelled."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        try:
            timer.stop()
            timer.deleteLater()
        except RuntimeError:
            # Already deleted along with its parent
            pass


class QtScheduler:
    """Schedules callbacks on the Qt event loop with timers parented to ``parent``."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> _QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = _QtTimerHandle(timer)

        def _fire() -> None:
            handle.cancel()
            callback()

        timer.timeout.connect(_fire)
        timer.start(delay_ms)
        return handle


class TransitionController(QObject):
    """Drives the commit/idle timing of a theme toggle."""

    transition_started = pyqtSignal(object)   # pending Theme
    transition_finished = pyqtSignal()

    def __init__(
        self,
        state: TransitionState,
        commit: Callable[[Theme], None],
        scheduler: Scheduler | None = None,
        commit_delay_ms: int = COMMIT_DELAY_MS,
        idle_delay_ms: int = IDLE_DELAY_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if not 0 <= commit_delay_ms < idle_delay_ms:
            raise ValueError(
                f"commit delay ({commit_delay_ms} ms) must be shorter than "
                f"idle delay ({idle_delay_ms} ms)"
            )
        self._state = state
        self._commit = commit
        self._scheduler: Scheduler = scheduler if scheduler is not None else QtScheduler(self)
        self._commit_delay_ms = commit_delay_ms
        self._idle_delay_ms = idle_delay_ms
        self._handles: list[TimerHandle] = []
        self._disposed = False

    @property
    def state(self) -> TransitionState:
        return self._state

    @property
    def is_animating(self) -> bool:
        return self._state.animating

    @property
    def disposed(self) -> bool:
        return self._disposed

    def start(self) -> Theme:
        """Begin (or restart) a transition toward the opposite of the committed theme."""
        state = self._state
        if self._disposed:
            logger.debug("Ignoring toggle on a disposed transition controller")
            return state.pending_theme

        if state.animating:
            logger.debug(f"Interrupting transition #{state.sequence}")
        self._cancel_timers()

        state.sequence += 1
        sequence = state.sequence
        state.pending_theme = state.committed_theme.opposite
        state.animating = True

        self._handles = [
            self._scheduler.schedule(self._commit_delay_ms, lambda: self._on_commit_due(sequence)),
            self._scheduler.schedule(self._idle_delay_ms, lambda: self._on_idle_due(sequence)),
        ]
        logger.debug(
            f"Transition #{sequence}: {state.committed_theme.value} -> {state.pending_theme.value}"
        )
        self.transition_started.emit(state.pending_theme)
        return state.pending_theme

    def dispose(self) -> None:
        """Release timers. Later timer callbacks and start() calls are no-ops."""
        if self._disposed:
            return
        self._disposed = True
        self._cancel_timers()
        logger.debug("Transition controller disposed")

    def __enter__(self) -> TransitionController:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def _is_current(self, sequence: int) -> bool:
        return not self._disposed and sequence == self._state.sequence

    def _on_commit_due(self, sequence: int) -> None:
        if not self._is_current(sequence):
            logger.debug(f"Dropping stale commit from transition #{sequence}")
            return
        self._commit(self._state.pending_theme)

    def _on_idle_due(self, sequence: int) -> None:
        if not self._is_current(sequence):
            logger.debug(f"Dropping stale idle from transition #{sequence}")
            return
        state = self._state
        state.animating = False
        state.pending_theme = state.committed_theme
        self._handles = []
        self.transition_finished.emit()

    def _cancel_timers(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles = []
