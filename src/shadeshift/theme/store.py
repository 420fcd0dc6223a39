# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Theme state ownership: the committed theme, toggling, and persistence.

Emits ``theme_changed`` once per commit so the root synchronizer and any
widget can react without polling.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from shadeshift.core.constants import (
    ANIMATION_CORNER,
    COMMIT_DELAY_MS,
    IDLE_DELAY_MS,
    THEME_STORAGE_KEY,
)
from shadeshift.core.models import ColorTokens, Corner, GeometrySpec, Theme, TransitionState
from shadeshift.core.storage import PreferenceStorage
from shadeshift.theme.geometry import lookup
from shadeshift.theme.resolver import PrefersDark, resolve_initial_theme, system_prefers_dark
from shadeshift.theme.transition import Scheduler, TransitionController
from shadeshift.ui.theme_registry import color_tokens
from shadeshift.utils.error_handler import StorageError

logger = logging.getLogger("shadeshift.theme.store")


class ThemeStore(QObject):
    """Single source of truth for the active theme."""

    theme_changed = pyqtSignal(object)   # committed Theme

    def __init__(
        self,
        storage: PreferenceStorage | None = None,
        prefers_dark: PrefersDark | None = system_prefers_dark,
        scheduler: Scheduler | None = None,
        corner: Corner = ANIMATION_CORNER,
        commit_delay_ms: int = COMMIT_DELAY_MS,
        idle_delay_ms: int = IDLE_DELAY_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._storage = storage
        self._corner = corner
        self._state = TransitionState.idle(resolve_initial_theme(storage, prefers_dark))
        self._transition = TransitionController(
            self._state,
            self._commit,
            scheduler=scheduler,
            commit_delay_ms=commit_delay_ms,
            idle_delay_ms=idle_delay_ms,
            parent=self,
        )
        logger.info(f"Initial theme: {self._state.committed_theme.value}")

    # --- Properties ---

    @property
    def theme(self) -> Theme:
        return self._state.committed_theme

    @property
    def pending_theme(self) -> Theme:
        return self._state.pending_theme

    @property
    def is_animating(self) -> bool:
        return self._state.animating

    @property
    def state(self) -> TransitionState:
        return self._state

    @property
    def transition(self) -> TransitionController:
        return self._transition

    @property
    def corner(self) -> Corner:
        return self._corner

    @property
    def colors(self) -> ColorTokens:
        """Overlay colors for the theme being transitioned to."""
        return color_tokens(self._state.pending_theme)

    @property
    def geometry(self) -> GeometrySpec:
        return lookup(self._corner)

    # --- Operations ---

    def toggle(self) -> None:
        """Flip the theme. The commit happens later, on the transition's first timer."""
        target = self._transition.start()
        logger.info(f"Theme toggle requested -> {target.value}")

    def dispose(self) -> None:
        self._transition.dispose()

    def _commit(self, theme: Theme) -> None:
        self._persist(theme)
        self._state.committed_theme = theme
        logger.info(f"Theme committed: {theme.value}")
        self.theme_changed.emit(theme)

    def _persist(self, theme: Theme) -> None:
        if self._storage is None:
            return
        try:
            self._storage.set_item(THEME_STORAGE_KEY, theme.value)
        except StorageError as e:
            logger.warning(f"Could not persist theme '{theme.value}': {e}")
