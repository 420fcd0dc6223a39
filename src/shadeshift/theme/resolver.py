# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Initial theme resolution: stored preference, then OS color scheme, then dark."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from shadeshift.core.constants import THEME_STORAGE_KEY
from shadeshift.core.models import Theme
from shadeshift.core.storage import PreferenceStorage
from shadeshift.utils.error_handler import StorageError

logger = logging.getLogger("shadeshift.theme.resolver")

DEFAULT_THEME = Theme.DARK

PrefersDark = Callable[[], Optional[bool]]


def system_prefers_dark() -> bool | None:
    """Query the OS color scheme through Qt.

    Returns None when there is no GUI application or the Qt build predates
    QStyleHints.colorScheme (Qt < 6.5).
    """
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QGuiApplication

    if QGuiApplication.instance() is None:
        return None
    hints = QGuiApplication.styleHints()
    color_scheme = getattr(hints, "colorScheme", None)
    if color_scheme is None:
        return None
    return color_scheme() == Qt.ColorScheme.Dark


def read_stored_theme(storage: PreferenceStorage | None) -> Theme | None:
    """Return the persisted theme, or None if absent, invalid or unreadable."""
    if storage is None:
        return None
    try:
        raw = storage.get_item(THEME_STORAGE_KEY)
    except StorageError as e:
        logger.debug(f"Theme storage unavailable: {e}")
        return None
    theme = Theme.from_value(raw)
    if theme is None and raw is not None:
        logger.debug(f"Ignoring invalid stored theme {raw!r}")
    return theme


def _query_environment(prefers_dark: PrefersDark | None) -> bool | None:
    if prefers_dark is None:
        return None
    try:
        return prefers_dark()
    except (RuntimeError, OSError) as e:
        logger.debug(f"Color scheme query failed: {e}")
        return None


def resolve_initial_theme(
    storage: PreferenceStorage | None,
    prefers_dark: PrefersDark | None = system_prefers_dark,
) -> Theme:
    """Compute the starting theme. Never writes storage, never raises on storage faults."""
    stored = read_stored_theme(storage)
    if stored is not None:
        logger.debug(f"Using stored theme: {stored.value}")
        return stored

    signal = _query_environment(prefers_dark)
    if signal is not None:
        theme = Theme.DARK if signal else Theme.LIGHT
        logger.debug(f"Using OS color scheme: {theme.value}")
        return theme

    logger.debug(f"No theme signal available, defaulting to {DEFAULT_THEME.value}")
    return DEFAULT_THEME
