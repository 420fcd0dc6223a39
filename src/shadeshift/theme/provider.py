# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Public theme API for widgets: ``use_theme(widget)`` -> theme + toggle.

A ThemeProvider is installed once on the root widget. Widgets below it look it
up through the parent chain; widgets outside it get a loud error.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtWidgets import QWidget

from shadeshift.core.models import Theme
from shadeshift.theme.store import ThemeStore
from shadeshift.ui.root_sync import RootThemeSynchronizer
from shadeshift.utils.error_handler import ThemeProviderMissingError

logger = logging.getLogger("shadeshift.theme.provider")


class ThemeContext:
    """What consumers may use: the committed theme and a toggle."""

    def __init__(self, store: ThemeStore) -> None:
        self._store = store

    @property
    def theme(self) -> Theme:
        return self._store.theme

    @property
    def theme_changed(self):
        """Bound ``theme_changed(Theme)`` signal, for widgets that redraw on commit."""
        return self._store.theme_changed

    def toggle_theme(self) -> None:
        self._store.toggle()


class ThemeProvider(QObject):
    """Binds a ThemeStore to a root widget for the lifetime of that widget."""

    def __init__(self, root: QWidget, store: ThemeStore) -> None:
        super().__init__(root)
        self.setObjectName("themeProvider")
        self._store = store
        self._context = ThemeContext(store)
        self._synchronizer = RootThemeSynchronizer(root)

        store.theme_changed.connect(self._synchronizer.apply)
        self._synchronizer.apply(store.theme)
        # Timers must not outlive the widget tree they would restyle
        root.destroyed.connect(lambda *_: store.dispose())

    @classmethod
    def install(cls, root: QWidget, store: ThemeStore) -> ThemeProvider:
        existing = find_provider(root)
        if existing is not None and existing.parent() is root:
            raise RuntimeError("A ThemeProvider is already installed on this widget")
        provider = cls(root, store)
        logger.debug(f"ThemeProvider installed on {type(root).__name__}")
        return provider

    @property
    def store(self) -> ThemeStore:
        return self._store

    @property
    def context(self) -> ThemeContext:
        return self._context

    @property
    def synchronizer(self) -> RootThemeSynchronizer:
        return self._synchronizer


def find_provider(widget: QObject | None) -> ThemeProvider | None:
    """Nearest ThemeProvider installed on ``widget`` or one of its ancestors."""
    node = widget
    while node is not None:
        provider = node.findChild(
            ThemeProvider, "themeProvider", Qt.FindChildOption.FindDirectChildrenOnly,
        )
        if provider is not None:
            return provider
        node = node.parent()
    return None


def use_theme(widget: QObject) -> ThemeContext:
    """Return the theme context for ``widget``.

    Raises ThemeProviderMissingError if the widget is not inside a provider's
    tree: that is a wiring mistake, not something to default around.
    """
    provider = find_provider(widget)
    if provider is None:
        raise ThemeProviderMissingError(
            f"use_theme() called on {type(widget).__name__} outside a ThemeProvider"
        )
    return provider.context
