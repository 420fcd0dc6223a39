# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Navbar button that flips between light and dark."""

from __future__ import annotations

from PyQt6.QtCore import QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGraphicsOpacityEffect, QToolButton, QWidget

from shadeshift.core.constants import TOGGLE_BUTTON_SIZE
from shadeshift.core.models import Theme
from shadeshift.theme.provider import use_theme
from shadeshift.utils.error_handler import safe_slot

MOON = "☾"
SUN = "☀"


class ThemeToggle(QToolButton):
    """Shows a moon in dark mode and a sun in light mode.

    Must be created with a parent that is already inside a ThemeProvider.
    """

    def __init__(self, parent: QWidget, size: int = TOGGLE_BUTTON_SIZE, animation_ms: int = 400) -> None:
        super().__init__(parent)
        self._context = use_theme(parent)
        self.setObjectName("themeToggle")
        self.setAccessibleName("Toggle theme")
        self.setToolTip("Toggle theme")
        self.setFixedSize(size, size)
        font = QFont()
        font.setPixelSize(int(size * 0.6))
        self.setFont(font)

        # Icon fade-in on change
        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(1.0)
        self.setGraphicsEffect(self._opacity)
        self._fade = QVariantAnimation(self)
        self._fade.setDuration(animation_ms)
        self._fade.setStartValue(0.0)
        self._fade.setEndValue(1.0)
        self._fade.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._fade.valueChanged.connect(self._opacity.setOpacity)

        self.clicked.connect(self._on_clicked)
        self._context.theme_changed.connect(self._on_theme_changed)
        self._show_icon(self._context.theme)

    def icon_text(self) -> str:
        return self.text()

    def _show_icon(self, theme: Theme) -> None:
        self.setText(MOON if theme is Theme.DARK else SUN)

    @safe_slot
    def _on_clicked(self, checked: bool = False) -> None:
        self._context.toggle_theme()

    def _on_theme_changed(self, theme: Theme) -> None:
        self._show_icon(theme)
        self._fade.start()
