# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Reflect the committed theme onto the root widget as a dynamic property.

QSS rules select on ``[theme="light"]`` / ``[theme="dark"]``, so widgets never
derive theme logic themselves.
"""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QWidget

from shadeshift.core.constants import ROOT_THEME_PROPERTY
from shadeshift.core.models import Theme

logger = logging.getLogger("shadeshift.ui.root_sync")


class RootThemeSynchronizer:
    """Writes the theme property on a root widget and re-polishes its tree."""

    def __init__(self, root: QWidget, attribute: str = ROOT_THEME_PROPERTY) -> None:
        self._root = root
        self._attribute = attribute

    @property
    def current(self) -> Theme | None:
        return Theme.from_value(self._root.property(self._attribute))

    def apply(self, theme: Theme) -> bool:
        """Set the property. Returns False (no write) if it already holds ``theme``."""
        if self._root.property(self._attribute) == theme.value:
            return False
        self._root.setProperty(self._attribute, theme.value)
        self._repolish()
        logger.debug(f"Root {self._attribute}={theme.value}")
        return True

    def _repolish(self) -> None:
        # Property selectors are only re-evaluated on polish
        for widget in [self._root, *self._root.findChildren(QWidget)]:
            style = widget.style()
            style.unpolish(widget)
            style.polish(widget)
            widget.update()
