"""Main application window: navbar, content cards, status bar, theme overlay."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QButtonGroup, QFrame, QGridLayout, QLabel, QMainWindow, QScrollArea,
    QSizePolicy, QStatusBar, QToolBar, QToolButton, QVBoxLayout, QWidget,
)

from shadeshift.core.config import AppConfig
from shadeshift.core.constants import APP_NAME, APP_VERSION
from shadeshift.core.models import Theme
from shadeshift.theme.provider import ThemeProvider, use_theme
from shadeshift.theme.store import ThemeStore
from shadeshift.ui.styles import get_stylesheet
from shadeshift.ui.theme_toggle import ThemeToggle
from shadeshift.ui.transition_overlay import TransitionOverlay
from shadeshift.utils.error_handler import safe_slot

logger = logging.getLogger("shadeshift.ui")

WELCOME_CARDS = [
    ("Articles", "Long-form writing, grouped by category."),
    ("Quotes", "Short lines worth keeping around."),
    ("Photography", "Selected frames from recent walks."),
    ("Contact", "Ways to get in touch."),
]


class ContentCard(QFrame):
    """A titled card styled entirely through the root theme property."""

    def __init__(self, title: str, body: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 14, 16, 14)
        title_label = QLabel(title)
        title_label.setObjectName("cardTitle")
        body_label = QLabel(body)
        body_label.setObjectName("cardBody")
        body_label.setWordWrap(True)
        layout.addWidget(title_label)
        layout.addWidget(body_label)
        layout.addStretch()


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, store: ThemeStore, app_config: AppConfig | None = None) -> None:
        super().__init__()
        self._store = store
        self._app_config = app_config if app_config is not None else AppConfig()

        self.setStyleSheet(get_stylesheet())
        self._provider = ThemeProvider.install(self, store)

        self._setup_ui()
        self._connect_signals()
        self._restore_state()

    @property
    def provider(self) -> ThemeProvider:
        return self._provider

    @property
    def theme_toggle(self) -> ThemeToggle:
        return self._toggle

    @property
    def nav_links(self) -> list[QToolButton]:
        return list(self._nav_group.buttons())

    @property
    def overlay(self) -> TransitionOverlay:
        return self._overlay

    def _setup_ui(self) -> None:
        """Build the main UI layout."""
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")

        # Navbar
        navbar = QToolBar("Navigation", self)
        navbar.setObjectName("navbar")
        navbar.setMovable(False)
        self.addToolBar(navbar)

        title = QLabel(APP_NAME)
        title.setObjectName("siteTitle")
        navbar.addWidget(title)

        self._nav_group = QButtonGroup(self)
        self._nav_group.setExclusive(True)
        for name, _ in WELCOME_CARDS:
            link = QToolButton()
            link.setObjectName("navLink")
            link.setText(name)
            link.setCheckable(True)
            self._nav_group.addButton(link)
            navbar.addWidget(link)
        self._nav_group.buttons()[0].setChecked(True)
        self._nav_group.buttonClicked.connect(self._on_nav_clicked)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        navbar.addWidget(spacer)

        self._toggle = ThemeToggle(navbar)
        navbar.addWidget(self._toggle)

        # Content
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        content.setObjectName("contentArea")
        grid = QGridLayout(content)
        grid.setContentsMargins(24, 24, 24, 24)
        grid.setSpacing(16)
        for i, (card_title, body) in enumerate(WELCOME_CARDS):
            grid.addWidget(ContentCard(card_title, body), i // 2, i % 2)
        grid.setRowStretch(grid.rowCount(), 1)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

        # Status bar
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_theme = QLabel("")
        self._status_bar.addPermanentWidget(self._status_theme)

        # Overlay last so it stacks above everything
        self._overlay = TransitionOverlay(self, self._store)

    def _connect_signals(self) -> None:
        context = use_theme(self)
        context.theme_changed.connect(self._on_theme_changed)
        self._store.transition.transition_started.connect(self._on_transition_started)
        self._on_theme_changed(context.theme)

    def _restore_state(self) -> None:
        """Restore window geometry."""
        cfg = self._app_config
        if cfg.window_x is not None and cfg.window_y is not None:
            self.move(cfg.window_x, cfg.window_y)
        self.resize(cfg.window_width, cfg.window_height)
        if cfg.window_maximized:
            self.showMaximized()

    @safe_slot
    def _save_state(self) -> None:
        """Save window geometry."""
        cfg = self._app_config
        if not self.isMaximized():
            geo = self.geometry()
            cfg.window_x = geo.x()
            cfg.window_y = geo.y()
            cfg.window_width = geo.width()
            cfg.window_height = geo.height()
        cfg.window_maximized = self.isMaximized()
        cfg.save()

    def status_text(self) -> str:
        return self._status_theme.text()

    def _on_theme_changed(self, theme: Theme) -> None:
        self._status_theme.setText(f"Theme: {theme.value}")

    def _on_nav_clicked(self, link: QToolButton) -> None:
        self._status_bar.showMessage(link.text(), 2000)

    def _on_transition_started(self, theme: Theme) -> None:
        self._status_bar.showMessage(f"Switching to {theme.value}…", 500)

    # --- Lifecycle ---

    def closeEvent(self, event: QCloseEvent) -> None:
        """Save state on close."""
        self._save_state()
        super().closeEvent(event)
