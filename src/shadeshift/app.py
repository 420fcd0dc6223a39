# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""QApplication setup and configuration."""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

from shadeshift.core.config import AppConfig
from shadeshift.core.constants import APP_NAME
from shadeshift.core.storage import PreferenceStorage
from shadeshift.theme.resolver import system_prefers_dark
from shadeshift.theme.store import ThemeStore
from shadeshift.ui.main_window import MainWindow
from shadeshift.utils.error_handler import install_global_exception_handler, setup_logging


def create_app(debug: bool = False) -> tuple[QApplication, MainWindow]:
    """Create and configure the application."""
    setup_logging(debug=debug)
    install_global_exception_handler()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setStyle("Fusion")

    font = QFont("Segoe UI", 10)
    app.setFont(font)

    # The store is resolved after QApplication exists so the OS color scheme is readable
    config = AppConfig()
    storage = PreferenceStorage(enabled=config.persist_theme)
    store = ThemeStore(storage, prefers_dark=system_prefers_dark)

    window = MainWindow(store, config)
    return app, window


def run_app(debug: bool = False) -> int:
    """Create and run the application."""
    app, window = create_app(debug=debug)
    window.show()
    return app.exec()
