# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Error types, logging setup, and guards for Qt callbacks.

Storage faults are expected and stay inside the theme engine as StorageError.
Anything else that escapes a Qt callback is logged here and, for user-driven
actions, reported in a dialog.
"""

from __future__ import annotations

import functools
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from types import TracebackType
from typing import Any, Callable, TypeVar

from shadeshift.core.constants import APP_NAME, DATA_DIR

F = TypeVar("F", bound=Callable[..., Any])

LOG_FILE_NAME = "shadeshift.log"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ShadeShiftError(Exception):
    """Base exception for ShadeShift."""


class StorageError(ShadeShiftError):
    """Persistent preference storage is unavailable or failed."""


class ThemeProviderMissingError(ShadeShiftError):
    """Theme accessor used on a widget that is not under a ThemeProvider."""


def setup_logging(debug: bool = False, log_dir: Path | None = None) -> logging.Logger:
    """Configure the ``shadeshift`` logger with console and rotating file output.

    The log file lives in ``log_dir`` (the data directory by default). If that
    directory cannot be created the logger runs console-only.
    """
    logger = logging.getLogger("shadeshift")
    if logger.handlers:
        return logger

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(console)

    target = Path(log_dir) if log_dir is not None else DATA_DIR
    try:
        target.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            target / LOG_FILE_NAME, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8",
        )
    except OSError as e:
        logger.warning(f"File logging disabled, cannot open {target}: {e}")
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def report_error(title: str, message: str, details: str = "", parent: Any = None) -> bool:
    """Show an error dialog. Returns False when no dialog could be shown."""
    try:
        from PyQt6.QtWidgets import QApplication, QMessageBox, QWidget
        if QApplication.instance() is None:
            return False
        dialog = QMessageBox(parent if isinstance(parent, QWidget) else None)
        dialog.setIcon(QMessageBox.Icon.Critical)
        dialog.setWindowTitle(title)
        dialog.setText(message)
        if details:
            dialog.setDetailedText(details)
        dialog.exec()
    except Exception:
        logging.getLogger("shadeshift").debug("Error dialog unavailable", exc_info=True)
        return False
    return True


def install_global_exception_handler() -> None:
    """Route unhandled exceptions to the log and an error dialog.

    PyQt6 aborts the process when a slot raises; a transition timer callback
    that fails would otherwise close the window with no trace.
    """
    logger = logging.getLogger("shadeshift")

    def _handle_exception(
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_tb: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return

        logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_tb))
        details = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
        if not report_error(f"{APP_NAME}: Unexpected Error", f"{exc_type.__name__}: {exc_value}", details):
            sys.stderr.write(details)

    sys.excepthook = _handle_exception


def safe_slot(func: F | None = None, *, notify: bool = True) -> Any:
    """Guard a widget method called by Qt so an exception is logged, not fatal.

    ``notify=False`` only logs. Use it for paint and animation-tick handlers,
    where opening a modal dialog would re-enter the event loop mid-frame.
    """
    def decorate(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return fn(self, *args, **kwargs)
            except Exception as exc:
                logging.getLogger("shadeshift.ui").exception(
                    "Error in %s.%s", type(self).__name__, fn.__name__,
                )
                if notify:
                    report_error(
                        "Error",
                        f"An error occurred in {fn.__name__}:\n\n{type(exc).__name__}: {exc}",
                        parent=self,
                    )
                return None
        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorate(func)
    return decorate
