# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""JSON configuration loading and saving."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from shadeshift.core.constants import (
    APP_CONFIG_PATH,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)

logger = logging.getLogger("shadeshift.config")


def _safe_int(value: Any, default: int) -> int:
    """Convert value to int, returning default on failure."""
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def _load_json(path: Path) -> dict[str, Any]:
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return data
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.error(f"Corrupt config file {path}: {e}, using defaults")
    return {}


def _save_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    try:
        tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp.replace(path)
    except OSError:
        try:
            path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError:
            logger.warning(f"Could not save config file {path}")
    finally:
        tmp.unlink(missing_ok=True)


class AppConfig:
    """Application-level configuration.

    The theme itself is not stored here; it lives in PreferenceStorage so the
    theme engine owns its persistence.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else APP_CONFIG_PATH
        self._data: dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        self._data = _load_json(self._path)

    def save(self) -> None:
        _save_json(self._path, self._data)

    @property
    def window_width(self) -> int:
        val = _safe_int(self._data.get("window_width", DEFAULT_WINDOW_WIDTH), DEFAULT_WINDOW_WIDTH)
        return max(320, val)

    @window_width.setter
    def window_width(self, value: int) -> None:
        self._data["window_width"] = value

    @property
    def window_height(self) -> int:
        val = _safe_int(self._data.get("window_height", DEFAULT_WINDOW_HEIGHT), DEFAULT_WINDOW_HEIGHT)
        return max(240, val)

    @window_height.setter
    def window_height(self, value: int) -> None:
        self._data["window_height"] = value

    @property
    def window_x(self) -> int | None:
        return self._data.get("window_x")

    @window_x.setter
    def window_x(self, value: int) -> None:
        self._data["window_x"] = value

    @property
    def window_y(self) -> int | None:
        return self._data.get("window_y")

    @window_y.setter
    def window_y(self, value: int) -> None:
        self._data["window_y"] = value

    @property
    def window_maximized(self) -> bool:
        return bool(self._data.get("window_maximized", False))

    @window_maximized.setter
    def window_maximized(self, value: bool) -> None:
        self._data["window_maximized"] = value

    @property
    def persist_theme(self) -> bool:
        """When False, the theme is never read from or written to storage."""
        return bool(self._data.get("persist_theme", True))

    @persist_theme.setter
    def persist_theme(self, value: bool) -> None:
        self._data["persist_theme"] = value
