# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Persistent key-value preference storage backed by a JSON file.

Values are plain strings. Every failure surfaces as StorageError so callers
can decide whether to suppress it; a corrupt file reads as empty.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from shadeshift.core.constants import PREFERENCES_PATH
from shadeshift.utils.error_handler import StorageError

logger = logging.getLogger("shadeshift.storage")


class PreferenceStorage:
    """String key-value store persisted to ``path``."""

    def __init__(self, path: Path | None = None, enabled: bool = True) -> None:
        self._path = Path(path) if path is not None else PREFERENCES_PATH
        self._enabled = enabled

    @property
    def path(self) -> Path:
        return self._path

    @property
    def enabled(self) -> bool:
        return self._enabled

    def get_item(self, key: str) -> str | None:
        """Return the stored string for ``key``, or None when absent."""
        value = self._read().get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = str(value)
        self._write(data)

    def _check_enabled(self) -> None:
        if not self._enabled:
            raise StorageError("Preference storage is disabled")

    def _read(self) -> dict[str, Any]:
        self._check_enabled()
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Corrupt preference file {self._path}: {e}, treating as empty")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self._check_enabled()
        tmp = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            tmp.replace(self._path)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e
        finally:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass
