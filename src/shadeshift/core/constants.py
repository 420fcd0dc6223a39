# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Application constants and metadata."""

import os
import sys
from pathlib import Path

from shadeshift.core.models import Corner

APP_NAME = "ShadeShift"
APP_VERSION = "1.0.0"
APP_AUTHOR = "Nathan Tritle"

# Frozen-mode detection (PyInstaller sets sys.frozen)
IS_FROZEN = getattr(sys, "frozen", False)


def _user_data_dir() -> Path:
    """Return the platform-appropriate user data directory for ShadeShift."""
    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return base / APP_NAME.lower()


def _detect_app_dir() -> Path:
    """Resolve the application root directory (three modes).

    1. Frozen (PyInstaller): user data dir
    2. Dev (git clone): project root where pyproject.toml exists
    3. Pip-installed (fallback): user data dir (same layout as frozen)
    """
    if IS_FROZEN:
        return _user_data_dir()

    candidate = Path(__file__).resolve().parent.parent.parent.parent
    if (candidate / "pyproject.toml").exists() and (candidate / "src" / "shadeshift").is_dir():
        return candidate

    return _user_data_dir()


# Directories (three-mode resolution)
APP_DIR = _detect_app_dir()
CONFIG_DIR = APP_DIR / "config"
DATA_DIR = APP_DIR / "data"

for _d in (CONFIG_DIR, DATA_DIR):
    try:
        _d.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass  # Components will create as needed

# Config and storage files
APP_CONFIG_PATH = CONFIG_DIR / "app_config.json"
PREFERENCES_PATH = DATA_DIR / "preferences.json"

# Theme persistence
THEME_STORAGE_KEY = "theme"
ROOT_THEME_PROPERTY = "theme"

# Transition timing (ms, measured from the toggle call)
COMMIT_DELAY_MS = 200
IDLE_DELAY_MS = 500

# Transition visuals
ANIMATION_CORNER = Corner.BOTTOM_LEFT
REVEAL_START_PCT = 0.0
REVEAL_END_PCT = 150.0
GLOW_SIZE = 500
GLOW_OFFSET = -250
PARTICLE_COUNT = 8
PARTICLE_DISTANCE = 180
PARTICLE_SIZE = 3
PARTICLE_DURATION_MS = 400
PARTICLE_STAGGER_MS = 20

# Window defaults
DEFAULT_WINDOW_WIDTH = 1200
DEFAULT_WINDOW_HEIGHT = 800
TOGGLE_BUTTON_SIZE = 50
