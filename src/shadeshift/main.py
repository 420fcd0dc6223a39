# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Entry point for ShadeShift application."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src directory is in the path
src_dir = Path(__file__).resolve().parent.parent
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


def main() -> None:
    """Launch the ShadeShift application."""
    debug = "--debug" in sys.argv
    from shadeshift.app import run_app

    sys.exit(run_app(debug=debug))


if __name__ == "__main__":
    main()
