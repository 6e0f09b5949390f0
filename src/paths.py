"""
paths.py – central paths for Aurora Weather.

The idea is that you can always write:
    from src.paths import ASSETS, LOGS, root_path, asset_path

…and get the right path regardless of whether the app is started from the
project root (streamlit run main.py) or from somewhere else.
"""

from __future__ import annotations
from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

# src/paths.py -> src -> project root
ROOT_DIR = _THIS_FILE.parent.parent

ASSETS = ROOT_DIR / "assets"
LOGS = ROOT_DIR / "logs"


def root_path(*parts: str) -> Path:
    """Return a path relative to the project root."""
    return ROOT_DIR.joinpath(*parts)


def asset_path(*parts: str) -> Path:
    """Return a path inside the assets folder."""
    return ASSETS.joinpath(*parts)


def ensure_dirs() -> None:
    """Make sure the runtime directories (logs/) exist."""
    LOGS.mkdir(parents=True, exist_ok=True)
