"""Helpers for locating the engine binary shipped next to the app."""

from __future__ import annotations

import os
import sys
from pathlib import Path

ENGINE_ENV_VAR = "PIKAQI_ENGINE"

_PACKAGE_ENGINE_DIR = Path(__file__).resolve().parent / "engine_bin"
_REPO_ENGINE_DIR = Path(__file__).resolve().parents[2] / "engine"


def engine_binary_name() -> str:
    """File name of the bundled Pikafish build for this platform."""
    return "pikafish.exe" if sys.platform.startswith("win") else "pikafish"


def engine_dir() -> Path:
    """Return the directory holding the bundled engine."""
    if _PACKAGE_ENGINE_DIR.is_dir():
        return _PACKAGE_ENGINE_DIR
    return _REPO_ENGINE_DIR


def resolve_engine_path(configured: str | None = None) -> Path:
    """Pick the engine binary: explicit setting, then env var, then bundled."""
    if configured:
        return Path(configured).expanduser()
    from_env = os.environ.get(ENGINE_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return engine_dir() / engine_binary_name()
