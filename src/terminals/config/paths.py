"""
Per-user directories for the Terminals client.

Configuration and logs live under a single application root so users can find
(and wipe) everything in one place.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path


APP_FOLDER_NAME = "terminals"


def app_user_root() -> Path:
    """Return the per-user application root, creating it if needed.

    ``TERMINALS_HOME`` overrides the platform default.
    """
    override = os.getenv("TERMINALS_HOME")
    if override:
        root = Path(override).expanduser()
    else:
        home = Path.home()
        if sys.platform.startswith("win"):
            base = Path(os.getenv("APPDATA") or home / "AppData" / "Roaming")
            root = base / APP_FOLDER_NAME
        elif sys.platform == "darwin":
            root = home / "Library" / "Application Support" / APP_FOLDER_NAME
        else:
            base = Path(os.getenv("XDG_CONFIG_HOME") or home / ".config")
            root = base / APP_FOLDER_NAME
    root.mkdir(parents=True, exist_ok=True)
    return root


def app_config_dir() -> Path:
    p = app_user_root() / "config"
    p.mkdir(parents=True, exist_ok=True)
    return p


def app_logs_dir() -> Path:
    p = app_user_root() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p


def app_captures_dir() -> Path:
    """Default folder the capture manager lists."""
    p = app_user_root() / "captures"
    p.mkdir(parents=True, exist_ok=True)
    return p


__all__ = [
    "app_user_root",
    "app_config_dir",
    "app_logs_dir",
    "app_captures_dir",
]
