"""
User settings for the Terminals client.
Stores preferences as JSON in the per-user config directory.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal

from .paths import app_captures_dir, app_config_dir

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


class TerminalSettings(QObject):
    """Manages application settings backed by a JSON file."""

    settings_changed = Signal()

    SETTINGS_FILE = "settings.json"
    ENV_MAPPING = {
        "enable_capture_to_folder": "TERMINALS_CAPTURE_TO_FOLDER",
        "auto_switch_on_capture": "TERMINALS_AUTO_SWITCH",
    }

    def __init__(self, settings_dir: Optional[Path] = None):
        super().__init__()
        self.logger = logging.getLogger(__name__)

        env_override = os.getenv("TERMINALS_SETTINGS_DIR")
        if settings_dir:
            self.settings_dir = settings_dir
        elif env_override:
            self.settings_dir = Path(env_override).expanduser()
        else:
            self.settings_dir = app_config_dir()

        self.settings_dir.mkdir(parents=True, exist_ok=True)
        self.settings_path = self.settings_dir / self.SETTINGS_FILE
        self._settings = self._load_settings()

    def _load_settings(self) -> Dict[str, Any]:
        """Load settings from JSON file."""
        settings = self._get_default_settings()
        if self.settings_path.exists():
            try:
                with open(self.settings_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    settings.update(data)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Error loading settings: {e}")
        return settings

    def _save_settings(self):
        """Save settings to JSON file."""
        try:
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(self._settings, f, indent=2)
            self.settings_changed.emit()
        except OSError as e:
            self.logger.error(f"Error saving settings: {e}")

    def _get_default_settings(self) -> Dict[str, Any]:
        return {
            "version": "1.0",
            "enable_capture_to_folder": True,
            "auto_switch_on_capture": True,
            "enable_capture_to_clipboard": True,
            "capture_root": None,
            "language": None,
            "debug_mode": False,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a setting value and persist it."""
        self._settings[key] = value
        self._save_settings()

    def _flag(self, key: str) -> bool:
        env_name = self.ENV_MAPPING.get(key)
        if env_name:
            from_env = _env_flag(env_name)
            if from_env is not None:
                return from_env
        return bool(self._settings.get(key, False))

    # Capture flags read by the tab controller
    @property
    def enable_capture_to_folder(self) -> bool:
        return self._flag("enable_capture_to_folder")

    @property
    def auto_switch_on_capture(self) -> bool:
        return self._flag("auto_switch_on_capture")

    @property
    def enable_capture_to_clipboard(self) -> bool:
        return self._flag("enable_capture_to_clipboard")

    @property
    def enabled_capture_to_folder_and_clipboard(self) -> bool:
        """True when screen captures go both to the folder and the clipboard."""
        return self.enable_capture_to_folder and self.enable_capture_to_clipboard

    @property
    def capture_root(self) -> Path:
        configured = self._settings.get("capture_root")
        if configured:
            return Path(configured).expanduser()
        return app_captures_dir()

    @property
    def language(self) -> Optional[str]:
        return self._settings.get("language")

    def get_window_geometry(self) -> Optional[bytes]:
        """Get saved window geometry."""
        encoded = self._settings.get("window_geometry")
        if not encoded:
            return None
        return bytes.fromhex(encoded)

    def save_window_geometry(self, geometry: bytes):
        self.set("window_geometry", bytes(geometry).hex())


__all__ = ["TerminalSettings"]
