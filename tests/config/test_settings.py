"""Tests for the JSON backed settings and their environment overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from terminals.config.settings import TerminalSettings


def test_defaults_enable_capture(tmp_path: Path, qt_app) -> None:
    settings = TerminalSettings(settings_dir=tmp_path / "cfg")

    assert settings.enable_capture_to_folder is True
    assert settings.auto_switch_on_capture is True
    assert settings.enabled_capture_to_folder_and_clipboard is True
    assert settings.language is None


def test_set_persists_and_notifies(tmp_path: Path, qt_app) -> None:
    settings = TerminalSettings(settings_dir=tmp_path / "cfg")
    notified: list[bool] = []
    settings.settings_changed.connect(lambda: notified.append(True))

    settings.set("enable_capture_to_clipboard", False)

    assert notified == [True]
    stored = json.loads((tmp_path / "cfg" / "settings.json").read_text(encoding="utf-8"))
    assert stored["enable_capture_to_clipboard"] is False
    reloaded = TerminalSettings(settings_dir=tmp_path / "cfg")
    assert reloaded.enabled_capture_to_folder_and_clipboard is False


def test_environment_has_priority(tmp_path: Path, qt_app, monkeypatch: pytest.MonkeyPatch) -> None:
    settings = TerminalSettings(settings_dir=tmp_path / "cfg")
    settings.set("auto_switch_on_capture", True)
    monkeypatch.setenv("TERMINALS_AUTO_SWITCH", "off")
    monkeypatch.setenv("TERMINALS_CAPTURE_TO_FOLDER", "maybe")

    assert settings.auto_switch_on_capture is False
    assert settings.enable_capture_to_folder is True


def test_settings_dir_from_environment(tmp_path: Path, qt_app) -> None:
    settings = TerminalSettings()

    assert settings.settings_dir == tmp_path / "settings"


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path, qt_app) -> None:
    cfg = tmp_path / "cfg"
    cfg.mkdir()
    (cfg / "settings.json").write_text("{not json", encoding="utf-8")

    settings = TerminalSettings(settings_dir=cfg)

    assert settings.enable_capture_to_folder is True


def test_capture_root_defaults_under_app_home(tmp_path: Path, qt_app) -> None:
    settings = TerminalSettings(settings_dir=tmp_path / "cfg")

    assert settings.capture_root == tmp_path / "terminals_home" / "captures"
    assert settings.capture_root.is_dir()


def test_window_geometry_round_trip(tmp_path: Path, qt_app) -> None:
    settings = TerminalSettings(settings_dir=tmp_path / "cfg")
    assert settings.get_window_geometry() is None

    settings.save_window_geometry(b"\x01\x02geometry")

    assert TerminalSettings(settings_dir=tmp_path / "cfg").get_window_geometry() == b"\x01\x02geometry"
