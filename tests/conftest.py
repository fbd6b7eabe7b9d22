"""Shared pytest configuration for the tab host tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_user_dirs(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests from writing into the user's real config directory."""

    home = tmp_path / "terminals_home"
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()
    monkeypatch.setenv("TERMINALS_HOME", str(home))
    monkeypatch.setenv("TERMINALS_SETTINGS_DIR", str(settings_dir))
    monkeypatch.delenv("TERMINALS_CAPTURE_TO_FOLDER", raising=False)
    monkeypatch.delenv("TERMINALS_AUTO_SWITCH", raising=False)
    yield


@pytest.fixture(scope="module")
def qt_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
