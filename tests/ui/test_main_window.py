"""Integration tests for the main window and its tab strip."""

from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtWidgets import QLabel

from terminals.config.settings import TerminalSettings
from terminals.core.connections import CaptureManagerConnection, Connection
from terminals.core.favorites import Favorite
from terminals.core.tabs import TabRole
from terminals.main_window import MainWindow


class _EchoConnection(Connection):
    def _create_view(self) -> QLabel:
        return QLabel("echo")

    def connect(self) -> None:
        self._connected = True


@pytest.fixture
def window(tmp_path: Path, qt_app) -> MainWindow:
    settings = TerminalSettings(settings_dir=tmp_path / "cfg")
    settings.set("capture_root", str(tmp_path / "captures"))
    main_window = MainWindow(settings=settings)
    yield main_window
    main_window.close()


def test_open_connection_adds_selected_tab(window: MainWindow) -> None:
    connection = _EchoConnection()

    tab = window.open_connection(connection, Favorite(name="router"))

    assert window.controller.selected is tab
    assert connection.connected
    assert connection.tab is tab
    assert window.tab_strip.count() == 1
    assert window.tab_strip.tabText(0) == "router"
    assert window.detach_action.isEnabled()
    assert window.windowTitle() == "Terminals - router"


def test_strip_follows_title_and_selection(window: MainWindow) -> None:
    first = window.open_connection(_EchoConnection(), Favorite(name="one"))
    second = window.open_connection(_EchoConnection(), Favorite(name="two"))
    assert window.tab_strip.currentIndex() == 1

    window.tab_strip.setCurrentIndex(0)
    assert window.controller.selected is first

    second.title = "renamed"
    assert window.tab_strip.tabText(1) == "renamed"


def test_double_click_detaches_tab(window: MainWindow) -> None:
    tab = window.open_connection(_EchoConnection(), Favorite(name="router"))

    window.tab_strip.tabBarDoubleClicked.emit(0)

    assert tab not in window.container
    assert len(window.controller.detached_windows) == 1
    assert window.tab_strip.count() == 0
    assert not window.detach_action.isEnabled()


def test_close_tab_tears_down_session(window: MainWindow) -> None:
    connection = _EchoConnection()
    tab = window.open_connection(connection)
    assert connection.view is not None

    window.close_tab(tab)

    assert tab.is_disposed
    assert not connection.connected
    assert connection.has_view is False
    assert len(window.container) == 0
    assert window.windowTitle() == "Terminals"


def test_capture_manager_lists_captured_files(window: MainWindow, tmp_path: Path) -> None:
    captures = tmp_path / "captures"
    captures.mkdir()
    (captures / "shot.png").write_bytes(b"png")

    window.capture_manager_action.trigger()
    window.capture_manager_action.trigger()

    tabs = [tab for tab in window.container if tab.role is TabRole.CAPTURE_MANAGER]
    assert len(tabs) == 1
    connection = tabs[0].connection
    assert isinstance(connection, CaptureManagerConnection)
    assert connection.view.count() == 1
    assert connection.view.item(0).text() == "shot.png"
    assert window.tab_strip.count() == 1


def test_close_releases_popups_and_dispatcher(window: MainWindow) -> None:
    tab = window.open_connection(_EchoConnection(), Favorite(name="router"))
    popup = window.controller.detach_to_new_window(tab)

    window.close()

    assert window.controller.detached_windows == ()
    assert window.dispatcher.subscriber_count == 0
    assert not popup.isVisible()
