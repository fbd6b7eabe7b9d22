"""Tests for the detached popup window."""

from __future__ import annotations

from terminals.core.favorites import Favorite
from terminals.core.resources import Resources
from terminals.core.tabs import TerminalTab
from terminals.ui.popup_window import PopupTerminal


def _popup_with(tab: TerminalTab) -> PopupTerminal:
    window = PopupTerminal(resources=Resources("en"))
    window.add_terminal(tab)
    window.show()
    return window


def test_add_terminal_takes_tab_title(qt_app) -> None:
    favorite = Favorite(name="db-01")
    tab = TerminalTab("db-01", favorite=favorite)

    window = _popup_with(tab)

    assert window.terminal is tab
    assert window.favorite is favorite
    assert window.owns(tab)
    assert window.windowTitle() == "db-01"
    window.close()


def test_update_title_uses_newer_favorite(qt_app) -> None:
    favorite = Favorite(name="old")
    tab = TerminalTab("old", favorite=favorite)
    window = _popup_with(tab)

    window.update_title(Favorite(name="new", id=favorite.id))

    assert tab.title == "new"
    assert window.windowTitle() == "new"
    window.close()


def test_release_closes_empty_window(qt_app) -> None:
    tab = TerminalTab("moving")
    window = _popup_with(tab)
    closed: list[PopupTerminal] = []
    window.closed.connect(closed.append)

    window.release_terminal(tab)

    assert closed == [window]
    assert window.terminal is None
    assert not window.isVisible()
    assert not tab.is_disposed


def test_attach_and_capture_requests_carry_the_tab(qt_app) -> None:
    tab = TerminalTab("server")
    window = _popup_with(tab)
    attach: list[TerminalTab] = []
    capture: list[TerminalTab] = []
    window.attach_requested.connect(attach.append)
    window.capture_requested.connect(capture.append)

    window.attach_action.trigger()
    window.capture_action.trigger()

    assert attach == [tab]
    assert capture == [tab]
    assert window.owns(tab)
    window.close()


def test_disabled_capture_button(qt_app) -> None:
    window = _popup_with(TerminalTab("server"))

    window.update_capture_button_enabled(False)

    assert window.capture_button_enabled is False
    window.close()
