"""Standalone window hosting a single detached terminal tab."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from terminals.core.favorites import Favorite
from terminals.core.resources import Resources
from terminals.core.tab_container import TabContainer
from terminals.core.tabs import TerminalTab


class PopupTerminal(QMainWindow):
    """Detached window holding exactly one terminal tab.

    The window never moves its tab on its own; it raises ``attach_requested``
    and lets whoever listens dock the tab back.
    """

    attach_requested = Signal(object)  # TerminalTab
    capture_requested = Signal(object)  # TerminalTab
    closed = Signal(object)  # PopupTerminal

    def __init__(self, parent: QWidget | None = None, *, resources: Optional[Resources] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(__name__)
        self._resources = resources or Resources()
        self._container = TabContainer(self)
        self._placeholder: Optional[QLabel] = None

        self.resize(800, 600)
        self._build_ui()

    def _build_ui(self) -> None:
        toolbar = self.addToolBar("Terminal")
        toolbar.setObjectName("popupToolbar")

        self.attach_action = QAction(self._resources.get_string("AttachTab"), self)
        self.attach_action.triggered.connect(self._request_attach)
        toolbar.addAction(self.attach_action)

        self.capture_action = QAction("Capture", self)
        self.capture_action.triggered.connect(self._request_capture)
        toolbar.addAction(self.capture_action)

        central = QWidget(self)
        self._layout = QVBoxLayout(central)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(central)

    # ------------------------------------------------------------------
    # Tab ownership
    # ------------------------------------------------------------------
    @property
    def container(self) -> TabContainer:
        return self._container

    @property
    def terminal(self) -> Optional[TerminalTab]:
        return self._container.selected

    @property
    def favorite(self) -> Optional[Favorite]:
        tab = self.terminal
        return tab.favorite if tab is not None else None

    def owns(self, tab: TerminalTab) -> bool:
        return tab in self._container

    def add_terminal(self, tab: TerminalTab) -> None:
        self._container.append(tab)
        self._container.selected = tab
        self._layout.addWidget(self._page_for(tab))
        tab.title_changed.connect(self.setWindowTitle)
        self.setWindowTitle(tab.title)

    def release_terminal(self, tab: TerminalTab) -> None:
        """Give ``tab`` up. A window left without a tab closes itself."""
        self._container.remove(tab)
        tab.title_changed.disconnect(self.setWindowTitle)
        page = self._page_for(tab)
        self._layout.removeWidget(page)
        page.setParent(None)
        if self._placeholder is not None:
            self._placeholder.deleteLater()
            self._placeholder = None
        if not len(self._container):
            self.close()

    def _page_for(self, tab: TerminalTab) -> QWidget:
        if tab.connection is not None:
            return tab.connection.view
        if self._placeholder is None:
            self._placeholder = QLabel(tab.title, self)
        return self._placeholder

    # ------------------------------------------------------------------
    # Chrome
    # ------------------------------------------------------------------
    def update_title(self, favorite: Optional[Favorite] = None) -> None:
        """Re-read the tab title, taking the name from ``favorite`` when given."""
        tab = self.terminal
        if tab is None:
            return
        favorite = favorite or tab.favorite
        if favorite is not None:
            tab.title = favorite.name
        self.setWindowTitle(tab.title)

    def update_capture_button_enabled(self, enabled: bool) -> None:
        self.capture_action.setEnabled(enabled)

    @property
    def capture_button_enabled(self) -> bool:
        return self.capture_action.isEnabled()

    def _request_attach(self) -> None:
        tab = self.terminal
        if tab is not None:
            self.attach_requested.emit(tab)

    def _request_capture(self) -> None:
        tab = self.terminal
        if tab is not None:
            self.capture_requested.emit(tab)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        tab = self.terminal
        if tab is not None:
            self.logger.info("Closing detached session %r", tab)
            self._container.remove(tab)
            if tab.connection is not None:
                tab.connection.disconnect()
            tab.dispose()
        self.closed.emit(self)
        super().closeEvent(event)


__all__ = ["PopupTerminal"]
