#!/usr/bin/env python3
"""Main window of the Terminals client."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget

from terminals.config.logging_config import setup_logging
from terminals.config.settings import TerminalSettings
from terminals.core import (
    Connection,
    Favorite,
    FavoritesDispatcher,
    Resources,
    TabContainer,
    TabsSelectionController,
    TerminalTab,
)
from terminals.ui.tab_strip import TabStrip


class MainWindow(QMainWindow):
    """Main window hosting the docked terminal tabs."""

    def __init__(
        self,
        *,
        settings: Optional[TerminalSettings] = None,
        dispatcher: Optional[FavoritesDispatcher] = None,
    ) -> None:
        super().__init__()
        self.logger = logging.getLogger(__name__)

        self.settings = settings or TerminalSettings()
        self.dispatcher = dispatcher or FavoritesDispatcher(self)
        self.resources = Resources(self.settings.language)
        self.container = TabContainer(self)
        self.controller = TabsSelectionController(
            self.container,
            self.dispatcher,
            self.settings,
            update_controls=self.update_controls,
            on_tab_double_clicked=self.on_terminal_tab_double_clicked,
            parent_window=self,
            resources=self.resources,
            parent=self,
        )
        self.settings.settings_changed.connect(self.controller.update_capture_button_on_detached_popups)
        self.container.selection_changed.connect(self.update_controls)

        self.setWindowTitle("Terminals")
        self.resize(1200, 800)
        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)

        self._create_central_widget()
        self._create_menu_bar()
        self.update_controls()

    # ------------------------------------------------------------------
    # UI construction helpers
    # ------------------------------------------------------------------
    def _create_central_widget(self) -> None:
        central_widget = QWidget(self)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.tab_strip = TabStrip(self.container, central_widget)
        layout.addWidget(self.tab_strip)
        self.setCentralWidget(central_widget)

    def _create_menu_bar(self) -> None:
        menubar = self.menuBar()
        tabs_menu = menubar.addMenu("Tabs")

        self.detach_action = QAction(self.resources.get_string("DetachTab"), self)
        self.detach_action.triggered.connect(lambda: self.controller.detach_to_new_window())
        tabs_menu.addAction(self.detach_action)

        self.close_tab_action = QAction(self.resources.get_string("CloseTab"), self)
        self.close_tab_action.triggered.connect(self._close_selected_tab)
        tabs_menu.addAction(self.close_tab_action)

        tabs_menu.addSeparator()
        self.capture_manager_action = QAction(self.resources.capture_manager_title, self)
        self.capture_manager_action.triggered.connect(
            lambda: self.controller.refresh_capture_manager_and_create_tab_if_needed(True)
        )
        tabs_menu.addAction(self.capture_manager_action)

        self.capture_action = QAction("Capture", self)
        self.capture_action.triggered.connect(self._capture_selected_tab)
        tabs_menu.addAction(self.capture_action)

        tabs_menu.addSeparator()
        tabs_menu.addAction("Exit", self.close)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def update_controls(self, *_args) -> None:
        """Recompute everything that depends on the selected tab."""
        self.tab_strip.sync_pages()
        selected = self.controller.selected
        has_selected = selected is not None
        self.detach_action.setEnabled(has_selected)
        self.close_tab_action.setEnabled(has_selected)
        self.capture_action.setEnabled(
            has_selected
            and selected.connection is not None
            and self.settings.enabled_capture_to_folder_and_clipboard
        )
        title = selected.title if has_selected else None
        self.setWindowTitle(f"Terminals - {title}" if title else "Terminals")

    def on_terminal_tab_double_clicked(self, tab: TerminalTab) -> None:
        if tab in self.container:
            self.controller.detach_to_new_window(tab)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------
    def open_connection(self, connection: Connection, favorite: Optional[Favorite] = None) -> TerminalTab:
        """Connect ``connection`` and show it in a new selected tab."""
        title = favorite.name if favorite is not None else type(connection).__name__
        tab = TerminalTab(title, favorite=favorite, connection=connection)
        tab.double_clicked.connect(lambda: self.on_terminal_tab_double_clicked(tab))
        connection.tab = tab
        connection.parent_window = self
        connection.connect()
        self.controller.add_and_select(tab)
        self.update_controls()
        return tab

    def close_tab(self, tab: TerminalTab) -> None:
        self.controller.remove_and_unselect(tab)
        if tab.connection is not None:
            tab.connection.disconnect()
        tab.dispose()
        self.update_controls()

    def _close_selected_tab(self) -> None:
        tab = self.controller.selected
        if tab is not None:
            self.close_tab(tab)

    def _capture_selected_tab(self) -> None:
        tab = self.controller.selected
        if tab is not None:
            self.controller.capture_tab(tab)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        for window in self.controller.detached_windows:
            window.close()
        self.controller.close()
        self.settings.save_window_geometry(self.saveGeometry().data())
        super().closeEvent(event)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    argv = list(sys.argv if argv is None else argv)
    settings = TerminalSettings()
    setup_logging(debug="--debug" in argv or bool(settings.get("debug_mode")))

    app = QApplication.instance() or QApplication(argv)
    app.setApplicationName("Terminals")
    window = MainWindow(settings=settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
