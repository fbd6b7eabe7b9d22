"""Tab widget view over a :class:`TabContainer`."""

from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtWidgets import QLabel, QTabWidget, QWidget
from shiboken6 import isValid

from terminals.core.tab_container import TabContainer
from terminals.core.tabs import TerminalTab


class TabStrip(QTabWidget):
    """Show the tabs of a container and push user selection back into it."""

    def __init__(self, container: TabContainer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("terminalTabs")
        self.setDocumentMode(True)
        self._container = container
        self._bound: List[TerminalTab] = []
        self._placeholders: Dict[int, QLabel] = {}
        self._syncing = False

        container.items_changed.connect(self.refresh)
        container.selection_changed.connect(self._sync_selection)
        self.currentChanged.connect(self._on_current_changed)
        self.tabBarDoubleClicked.connect(self._on_tab_double_clicked)
        self.refresh()

    def refresh(self) -> None:
        """Rebuild the pages from the container."""
        tabs = self._container.tabs()
        self._syncing = True
        try:
            for tab in self._bound:
                if tab not in tabs and isValid(tab):
                    tab.title_changed.disconnect(self._refresh_labels)
            for tab in tabs:
                if tab not in self._bound:
                    tab.title_changed.connect(self._refresh_labels)
            self._bound = tabs

            live = {id(tab) for tab in tabs}
            for key in [key for key in self._placeholders if key not in live]:
                self._placeholders.pop(key).deleteLater()

            while self.count():
                self.removeTab(0)
            for tab in tabs:
                index = self.addTab(self._page_for(tab), tab.title)
                self.setTabToolTip(index, tab.tooltip)
        finally:
            self._syncing = False
        self._sync_selection(self._container.selected)

    def sync_pages(self) -> None:
        """Rebuild only when a tab's page no longer matches its session view."""
        if self.count() != len(self._bound):
            self.refresh()
            return
        for index, tab in enumerate(self._bound):
            if self.widget(index) is not self._page_for(tab):
                self.refresh()
                return

    def _page_for(self, tab: TerminalTab) -> QWidget:
        if tab.connection is not None:
            return tab.connection.view
        page = self._placeholders.get(id(tab))
        if page is None:
            page = QLabel(tab.title)
            self._placeholders[id(tab)] = page
        return page

    def _refresh_labels(self, *_args) -> None:
        for index, tab in enumerate(self._bound):
            if index < self.count():
                self.setTabText(index, tab.title)

    def _sync_selection(self, tab: Optional[TerminalTab]) -> None:
        if tab is None or tab not in self._bound:
            return
        self._syncing = True
        try:
            self.setCurrentIndex(self._bound.index(tab))
        finally:
            self._syncing = False

    def _on_current_changed(self, index: int) -> None:
        if self._syncing or index < 0 or index >= len(self._bound):
            return
        self._container.selected = self._bound[index]

    def _on_tab_double_clicked(self, index: int) -> None:
        if 0 <= index < len(self._bound):
            self._bound[index].double_clicked.emit()


__all__ = ["TabStrip"]
