"""Tab ownership between the main window and detached popups."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from PySide6.QtCore import QObject
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QWidget
from shiboken6 import isValid

from terminals.config.settings import TerminalSettings

from .connections import CaptureManagerConnection, Connection
from .favorites import Favorite, FavoritesChangedArgs, FavoritesDispatcher
from .resources import Resources
from .tab_container import TabContainer
from .tabs import TabRole, TerminalTab

if TYPE_CHECKING:
    from terminals.ui.popup_window import PopupTerminal


class TabsSelectionController(QObject):
    """Adapter between all windows (including the main one) and their tabs.

    Every operation that creates, moves, selects or removes a tab goes through
    here. The main container and the list of detached windows are only ever
    mutated by this class; popups ask for moves through their signals.
    """

    def __init__(
        self,
        container: TabContainer,
        dispatcher: FavoritesDispatcher,
        settings: TerminalSettings,
        *,
        update_controls: Optional[Callable[[], None]] = None,
        on_tab_double_clicked: Optional[Callable[[TerminalTab], None]] = None,
        parent_window: Optional[QWidget] = None,
        popup_factory: Optional[Callable[[], "PopupTerminal"]] = None,
        capture_manager_factory: Optional[Callable[[], Connection]] = None,
        resources: Optional[Resources] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        self._container = container
        self._dispatcher = dispatcher
        self._settings = settings
        self._update_controls = update_controls or (lambda: None)
        self._on_tab_double_clicked = on_tab_double_clicked
        self._parent_window = parent_window
        self._resources = resources or Resources(settings.language)
        if popup_factory is None:
            from terminals.ui.popup_window import PopupTerminal

            popup_factory = partial(PopupTerminal, resources=self._resources)
        self._popup_factory = popup_factory
        self._capture_manager_factory = capture_manager_factory or (
            lambda: CaptureManagerConnection(self._settings.capture_root)
        )
        self._detached_windows: List["PopupTerminal"] = []
        self._closed = False

        self._dispatcher.subscribe(self._on_favorites_changed)

    @property
    def container(self) -> TabContainer:
        return self._container

    @property
    def detached_windows(self) -> Tuple["PopupTerminal", ...]:
        return tuple(self._detached_windows)

    def close(self) -> None:
        """Stop listening for favorite changes and release every popup."""
        if self._closed:
            return
        self._closed = True
        self._dispatcher.unsubscribe(self._on_favorites_changed)
        for window in list(self._detached_windows):
            self.unregister_popup(window)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, tab: Optional[TerminalTab]) -> None:
        self._container.selected = tab

    def unselect(self) -> None:
        """Clear the selection, same as ``select(None)``."""
        self.select(None)

    def add_and_select(self, tab: TerminalTab) -> None:
        self._container.append(tab)
        self.select(tab)

    def remove_and_unselect(self, tab: TerminalTab) -> None:
        """Take ``tab`` out of the main window; its session stays open."""
        self._container.remove(tab)
        self.unselect()

    @property
    def selected(self) -> Optional[TerminalTab]:
        return self._container.selected

    @property
    def has_selected(self) -> bool:
        return self._container.selected is not None

    # ------------------------------------------------------------------
    # Detach / attach
    # ------------------------------------------------------------------
    def detach_to_new_window(self, tab: Optional[TerminalTab] = None) -> Optional["PopupTerminal"]:
        """Move ``tab`` (the selected tab by default) into a new popup window."""
        if tab is None:
            tab = self.selected
        if tab is None:
            return None

        with self._container.batched():
            popup = self._popup_factory()
            self._container.remove(tab)
            popup.add_terminal(tab)

        self._register_popup(popup)
        popup.show()
        self._logger.debug("Detached %r to a new window", tab)
        return popup

    def attach_from_window(self, tab: TerminalTab) -> None:
        """Dock ``tab`` back into the main window and forget its popup."""
        window = self.find_window(tab)
        with self._container.batched():
            if window is not None:
                window.release_terminal(tab)
            self.add_and_select(tab)
        if window is not None:
            self.unregister_popup(window)
        self._logger.debug("Attached %r to the main window", tab)

    def find_window(self, tab: TerminalTab) -> Optional["PopupTerminal"]:
        for window in self._detached_windows:
            if window.owns(tab):
                return window
        return None

    def unregister_popup(self, window: "PopupTerminal") -> None:
        for index, registered in enumerate(self._detached_windows):
            if registered is window:
                del self._detached_windows[index]
                break
        else:
            return

        if isValid(window):
            window.attach_requested.disconnect(self.attach_from_window)
            window.capture_requested.disconnect(self.capture_tab)
            window.closed.disconnect(self.unregister_popup)

    def _register_popup(self, window: "PopupTerminal") -> None:
        self._detached_windows.append(window)
        window.attach_requested.connect(self.attach_from_window)
        window.capture_requested.connect(self.capture_tab)
        window.closed.connect(self.unregister_popup)
        window.update_capture_button_enabled(self._settings.enabled_capture_to_folder_and_clipboard)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------
    def _on_favorites_changed(self, args: FavoritesChangedArgs) -> None:
        for updated in args.updated:
            # only the name is refreshed, an open session keeps its connection settings
            self._update_detached_window_titles(updated)
            self._update_attached_tab_title(updated)

    def _update_attached_tab_title(self, updated: Favorite) -> None:
        attached = self._find_attached_tab(updated)
        if attached is not None:
            attached.title = updated.name

    def _find_attached_tab(self, updated: Favorite) -> Optional[TerminalTab]:
        for tab in self._container:
            if tab.favorite is not None and tab.favorite == updated:
                return tab
        return None

    def _update_detached_window_titles(self, updated: Favorite) -> None:
        for window in self._detached_windows:
            favorite = window.favorite
            if favorite is not None and favorite == updated:
                window.update_title(updated)

    # ------------------------------------------------------------------
    # Capture manager
    # ------------------------------------------------------------------
    def refresh_capture_manager_and_create_tab_if_needed(self, open_manager_tab: bool) -> None:
        if self.refresh_capture_manager(True):
            return

        settings = self._settings
        if not open_manager_tab and (
            not settings.enable_capture_to_folder or not settings.auto_switch_on_capture
        ):
            return

        self._create_capture_manager_tab()

    def refresh_capture_manager(self, set_focus: bool) -> bool:
        """Refresh the capture manager tab and optionally bring it forward.

        Returns True when the tab exists, whether or not it was focused.
        """
        tab = self.find_capture_manager_tab()
        if tab is None:
            return False

        connection = tab.connection
        connection.refresh_view()
        if set_focus and self._settings.enable_capture_to_folder and self._settings.auto_switch_on_capture:
            connection.bring_to_front()
            connection.update()
            self.select(tab)
        return True

    def find_capture_manager_tab(self) -> Optional[TerminalTab]:
        for tab in self._container:
            if tab.role is TabRole.CAPTURE_MANAGER:
                return tab
        return None

    def _create_capture_manager_tab(self) -> Optional[TerminalTab]:
        title = self._resources.capture_manager_title
        tab = TerminalTab(title, role=TabRole.CAPTURE_MANAGER)
        previous = self.selected
        try:
            tab.allow_drop = False
            tab.tooltip = title
            tab.favorite = None
            if self._on_tab_double_clicked is not None:
                tab.double_clicked.connect(partial(self._on_tab_double_clicked, tab))
            self.add_and_select(tab)
            self._update_controls()

            connection = self._capture_manager_factory()
            connection.tab = tab
            connection.parent_window = self._parent_window
            tab.connection = connection
            connection.connect()
            connection.bring_to_front()
            connection.update()

            self._update_controls()
        except Exception:
            self._logger.exception("Error loading the Capture Manager tab")
            if tab in self._container:
                self.remove_and_unselect(tab)
            if previous is not None and previous in self._container:
                self.select(previous)
            tab.dispose()
            return None
        return tab

    def update_capture_button_on_detached_popups(self) -> None:
        enabled = self._settings.enabled_capture_to_folder_and_clipboard
        for window in self._detached_windows:
            window.update_capture_button_enabled(enabled)

    def capture_tab(self, tab: TerminalTab) -> Optional[Path]:
        """Save a screenshot of ``tab``'s view into the capture folder."""
        connection = tab.connection
        if connection is None:
            return None
        if not self._settings.enable_capture_to_folder:
            self._logger.info("Capture to folder is disabled, skipping capture of %r", tab)
            return None

        capture_root = self._settings.capture_root
        capture_root.mkdir(parents=True, exist_ok=True)
        stem = re.sub(r"[^\w.-]+", "_", tab.title).strip("_") or "capture"
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        target = capture_root / f"{stem}_{stamp}.png"

        pixmap = connection.view.grab()
        if not pixmap.save(str(target), "PNG"):
            self._logger.error("Unable to save capture of %r to %s", tab, target)
            return None
        if self._settings.enable_capture_to_clipboard:
            QGuiApplication.clipboard().setPixmap(pixmap)

        self._logger.info("Saved capture %s", target)
        self.refresh_capture_manager_and_create_tab_if_needed(False)
        return target


__all__ = ["TabsSelectionController"]
