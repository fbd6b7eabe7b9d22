"""Tab handles for open terminal sessions."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QObject, Signal

from .favorites import Favorite

if TYPE_CHECKING:
    from .connections import Connection


class TabRole(Enum):
    USER_SESSION = "user_session"
    CAPTURE_MANAGER = "capture_manager"


class TerminalTab(QObject):
    """Identity and display metadata of one open session.

    A tab lives in exactly one :class:`TabContainer` at a time, either the
    main window's or the one of a detached popup.
    """

    title_changed = Signal(str)
    double_clicked = Signal()

    def __init__(
        self,
        title: str,
        *,
        favorite: Optional[Favorite] = None,
        connection: Optional["Connection"] = None,
        role: TabRole = TabRole.USER_SESSION,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._title = title
        self.favorite = favorite
        self.connection = connection
        self.role = role
        self.allow_drop = True
        self.tooltip = title
        self._disposed = False

    def __repr__(self) -> str:
        return f"TerminalTab(title={self._title!r}, role={self.role.value})"

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        if value == self._title:
            return
        self._title = value
        self.title_changed.emit(value)

    @property
    def is_capture_manager(self) -> bool:
        return self.role is TabRole.CAPTURE_MANAGER

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Release the session view and schedule the tab for deletion."""
        if self._disposed:
            return
        self._disposed = True
        if self.connection is not None:
            self.connection.dispose()
        self.connection = None
        self.deleteLater()


__all__ = ["TabRole", "TerminalTab"]
