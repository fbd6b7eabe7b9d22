"""Session objects shown inside terminal tabs."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QListWidget, QListWidgetItem, QWidget

if TYPE_CHECKING:
    from .tabs import TerminalTab


class Connection(ABC):
    """Base class of everything a tab can host.

    Protocol specific subclasses implement :meth:`connect` and
    :meth:`_create_view`; the tab layer only relies on the methods here.
    """

    def __init__(self) -> None:
        self.tab: Optional["TerminalTab"] = None
        self.parent_window: Optional[QWidget] = None
        self._view: Optional[QWidget] = None
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def view(self) -> QWidget:
        if self._view is None:
            self._view = self._create_view()
        return self._view

    @abstractmethod
    def _create_view(self) -> QWidget:
        ...

    @abstractmethod
    def connect(self) -> None:
        ...

    def disconnect(self) -> None:
        self._connected = False

    def dispose(self) -> None:
        """Schedule the view for deletion. A later access builds a new one."""
        if self._view is not None:
            self._view.deleteLater()
            self._view = None

    @property
    def has_view(self) -> bool:
        return self._view is not None

    def refresh_view(self) -> None:
        """Reload whatever the view displays."""

    def bring_to_front(self) -> None:
        self.view.raise_()

    def update(self) -> None:
        self.view.update()


class CaptureManagerConnection(Connection):
    """Lists the screen captures saved in the capture folder."""

    def __init__(self, capture_root: Path) -> None:
        super().__init__()
        self.capture_root = Path(capture_root)
        self.logger = logging.getLogger(__name__)

    def _create_view(self) -> QListWidget:
        view = QListWidget(self.parent_window)
        view.setObjectName("captureManagerView")
        return view

    def connect(self) -> None:
        self.capture_root.mkdir(parents=True, exist_ok=True)
        self._connected = True
        self.refresh_view()

    def captured_files(self) -> List[Path]:
        try:
            files = [p for p in self.capture_root.iterdir() if p.is_file()]
        except OSError as exc:
            self.logger.warning("Unable to scan capture folder %s: %s", self.capture_root, exc)
            return []
        return sorted(files, key=lambda p: p.stat().st_mtime, reverse=True)

    def refresh_view(self) -> None:
        view = self.view
        view.clear()
        for path in self.captured_files():
            item = QListWidgetItem(path.name)
            item.setData(Qt.UserRole, str(path))
            view.addItem(item)


__all__ = ["CaptureManagerConnection", "Connection"]
