"""Ordered tab collection with a single selection."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

from PySide6.QtCore import QObject, Signal

from .tabs import TerminalTab


class TabContainer(QObject):
    """Display-ordered tabs of one window plus its selected tab.

    Structural changes emit ``items_changed`` and selection changes emit
    ``selection_changed``. Inside :meth:`batched` both are held back and
    delivered once when the outermost batch exits.
    """

    items_changed = Signal()
    selection_changed = Signal(object)  # TerminalTab | None

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._tabs: List[TerminalTab] = []
        self._selected: Optional[TerminalTab] = None
        self._batch_depth = 0
        self._items_dirty = False
        self._selection_at_batch_start: Optional[TerminalTab] = None

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._tabs)

    def __iter__(self) -> Iterator[TerminalTab]:
        return iter(list(self._tabs))

    def __contains__(self, tab: object) -> bool:
        return any(existing is tab for existing in self._tabs)

    def tabs(self) -> List[TerminalTab]:
        return list(self._tabs)

    def index_of(self, tab: TerminalTab) -> int:
        for index, existing in enumerate(self._tabs):
            if existing is tab:
                return index
        raise ValueError(f"{tab!r} is not in this container")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def append(self, tab: TerminalTab) -> None:
        self.insert(len(self._tabs), tab)

    def insert(self, index: int, tab: TerminalTab) -> None:
        if tab in self:
            raise ValueError(f"{tab!r} is already in this container")
        self._tabs.insert(index, tab)
        self._notify_items()

    def remove(self, tab: TerminalTab) -> None:
        index = self.index_of(tab)
        del self._tabs[index]
        if self._selected is tab:
            self._set_selected(None)
        self._notify_items()

    @property
    def selected(self) -> Optional[TerminalTab]:
        return self._selected

    @selected.setter
    def selected(self, tab: Optional[TerminalTab]) -> None:
        if tab is not None and tab not in self:
            raise ValueError(f"Cannot select {tab!r}: not in this container")
        self._set_selected(tab)

    # ------------------------------------------------------------------
    # Batching
    # ------------------------------------------------------------------
    @contextmanager
    def batched(self) -> Iterator["TabContainer"]:
        """Hold back notifications until the block exits, even on error."""
        if self._batch_depth == 0:
            self._items_dirty = False
            self._selection_at_batch_start = self._selected
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0:
                self._flush()

    @property
    def is_batching(self) -> bool:
        return self._batch_depth > 0

    def _flush(self) -> None:
        items_dirty, self._items_dirty = self._items_dirty, False
        selection_moved = self._selected is not self._selection_at_batch_start
        self._selection_at_batch_start = None
        if items_dirty:
            self.items_changed.emit()
        if selection_moved:
            self.selection_changed.emit(self._selected)

    def _notify_items(self) -> None:
        if self._batch_depth:
            self._items_dirty = True
        else:
            self.items_changed.emit()

    def _set_selected(self, tab: Optional[TerminalTab]) -> None:
        if tab is self._selected:
            return
        self._selected = tab
        if not self._batch_depth:
            self.selection_changed.emit(tab)


__all__ = ["TabContainer"]
