"""Favorite connection records and their change notifications."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Tuple

from PySide6.QtCore import QObject, Signal


@dataclass(eq=False)
class Favorite:
    """Saved connection profile.

    Records are compared by ``id`` so a reloaded copy of a profile still
    matches the tab that was opened from the original object.
    """

    name: str
    server_name: str = ""
    protocol: str = "RDP"
    port: int = 0
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Favorite):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class FavoritesChangedArgs:
    """One batch of favorite changes."""

    added: Tuple[Favorite, ...] = ()
    updated: Tuple[Favorite, ...] = ()
    removed: Tuple[Favorite, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.updated or self.removed)


FavoritesChangedHandler = Callable[[FavoritesChangedArgs], None]


class FavoritesDispatcher(QObject):
    """Publishes favorite changes to subscribers."""

    favorites_changed = Signal(object)  # FavoritesChangedArgs

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        self._handlers: List[FavoritesChangedHandler] = []

    def subscribe(self, handler: FavoritesChangedHandler) -> None:
        if handler in self._handlers:
            return
        self._handlers.append(handler)
        self.favorites_changed.connect(handler)

    def unsubscribe(self, handler: FavoritesChangedHandler) -> None:
        if handler not in self._handlers:
            return
        self._handlers.remove(handler)
        self.favorites_changed.disconnect(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def report_changes(
        self,
        *,
        added: Iterable[Favorite] = (),
        updated: Iterable[Favorite] = (),
        removed: Iterable[Favorite] = (),
    ) -> None:
        """Deliver one batch to every subscriber. Empty batches are dropped."""
        args = FavoritesChangedArgs(tuple(added), tuple(updated), tuple(removed))
        if args.is_empty:
            return
        self._logger.debug(
            "Favorites changed: added=%d updated=%d removed=%d",
            len(args.added),
            len(args.updated),
            len(args.removed),
        )
        self.favorites_changed.emit(args)

    def report_updated(self, *favorites: Favorite) -> None:
        self.report_changes(updated=favorites)


__all__ = [
    "Favorite",
    "FavoritesChangedArgs",
    "FavoritesChangedHandler",
    "FavoritesDispatcher",
]
