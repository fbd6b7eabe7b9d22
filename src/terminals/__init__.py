"""Top-level package for the Terminals tab host."""

from .config import ApplicationLogger, TerminalSettings, setup_logging
from .core import (
    CaptureManagerConnection,
    Connection,
    Favorite,
    FavoritesChangedArgs,
    FavoritesDispatcher,
    Resources,
    TabContainer,
    TabRole,
    TabsSelectionController,
    TerminalTab,
)
from .ui import PopupTerminal, TabStrip
from .main_window import MainWindow, main as run

__all__ = [
    "ApplicationLogger",
    "CaptureManagerConnection",
    "Connection",
    "Favorite",
    "FavoritesChangedArgs",
    "FavoritesDispatcher",
    "MainWindow",
    "PopupTerminal",
    "Resources",
    "TabContainer",
    "TabRole",
    "TabStrip",
    "TabsSelectionController",
    "TerminalSettings",
    "TerminalTab",
    "run",
    "setup_logging",
]
