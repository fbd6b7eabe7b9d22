"""
Core tab model and the controller that moves tabs between windows.
"""

from .favorites import Favorite, FavoritesChangedArgs, FavoritesDispatcher
from .resources import Resources
from .tabs import TabRole, TerminalTab
from .tab_container import TabContainer
from .connections import CaptureManagerConnection, Connection
from .selection_controller import TabsSelectionController

__all__ = [
    'CaptureManagerConnection',
    'Connection',
    'Favorite',
    'FavoritesChangedArgs',
    'FavoritesDispatcher',
    'Resources',
    'TabContainer',
    'TabRole',
    'TabsSelectionController',
    'TerminalTab',
]
