"""Windows and widgets hosting terminal tabs."""

from .popup_window import PopupTerminal
from .tab_strip import TabStrip

__all__ = [
    "PopupTerminal",
    "TabStrip",
]
