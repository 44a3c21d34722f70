"""Terminal UI components."""

from pickmenu.ui.base import Terminal
from pickmenu.ui.keys import KEY_BINDINGS, Key, MenuEvent, event_for, translate
from pickmenu.ui.renderer import Renderer
from pickmenu.ui.session import TerminalSession

__all__ = [
    "KEY_BINDINGS",
    "Key",
    "MenuEvent",
    "Renderer",
    "Terminal",
    "TerminalSession",
    "event_for",
    "translate",
]
