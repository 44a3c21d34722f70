"""pickmenu - Keyboard-driven selection menus for the terminal."""

from importlib.metadata import version

__version__ = version("pickmenu")

from pickmenu.core.controller import MenuController, MenuResult, run_menu
from pickmenu.utils.exceptions import (
    ActionExecutionError,
    EmptyEntriesError,
    InputError,
    InvalidNestedResultError,
    PickmenuError,
    TerminalUnavailableError,
    UnsupportedInputKindError,
    ViewportTooSmallError,
)

__all__ = [
    "MenuController",
    "MenuResult",
    "run_menu",
    "PickmenuError",
    "InputError",
    "UnsupportedInputKindError",
    "EmptyEntriesError",
    "ViewportTooSmallError",
    "InvalidNestedResultError",
    "ActionExecutionError",
    "TerminalUnavailableError",
]
