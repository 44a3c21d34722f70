"""Core menu logic."""

from pickmenu.core.actions import ExecutionResult, ResultKind, ShellActionExecutor
from pickmenu.core.controller import MenuController, MenuState, run_menu
from pickmenu.core.entries import (
    ActionKind,
    MappingSource,
    MenuEntry,
    SequenceSource,
    build_entries,
    to_source,
)
from pickmenu.core.navigation import NavigationFrame, NavigationStack
from pickmenu.core.pager import PageState, layout

__all__ = [
    "ActionKind",
    "ExecutionResult",
    "MappingSource",
    "MenuController",
    "MenuEntry",
    "MenuState",
    "NavigationFrame",
    "NavigationStack",
    "PageState",
    "ResultKind",
    "SequenceSource",
    "ShellActionExecutor",
    "build_entries",
    "layout",
    "run_menu",
    "to_source",
]
