"""Base protocol for the terminal a menu draws on."""

from typing import Optional, Protocol

from pickmenu.ui.keys import Key


class Terminal(Protocol):
    """Protocol for terminal implementations.

    Allows swapping the terminal backend (real console, scripted tests).
    Rows are 0-based screen rows.
    """

    def get_cursor_row(self) -> int: ...

    def set_cursor_row(self, row: int) -> None: ...

    def write(self, text: str) -> None:
        """Write text at the cursor in the current colors."""
        ...

    def write_line(self, text: str = "") -> None:
        """Write text and move to the start of the next row."""
        ...

    def read_key(self, echo: bool = False) -> Optional[Key]:
        """Block for one keypress, return its logical Key or None if unbound."""
        ...

    def get_foreground(self) -> str: ...

    def get_background(self) -> str: ...

    def set_foreground(self, color: str) -> None: ...

    def set_background(self, color: str) -> None: ...

    def set_cursor_visible(self, visible: bool) -> None: ...

    def clear_screen(self) -> None: ...

    def get_viewport_height(self) -> int: ...

    def set_window_title(self, title: str) -> None: ...

    def save_window_title(self) -> None: ...

    def restore_window_title(self) -> None: ...

    def is_interactive(self) -> bool:
        """True when raw key reads are possible."""
        ...
