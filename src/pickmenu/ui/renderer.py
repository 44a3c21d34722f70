"""Menu page rendering."""

from typing import Optional, Sequence

from pickmenu.core.entries import MenuEntry
from pickmenu.core.pager import PageState
from pickmenu.ui.base import Terminal
from pickmenu.utils.config import Config
from pickmenu.utils.constants import CHECKBOX_WIDTH, Checkbox
from pickmenu.utils.debug import debug_render


class Renderer:
    """Draws one page of entries on a Terminal.

    Layout, top to bottom: optional title + blank line, one row per entry,
    a blank line and the page indicator. Only full draws move rows around;
    update_row() repaints rows in place.
    """

    def __init__(self, terminal: Terminal, config: Optional[Config] = None):
        self.terminal = terminal
        self.config = config or Config()
        self._top_row = 0
        self._park_row = 0

    def column_width(self, entries: Sequence[MenuEntry], multi_select: bool) -> int:
        """Width of the entry column: widest name, checkbox included, at least min_width."""
        widest = max((len(entry.display_name) for entry in entries), default=0)
        if multi_select:
            widest += CHECKBOX_WIDTH
        return max(widest, self.config.min_width)

    def format_row(self, entry: MenuEntry, width: int, multi_select: bool) -> str:
        label = entry.display_name
        if multi_select:
            marker = Checkbox.CHECKED if entry.selected else Checkbox.UNCHECKED
            label = f"{marker} {label}"
        indicator = self.config.nested_indicator if entry.opens_nested else ""
        return label.ljust(width) + indicator.ljust(len(self.config.nested_indicator))

    def _draw_row(self, text: str, highlighted: bool, newline: bool):
        write = self.terminal.write_line if newline else self.terminal.write
        if not highlighted:
            write(text)
            return

        fg = self.terminal.get_foreground()
        bg = self.terminal.get_background()
        self.terminal.set_foreground(bg)
        self.terminal.set_background(fg)
        try:
            write(text)
        finally:
            self.terminal.set_foreground(fg)
            self.terminal.set_background(bg)

    def draw_page(
        self,
        entries: Sequence[MenuEntry],
        page: PageState,
        selected_row: int,
        multi_select: bool,
        title: Optional[str] = None,
    ):
        """Clear the screen and draw the current page."""
        debug_render("draw page", page=page.indicator(), row=selected_row)
        self.terminal.clear_screen()

        if title:
            self.terminal.write_line(title)
            self.terminal.write_line()

        width = self.column_width(entries, multi_select)
        first = page.first_index_of_page(page.current_page)
        self._top_row = self.terminal.get_cursor_row()
        for row in range(page.rows_on_current_page):
            text = self.format_row(entries[first + row], width, multi_select)
            self._draw_row(text, highlighted=row == selected_row, newline=True)

        self.terminal.write_line()
        self.terminal.write_line(page.indicator())
        self._park_row = self.terminal.get_cursor_row()

    def update_row(
        self,
        entries: Sequence[MenuEntry],
        page: PageState,
        old_row: int,
        new_row: int,
        multi_select: bool,
    ):
        """Repaint only old_row (plain) and new_row (highlighted)."""
        width = self.column_width(entries, multi_select)
        first = page.first_index_of_page(page.current_page)

        # old_row == new_row on toggle: paint that row once, highlighted
        rows = [(old_row, False)] if old_row != new_row else []
        rows.append((new_row, True))

        for row, highlighted in rows:
            self.terminal.set_cursor_row(self._top_row + row)
            text = self.format_row(entries[first + row], width, multi_select)
            self._draw_row(text, highlighted=highlighted, newline=False)

        self.terminal.set_cursor_row(self._park_row)
