"""Real terminal backed by a rich Console and readchar."""

import codecs
import os
import select
import sys
from typing import Optional

import readchar
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.control import Control
from rich.style import Style
from rich.text import Text

from pickmenu.ui.keys import Key, split_key, translate
from pickmenu.utils.config import Config
from pickmenu.utils.constants import ESCAPE_TIMEOUT, READ_CHUNK, Escape
from pickmenu.utils.exceptions import ConfigurationError


def _check_color(name: str) -> str:
    try:
        Color.parse(name)
    except ColorParseError as e:
        raise ConfigurationError(f"Unknown color {name!r}") from e
    return name


class RichTerminal:
    """Terminal port on top of a rich Console.

    The cursor row is tracked rather than queried: clear_screen() homes it,
    write_line() advances it and set_cursor_row() moves it explicitly.
    """

    def __init__(self, console: Optional[Console] = None, config: Optional[Config] = None):
        self.config = config or Config()
        self.console = console or Console(highlight=False)
        self._base_fg = _check_color(self.config.foreground)
        self._base_bg = _check_color(self.config.background)
        self._fg = self._base_fg
        self._bg = self._base_bg
        self._row = 0
        # Input read past the last returned key
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _raw(self, sequence: str):
        self.console.file.write(sequence)
        self.console.file.flush()

    def _style(self) -> Optional[Style]:
        # Text in the session colors is left unstyled so the theme shows through
        if self._fg == self._base_fg and self._bg == self._base_bg:
            return None
        return Style(color=self._fg, bgcolor=self._bg)

    def _print(self, text: str, end: str):
        self.console.print(
            Text(text, style=self._style() or ""),
            end=end,
            no_wrap=True,
            overflow="crop",
        )

    def get_cursor_row(self) -> int:
        return self._row

    def set_cursor_row(self, row: int) -> None:
        self.console.control(Control.move_to(0, row))
        self._row = row

    def write(self, text: str) -> None:
        self._print(text, end="")

    def write_line(self, text: str = "") -> None:
        self._print(text, end="\n")
        self._row += 1

    def read_key(self, echo: bool = False) -> Optional[Key]:
        try:
            raw = self._read_raw()
        except KeyboardInterrupt:
            # Ctrl+C arrives as SIGINT, the terminal keeps ISIG on
            return Key.CTRL_C
        if echo and raw.isprintable():
            self.write(raw)
        return translate(raw, vim_keys=self.config.vim_keys)

    def _read_raw(self) -> str:
        """Next keypress as a readchar-style string."""
        if sys.platform in ("win32", "cygwin"):
            # The Windows console reports whole key events, ESC included
            return readchar.readkey()

        if not self._pending:
            self._pending = self._read_input(None)
        while True:
            key, rest = split_key(self._pending)
            if key is not None:
                self._pending = rest
                return key
            more = self._read_input(ESCAPE_TIMEOUT)
            if not more:
                # Nothing followed: a lone ESC, or a sequence cut short
                key, self._pending = self._pending, ""
                return key
            self._pending += more

    def _read_input(self, timeout: Optional[float]) -> str:
        """Read the bytes available on stdin, waiting up to timeout (None blocks).

        Reads the file descriptor directly: going through sys.stdin would
        buffer the tail of an escape sequence where select() cannot see it.
        """
        import termios
        import tty

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd, termios.TCSANOW)
            ready, _, _ = select.select([fd], [], [], timeout)
            data = os.read(fd, READ_CHUNK) if ready else b""
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        return self._decoder.decode(data)

    def get_foreground(self) -> str:
        return self._fg

    def get_background(self) -> str:
        return self._bg

    def set_foreground(self, color: str) -> None:
        self._fg = _check_color(color)

    def set_background(self, color: str) -> None:
        self._bg = _check_color(color)

    def set_cursor_visible(self, visible: bool) -> None:
        self._raw(Escape.SHOW_CURSOR if visible else Escape.HIDE_CURSOR)

    def clear_screen(self) -> None:
        self.console.clear(home=True)
        self._row = 0
        # Input read past the last returned key
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def get_viewport_height(self) -> int:
        return self.console.size.height

    def set_window_title(self, title: str) -> None:
        self._raw(Escape.SET_TITLE.format(title=title))

    def save_window_title(self) -> None:
        self._raw(Escape.PUSH_TITLE)

    def restore_window_title(self) -> None:
        self._raw(Escape.POP_TITLE)

    def is_interactive(self) -> bool:
        return self.console.is_terminal and sys.stdin.isatty()
