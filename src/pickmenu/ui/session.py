"""Scoped ownership of process-wide terminal state."""

from typing import Optional

from pickmenu.ui.base import Terminal
from pickmenu.utils.config import Config
from pickmenu.utils.debug import mute_stderr


class TerminalSession:
    """Captures terminal state on enter and restores it on every exit.

    Colors, cursor visibility and window title are put back whether the menu
    is confirmed, cancelled, or an exception escapes.

    Usage:
        with TerminalSession(terminal, config, title) as session:
            ...
    """

    def __init__(
        self,
        terminal: Terminal,
        config: Optional[Config] = None,
        title: Optional[str] = None,
    ):
        self.terminal = terminal
        self.config = config or Config()
        self.title = title
        # Cleared by callers that leave output on screen (inline actions)
        self.clear_on_exit = self.config.clear_on_exit
        self._saved_colors: Optional[tuple[str, str]] = None

    def __enter__(self) -> "TerminalSession":
        self._saved_colors = (
            self.terminal.get_foreground(),
            self.terminal.get_background(),
        )
        self.terminal.save_window_title()
        self.set_title(self.title)
        self.terminal.set_cursor_visible(False)
        mute_stderr(True)
        return self

    def set_title(self, title: Optional[str]):
        """Show title (or the default title) as the window title."""
        self.terminal.set_window_title(title or self.config.default_title)

    def __exit__(self, exc_type, exc, tb):
        try:
            fg, bg = self._saved_colors
            self.terminal.set_foreground(fg)
            self.terminal.set_background(bg)
            if self.clear_on_exit:
                self.terminal.clear_screen()
        finally:
            self.terminal.set_cursor_visible(True)
            self.terminal.restore_window_title()
            mute_stderr(False)
        return False
