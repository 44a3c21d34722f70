"""Tests for the rich-backed terminal."""

import io

import pytest
import readchar
from rich.console import Console

from pickmenu.ui import terminal as terminal_module
from pickmenu.ui.keys import Key
from pickmenu.ui.terminal import RichTerminal
from pickmenu.utils.exceptions import ConfigurationError


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def rich_terminal(output, config):
    console = Console(
        file=output, force_terminal=True, width=80, height=20, color_system="standard"
    )
    return RichTerminal(console=console, config=config)


def test_write_line_tracks_rows(rich_terminal, output):
    rich_terminal.write_line("first")
    rich_terminal.write_line("second")
    assert rich_terminal.get_cursor_row() == 2
    assert "first\n" in output.getvalue()


def test_clear_screen_homes_cursor(rich_terminal):
    rich_terminal.write_line("x")
    rich_terminal.clear_screen()
    assert rich_terminal.get_cursor_row() == 0


def test_set_cursor_row_moves(rich_terminal, output):
    rich_terminal.set_cursor_row(2)
    assert rich_terminal.get_cursor_row() == 2
    assert "\x1b[3;1H" in output.getvalue()


def test_base_colors_are_unstyled(rich_terminal, output):
    rich_terminal.write("plain")
    assert output.getvalue() == "plain"


def test_inverted_colors_are_styled(rich_terminal, output):
    rich_terminal.set_foreground(rich_terminal.get_background())
    rich_terminal.set_background("white")
    rich_terminal.write("hi")
    assert "\x1b[" in output.getvalue()
    assert "hi" in output.getvalue()


def test_unknown_color_rejected(rich_terminal, config):
    with pytest.raises(ConfigurationError):
        rich_terminal.set_foreground("not-a-color")

    config.background = "nope"
    with pytest.raises(ConfigurationError):
        RichTerminal(console=Console(file=io.StringIO()), config=config)


def test_cursor_and_title_sequences(rich_terminal, output):
    rich_terminal.set_cursor_visible(False)
    rich_terminal.save_window_title()
    rich_terminal.set_window_title("Pick")
    rich_terminal.restore_window_title()
    rich_terminal.set_cursor_visible(True)
    assert output.getvalue() == (
        "\x1b[?25l" "\x1b[22;0t" "\x1b]0;Pick\x07" "\x1b[23;0t" "\x1b[?25h"
    )


def test_viewport_height(rich_terminal):
    assert rich_terminal.get_viewport_height() == 20


def test_not_interactive_without_tty(config):
    term = RichTerminal(console=Console(file=io.StringIO()), config=config)
    assert not term.is_interactive()


@pytest.fixture
def typed(rich_terminal, monkeypatch):
    """Script the input bursts the terminal sees.

    Each string is one read's worth of input. An empty string means nothing
    arrived before the escape timeout.
    """

    def install(*bursts):
        queue = list(bursts)
        waits = []

        def read_input(timeout):
            waits.append(timeout)
            return queue.pop(0)

        monkeypatch.setattr(terminal_module.sys, "platform", "linux")
        monkeypatch.setattr(rich_terminal, "_read_input", read_input)
        return waits

    return install


class TestReadKey:
    """Tests for raw key reads."""

    def test_translates_keys(self, rich_terminal, typed):
        typed(readchar.key.UP)
        assert rich_terminal.read_key() is Key.UP

    def test_lone_escape_is_a_key(self, rich_terminal, typed):
        waits = typed("\x1b", "")
        assert rich_terminal.read_key() is Key.ESCAPE
        assert waits == [None, terminal_module.ESCAPE_TIMEOUT]

    def test_escape_then_arrow_keeps_both(self, rich_terminal, typed):
        typed("\x1b", "", "\x1b[B")
        assert rich_terminal.read_key() is Key.ESCAPE
        assert rich_terminal.read_key() is Key.DOWN

    def test_escape_and_arrow_in_one_burst(self, rich_terminal, typed):
        typed("\x1b\x1b[B")
        assert rich_terminal.read_key() is Key.ESCAPE
        assert rich_terminal.read_key() is Key.DOWN

    def test_sequence_split_across_reads(self, rich_terminal, typed):
        typed("\x1b", "[", "5~")
        assert rich_terminal.read_key() is Key.PAGE_UP

    def test_burst_of_keys_is_split(self, rich_terminal, typed):
        typed("j\x1b[Ak")
        assert rich_terminal.read_key() is Key.DOWN
        assert rich_terminal.read_key() is Key.UP
        assert rich_terminal.read_key() is Key.UP

    def test_vim_keys_follow_config(self, rich_terminal, config, typed):
        typed("j", "j")
        assert rich_terminal.read_key() is Key.DOWN
        config.vim_keys = False
        assert rich_terminal.read_key() is None

    def test_ctrl_c_becomes_key(self, rich_terminal, monkeypatch):
        def interrupt(timeout):
            raise KeyboardInterrupt

        monkeypatch.setattr(terminal_module.sys, "platform", "linux")
        monkeypatch.setattr(rich_terminal, "_read_input", interrupt)
        assert rich_terminal.read_key() is Key.CTRL_C

    def test_echo(self, rich_terminal, output, typed):
        typed("x")
        rich_terminal.read_key(echo=True)
        assert output.getvalue() == "x"

    def test_windows_uses_readkey(self, rich_terminal, monkeypatch):
        monkeypatch.setattr(terminal_module.sys, "platform", "win32")
        monkeypatch.setattr(terminal_module.readchar, "readkey", lambda: "\x1b")
        assert rich_terminal.read_key() is Key.ESCAPE
