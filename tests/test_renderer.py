"""Tests for page rendering."""

from pickmenu.core.entries import build_entries
from pickmenu.core.pager import PageState, layout
from pickmenu.ui.renderer import Renderer
from tests.helpers.fake_terminal import FakeTerminal


def make(entries, height=24, title=None, config=None):
    terminal = FakeTerminal(height=height)
    renderer = Renderer(terminal, config)
    built = build_entries(entries)
    page = layout(len(built), height, has_title=bool(title))
    return terminal, renderer, built, page


def test_draws_rows_and_indicator(config):
    terminal, renderer, entries, page = make(["Alpha", "Beta", "Gamma"], config=config)
    renderer.draw_page(entries, page, 0, multi_select=False)

    assert terminal.lines() == ["Alpha", "Beta", "Gamma", "", "1/1"]
    assert terminal.highlighted_rows() == [0]


def test_title_is_drawn_above_entries(config):
    terminal, renderer, entries, page = make(["a", "b"], title="Pick", config=config)
    renderer.draw_page(entries, page, 1, multi_select=False, title="Pick")

    assert terminal.lines() == ["Pick", "", "a", "b", "", "1/1"]
    assert terminal.highlighted_rows() == [3]


def test_rows_are_padded_to_min_width(config):
    terminal, renderer, entries, page = make(["a"], config=config)
    renderer.draw_page(entries, page, 0, multi_select=False)
    assert len(terminal.screen[0]) == config.min_width + 2


def test_width_follows_widest_entry(config):
    long_name = "x" * 40
    _, renderer, entries, _ = make(["a", long_name], config=config)
    assert renderer.column_width(entries, multi_select=False) == 40
    assert renderer.column_width(entries, multi_select=True) == 44


def test_multi_select_checkboxes(config):
    terminal, renderer, entries, page = make(["a", "b"], config=config)
    entries[1].selected = True
    renderer.draw_page(entries, page, 0, multi_select=True)

    assert terminal.lines()[:2] == ["[ ] a", "[X] b"]


def test_nested_indicator(config):
    terminal, renderer, entries, page = make({"A": {"X": "1"}, "B": "cmd"}, config=config)
    renderer.draw_page(entries, page, 0, multi_select=False)

    assert terminal.screen[0] == "A".ljust(30) + " >"
    assert terminal.screen[1] == "B".ljust(30) + "  "


def test_only_current_page_is_drawn(config):
    terminal = FakeTerminal(height=15)
    renderer = Renderer(terminal, config)
    entries = build_entries([f"item{i:02d}" for i in range(25)])
    page = PageState(entry_count=25, page_size=10, current_page=2)
    renderer.draw_page(entries, page, 4, multi_select=False)

    lines = terminal.lines()
    assert lines[:5] == [f"item{i}" for i in range(20, 25)]
    assert lines[-1] == "3/3"
    assert terminal.highlighted_text() == "item24"


def test_draw_is_idempotent(config):
    terminal, renderer, entries, page = make(["a", "b", "c"], title="T", config=config)
    renderer.draw_page(entries, page, 1, multi_select=True, title="T")
    first = (dict(terminal.screen), dict(terminal.inverted), terminal.row)
    renderer.draw_page(entries, page, 1, multi_select=True, title="T")
    second = (dict(terminal.screen), dict(terminal.inverted), terminal.row)

    assert first == second
    assert (terminal.fg, terminal.bg) == ("white", "black")


def test_update_row_repaints_two_rows(config):
    terminal, renderer, entries, page = make(["Alpha", "Beta", "Gamma"], config=config)
    renderer.draw_page(entries, page, 0, multi_select=False)
    terminal.row_moves.clear()

    renderer.update_row(entries, page, 0, 2, multi_select=False)

    assert terminal.clears == 1
    assert terminal.row_moves == [0, 2, 5]
    assert terminal.highlighted_rows() == [2]
    assert terminal.lines() == ["Alpha", "Beta", "Gamma", "", "1/1"]
    assert (terminal.fg, terminal.bg) == ("white", "black")


def test_update_same_row_repaints_once(config):
    terminal, renderer, entries, page = make(["a", "b"], config=config)
    renderer.draw_page(entries, page, 1, multi_select=True)
    terminal.row_moves.clear()
    entries[1].selected = True

    renderer.update_row(entries, page, 1, 1, multi_select=True)

    assert terminal.row_moves == [1, 4]
    assert terminal.lines()[1] == "[X] b"
    assert terminal.highlighted_rows() == [1]
