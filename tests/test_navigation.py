"""Tests for the navigation stack."""

from pickmenu.core.entries import SequenceSource, to_source
from pickmenu.core.navigation import NavigationFrame, NavigationStack


def test_empty_stack_pops_none():
    stack = NavigationStack()
    assert not stack
    assert stack.depth == 0
    assert stack.pop() is None


def test_push_pop_is_lifo():
    stack = NavigationStack()
    root = to_source({"A": {"X": "1"}})
    child = SequenceSource(("X",))
    stack.push(None, root)
    stack.push("A", child)
    assert len(stack) == 2

    assert stack.pop() == NavigationFrame("A", child)
    frame = stack.pop()
    assert frame.title is None
    assert frame.source is root
    assert stack.pop() is None
