"""Entry model: turns caller input into a uniform list of menu entries.

Caller input is resolved once into an ``EntrySource``:

- ``SequenceSource``: a flat, ordered list of names
- ``MappingSource``: ordered ``(name, action)`` pairs, where an action is a
  command string, ``None``, or another source (a nested menu)

``build_entries`` classifies every pair into a ``MenuEntry`` so the
controller never has to inspect raw input types again.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from pickmenu.utils.constants import DEFAULT_NESTED_PREFIX
from pickmenu.utils.exceptions import (
    EmptyEntriesError,
    InvalidEntryError,
    UnsupportedInputKindError,
)


class ActionKind(Enum):
    """What confirming an entry does."""

    NONE = "none"
    INLINE_EXECUTE = "inline_execute"
    OPEN_NESTED = "open_nested"


@dataclass(frozen=True)
class SequenceSource:
    """Flat ordered list of names."""

    items: tuple[str, ...]


@dataclass(frozen=True)
class MappingSource:
    """Ordered name -> action pairs."""

    items: tuple[tuple[str, "ActionSpec"], ...]


EntrySource = Union[SequenceSource, MappingSource]
ActionSpec = Union[str, None, SequenceSource, MappingSource]
# Command string or nested source attached to a classified entry
ActionRef = Union[str, SequenceSource, MappingSource]


@dataclass
class MenuEntry:
    """A displayable menu row."""

    display_name: str
    action_kind: ActionKind = ActionKind.NONE
    action: Optional[ActionRef] = None
    selected: bool = False

    def __post_init__(self):
        if not self.display_name:
            raise InvalidEntryError("Menu entries need a non-empty display name")

    @property
    def opens_nested(self) -> bool:
        return self.action_kind is ActionKind.OPEN_NESTED


def _to_name(value: Any) -> str:
    # Numbers are common in generated lists, so stringify them
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise UnsupportedInputKindError(
        f"Menu names must be strings, got {type(value).__name__}"
    )


def _to_action(value: Any) -> ActionSpec:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (SequenceSource, MappingSource, Mapping, list, tuple)):
        return to_source(value)
    raise UnsupportedInputKindError(
        f"Menu actions must be strings or nested menus, got {type(value).__name__}"
    )


def to_source(raw: Any) -> EntrySource:
    """Resolve caller input into an EntrySource.

    Accepts an existing source, a mapping (dict order is kept) or a
    list/tuple of names.

    Raises:
        UnsupportedInputKindError: if ``raw`` is none of those
    """
    if isinstance(raw, (SequenceSource, MappingSource)):
        return raw
    if isinstance(raw, Mapping):
        return MappingSource(
            tuple((_to_name(key), _to_action(value)) for key, value in raw.items())
        )
    if isinstance(raw, (list, tuple)):
        return SequenceSource(tuple(_to_name(item) for item in raw))
    raise UnsupportedInputKindError(
        f"Menu input must be a list or a mapping, got {type(raw).__name__}"
    )


def _classify(
    value: ActionSpec, nesting_allowed: bool, nested_prefix: str
) -> tuple[ActionKind, Optional[ActionRef]]:
    if value is None or value == "":
        return ActionKind.NONE, None

    if isinstance(value, (SequenceSource, MappingSource)):
        if nesting_allowed:
            return ActionKind.OPEN_NESTED, value
        return ActionKind.NONE, None

    if nested_prefix and value.startswith(nested_prefix):
        command = value[len(nested_prefix) :]
        if nesting_allowed:
            return ActionKind.OPEN_NESTED, command
        # Without nesting the command still runs, just inline
        if command:
            return ActionKind.INLINE_EXECUTE, command
        return ActionKind.NONE, None

    return ActionKind.INLINE_EXECUTE, value


def build_entries(
    source: Any,
    sort: bool = False,
    multi_select: bool = False,
    ignore_nested: bool = False,
    nested_prefix: str = DEFAULT_NESTED_PREFIX,
) -> list[MenuEntry]:
    """Build the ordered entry list for one menu level.

    Args:
        source: EntrySource or raw list/mapping
        sort: Stable-sort entries by display name (ordinal)
        multi_select: Multi-select mode, which never opens nested menus
        ignore_nested: Treat nested values as plain entries
        nested_prefix: Marker that turns a command string into a nested menu

    Returns:
        List of fresh MenuEntry values, none selected

    Raises:
        UnsupportedInputKindError: input is neither a sequence nor a mapping
        EmptyEntriesError: input has no entries
    """
    source = to_source(source)

    if isinstance(source, SequenceSource):
        entries = [MenuEntry(name) for name in source.items]
    else:
        nesting_allowed = not (multi_select or ignore_nested)
        entries = []
        for name, value in source.items:
            kind, action = _classify(value, nesting_allowed, nested_prefix)
            entries.append(MenuEntry(name, action_kind=kind, action=action))

    if not entries:
        raise EmptyEntriesError("Menu has no entries")

    if sort:
        # sorted() is stable and str comparison is by code point
        entries = sorted(entries, key=lambda entry: entry.display_name)

    return entries
