"""Navigation stack for nested menus."""

from dataclasses import dataclass
from typing import Optional

from pickmenu.core.entries import EntrySource
from pickmenu.utils.debug import debug_nav


@dataclass(frozen=True)
class NavigationFrame:
    """A parent menu level, saved right before descending into a child."""

    title: Optional[str]
    source: EntrySource


class NavigationStack:
    """Parent menu levels, most recent last.

    An empty stack means the controller is at the root menu.
    """

    def __init__(self):
        self._frames: list[NavigationFrame] = []

    def push(self, title: Optional[str], source: EntrySource) -> NavigationFrame:
        frame = NavigationFrame(title=title, source=source)
        self._frames.append(frame)
        debug_nav("push", title=title, depth=len(self._frames))
        return frame

    def pop(self) -> Optional[NavigationFrame]:
        """Remove and return the most recent frame, or None at the root."""
        if not self._frames:
            return None
        frame = self._frames.pop()
        debug_nav("pop", title=frame.title, depth=len(self._frames))
        return frame

    @property
    def depth(self) -> int:
        return len(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)
