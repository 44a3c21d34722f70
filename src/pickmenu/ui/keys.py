"""Logical keys and what they do in a menu."""

from enum import Enum
from typing import Optional

import readchar


class Key(Enum):
    """Logical keys the menu understands."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    SPACE = "space"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    INSERT = "insert"
    DELETE = "delete"
    CTRL_C = "ctrl_c"


class MenuEvent(Enum):
    """Controller inputs, independent of the key that produced them."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    JUMP_TOP = "jump_top"
    JUMP_BOTTOM = "jump_bottom"
    PAGE_NEXT = "page_next"
    PAGE_PREV = "page_prev"
    TOGGLE_SELECT = "toggle_select"
    SELECT_ALL = "select_all"
    SELECT_NONE = "select_none"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    QUIT = "quit"


KEY_BINDINGS: dict[Key, MenuEvent] = {
    Key.UP: MenuEvent.MOVE_UP,
    Key.DOWN: MenuEvent.MOVE_DOWN,
    Key.LEFT: MenuEvent.PAGE_PREV,
    Key.PAGE_UP: MenuEvent.PAGE_PREV,
    Key.RIGHT: MenuEvent.PAGE_NEXT,
    Key.PAGE_DOWN: MenuEvent.PAGE_NEXT,
    Key.HOME: MenuEvent.JUMP_TOP,
    Key.END: MenuEvent.JUMP_BOTTOM,
    Key.SPACE: MenuEvent.TOGGLE_SELECT,
    Key.ENTER: MenuEvent.CONFIRM,
    Key.ESCAPE: MenuEvent.CANCEL,
    Key.BACKSPACE: MenuEvent.CANCEL,
    Key.INSERT: MenuEvent.SELECT_ALL,
    Key.DELETE: MenuEvent.SELECT_NONE,
    Key.CTRL_C: MenuEvent.QUIT,
}

ESC = readchar.key.ESC

# readchar sequences -> logical keys
_RAW_KEYS: dict[str, Key] = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    readchar.key.LEFT: Key.LEFT,
    readchar.key.RIGHT: Key.RIGHT,
    readchar.key.PAGE_UP: Key.PAGE_UP,
    readchar.key.PAGE_DOWN: Key.PAGE_DOWN,
    readchar.key.HOME: Key.HOME,
    readchar.key.END: Key.END,
    readchar.key.SPACE: Key.SPACE,
    readchar.key.ENTER: Key.ENTER,
    readchar.key.CR: Key.ENTER,
    readchar.key.LF: Key.ENTER,
    readchar.key.ESC: Key.ESCAPE,
    readchar.key.BACKSPACE: Key.BACKSPACE,
    readchar.key.INSERT: Key.INSERT,
    readchar.key.DELETE: Key.DELETE,
    readchar.key.CTRL_C: Key.CTRL_C,
    # Home/End as sent by rxvt/screen and application keypad mode
    "\x1b[1~": Key.HOME,
    "\x1b[4~": Key.END,
    "\x1bOH": Key.HOME,
    "\x1bOF": Key.END,
    # Ctrl+H backspace
    "\x08": Key.BACKSPACE,
}

_VIM_KEYS: dict[str, Key] = {
    "k": Key.UP,
    "j": Key.DOWN,
    "g": Key.HOME,
    "G": Key.END,
    "q": Key.ESCAPE,
}


def translate(raw: str, vim_keys: bool = False) -> Optional[Key]:
    """Translate a raw readchar key into a logical Key, or None if unknown."""
    key = _RAW_KEYS.get(raw)
    if key is None and vim_keys:
        key = _VIM_KEYS.get(raw)
    return key


def split_key(buffer: str) -> tuple[Optional[str], str]:
    """Split the first keypress off a burst of terminal input.

    Returns (key, rest). The key is None while the buffer holds only the
    start of an escape sequence, since a lone ESC is indistinguishable from
    the first byte of an arrow key until more input arrives or a timeout
    passes.
    """
    if not buffer:
        return None, buffer
    if buffer[0] != ESC:
        return buffer[0], buffer[1:]
    if len(buffer) == 1:
        return None, buffer

    introducer = buffer[1]
    if introducer == ESC:
        # Escape pressed right before another escaped key
        return ESC, buffer[1:]
    if introducer == "[":
        # CSI: parameters up to a final byte in @..~
        for i in range(2, len(buffer)):
            if "@" <= buffer[i] <= "~":
                return buffer[: i + 1], buffer[i + 1 :]
        return None, buffer
    if introducer == "O":
        if len(buffer) < 3:
            return None, buffer
        return buffer[:3], buffer[3:]
    # Alt+key
    return buffer[:2], buffer[2:]


def event_for(key: Optional[Key]) -> Optional[MenuEvent]:
    """Look up the menu event bound to a key."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)
