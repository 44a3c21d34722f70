"""Constants used throughout pickmenu."""

# Rows taken by the page chrome (blank lines + page indicator)
CHROME_ROWS = 5

# Extra rows when a title line is drawn above the entries
CHROME_ROWS_WITH_TITLE = 7

# Minimum width of the entry column
DEFAULT_MIN_WIDTH = 30

# Width added to the entry column in multi-select mode ("[X] ")
CHECKBOX_WIDTH = 4

# Reserved prefix: "@cmd" opens the output of cmd as a nested menu
DEFAULT_NESTED_PREFIX = "@"

# Suffix drawn after entries that open a nested menu
DEFAULT_NESTED_INDICATOR = " >"

# Window title used while the current level has no title
DEFAULT_TITLE = "Menu"

DEFAULT_FOREGROUND = "white"
DEFAULT_BACKGROUND = "black"

# Seconds to wait after ESC for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05

# Bytes taken per raw read; larger than any single key sequence
READ_CHUNK = 64


class Checkbox:
    """Multi-select row markers."""

    CHECKED = "[X]"
    UNCHECKED = "[ ]"


class Escape:
    """Raw terminal control sequences."""

    HIDE_CURSOR = "\033[?25l"
    SHOW_CURSOR = "\033[?25h"
    PUSH_TITLE = "\033[22;0t"
    POP_TITLE = "\033[23;0t"
    # OSC 0 sets icon name and window title
    SET_TITLE = "\033]0;{title}\007"
