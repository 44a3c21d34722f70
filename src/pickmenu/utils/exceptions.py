"""Custom exceptions for pickmenu.

This module defines a hierarchy of exceptions for different error types:
- PickmenuError: Base exception for all pickmenu errors
- InputError: Menu input that cannot be turned into a navigable page
- InvalidNestedResultError: A nested menu could not be opened
- ActionExecutionError: An entry action failed (with optional return code)
- TerminalUnavailableError: Not running in an interactive terminal
- ConfigurationError: Configuration related errors
"""

from typing import Optional


class PickmenuError(Exception):
    """Base exception for all pickmenu errors.

    All pickmenu-specific exceptions inherit from this class, allowing
    callers to catch all pickmenu errors with a single except clause.
    """

    pass


class InputError(PickmenuError):
    """Menu input errors.

    Raised when a menu level is initialized, such as:
    - Input that is neither a sequence nor a mapping
    - Input with no entries
    - A viewport too small to show a single row
    """

    pass


class UnsupportedInputKindError(InputError):
    """Input is neither a sequence of names nor a name -> action mapping."""

    pass


class EmptyEntriesError(InputError):
    """Input produced zero entries, so there is nothing to navigate."""

    pass


class InvalidEntryError(InputError):
    """An entry has no usable display name."""

    pass


class ViewportTooSmallError(InputError):
    """Terminal is too short to show at least one entry row.

    Attributes:
        height: Viewport height that was rejected
    """

    def __init__(self, message: str, height: Optional[int] = None):
        super().__init__(message)
        self.height = height


class InvalidNestedResultError(PickmenuError):
    """Opening a nested menu yielded nothing usable.

    Raised when evaluating a nested action returns an empty result or
    something that is not a list of choices. Fatal to the whole session.
    """

    pass


class ActionExecutionError(PickmenuError):
    """Entry action failed.

    Attributes:
        returncode: Optional exit status of the failed command
    """

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


class TerminalUnavailableError(PickmenuError):
    """Host is not an interactive terminal capable of raw key reads."""

    pass


class ConfigurationError(PickmenuError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Wrong value types in config.json
    - Invalid env var overrides
    """

    pass
