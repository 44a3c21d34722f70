"""Debug logging utility."""

import sys
import traceback
from datetime import datetime

from pickmenu.utils.config import Config, get_pickmenu_dir

_config = None

# Stderr output is suspended while a menu owns the screen
_stderr_muted = False


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_pickmenu_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def mute_stderr(muted: bool):
    """Suspend or resume echoing log lines to stderr."""
    global _stderr_muted
    _stderr_muted = muted


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = get_pickmenu_dir() / "debug.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _log_to_stderr(line: str):
    if _stderr_muted:
        return
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'menu', 'nav', 'action', 'render'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[pickmenu:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    _log_to_stderr(line)


def debug_menu(message: str, **kwargs):
    """Log state-machine debug message."""
    debug("menu", message, **kwargs)


def debug_nav(message: str, **kwargs):
    """Log navigation-stack debug message."""
    debug("nav", message, **kwargs)


def debug_action(message: str, **kwargs):
    """Log action-executor debug message."""
    debug("action", message, **kwargs)


def debug_render(message: str, **kwargs):
    """Log renderer debug message."""
    debug("render", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'cli', 'menu'
        message: Error message
        exc: Optional exception to include traceback
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[pickmenu:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    # Errors go to the log file only; the CLI reports them to the user itself
    _log_to_file(line)
