"""CLI command handlers."""

import json
import sys
from pathlib import Path

from pickmenu.utils.config import Config, get_pickmenu_dir
from pickmenu.utils.debug import log_error
from pickmenu.utils.exceptions import InputError, PickmenuError

# Exit status when the user cancels the menu
EXIT_CANCELLED = 1
# Exit status when the menu fails
EXIT_ERROR = 2


def _load_entries(args):
    """Menu input from a JSON file or from positional items."""
    if args.json_path and args.items:
        raise InputError("Pass either items or --json, not both")
    if not args.json_path:
        return list(args.items or [])

    path = Path(args.json_path)
    try:
        return json.loads(path.read_text())
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputError(f"{path} is not valid JSON: {e}") from e


def cmd_pick(args) -> int:
    """Show a menu and print the picked entries. Returns the exit status."""
    from rich.console import Console
    from rich.markup import escape

    from pickmenu.core.controller import run_menu
    from pickmenu.ui.terminal import RichTerminal

    # The menu draws on stderr so stdout carries only the result
    err_console = Console(stderr=True, highlight=False)

    try:
        config = Config(get_pickmenu_dir())
        entries = _load_entries(args)
        result = run_menu(
            entries,
            title=args.title,
            sort=args.sort,
            multi_select=args.multi,
            ignore_nested=args.ignore_nested,
            terminal=RichTerminal(console=err_console, config=config),
            config=config,
        )
    except PickmenuError as e:
        log_error("cli", f"pick failed: {e}", e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return EXIT_ERROR

    if result is None:
        return EXIT_CANCELLED
    if isinstance(result, list):
        for name in result:
            print(name)
    else:
        print(result)
    return 0


def cmd_status(args):
    """Show current settings."""
    from rich.console import Console

    console = Console(highlight=False)
    pickmenu_dir = get_pickmenu_dir()
    config = Config(pickmenu_dir)

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    console.print(f"[bold]Config:[/bold] [dim]{pickmenu_dir}[/dim]")

    for attr, desc, enabled in config.get_toggles():
        if attr == "debug":
            continue
        mark = "[blue]✓[/blue]" if enabled else "[dim]·[/dim]"
        console.print(f"  {mark} {attr:<16} [dim]{desc}[/dim]")

    console.print(f"  [bold]nested prefix:[/bold] {config.nested_prefix}")
    console.print(f"  [bold]min width:[/bold] {config.min_width}")
    console.print(f"  [bold]colors:[/bold] {config.foreground} on {config.background}")
    console.print(f"  [bold]shell:[/bold] {config.shell or '/bin/sh'}")


def cmd_debug_on(args):
    """Enable debug logging."""
    config = Config(get_pickmenu_dir())
    config.set_toggle("debug", True)
    print(f"Debug logging enabled. Log: {config.log_path}")


def cmd_debug_off(args):
    """Disable debug logging."""
    config = Config(get_pickmenu_dir())
    config.set_toggle("debug", False)
    print("Debug logging disabled.")


def cmd_env_list(args):
    """List env var overrides."""
    config = Config(get_pickmenu_dir())
    overrides = config.list_env()
    if not overrides:
        print("No env overrides set.")
        return
    for key, value in sorted(overrides.items()):
        print(f"{key}={value}")


def cmd_env_set(args):
    """Set an env var override."""
    config = Config(get_pickmenu_dir())
    try:
        config.set_env(args.key, args.value)
    except PickmenuError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    print(f"Set {args.key}={args.value}")


def cmd_env_unset(args):
    """Remove an env var override."""
    config = Config(get_pickmenu_dir())
    if config.unset_env(args.key):
        print(f"Removed {args.key}")
    else:
        print(f"{args.key} was not set")
