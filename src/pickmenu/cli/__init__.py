"""CLI entry point for pickmenu.

Uses Typer for command routing with lazy loading, so `status` and the
config commands never import the menu machinery.
"""

from typing import List, Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="pickmenu",
    help="Keyboard-driven selection menus for the terminal",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Pick entries from an interactive terminal menu."""


@app.command()
def pick(
    items: Optional[List[str]] = typer.Argument(None, help="Entries to choose from"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Menu title"),
    sort: bool = typer.Option(False, "--sort", help="Sort entries by name"),
    multi: bool = typer.Option(False, "--multi", "-m", help="Multi-select"),
    ignore_nested: bool = typer.Option(
        False, "--ignore-nested", help="Do not open nested menus"
    ),
    json_path: Optional[str] = typer.Option(
        None, "--json", help="JSON file with a list or a name -> action object"
    ),
) -> None:
    """Show a menu and print the picked entry (one per line with --multi)."""
    from pickmenu.cli.commands import cmd_pick

    class Args:
        def __init__(self):
            self.items = items
            self.title = title
            self.sort = sort
            self.multi = multi
            self.ignore_nested = ignore_nested
            self.json_path = json_path

    raise typer.Exit(cmd_pick(Args()))


@app.command()
def status() -> None:
    """Show current settings."""
    from pickmenu.cli.commands import cmd_status

    cmd_status(None)


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from pickmenu.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from pickmenu.cli.commands import cmd_debug_off

    cmd_debug_off(None)


# Env subcommand group
env_app = typer.Typer(help="Manage env var overrides")
app.add_typer(env_app, name="env")


@env_app.command("list")
def env_list() -> None:
    """List env var overrides."""
    from pickmenu.cli.commands import cmd_env_list

    cmd_env_list(None)


@env_app.command("set")
def env_set(key: str, value: str) -> None:
    """Set an env var override."""
    from pickmenu.cli.commands import cmd_env_set

    class Args:
        def __init__(self):
            self.key = key
            self.value = value

    cmd_env_set(Args())


@env_app.command("unset")
def env_unset(key: str) -> None:
    """Remove an env var override."""
    from pickmenu.cli.commands import cmd_env_unset

    class Args:
        def __init__(self):
            self.key = key

    cmd_env_unset(Args())


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
