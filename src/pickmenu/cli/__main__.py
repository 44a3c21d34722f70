"""Allow `python -m pickmenu.cli`."""

from pickmenu.cli import cli_main

cli_main()
