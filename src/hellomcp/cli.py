"""hellomcp CLI entrypoint."""

from __future__ import annotations

import click

from hellomcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="hellomcp")
def main() -> None:
    """hellomcp: a minimal MCP server over stdio."""


# Register subcommands
from hellomcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
