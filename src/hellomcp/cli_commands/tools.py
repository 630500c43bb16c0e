"""``hellomcp tools``: list the tools the server would expose."""

from __future__ import annotations

import json
import sys

import click

from hellomcp.cli_commands._output import console, err_console, print_tools_table


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Settings YAML file.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list result as JSON.")
def tools(config_path: str | None, as_json: bool) -> None:
    """List the bundled tools and their input schemas."""
    from hellomcp.config import ConfigError, load_settings
    from hellomcp.server import create_default_server

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    server = create_default_server(settings)
    descriptions = server.dispatcher.describe_tools()

    if as_json:
        console.print_json(json.dumps({"tools": descriptions}))
        return

    print_tools_table(descriptions)
