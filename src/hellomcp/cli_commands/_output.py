"""Shared CLI output and logging helpers.

``serve`` owns stdout for the protocol, so anything it prints for humans
goes through :data:`err_console`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records at *level* and above to stderr."""
    logging.basicConfig(level=level.upper(), stream=sys.stderr, format=LOG_FORMAT, force=True)


def print_tools_table(descriptions: list[dict[str, Any]]) -> None:
    """Pretty-print tool descriptions (``tools/list`` shape) as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Arguments")

    for description in descriptions:
        schema = description.get("inputSchema", {})
        required = set(schema.get("required", []))
        arguments = ", ".join(
            f"{arg}*" if arg in required else arg for arg in schema.get("properties", {})
        )
        table.add_row(
            description.get("name", "?"),
            _truncate(description.get("description", "")),
            arguments or "-",
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
