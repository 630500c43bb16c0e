"""ToolRegistry: name-to-tool map owned by the server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hellomcp.tools.base import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Maintains a name-to-tool map.

    Registering a second tool under an existing name replaces the first.
    Listing is ordered by name, not by registration.

    Usage::

        registry = ToolRegistry()
        registry.register(HelloTool())

        tool = registry.get("HelloTool")
        tools = registry.list_all()   # sorted by name
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Add *tool*, replacing any tool already registered under its name."""
        name = tool.name
        if name in self._tools:
            logger.info("Replacing registered tool %s", name)
        else:
            logger.info("Registered tool %s", name)
        self._tools[name] = tool

    def get(self, name: str) -> Tool | None:
        """Look up a tool by exact, case-sensitive name."""
        return self._tools.get(name)

    def list_all(self) -> list[Tool]:
        """Return all tools sorted lexicographically by name."""
        return [self._tools[name] for name in sorted(self._tools)]

    def names(self) -> list[str]:
        return sorted(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self.list_all())

    def __len__(self) -> int:
        return len(self._tools)
