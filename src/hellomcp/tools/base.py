"""Tool protocol: the contract every tool served over MCP satisfies.

Tools are supplied by the hosting application and registered on the server
before it starts; the protocol core never enumerates them itself.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

ContentItem = dict[str, Any]

INVALID_ARGUMENTS = "Error: Invalid arguments"


@runtime_checkable
class Tool(Protocol):
    """A named, schema-described unit a client can invoke."""

    @property
    def name(self) -> str:
        """Stable identifier, used as the registry key and in ``tools/call``."""
        ...

    def describe(self) -> dict[str, Any]:
        """Return the tool definition for ``tools/list``.

        The shape is::

            {
                "name": "...",
                "description": "...",
                "inputSchema": {
                    "type": "object",
                    "properties": { ... },
                    "required": [ ... ]
                }
            }
        """
        ...

    def call(self, arguments: str) -> list[ContentItem]:
        """Run the tool with JSON-encoded *arguments*.

        Must not raise for malformed arguments; return a text content item
        describing the problem instead.
        """
        ...


def text_content(text: str) -> list[ContentItem]:
    """Build a content list holding a single text item."""
    return [{"type": "text", "text": text}]
