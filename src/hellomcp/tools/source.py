"""GetSourceCodeTool: returns a source file as an MCP resource."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from hellomcp.tools.base import ContentItem, text_content
from hellomcp.tools.files import encode_file

DEFAULT_SOURCE = Path(__file__).resolve().parent.parent / "server.py"


class GetSourceCodeTool:
    """Serves the contents of one file, by default the server's own source.

    Takes no arguments.  Text files come back as ``text``, anything else
    base64-encoded as ``data``.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_SOURCE

    @property
    def name(self) -> str:
        return "GetSourceCode"

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": f"Gets the source code of {self._path.name} file",
            "inputSchema": {"type": "object", "properties": {}, "required": []},
        }

    def call(self, arguments: str) -> list[ContentItem]:  # noqa: ARG002
        payload = encode_file(self._path)
        if payload is None:
            return text_content(f"Error: Could not read {self._path.name} file")

        resource = {"uri": f"file://{self._path}", **payload}
        return [{"type": "resource", "resource": resource}]
