"""MCPServer: runs the read, dispatch, write loop over stdio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hellomcp.dispatcher import Dispatcher
from hellomcp.protocol.models import ServerInfo
from hellomcp.protocol.transport import StdioTransport
from hellomcp.tools.hello import HelloTool
from hellomcp.tools.registry import ToolRegistry
from hellomcp.tools.source import GetSourceCodeTool

if TYPE_CHECKING:
    from hellomcp.config import ServerSettings
    from hellomcp.protocol.transport import MCPTransport
    from hellomcp.tools.base import Tool

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "1.0.0"


class MCPServer:
    """A minimal MCP server exposing registered tools over JSON-RPC.

    Usage::

        server = MCPServer("GreetingServer")
        server.register_tool(HelloTool())
        server.run()          # blocks until stdin is closed

    Requests are handled one at a time, in arrival order.
    """

    def __init__(
        self,
        name: str,
        version: str = DEFAULT_VERSION,
        *,
        wrap_tool_results: bool = False,
    ) -> None:
        if not name:
            msg = "MCPServer requires a non-empty name"
            raise ValueError(msg)
        self._info = ServerInfo(name=name, version=version)
        self._registry = ToolRegistry()
        self._dispatcher = Dispatcher(
            self._registry,
            self._info,
            wrap_tool_results=wrap_tool_results,
        )

    @classmethod
    def from_settings(cls, settings: ServerSettings) -> MCPServer:
        return cls(
            settings.name,
            settings.version,
            wrap_tool_results=settings.wrap_tool_results,
        )

    @property
    def server_info(self) -> ServerInfo:
        return self._info

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def register_tool(self, tool: Tool) -> None:
        """Register *tool*, replacing any tool with the same name."""
        self._registry.register(tool)

    def run(self, transport: MCPTransport | None = None) -> None:
        """Serve requests from *transport* (stdio by default) until input ends.

        Tool descriptions are checked before the first line is read, so a
        badly described tool fails at startup rather than on ``tools/list``.
        """
        transport = transport or StdioTransport()
        self._dispatcher.describe_tools()

        logger.info(
            "%s %s serving %d tool(s)",
            self._info.name,
            self._info.version,
            len(self._registry),
        )
        for line in transport.read_lines():
            response = self._dispatcher.handle_line(line)
            if response is not None:
                transport.send(response)
        logger.info("Input closed, %s shutting down", self._info.name)


def create_default_server(settings: ServerSettings | None = None) -> MCPServer:
    """Build the stock greeting server with the bundled tools registered."""
    if settings is None:
        server = MCPServer("GreetingServer")
        source_path = None
    else:
        server = MCPServer.from_settings(settings)
        source_path = settings.source_path

    server.register_tool(HelloTool())
    server.register_tool(GetSourceCodeTool(source_path))
    return server
