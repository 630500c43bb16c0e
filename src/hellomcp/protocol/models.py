"""MCP models: JSON-RPC 2.0 messages and MCP payloads.

Implements the message format used by the Model Context Protocol for the
handshake (``initialize``), tool discovery (``tools/list``) and execution
(``tools/call``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PROTOCOL_VERSION = "2024-11-05"
JSONRPC_VERSION = "2.0"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request as read from one input line.

    ``id`` is opaque and echoed verbatim.  ``params`` is left untyped here;
    handlers that need a particular shape validate it themselves.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    method: str = ""
    params: Any = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` / ``error`` is set.  Use :meth:`success` and
    :meth:`failure` rather than the constructor.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request_id: Any, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, error: JsonRpcError) -> JsonRpcResponse:
        return cls(id=request_id, error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self) -> dict[str, Any]:
        """Return the envelope as sent on the wire.

        ``id`` is always present (``null`` when unknown); only the populated
        member of ``result`` / ``error`` is included.
        """
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result if self.result is not None else {}
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ServerInfo(BaseModel):
    """Server identity reported in the ``initialize`` result."""

    name: str
    version: str = "1.0.0"


class InitializeResult(BaseModel):
    """Result payload of ``initialize``."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo = Field(alias="serverInfo")


class ToolCallParams(BaseModel):
    """The ``params`` object of a ``tools/call`` request."""

    name: str = ""
    arguments: Any = Field(default_factory=dict)


class ToolDescription(BaseModel):
    """A tool definition as returned by ``tools/list``.

    Unknown keys are kept so a tool may describe itself beyond the
    required fields.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(min_length=1)
    description: str = ""
    input_schema: dict[str, Any] = Field(alias="inputSchema")
