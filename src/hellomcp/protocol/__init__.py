"""Protocol layer: JSON-RPC envelopes, error codes and the stdio transport."""

from hellomcp.protocol.errors import (
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    ToolDescriptionError,
    ToolNotFoundError,
)
from hellomcp.protocol.models import (
    PROTOCOL_VERSION,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolCallParams,
    ToolDescription,
)
from hellomcp.protocol.transport import MCPTransport, StdioTransport

__all__ = [
    "PROTOCOL_VERSION",
    "InitializeResult",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPTransport",
    "MethodNotFoundError",
    "ParseError",
    "ProtocolError",
    "ServerInfo",
    "StdioTransport",
    "ToolCallParams",
    "ToolDescription",
    "ToolDescriptionError",
    "ToolNotFoundError",
]
