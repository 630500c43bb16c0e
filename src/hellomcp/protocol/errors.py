"""Shared error types for the protocol layer.

Every :class:`ProtocolError` carries a JSON-RPC error code and is turned
into an error envelope at the request boundary; none of them stop the
server loop.
"""

from __future__ import annotations

from hellomcp.protocol.models import JsonRpcError

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""

    code: int = INTERNAL_ERROR

    def to_error(self) -> JsonRpcError:
        return JsonRpcError(code=self.code, message=str(self))


class ParseError(ProtocolError):
    """An input line is not valid JSON."""

    code = PARSE_ERROR

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Parse error: {detail}")


class InvalidRequestError(ProtocolError):
    """An input line is valid JSON but not a request object."""

    code = INVALID_REQUEST

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid Request: {detail}")


class MethodNotFoundError(ProtocolError):
    """The request names a method this server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class InvalidParamsError(ProtocolError):
    """The request parameters have the wrong shape."""

    code = INVALID_PARAMS

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid params: {detail}")


class ToolNotFoundError(InvalidParamsError):
    """``tools/call`` names a tool that is not registered.

    Reported with the invalid-params code but a "method not found" message,
    which is what existing MCP clients of this server expect.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.detail = name
        ProtocolError.__init__(self, f"Method not found: {name}")


class InternalError(ProtocolError):
    """A tool or handler failed unexpectedly."""

    code = INTERNAL_ERROR

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Internal error" + (f": {detail}" if detail else ""))


class ToolDescriptionError(Exception):
    """A tool's ``describe()`` output is not a valid description.

    This is a bug in the tool, not a runtime condition, so it is not a
    :class:`ProtocolError` and is not recovered by the dispatcher.
    """

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(
            f"Invalid description for tool {name!r}" + (f": {detail}" if detail else "")
        )
