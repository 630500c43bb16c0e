"""Dispatcher: routes one JSON-RPC request to its MCP method handler.

Every input line is handled independently: it either produces exactly one
response envelope or, for the two notification methods, nothing at all.
Protocol failures become error envelopes here and never reach the server
loop.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

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
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolCallParams,
    ToolDescription,
)
from hellomcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_SERVER_NAME,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from hellomcp.protocol.models import ServerInfo
    from hellomcp.tools.base import Tool
    from hellomcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

NOTIFICATIONS = frozenset({"notifications/cancelled", "notifications/initialized"})


class Dispatcher:
    """Maps MCP method names to handlers backed by a :class:`ToolRegistry`.

    Usage::

        dispatcher = Dispatcher(registry, ServerInfo(name="GreetingServer"))
        response = dispatcher.handle_line('{"jsonrpc":"2.0","id":1,"method":"tools/list"}')
        if response is not None:
            transport.send(response)

    With ``wrap_tool_results`` set, a tool's content list is nested inside
    one more text item instead of being returned as ``result.content``.
    Only clients written against that older shape need it.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        server_info: ServerInfo,
        *,
        wrap_tool_results: bool = False,
    ) -> None:
        self._registry = registry
        self._server_info = server_info
        self._wrap_tool_results = wrap_tool_results
        self._handlers: dict[str, Callable[[Any], dict[str, Any]]] = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    def handle_line(self, line: str | bytes) -> JsonRpcResponse | None:
        """Decode one input line and dispatch it.

        Lines that cannot be decoded into a request, including ``bytes``
        that are not UTF-8, get an error envelope with a ``null`` id.
        """
        try:
            request = parse_request(line)
        except ProtocolError as exc:
            logger.warning("Rejected input line: %s", exc)
            return JsonRpcResponse.failure(None, exc.to_error())
        return self.dispatch(request)

    def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Run the handler for *request*; ``None`` means send nothing."""
        with _tracer.start_as_current_span("mcp.request") as span:
            span.set_attribute(ATTR_SERVER_NAME, self._server_info.name)
            span.set_attribute(ATTR_METHOD, request.method)
            if request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))

            if request.method in NOTIFICATIONS:
                logger.debug("Ignoring notification %s", request.method)
                return None

            logger.debug("Handling %s (id=%r)", request.method, request.id)
            try:
                handler = self._handlers.get(request.method)
                if handler is None:
                    raise MethodNotFoundError(request.method)
                result = handler(request.params)
            except ProtocolError as exc:
                span.set_attribute(ATTR_ERROR_CODE, exc.code)
                logger.debug("Request %r failed: %s", request.id, exc)
                return JsonRpcResponse.failure(request.id, exc.to_error())

            return JsonRpcResponse.success(request.id, result)

    def describe_tools(self) -> list[dict[str, Any]]:
        """Return every registered tool's description, sorted by name.

        Raises:
            ToolDescriptionError: If a tool describes itself incorrectly.
        """
        return [describe_tool(tool) for tool in self._registry.list_all()]

    # ------------------------------------------------------------------
    # Method handlers
    # ------------------------------------------------------------------

    def _initialize(self, params: Any) -> dict[str, Any]:  # noqa: ARG002
        result = InitializeResult(server_info=self._server_info)
        return result.model_dump(by_alias=True)

    def _list_tools(self, params: Any) -> dict[str, Any]:  # noqa: ARG002
        return {"tools": self.describe_tools()}

    def _call_tool(self, params: Any) -> dict[str, Any]:
        try:
            call = ToolCallParams.model_validate(params if params is not None else {})
        except ValidationError as exc:
            raise InvalidParamsError(_summarize(exc)) from exc

        tool = self._registry.get(call.name)
        if tool is None:
            raise ToolNotFoundError(call.name)

        with _tracer.start_as_current_span("mcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, call.name)
            logger.debug("Calling tool %s", call.name)
            try:
                content = tool.call(json.dumps(call.arguments))
            except Exception as exc:
                logger.exception("Tool %s raised while handling a call", call.name)
                raise InternalError(f"{call.name}: {exc}") from exc

        try:
            json.dumps(content, allow_nan=False)
        except (TypeError, ValueError) as exc:
            logger.error("Tool %s returned content that is not JSON: %s", call.name, exc)
            raise InternalError(f"{call.name}: result is not JSON: {exc}") from exc

        if self._wrap_tool_results:
            return {"content": [{"type": "text", "text": content}]}
        return {"content": content}


def parse_request(line: str | bytes) -> JsonRpcRequest:
    """Decode one input line into a :class:`JsonRpcRequest`.

    Only strict JSON is accepted: ``NaN`` and ``Infinity`` literals and
    unpaired ``\\u`` surrogate escapes are parse errors.

    Raises:
        ParseError: If the line is not valid UTF-8 or not valid JSON.
        InvalidRequestError: If it is JSON but not a request object.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"invalid UTF-8: {exc}") from exc

    try:
        data = json.loads(line, parse_constant=_reject_constant)
        json.dumps(data, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ParseError("unpaired surrogate in string escape") from exc
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise ParseError("nesting too deep") from exc

    if not isinstance(data, dict):
        raise InvalidRequestError(f"expected a JSON object, got {type(data).__name__}")

    try:
        return JsonRpcRequest.model_validate(data)
    except ValidationError as exc:
        raise InvalidRequestError(_summarize(exc)) from exc


def describe_tool(tool: Tool) -> dict[str, Any]:
    """Return *tool*'s description as a fresh JSON value after validating it."""
    try:
        description = json.loads(json.dumps(tool.describe()))
        parsed = ToolDescription.model_validate(description)
    except (TypeError, ValueError) as exc:
        raise ToolDescriptionError(tool.name, str(exc)) from exc

    if parsed.name != tool.name:
        raise ToolDescriptionError(tool.name, f"describes itself as {parsed.name!r}")
    return description  # type: ignore[no-any-return]


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not a valid JSON value"
    raise ValueError(msg)


def _summarize(exc: ValidationError) -> str:
    """One-line rendering of a pydantic validation error."""
    parts: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)
