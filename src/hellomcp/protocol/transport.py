"""MCP transports: the line-oriented stdio communication layer.

A transport satisfies the :class:`MCPTransport` protocol, providing
``read_lines`` to consume one logical request per line and ``send`` to emit
one response per line.
"""

from __future__ import annotations

import json
import sys
from typing import IO, TYPE_CHECKING, Any, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hellomcp.protocol.models import JsonRpcResponse


@runtime_checkable
class MCPTransport(Protocol):
    """Abstract transport for MCP JSON-RPC communication."""

    def read_lines(self) -> Iterator[str | bytes]: ...
    def send(self, response: JsonRpcResponse) -> None: ...


class StdioTransport:
    """Communicates with an MCP client over an input and an output stream.

    Reads and writes newline-delimited JSON.  Defaults to the process's
    stdin/stdout; pass other streams to embed the server or to test it.

    Input is read from the binary layer underneath a text stream when there
    is one, so undecodable bytes reach the dispatcher as a bad line instead
    of failing the read.
    """

    def __init__(self, stdin: IO[Any] | None = None, stdout: TextIO | None = None) -> None:
        source = stdin if stdin is not None else sys.stdin
        self._stdin: IO[Any] = getattr(source, "buffer", source)
        self._stdout = stdout if stdout is not None else sys.stdout

    def read_lines(self) -> Iterator[str | bytes]:
        """Yield each non-blank input line until the stream ends.

        Lines are ``bytes`` for binary streams and ``str`` otherwise.
        """
        for raw in self._stdin:
            line = raw.rstrip(b"\r\n" if isinstance(raw, bytes) else "\r\n")
            if not line.strip():
                continue
            yield line

    def send(self, response: JsonRpcResponse) -> None:
        """Write the envelope as a single JSON line and flush.

        Raises:
            ValueError: If the envelope holds a non-finite float.
        """
        line = json.dumps(
            response.to_wire(),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
        self._stdout.write(line + "\n")
        self._stdout.flush()
