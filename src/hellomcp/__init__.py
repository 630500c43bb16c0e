"""hellomcp: a minimal Model Context Protocol server over stdio."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from hellomcp.server import MCPServer as MCPServer
    from hellomcp.server import create_default_server as create_default_server

_SERVER_EXPORTS = {
    "MCPServer": "hellomcp.server",
    "create_default_server": "hellomcp.server",
}


def __getattr__(name: str) -> object:
    module_path = _SERVER_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'hellomcp' has no attribute {name!r}")
