"""Tools: the contract, the registry, and the bundled example tools."""

from hellomcp.tools.base import Tool, text_content
from hellomcp.tools.hello import HelloTool
from hellomcp.tools.registry import ToolRegistry
from hellomcp.tools.source import GetSourceCodeTool

__all__ = [
    "GetSourceCodeTool",
    "HelloTool",
    "Tool",
    "ToolRegistry",
    "text_content",
]
