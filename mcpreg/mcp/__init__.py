"""MCP (Model Context Protocol) server for mcpreg."""

from .call_tool import call_tool
from .server import MCPServer
from .UnknownToolError import UnknownToolError

__all__ = [
    "MCPServer",
    "UnknownToolError",
    "call_tool",
]
