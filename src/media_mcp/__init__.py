"""media_mcp package initialization."""

from media_mcp.server import MCPServer, ToolResult
from media_mcp.tools import ToolDefinition, ToolParameters

__all__ = ["MCPServer", "ToolDefinition", "ToolParameters", "ToolResult"]
