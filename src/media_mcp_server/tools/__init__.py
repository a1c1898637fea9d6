"""Tool registration helpers for the media MCP server."""

from __future__ import annotations

from media_mcp.tools import ToolDefinition
from media_mcp_server.library import MediaLibrary
from media_mcp_server.tools.radarr import get_movie_tool, get_movies_tool
from media_mcp_server.tools.sonarr import get_series_by_id_tool, get_series_tool


def build_tools(library: MediaLibrary) -> list[ToolDefinition]:
    """Instantiate all tool definitions backed by ``library``."""
    return [
        get_movies_tool(library),
        get_movie_tool(library),
        get_series_tool(library),
        get_series_by_id_tool(library),
    ]
