"""Model Context Protocol server for movie and series libraries."""

from media_mcp_server.catalog import DEFAULT_CATALOG, ToolCatalog
from media_mcp_server.errors import MCPError, UnknownProfileError
from media_mcp_server.filtering import MovieFilters, SeriesFilters, apply_filters
from media_mcp_server.library import MediaLibrary
from media_mcp_server.pagination import PageResult, paginate
from media_mcp_server.sorting import MovieSort, SeriesSort, sort_items
from media_mcp_server.tool_filter import ToolFilter, ToolFilterConfig

__all__ = [
    "DEFAULT_CATALOG",
    "MCPError",
    "MediaLibrary",
    "MovieFilters",
    "MovieSort",
    "PageResult",
    "SeriesFilters",
    "SeriesSort",
    "ToolCatalog",
    "ToolFilter",
    "ToolFilterConfig",
    "UnknownProfileError",
    "apply_filters",
    "paginate",
    "sort_items",
]
