"""Adapters for exposing media tools via FastMCP."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog
from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult

from media_mcp.tools import ToolDefinition
from media_mcp_server.library import MediaLibrary
from media_mcp_server.tool_filter import ToolFilter
from media_mcp_server.tools import build_tools

logger = structlog.get_logger(__name__)


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition) -> None:
        """Create a FastMCP tool wrapper for the provided definition."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.parameters_model.model_json_schema(),
            output_schema=definition.output_schema,
            tags=set(),
        )
        self._definition = definition

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Validate arguments and delegate to the wrapped handler."""
        validated_arguments = self._definition.validate(arguments)
        payload = self._definition.handler(validated_arguments)
        return ToolResult(structured_content=payload)


def to_fastmcp_tools(tool_definitions: Sequence[ToolDefinition]) -> list[Tool]:
    """Convert tool definitions into FastMCP-compatible tools."""
    return [ToolDefinitionAdapter(definition) for definition in tool_definitions]


def build_fastmcp_app(
    library: MediaLibrary, tool_filter: ToolFilter
) -> tuple[FastMCP, list[ToolDefinition]]:
    """Create a FastMCP server exposing the tools enabled by ``tool_filter``.

    Returns:
        The FastMCP app and the tool definitions that were registered.
    """
    app = FastMCP(
        name="media-mcp-server",
        instructions=(
            "Movie and series library tools exposed over the Model Context Protocol."
        ),
    )
    enabled: list[ToolDefinition] = []
    for definition in build_tools(library):
        if tool_filter.is_enabled(definition.name):
            enabled.append(definition)
        else:
            logger.debug("tool_disabled", tool=definition.name)
    for tool in to_fastmcp_tools(enabled):
        app.add_tool(tool)
    logger.info("tools_registered", count=len(enabled))
    return app, enabled
