"""Command-line inspection of the tool catalog and resolved tool filter."""

from __future__ import annotations

import argparse
import json

from media_mcp.server import MCPServer
from media_mcp_server.catalog import DEFAULT_CATALOG
from media_mcp_server.library import MediaLibrary
from media_mcp_server.log import configure_logging
from media_mcp_server.settings import ServerSettings
from media_mcp_server.tool_filter import create_tool_filter, load_tool_filter_config
from media_mcp_server.tools import build_tools


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description="Inspect the media MCP tool configuration."
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--catalog",
        action="store_true",
        help="Print the enabled tool catalog as JSON.",
    )
    group.add_argument(
        "--profiles",
        action="store_true",
        help="Print the available tool profiles as JSON.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.profiles:
        profiles = {
            profile.name: {
                "description": profile.description,
                "branches": list(profile.branches),
                "tool_count": len(DEFAULT_CATALOG.resolve_profile(profile.name)),
            }
            for profile in DEFAULT_CATALOG.profiles
        }
        print(json.dumps(profiles, indent=2))
        return 0

    settings = ServerSettings()
    configure_logging(settings.log_level, settings.log_format)
    tool_filter = create_tool_filter(load_tool_filter_config(settings))

    if args.catalog:
        server = MCPServer()
        server.register_enabled(build_tools(MediaLibrary()), tool_filter)
        print(json.dumps(server.to_catalog(), indent=2))
        return 0

    print(
        json.dumps(
            {
                "profile": tool_filter.config.profile,
                "tools": sorted(tool_filter.enabled_tools),
            }
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
