"""Entry point for the media MCP server."""

from __future__ import annotations

import argparse

import structlog

from media_mcp_server.fastmcp_adapter import build_fastmcp_app
from media_mcp_server.library import MediaLibrary
from media_mcp_server.log import configure_logging
from media_mcp_server.settings import ServerSettings
from media_mcp_server.tool_filter import (
    create_tool_filter,
    load_tool_filter_config,
    log_tool_configuration,
)

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server."""
    parser = argparse.ArgumentParser(description="Media MCP server")
    parser.add_argument(
        "--transport",
        choices=("stdio", "http", "sse"),
        default="stdio",
        help="Transport used to serve the protocol.",
    )
    parser.add_argument("--host", default=None, help="Bind host for HTTP transports.")
    parser.add_argument(
        "--port", type=int, default=None, help="Bind port for HTTP transports."
    )
    parser.add_argument("--path", default=None, help="URL path for HTTP transports.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Resolve configuration, register enabled tools and serve them."""
    args = build_parser().parse_args(argv)

    settings = ServerSettings()
    configure_logging(settings.log_level, settings.log_format)

    tool_filter = create_tool_filter(load_tool_filter_config(settings))
    log_tool_configuration(tool_filter)

    if settings.media_library_path is not None:
        library = MediaLibrary.from_file(settings.media_library_path)
    else:
        library = MediaLibrary()
    logger.info(
        "media_library_loaded",
        movies=len(library.movies()),
        series=len(library.series()),
    )

    app, _ = build_fastmcp_app(library, tool_filter)

    run_kwargs: dict[str, object] = {}
    if args.transport != "stdio":
        for key in ("host", "port", "path"):
            value = getattr(args, key)
            if value is not None:
                run_kwargs[key] = value
    app.run(transport=args.transport, **run_kwargs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
