#!/usr/bin/env python3
"""
Command-line entry point for chuk-mcp-melody.

    chuk-mcp-melody                      # stdio, for desktop MCP clients
    chuk-mcp-melody --transport http     # streamable HTTP on port 8000
    chuk-mcp-melody --debug              # log every phrase's chord walk
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_HTTP_PORT = 8000


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the melody server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-melody",
        description="Serve chord-based melody generation tools over MCP.",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help=(
            "stdio when launched by a desktop MCP client, "
            "http to serve several clients over the network (default: stdio)"
        ),
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_HTTP_PORT,
        help=f"Port for the http transport (default: {DEFAULT_HTTP_PORT}; ignored for stdio)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log each generated phrase's beat count and chord names",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse options, then hand the registered tools to the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Importing the server module registers the tools
    from chuk_mcp_melody.async_server import generation_tools, mcp, preset_loader, theory_tools

    logger.info(
        f"{len(theory_tools) + len(generation_tools)} tools, "
        f"{len(preset_loader.list_presets())} presets available"
    )

    if args.transport == "http":
        logger.info(f"Serving melody tools over http on port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))
    else:
        logger.info("Serving melody tools over stdio")
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
