#!/usr/bin/env python3
"""
Entry point for the Capo Finder MCP Server.

Serves the capo tools over stdio (default) or http.
"""

import argparse
import asyncio
import logging

from capo_finder.cli import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(
        prog="capo-finder-mcp", description="Capo Finder MCP Server"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    configure_logging(args.debug, default_level=logging.INFO)

    # Importing the server registers every tool
    from capo_finder.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting Capo Finder MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting Capo Finder MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
