#!/usr/bin/env python3
"""
Entry point for the CHUK Theme MCP Server.

Serves the theme tools over stdio (default) or http.
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Theme MCP Server")
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
        "--themes-dir",
        type=Path,
        default=None,
        help="Project themes directory (default: ./themes)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for generated files (default: ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_theme.async_server import OUTPUT_DIR, THEMES_DIR, create_server

    mcp, _ = create_server(
        themes_dir=args.themes_dir or THEMES_DIR,
        output_dir=args.output_dir or OUTPUT_DIR,
    )

    if args.transport == "stdio":
        logger.info("Starting CHUK Theme MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Theme MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
