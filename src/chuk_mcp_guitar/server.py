#!/usr/bin/env python3
"""
Entry point for the CHUK Guitar MCP Server.

Usage:
    chuk-mcp-guitar                       # stdio transport
    chuk-mcp-guitar --transport http --port 8000
    chuk-mcp-guitar --output-dir ./midi   # where MIDI exports are written
"""

import argparse
import asyncio
import logging
import os

from chuk_mcp_guitar.constants import OUTPUT_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(description="CHUK Guitar MCP Server")
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
        "--output-dir",
        default=None,
        help=f"Directory for exported MIDI files (default: ./output, or ${OUTPUT_DIR_ENV})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Parse options, then start the server on the chosen transport."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.output_dir:
        os.environ[OUTPUT_DIR_ENV] = args.output_dir

    # Tools register on import, after the output dir is settled
    from chuk_mcp_guitar.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Guitar MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Guitar MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
