#!/usr/bin/env python3
"""
Command line entry point: chuk-mcp-scales.

Serves the scale finder tools over stdio (the default, for MCP clients that
spawn the process) or over HTTP.
"""

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_PORT = 8000


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-scales",
        description="Identify musical scales from 7 notes and keep a library of them",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="How MCP clients connect (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on with --transport http (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Where scales_export_csv writes files (default: ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log store and board activity at DEBUG level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse options and serve until the transport closes."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    from chuk_mcp_scales import async_server

    if args.output_dir is None:
        server = async_server.mcp
    else:
        server, _ = async_server.create_server(args.output_dir)

    if args.transport == "stdio":
        logger.info("Serving scale finder tools on stdio")
        asyncio.run(server.run_stdio())
    else:
        logger.info(f"Serving scale finder tools on http port {args.port}")
        asyncio.run(server.run_http(port=args.port))


if __name__ == "__main__":
    main()
