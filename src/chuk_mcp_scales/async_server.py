#!/usr/bin/env python3
"""
Async Scale Finder MCP Server using chuk-mcp-server

This server provides MCP tools for identifying musical scales from 7 notes,
keeping a session library of named scales, and posting to a realtime
message board.

The server provides tools for:
- Matching notes against the known scale templates
- Saving, editing, deleting and searching named scales
- Exporting saved scales to CSV and YAML
- Posting to and reading the message board
"""

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_scales.board import InMemoryBackend, MessageBoard
from chuk_mcp_scales.library import ScaleFinderSession
from chuk_mcp_scales.tools import (
    register_board_tools,
    register_export_tools,
    register_finder_tools,
    register_library_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-scales"

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"


def create_server(output_dir: Path = OUTPUT_DIR) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Build a server with its own session and message board.

    Args:
        output_dir: Directory CSV exports are written to

    Returns:
        The server and its registered tool functions by name
    """
    server = ChukMCPServer(SERVER_NAME)
    session = ScaleFinderSession()
    board = MessageBoard(InMemoryBackend())

    tools: dict[str, Any] = {}
    tools.update(register_finder_tools(server, session))
    tools.update(register_library_tools(server, session))
    tools.update(register_export_tools(server, session, output_dir))
    tools.update(register_board_tools(server, board))

    logger.info("Scale Finder MCP Server initialized")
    logger.info(f"  Output dir: {output_dir}")
    return server, tools


mcp, _tools = create_server()

# Export tool functions for direct access
scales_find = _tools["scales_find"]
scales_list_templates = _tools["scales_list_templates"]

scales_save = _tools["scales_save"]
scales_edit = _tools["scales_edit"]
scales_update = _tools["scales_update"]
scales_delete = _tools["scales_delete"]
scales_reset = _tools["scales_reset"]
scales_query = _tools["scales_query"]
scales_list_types = _tools["scales_list_types"]

scales_export_csv = _tools["scales_export_csv"]
scales_export_yaml = _tools["scales_export_yaml"]
scales_import_yaml = _tools["scales_import_yaml"]

board_post = _tools["board_post"]
board_messages = _tools["board_messages"]
