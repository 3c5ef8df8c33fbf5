"""
MCP tool implementations.

Tools are organized by domain:
- finder - Scale identification
- library - Saved scale lifecycle and browsing
- export - CSV and YAML export, YAML import
- board - Realtime message board
"""

from chuk_mcp_scales.tools.board import register_board_tools
from chuk_mcp_scales.tools.export import register_export_tools
from chuk_mcp_scales.tools.finder import register_finder_tools
from chuk_mcp_scales.tools.library import register_library_tools

__all__ = [
    "register_board_tools",
    "register_export_tools",
    "register_finder_tools",
    "register_library_tools",
]
