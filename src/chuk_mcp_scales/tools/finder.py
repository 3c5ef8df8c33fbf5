"""
Finder tools - MCP tools for identifying scales.

Tools for matching 7 notes against the known scale templates.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.core import SCALE_TEMPLATES, Matched, ScaleMatch
from chuk_mcp_scales.library import ScaleFinderSession

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def match_to_dict(match: ScaleMatch | None) -> dict[str, Any] | None:
    """JSON-friendly view of a match result."""
    if match is None:
        return None
    return {
        "matched": isinstance(match, Matched),
        "root": match.root.spell(),
        "labels": match.labels,
    }


def register_finder_tools(
    mcp: ChukMCPServer,
    session: ScaleFinderSession,
) -> dict[str, Any]:
    """
    Register scale identification tools with the MCP server.

    Args:
        mcp: The MCP server instance
        session: The scale finder session

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def scales_find(notes: list[str]) -> str:
        """
        Identify the scale spelled by 7 notes.

        The first note is the root. The notes become the current
        selection, ready to be saved with scales_save.

        Args:
            notes: Exactly 7 note names (e.g. 'C', 'F#', 'Bb')

        Returns:
            JSON string with the matched scale labels

        Example:
            scales_find(notes=["A", "B", "C", "D", "E", "F", "G"])
        """
        try:
            session.set_notes(notes)
            match = session.find_scale()

            return json.dumps(
                {
                    "status": "success",
                    "notes": [n.spell() for n in session.form.notes],
                    "result": match_to_dict(match),
                }
            )
        except Exception as e:
            logger.exception("Failed to find scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_find"] = scales_find

    @mcp.tool  # type: ignore[arg-type]
    async def scales_list_templates() -> str:
        """
        List the scales that can be identified.

        Returns:
            JSON string with each scale name and its semitone offsets

        Example:
            scales_list_templates()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "templates": [
                        {"name": template.name, "offsets": list(template.offsets)}
                        for template in SCALE_TEMPLATES.values()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list templates")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_list_templates"] = scales_list_templates

    return tools
