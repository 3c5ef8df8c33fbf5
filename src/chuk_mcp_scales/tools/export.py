"""
Export tools - MCP tools for getting saved scales out of a session.

Tools for CSV and YAML export, and YAML import.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_scales.constants import CSV_FILENAME, ErrorMessages, SuccessMessages
from chuk_mcp_scales.export import write_csv
from chuk_mcp_scales.library import ScaleFinderSession, ScaleStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    session: ScaleFinderSession,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        session: The scale finder session
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def scales_export_csv(output_name: str | None = None) -> str:
        """
        Export all saved scales to CSV.

        Writes saved_scales.csv (or output_name.csv) to the output
        directory and returns its content.

        Args:
            output_name: Optional filename (without .csv extension)

        Returns:
            JSON string with the file path and CSV content

        Example:
            scales_export_csv()
        """
        try:
            content = session.export_csv()
            if content is None:
                return json.dumps({"status": "error", "message": ErrorMessages.NOTHING_TO_EXPORT})

            filename = f"{output_name}.csv" if output_name else CSV_FILENAME
            path = write_csv(session.store.records, output_dir, filename)
            count = len(session.store)

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.EXPORTED.format(count=count, path=path),
                    "path": str(path),
                    "csv": content,
                }
            )
        except Exception as e:
            logger.exception("Failed to export CSV")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_export_csv"] = scales_export_csv

    @mcp.tool  # type: ignore[arg-type]
    async def scales_export_yaml() -> str:
        """
        Export saved scales as YAML.

        Returns the session's saved scales in their canonical YAML format,
        which scales_import_yaml can load back.

        Returns:
            JSON string containing the YAML content

        Example:
            scales_export_yaml()
        """
        try:
            yaml_dict = session.store.to_yaml_dict()
            yaml_content = yaml.safe_dump(yaml_dict, default_flow_style=False, sort_keys=False)

            return json.dumps({"status": "success", "yaml": yaml_content})
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_export_yaml"] = scales_export_yaml

    @mcp.tool  # type: ignore[arg-type]
    async def scales_import_yaml(yaml_content: str) -> str:
        """
        Replace the saved scales with a YAML snapshot.

        The edit form is reset.

        Args:
            yaml_content: YAML produced by scales_export_yaml

        Returns:
            JSON string with the number of scales loaded

        Example:
            scales_import_yaml(yaml_content="schema: scales/v1\\nscales: []\\n")
        """
        try:
            data = yaml.safe_load(yaml_content) or {}
            session.store = ScaleStore.from_yaml_dict(data)
            session.reset()

            return json.dumps({"status": "success", "count": len(session.store)})
        except Exception as e:
            logger.exception("Failed to import YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_import_yaml"] = scales_import_yaml

    return tools
