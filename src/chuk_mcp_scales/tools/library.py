"""
Library tools - MCP tools for saved scales.

Tools for saving, editing, deleting and browsing the session's saved scales.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.constants import ALL_SCALE_TYPES, ErrorMessages, SuccessMessages
from chuk_mcp_scales.library import ScaleFinderSession
from chuk_mcp_scales.tools.finder import match_to_dict

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_library_tools(
    mcp: ChukMCPServer,
    session: ScaleFinderSession,
) -> dict[str, Any]:
    """
    Register saved scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        session: The scale finder session

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def form_dict() -> dict[str, Any]:
        form = session.form
        return {
            "notes": [n.spell() for n in form.notes],
            "song_name": form.song_name,
            "result": match_to_dict(form.found_scale),
            "editing_id": form.editing_id,
        }

    @mcp.tool  # type: ignore[arg-type]
    async def scales_save(song_name: str, notes: list[str] | None = None) -> str:
        """
        Save the current notes under a song name.

        If notes are given they replace the current selection and are
        matched first; otherwise the last scales_find result is saved.

        Args:
            song_name: Name to save under (must not be blank)
            notes: Optional 7 note names

        Returns:
            JSON string with the saved scale

        Example:
            scales_save(song_name="So What", notes=["D", "E", "F", "G", "A", "B", "C"])
        """
        try:
            if notes is not None:
                session.set_notes(notes)
                session.find_scale()
            session.set_song_name(song_name)

            record = session.save()
            if record is None:
                return json.dumps({"status": "error", "message": ErrorMessages.BLANK_NAME})

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SAVED,
                    "scale": record.to_yaml_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to save scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_save"] = scales_save

    @mcp.tool  # type: ignore[arg-type]
    async def scales_edit(record_id: int) -> str:
        """
        Load a saved scale for editing.

        Args:
            record_id: Id of the saved scale

        Returns:
            JSON string with the edit form contents

        Example:
            scales_edit(record_id=1)
        """
        try:
            record = session.edit(record_id)
            if record is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.RECORD_NOT_FOUND.format(record_id=record_id),
                    }
                )

            return json.dumps({"status": "success", "form": form_dict()})
        except Exception as e:
            logger.exception("Failed to load scale for editing")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_edit"] = scales_edit

    @mcp.tool  # type: ignore[arg-type]
    async def scales_update(
        song_name: str | None = None,
        notes: list[str] | None = None,
    ) -> str:
        """
        Update the saved scale loaded with scales_edit.

        Changing the notes recomputes the match.

        Args:
            song_name: New name (default: keep the loaded name)
            notes: New 7 note names (default: keep the loaded notes)

        Returns:
            JSON string with the updated scale

        Example:
            scales_update(song_name="So What (live)")
        """
        try:
            if not session.form.is_editing:
                return json.dumps({"status": "error", "message": ErrorMessages.NOT_EDITING})

            if notes is not None:
                session.set_notes(notes)
            if song_name is not None:
                session.set_song_name(song_name)

            editing_id = session.form.editing_id
            record = session.update()
            if record is None:
                if session.store.get(editing_id) is None:  # type: ignore[arg-type]
                    message = ErrorMessages.RECORD_NOT_FOUND.format(record_id=editing_id)
                else:
                    message = ErrorMessages.BLANK_NAME
                return json.dumps({"status": "error", "message": message})

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.UPDATED,
                    "scale": record.to_yaml_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to update scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_update"] = scales_update

    @mcp.tool  # type: ignore[arg-type]
    async def scales_delete(record_id: int) -> str:
        """
        Delete a saved scale.

        If it was loaded for editing, the edit form is cleared.

        Args:
            record_id: Id of the saved scale

        Returns:
            JSON string with delete result

        Example:
            scales_delete(record_id=1)
        """
        try:
            if session.delete(record_id):
                return json.dumps({"status": "success", "message": SuccessMessages.DELETED})
            return json.dumps(
                {
                    "status": "error",
                    "message": ErrorMessages.RECORD_NOT_FOUND.format(record_id=record_id),
                }
            )
        except Exception as e:
            logger.exception("Failed to delete scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_delete"] = scales_delete

    @mcp.tool  # type: ignore[arg-type]
    async def scales_reset() -> str:
        """
        Clear the edit form.

        Resets the notes to 7 x C, clears the song name and match,
        and stops editing.

        Returns:
            JSON string with the empty form
        """
        try:
            session.reset()
            return json.dumps({"status": "success", "form": form_dict()})
        except Exception as e:
            logger.exception("Failed to reset form")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_reset"] = scales_reset

    @mcp.tool  # type: ignore[arg-type]
    async def scales_query(
        search: str = "",
        scale_type: str = ALL_SCALE_TYPES,
        sort_direction: str = "asc",
    ) -> str:
        """
        Search, filter and sort saved scales.

        Args:
            search: Case-insensitive part of a song name ('' for all)
            scale_type: Scale type such as 'Dorian' ('all' for any)
            sort_direction: 'asc' or 'desc' by song name

        Returns:
            JSON string with matching saved scales

        Example:
            scales_query(search="blue", scale_type="Minor", sort_direction="desc")
        """
        try:
            session.set_search(search)
            session.set_filter(scale_type)
            session.set_sort_direction(sort_direction)

            records = session.visible_records()
            return json.dumps(
                {
                    "status": "success",
                    "count": len(records),
                    "total": len(session.store),
                    "scales": [record.to_yaml_dict() for record in records],
                }
            )
        except Exception as e:
            logger.exception("Failed to query scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_query"] = scales_query

    @mcp.tool  # type: ignore[arg-type]
    async def scales_list_types() -> str:
        """
        List the scale types present among saved scales.

        Useful as filter values for scales_query.

        Returns:
            JSON string with scale type names
        """
        try:
            return json.dumps({"status": "success", "scale_types": session.scale_types()})
        except Exception as e:
            logger.exception("Failed to list scale types")
            return json.dumps({"status": "error", "message": str(e)})

    tools["scales_list_types"] = scales_list_types

    return tools
