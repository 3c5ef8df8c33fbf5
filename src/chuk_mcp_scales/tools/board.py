"""
Board tools - MCP tools for the realtime message board.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_scales.board import MessageBoard
from chuk_mcp_scales.constants import ErrorMessages, SuccessMessages

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_board_tools(
    mcp: ChukMCPServer,
    board: MessageBoard,
) -> dict[str, Any]:
    """
    Register message board tools with the MCP server.

    Args:
        mcp: The MCP server instance
        board: The message board

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def board_post(text: str) -> str:
        """
        Post a message to the board.

        Args:
            text: Message text (must not be blank)

        Returns:
            JSON string with post result

        Example:
            board_post(text="Anyone up for a jam in D dorian?")
        """
        try:
            board.start()
            if not await board.post(text):
                return json.dumps({"status": "error", "message": ErrorMessages.BLANK_MESSAGE})
            return json.dumps({"status": "success", "message": SuccessMessages.POSTED})
        except Exception as e:
            logger.exception("Failed to post message")
            return json.dumps({"status": "error", "message": str(e)})

    tools["board_post"] = board_post

    @mcp.tool  # type: ignore[arg-type]
    async def board_messages() -> str:
        """
        Get the messages on the board.

        Messages arrive from the backend asynchronously; a message just
        posted may not be listed yet.

        Returns:
            JSON string with the latest messages, oldest first
        """
        try:
            board.start()
            return json.dumps({"status": "success", "messages": board.messages})
        except Exception as e:
            logger.exception("Failed to get messages")
            return json.dumps({"status": "error", "message": str(e)})

    tools["board_messages"] = board_messages

    return tools
