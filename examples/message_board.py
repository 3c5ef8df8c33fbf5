#!/usr/bin/env python3
"""
Example: Post to the realtime message board.

Uses the in-memory backend, so messages only live as long as the script.

Usage:
    python examples/message_board.py
"""

import asyncio

from chuk_mcp_scales.board import InMemoryBackend, MessageBoard


async def main() -> None:
    """Post a few messages and print each snapshot as it arrives."""
    board = MessageBoard(InMemoryBackend())
    board.add_listener(lambda messages: print(f"  board now has {len(messages)}: {messages}"))
    board.start()

    for text in ["hello", "   ", "anyone playing in D dorian?"]:
        posted = await board.post(text)
        print(f"post({text!r}) -> {posted}")
        # Let the backend deliver the snapshot
        await asyncio.sleep(0)

    board.stop()


if __name__ == "__main__":
    asyncio.run(main())
