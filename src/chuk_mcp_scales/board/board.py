"""
Message Board - a shared list of short text messages.

All state lives in the backend. The board appends new messages and keeps
a local copy that each snapshot from the backend replaces wholesale.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chuk_mcp_scales.board.backend import MessageBackend, Subscription
from chuk_mcp_scales.constants import MESSAGES_PATH

logger = logging.getLogger(__name__)


class MessageBoard:
    """
    Realtime message board over a MessageBackend.

    Call start() from inside a running event loop to begin receiving
    snapshots; stop() cancels the subscription.
    """

    def __init__(self, backend: MessageBackend, path: str = MESSAGES_PATH):
        self.backend = backend
        self.path = path
        self._messages: list[str] = []
        self._subscription: Subscription | None = None
        self._listeners: list[Callable[[list[str]], None]] = []

    @property
    def messages(self) -> list[str]:
        """Messages from the latest snapshot (a copy)."""
        return list(self._messages)

    @property
    def is_started(self) -> bool:
        return self._subscription is not None

    def start(self) -> None:
        """Subscribe to the backend. No-op if already started."""
        if self._subscription is None:
            self._subscription = self.backend.subscribe(self.path, self._on_snapshot)
            logger.debug(f"Subscribed to {self.path}")

    def stop(self) -> None:
        """Cancel the subscription."""
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
            logger.debug(f"Unsubscribed from {self.path}")

    def add_listener(self, listener: Callable[[list[str]], None]) -> None:
        """Call listener with the messages after every snapshot."""
        self._listeners.append(listener)

    async def post(self, text: str) -> bool:
        """
        Append a message.

        Blank (empty or whitespace-only) text is rejected.

        Returns:
            True if the message was sent to the backend
        """
        if not text or not text.strip():
            return False
        key = await self.backend.append(self.path, text)
        logger.debug(f"Posted message {key}")
        return True

    def _on_snapshot(self, values: list[str]) -> None:
        self._messages = list(values)
        for listener in list(self._listeners):
            listener(self.messages)
