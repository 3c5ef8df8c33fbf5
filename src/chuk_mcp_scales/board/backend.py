"""
Message board backends - the remote realtime list service.

A backend holds ordered collections of plain strings at logical paths and
supports two operations: append one value, and subscribe to the full
collection. Subscribers receive the whole collection every time it changes.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[list[str]], None]


class Subscription:
    """Cancellable handle returned by subscribe()."""

    def __init__(self, callback: SnapshotCallback, cancel: Callable[[], None]):
        self.callback = callback
        self._cancel = cancel
        self.cancelled = False

    def cancel(self) -> None:
        """Stop receiving snapshots. Safe to call more than once."""
        if not self.cancelled:
            self.cancelled = True
            self._cancel()


class MessageBackend(Protocol):
    """What the message board needs from a realtime list service."""

    async def append(self, path: str, value: str) -> str:
        """Append a value to the collection at path; return its key."""
        ...

    def subscribe(self, path: str, callback: SnapshotCallback) -> Subscription:
        """Call callback with the full collection now and after every change."""
        ...


class InMemoryBackend:
    """
    Realtime list service held in process memory.

    Callbacks are scheduled on the running event loop rather than called
    inline, so a snapshot arrives some time after the append that caused it.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, str]] = {}
        self._subscribers: dict[str, list[Subscription]] = {}
        self._keys = itertools.count(1)

    def snapshot(self, path: str) -> list[str]:
        """Current values at path, in append order."""
        return list(self._collections.get(path, {}).values())

    async def append(self, path: str, value: str) -> str:
        key = f"{next(self._keys):012d}"
        self._collections.setdefault(path, {})[key] = value
        logger.debug(f"Appended {key} to {path}")
        self._notify(path)
        return key

    def subscribe(self, path: str, callback: SnapshotCallback) -> Subscription:
        subscribers = self._subscribers.setdefault(path, [])

        def cancel() -> None:
            subscribers.remove(subscription)

        subscription = Subscription(callback, cancel)
        subscribers.append(subscription)
        self._schedule(subscription, self.snapshot(path))
        return subscription

    def _notify(self, path: str) -> None:
        values = self.snapshot(path)
        for subscription in list(self._subscribers.get(path, [])):
            self._schedule(subscription, list(values))

    def _schedule(self, subscription: Subscription, values: list[str]) -> None:
        loop = asyncio.get_running_loop()
        loop.call_soon(self._deliver, subscription, values)

    @staticmethod
    def _deliver(subscription: Subscription, values: list[str]) -> None:
        # Deliveries scheduled before cancel() are dropped
        if not subscription.cancelled:
            subscription.callback(values)
