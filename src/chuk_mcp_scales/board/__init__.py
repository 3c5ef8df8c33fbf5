"""
Realtime message board.

This module provides:
- MessageBoard: Post messages and mirror the remote list
- MessageBackend: Protocol for the realtime list service
- InMemoryBackend: Event-loop backed implementation of MessageBackend
"""

from chuk_mcp_scales.board.backend import (
    InMemoryBackend,
    MessageBackend,
    SnapshotCallback,
    Subscription,
)
from chuk_mcp_scales.board.board import MessageBoard

__all__ = [
    "InMemoryBackend",
    "MessageBackend",
    "MessageBoard",
    "SnapshotCallback",
    "Subscription",
]
