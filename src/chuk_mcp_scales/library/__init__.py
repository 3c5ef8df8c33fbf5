"""
Saved scale management.

This module provides:
- ScaleStore: Session-scoped collection of saved scales
- ScaleFinderSession: Controller owning a store and its edit form
"""

from chuk_mcp_scales.library.session import EditForm, ListView, ScaleFinderSession
from chuk_mcp_scales.library.store import ScaleStore

__all__ = [
    "EditForm",
    "ListView",
    "ScaleFinderSession",
    "ScaleStore",
]
