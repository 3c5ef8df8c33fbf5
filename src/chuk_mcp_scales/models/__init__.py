"""
Pydantic models for the scale finder.

This module provides:
- ScaleRecord: A user-named scale saved during a session
"""

from chuk_mcp_scales.models.record import ScaleRecord

__all__ = [
    "ScaleRecord",
]
