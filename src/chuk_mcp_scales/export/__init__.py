"""
Export of saved scales.

This module provides:
- records_to_csv / write_csv / parse_csv: The saved_scales.csv format
"""

from chuk_mcp_scales.export.csv_export import (
    parse_csv,
    record_to_row,
    records_to_csv,
    write_csv,
)

__all__ = [
    "parse_csv",
    "record_to_row",
    "records_to_csv",
    "write_csv",
]
