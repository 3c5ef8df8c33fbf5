"""
CSV export of saved scales.

Format:
    Song Name,Notes,Scale
    "My Song","C - D - E - F - G - A - B","C Major"

Every field is wrapped in double quotes. Embedded quotes are written as-is,
so names containing '"' do not survive a round trip.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from pathlib import Path

from chuk_mcp_scales.constants import (
    CSV_FILENAME,
    CSV_HEADER,
    CSV_NOTE_SEPARATOR,
    CSV_SCALE_SEPARATOR,
)
from chuk_mcp_scales.models.record import ScaleRecord


def record_to_row(record: ScaleRecord) -> str:
    """Format one record as a CSV line (without the newline)."""
    song_name = f'"{record.song_name}"'
    notes = f'"{CSV_NOTE_SEPARATOR.join(record.note_names)}"'
    scale = f'"{CSV_SCALE_SEPARATOR.join(record.scale)}"'
    return f"{song_name},{notes},{scale}"


def records_to_csv(records: Iterable[ScaleRecord]) -> str:
    """Format records as CSV text, header first, one newline-terminated row each."""
    lines = [CSV_HEADER]
    lines.extend(record_to_row(record) for record in records)
    return "\n".join(lines) + "\n"


def write_csv(
    records: Iterable[ScaleRecord],
    output_dir: Path,
    filename: str = CSV_FILENAME,
) -> Path:
    """
    Write records to a CSV file.

    Args:
        records: Records to export
        output_dir: Directory for the file (created if missing)
        filename: File name (default: saved_scales.csv)

    Returns:
        Path to the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_text(records_to_csv(records), encoding="utf-8")
    return path


def parse_csv(text: str) -> list[tuple[str, list[str], list[str]]]:
    """
    Parse exported CSV text back into (song name, notes, scale labels).

    Raises:
        ValueError: if the header is missing or a row doesn't have 3 fields
    """
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if header is None or ",".join(header) != CSV_HEADER:
        raise ValueError(f"Expected CSV header {CSV_HEADER!r}, got {header!r}")

    rows = []
    for line_no, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != 3:
            raise ValueError(f"Line {line_no}: expected 3 fields, got {len(row)}")
        song_name, notes, scale = row
        rows.append(
            (
                song_name,
                notes.split(CSV_NOTE_SEPARATOR) if notes else [],
                scale.split(CSV_SCALE_SEPARATOR) if scale else [],
            )
        )
    return rows
