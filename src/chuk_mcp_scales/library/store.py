"""
Scale Store - the session-scoped collection of saved scales.

Provides save, update, delete and derived (non-mutating) queries over an
ordered in-memory list of ScaleRecords. Nothing here touches disk; a store
can be snapshotted to and restored from a YAML-friendly dict.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from typing import Any

from chuk_mcp_scales.constants import (
    ALL_SCALE_TYPES,
    NO_MATCH_LABEL,
    SCHEMA_VERSION,
    SortDirection,
)
from chuk_mcp_scales.core.pitch import PitchClass
from chuk_mcp_scales.core.scale import ScaleMatch, scale_type_of
from chuk_mcp_scales.models.record import ScaleRecord

logger = logging.getLogger(__name__)

NoteInput = Iterable[PitchClass | str | int]


def _labels(match: ScaleMatch | list[str] | None) -> list[str]:
    """Normalize a match result to the labels stored on a record."""
    if match is None:
        return []
    if isinstance(match, list):
        return list(match)
    return match.labels


def _sort_key(record: ScaleRecord) -> tuple[str, str]:
    return (record.song_name.casefold(), record.song_name)


class ScaleStore:
    """
    Ordered, in-memory collection of saved scales.

    Records keep insertion order. Ids are handed out from a counter that
    never goes backwards, so a deleted id is never reused.
    """

    def __init__(self, records: Iterable[ScaleRecord] | None = None):
        """
        Initialize the store.

        Args:
            records: Optional records to start with (e.g. from a snapshot)

        Raises:
            ValueError: if two records share an id
        """
        self._records: list[ScaleRecord] = list(records or [])
        seen: set[int] = set()
        for record in self._records:
            if record.id in seen:
                raise ValueError(f"Duplicate saved scale id: {record.id}")
            seen.add(record.id)
        next_id = max((r.id for r in self._records), default=0) + 1
        self._ids = itertools.count(next_id)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> list[ScaleRecord]:
        """Saved records in insertion order (a copy)."""
        return list(self._records)

    def get(self, record_id: int) -> ScaleRecord | None:
        """Get a record by id."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def save(
        self,
        name: str,
        notes: NoteInput,
        match: ScaleMatch | list[str] | None = None,
    ) -> ScaleRecord | None:
        """
        Save a new record.

        Args:
            name: Song name; blank names are rejected
            notes: The 7 notes
            match: Match result (or its labels) to remember; None if never matched

        Returns:
            The new record, or None if the name was blank
        """
        if not name or not name.strip():
            logger.debug("Ignoring save with blank name")
            return None

        record = ScaleRecord(
            id=next(self._ids),
            song_name=name,
            notes=list(notes),
            scale=_labels(match),
        )
        self._records.append(record)
        logger.debug(f"Saved scale {record.id}: {record.song_name!r}")
        return record

    def update(
        self,
        record_id: int,
        name: str,
        notes: NoteInput,
        match: ScaleMatch | list[str] | None = None,
    ) -> ScaleRecord | None:
        """
        Replace a record's name, notes and match labels in place.

        Returns:
            The replacement record, or None if the id is unknown or the name blank
        """
        if not name or not name.strip():
            logger.debug("Ignoring update with blank name")
            return None

        for i, record in enumerate(self._records):
            if record.id == record_id:
                replacement = ScaleRecord(
                    id=record_id,
                    song_name=name,
                    notes=list(notes),
                    scale=_labels(match),
                )
                self._records[i] = replacement
                logger.debug(f"Updated scale {record_id}: {name!r}")
                return replacement

        logger.debug(f"Ignoring update of unknown scale {record_id}")
        return None

    def delete(self, record_id: int) -> bool:
        """
        Delete a record by id.

        Returns True if deleted, False if not found.
        """
        for i, record in enumerate(self._records):
            if record.id == record_id:
                self._records.pop(i)
                logger.debug(f"Deleted scale {record_id}")
                return True
        return False

    def query(
        self,
        search_text: str = "",
        scale_type: str = ALL_SCALE_TYPES,
        sort_direction: SortDirection | str = SortDirection.ASC,
    ) -> list[ScaleRecord]:
        """
        Filter and sort the saved records without changing the store.

        Args:
            search_text: Case-insensitive substring of the song name ('' = any)
            scale_type: Substring of a matched label, e.g. 'Dorian' ('all' = any)
            sort_direction: 'asc' or 'desc' by song name

        Returns:
            A new list of matching records
        """
        direction = SortDirection(sort_direction)
        result = list(self._records)

        if search_text:
            needle = search_text.lower()
            result = [r for r in result if needle in r.song_name.lower()]

        if scale_type != ALL_SCALE_TYPES:
            result = [r for r in result if r.has_scale_type(scale_type)]

        result.sort(key=_sort_key, reverse=direction is SortDirection.DESC)
        return result

    def distinct_scale_types(self) -> list[str]:
        """
        Scale types seen across all records, in first-seen order.

        The root note is dropped from each label ('C Major' -> 'Major')
        and the no-match label is skipped.
        """
        seen: dict[str, None] = {}
        for record in self._records:
            for label in record.scale:
                if label != NO_MATCH_LABEL:
                    seen.setdefault(scale_type_of(label), None)
        return list(seen)

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        This produces the canonical snapshot format for a session's scales.
        """
        return {
            "schema": SCHEMA_VERSION,
            "scales": [record.to_yaml_dict() for record in self._records],
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> ScaleStore:
        """Create a store from a YAML-parsed snapshot."""
        schema = data.get("schema", SCHEMA_VERSION)
        if schema != SCHEMA_VERSION:
            raise ValueError(f"Unsupported schema: {schema}")
        return cls(ScaleRecord.from_yaml_dict(item) for item in data.get("scales", []))
