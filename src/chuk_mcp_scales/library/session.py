"""
Scale Finder Session - the single owner of a store and its edit form.

The session is the top-level controller: it holds the notes currently
selected, the song name being typed, the last match result, which saved
record (if any) is loaded for editing, and the list view's search, filter
and sort settings. Everything that reads or mutates saved scales goes
through one session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chuk_mcp_scales.constants import ALL_SCALE_TYPES, NOTES_PER_SCALE, SortDirection
from chuk_mcp_scales.core.pitch import PitchClass
from chuk_mcp_scales.core.scale import ScaleMatch, match_scale, to_pitch_classes
from chuk_mcp_scales.export.csv_export import records_to_csv
from chuk_mcp_scales.library.store import ScaleStore
from chuk_mcp_scales.models.record import ScaleRecord

logger = logging.getLogger(__name__)


def _default_notes() -> list[PitchClass]:
    return [PitchClass.C] * NOTES_PER_SCALE


@dataclass
class EditForm:
    """State of the scale entry form."""

    notes: list[PitchClass] = field(default_factory=_default_notes)
    song_name: str = ""
    found_scale: ScaleMatch | None = None
    editing_id: int | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


@dataclass
class ListView:
    """Search, filter and sort settings for the saved scale list."""

    search_query: str = ""
    filter_by: str = ALL_SCALE_TYPES
    sort_direction: SortDirection = SortDirection.ASC


class ScaleFinderSession:
    """
    Controller for one scale finder session.

    Owns a ScaleStore and the form/list state around it.
    """

    def __init__(self, store: ScaleStore | None = None):
        self.store = store if store is not None else ScaleStore()
        self.form = EditForm()
        self.view = ListView()

    # Form

    def set_note(self, index: int, note: PitchClass | str | int) -> None:
        """
        Change one of the 7 selected notes.

        While a saved scale is being edited the match is recomputed.
        """
        if not 0 <= index < NOTES_PER_SCALE:
            raise ValueError(f"Note index must be 0-{NOTES_PER_SCALE - 1}, got {index}")
        self.form.notes[index] = PitchClass.coerce(note)
        if self.form.is_editing:
            self.find_scale()

    def set_notes(self, notes: list[PitchClass | str | int]) -> None:
        """Replace all 7 selected notes."""
        self.form.notes = to_pitch_classes(notes)
        if self.form.is_editing:
            self.find_scale()

    def set_song_name(self, name: str) -> None:
        self.form.song_name = name

    def find_scale(self) -> ScaleMatch:
        """Match the selected notes and remember the result."""
        self.form.found_scale = match_scale(self.form.notes)
        return self.form.found_scale

    def reset(self) -> None:
        """Reset the form to 7 x C, no name, no match, not editing."""
        self.form = EditForm()

    # Store operations

    def save(self) -> ScaleRecord | None:
        """
        Save the form as a new record.

        Returns None (and leaves the form alone) if the song name is blank.
        """
        record = self.store.save(self.form.song_name, self.form.notes, self.form.found_scale)
        if record is not None:
            self.form.song_name = ""
            logger.info(f"Saved {record.song_name!r} as scale {record.id}")
        return record

    def edit(self, record_id: int) -> ScaleRecord | None:
        """Load a saved record into the form."""
        record = self.store.get(record_id)
        if record is None:
            return None

        self.form = EditForm(
            notes=list(record.notes),
            song_name=record.song_name,
            found_scale=match_scale(record.notes),
            editing_id=record.id,
        )
        return record

    def update(self) -> ScaleRecord | None:
        """
        Write the form over the record being edited.

        No-op (None) when nothing is being edited, the record is gone,
        or the song name is blank.
        """
        if self.form.editing_id is None:
            return None

        record = self.store.update(
            self.form.editing_id,
            self.form.song_name,
            self.form.notes,
            self.form.found_scale,
        )
        if record is not None:
            self.form.song_name = ""
            self.form.editing_id = None
            logger.info(f"Updated scale {record.id}")
        return record

    def delete(self, record_id: int) -> bool:
        """
        Delete a saved record.

        If it is the record loaded for editing, the form is reset.
        """
        deleted = self.store.delete(record_id)
        if deleted and self.form.editing_id == record_id:
            self.reset()
        return deleted

    # List view

    def set_search(self, query: str) -> None:
        self.view.search_query = query

    def set_filter(self, scale_type: str) -> None:
        self.view.filter_by = scale_type

    def set_sort_direction(self, direction: SortDirection | str) -> None:
        self.view.sort_direction = SortDirection(direction)

    def toggle_sort_direction(self) -> SortDirection:
        self.view.sort_direction = self.view.sort_direction.toggled()
        return self.view.sort_direction

    def visible_records(self) -> list[ScaleRecord]:
        """Saved records as filtered and sorted by the list view."""
        return self.store.query(
            self.view.search_query,
            self.view.filter_by,
            self.view.sort_direction,
        )

    def scale_types(self) -> list[str]:
        """Scale types available for filtering."""
        return self.store.distinct_scale_types()

    def export_csv(self) -> str | None:
        """CSV text of every saved record, or None if nothing is saved."""
        if len(self.store) == 0:
            return None
        return records_to_csv(self.store.records)
