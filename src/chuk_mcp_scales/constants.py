"""
Constants and enums for the scale finder.

No magic strings - use enums and named constants for constrained values.
"""

from enum import Enum

# Every scale is identified from exactly this many notes
NOTES_PER_SCALE = 7

# Display label used when no template matches
NO_MATCH_LABEL = "No matching scale found"

# Filter value meaning "do not filter by scale type"
ALL_SCALE_TYPES = "all"

# CSV export format
CSV_HEADER = "Song Name,Notes,Scale"
CSV_NOTE_SEPARATOR = " - "
CSV_SCALE_SEPARATOR = " / "
CSV_FILENAME = "saved_scales.csv"

# Logical path of the message board's remote collection
MESSAGES_PATH = "messages"

# Snapshot schema version - frozen for v1
SCHEMA_VERSION = "scales/v1"


class SortDirection(str, Enum):
    """Sort order for saved scale listings."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        """Return the opposite direction."""
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ErrorMessages:
    """Standardized error messages."""

    RECORD_NOT_FOUND = "Saved scale '{record_id}' not found."
    BLANK_NAME = "Song name must not be blank."
    NOT_EDITING = "No saved scale is loaded for editing."
    NOTHING_TO_EXPORT = "No saved scales to export."
    BLANK_MESSAGE = "Message must not be blank."


class SuccessMessages:
    """Standardized success messages."""

    SAVED = "Saved successfully!"
    UPDATED = "Updated successfully!"
    DELETED = "Deleted successfully!"
    EXPORTED = "Exported {count} saved scales to {path}."
    POSTED = "Message posted."
