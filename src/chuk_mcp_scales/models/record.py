"""
ScaleRecord model - a user-named scale saved during a session.

A record remembers the 7 notes that were selected, the song name the user
gave them, and the match labels that were shown when it was saved.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from chuk_mcp_scales.constants import NO_MATCH_LABEL
from chuk_mcp_scales.core.pitch import PitchClass
from chuk_mcp_scales.core.scale import scale_type_of, to_pitch_classes


class ScaleRecord(BaseModel):
    """
    A saved scale.

    Records are replaced wholesale on update; nothing mutates them in the
    background.
    """

    id: int = Field(..., ge=1, description="Unique, monotonic record id")
    song_name: str = Field(..., min_length=1, description="Display name")
    notes: list[PitchClass] = Field(..., description="The 7 notes, first note is the root")
    scale: list[str] = Field(
        default_factory=list, description="Matched scale labels (e.g. 'C Major')"
    )

    @field_validator("notes", mode="before")
    @classmethod
    def validate_notes(cls, v: Any) -> list[PitchClass]:
        """Accept note names or indices; require exactly 7 notes."""
        return to_pitch_classes(v)

    @field_serializer("notes")
    def serialize_notes(self, notes: list[PitchClass]) -> list[str]:
        return [n.spell() for n in notes]

    @property
    def note_names(self) -> list[str]:
        """Notes spelled with sharps."""
        return [n.spell() for n in self.notes]

    @property
    def scale_types(self) -> list[str]:
        """Scale types without their root, excluding the no-match label."""
        return [scale_type_of(label) for label in self.scale if label != NO_MATCH_LABEL]

    def has_scale_type(self, scale_type: str) -> bool:
        """True if any matched label contains scale_type."""
        return any(scale_type in label for label in self.scale)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "id": self.id,
            "song_name": self.song_name,
            "notes": self.note_names,
            "scale": list(self.scale),
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> ScaleRecord:
        """Create a ScaleRecord from a YAML-parsed dict."""
        return cls(
            id=data["id"],
            song_name=data["song_name"],
            notes=data["notes"],
            scale=data.get("scale", []),
        )
