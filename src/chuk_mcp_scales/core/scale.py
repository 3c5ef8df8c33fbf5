"""
Scale primitives - ScaleTemplate, ScaleMatch, and the scale matcher.

A scale template is a named pattern of 7 semitone offsets from a root.
Matching normalizes a 7-note sequence against its first note and compares
it position by position with every known template.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from chuk_mcp_scales.constants import NO_MATCH_LABEL, NOTES_PER_SCALE

from .pitch import PitchClass


@dataclass(frozen=True)
class ScaleTemplate:
    """
    A named scale defined by its offsets from the root.

    Offsets are cumulative (not step intervals):
    a major scale is (0, 2, 4, 5, 7, 9, 11).

    Immutable and hashable.
    """

    name: str
    offsets: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.offsets) != NOTES_PER_SCALE:
            raise ValueError(
                f"Scale template needs {NOTES_PER_SCALE} offsets, got {len(self.offsets)}"
            )
        if self.offsets[0] != 0:
            raise ValueError(f"Scale template must start at 0, got {self.offsets[0]}")
        if any(b < a for a, b in zip(self.offsets, self.offsets[1:], strict=False)):
            raise ValueError(f"Scale template offsets must not decrease: {self.offsets}")

    def matches(self, normalized: Iterable[int]) -> bool:
        """True if every offset equals the normalized sequence at the same position."""
        return tuple(normalized) == self.offsets

    def __str__(self) -> str:
        return self.name


def _build_templates(*templates: ScaleTemplate) -> Mapping[str, ScaleTemplate]:
    return MappingProxyType({t.name: t for t in templates})


# Known scales, in declaration order (match results follow this order)
SCALE_TEMPLATES: Mapping[str, ScaleTemplate] = _build_templates(
    ScaleTemplate("Major", (0, 2, 4, 5, 7, 9, 11)),
    ScaleTemplate("Natural Minor", (0, 2, 3, 5, 7, 8, 10)),
    ScaleTemplate("Harmonic Minor", (0, 2, 3, 5, 7, 8, 11)),
    ScaleTemplate("Melodic Minor", (0, 2, 3, 5, 7, 9, 11)),
    ScaleTemplate("Dorian", (0, 2, 3, 5, 7, 9, 10)),
    ScaleTemplate("Phrygian", (0, 1, 3, 5, 7, 8, 10)),
    ScaleTemplate("Lydian", (0, 2, 4, 6, 7, 9, 11)),
    ScaleTemplate("Mixolydian", (0, 2, 4, 5, 7, 9, 10)),
)


@dataclass(frozen=True)
class Matched:
    """One or more templates matched, anchored at root."""

    root: PitchClass
    names: tuple[str, ...]

    @property
    def labels(self) -> list[str]:
        """Display labels like 'C Major'."""
        return [f"{self.root.spell()} {name}" for name in self.names]

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NoMatch:
    """No known template matched."""

    root: PitchClass

    @property
    def labels(self) -> list[str]:
        """A single display label saying nothing matched."""
        return [NO_MATCH_LABEL]

    def __bool__(self) -> bool:
        return False


ScaleMatch = Matched | NoMatch


def to_pitch_classes(notes: Iterable[PitchClass | str | int]) -> list[PitchClass]:
    """
    Convert notes to pitch classes, enforcing the 7-note contract.

    Raises:
        ValueError: if a note can't be parsed or there aren't exactly 7 notes
    """
    pitches = [PitchClass.coerce(n) for n in notes]
    if len(pitches) != NOTES_PER_SCALE:
        raise ValueError(f"Expected {NOTES_PER_SCALE} notes, got {len(pitches)}")
    return pitches


def normalize(indices: Iterable[int]) -> list[int]:
    """
    Shift a sequence of chromatic indices so it starts at 0.

    Each element becomes its distance above the first element, mod 12.
    """
    values = list(indices)
    if not values:
        return []
    first = values[0]
    return [(value - first) % 12 for value in values]


def match_scale(notes: Iterable[PitchClass | str | int]) -> ScaleMatch:
    """
    Identify which known scales a 7-note sequence spells.

    Matching is anchored to the first note as root; reordering the notes
    changes the result. Duplicate notes are allowed.

    Args:
        notes: Exactly 7 notes as PitchClass, names ('C#', 'Db') or indices

    Returns:
        Matched with the template names in declaration order, or NoMatch

    Example:
        match_scale(["A", "B", "C", "D", "E", "F", "G"]).labels
        # ['A Natural Minor']
    """
    pitches = to_pitch_classes(notes)
    normalized = normalize(p.value for p in pitches)
    root = pitches[0]

    names = tuple(
        name for name, template in SCALE_TEMPLATES.items() if template.matches(normalized)
    )
    if names:
        return Matched(root, names)
    return NoMatch(root)


def scale_type_of(label: str) -> str:
    """
    Strip the leading root note from a match label.

    'F# Harmonic Minor' -> 'Harmonic Minor'
    """
    return " ".join(label.split(" ")[1:])
