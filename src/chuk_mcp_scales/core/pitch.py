"""
Pitch primitives - PitchClass.

PitchClass represents the 12 chromatic pitches (octave-independent).
Enharmonic spellings (C# / Db) collapse to a single chromatic index.
"""

from __future__ import annotations

from enum import IntEnum

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        # Try sharp names first
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        # Try flat names
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")

    @classmethod
    def coerce(cls, value: PitchClass | str | int) -> PitchClass:
        """Accept a PitchClass, a note name or a chromatic index."""
        if isinstance(value, PitchClass):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown pitch class: {value!r}")
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and 0 <= value <= 11:
            return cls(value)
        raise ValueError(f"Unknown pitch class: {value!r}")


def note_names() -> list[str]:
    """All 12 note names in chromatic order, sharp spelling."""
    return list(_SHARP_NAMES)
