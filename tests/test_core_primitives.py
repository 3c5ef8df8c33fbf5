"""
Tests for core music primitives.

Tests cover:
- PitchClass (pitch.py)
- ScaleTemplate, Matched, NoMatch, match_scale (scale.py)
"""

import pytest

from chuk_mcp_scales.constants import NO_MATCH_LABEL
from chuk_mcp_scales.core import (
    SCALE_TEMPLATES,
    Matched,
    NoMatch,
    PitchClass,
    ScaleTemplate,
    match_scale,
    normalize,
    note_names,
    scale_type_of,
)


def spell_template(template: ScaleTemplate, root: PitchClass) -> list[PitchClass]:
    """The 7 pitch classes of a template built on root."""
    return [PitchClass((root + offset) % 12) for offset in template.offsets]


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.G == 7
        assert PitchClass.B == 11

    def test_parse(self) -> None:
        """Parse sharp, flat and enum spellings."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("fs") == PitchClass.Fs
        assert PitchClass.parse(" Bb ") == PitchClass.As

    def test_parse_invalid(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown pitch class"):
            PitchClass.parse("H")

    def test_coerce(self) -> None:
        """Coerce accepts members, names and indices."""
        assert PitchClass.coerce(PitchClass.D) == PitchClass.D
        assert PitchClass.coerce("Eb") == PitchClass.Ds
        assert PitchClass.coerce(11) == PitchClass.B
        with pytest.raises(ValueError):
            PitchClass.coerce(12)

    def test_coerce_rejects_bool(self) -> None:
        """Booleans are not chromatic indices."""
        with pytest.raises(ValueError, match="Unknown pitch class"):
            PitchClass.coerce(True)
        with pytest.raises(ValueError, match="Unknown pitch class"):
            match_scale([False, 2, 4, 5, 7, 9, 11])

    def test_spell(self) -> None:
        """Spelling defaults to sharps."""
        assert PitchClass.Fs.spell() == "F#"
        assert PitchClass.Fs.spell(prefer_flats=True) == "Gb"

    def test_note_names(self) -> None:
        """All 12 names in chromatic order."""
        assert note_names() == ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


class TestScaleTemplate:
    """Tests for ScaleTemplate and the template table."""

    def test_table_order(self) -> None:
        """Templates are declared in a fixed order."""
        assert list(SCALE_TEMPLATES) == [
            "Major",
            "Natural Minor",
            "Harmonic Minor",
            "Melodic Minor",
            "Dorian",
            "Phrygian",
            "Lydian",
            "Mixolydian",
        ]

    def test_table_is_read_only(self) -> None:
        """The template table can't be modified."""
        locrian = ScaleTemplate("Locrian", (0, 1, 3, 5, 6, 8, 10))
        with pytest.raises(TypeError):
            SCALE_TEMPLATES["Locrian"] = locrian  # type: ignore[index]

    def test_all_templates_valid(self) -> None:
        """Every template has 7 non-decreasing offsets from 0."""
        for template in SCALE_TEMPLATES.values():
            assert len(template.offsets) == 7
            assert template.offsets[0] == 0
            assert list(template.offsets) == sorted(template.offsets)

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="needs 7 offsets"):
            ScaleTemplate("Pentatonic", (0, 2, 4, 7, 9))

    def test_must_start_at_zero(self) -> None:
        with pytest.raises(ValueError, match="must start at 0"):
            ScaleTemplate("Shifted", (1, 2, 4, 5, 7, 9, 11))

    def test_decreasing_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not decrease"):
            ScaleTemplate("Broken", (0, 2, 4, 3, 7, 9, 11))


class TestNormalize:
    """Tests for normalize()."""

    def test_starts_at_zero(self) -> None:
        assert normalize([9, 11, 0, 2, 4, 5, 7]) == [0, 2, 3, 5, 7, 8, 10]

    def test_duplicates(self) -> None:
        assert normalize([4, 4, 4]) == [0, 0, 0]

    def test_empty(self) -> None:
        assert normalize([]) == []


class TestMatchScale:
    """Tests for the scale matcher."""

    def test_c_major(self) -> None:
        """C D E F G A B is C Major only."""
        result = match_scale(["C", "D", "E", "F", "G", "A", "B"])
        assert isinstance(result, Matched)
        assert result.labels == ["C Major"]

    def test_a_natural_minor(self) -> None:
        """A B C D E F G is A Natural Minor only."""
        result = match_scale(["A", "B", "C", "D", "E", "F", "G"])
        assert isinstance(result, Matched)
        assert result.labels == ["A Natural Minor"]

    def test_every_template_matches_its_own_pitches(self) -> None:
        """Spelling any template from any root finds that template with that root."""
        for template in SCALE_TEMPLATES.values():
            for root in PitchClass:
                result = match_scale(spell_template(template, root))
                assert f"{root.spell()} {template.name}" in result.labels

    def test_root_is_first_note(self) -> None:
        """The label uses the first note as root."""
        result = match_scale(["F#", "G#", "A#", "B", "C#", "D#", "F"])
        assert result.labels == ["F# Major"]

    def test_flat_spelling_reported_with_sharps(self) -> None:
        """Input spelled with flats still matches; labels use sharp names."""
        result = match_scale(["Bb", "C", "D", "Eb", "F", "G", "A"])
        assert result.labels == ["A# Major"]

    def test_rotation_changes_root(self) -> None:
        """Rotating C major to start on D gives D Dorian."""
        result = match_scale(["D", "E", "F", "G", "A", "B", "C"])
        assert result.labels == ["D Dorian"]

    def test_reordering_breaks_match(self) -> None:
        """Matching is anchored to the literal order, not the set of notes."""
        result = match_scale(["C", "E", "D", "F", "G", "A", "B"])
        assert isinstance(result, NoMatch)

    def test_no_match(self) -> None:
        """No match returns NoMatch, never an empty list."""
        result = match_scale(["C", "C#", "E", "F", "G", "A", "B"])
        assert isinstance(result, NoMatch)
        assert not result
        assert result.labels == [NO_MATCH_LABEL]
        assert result.root == PitchClass.C

    def test_duplicates_allowed(self) -> None:
        """Duplicate notes are not an error."""
        result = match_scale(["C"] * 7)
        assert isinstance(result, NoMatch)

    def test_matched_is_truthy(self) -> None:
        assert match_scale(["C", "D", "E", "F", "G", "A", "B"])

    def test_accepts_pitch_classes_and_indices(self) -> None:
        """PitchClass members and indices work like names."""
        assert match_scale([0, 2, 4, 5, 7, 9, 11]).labels == ["C Major"]
        pitches = spell_template(SCALE_TEMPLATES["Lydian"], PitchClass.F)
        assert match_scale(pitches).labels == ["F Lydian"]

    def test_wrong_length_rejected(self) -> None:
        """Anything but 7 notes raises ValueError."""
        with pytest.raises(ValueError, match="Expected 7 notes, got 6"):
            match_scale(["C", "D", "E", "F", "G", "A"])
        with pytest.raises(ValueError, match="Expected 7 notes, got 8"):
            match_scale(["C", "D", "E", "F", "G", "A", "B", "C"])

    def test_bad_note_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown pitch class"):
            match_scale(["C", "D", "E", "F", "G", "A", "X"])


class TestScaleTypeOf:
    """Tests for scale_type_of()."""

    def test_strips_root(self) -> None:
        assert scale_type_of("C Major") == "Major"
        assert scale_type_of("F# Harmonic Minor") == "Harmonic Minor"
