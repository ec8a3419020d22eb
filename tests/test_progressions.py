"""
Tests for the progression catalog and generator.
"""

import pytest

from chuk_mcp_guitar.core import ScaleType, UnsupportedNoteError
from chuk_mcp_guitar.progressions import (
    PROGRESSION_CATALOG,
    ProgressionPattern,
    clamp_capo,
    generate_chord_progressions,
    get_pattern,
)


class TestCatalog:
    """Tests for the static pattern catalog."""

    def test_five_patterns(self) -> None:
        """The catalog has five named patterns in a fixed order."""
        assert [p.name for p in PROGRESSION_CATALOG] == [
            "Pop I–V–vi–IV",
            "Pop vi–IV–I–V",
            "Classic I–vi–IV–V",
            "ii–V–I (Jazz-ish cadence)",
            "I–IV–V–IV (Rock)",
        ]

    def test_reorderings_kept(self) -> None:
        """Patterns sharing a degree set stay separate entries."""
        pop, pop_minor_start = PROGRESSION_CATALOG[0], PROGRESSION_CATALOG[1]
        assert sorted(pop.degrees) == sorted(pop_minor_start.degrees) == [1, 4, 5, 6]
        assert pop.degrees != pop_minor_start.degrees

    def test_get_pattern(self) -> None:
        """Lookup by name."""
        assert get_pattern("ii–V–I (Jazz-ish cadence)").degrees == (2, 5, 1)
        assert get_pattern("Blues") is None

    def test_invalid_pattern(self) -> None:
        """Degrees are validated."""
        with pytest.raises(ValueError, match="Degree must be 1-7"):
            ProgressionPattern("bad", (1, 9))
        with pytest.raises(ValueError):
            ProgressionPattern("empty", ())


class TestClampCapo:
    """Tests for the capo boundary clamp."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0),
            (5, 5),
            (11, 11),
            (12, 11),
            (-3, 0),
            ("4", 4),
            ("x", 0),
            (None, 0),
            ("2.5", 2),
            ("3abc", 3),
            (" 7", 7),
            (2.9, 2),
        ],
    )
    def test_clamp(self, value: object, expected: int) -> None:
        """Values are clamped into 0-11."""
        assert clamp_capo(value) == expected


class TestGenerateChordProgressions:
    """Tests for generate_chord_progressions."""

    def test_c_major(self) -> None:
        """C major renders the familiar pop progression."""
        result = generate_chord_progressions("C", "major", 0)
        assert result.key == "C"
        assert result.capo_key == "C"
        assert result.scale == ["C", "D", "E", "F", "G", "A", "B"]
        assert len(result.progressions) == 5
        assert result.progressions[0].label == "Pop I–V–vi–IV"
        assert result.progressions[0].chord_names == ["C", "G", "Am", "F"]

    def test_all_patterns_c_major(self) -> None:
        """Every catalog entry renders in C major."""
        result = generate_chord_progressions("C", ScaleType.MAJOR)
        assert [p.chord_names for p in result.progressions] == [
            ["C", "G", "Am", "F"],
            ["Am", "F", "C", "G"],
            ["C", "Am", "F", "G"],
            ["Dm", "G", "C"],
            ["C", "F", "G", "F"],
        ]

    def test_chord_notes(self) -> None:
        """Chords carry degree and fixed-octave notes."""
        chord = generate_chord_progressions("C", "major").progressions[0].chords[2]
        assert chord.degree == 6
        assert chord.name == "Am"
        assert chord.notes == ["A4", "C4", "E4"]

    def test_capo(self) -> None:
        """A capo shifts the working key."""
        result = generate_chord_progressions("C", "major", 2)
        assert result.key == "C"
        assert result.capo == 2
        assert result.capo_key == "D"
        assert result.scale == ["D", "E", "F#", "G", "A", "B", "C#"]
        assert result.progressions[0].chord_names == ["D", "A", "Bm", "G"]

    def test_minor(self) -> None:
        """Minor keys use the minor quality table."""
        result = generate_chord_progressions("A", "minor")
        assert result.scale_type == ScaleType.MINOR
        assert result.progressions[0].chord_names == ["Am", "Em", "F", "Dm"]
        assert result.progressions[3].chord_names == ["B°", "Em", "Am"]

    def test_flat_key_normalized(self) -> None:
        """Flat input keys are reported in sharp spelling."""
        result = generate_chord_progressions("bb", "major")
        assert result.key == "A#"
        assert result.scale[0] == "A#"

    def test_unsupported_key(self) -> None:
        """Unknown keys raise."""
        with pytest.raises(UnsupportedNoteError, match="Unsupported note: H"):
            generate_chord_progressions("H", "major")

    def test_deterministic(self) -> None:
        """Same inputs, same output."""
        assert generate_chord_progressions("E", "minor", 3) == generate_chord_progressions(
            "E", "minor", 3
        )

    def test_to_dict_shape(self) -> None:
        """Serialized form uses the public field names."""
        data = generate_chord_progressions("G", "major", 0).to_dict()
        assert set(data) == {"key", "capo", "capoKey", "scaleType", "scale", "progressions"}
        assert data["scaleType"] == "major"
        first = data["progressions"][0]
        assert set(first) == {"label", "degrees", "chords"}
        assert first["degrees"] == [1, 5, 6, 4]
        assert first["chords"][0] == {"degree": 1, "name": "G", "notes": ["G4", "B4", "D4"]}
