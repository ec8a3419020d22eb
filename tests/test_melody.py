"""
Tests for melody generation.

Deterministic tests use FixedRandom from conftest: each note consumes one
random() draw, then one choice() for the pitch and one for the octave.
"""

import random

import pytest

from chuk_mcp_guitar.core import Note, UnsupportedNoteError, build_scale
from chuk_mcp_guitar.melody import (
    BEATS_PER_BAR,
    DEFAULT_PROGRESSION,
    generate_melody_for_progression,
)
from conftest import FixedRandom


class TestMelodyShape:
    """Length, beat numbering and durations."""

    @pytest.mark.parametrize("chords", [["C"], ["C", "G", "Am", "F"], ["Dm", "G", "C"] * 3])
    def test_four_notes_per_chord(self, chords: list[str]) -> None:
        """Each chord gets one bar of quarter notes, beats numbered across the whole melody."""
        melody = generate_melody_for_progression("C", "major", chords, random.Random(3))
        assert len(melody) == BEATS_PER_BAR * len(chords)
        assert [note.beat for note in melody] == list(range(len(melody)))
        assert all(note.duration == 1 for note in melody)

    def test_empty_progression(self) -> None:
        """No chords, no notes."""
        assert generate_melody_for_progression("C", "major", []) == []

    def test_notes_in_key_and_register(self) -> None:
        """Diatonic progressions only produce scale tones in octaves 4-5."""
        scale = build_scale("G", "major")
        melody = generate_melody_for_progression("G", "major", ["G", "C", "D", "Em"] * 4)
        for item in melody:
            note = Note.parse(item.note)
            assert note.pitch_class.spell() in scale
            assert note.octave in (4, 5)

    def test_tab_attached(self) -> None:
        """Every note carries a playable tab position."""
        melody = generate_melody_for_progression("E", "minor", ["Em", "C"], random.Random(1))
        for item in melody:
            assert 1 <= item.tab.string_number <= 6
            assert item.tab.fret >= 0


class TestMelodyChoices:
    """Chord-tone vs scale-tone selection with a fixed random source."""

    def test_chord_tone(self) -> None:
        """Draws below 0.7 pick from the chord."""
        rng = FixedRandom(draws=[0.0], picks=[0, 0])
        melody = generate_melody_for_progression("C", "major", ["C"], rng)
        assert [n.note for n in melody] == ["C4"] * 4
        assert melody[0].tab.string_number == 2
        assert melody[0].tab.fret == 1
        assert melody[0].tab.label == "String 2, fret 1"

    def test_chord_tone_positions(self) -> None:
        """Chord tone picks index root, third, fifth."""
        rng = FixedRandom(draws=[0.1], picks=[0, 0, 1, 1, 2, 0, 1, 0])
        melody = generate_melody_for_progression("C", "major", ["Am"], rng)
        assert [n.note for n in melody] == ["A4", "C5", "E4", "C4"]

    def test_scale_tone(self) -> None:
        """Draws at or above 0.7 pick from the whole scale."""
        rng = FixedRandom(draws=[0.7], picks=[4, 1])
        melody = generate_melody_for_progression("C", "major", ["C"], rng)
        assert melody[0].note == "G5"
        assert (melody[0].tab.string_number, melody[0].tab.fret) == (1, 15)

    def test_tonic_fallback(self) -> None:
        """Chords outside the key are treated as the tonic chord."""
        rng = FixedRandom(draws=[0.0], picks=[1, 0])
        melody = generate_melody_for_progression("C", "major", ["F#"], rng)
        assert melody[0].note == "E4"

    def test_no_capo(self) -> None:
        """The melody scale is the key as given, never capo-shifted."""
        rng = FixedRandom(draws=[0.0], picks=[0, 0])
        # D is degree 2 of C major, so the chord is Dm rather than a tonic fallback
        melody = generate_melody_for_progression("C", "major", ["D"], rng)
        assert melody[0].note == "D4"

    def test_flat_key(self) -> None:
        """Flat keys are normalized; flat chord names don't match and fall back."""
        rng = FixedRandom(draws=[0.0], picks=[0, 1])
        melody = generate_melody_for_progression("Eb", "major", ["Eb"], rng)
        assert melody[0].note == "D#5"


class TestMelodyRandomness:
    """Seeded and unseeded behaviour."""

    def test_seeded_repeatable(self) -> None:
        """Equal seeds give equal melodies."""
        a = generate_melody_for_progression("A", "minor", DEFAULT_PROGRESSION, random.Random(42))
        b = generate_melody_for_progression("A", "minor", DEFAULT_PROGRESSION, random.Random(42))
        assert a == b

    def test_unseeded_varies(self) -> None:
        """Without a random source, calls are independently random."""
        chords = list(DEFAULT_PROGRESSION) * 8
        a = generate_melody_for_progression("C", "major", chords)
        b = generate_melody_for_progression("C", "major", chords)
        assert [n.note for n in a] != [n.note for n in b]

    def test_unsupported_key(self) -> None:
        """Unknown keys raise before any notes are drawn."""
        with pytest.raises(UnsupportedNoteError):
            generate_melody_for_progression("Fb", "major", ["C"])
