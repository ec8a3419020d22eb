"""
Core music primitives.

The arithmetic everything else composes on:
- PitchClass / Note: chromatic pitch space and absolute pitches
- normalize_key / shift_pitch_class: input normalization and transposition
- ScaleType / Key / build_scale: 7-note major and natural minor scales
- ChordQuality / Chord: diatonic triads and reverse lookup by name
- TabPosition / convert_note_to_tab: standard-tuning fretboard mapping
"""

from chuk_mcp_guitar.core.chord import (
    Chord,
    ChordQuality,
    build_chord_triad,
    chord_for_name,
    get_diatonic_chords,
)
from chuk_mcp_guitar.core.fretboard import STANDARD_TUNING, TabPosition, convert_note_to_tab
from chuk_mcp_guitar.core.pitch import (
    CHROMATIC,
    InvalidNoteFormatError,
    Note,
    PitchClass,
    UnsupportedNoteError,
    absolute_semitone,
    normalize_key,
    parse_note,
    pitch_class_index,
    shift_pitch_class,
)
from chuk_mcp_guitar.core.scale import Key, ScaleType, build_scale

__all__ = [
    # Pitch
    "CHROMATIC",
    "PitchClass",
    "Note",
    "UnsupportedNoteError",
    "InvalidNoteFormatError",
    "normalize_key",
    "pitch_class_index",
    "shift_pitch_class",
    "parse_note",
    "absolute_semitone",
    # Scale
    "ScaleType",
    "Key",
    "build_scale",
    # Chord
    "ChordQuality",
    "Chord",
    "build_chord_triad",
    "chord_for_name",
    "get_diatonic_chords",
    # Fretboard
    "STANDARD_TUNING",
    "TabPosition",
    "convert_note_to_tab",
]
