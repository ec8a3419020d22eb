"""
Melody generator - one bar of quarter notes per chord.

Each beat draws a chord tone with probability 0.7, otherwise any scale
tone, and places it in octave 4 or 5. Every note is mapped straight to a
fretboard position.

Randomness comes from a RandomSource. random.Random satisfies it; tests
pass a fixed-sequence source. Without one, each call gets a freshly seeded
random.Random, so identical requests produce different melodies.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

from chuk_mcp_guitar.core.chord import chord_for_name
from chuk_mcp_guitar.core.fretboard import convert_note_to_tab
from chuk_mcp_guitar.core.pitch import Note, PitchClass, normalize_key
from chuk_mcp_guitar.core.scale import ScaleType, build_scale
from chuk_mcp_guitar.models.melody import MelodyNote, TabInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PROGRESSION: tuple[str, ...] = ("C", "G", "Am", "F")
CHORD_TONE_PROBABILITY = 0.7
MELODY_OCTAVES: tuple[int, ...] = (4, 5)
BEATS_PER_BAR = 4
NOTE_DURATION = 1


class RandomSource(Protocol):
    """Uniform random draws."""

    def random(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def generate_melody_for_progression(
    key: str,
    scale_type: ScaleType | str,
    chord_names: Sequence[str],
    rng: RandomSource | None = None,
) -> list[MelodyNote]:
    """
    Generate a melody over a chord progression.

    The scale is built from the key as given - no capo is applied here, so
    chord names from a capo-shifted progression may fall back to the tonic.

    Args:
        key: Key as typed by the user
        scale_type: ScaleType or "major" / "minor"
        chord_names: Chord names in order (e.g. ["C", "G", "Am", "F"])
        rng: Random source (default: a new random.Random per call)

    Returns:
        BEATS_PER_BAR notes per chord, beats numbered 0, 1, 2, ...

    Raises:
        UnsupportedNoteError: if the normalized key isn't a pitch class
    """
    if rng is None:
        rng = random.Random()

    scale = build_scale(normalize_key(key), ScaleType(scale_type))
    scale_pitches = [PitchClass.parse(name) for name in scale]

    notes: list[MelodyNote] = []
    beat = 0

    for chord_name in chord_names:
        chord = chord_for_name(scale, chord_name)
        chord_pitches = [note.pitch_class for note in chord.notes]

        for _ in range(BEATS_PER_BAR):
            if rng.random() < CHORD_TONE_PROBABILITY:
                pitch_class = rng.choice(chord_pitches)
            else:
                pitch_class = rng.choice(scale_pitches)
            pitch = Note(pitch_class, rng.choice(MELODY_OCTAVES))

            notes.append(
                MelodyNote(
                    note=str(pitch),
                    duration=NOTE_DURATION,
                    beat=beat,
                    tab=TabInfo.from_position(convert_note_to_tab(pitch)),
                )
            )
            beat += NOTE_DURATION

    logger.debug(f"Generated {len(notes)} melody notes over {len(chord_names)} chords")
    return notes
