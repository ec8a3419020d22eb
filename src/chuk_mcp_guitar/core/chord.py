"""
Chord primitives - ChordQuality, Chord.

Triads are stacked from scale members (degree, degree+2, degree+4).
Quality comes from a per-degree table chosen once for the whole scale:
if degree 3 sits a major third above degree 1 the scale is read as a
major key, otherwise as a natural minor key. This is a scale-level
classification, not a per-triad interval analysis.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .pitch import MAJOR_THIRD, Note, PitchClass


class ChordQuality(str, Enum):
    """Triad qualities that can appear diatonically."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"

    @property
    def suffix(self) -> str:
        """Display suffix appended to the root name."""
        return _QUALITY_SUFFIX[self]


_QUALITY_SUFFIX: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.DIMINISHED: "°",
}

# I ii iii IV V vi vii°
MAJOR_KEY_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.MINOR,
    ChordQuality.MAJOR,
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
)

# i ii° III iv v VI VII
MINOR_KEY_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.MINOR,
    ChordQuality.MAJOR,
    ChordQuality.MAJOR,
)

DEFAULT_CHORD_OCTAVE = 4

_QUALITY_MARKS = re.compile("[m°]")


@dataclass(frozen=True)
class Chord:
    """
    A diatonic triad at a fixed octave.

    Notes are root, third, fifth - all in the same octave, so the voicing
    is not necessarily ascending (e.g. G4 B4 D4).
    """

    degree: int
    root: PitchClass
    quality: ChordQuality
    notes: tuple[Note, Note, Note]

    @property
    def name(self) -> str:
        """Display name, e.g. 'C', 'Am', 'B°'."""
        return f"{self.root.spell()}{self.quality.suffix}"

    @property
    def note_names(self) -> list[str]:
        """Notes as strings, e.g. ['A4', 'C4', 'E4']."""
        return [str(note) for note in self.notes]

    def to_dict(self) -> dict[str, Any]:
        return {"degree": self.degree, "name": self.name, "notes": self.note_names}

    def __str__(self) -> str:
        return self.name


def is_major_scale(scale: Sequence[str]) -> bool:
    """True if scale degree 3 is a major third above degree 1."""
    first = PitchClass.parse(scale[0])
    third = PitchClass.parse(scale[2])
    return first.interval_to(third) == MAJOR_THIRD


def build_chord_triad(
    scale: Sequence[str], degree: int, octave: int = DEFAULT_CHORD_OCTAVE
) -> Chord:
    """
    Build the triad on a scale degree.

    Args:
        scale: 7 pitch class names, degree 1 first
        degree: Scale degree 1-7
        octave: Octave for all three notes (default 4)

    Returns:
        The triad with quality from the key-wide table

    Raises:
        ValueError: if degree is outside 1-7
        UnsupportedNoteError: if the scale holds a non-canonical name
    """
    if not 1 <= degree <= 7:
        raise ValueError(f"Degree must be 1-7, got {degree}")

    i = degree - 1
    root = PitchClass.parse(scale[i])
    third = PitchClass.parse(scale[(i + 2) % 7])
    fifth = PitchClass.parse(scale[(i + 4) % 7])

    qualities = MAJOR_KEY_QUALITIES if is_major_scale(scale) else MINOR_KEY_QUALITIES

    return Chord(
        degree=degree,
        root=root,
        quality=qualities[i],
        notes=(Note(root, octave), Note(third, octave), Note(fifth, octave)),
    )


def chord_for_name(scale: Sequence[str], name: str) -> Chord:
    """
    Rebuild a chord of the scale from its display name.

    Quality marks ("m", "°") are stripped to recover the root. A root that
    isn't in the scale resolves to the tonic triad instead of failing, so
    chords borrowed from another key quietly become the I (or i) chord.
    """
    root = _QUALITY_MARKS.sub("", name)
    degree = scale.index(root) + 1 if root in scale else 1
    return build_chord_triad(scale, degree)


def get_diatonic_chords(scale: Sequence[str]) -> list[Chord]:
    """All seven triads of a scale, degree 1 first."""
    return [build_chord_triad(scale, degree) for degree in range(1, 8)]
