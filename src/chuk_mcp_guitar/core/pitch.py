"""
Pitch primitives - PitchClass, Interval, Note.

PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance between pitches in semitones.
Note pins a pitch class to an absolute octave (e.g. "E2", "C#4").

Output spelling is always sharp. Flat spellings are only accepted at the
input boundary via normalize_key().
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering

# Canonical ordering - index is the pitch class value
CHROMATIC: tuple[str, ...] = (
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
)

# Flat spellings we accept on input
ENHARMONIC_MAP: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

_NOTE_PATTERN = re.compile(r"([A-G]#?)([0-9])")


class UnsupportedNoteError(ValueError):
    """A pitch class name outside the canonical 12."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported note: {name}")
        self.name = name


class InvalidNoteFormatError(ValueError):
    """A note string that isn't <pitch class><single-digit octave>."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid note format: {text}")
        self.text = text


def normalize_key(key: str) -> str:
    """
    Normalize user key input.

    Trims whitespace, capitalizes the first character and maps the five
    common flats to their sharp spelling. Anything else passes through
    unchanged ("Fb" stays "Fb").

    Examples:
        normalize_key(" db ") == "C#"
        normalize_key("f#") == "F#"
    """
    key = key.strip()
    capitalized = key[:1].upper() + key[1:]
    return ENHARMONIC_MAP.get(capitalized, capitalized)


def pitch_class_index(name: str) -> int:
    """Index of a canonical pitch class name (0-11)."""
    try:
        return CHROMATIC.index(name)
    except ValueError:
        raise UnsupportedNoteError(name) from None


def shift_pitch_class(root: str, semitones: int) -> str:
    """Shift a pitch class name by semitones, wrapping around the octave."""
    offset = ((semitones % 12) + 12) % 12
    return CHROMATIC[(pitch_class_index(root) + offset) % 12]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Members use sharp names (Cs, Ds, ...); spell() gives "C#", "D#", ...
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        return Interval((other.value - self.value) % 12)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self) -> str:
        """Canonical sharp spelling."""
        return CHROMATIC[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a canonical pitch class name ('C', 'C#', ... 'B').

        Flats are not accepted here - run input through normalize_key() first.

        Raises:
            UnsupportedNoteError: if the name is not one of the 12
        """
        return cls(pitch_class_index(name))


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"


MAJOR_THIRD = Interval(4)


@total_ordering
@dataclass(frozen=True)
class Note:
    """
    A pitch class at an absolute octave.

    Ordering follows the absolute semitone value (octave * 12 + pitch class),
    so E2 < A2 < C4.
    """

    pitch_class: PitchClass
    octave: int

    @property
    def semitone(self) -> int:
        """Absolute semitone value (C0 = 0)."""
        return self.octave * 12 + self.pitch_class.value

    def to_midi(self) -> int:
        """MIDI note number (C4 = 60)."""
        return self.pitch_class.to_midi(self.octave)

    def with_octave(self, octave: int) -> Note:
        """Same pitch class, different octave."""
        return Note(self.pitch_class, octave)

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.semitone < other.semitone

    def __str__(self) -> str:
        return f"{self.pitch_class.spell()}{self.octave}"

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note like 'E2' or 'C#4'.

        Only single-digit octaves and canonical sharp spellings are accepted.

        Raises:
            InvalidNoteFormatError: if the text doesn't look like a note
            UnsupportedNoteError: if the letter/accidental pair isn't canonical ('E#4')
        """
        match = _NOTE_PATTERN.fullmatch(text)
        if not match:
            raise InvalidNoteFormatError(text)
        pitch, octave = match.groups()
        return cls(PitchClass.parse(pitch), int(octave))


def parse_note(text: str) -> Note:
    """Parse a note string. See Note.parse."""
    return Note.parse(text)


def absolute_semitone(note: str | Note) -> int:
    """Absolute semitone value of a note (octave * 12 + pitch class index)."""
    if isinstance(note, str):
        note = Note.parse(note)
    return note.semitone
