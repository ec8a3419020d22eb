"""
Fretboard primitives - standard tuning and note-to-tab mapping.

Strings are numbered the guitarist's way: 1 is the high E, 6 the low E.
A note maps to the position with the lowest fret; equal frets go to the
lower string number (the higher-pitched string).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .pitch import Note

# Open strings, string 6 first
STANDARD_TUNING: tuple[str, ...] = ("E2", "A2", "D3", "G3", "B3", "E4")

OUT_OF_RANGE_LABEL = "(out of range)"


@dataclass(frozen=True)
class TabPosition:
    """
    A playable (string, fret) position.

    string_number 0 / fret -1 marks a note below the lowest open string.
    """

    string_number: int
    fret: int

    OUT_OF_RANGE: ClassVar[TabPosition]

    @property
    def in_range(self) -> bool:
        return self.string_number > 0

    @property
    def label(self) -> str:
        if not self.in_range:
            return OUT_OF_RANGE_LABEL
        return f"String {self.string_number}, fret {self.fret}"

    def to_dict(self) -> dict[str, Any]:
        return {"stringNumber": self.string_number, "fret": self.fret, "label": self.label}


TabPosition.OUT_OF_RANGE = TabPosition(string_number=0, fret=-1)


def open_strings(tuning: tuple[str, ...] = STANDARD_TUNING) -> list[tuple[int, Note]]:
    """(string number, open note) pairs, string 6 first."""
    count = len(tuning)
    return [(count - idx, Note.parse(open_note)) for idx, open_note in enumerate(tuning)]


def candidate_positions(note: str | Note) -> list[TabPosition]:
    """Every position that sounds the note, ignoring the upper fret limit."""
    target = Note.parse(note) if isinstance(note, str) else note
    positions = [
        TabPosition(string_number, target.semitone - open_note.semitone)
        for string_number, open_note in open_strings()
    ]
    return [pos for pos in positions if pos.fret >= 0]


def convert_note_to_tab(note: str | Note) -> TabPosition:
    """
    Map a note to its lowest-fret position in standard tuning.

    Args:
        note: Note string like 'E4' or a Note

    Returns:
        The chosen position, or TabPosition.OUT_OF_RANGE below E2

    Raises:
        InvalidNoteFormatError / UnsupportedNoteError: from note parsing

    Examples:
        convert_note_to_tab("E2") -> string 6, fret 0
        convert_note_to_tab("E4") -> string 1, fret 0
    """
    positions = candidate_positions(note)
    if not positions:
        return TabPosition.OUT_OF_RANGE
    return min(positions, key=lambda pos: (pos.fret, pos.string_number))
