"""
Scale primitives - ScaleType, Key.

Scales are fixed offset patterns from a root. A key is a scale type applied
to a root pitch class and always yields exactly 7 pitch classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .pitch import PitchClass


class ScaleType(str, Enum):
    """The two supported scale types."""

    MAJOR = "major"
    MINOR = "minor"  # natural minor

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitone offsets of each degree from the root."""
        return SCALE_OFFSETS[self]

    @classmethod
    def from_param(cls, value: object) -> ScaleType:
        """
        Lenient parse used at the request boundary.

        Case-insensitive; anything other than the string "minor" (including
        None and non-strings) is major.
        """
        if isinstance(value, str) and value.strip().lower() == "minor":
            return cls.MINOR
        return cls.MAJOR


SCALE_OFFSETS: dict[ScaleType, tuple[int, ...]] = {
    ScaleType.MAJOR: (0, 2, 4, 5, 7, 9, 11),
    ScaleType.MINOR: (0, 2, 3, 5, 7, 8, 10),
}


@dataclass(frozen=True)
class Key:
    """
    A root pitch class plus a scale type.

    Examples:
        Key(PitchClass.C, ScaleType.MAJOR) = C major
        Key(PitchClass.A, ScaleType.MINOR) = A minor
    """

    root: PitchClass
    scale: ScaleType

    def get_pitches(self) -> list[PitchClass]:
        """All 7 pitch classes of the key, degree 1 first."""
        return [self.root.transpose(offset) for offset in self.scale.offsets]

    def spell_scale(self) -> list[str]:
        """Scale as canonical sharp names."""
        return [pitch.spell() for pitch in self.get_pitches()]

    def __str__(self) -> str:
        return f"{self.root.spell()} {self.scale.value}"


def build_scale(root: str, scale_type: ScaleType | str) -> list[str]:
    """
    Build the 7-note scale for a root and scale type.

    Args:
        root: Canonical pitch class name (normalize user input first)
        scale_type: ScaleType or its value ("major" / "minor")

    Returns:
        7 pitch class names, degree 1 first

    Raises:
        UnsupportedNoteError: if root is not a canonical pitch class
    """
    return Key(PitchClass.parse(root), ScaleType(scale_type)).spell_scale()
