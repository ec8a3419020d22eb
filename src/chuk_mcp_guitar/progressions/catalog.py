"""
Progression catalog - named scale-degree patterns.

Patterns are key-independent; they become chords once rendered against a
scale. Entries are not unique by degree set: two pop patterns use the same
degrees {1, 4, 5, 6} in different orders and are kept as separate entries.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressionPattern:
    """A named, ordered sequence of scale degrees (1-7)."""

    name: str
    degrees: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.degrees:
            raise ValueError(f"Pattern '{self.name}' has no degrees")
        for degree in self.degrees:
            if not 1 <= degree <= 7:
                raise ValueError(f"Degree must be 1-7, got {degree} in '{self.name}'")

    def __str__(self) -> str:
        return self.name


PROGRESSION_CATALOG: tuple[ProgressionPattern, ...] = (
    ProgressionPattern("Pop I–V–vi–IV", (1, 5, 6, 4)),
    ProgressionPattern("Pop vi–IV–I–V", (6, 4, 1, 5)),
    ProgressionPattern("Classic I–vi–IV–V", (1, 6, 4, 5)),
    ProgressionPattern("ii–V–I (Jazz-ish cadence)", (2, 5, 1)),
    ProgressionPattern("I–IV–V–IV (Rock)", (1, 4, 5, 4)),
)


def get_pattern(name: str) -> ProgressionPattern | None:
    """Get a catalog pattern by name, or None if unknown."""
    for pattern in PROGRESSION_CATALOG:
        if pattern.name == name:
            return pattern
    return None
