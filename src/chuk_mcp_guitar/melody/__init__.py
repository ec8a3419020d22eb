"""
Melody generation over chord progressions.
"""

from chuk_mcp_guitar.melody.generator import (
    BEATS_PER_BAR,
    CHORD_TONE_PROBABILITY,
    DEFAULT_PROGRESSION,
    MELODY_OCTAVES,
    RandomSource,
    generate_melody_for_progression,
)

__all__ = [
    "BEATS_PER_BAR",
    "CHORD_TONE_PROBABILITY",
    "DEFAULT_PROGRESSION",
    "MELODY_OCTAVES",
    "RandomSource",
    "generate_melody_for_progression",
]
