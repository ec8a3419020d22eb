"""
Pydantic models for generated output.

This module provides:
- ProgressionSet: all catalog progressions for a key/scale/capo
- RenderedProgression / ChordInfo: one progression and its chords
- MelodyNote / TabInfo: generated melody notes with fretboard positions
"""

from chuk_mcp_guitar.models.melody import MelodyNote, TabInfo
from chuk_mcp_guitar.models.progression import ChordInfo, ProgressionSet, RenderedProgression

__all__ = [
    "ChordInfo",
    "MelodyNote",
    "ProgressionSet",
    "RenderedProgression",
    "TabInfo",
]
