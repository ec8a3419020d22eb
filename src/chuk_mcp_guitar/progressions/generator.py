"""
Progression generator - renders the catalog in a (capo-shifted) key.

The capo shifts the working key up by whole semitones before the scale is
built, so "C major, capo 2" renders every pattern in D major. The returned
set still reports the requested key and capo alongside the working key.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from chuk_mcp_guitar.core.chord import build_chord_triad
from chuk_mcp_guitar.core.pitch import normalize_key, shift_pitch_class
from chuk_mcp_guitar.core.scale import ScaleType, build_scale
from chuk_mcp_guitar.models.progression import ChordInfo, ProgressionSet, RenderedProgression
from chuk_mcp_guitar.progressions.catalog import PROGRESSION_CATALOG, ProgressionPattern

logger = logging.getLogger(__name__)

MAX_CAPO = 11

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def clamp_capo(value: Any) -> int:
    """
    Clamp a capo value from request input into [0, 11].

    Strings are read up to the first non-digit ("2.5" and "3abc" give 2 and
    3). Values that can't be read as an integer become 0.
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return 0
        value = match.group(1)
    try:
        capo = int(value)
    except (TypeError, ValueError):
        return 0
    return max(0, min(MAX_CAPO, capo))


def render_pattern(scale: Sequence[str], pattern: ProgressionPattern) -> RenderedProgression:
    """Render one pattern's degrees as chords of the scale."""
    chords = [ChordInfo.from_chord(build_chord_triad(scale, degree)) for degree in pattern.degrees]
    return RenderedProgression(label=pattern.name, degrees=list(pattern.degrees), chords=chords)


def generate_chord_progressions(
    key: str,
    scale_type: ScaleType | str,
    capo: int = 0,
    patterns: Sequence[ProgressionPattern] = PROGRESSION_CATALOG,
) -> ProgressionSet:
    """
    Render every catalog progression for a key.

    Args:
        key: Key as typed by the user ('C', 'bb', ' F# ')
        scale_type: ScaleType or "major" / "minor"
        capo: Semitones to shift the working key (clamped by the caller)
        patterns: Patterns to render (default: the full catalog)

    Returns:
        ProgressionSet with scale and rendered progressions

    Raises:
        UnsupportedNoteError: if the normalized key isn't a pitch class

    Example:
        generate_chord_progressions("C", "major", 2).capo_key == "D"
    """
    scale_type = ScaleType(scale_type)
    normalized = normalize_key(key)
    capo_key = shift_pitch_class(normalized, capo)
    scale = build_scale(capo_key, scale_type)

    logger.debug(f"Rendering {len(patterns)} progressions in {capo_key} {scale_type.value}")

    return ProgressionSet(
        key=normalized,
        capo=capo,
        capo_key=capo_key,
        scale_type=scale_type,
        scale=scale,
        progressions=[render_pattern(scale, pattern) for pattern in patterns],
    )
