"""
Chord progressions.

Provides:
- ProgressionPattern / PROGRESSION_CATALOG: the named degree patterns
- generate_chord_progressions: render the catalog in a key with optional capo
"""

from chuk_mcp_guitar.progressions.catalog import (
    PROGRESSION_CATALOG,
    ProgressionPattern,
    get_pattern,
)
from chuk_mcp_guitar.progressions.generator import (
    clamp_capo,
    generate_chord_progressions,
    render_pattern,
)

__all__ = [
    "PROGRESSION_CATALOG",
    "ProgressionPattern",
    "clamp_capo",
    "generate_chord_progressions",
    "get_pattern",
    "render_pattern",
]
