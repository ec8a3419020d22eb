"""
MCP tool implementations.

Tools are organized by domain:
- progressions - Catalog progressions in a key, YAML/MIDI export
- melody - Melody generation with tab positions, MIDI export
- theory - Scales, diatonic chords, note-to-tab lookup
"""

from chuk_mcp_guitar.tools.melody import register_melody_tools
from chuk_mcp_guitar.tools.progressions import register_progression_tools
from chuk_mcp_guitar.tools.theory import register_theory_tools

__all__ = [
    "register_melody_tools",
    "register_progression_tools",
    "register_theory_tools",
]
