"""
Theory tools - MCP tools for scales, chords and tab lookup.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_guitar.constants import DEFAULT_KEY, DEFAULT_SCALE
from chuk_mcp_guitar.core.chord import get_diatonic_chords
from chuk_mcp_guitar.core.fretboard import candidate_positions, convert_note_to_tab
from chuk_mcp_guitar.core.pitch import normalize_key
from chuk_mcp_guitar.core.scale import ScaleType, build_scale

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale and fretboard tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_scale(key: str = DEFAULT_KEY, scale: str = DEFAULT_SCALE) -> str:
        """
        Build a scale and its diatonic triads.

        Args:
            key: Root note (e.g., 'D', 'Bb')
            scale: 'major' or 'minor'

        Returns:
            JSON string with the 7 scale notes and 7 chords

        Example:
            music_build_scale(key="E", scale="minor")
        """
        try:
            root = normalize_key(key)
            scale_type = ScaleType.from_param(scale)
            notes = build_scale(root, scale_type)
            return json.dumps(
                {
                    "status": "success",
                    "key": root,
                    "scaleType": scale_type.value,
                    "scale": notes,
                    "chords": [chord.to_dict() for chord in get_diatonic_chords(notes)],
                }
            )
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_build_scale"] = music_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_note_to_tab(note: str) -> str:
        """
        Find where a note is played on the guitar.

        Uses standard tuning (E2 A2 D3 G3 B3 E4). The chosen position is the
        lowest fret; every other playable position is listed as well.

        Args:
            note: Note with octave (e.g., 'E4', 'C#3')

        Returns:
            JSON string with the chosen tab position and alternatives

        Example:
            music_note_to_tab(note="A3")
        """
        try:
            best = convert_note_to_tab(note)
            return json.dumps(
                {
                    "status": "success",
                    "note": note,
                    "tab": best.to_dict(),
                    "alternatives": [
                        pos.to_dict() for pos in candidate_positions(note) if pos != best
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to convert note to tab")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_note_to_tab"] = music_note_to_tab

    return tools
