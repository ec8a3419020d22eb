"""
Melody tools - MCP tools for melody generation.

Tools for generating a melody (with tab positions) over a chord
progression and exporting it as MIDI.
"""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_guitar.compiler.midi import melody_to_midi
from chuk_mcp_guitar.constants import DEFAULT_KEY, DEFAULT_SCALE
from chuk_mcp_guitar.core.pitch import normalize_key
from chuk_mcp_guitar.core.scale import ScaleType
from chuk_mcp_guitar.melody import DEFAULT_PROGRESSION, generate_melody_for_progression
from chuk_mcp_guitar.models.melody import MelodyNote

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _generate(
    key: str, scale: str, progression: list[str] | None, seed: int | None
) -> tuple[ScaleType, list[str], list[MelodyNote]]:
    scale_type = ScaleType.from_param(scale)
    chords = list(progression) if isinstance(progression, list) else list(DEFAULT_PROGRESSION)
    rng = random.Random(seed)
    return scale_type, chords, generate_melody_for_progression(key, scale_type, chords, rng)


def register_melody_tools(
    mcp: ChukMCPServer,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register melody tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_generate_melody(
        key: str = DEFAULT_KEY,
        scale: str = DEFAULT_SCALE,
        progression: list[str] | None = None,
        seed: int | None = None,
    ) -> str:
        """
        Generate a melody over a chord progression.

        Writes one bar of quarter notes per chord, mostly chord tones,
        each with a guitar tab position in standard tuning. Output is
        random unless a seed is given.

        Chords not in the key are played over as the tonic chord.

        Args:
            key: Root note (e.g., 'C', 'Eb')
            scale: 'major' or 'minor'
            progression: Chord names (default: ['C', 'G', 'Am', 'F'])
            seed: Optional random seed for repeatable output

        Returns:
            JSON string with key, scaleType, progression and melody

        Example:
            music_generate_melody(key="A", scale="minor", progression=["Am", "F", "C", "G"])
        """
        try:
            scale_type, chords, melody = _generate(key, scale, progression, seed)
            return json.dumps(
                {
                    "status": "success",
                    "key": normalize_key(key),
                    "scaleType": scale_type.value,
                    "progression": chords,
                    "melody": [note.to_dict() for note in melody],
                }
            )
        except Exception as e:
            logger.exception("Failed to generate melody")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_generate_melody"] = music_generate_melody

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_melody_midi(
        output_name: str,
        key: str = DEFAULT_KEY,
        scale: str = DEFAULT_SCALE,
        progression: list[str] | None = None,
        tempo: int = 120,
        seed: int | None = None,
    ) -> str:
        """
        Generate a melody and save it as a MIDI file.

        Args:
            output_name: File name without extension
            key: Root note
            scale: 'major' or 'minor'
            progression: Chord names (default: ['C', 'G', 'Am', 'F'])
            tempo: Tempo in BPM
            seed: Optional random seed for repeatable output

        Returns:
            JSON string with output path and the generated notes

        Example:
            music_export_melody_midi(output_name="lead", key="G", seed=7)
        """
        try:
            _, chords, melody = _generate(key, scale, progression, seed)

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name}.mid"
            melody_to_midi(melody, tempo_bpm=tempo).save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "progression": chords,
                    "notes": [note.note for note in melody],
                    "message": f"Exported {len(melody)} notes to {output_path.name}",
                }
            )
        except Exception as e:
            logger.exception("Failed to export melody MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_melody_midi"] = music_export_melody_midi

    return tools
