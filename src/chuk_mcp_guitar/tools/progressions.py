"""
Progression tools - MCP tools for chord progressions.

Tools for rendering the progression catalog in a key (with capo),
listing the catalog, and exporting progressions as YAML or MIDI.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_guitar.compiler.midi import progression_to_midi
from chuk_mcp_guitar.constants import DEFAULT_KEY, DEFAULT_SCALE, ErrorMessages
from chuk_mcp_guitar.core.scale import ScaleType
from chuk_mcp_guitar.progressions import (
    PROGRESSION_CATALOG,
    clamp_capo,
    generate_chord_progressions,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(
    mcp: ChukMCPServer,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register chord progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_generate_progressions(
        key: str = DEFAULT_KEY,
        scale: str = DEFAULT_SCALE,
        capo: int = 0,
    ) -> str:
        """
        Generate chord progressions for a key.

        Renders every progression in the catalog (pop, classic, jazz cadence,
        rock) as concrete triads. With a capo the progressions are rendered
        in the key the capo shifts to.

        Args:
            key: Root note (e.g., 'C', 'F#', 'Bb')
            scale: 'major' or 'minor' (anything else is treated as major)
            capo: Capo fret, 0-11 (values outside are clamped)

        Returns:
            JSON string with key, capoKey, scale and progressions

        Example:
            music_generate_progressions(key="C", scale="major", capo=2)
        """
        try:
            result = generate_chord_progressions(
                key, ScaleType.from_param(scale), clamp_capo(capo)
            )
            return json.dumps({"status": "success", **result.to_dict()})
        except Exception as e:
            logger.exception("Failed to generate progressions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_generate_progressions"] = music_generate_progressions

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_progression_patterns() -> str:
        """
        List the progression catalog.

        Returns every named pattern with its scale degrees.

        Returns:
            JSON string with list of patterns

        Example:
            music_list_progression_patterns()
        """
        return json.dumps(
            {
                "status": "success",
                "patterns": [
                    {"label": pattern.name, "degrees": list(pattern.degrees)}
                    for pattern in PROGRESSION_CATALOG
                ],
                "count": len(PROGRESSION_CATALOG),
            }
        )

    tools["music_list_progression_patterns"] = music_list_progression_patterns

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_progressions_yaml(
        key: str = DEFAULT_KEY,
        scale: str = DEFAULT_SCALE,
        capo: int = 0,
    ) -> str:
        """
        Export progressions for a key as YAML.

        Same content as music_generate_progressions, formatted for
        reading or saving alongside a chart.

        Args:
            key: Root note
            scale: 'major' or 'minor'
            capo: Capo fret, 0-11

        Returns:
            JSON string with the YAML content

        Example:
            music_export_progressions_yaml(key="A", scale="minor")
        """
        try:
            result = generate_chord_progressions(
                key, ScaleType.from_param(scale), clamp_capo(capo)
            )
            yaml_content = yaml.safe_dump(
                result.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True
            )
            return json.dumps({"status": "success", "yaml": yaml_content})
        except Exception as e:
            logger.exception("Failed to export progressions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_progressions_yaml"] = music_export_progressions_yaml

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_progression_midi(
        pattern: str,
        output_name: str,
        key: str = DEFAULT_KEY,
        scale: str = DEFAULT_SCALE,
        capo: int = 0,
        tempo: int = 120,
    ) -> str:
        """
        Export one progression as a MIDI file of block chords.

        Each chord lasts one bar of 4/4.

        Args:
            pattern: Pattern label from music_list_progression_patterns
            output_name: File name without extension
            key: Root note
            scale: 'major' or 'minor'
            capo: Capo fret, 0-11
            tempo: Tempo in BPM

        Returns:
            JSON string with the output path

        Example:
            music_export_progression_midi(
                pattern="Pop I–V–vi–IV", output_name="pop-in-g", key="G"
            )
        """
        try:
            result = generate_chord_progressions(
                key, ScaleType.from_param(scale), clamp_capo(capo)
            )
            progression = result.get_progression(pattern)
            if progression is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.PATTERN_NOT_FOUND.format(pattern=pattern),
                    }
                )

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name}.mid"
            progression_to_midi(progression, tempo_bpm=tempo).save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": progression.chord_names,
                    "bars": len(progression.chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to export progression MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_progression_midi"] = music_export_progression_midi

    return tools
