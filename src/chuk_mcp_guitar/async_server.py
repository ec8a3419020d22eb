#!/usr/bin/env python3
"""
Async Guitar Theory MCP Server using chuk-mcp-server

Stateless music-theory helpers for guitarists. The server provides tools for:
- Rendering common chord progressions in any key, with capo transposition
- Generating melodies over a progression with tab positions
- Building scales and diatonic triads
- Looking up fretboard positions for a note
- Exporting progressions and melodies to YAML / MIDI
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_guitar.constants import OUTPUT_DIR_ENV
from chuk_mcp_guitar.tools import (
    register_melody_tools,
    register_progression_tools,
    register_theory_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-guitar")

# Paths
BASE_PATH = Path.cwd()
OUTPUT_DIR = Path(os.environ.get(OUTPUT_DIR_ENV, BASE_PATH / "output"))

# Register all tools
progression_tools = register_progression_tools(mcp, OUTPUT_DIR)
melody_tools = register_melody_tools(mcp, OUTPUT_DIR)
theory_tools = register_theory_tools(mcp)

# Export tool functions for direct access
music_generate_progressions = progression_tools["music_generate_progressions"]
music_list_progression_patterns = progression_tools["music_list_progression_patterns"]
music_export_progressions_yaml = progression_tools["music_export_progressions_yaml"]
music_export_progression_midi = progression_tools["music_export_progression_midi"]

music_generate_melody = melody_tools["music_generate_melody"]
music_export_melody_midi = melody_tools["music_export_melody_midi"]

music_build_scale = theory_tools["music_build_scale"]
music_note_to_tab = theory_tools["music_note_to_tab"]

logger.info("CHUK Guitar MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")
