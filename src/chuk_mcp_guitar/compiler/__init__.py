"""
MIDI export for generated output.
"""

from chuk_mcp_guitar.compiler.midi import (
    TICKS_PER_BEAT,
    NoteEvent,
    melody_to_midi,
    progression_to_midi,
    write_events,
)

__all__ = [
    "TICKS_PER_BEAT",
    "NoteEvent",
    "melody_to_midi",
    "progression_to_midi",
    "write_events",
]
