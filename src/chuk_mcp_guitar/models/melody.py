"""
Melody models - generated notes with their fretboard positions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_guitar.core.fretboard import TabPosition
from chuk_mcp_guitar.core.pitch import Note


class TabInfo(BaseModel):
    """Serialized fretboard position."""

    string_number: int = Field(..., alias="stringNumber", ge=0, le=6, description="1-6, 0 = none")
    fret: int = Field(..., ge=-1, description="Fret number, -1 = out of range")
    label: str = Field(..., description="Human-readable position")

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_position(cls, position: TabPosition) -> TabInfo:
        return cls(string_number=position.string_number, fret=position.fret, label=position.label)


class MelodyNote(BaseModel):
    """
    A single melody note.

    `beat` is absolute across the whole progression (not reset per bar).
    """

    note: str = Field(..., description="Pitch class + octave (e.g. 'E4')")
    duration: int = Field(1, gt=0, description="Length in beats")
    beat: int = Field(..., ge=0, description="Absolute beat offset")
    tab: TabInfo = Field(..., description="Fretboard position")

    model_config = {"frozen": True}

    def get_note(self) -> Note:
        """Parsed Note."""
        return Note.parse(self.note)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
