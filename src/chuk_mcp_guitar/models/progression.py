"""
Progression models - the shape returned for a key/scale/capo request.

Field names are snake_case in Python; the serialized names follow the
public JSON shape (capoKey, scaleType) through aliases. Dump with
model_dump(by_alias=True).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_guitar.core.chord import Chord
from chuk_mcp_guitar.core.scale import ScaleType


class ChordInfo(BaseModel):
    """A rendered chord inside a progression."""

    degree: int = Field(..., ge=1, le=7, description="Scale degree (1-7)")
    name: str = Field(..., description="Display name (e.g. 'C', 'Am', 'B°')")
    notes: list[str] = Field(..., min_length=3, max_length=3, description="Root, third, fifth")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordInfo:
        return cls(degree=chord.degree, name=chord.name, notes=chord.note_names)


class RenderedProgression(BaseModel):
    """One catalog pattern rendered in a concrete key."""

    label: str = Field(..., description="Pattern label (e.g. 'Pop I–V–vi–IV')")
    degrees: list[int] = Field(..., min_length=1, description="Scale degrees in order")
    chords: list[ChordInfo] = Field(..., description="Chords in order")

    model_config = {"frozen": True}

    @property
    def chord_names(self) -> list[str]:
        return [chord.name for chord in self.chords]


class ProgressionSet(BaseModel):
    """
    Every catalog progression for a key, scale type and capo.

    `key` is the normalized requested key; `capo_key` is the key the
    progressions are actually rendered in.
    """

    key: str = Field(..., description="Normalized requested key")
    capo: int = Field(0, description="Capo offset in semitones")
    capo_key: str = Field(..., alias="capoKey", description="Key after capo shift")
    scale_type: ScaleType = Field(..., alias="scaleType", description="major or minor")
    scale: list[str] = Field(..., min_length=7, max_length=7, description="Scale of capo_key")
    progressions: list[RenderedProgression] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}

    def get_progression(self, label: str) -> RenderedProgression | None:
        """Get a rendered progression by label."""
        for progression in self.progressions:
            if progression.label == label:
                return progression
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the public field names."""
        return self.model_dump(by_alias=True, mode="json")
