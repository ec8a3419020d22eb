"""
MIDI export for generated melodies and progressions.

Uses mido. Export is deterministic: the same melody or progression always
produces the same MIDI file. Randomness lives only in melody generation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_guitar.core.pitch import Note
from chuk_mcp_guitar.models.melody import MelodyNote
from chuk_mcp_guitar.models.progression import RenderedProgression

TICKS_PER_BEAT = 480
BEATS_PER_BAR = 4
DEFAULT_VELOCITY = 96
CHORD_VELOCITY = 80


@dataclass(frozen=True)
class NoteEvent:
    """A note in ticks, ready to become note_on/note_off messages."""

    pitch: int
    start_ticks: int
    duration_ticks: int
    velocity: int = DEFAULT_VELOCITY
    channel: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0 or self.duration_ticks < 0:
            raise ValueError("Note times must be >= 0")


def write_events(
    events: Sequence[NoteEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Write note events into a single-track MidiFile.

    Messages are ordered by absolute time with note_off before note_on at
    the same tick, so repeated pitches retrigger cleanly.
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    timeline: list[tuple[int, Message]] = []
    for event in events:
        on = Message("note_on", channel=event.channel, note=event.pitch, velocity=event.velocity)
        off = Message("note_off", channel=event.channel, note=event.pitch, velocity=0)
        timeline.append((event.start_ticks, on))
        timeline.append((event.start_ticks + event.duration_ticks, off))

    timeline.sort(key=lambda item: (item[0], item[1].type != "note_off"))

    now = 0
    for at, msg in timeline:
        track.append(msg.copy(time=at - now))
        now = at

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def melody_events(melody: Sequence[MelodyNote], velocity: int = DEFAULT_VELOCITY) -> list[NoteEvent]:
    """Convert melody notes to events on the beat grid."""
    return [
        NoteEvent(
            pitch=note.get_note().to_midi(),
            start_ticks=note.beat * TICKS_PER_BEAT,
            duration_ticks=note.duration * TICKS_PER_BEAT,
            velocity=velocity,
        )
        for note in melody
    ]


def progression_events(
    progression: RenderedProgression, velocity: int = CHORD_VELOCITY
) -> list[NoteEvent]:
    """One bar-long block triad per chord."""
    bar_ticks = BEATS_PER_BAR * TICKS_PER_BEAT
    events: list[NoteEvent] = []
    for bar, chord in enumerate(progression.chords):
        for name in chord.notes:
            events.append(
                NoteEvent(
                    pitch=Note.parse(name).to_midi(),
                    start_ticks=bar * bar_ticks,
                    duration_ticks=bar_ticks,
                    velocity=velocity,
                )
            )
    return events


def melody_to_midi(melody: Sequence[MelodyNote], tempo_bpm: int = 120) -> MidiFile:
    """Render a generated melody as a MIDI file."""
    return write_events(melody_events(melody), tempo_bpm=tempo_bpm)


def progression_to_midi(progression: RenderedProgression, tempo_bpm: int = 120) -> MidiFile:
    """Render a progression as block chords, one per bar."""
    return write_events(progression_events(progression), tempo_bpm=tempo_bpm)
