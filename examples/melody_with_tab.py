#!/usr/bin/env python3
"""
Example: Progressions, a melody with tab, and MIDI files.

Renders the progression catalog for G major with a capo on fret 2, writes a
melody over the first progression, prints it as tab positions and saves
both as MIDI.

Usage:
    python examples/melody_with_tab.py
    # Creates: examples/output/progression.mid, examples/output/melody.mid
"""

import random
from pathlib import Path

from chuk_mcp_guitar.compiler import melody_to_midi, progression_to_midi
from chuk_mcp_guitar.melody import generate_melody_for_progression
from chuk_mcp_guitar.progressions import generate_chord_progressions


def main() -> None:
    """Generate and print an example."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    result = generate_chord_progressions("G", "major", capo=2)
    print(f"Key {result.key}, capo {result.capo} -> playing in {result.capo_key}")
    print(f"Scale: {' '.join(result.scale)}\n")
    for progression in result.progressions:
        print(f"  {progression.label:<28} {' '.join(progression.chord_names)}")

    pop = result.progressions[0]
    # Melody uses the capo key so the chord names resolve in-scale
    melody = generate_melody_for_progression(
        result.capo_key, result.scale_type, pop.chord_names, random.Random(7)
    )

    print(f"\nMelody over {' '.join(pop.chord_names)}:")
    for note in melody:
        print(f"  beat {note.beat:>2}  {note.note:<4} {note.tab.label}")

    progression_to_midi(pop, tempo_bpm=96).save(str(output_dir / "progression.mid"))
    melody_to_midi(melody, tempo_bpm=96).save(str(output_dir / "melody.mid"))
    print(f"\nSaved MIDI files to {output_dir}")


if __name__ == "__main__":
    main()
