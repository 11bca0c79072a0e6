#!/usr/bin/env python3
"""
Example: Generate melodic phrases and write them to MIDI.

Shows the generation pipeline end to end: a request, the chord walk,
the patterns each chord was rendered with, and the MIDI file.

Usage:
    python examples/generate_phrase.py
    # Creates: examples/output/c_major.mid, examples/output/<preset>.mid
"""

from pathlib import Path

from chuk_mcp_melody.compiler import MidiTrackSink
from chuk_mcp_melody.generation import MelodyResult, generate_melody
from chuk_mcp_melody.models import GenerationRequest
from chuk_mcp_melody.presets import PresetLoader


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: Defaults - four bars of C major triads
    print("Generating c_major.mid...")
    request = GenerationRequest(seed=2024)
    render(request, output_dir / "c_major.mid")

    # Example 2: Every library preset
    loader = PresetLoader()
    for meta in loader.list_presets():
        preset = loader.get_preset(meta.name)
        if preset is None:
            continue
        print(f"\nGenerating {meta.name}.mid ({meta.description})...")
        render(preset.request.with_overrides(seed=7), output_dir / f"{meta.name}.mid")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


def render(request: GenerationRequest, path: Path) -> MelodyResult:
    """Generate one phrase, print its chords and save it."""
    sink = MidiTrackSink(tempo_bpm=request.tempo, time_signature=request.time_signature)
    result = generate_melody(request, track=sink)

    print(f"  Chords: {result.chord_label}")
    for step in result.steps:
        voicing = " ".join(note.name for note in step.notes)
        pattern = step.pattern.display_name
        print(f"    beat {float(step.start):>5.2f}  {step.symbol:<9} {pattern:<13} {voicing}")

    sink.to_midi().save(str(path))
    print(f"  Created: {path}")
    return result


if __name__ == "__main__":
    main()
