"""
Core music primitives.

These are the invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: Absolute note number with name and frequency conversions
- ScaleType / ChordType: Interval tables for scales and chords
- build_scale / build_chord: Root + table lookup -> ordered pitches
- TimeSignature: Beats per bar and beat note value
- BeatPosition: Position in musical time (bar + beat)
"""

from chuk_mcp_melody.core.builder import build_chord, build_scale, chord_symbol
from chuk_mcp_melody.core.harmony import (
    CHORD_TYPES,
    SCALE_TYPES,
    ChordType,
    ScaleType,
    get_chord_type,
    get_scale_type,
)
from chuk_mcp_melody.core.pitch import Pitch, PitchClass
from chuk_mcp_melody.core.rhythm import BeatPosition, TimeSignature

__all__ = [
    # Pitch
    "PitchClass",
    "Pitch",
    # Harmony tables
    "ScaleType",
    "ChordType",
    "SCALE_TYPES",
    "CHORD_TYPES",
    "get_scale_type",
    "get_chord_type",
    # Builders
    "build_scale",
    "build_chord",
    "chord_symbol",
    # Rhythm
    "TimeSignature",
    "BeatPosition",
]
