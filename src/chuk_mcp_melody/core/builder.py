"""
Scale and chord builders.

Turn a root Pitch plus a table identifier into an ordered list of Pitches.
Pure and deterministic.
"""

from __future__ import annotations

from chuk_mcp_melody.core.harmony import get_chord_type, get_scale_type
from chuk_mcp_melody.core.pitch import Pitch


def build_scale(root: Pitch, scale_name: str) -> list[Pitch]:
    """
    Build the notes of a scale from a root.

    Args:
        root: The tonic
        scale_name: Scale identifier (e.g. 'major', 'blues')

    Returns:
        Ascending pitches, one per table offset (octave included)

    Raises:
        UnknownScaleError: unknown scale identifier
        PitchOutOfRangeError: a scale note falls outside 0-127
    """
    scale = get_scale_type(scale_name)
    return [root.transpose(offset) for offset in scale.offsets]


def build_chord(root: Pitch, chord_type: str) -> list[Pitch]:
    """
    Build the notes of a chord from its root.

    Args:
        root: The chord root
        chord_type: Chord type identifier (e.g. 'maj', 'min7')

    Returns:
        Ascending pitches, root first

    Raises:
        UnknownChordTypeError: unknown chord type identifier
        PitchOutOfRangeError: a chord note falls outside 0-127
    """
    chord = get_chord_type(chord_type)
    return [root.transpose(offset) for offset in chord.offsets]


def chord_symbol(root: Pitch, chord_type: str) -> str:
    """Label for a chord, e.g. 'G4maj' or 'A4min7'."""
    return f"{root.name}{chord_type}"
