"""
Generation pipeline - from a request to timed note events.

The pipeline:
    GenerationRequest
    -> Scale (core.builder)
    -> ProgressionGenerator (weighted walk over scale degrees)
    -> MelodicPattern (chord -> note events, one beat per chord)
    -> Track sink + chord label
"""

from chuk_mcp_melody.generation.driver import (
    MelodyResult,
    ResolvedRequest,
    generate_melody,
    validate_request,
)
from chuk_mcp_melody.generation.patterns import CADENCE_PATTERN, MelodicPattern, get_pattern
from chuk_mcp_melody.generation.progression import (
    ChordStep,
    Continue,
    Done,
    HarmonicMove,
    Progression,
    ProgressionGenerator,
    resolve_major_type,
    resolve_minor_type,
)
from chuk_mcp_melody.generation.track import NoteEvent, Track, TrackSink

__all__ = [
    # Driver
    "MelodyResult",
    "ResolvedRequest",
    "generate_melody",
    "validate_request",
    # Patterns
    "CADENCE_PATTERN",
    "MelodicPattern",
    "get_pattern",
    # Progression
    "ChordStep",
    "Continue",
    "Done",
    "HarmonicMove",
    "Progression",
    "ProgressionGenerator",
    "resolve_major_type",
    "resolve_minor_type",
    # Track
    "NoteEvent",
    "Track",
    "TrackSink",
]
