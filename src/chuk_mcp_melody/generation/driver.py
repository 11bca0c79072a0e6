"""
Generation driver - the single entry point for producing a melody.

    GenerationRequest
    -> validate (first violation wins, nothing emitted on failure)
    -> build scale
    -> ProgressionGenerator (chords + patterns)
    -> track sink (clear once, then append in order)
    -> MelodyResult (events + chord label)
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from fractions import Fraction

from chuk_mcp_melody.constants import NUM_NOTES, ErrorMessages
from chuk_mcp_melody.core.builder import build_scale
from chuk_mcp_melody.core.harmony import ScaleType, get_chord_type, get_scale_type
from chuk_mcp_melody.core.pitch import Pitch
from chuk_mcp_melody.core.rhythm import TimeSignature
from chuk_mcp_melody.errors import (
    EmptyChordTypeSetError,
    EmptyPatternSetError,
    InvalidNumericFieldError,
    PitchOutOfRangeError,
)
from chuk_mcp_melody.generation.patterns import MelodicPattern, get_pattern
from chuk_mcp_melody.generation.progression import ChordStep, ProgressionGenerator
from chuk_mcp_melody.generation.track import NoteEvent, TrackSink
from chuk_mcp_melody.models.request import GenerationRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedRequest:
    """A request whose fields have all been checked and resolved."""

    root: Pitch
    scale: ScaleType
    time_signature: TimeSignature
    num_beats: int
    tempo: int
    chord_types: list[str]
    patterns: list[MelodicPattern]


@dataclass
class MelodyResult:
    """Everything one generation produced."""

    events: list[NoteEvent]
    chord_label: str
    steps: list[ChordStep]
    num_beats: int
    end_beat: Fraction
    time_signature: TimeSignature
    tempo: int


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_request(request: GenerationRequest) -> ResolvedRequest:
    """
    Check a request and resolve its identifiers.

    Checks run in order and the first failure is raised: root, scale,
    bars, time signature, tempo, chord types, patterns, register.

    Raises:
        MelodyError subclasses describing the first violated constraint
    """
    root = request.root_pitch()
    scale = get_scale_type(request.scale)

    if not _is_positive_int(request.bars):
        raise InvalidNumericFieldError(
            "bars", ErrorMessages.INVALID_BARS.format(value=request.bars)
        )
    time_signature = request.time_signature
    if not _is_positive_int(request.tempo):
        raise InvalidNumericFieldError(
            "tempo", ErrorMessages.INVALID_TEMPO.format(value=request.tempo)
        )

    if not request.chord_types:
        raise EmptyChordTypeSetError(ErrorMessages.EMPTY_CHORD_TYPES)
    chord_types = list(dict.fromkeys(request.chord_types))
    chord_tables = [get_chord_type(name) for name in chord_types]

    if not request.patterns:
        raise EmptyPatternSetError(ErrorMessages.EMPTY_PATTERNS)
    patterns = list(dict.fromkeys(get_pattern(name) for name in request.patterns))

    # Highest reachable note: top of the scale plus the widest chord,
    # or the octave above the chord root when roots may be raised
    widest = max(max(chord.offsets) for chord in chord_tables)
    if request.root_inversion:
        widest = max(widest, 12)
    highest = root.number + max(scale.offsets) + widest
    if highest >= NUM_NOTES:
        raise PitchOutOfRangeError(
            ErrorMessages.REGISTER_OVERFLOW.format(root=root, scale=scale.name, highest=highest)
        )

    return ResolvedRequest(
        root=root,
        scale=scale,
        time_signature=time_signature,
        num_beats=request.num_beats,
        tempo=request.tempo,
        chord_types=chord_types,
        patterns=patterns,
    )


def generate_melody(
    request: GenerationRequest,
    rng: random.Random | None = None,
    track: TrackSink | None = None,
) -> MelodyResult:
    """
    Generate a melodic phrase.

    Args:
        request: What to generate
        rng: Random source; defaults to random.Random(request.seed)
        track: Optional sink; cleared once, then receives every event in order

    Returns:
        MelodyResult with the events, chord label and chord steps

    Raises:
        MelodyError subclasses if the request is invalid (before any event
        reaches the track)
    """
    resolved = validate_request(request)
    if rng is None:
        rng = random.Random(request.seed)

    logger.debug(f"num beats: {resolved.num_beats}")

    scale_notes = build_scale(resolved.root, resolved.scale.name)
    generator = ProgressionGenerator(
        scale_notes,
        resolved.chord_types,
        resolved.num_beats,
        resolved.patterns,
        root_inversion=request.root_inversion,
        end_on_tonic=request.end_on_tonic,
        rng=rng,
    )
    progression = generator.run()
    events = progression.events

    if track is not None:
        track.clear()
        for event in events:
            track.append(event)

    logger.debug(f"chord names: {progression.label}")

    return MelodyResult(
        events=events,
        chord_label=progression.label,
        steps=progression.steps,
        num_beats=resolved.num_beats,
        end_beat=progression.end_beat,
        time_signature=resolved.time_signature,
        tempo=resolved.tempo,
    )
