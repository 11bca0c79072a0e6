"""
Progression generator - a weighted random walk over scale degrees.

Each step picks a chord (degree + chord type), voices it, renders it with a
melodic pattern and advances the beat cursor. The walk favours I, IV, V and
vi, the chords most songs lean on:

    face 0      any degree, any allowed chord type
    face 1      I   (major substitute)
    faces 2-3   IV  (major substitute)
    faces 4-5   V   (major substitute)
    face 6      vi  (minor substitute), only for scales with more than 5 notes

A step is final once fewer than one full beat remains before the nominal end
(cursor > num_beats - 2). With end_on_tonic the final step is forced to the
tonic major chord played as a block chord. The last pattern may run past
num_beats; that overshoot is bounded by one pattern span and is kept.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction

from chuk_mcp_melody.constants import ErrorMessages
from chuk_mcp_melody.core.builder import build_chord, chord_symbol
from chuk_mcp_melody.core.harmony import get_chord_type
from chuk_mcp_melody.core.pitch import Pitch
from chuk_mcp_melody.errors import (
    EmptyChordTypeSetError,
    EmptyPatternSetError,
    InvalidNumericFieldError,
)
from chuk_mcp_melody.generation.patterns import CADENCE_PATTERN, MelodicPattern, get_pattern
from chuk_mcp_melody.generation.track import NoteEvent


class HarmonicMove(str, Enum):
    """What kind of chord a step chose."""

    RANDOM = "random"
    TONIC = "tonic"
    SUBDOMINANT = "subdominant"
    DOMINANT = "dominant"
    RELATIVE_MINOR = "relative-minor"
    CADENCE = "cadence"  # forced final tonic, never rolled


# One entry per die face; IV and V carry double weight
DIE_FACES: tuple[HarmonicMove, ...] = (
    HarmonicMove.RANDOM,
    HarmonicMove.TONIC,
    HarmonicMove.SUBDOMINANT,
    HarmonicMove.SUBDOMINANT,
    HarmonicMove.DOMINANT,
    HarmonicMove.DOMINANT,
    HarmonicMove.RELATIVE_MINOR,
)

# Scale degree (0-indexed) for each fixed move
MOVE_DEGREES: dict[HarmonicMove, int] = {
    HarmonicMove.TONIC: 0,
    HarmonicMove.SUBDOMINANT: 3,
    HarmonicMove.DOMINANT: 4,
    HarmonicMove.RELATIVE_MINOR: 5,
    HarmonicMove.CADENCE: 0,
}

# Scales need more notes than this to have a usable vi
RELATIVE_MINOR_MIN_DEGREES = 5


def resolve_major_type(chord_types: Sequence[str]) -> str:
    """
    Chord type used wherever a major chord is wanted.

    'maj' if allowed, else 'maj7', else the first allowed type in
    configured order. The last fallback is arbitrary, not harmonic.
    """
    return _resolve_substitute(chord_types, ("maj", "maj7"))


def resolve_minor_type(chord_types: Sequence[str]) -> str:
    """Chord type used wherever a minor chord is wanted ('min', 'min7', else first)."""
    return _resolve_substitute(chord_types, ("min", "min7"))


def _resolve_substitute(chord_types: Sequence[str], preferred: tuple[str, ...]) -> str:
    if not chord_types:
        raise EmptyChordTypeSetError(ErrorMessages.EMPTY_CHORD_TYPES)
    for chord_type in preferred:
        if chord_type in chord_types:
            return chord_type
    return chord_types[0]


@dataclass(frozen=True)
class ChordStep:
    """One chord of the progression and the notes its pattern produced."""

    move: HarmonicMove
    degree: int
    chord_type: str
    root: Pitch
    notes: tuple[Pitch, ...]  # ascending, after any root inversion
    inverted: bool
    pattern: MelodicPattern
    start: Fraction
    next_beat: Fraction
    events: tuple[NoteEvent, ...] = field(default=())

    @property
    def symbol(self) -> str:
        """Chord label such as 'G4maj'."""
        return chord_symbol(self.root, self.chord_type)


@dataclass(frozen=True)
class Continue:
    """Keep walking from this cursor."""

    cursor: Fraction


@dataclass(frozen=True)
class Done:
    """The final step has been emitted."""

    end_beat: Fraction


@dataclass
class Progression:
    """The full walk: ordered steps and where the last one ended."""

    steps: list[ChordStep]
    end_beat: Fraction

    @property
    def events(self) -> list[NoteEvent]:
        """All note events, in generation order."""
        return [event for step in self.steps for event in step.events]

    @property
    def label(self) -> str:
        """Space-joined chord names in generation order."""
        return " ".join(step.symbol for step in self.steps)


class ProgressionGenerator:
    """
    Walks harmonic degrees until the target beat count is covered.

    The random source is passed in so a fixed seed reproduces the walk.
    """

    def __init__(
        self,
        scale: Sequence[Pitch],
        chord_types: Sequence[str],
        num_beats: int,
        patterns: Sequence[MelodicPattern | str] = tuple(MelodicPattern),
        *,
        root_inversion: bool = False,
        end_on_tonic: bool = True,
        rng: random.Random | None = None,
    ):
        """
        Initialize the generator.

        Args:
            scale: Scale notes, indexed by degree (0 = tonic)
            chord_types: Allowed chord type identifiers, in configured order
            num_beats: Target length in beats
            patterns: Allowed melodic patterns
            root_inversion: Randomly raise chord roots an octave
            end_on_tonic: Force a tonic block chord on the final step
            rng: Random source (a fresh unseeded one if omitted)
        """
        if not chord_types:
            raise EmptyChordTypeSetError(ErrorMessages.EMPTY_CHORD_TYPES)
        if not patterns:
            raise EmptyPatternSetError(ErrorMessages.EMPTY_PATTERNS)
        if isinstance(num_beats, bool) or not isinstance(num_beats, int) or num_beats <= 0:
            raise InvalidNumericFieldError(
                "num_beats", f"Invalid number of beats: {num_beats}. Must be a positive integer."
            )

        self.scale = list(scale)
        self.chord_types = list(dict.fromkeys(chord_types))
        for chord_type in self.chord_types:
            get_chord_type(chord_type)
        self.patterns = list(dict.fromkeys(get_pattern(p) for p in patterns))
        self.num_beats = num_beats
        self.root_inversion = root_inversion
        self.end_on_tonic = end_on_tonic
        self.rng = rng if rng is not None else random.Random()

        self.major_type = resolve_major_type(self.chord_types)
        self.minor_type = resolve_minor_type(self.chord_types)

    @property
    def die_faces(self) -> tuple[HarmonicMove, ...]:
        """Faces available for this scale; vi needs more than 5 notes."""
        if len(self.scale) > RELATIVE_MINOR_MIN_DEGREES:
            return DIE_FACES
        return DIE_FACES[:-1]

    def is_final(self, cursor: Fraction) -> bool:
        """True when fewer than one full beat remains before the nominal end."""
        return cursor > self.num_beats - 2

    def choose_chord(self, final: bool) -> tuple[HarmonicMove, int, str]:
        """Pick (move, degree, chord type) for the next step."""
        if final and self.end_on_tonic:
            return HarmonicMove.CADENCE, MOVE_DEGREES[HarmonicMove.CADENCE], self.major_type

        faces = self.die_faces
        move = faces[self.rng.randint(0, len(faces) - 1)]

        if move is HarmonicMove.RANDOM:
            degree = self.rng.randint(0, len(self.scale) - 1)
            return move, degree, self.rng.choice(self.chord_types)
        if move is HarmonicMove.RELATIVE_MINOR:
            return move, MOVE_DEGREES[move], self.minor_type
        return move, MOVE_DEGREES[move], self.major_type

    def voice_chord(self, root: Pitch, chord_type: str) -> tuple[list[Pitch], bool]:
        """Build the chord, maybe raise its root an octave, and sort ascending."""
        notes = build_chord(root, chord_type)
        inverted = self.root_inversion and self.rng.random() < 0.5
        if inverted:
            notes[0] = notes[0].shift_octaves(1)
        return sorted(notes), inverted

    def choose_pattern(self, move: HarmonicMove) -> MelodicPattern:
        """Block chord for the cadence, otherwise any allowed pattern."""
        if move is HarmonicMove.CADENCE:
            return CADENCE_PATTERN
        return self.rng.choice(self.patterns)

    def step(self, cursor: Fraction) -> tuple[ChordStep, Continue | Done]:
        """
        Emit one chord step starting at the cursor.

        Returns:
            The step and the decision: Continue(next cursor) or Done(end beat)
        """
        final = self.is_final(cursor)
        move, degree, chord_type = self.choose_chord(final)
        root = self.scale[degree]
        notes, inverted = self.voice_chord(root, chord_type)
        pattern = self.choose_pattern(move)
        events, next_beat = pattern.expand(notes, cursor, self.rng)

        chord_step = ChordStep(
            move=move,
            degree=degree,
            chord_type=chord_type,
            root=root,
            notes=tuple(notes),
            inverted=inverted,
            pattern=pattern,
            start=cursor,
            next_beat=next_beat,
            events=tuple(events),
        )
        decision: Continue | Done = Done(next_beat) if final else Continue(next_beat)
        return chord_step, decision

    def run(self) -> Progression:
        """Walk from beat 0 until a final step has been emitted."""
        steps: list[ChordStep] = []
        state: Continue | Done = Continue(Fraction(0))

        while isinstance(state, Continue):
            chord_step, state = self.step(state.cursor)
            steps.append(chord_step)

        return Progression(steps=steps, end_beat=state.end_beat)
