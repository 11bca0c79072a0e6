"""
Melodic patterns - how one chord becomes note events.

Each pattern is a pure function of (chord notes, start beat) that returns
the events it plays and the next beat. Every pattern consumes exactly one
beat; sub-beat structure is purely a rendering choice.

Only RANDOM_ARPEGGIO draws from the random source.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from enum import Enum
from fractions import Fraction

from chuk_mcp_melody.constants import ErrorMessages
from chuk_mcp_melody.core.pitch import Pitch
from chuk_mcp_melody.errors import UnknownPatternError
from chuk_mcp_melody.generation.track import NoteEvent

ONE_BEAT = Fraction(1)
HALF_BEAT = Fraction(1, 2)

PatternResult = tuple[list[NoteEvent], Fraction]


class MelodicPattern(str, Enum):
    """The closed set of note-rendering patterns."""

    ALL_NOTES_ON = "all-notes-on"
    DOUBLE_NOTES = "double-notes"
    SHORT_NOTES = "short-notes"
    ASCENDING_ARPEGGIO = "ascending-arpeggio"
    DESCENDING_ARPEGGIO = "descending-arpeggio"
    RANDOM_ARPEGGIO = "random-arpeggio"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_random(self) -> bool:
        return self is MelodicPattern.RANDOM_ARPEGGIO

    def expand(
        self,
        notes: Sequence[Pitch],
        start: Fraction | int,
        rng: random.Random | None = None,
    ) -> PatternResult:
        """
        Render chord notes starting at a beat.

        Args:
            notes: Chord notes, sorted ascending
            start: Beat at which the pattern starts
            rng: Random source (only used by RANDOM_ARPEGGIO)

        Returns:
            (events in non-decreasing start order, next beat)
        """
        if not notes:
            raise ValueError("A pattern needs at least one note")
        if rng is None:
            rng = random.Random()
        return _EXPANDERS[self](list(notes), Fraction(start), rng)


def _all_notes_on(notes: list[Pitch], start: Fraction, rng: random.Random) -> PatternResult:
    events = [NoteEvent(note, start, ONE_BEAT) for note in notes]
    return events, start + ONE_BEAT


def _double_notes(notes: list[Pitch], start: Fraction, rng: random.Random) -> PatternResult:
    events = [NoteEvent(note, start, HALF_BEAT) for note in notes]
    events += [NoteEvent(note, start + HALF_BEAT, HALF_BEAT) for note in notes]
    return events, start + ONE_BEAT


def _short_notes(notes: list[Pitch], start: Fraction, rng: random.Random) -> PatternResult:
    events = [NoteEvent(note, start, HALF_BEAT) for note in notes]
    return events, start + ONE_BEAT


def _ascending_arpeggio(
    notes: list[Pitch], start: Fraction, rng: random.Random
) -> PatternResult:
    step = Fraction(1, len(notes))
    events = [NoteEvent(note, start + i * step, step) for i, note in enumerate(notes)]
    return events, start + ONE_BEAT


def _descending_arpeggio(
    notes: list[Pitch], start: Fraction, rng: random.Random
) -> PatternResult:
    # Highest note takes the first slot
    step = Fraction(1, len(notes))
    events = [NoteEvent(note, start + i * step, step) for i, note in enumerate(reversed(notes))]
    return events, start + ONE_BEAT


def _random_arpeggio(notes: list[Pitch], start: Fraction, rng: random.Random) -> PatternResult:
    step = Fraction(1, len(notes))
    remaining = list(notes)
    slots: list[Pitch] = [notes[0]] * len(notes)

    # Fill slots from last to first, drawing without replacement
    for i in range(len(notes) - 1, -1, -1):
        slots[i] = remaining.pop(rng.randint(0, len(remaining) - 1))

    events = [NoteEvent(note, start + i * step, step) for i, note in enumerate(slots)]
    return events, start + ONE_BEAT


_EXPANDERS: dict[
    MelodicPattern, Callable[[list[Pitch], Fraction, random.Random], PatternResult]
] = {
    MelodicPattern.ALL_NOTES_ON: _all_notes_on,
    MelodicPattern.DOUBLE_NOTES: _double_notes,
    MelodicPattern.SHORT_NOTES: _short_notes,
    MelodicPattern.ASCENDING_ARPEGGIO: _ascending_arpeggio,
    MelodicPattern.DESCENDING_ARPEGGIO: _descending_arpeggio,
    MelodicPattern.RANDOM_ARPEGGIO: _random_arpeggio,
}

_DISPLAY_NAMES: dict[MelodicPattern, str] = {
    MelodicPattern.ALL_NOTES_ON: "All notes on",
    MelodicPattern.DOUBLE_NOTES: "Double notes",
    MelodicPattern.SHORT_NOTES: "Short notes",
    MelodicPattern.ASCENDING_ARPEGGIO: "Asc. arp.",
    MelodicPattern.DESCENDING_ARPEGGIO: "Desc. arp.",
    MelodicPattern.RANDOM_ARPEGGIO: "Rand. arp.",
}

# Played on the final step when the phrase must end on the tonic
CADENCE_PATTERN = MelodicPattern.ALL_NOTES_ON


def get_pattern(name: str | MelodicPattern) -> MelodicPattern:
    """
    Look up a pattern by name ('ascending-arpeggio', ...).

    Raises:
        UnknownPatternError: the name is not a known pattern
    """
    try:
        return MelodicPattern(name)
    except ValueError as e:
        raise UnknownPatternError(
            ErrorMessages.UNKNOWN_PATTERN.format(
                name=name, available=", ".join(p.value for p in MelodicPattern)
            )
        ) from e
