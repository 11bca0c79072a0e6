"""
Note events and the track sink they are emitted into.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Protocol

from chuk_mcp_melody.core.pitch import Pitch


@dataclass(frozen=True)
class NoteEvent:
    """
    A single timed note.

    Times are in beats from the start of the phrase, kept as Fraction
    because arpeggios subdivide a beat into thirds and quarters.
    """

    pitch: Pitch
    start: Fraction
    duration: Fraction

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Start must be >= 0, got {self.start}")
        if self.duration <= 0:
            raise ValueError(f"Duration must be positive, got {self.duration}")

    @property
    def end(self) -> Fraction:
        """Beat at which the note stops sounding."""
        return self.start + self.duration


class TrackSink(Protocol):
    """Anything that can receive generated note events."""

    def append(self, event: NoteEvent) -> None: ...

    def clear(self) -> None: ...


class Track:
    """In-memory track: an ordered list of note events."""

    def __init__(self) -> None:
        self.events: list[NoteEvent] = []

    def append(self, event: NoteEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()

    @property
    def end_beat(self) -> Fraction:
        """Beat at which the last note stops (0 for an empty track)."""
        return max((e.end for e in self.events), default=Fraction(0))

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)
