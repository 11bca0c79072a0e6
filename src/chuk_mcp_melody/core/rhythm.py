"""
Rhythm primitives - TimeSignature and BeatPosition.

Beat positions use Fraction so arpeggio subdivisions (thirds, quarters)
stay exact.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar

from chuk_mcp_melody.constants import ErrorMessages
from chuk_mcp_melody.errors import InvalidNumericFieldError


@dataclass(frozen=True)
class TimeSignature:
    """
    A time signature defining beats per bar and the note value of a beat.

    Examples:
        TimeSignature(4, 4) = 4/4
        TimeSignature(3, 4) = 3/4
        TimeSignature(6, 8) = 6/8
    """

    beats_per_bar: int
    note_value: int = 4

    COMMON_TIME: ClassVar[TimeSignature]  # 4/4
    WALTZ: ClassVar[TimeSignature]  # 3/4

    def __post_init__(self) -> None:
        beats = self.beats_per_bar
        if isinstance(beats, bool) or not isinstance(beats, int) or beats <= 0:
            raise InvalidNumericFieldError(
                "beats_per_bar", ErrorMessages.INVALID_BEATS_PER_BAR.format(value=beats)
            )
        note_value = self.note_value
        if isinstance(note_value, bool) or not isinstance(note_value, int) or note_value <= 0:
            raise InvalidNumericFieldError(
                "note_value", ErrorMessages.INVALID_NOTE_VALUE.format(value=note_value)
            )

    def __str__(self) -> str:
        return f"{self.beats_per_bar}/{self.note_value}"

    def __repr__(self) -> str:
        return f"TimeSignature({self.beats_per_bar}, {self.note_value})"

    @classmethod
    def parse(cls, notation: str) -> TimeSignature:
        """
        Parse a time signature from notation like '4/4', '3/4', '6/8'.

        Args:
            notation: Time signature string

        Returns:
            TimeSignature object
        """
        parts = notation.split("/")
        if len(parts) != 2:
            raise InvalidNumericFieldError(
                "time_signature", ErrorMessages.INVALID_TIME_SIGNATURE.format(value=notation)
            )

        try:
            beats_per_bar = int(parts[0])
            note_value = int(parts[1])
        except ValueError as e:
            raise InvalidNumericFieldError(
                "time_signature", ErrorMessages.INVALID_TIME_SIGNATURE.format(value=notation)
            ) from e

        return cls(beats_per_bar, note_value)


TimeSignature.COMMON_TIME = TimeSignature(4, 4)
TimeSignature.WALTZ = TimeSignature(3, 4)


@dataclass(frozen=True)
class BeatPosition:
    """
    A position in musical time (bar + beat offset).

    Bar is 0-indexed (bar 0 is the first bar).
    Beat is the fractional position within the bar (0 = start of bar).
    """

    bar: int
    beat: Fraction

    def __post_init__(self) -> None:
        if self.bar < 0:
            raise ValueError(f"Bar must be non-negative, got {self.bar}")
        if self.beat < 0:
            raise ValueError(f"Beat must be non-negative, got {self.beat}")

    def to_beats(self, time_sig: TimeSignature) -> Fraction:
        """Absolute beat number from the start of the phrase."""
        return Fraction(self.bar * time_sig.beats_per_bar) + self.beat

    @classmethod
    def from_beats(cls, beats: Fraction | int, time_sig: TimeSignature) -> BeatPosition:
        """
        Create a BeatPosition from an absolute beat number.

        Args:
            beats: Absolute beat number
            time_sig: Time signature

        Returns:
            BeatPosition
        """
        beats = Fraction(beats)
        bar = int(beats // time_sig.beats_per_bar)
        beat = beats % time_sig.beats_per_bar
        return cls(bar, beat)

    def __str__(self) -> str:
        if self.beat == 0:
            return f"bar {self.bar + 1}"  # Human-readable (1-indexed)
        return f"bar {self.bar + 1}, beat {float(self.beat) + 1:.2f}"
