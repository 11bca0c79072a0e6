"""
Pitch primitives - PitchClass and Pitch.

PitchClass represents the 12 chromatic pitches (octave-independent).
Pitch is an absolute note number (MIDI numbering, A4 = 69, C4 = 60).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_melody.constants import (
    A4_FREQUENCY,
    A4_NOTE_NO,
    CENTS_PER_OCTAVE,
    NOTES_PER_OCTAVE,
    NUM_NOTES,
    ErrorMessages,
)
from chuk_mcp_melody.errors import InvalidPitchNameError, PitchOutOfRangeError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]

# <letter>[#]<octave>; octave -1 covers note numbers 0-11
_NOTE_NAME_RE = re.compile(r"([A-Za-z]#?)(-1|\d)")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Names are always spelled with sharps.
    """

    C = 0
    Cs = 1  # C#
    D = 2
    Ds = 3  # D#
    E = 4
    F = 5
    Fs = 6  # F#
    G = 7
    Gs = 8  # G#
    A = 9
    As = 10  # A#
    B = 11

    def spell(self) -> str:
        """Get human-readable name."""
        return _SHARP_NAMES[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'c#', 'F#'."""
        key = name.strip()
        key = key[:1].upper() + key[1:]
        if key not in _SHARP_NAMES:
            raise InvalidPitchNameError(ErrorMessages.INVALID_PITCH_NAME.format(name=name))
        return cls(_SHARP_NAMES.index(key))


@dataclass(frozen=True, order=True)
class Pitch:
    """
    An absolute note, identified by its note number (0-127).

    Immutable value type: equality, hashing and ordering all use the
    note number, so chord notes sort ascending with plain sorted().
    """

    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise PitchOutOfRangeError(ErrorMessages.PITCH_OUT_OF_RANGE.format(number=self.number))
        if not 0 <= self.number < NUM_NOTES:
            raise PitchOutOfRangeError(ErrorMessages.PITCH_OUT_OF_RANGE.format(number=self.number))

    @classmethod
    def from_number(cls, number: int) -> Pitch:
        """Create a pitch from a note number in [0, 128)."""
        return cls(number)

    @classmethod
    def from_name(cls, name: str) -> Pitch:
        """
        Parse a note name like 'C4', 'f#3' or 'A-1'.

        The octave shifts by 12 semitones per unit, offset so that
        octave 4 begins at note 60.

        Raises:
            InvalidPitchNameError: malformed name or unknown pitch class
            PitchOutOfRangeError: the name lands outside 0-127 (e.g. 'A9')
        """
        if not isinstance(name, str):
            raise InvalidPitchNameError(ErrorMessages.INVALID_PITCH_NAME.format(name=name))

        match = _NOTE_NAME_RE.fullmatch(name.strip())
        if match is None:
            raise InvalidPitchNameError(ErrorMessages.INVALID_PITCH_NAME.format(name=name))

        pitch_class = PitchClass.parse(match.group(1))
        octave = int(match.group(2))
        return cls((octave + 1) * NOTES_PER_OCTAVE + pitch_class.value)

    @property
    def pitch_class(self) -> PitchClass:
        """The pitch class (note number modulo 12)."""
        return PitchClass(self.number % NOTES_PER_OCTAVE)

    @property
    def octave(self) -> int:
        """Octave number; C4 = 60 starts octave 4."""
        return self.number // NOTES_PER_OCTAVE - 1

    @property
    def name(self) -> str:
        """Note name with octave, e.g. 'D#4'."""
        return f"{self.pitch_class.spell()}{self.octave}"

    def frequency(self, cents: float = 0.0) -> float:
        """
        Frequency in Hz, optionally detuned by a number of cents.

        F(n) = 440 * 2 ^ ((n - 69) / 12 + cents / 1200)
        """
        note_exp = (self.number - A4_NOTE_NO) / NOTES_PER_OCTAVE
        offset_exp = cents / CENTS_PER_OCTAVE
        return A4_FREQUENCY * 2 ** (note_exp + offset_exp)

    def transpose(self, semitones: int) -> Pitch:
        """Transpose by a number of semitones (positive or negative)."""
        return Pitch(self.number + semitones)

    def shift_octaves(self, octaves: int) -> Pitch:
        """Shift by whole octaves. Raises PitchOutOfRangeError if the result leaves 0-127."""
        return self.transpose(octaves * NOTES_PER_OCTAVE)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Pitch({self.name})"
