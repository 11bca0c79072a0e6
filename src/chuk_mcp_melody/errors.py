"""
Error types for melody generation.

Every error is a request rejection: raised before or during generation,
never recovered inside the core. All of them are ValueErrors so callers
that only care about "bad input" can catch one type.
"""

from __future__ import annotations


class MelodyError(ValueError):
    """Base class for all melody generation errors."""

    code = "MELODY_ERROR"


class InvalidPitchNameError(MelodyError):
    """A note name could not be parsed."""

    code = "INVALID_PITCH_NAME"


class PitchOutOfRangeError(MelodyError):
    """A note number falls outside 0-127."""

    code = "PITCH_OUT_OF_RANGE"


class UnknownScaleError(MelodyError):
    """The scale identifier is not in the scale table."""

    code = "UNKNOWN_SCALE"


class UnknownChordTypeError(MelodyError):
    """The chord type identifier is not in the chord table."""

    code = "UNKNOWN_CHORD_TYPE"


class UnknownPatternError(MelodyError):
    """The melodic pattern name is not one of the known patterns."""

    code = "UNKNOWN_PATTERN"


class EmptyChordTypeSetError(MelodyError):
    """No chord types were allowed."""

    code = "EMPTY_CHORD_TYPES"


class EmptyPatternSetError(MelodyError):
    """No melodic patterns were allowed."""

    code = "EMPTY_PATTERNS"


class InvalidNumericFieldError(MelodyError):
    """Duration, tempo or time signature failed a positivity/range check."""

    code = "INVALID_NUMERIC_FIELD"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
