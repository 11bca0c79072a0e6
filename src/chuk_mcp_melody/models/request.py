"""
Generation request model - what the form (or a preset, or a tool call) asks for.

The model only checks types. Musical validation (positivity, table lookups,
register range) happens in the driver, which raises the typed errors from
chuk_mcp_melody.errors in a fixed order.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_melody.constants import (
    DEFAULT_BARS,
    DEFAULT_BEATS_PER_BAR,
    DEFAULT_CHORD_TYPES,
    DEFAULT_NOTE_VALUE,
    DEFAULT_PATTERNS,
    DEFAULT_ROOT,
    DEFAULT_ROOT_OCTAVE,
    DEFAULT_SCALE,
    DEFAULT_TEMPO,
)
from chuk_mcp_melody.core.pitch import Pitch
from chuk_mcp_melody.core.rhythm import TimeSignature


class GenerationRequest(BaseModel):
    """
    Configuration for one melodic phrase.

    Strict typing: '4' is not an int and 2.0 is not a bar count.
    """

    root: str | int = Field(
        DEFAULT_ROOT,
        description="Scale root: note name ('D#4'), pitch class ('D#', octave 4) or note number",
    )
    scale: str = Field(DEFAULT_SCALE, description="Scale identifier (e.g. 'major', 'blues')")
    bars: int = Field(DEFAULT_BARS, strict=True, description="Phrase length in bars")
    beats_per_bar: int = Field(
        DEFAULT_BEATS_PER_BAR, strict=True, description="Time signature numerator"
    )
    note_value: int = Field(
        DEFAULT_NOTE_VALUE, strict=True, description="Time signature denominator"
    )
    tempo: int = Field(DEFAULT_TEMPO, strict=True, description="Tempo in BPM")
    chord_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CHORD_TYPES),
        description="Allowed chord types, in preference order for fallbacks",
    )
    patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PATTERNS),
        description="Allowed melodic patterns",
    )
    root_inversion: bool = Field(False, description="Randomly raise chord roots an octave")
    end_on_tonic: bool = Field(True, description="End on the tonic major chord")
    seed: int | None = Field(None, description="Random seed for reproducible output")

    model_config = {"extra": "forbid"}

    @property
    def num_beats(self) -> int:
        """Target phrase length in beats."""
        return self.bars * self.beats_per_bar

    @property
    def time_signature(self) -> TimeSignature:
        """Time signature (raises InvalidNumericFieldError when invalid)."""
        return TimeSignature(self.beats_per_bar, self.note_value)

    def root_pitch(self) -> Pitch:
        """
        Resolve the root to a Pitch.

        A bare pitch class like 'D#' is placed in octave 4, the way the
        form offers roots.
        """
        if isinstance(self.root, int):
            return Pitch.from_number(self.root)
        name = self.root.strip()
        if name and not name[-1].isdigit():
            name = f"{name}{DEFAULT_ROOT_OCTAVE}"
        return Pitch.from_name(name)

    def with_overrides(self, **overrides: Any) -> GenerationRequest:
        """Return a copy with some fields replaced (None values are ignored)."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return GenerationRequest.model_validate(data)
