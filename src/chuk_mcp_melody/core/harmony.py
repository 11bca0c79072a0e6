"""
Harmony tables - ScaleType and ChordType.

Scales and chords are both lists of semitone offsets from a root.
These tables are the single source of truth for interval content;
nothing else in the package hardcodes intervals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_melody.constants import NOTES_PER_OCTAVE, ErrorMessages
from chuk_mcp_melody.errors import UnknownChordTypeError, UnknownScaleError


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by cumulative semitone offsets from its root.

    Offsets start at 0 and end on the octave (12), so a major scale is
    (0, 2, 4, 5, 7, 9, 11, 12) - eight entries, the last doubling the root.

    Immutable and hashable.
    """

    name: str
    offsets: tuple[int, ...]
    display_name: str = ""

    # Scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    MAJOR_PENTATONIC: ClassVar[ScaleType]
    BLUES: ClassVar[ScaleType]
    CHROMATIC: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        if not self.offsets or self.offsets[0] != 0 or self.offsets[-1] != NOTES_PER_OCTAVE:
            raise ValueError(f"Scale offsets must run from 0 to 12, got {self.offsets}")
        if list(self.offsets) != sorted(set(self.offsets)):
            raise ValueError(f"Scale offsets must be strictly ascending, got {self.offsets}")

    @property
    def degrees(self) -> int:
        """Number of entries, including the octave."""
        return len(self.offsets)

    def __str__(self) -> str:
        return self.display_name or self.name

    def __repr__(self) -> str:
        return f"ScaleType.{self.name.upper().replace('-', '_')}"


# (2 2 1 2 2 2 1)
ScaleType.MAJOR = ScaleType("major", (0, 2, 4, 5, 7, 9, 11, 12), "major")
# (2 1 2 2 1 2 2)
ScaleType.NATURAL_MINOR = ScaleType("natural-minor", (0, 2, 3, 5, 7, 8, 10, 12), "natural minor")
# (2 2 3 2 3)
ScaleType.MAJOR_PENTATONIC = ScaleType(
    "major-pentatonic", (0, 2, 4, 7, 9, 12), "major pentatonic"
)
# (3 2 1 1 3 2)
ScaleType.BLUES = ScaleType("blues", (0, 3, 5, 6, 7, 10, 12), "blues scale")
ScaleType.CHROMATIC = ScaleType("chromatic", tuple(range(13)), "chromatic")

SCALE_TYPES: dict[str, ScaleType] = {
    scale.name: scale
    for scale in (
        ScaleType.MAJOR,
        ScaleType.NATURAL_MINOR,
        ScaleType.MAJOR_PENTATONIC,
        ScaleType.BLUES,
        ScaleType.CHROMATIC,
    )
}

# Display names from the form, normalized the same way as identifiers
_SCALE_ALIASES: dict[str, str] = {"blues-scale": "blues"}


@dataclass(frozen=True)
class ChordType:
    """
    A chord type defined by its semitone offsets from the root.

    Offsets are measured from the root, not stacked: a major triad
    is (0, 4, 7).
    """

    name: str
    offsets: tuple[int, ...]
    display_name: str = ""

    MAJOR: ClassVar[ChordType]
    MINOR: ClassVar[ChordType]
    MAJOR_7: ClassVar[ChordType]
    MINOR_7: ClassVar[ChordType]
    DOMINANT_7: ClassVar[ChordType]
    SUS4: ClassVar[ChordType]
    SUS2: ClassVar[ChordType]

    def __post_init__(self) -> None:
        if not self.offsets or self.offsets[0] != 0:
            raise ValueError(f"Chord offsets must start at the root (0), got {self.offsets}")
        if list(self.offsets) != sorted(self.offsets):
            raise ValueError(f"Chord offsets must be ascending, got {self.offsets}")

    @property
    def size(self) -> int:
        """Number of notes in the chord."""
        return len(self.offsets)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ChordType({self.name!r})"


ChordType.MAJOR = ChordType("maj", (0, 4, 7), "major")
ChordType.MINOR = ChordType("min", (0, 3, 7), "minor")
ChordType.MAJOR_7 = ChordType("maj7", (0, 4, 7, 11), "major 7th")
ChordType.MINOR_7 = ChordType("min7", (0, 3, 7, 10), "minor 7th")
ChordType.DOMINANT_7 = ChordType("7", (0, 4, 7, 10), "dominant 7th")
ChordType.SUS4 = ChordType("sus4", (0, 5, 7), "suspended 4th")
ChordType.SUS2 = ChordType("sus2", (0, 2, 7), "suspended 2nd")

CHORD_TYPES: dict[str, ChordType] = {
    chord.name: chord
    for chord in (
        ChordType.MAJOR,
        ChordType.MINOR,
        ChordType.MAJOR_7,
        ChordType.MINOR_7,
        ChordType.DOMINANT_7,
        ChordType.SUS4,
        ChordType.SUS2,
    )
}


def _normalize_scale_name(name: str) -> str:
    return "-".join(name.strip().lower().replace("_", " ").split())


def get_scale_type(name: str) -> ScaleType:
    """
    Look up a scale by identifier.

    Case, underscores and spaces are normalized, so 'natural_minor' and
    'Natural Minor' both resolve to 'natural-minor'.

    Raises:
        UnknownScaleError: the identifier is not in the table
    """
    key = _normalize_scale_name(name) if isinstance(name, str) else ""
    key = _SCALE_ALIASES.get(key, key)
    if key not in SCALE_TYPES:
        raise UnknownScaleError(
            ErrorMessages.UNKNOWN_SCALE.format(name=name, available=", ".join(SCALE_TYPES))
        )
    return SCALE_TYPES[key]


def get_chord_type(name: str) -> ChordType:
    """
    Look up a chord type by its exact identifier ('maj', 'min7', '7', ...).

    Raises:
        UnknownChordTypeError: the identifier is not in the table
    """
    if name not in CHORD_TYPES:
        raise UnknownChordTypeError(
            ErrorMessages.UNKNOWN_CHORD_TYPE.format(name=name, available=", ".join(CHORD_TYPES))
        )
    return CHORD_TYPES[name]
