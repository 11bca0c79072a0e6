"""
Constants for the melody system.

No magic strings - defaults, bounds and message templates live here.
"""

# Note numbering (MIDI convention)
NUM_NOTES = 128
NOTES_PER_OCTAVE = 12
CENTS_PER_OCTAVE = 1200
A4_NOTE_NO = 69
A4_FREQUENCY = 440.0

# Octave used when a root is given as a bare pitch class ("D#" -> "D#4")
DEFAULT_ROOT_OCTAVE = 4

# Request defaults (mirrors the form's initial state)
DEFAULT_ROOT = "C4"
DEFAULT_SCALE = "major"
DEFAULT_BARS = 4
DEFAULT_BEATS_PER_BAR = 4
DEFAULT_NOTE_VALUE = 4
DEFAULT_TEMPO = 120
DEFAULT_CHORD_TYPES: tuple[str, ...] = ("maj", "min")
DEFAULT_PATTERNS: tuple[str, ...] = (
    "all-notes-on",
    "double-notes",
    "short-notes",
    "ascending-arpeggio",
    "descending-arpeggio",
    "random-arpeggio",
)

# MIDI export defaults
DEFAULT_VELOCITY = 0.8
DEFAULT_CHANNEL = 0


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH_NAME = "Invalid note name: '{name}'. Expected a name like 'C4' or 'F#3'."
    PITCH_OUT_OF_RANGE = "Note number {number} is out of range. Must be 0-127."
    UNKNOWN_SCALE = "Unknown scale: '{name}'. Available: {available}."
    UNKNOWN_CHORD_TYPE = "Unknown chord type: '{name}'. Available: {available}."
    UNKNOWN_PATTERN = "Unknown melodic pattern: '{name}'. Available: {available}."
    EMPTY_CHORD_TYPES = "Must allow at least one chord type."
    EMPTY_PATTERNS = "Must allow at least one melodic pattern type."
    INVALID_BARS = "Invalid duration in bars: {value}. Must be a positive integer."
    INVALID_BEATS_PER_BAR = "Invalid time signature: {value} beats per bar."
    INVALID_NOTE_VALUE = "Invalid time signature: note value {value}. Must be a positive integer."
    MIDI_NOTE_VALUE = "MIDI time signatures need a power-of-two note value, got {value}."
    MIDI_TEMPO = "MIDI cannot store a tempo of {value} BPM. Must be at least 4 BPM."
    INVALID_TEMPO = "Invalid tempo: {value}. Must be a positive integer."
    INVALID_TIME_SIGNATURE = "Invalid time signature format: '{value}'. Expected like '4/4'."
    REGISTER_OVERFLOW = (
        "Root {root} with scale '{scale}' can reach note {highest}, above the MIDI range."
    )
    PRESET_NOT_FOUND = "Preset '{name}' not found."
    INVALID_FILE_NAME = "Invalid name: '{name}'. Names cannot contain path separators."


class SuccessMessages:
    """Standardized success messages."""

    MELODY_GENERATED = "Generated {steps} chords over {beats} beats."
    MELODY_EXPORTED = "Generated {steps} chords over {beats} beats and wrote {path}."
