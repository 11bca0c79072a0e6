"""
MIDI compilation - turns generated note events into MIDI files.

The pipeline:
    NoteEvent (beats, Fraction)
    -> MidiEvent (ticks)
    -> MIDI File
"""

from chuk_mcp_melody.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    MidiTrackSink,
    beats_to_ticks,
    events_to_midi,
    note_event_to_midi_event,
    note_events_to_midi,
    velocity_float_to_int,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "MidiTrackSink",
    "beats_to_ticks",
    "events_to_midi",
    "note_event_to_midi_event",
    "note_events_to_midi",
    "velocity_float_to_int",
]
