"""
MIDI export - the end of the pipeline.

This module handles conversion from note events to MIDI files using mido.
All operations are deterministic: same input -> same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_melody.constants import (
    DEFAULT_CHANNEL,
    DEFAULT_TEMPO,
    DEFAULT_VELOCITY,
    ErrorMessages,
)
from chuk_mcp_melody.core.rhythm import TimeSignature
from chuk_mcp_melody.errors import InvalidNumericFieldError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_melody.generation.track import NoteEvent


# Standard ticks per beat (quarter note) - divisible by 3 and 4 so
# triplet and sixteenth arpeggio steps land on whole ticks
TICKS_PER_BEAT = 480

# set_tempo holds a 24-bit microseconds-per-beat value
MAX_MIDI_TEMPO = 0xFFFFFF


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    This is the lowest-level representation before writing to MIDI.
    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = DEFAULT_TEMPO,
    ticks_per_beat: int = TICKS_PER_BEAT,
    time_signature: TimeSignature | None = None,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        time_signature: Optional time signature meta message

    Returns:
        A mido MidiFile ready to be saved

    Raises:
        InvalidNumericFieldError: the tempo is too slow for MIDI, or the time
            signature note value is not a power of two
    """
    if time_signature is not None:
        note_value = time_signature.note_value
        # MIDI stores the denominator as a power of two
        if note_value & (note_value - 1):
            raise InvalidNumericFieldError(
                "note_value", ErrorMessages.MIDI_NOTE_VALUE.format(value=note_value)
            )

    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    if tempo_us > MAX_MIDI_TEMPO:
        raise InvalidNumericFieldError("tempo", ErrorMessages.MIDI_TEMPO.format(value=tempo_bpm))
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    if time_signature is not None:
        track.append(
            MetaMessage(
                "time_signature",
                numerator=time_signature.beats_per_bar,
                denominator=time_signature.note_value,
                time=0,
            )
        )

    messages: list[tuple[int, Message]] = []

    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,  # Will be converted to delta
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message(
                    "note_off",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=0,
                    time=0,  # Will be converted to delta
                ),
            )
        )

    # Sort by absolute time, note_off before note_on at the same tick
    # so repeated notes (double-notes) retrigger cleanly
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def beats_to_ticks(beats: Fraction | float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))


def note_event_to_midi_event(
    event: NoteEvent,
    velocity: float = DEFAULT_VELOCITY,
    channel: int = DEFAULT_CHANNEL,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiEvent:
    """Convert one generated note event to a tick-based MidiEvent."""
    return MidiEvent(
        pitch=event.pitch.number,
        start_ticks=beats_to_ticks(event.start, ticks_per_beat),
        duration_ticks=beats_to_ticks(event.duration, ticks_per_beat),
        velocity=velocity_float_to_int(velocity),
        channel=channel,
    )


def note_events_to_midi(
    note_events: Sequence[NoteEvent],
    tempo_bpm: int = DEFAULT_TEMPO,
    time_signature: TimeSignature | None = None,
    velocity: float = DEFAULT_VELOCITY,
    channel: int = DEFAULT_CHANNEL,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert generated note events straight to a MidiFile.

    Example:
        result = generate_melody(GenerationRequest(seed=7))
        mid = note_events_to_midi(result.events, result.tempo, result.time_signature)
        mid.save("phrase.mid")
    """
    events = [
        note_event_to_midi_event(e, velocity, channel, ticks_per_beat) for e in note_events
    ]
    return events_to_midi(events, tempo_bpm, ticks_per_beat, time_signature)


class MidiTrackSink:
    """
    Track sink that collects note events for MIDI rendering.

    Pass it to generate_melody() as the track, then call to_midi().
    """

    def __init__(
        self,
        tempo_bpm: int = DEFAULT_TEMPO,
        time_signature: TimeSignature | None = None,
        velocity: float = DEFAULT_VELOCITY,
        channel: int = DEFAULT_CHANNEL,
    ):
        self.tempo_bpm = tempo_bpm
        self.time_signature = time_signature
        self.velocity = velocity
        self.channel = channel
        self.events: list[NoteEvent] = []

    def append(self, event: NoteEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()

    def to_midi(self, ticks_per_beat: int = TICKS_PER_BEAT) -> MidiFile:
        """Render the collected events."""
        return note_events_to_midi(
            self.events,
            tempo_bpm=self.tempo_bpm,
            time_signature=self.time_signature,
            velocity=self.velocity,
            channel=self.channel,
            ticks_per_beat=ticks_per_beat,
        )
