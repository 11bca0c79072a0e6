"""
Tests for core music primitives.

Tests cover:
- PitchClass and Pitch (pitch.py)
- ScaleType, ChordType and table lookups (harmony.py)
- build_scale, build_chord, chord_symbol (builder.py)
- TimeSignature, BeatPosition (rhythm.py)
"""

from fractions import Fraction

import pytest

from chuk_mcp_melody.core import (
    CHORD_TYPES,
    SCALE_TYPES,
    BeatPosition,
    ChordType,
    Pitch,
    PitchClass,
    ScaleType,
    TimeSignature,
    build_chord,
    build_scale,
    chord_symbol,
    get_chord_type,
    get_scale_type,
)
from chuk_mcp_melody.errors import (
    InvalidNumericFieldError,
    InvalidPitchNameError,
    MelodyError,
    PitchOutOfRangeError,
    UnknownChordTypeError,
    UnknownScaleError,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.Cs == 1
        assert PitchClass.E == 4
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_spell_uses_sharps(self) -> None:
        """Black keys are spelled with sharps."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.G.spell() == "G"

    def test_parse(self) -> None:
        """Parsing is case-insensitive on the letter."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("f#") == PitchClass.Fs
        assert PitchClass.parse(" D# ") == PitchClass.Ds

    def test_parse_invalid(self) -> None:
        """Unknown letters are rejected."""
        with pytest.raises(InvalidPitchNameError):
            PitchClass.parse("H")
        with pytest.raises(InvalidPitchNameError):
            PitchClass.parse("Eb")


class TestPitch:
    """Tests for Pitch value type."""

    def test_reference_pitches(self) -> None:
        """C4 is 60 and A4 is 69."""
        assert Pitch.from_name("C4").number == 60
        assert Pitch.from_name("A4").number == 69
        assert Pitch.from_name("C-1").number == 0
        assert Pitch.from_name("G9").number == 127

    def test_name_round_trip(self) -> None:
        """Every note number survives name -> number."""
        for n in range(128):
            assert Pitch.from_name(Pitch(n).name).number == n

    def test_name_and_octave(self) -> None:
        """Octave is floor(n / 12) - 1."""
        pitch = Pitch(63)
        assert pitch.name == "D#4"
        assert pitch.octave == 4
        assert pitch.pitch_class == PitchClass.Ds
        assert Pitch(11).octave == -1
        assert Pitch(0).name == "C-1"

    def test_lowercase_name(self) -> None:
        """Lowercase letters parse."""
        assert Pitch.from_name("f#3") == Pitch(54)

    @pytest.mark.parametrize("name", ["", "C", "4C", "H4", "C#-2", "C10", "Cb4"])
    def test_invalid_names(self, name: str) -> None:
        """Malformed names are rejected."""
        with pytest.raises(InvalidPitchNameError):
            Pitch.from_name(name)

    def test_name_above_range(self) -> None:
        """A9 is well formed but past note 127."""
        with pytest.raises(PitchOutOfRangeError):
            Pitch.from_name("A9")

    @pytest.mark.parametrize("number", [-1, 128, 300])
    def test_out_of_range_numbers(self, number: int) -> None:
        """Numbers outside 0-127 are rejected."""
        with pytest.raises(PitchOutOfRangeError):
            Pitch.from_number(number)

    def test_non_integer_rejected(self) -> None:
        """Pitches are integers, not bools or floats."""
        with pytest.raises(PitchOutOfRangeError):
            Pitch(True)  # type: ignore[arg-type]
        with pytest.raises(PitchOutOfRangeError):
            Pitch(60.0)  # type: ignore[arg-type]

    def test_frequency(self) -> None:
        """Equal temperament anchored at A4 = 440 Hz."""
        assert Pitch(69).frequency() == pytest.approx(440.0)
        assert Pitch(81).frequency() == pytest.approx(880.0)
        assert Pitch(57).frequency() == pytest.approx(220.0)
        assert Pitch(60).frequency() == pytest.approx(261.6256, abs=1e-3)

    def test_frequency_cents(self) -> None:
        """1200 cents is an octave."""
        assert Pitch(69).frequency(1200) == pytest.approx(880.0)
        assert Pitch(69).frequency(-1200) == pytest.approx(220.0)

    def test_shift_octaves(self) -> None:
        """Shifting adds multiples of 12."""
        c4 = Pitch(60)
        assert c4.shift_octaves(1) == Pitch(72)
        assert c4.shift_octaves(-2) == Pitch(36)
        assert c4.shift_octaves(0) == c4

    def test_shift_octaves_out_of_range(self) -> None:
        """Shifting past the MIDI range fails."""
        with pytest.raises(PitchOutOfRangeError):
            Pitch(120).shift_octaves(1)
        with pytest.raises(PitchOutOfRangeError):
            Pitch(5).shift_octaves(-1)

    def test_ordering_and_equality(self) -> None:
        """Pitches compare by number."""
        assert Pitch(60) == Pitch.from_name("C4")
        assert sorted([Pitch(67), Pitch(60), Pitch(64)]) == [Pitch(60), Pitch(64), Pitch(67)]
        assert len({Pitch(60), Pitch(60)}) == 1

    def test_str_and_repr(self) -> None:
        """String forms use the note name."""
        assert str(Pitch(69)) == "A4"
        assert repr(Pitch(69)) == "Pitch(A4)"

    def test_errors_are_value_errors(self) -> None:
        """Callers can catch ValueError."""
        assert issubclass(PitchOutOfRangeError, MelodyError)
        assert issubclass(MelodyError, ValueError)


class TestHarmonyTables:
    """Tests for scale and chord tables."""

    def test_scale_identifiers(self) -> None:
        """All five scales are present."""
        assert set(SCALE_TYPES) == {
            "major",
            "natural-minor",
            "major-pentatonic",
            "blues",
            "chromatic",
        }

    def test_scales_span_one_octave(self) -> None:
        """Every scale runs from 0 to the octave."""
        for scale in SCALE_TYPES.values():
            assert scale.offsets[0] == 0
            assert scale.offsets[-1] == 12
            assert list(scale.offsets) == sorted(scale.offsets)

    def test_scale_offsets(self) -> None:
        """Spot-check offset tables."""
        assert ScaleType.MAJOR.offsets == (0, 2, 4, 5, 7, 9, 11, 12)
        assert ScaleType.MAJOR_PENTATONIC.degrees == 6
        assert ScaleType.CHROMATIC.degrees == 13

    def test_scale_lookup_normalizes(self) -> None:
        """Case, underscores and spaces are forgiven."""
        assert get_scale_type("Natural Minor") is ScaleType.NATURAL_MINOR
        assert get_scale_type("major_pentatonic") is ScaleType.MAJOR_PENTATONIC
        assert get_scale_type("blues scale") is ScaleType.BLUES

    def test_unknown_scale(self) -> None:
        """Unknown scales are rejected."""
        with pytest.raises(UnknownScaleError):
            get_scale_type("dorian")

    def test_invalid_scale_table(self) -> None:
        """Scale tables must end at the octave."""
        with pytest.raises(ValueError):
            ScaleType("broken", (0, 2, 4))

    def test_chord_identifiers(self) -> None:
        """All seven chord types are present."""
        assert set(CHORD_TYPES) == {"maj", "min", "maj7", "min7", "7", "sus4", "sus2"}

    def test_chord_offsets(self) -> None:
        """Chord tables start at the root."""
        assert ChordType.MAJOR.offsets == (0, 4, 7)
        assert ChordType.MINOR_7.offsets == (0, 3, 7, 10)
        assert get_chord_type("7") is ChordType.DOMINANT_7
        assert ChordType.SUS2.size == 3

    def test_chord_lookup_is_exact(self) -> None:
        """Chord identifiers are not normalized."""
        with pytest.raises(UnknownChordTypeError):
            get_chord_type("Maj")
        with pytest.raises(UnknownChordTypeError):
            get_chord_type("dim")


class TestBuilder:
    """Tests for scale and chord construction."""

    def test_c_major_scale(self) -> None:
        """C major from C4."""
        names = [p.name for p in build_scale(Pitch(60), "major")]
        assert names == ["C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5"]

    def test_a_natural_minor_scale(self) -> None:
        """A natural minor from A3."""
        names = [p.name for p in build_scale(Pitch.from_name("A3"), "natural-minor")]
        assert names == ["A3", "B3", "C4", "D4", "E4", "F4", "G4", "A4"]

    def test_blues_scale(self) -> None:
        """Blues scale from C4."""
        numbers = [p.number for p in build_scale(Pitch(60), "blues")]
        assert numbers == [60, 63, 65, 66, 67, 70, 72]

    def test_scale_out_of_range(self) -> None:
        """A scale that runs past 127 fails."""
        with pytest.raises(PitchOutOfRangeError):
            build_scale(Pitch(120), "major")

    def test_c_major_chord(self) -> None:
        """C4 maj is 60, 64, 67."""
        assert [p.number for p in build_chord(Pitch(60), "maj")] == [60, 64, 67]

    def test_c_minor_seventh(self) -> None:
        """C4 min7 is 60, 63, 67, 70."""
        assert [p.number for p in build_chord(Pitch(60), "min7")] == [60, 63, 67, 70]

    def test_dominant_seventh(self) -> None:
        """G4 7 spells G B D F."""
        names = [p.name for p in build_chord(Pitch.from_name("G4"), "7")]
        assert names == ["G4", "B4", "D5", "F5"]

    def test_unknown_chord(self) -> None:
        """Unknown chord types are rejected."""
        with pytest.raises(UnknownChordTypeError):
            build_chord(Pitch(60), "dim7")

    def test_chord_symbol(self) -> None:
        """Labels are root name plus type identifier."""
        assert chord_symbol(Pitch.from_name("G4"), "maj") == "G4maj"
        assert chord_symbol(Pitch.from_name("A4"), "min7") == "A4min7"


class TestTimeSignature:
    """Tests for TimeSignature."""

    def test_common_time(self) -> None:
        """4/4 time signature."""
        ts = TimeSignature.COMMON_TIME
        assert ts.beats_per_bar == 4
        assert ts.note_value == 4
        assert str(ts) == "4/4"

    def test_parse(self) -> None:
        """Parse from notation."""
        assert TimeSignature.parse("3/4") == TimeSignature.WALTZ
        assert TimeSignature.parse("6/8") == TimeSignature(6, 8)

    def test_parse_invalid(self) -> None:
        """Malformed notation is rejected."""
        with pytest.raises(InvalidNumericFieldError):
            TimeSignature.parse("4-4")
        with pytest.raises(InvalidNumericFieldError):
            TimeSignature.parse("x/4")

    def test_invalid_beats_per_bar(self) -> None:
        """Beats per bar must be positive."""
        with pytest.raises(InvalidNumericFieldError) as exc_info:
            TimeSignature(0, 4)
        assert exc_info.value.field == "beats_per_bar"

    def test_invalid_note_value(self) -> None:
        """Note value must be a positive integer."""
        with pytest.raises(InvalidNumericFieldError) as exc_info:
            TimeSignature(4, 0)
        assert exc_info.value.field == "note_value"

    def test_any_positive_note_value(self) -> None:
        """Odd denominators are valid outside MIDI export."""
        assert str(TimeSignature(4, 3)) == "4/3"
        assert TimeSignature(7, 32).note_value == 32


class TestBeatPosition:
    """Tests for BeatPosition."""

    def test_from_beats(self) -> None:
        """Absolute beats map to bar + beat."""
        pos = BeatPosition.from_beats(Fraction(9, 2), TimeSignature(4, 4))
        assert pos.bar == 1
        assert pos.beat == Fraction(1, 2)
        assert pos.to_beats(TimeSignature(4, 4)) == Fraction(9, 2)

    def test_waltz(self) -> None:
        """Bars follow the time signature."""
        pos = BeatPosition.from_beats(7, TimeSignature.WALTZ)
        assert pos.bar == 2
        assert pos.beat == 1

    def test_str(self) -> None:
        """Human-readable form is 1-indexed."""
        assert str(BeatPosition(0, Fraction(0))) == "bar 1"
        assert str(BeatPosition(1, Fraction(1, 2))) == "bar 2, beat 1.50"
