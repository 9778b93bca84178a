"""
Tests for chord symbol parsing (parsing.py).
"""

import pytest

from chuk_music_theory.core import (
    AbstractPitch,
    Accidental,
    ChordQuality,
    ChordSymbol,
    ChordSymbolError,
    EmptyChordSymbolError,
    InvalidRootError,
    NoteLetter,
    TuningRegistry,
    UnknownQualityError,
    parse_chord_symbol,
)


class TestParseChordSymbol:
    """Tests for parse_chord_symbol."""

    @pytest.mark.parametrize(
        ("text", "root", "accidental", "quality"),
        [
            ("C", NoteLetter.C, Accidental.NATURAL, ChordQuality.MAJOR_TRIAD),
            ("Cmaj7", NoteLetter.C, Accidental.NATURAL, ChordQuality.MAJOR_SEVENTH),
            ("F#m", NoteLetter.F, Accidental.SHARP, ChordQuality.MINOR_TRIAD),
            ("Bbdim7", NoteLetter.B, Accidental.FLAT, ChordQuality.DIMINISHED_SEVENTH),
            ("E♭m7♭5", NoteLetter.E, Accidental.FLAT, ChordQuality.HALF_DIMINISHED_SEVENTH),
            ("Eø7", NoteLetter.E, Accidental.NATURAL, ChordQuality.HALF_DIMINISHED_SEVENTH),
            ("G7", NoteLetter.G, Accidental.NATURAL, ChordQuality.DOMINANT_SEVENTH),
            ("A♯sus4", NoteLetter.A, Accidental.SHARP, ChordQuality.SUSPENDED_FOURTH),
            ("dm9", NoteLetter.D, Accidental.NATURAL, ChordQuality.MINOR_9),
            ("CmM7", NoteLetter.C, Accidental.NATURAL, ChordQuality.MINOR_MAJOR_SEVENTH),
            ("F13", NoteLetter.F, Accidental.NATURAL, ChordQuality.DOMINANT_13),
        ],
    )
    def test_valid(
        self, text: str, root: NoteLetter, accidental: Accidental, quality: ChordQuality
    ) -> None:
        """Roots, accidentals and suffixes parse."""
        assert parse_chord_symbol(text) == ChordSymbol(root, accidental, quality)

    def test_case_sensitive_suffix(self) -> None:
        """M7 is major seventh and m7 is minor seventh."""
        assert parse_chord_symbol("CM7").quality is ChordQuality.MAJOR_SEVENTH
        assert parse_chord_symbol("Cm7").quality is ChordQuality.MINOR_SEVENTH

    def test_every_symbol_round_trips(self) -> None:
        """Each quality's display suffix parses back to it."""
        for quality in ChordQuality:
            assert parse_chord_symbol(f"D{quality.symbol}").quality is quality

    def test_empty(self) -> None:
        """Empty text raises EmptyChordSymbolError."""
        with pytest.raises(EmptyChordSymbolError):
            parse_chord_symbol("")

    @pytest.mark.parametrize("text", ["H7", "7", "#m", " C"])
    def test_invalid_root(self, text: str) -> None:
        """Symbols must start with A-G."""
        with pytest.raises(InvalidRootError) as exc_info:
            parse_chord_symbol(text)
        assert exc_info.value.root == text[0]

    def test_unknown_quality(self) -> None:
        """Unknown suffixes report the suffix."""
        with pytest.raises(UnknownQualityError) as exc_info:
            parse_chord_symbol("Cxyz")
        assert exc_info.value.quality == "xyz"
        assert isinstance(exc_info.value, ChordSymbolError)
        assert isinstance(exc_info.value, ValueError)


class TestChordSymbol:
    """Tests for parsed chord symbols."""

    def test_root_semitone(self) -> None:
        """Pitch class wraps around C."""
        assert parse_chord_symbol("C").root_semitone == 0
        assert parse_chord_symbol("F#").root_semitone == 6
        assert parse_chord_symbol("Cb").root_semitone == 11
        assert parse_chord_symbol("B#").root_semitone == 0

    def test_str(self) -> None:
        """Display uses unicode accidentals and canonical suffixes."""
        assert str(parse_chord_symbol("Bbmaj7")) == "B♭maj7"
        assert str(parse_chord_symbol("F#min")) == "F♯m"
        assert str(parse_chord_symbol("G")) == "G"

    def test_to_chord(self, registry: TuningRegistry) -> None:
        """Realised chords put the root in the requested octave."""
        chord = parse_chord_symbol("Dm7").to_chord("12tet", registry)
        assert chord.root == AbstractPitch(62, "12tet")
        assert chord.quality is ChordQuality.MINOR_SEVENTH
        assert [tone.index for tone in chord.tones(registry)] == [62, 65, 69, 72]

        low = parse_chord_symbol("A").to_chord("12tet", registry, octave=2)
        assert low.root == AbstractPitch(45, "12tet")

    def test_to_chord_accidental_crosses_octave(self, registry: TuningRegistry) -> None:
        """Cb4 sounds as B3 and B#4 as C5."""
        c_flat = parse_chord_symbol("Cb").to_chord("12tet", registry)
        assert c_flat.root == AbstractPitch(59, "12tet")
        b_sharp = parse_chord_symbol("B#").to_chord("12tet", registry)
        assert b_sharp.root == AbstractPitch(72, "12tet")
        assert parse_chord_symbol("Cb").to_chord("12tet", registry, octave=5).root.index == 71
