"""
Tests for pitches (pitch.py).

Tests cover:
- Construction and registry-free introspection
- Frequency, label and name resolution
- approx_eq and cents_offset
"""

import math

import pytest

from chuk_music_theory.core import (
    AbstractPitch,
    EqualTemperament,
    FrequencyPitch,
    InvalidLiteralFrequencyError,
    LiteralHasNoNameError,
    NameUnavailableError,
    NotAbstractError,
    Pitch,
    PitchLabel,
    TuningRegistry,
    TuningSystemId,
    UnknownSystemError,
)


class TestPitchConstruction:
    """Tests for building and inspecting pitches."""

    def test_hz(self) -> None:
        """Literal pitches expose their frequency."""
        pitch = Pitch.hz(440.0)
        assert isinstance(pitch, FrequencyPitch)
        assert pitch.is_frequency
        assert not pitch.is_abstract
        assert pitch.as_frequency == 440.0
        assert pitch.index is None
        assert pitch.system_id is None

    def test_abstract(self) -> None:
        """Abstract pitches expose index and system."""
        pitch = Pitch.abstract_pitch(60, "12tet")
        assert isinstance(pitch, AbstractPitch)
        assert pitch.is_abstract
        assert pitch.index == 60
        assert pitch.system_id == "12tet"
        assert isinstance(pitch.system, TuningSystemId)
        assert pitch.as_frequency is None

    def test_invalid_system_id(self) -> None:
        """Abstract pitches validate their system identifier."""
        with pytest.raises(ValueError):
            Pitch.abstract_pitch(60, "")

    def test_base_is_abstract(self) -> None:
        """Pitch itself cannot be instantiated; a subclass must resolve frequencies and names."""
        with pytest.raises(TypeError):
            Pitch()

        class Partial(Pitch):
            def try_freq_hz(self, registry):
                return 0.0

        with pytest.raises(TypeError):
            Partial()

    def test_transpose(self) -> None:
        """Transposing shifts abstract pitches and leaves literals alone."""
        assert Pitch.abstract_pitch(60, "12tet").transpose(7) == Pitch.abstract_pitch(67, "12tet")
        assert Pitch.hz(440.0).transpose(7) == Pitch.hz(440.0)

    def test_index_arithmetic(self) -> None:
        """AbstractPitch supports + and - with integers."""
        pitch = AbstractPitch(60, "12tet")
        assert (pitch + 12).index == 72
        assert (pitch - 1).index == 59

    def test_with_system(self) -> None:
        """with_system keeps the index."""
        pitch = AbstractPitch(60, "12tet").with_system("ji")
        assert pitch == AbstractPitch(60, "ji")

    def test_from_pitch(self) -> None:
        """Narrowing a literal pitch raises NotAbstractError."""
        pitch = Pitch.abstract_pitch(60, "12tet")
        assert AbstractPitch.from_pitch(pitch) is pitch
        with pytest.raises(NotAbstractError):
            AbstractPitch.from_pitch(Pitch.hz(440.0))

    def test_equality_and_hash(self) -> None:
        """Pitches are values."""
        assert Pitch.abstract_pitch(60, "12tet") == Pitch.abstract_pitch(60, TuningSystemId("12tet"))
        assert len({Pitch.hz(440.0), Pitch.hz(440.0)}) == 1

    def test_str(self) -> None:
        """Display formats."""
        assert str(Pitch.hz(440.0)) == "440.000 Hz"
        assert str(Pitch.abstract_pitch(69, "12tet")) == "69@12tet"


class TestPitchResolution:
    """Tests for resolving pitches through a registry."""

    def test_freq_hz_abstract(self, registry: TuningRegistry) -> None:
        """A4 and middle C in 12-TET."""
        assert Pitch.abstract_pitch(69, "12tet").try_freq_hz(registry) == pytest.approx(
            440.0, abs=1e-6
        )
        assert Pitch.abstract_pitch(60, "12tet").try_freq_hz(registry) == pytest.approx(
            261.6256, abs=1e-4
        )

    def test_freq_hz_literal(self, registry: TuningRegistry) -> None:
        """Literal pitches resolve to themselves."""
        assert Pitch.hz(123.0).try_freq_hz(registry) == 123.0

    def test_unknown_system(self, registry: TuningRegistry) -> None:
        """Unknown systems raise; freq_hz returns None."""
        pitch = Pitch.abstract_pitch(60, "missing")
        with pytest.raises(UnknownSystemError):
            pitch.try_freq_hz(registry)
        assert pitch.freq_hz(registry) is None

    @pytest.mark.parametrize("frequency", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_literal(self, registry: TuningRegistry, frequency: float) -> None:
        """Literal frequencies must be finite and strictly positive."""
        with pytest.raises(InvalidLiteralFrequencyError):
            Pitch.hz(frequency).try_freq_hz(registry)

    def test_resolved(self, registry: TuningRegistry) -> None:
        """resolved collapses to a literal pitch."""
        resolved = Pitch.abstract_pitch(81, "12tet").resolved(registry)
        assert isinstance(resolved, FrequencyPitch)
        assert resolved.frequency == pytest.approx(880.0)

    def test_label_named(self, registry: TuningRegistry) -> None:
        """Systems with names yield symbolic labels."""
        label = Pitch.abstract_pitch(69, "12tet").try_label(registry)
        assert label.is_symbolic
        assert str(label) == "12-TET(69)"

    def test_label_frequency_fallback(self) -> None:
        """Systems without names fall back to a frequency label."""
        registry = TuningRegistry().with_system("plain", EqualTemperament(440.0, 69))
        label = Pitch.abstract_pitch(69, "plain").try_label(registry)
        assert not label.is_symbolic
        assert label.as_frequency == pytest.approx(440.0)
        assert str(label) == "440.000 Hz"

    def test_label_literal(self, registry: TuningRegistry) -> None:
        """Literal pitches always get frequency labels."""
        assert Pitch.hz(261.5).try_label(registry) == PitchLabel.from_frequency(261.5)
        with pytest.raises(InvalidLiteralFrequencyError):
            Pitch.hz(-1.0).try_label(registry)
        assert Pitch.hz(-1.0).label(registry) is None

    def test_try_name(self, registry: TuningRegistry) -> None:
        """Names only come from the tuning system."""
        assert Pitch.abstract_pitch(60, "12tet").try_name(registry) == "12-TET(60)"
        with pytest.raises(LiteralHasNoNameError):
            Pitch.hz(440.0).try_name(registry)

    def test_try_name_unavailable(self) -> None:
        """Unnamed systems raise NameUnavailableError."""
        registry = TuningRegistry().with_system("plain", EqualTemperament(440.0, 69))
        with pytest.raises(NameUnavailableError) as exc_info:
            Pitch.abstract_pitch(60, "plain").try_name(registry)
        assert exc_info.value.index == 60
        assert exc_info.value.system_id == "plain"

    def test_approx_eq(self, registry: TuningRegistry) -> None:
        """Pitches from different systems compare by frequency."""
        a4 = Pitch.abstract_pitch(69, "12tet")
        assert a4.approx_eq(Pitch.hz(440.0), registry)
        assert a4.approx_eq(Pitch.abstract_pitch(69, "ji"), registry)
        assert a4.approx_eq(Pitch.abstract_pitch(69, "24tet"), registry)
        assert not a4.approx_eq(Pitch.hz(440.01), registry)
        assert a4.approx_eq(Pitch.hz(440.01), registry, epsilon=0.1)

    def test_approx_eq_epsilon_floor(self, registry: TuningRegistry) -> None:
        """A zero epsilon is floored at machine epsilon."""
        assert Pitch.hz(440.0).approx_eq(Pitch.hz(440.0), registry, epsilon=0.0)

    def test_cents_offset(self, registry: TuningRegistry) -> None:
        """Cents between pitches."""
        a4 = Pitch.abstract_pitch(69, "12tet")
        assert Pitch.abstract_pitch(81, "12tet").cents_offset(a4, registry) == pytest.approx(1200.0)
        assert Pitch.abstract_pitch(70, "12tet").cents_offset(a4, registry) == pytest.approx(100.0)
        assert Pitch.abstract_pitch(70, "24tet").cents_offset(a4, registry) == pytest.approx(50.0)
        assert Pitch.abstract_pitch(76, "ji").cents_offset(a4, registry) == pytest.approx(
            701.955, abs=1e-3
        )

    def test_interval_to(self, registry: TuningRegistry) -> None:
        """interval_to measures exact steps within one system."""
        interval = Pitch.abstract_pitch(60, "12tet").interval_to(
            Pitch.abstract_pitch(67, "12tet"), registry
        )
        assert interval.steps == ("12tet", 7)
