"""
Tests for interval algebra (interval.py).

Tests cover:
- Ratio validation
- between / try_between step tracking
- compose, inverse, powi and their operators
- apply_to round trips
"""

import math

import pytest

from chuk_music_theory.constants import MAX_STEP_DELTA
from chuk_music_theory.core import (
    AbstractPitch,
    EqualTemperament,
    FrequencyPitch,
    Interval,
    IntervalError,
    InvalidLiteralFrequencyError,
    NonFiniteRatioError,
    NonPositiveRatioError,
    Pitch,
    TuningRegistry,
    TuningSystem,
    UnknownSystemError,
)


class FlatSystem(TuningSystem):
    """Every index sounds at 440 Hz."""

    def to_frequency(self, index: int) -> float:
        return 440.0


class TestIntervalConstruction:
    """Tests for creating intervals."""

    def test_identity(self) -> None:
        """Identity is ratio 1 with no steps."""
        identity = Interval.identity()
        assert identity.ratio == 1.0
        assert identity.steps is None
        assert identity.cents() == 0.0
        assert Interval.UNISON == identity

    def test_from_ratio(self) -> None:
        """Explicit ratios are ratio-only."""
        fifth = Interval.from_ratio(1.5)
        assert fifth.ratio == 1.5
        assert fifth.step_delta is None
        assert fifth.step_system is None

    @pytest.mark.parametrize("ratio", [math.inf, -math.inf, math.nan])
    def test_non_finite_ratio(self, ratio: float) -> None:
        """NaN and infinite ratios are rejected."""
        with pytest.raises(NonFiniteRatioError):
            Interval.from_ratio(ratio)

    @pytest.mark.parametrize("ratio", [0.0, -1.0])
    def test_non_positive_ratio(self, ratio: float) -> None:
        """Zero and negative ratios are rejected."""
        with pytest.raises(NonPositiveRatioError) as exc_info:
            Interval.from_ratio(ratio)
        assert exc_info.value.ratio == ratio
        assert isinstance(exc_info.value, IntervalError)

    def test_cents(self) -> None:
        """Octave is 1200 cents."""
        assert Interval.OCTAVE.cents() == pytest.approx(1200.0)
        assert Interval.from_ratio(1.5).cents() == pytest.approx(701.955, abs=1e-3)

    def test_str(self) -> None:
        """Display includes steps when present."""
        assert str(Interval(2.0)) == "ratio=2.000000"
        assert str(Interval(2.0, ("12tet", 12))) == "ratio=2.000000, steps=12@12tet"


class TestIntervalBetween:
    """Tests for measuring intervals between pitches."""

    def test_same_system_keeps_steps(self, registry: TuningRegistry) -> None:
        """Abstract pitches in one system give exact steps."""
        interval = Interval.between(
            Pitch.abstract_pitch(60, "12tet"), Pitch.abstract_pitch(67, "12tet"), registry
        )
        assert interval.steps == ("12tet", 7)
        assert interval.ratio == pytest.approx(2 ** (7 / 12))

    def test_mixed_systems_drop_steps(self, registry: TuningRegistry) -> None:
        """Different systems give a ratio-only interval."""
        interval = Interval.between(
            Pitch.abstract_pitch(69, "12tet"), Pitch.abstract_pitch(76, "ji"), registry
        )
        assert interval.steps is None
        assert interval.ratio == pytest.approx(1.5)

    def test_literal_drops_steps(self, registry: TuningRegistry) -> None:
        """Literal endpoints give a ratio-only interval."""
        interval = Interval.between(Pitch.hz(220.0), Pitch.abstract_pitch(69, "12tet"), registry)
        assert interval.steps is None
        assert interval.ratio == pytest.approx(2.0)

    def test_pitch_errors_propagate(self, registry: TuningRegistry) -> None:
        """Resolution errors surface unchanged."""
        with pytest.raises(UnknownSystemError):
            Interval.between(Pitch.abstract_pitch(0, "missing"), Pitch.hz(440.0), registry)
        with pytest.raises(InvalidLiteralFrequencyError):
            Interval.try_between(Pitch.hz(0.0), Pitch.hz(440.0), registry)

    def test_invalid_ratio_reporting(self) -> None:
        """between reports a bad ratio as the target frequency; try_between as IntervalError."""
        registry = TuningRegistry().with_system("tiny", EqualTemperament(1e-300, 0))
        base = Pitch.abstract_pitch(0, "tiny")
        target = Pitch.hz(1e300)
        with pytest.raises(NonFiniteRatioError):
            Interval.try_between(base, target, registry)
        with pytest.raises(InvalidLiteralFrequencyError) as exc_info:
            Interval.between(base, target, registry)
        assert exc_info.value.frequency == 1e300

    def test_step_delta_beyond_32_bits(self) -> None:
        """try_between keeps the ratio but drops steps that overflow a 32-bit delta."""
        registry = TuningRegistry().with_system("flat", FlatSystem())
        base = AbstractPitch(0, "flat")

        far = Interval.try_between(base, AbstractPitch(MAX_STEP_DELTA + 1, "flat"), registry)
        assert far.steps is None
        assert far.ratio == pytest.approx(1.0)

        edge = Interval.try_between(base, AbstractPitch(MAX_STEP_DELTA, "flat"), registry)
        assert edge.steps == ("flat", MAX_STEP_DELTA)


class TestIntervalAlgebra:
    """Tests for compose, inverse and powi."""

    def test_compose_same_system(self) -> None:
        """Ratios multiply and steps add."""
        third = Interval(2 ** (4 / 12), ("12tet", 4))
        minor_third = Interval(2 ** (3 / 12), ("12tet", 3))
        fifth = third.compose(minor_third)
        assert fifth.ratio == pytest.approx(third.ratio * minor_third.ratio)
        assert fifth.steps == ("12tet", 7)
        assert third + minor_third == fifth

    def test_compose_mixed_systems(self) -> None:
        """Different systems drop steps."""
        a = Interval(1.25, ("ji", 4))
        b = Interval(2 ** (3 / 12), ("12tet", 3))
        assert a.compose(b).steps is None
        assert a.compose(Interval(1.2)).steps is None
        assert a.compose(b).ratio == pytest.approx(1.25 * 2 ** (3 / 12))

    def test_compose_step_overflow(self) -> None:
        """Step sums beyond 32 bits drop the steps."""
        big = Interval(1.0, ("12tet", MAX_STEP_DELTA))
        assert big.compose(Interval(1.0, ("12tet", 1))).steps is None

    def test_compose_ratio_overflow(self) -> None:
        """Composing into an infinite ratio raises."""
        with pytest.raises(NonFiniteRatioError):
            Interval(1e200).compose(Interval(1e200))

    def test_inverse(self) -> None:
        """Inverse is the reciprocal with negated steps."""
        fifth = Interval(1.5, ("ji", 7))
        inverse = fifth.inverse()
        assert inverse.ratio == pytest.approx(1 / 1.5)
        assert inverse.steps == ("ji", -7)
        assert -fifth == inverse
        assert fifth.inverse_if_valid() == inverse

    def test_powi(self) -> None:
        """powi raises the ratio and scales steps."""
        step = Interval(2 ** (2 / 12), ("12tet", 2))
        triple = step.powi(3)
        assert triple.ratio == pytest.approx(2 ** (6 / 12))
        assert triple.steps == ("12tet", 6)
        assert step * 3 == triple
        assert 3 * step == triple
        assert step.powi(-2).steps == ("12tet", -4)

    def test_powi_zero(self) -> None:
        """powi(0) is unison keeping the system."""
        zero = Interval(1.5, ("ji", 7)).powi(0)
        assert zero.ratio == 1.0
        assert zero.steps == ("ji", 0)
        assert Interval(1.5).powi(0).steps is None

    def test_powi_overflow(self) -> None:
        """Huge exponents raise; step overflow drops steps."""
        with pytest.raises(NonFiniteRatioError):
            Interval(2.0).powi(5000)
        assert Interval(2.0).powi_if_valid(5000) is None
        assert Interval(1.0, ("12tet", 2**20)).powi(2**12).steps is None

    def test_subtraction(self) -> None:
        """a - b composes with the inverse of b."""
        octave = Interval(2.0, ("12tet", 12))
        fifth = Interval(2 ** (7 / 12), ("12tet", 7))
        fourth = octave - fifth
        assert fourth.steps == ("12tet", 5)
        assert fourth.ratio == pytest.approx(2 ** (5 / 12))


class TestIntervalApply:
    """Tests for applying intervals to pitches."""

    def test_round_trip_same_system(self, registry: TuningRegistry) -> None:
        """between(a, b).apply_to(a) lands exactly on b."""
        for system in ("12tet", "24tet", "ji", "cents"):
            a = Pitch.abstract_pitch(57, system)
            b = Pitch.abstract_pitch(74, system)
            result = Interval.between(a, b, registry).apply_to(a, registry)
            assert isinstance(result, AbstractPitch)
            assert result.index == 74

    def test_apply_other_system_goes_literal(self, registry: TuningRegistry) -> None:
        """Applying to another system's pitch multiplies the frequency."""
        fifth = Interval.between(
            Pitch.abstract_pitch(69, "ji"), Pitch.abstract_pitch(76, "ji"), registry
        )
        result = fifth.apply_to(Pitch.abstract_pitch(57, "12tet"), registry)
        assert isinstance(result, FrequencyPitch)
        assert result.frequency == pytest.approx(330.0)

    def test_apply_ratio_only(self, registry: TuningRegistry) -> None:
        """Ratio-only intervals always give literal pitches."""
        result = Interval.OCTAVE.apply_to(Pitch.abstract_pitch(69, "12tet"), registry)
        assert result == Pitch.hz(880.0)

    def test_inverse_law(self, registry: TuningRegistry) -> None:
        """inverse().apply_to(apply_to(p)) resolves back to p."""
        intervals = [
            Interval.from_ratio(1.5),
            Interval.between(
                Pitch.abstract_pitch(60, "12tet"), Pitch.abstract_pitch(64, "12tet"), registry
            ),
            Interval.between(Pitch.abstract_pitch(60, "ji"), Pitch.hz(100.0), registry),
        ]
        pitches = [
            Pitch.abstract_pitch(60, "12tet"),
            Pitch.abstract_pitch(70, "24tet"),
            Pitch.abstract_pitch(50, "ji"),
            Pitch.hz(333.3),
        ]
        for interval in intervals:
            for pitch in pitches:
                moved = interval.apply_to(pitch, registry)
                back = interval.inverse().apply_to(moved, registry)
                assert back.approx_eq(pitch, registry)

    def test_transpose_interval(self, registry: TuningRegistry) -> None:
        """Pitch.transpose_interval delegates to apply_to."""
        step = Interval(2 ** (1 / 12), ("12tet", 1))
        assert Pitch.abstract_pitch(60, "12tet").transpose_interval(step, registry) == (
            Pitch.abstract_pitch(61, "12tet")
        )
