"""
Interval algebra - the distance between two pitches.

An Interval always carries a frequency ratio. When it was measured between
two abstract pitches of the same tuning system it also keeps the exact step
delta, so applying it back to an abstract pitch stays exact (no rounding).
Operations that mix systems drop the step information and fall back to
ratio-only arithmetic.

Operators:
    a + b   compose
    a - b   compose with the inverse of b
    -a      inverse
    a * n   repeat n times (powi)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from chuk_music_theory.constants import CENTS_PER_OCTAVE, MAX_STEP_DELTA, MIN_STEP_DELTA

from .errors import (
    IntervalError,
    InvalidLiteralFrequencyError,
    NonFiniteRatioError,
    NonPositiveRatioError,
)
from .pitch import AbstractPitch, FrequencyPitch, Pitch
from .system import TuningSystemId

if TYPE_CHECKING:
    from .registry import TuningRegistry

StepInfo = tuple[TuningSystemId, int]


def _ensure_valid_ratio(ratio: float) -> float:
    if not math.isfinite(ratio):
        raise NonFiniteRatioError(ratio)
    if ratio <= 0:
        raise NonPositiveRatioError(ratio)
    return ratio


def _checked_steps(system: TuningSystemId, delta: int) -> StepInfo | None:
    """Keep steps only while they fit a signed 32-bit count."""
    if MIN_STEP_DELTA <= delta <= MAX_STEP_DELTA:
        return (system, delta)
    return None


def _divide(numerator: float, denominator: float) -> float:
    # Tuning systems may return 0 Hz; IEEE semantics let the ratio check report it
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass(frozen=True)
class Interval:
    """
    Musical distance expressed as a frequency ratio, optionally with exact steps.

    Immutable and hashable. ratio is always finite and > 0.

    Examples:
        Interval(1.5) = ratio-only just fifth
        Interval.between(Pitch.abstract_pitch(60, "12tet"),
                         Pitch.abstract_pitch(67, "12tet"), registry)
            = ratio ~1.498, steps ("12tet", 7)
    """

    ratio: float
    steps: StepInfo | None = None

    UNISON: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __post_init__(self) -> None:
        _ensure_valid_ratio(self.ratio)
        if self.steps is not None:
            system, delta = self.steps
            object.__setattr__(self, "steps", (TuningSystemId.coerce(system), int(delta)))

    # Construction

    @classmethod
    def identity(cls) -> Interval:
        """Ratio 1.0 without preserved steps."""
        return cls(1.0)

    @classmethod
    def from_ratio(cls, ratio: float) -> Interval:
        """
        Interval from an explicit ratio.

        Raises:
            NonFiniteRatioError: ratio is NaN or infinite
            NonPositiveRatioError: ratio is zero or negative
        """
        return cls(ratio)

    @classmethod
    def try_between(cls, base: Pitch, target: Pitch, registry: TuningRegistry) -> Interval:
        """
        Interval from base to target, surfacing ratio errors as IntervalError.

        Raises:
            PitchError: Either pitch fails to resolve
            IntervalError: The derived ratio is not finite and positive
        """
        base_freq = base.try_freq_hz(registry)
        target_freq = target.try_freq_hz(registry)
        ratio = _divide(target_freq, base_freq)

        steps: StepInfo | None = None
        if (
            isinstance(base, AbstractPitch)
            and isinstance(target, AbstractPitch)
            and base.system == target.system
        ):
            steps = _checked_steps(base.system, target.index - base.index)

        return cls(ratio, steps)

    @classmethod
    def between(cls, base: Pitch, target: Pitch, registry: TuningRegistry) -> Interval:
        """
        Interval from base to target, resolving frequencies through the registry.

        Raises:
            PitchError: Either pitch fails to resolve, or the derived ratio is
                invalid (reported as InvalidLiteralFrequencyError for the target)
        """
        try:
            return cls.try_between(base, target, registry)
        except IntervalError as err:
            target_freq = target.try_freq_hz(registry)
            raise InvalidLiteralFrequencyError(target_freq) from err

    # Accessors

    @property
    def step_delta(self) -> int | None:
        return None if self.steps is None else self.steps[1]

    @property
    def step_system(self) -> TuningSystemId | None:
        return None if self.steps is None else self.steps[0]

    def cents(self) -> float:
        """Size of the interval in cents."""
        return CENTS_PER_OCTAVE * math.log2(self.ratio)

    # Algebra

    def compose(self, other: Interval) -> Interval:
        """Combined distance: ratios multiply, same-system steps add."""
        steps: StepInfo | None = None
        if self.steps is not None and other.steps is not None and self.steps[0] == other.steps[0]:
            steps = _checked_steps(self.steps[0], self.steps[1] + other.steps[1])
        return Interval(self.ratio * other.ratio, steps)

    def inverse(self) -> Interval:
        """Descending becomes ascending and vice versa."""
        steps = None if self.steps is None else _checked_steps(self.steps[0], -self.steps[1])
        return Interval(1.0 / self.ratio, steps)

    def inverse_if_valid(self) -> Interval | None:
        try:
            return self.inverse()
        except IntervalError:
            return None

    def powi(self, times: int) -> Interval:
        """
        Repeat the interval times (negative repeats descend).

        Steps are scaled when they stay within the 32-bit step range and
        dropped otherwise.
        """
        if times == 0:
            steps = None if self.steps is None else (self.steps[0], 0)
            return Interval(1.0, steps)

        try:
            ratio = self.ratio**times
        except OverflowError:
            ratio = math.inf
        steps = None if self.steps is None else _checked_steps(self.steps[0], self.steps[1] * times)
        return Interval(ratio, steps)

    def powi_if_valid(self, times: int) -> Interval | None:
        try:
            return self.powi(times)
        except IntervalError:
            return None

    def apply_to(self, pitch: Pitch, registry: TuningRegistry) -> Pitch:
        """
        Transpose pitch by this interval.

        Stays abstract (exact index shift) when the pitch is abstract in the
        interval's own system; otherwise multiplies the resolved frequency.
        """
        if (
            isinstance(pitch, AbstractPitch)
            and self.steps is not None
            and self.steps[0] == pitch.system
        ):
            return AbstractPitch(pitch.index + self.steps[1], pitch.system)
        return FrequencyPitch(pitch.try_freq_hz(registry) * self.ratio)

    # Operators

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compose(other)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compose(other.inverse())

    def __neg__(self) -> Interval:
        return self.inverse()

    def __mul__(self, times: int) -> Interval:
        if not isinstance(times, int):
            return NotImplemented
        return self.powi(times)

    def __rmul__(self, times: int) -> Interval:
        return self.__mul__(times)

    def __str__(self) -> str:
        if self.steps is not None:
            return f"ratio={self.ratio:.6f}, steps={self.steps[1]}@{self.steps[0]}"
        return f"ratio={self.ratio:.6f}"


Interval.UNISON = Interval(1.0)
Interval.OCTAVE = Interval(2.0)
