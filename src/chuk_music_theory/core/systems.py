"""
Concrete tuning systems.

- TwelveTET / TwentyFourTET: equal temperaments with a fixed step count
- JustIntonation: one octave of frequency ratios, repeated by octave doubling
- CentsScale: one octave of cent offsets, repeated by octave doubling
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from chuk_music_theory.constants import A4_FREQUENCY, A4_INDEX, CENTS_PER_OCTAVE

from .errors import TuningDefinitionError
from .system import EqualTemperament, TuningSystem, _validate_base_frequency


@dataclass(frozen=True)
class TwelveTET(EqualTemperament):
    """
    Classic 12-tone equal temperament.

    Defaults to concert pitch: index 69 (A4) = 440 Hz, index 60 = middle C.
    """

    STEPS_PER_OCTAVE: ClassVar[int] = 12

    base_freq: float = A4_FREQUENCY
    base_index: int = A4_INDEX
    steps_per_octave: int = field(default=12, init=False)
    label: str | None = "12-TET"

    @classmethod
    def a4_440(cls) -> TwelveTET:
        """Standard tuning where index 69 corresponds to 440 Hz."""
        return cls(A4_FREQUENCY, A4_INDEX)


@dataclass(frozen=True)
class TwentyFourTET(EqualTemperament):
    """24-tone equal temperament (quarter-tone steps)."""

    STEPS_PER_OCTAVE: ClassVar[int] = 24

    base_freq: float = A4_FREQUENCY
    base_index: int = A4_INDEX
    steps_per_octave: int = field(default=24, init=False)
    label: str | None = "24-TET"

    @classmethod
    def a4_440(cls) -> TwentyFourTET:
        """Conventional setup matching 440 Hz at index 69."""
        return cls(A4_FREQUENCY, A4_INDEX)


# 5-limit just intonation, one ratio per chromatic degree
_JI_MAJOR_RATIOS: tuple[float, ...] = (
    1.0,
    16.0 / 15.0,
    9.0 / 8.0,
    6.0 / 5.0,
    5.0 / 4.0,
    4.0 / 3.0,
    45.0 / 32.0,
    3.0 / 2.0,
    8.0 / 5.0,
    5.0 / 3.0,
    9.0 / 5.0,
    15.0 / 8.0,
)


@dataclass(frozen=True)
class JustIntonation(TuningSystem):
    """
    Ratio-based just intonation.

    ratios are relative to the base pitch (1.0 = unison) and cover one octave.
    Indices past the table wrap into neighbouring octaves.
    """

    base_freq: float
    base_index: int
    ratios: tuple[float, ...]
    label: str | None = None

    def __post_init__(self) -> None:
        _validate_base_frequency(self.base_freq)
        object.__setattr__(self, "ratios", tuple(float(r) for r in self.ratios))
        if not self.ratios:
            raise TuningDefinitionError("ratios must contain at least one entry")
        if not all(math.isfinite(r) and r > 0 for r in self.ratios):
            raise TuningDefinitionError("ratios must be finite and positive")

    @classmethod
    def major_reference(cls, base_freq: float, base_index: int) -> JustIntonation:
        """Just-intonation chromatic table with a custom base reference."""
        return cls(base_freq, base_index, _JI_MAJOR_RATIOS, "JI-major")

    @classmethod
    def a4_440_major(cls) -> JustIntonation:
        """Just-intonation table aligned to A4 = 440 Hz (index 69)."""
        return cls.major_reference(A4_FREQUENCY, A4_INDEX)

    def ratio_for_steps(self, steps: int) -> float:
        """Frequency ratio for a step count relative to the base index."""
        octave, degree = divmod(steps, len(self.ratios))
        return self.ratios[degree] * 2.0**octave

    def to_frequency(self, index: int) -> float:
        return self.base_freq * self.ratio_for_steps(index - self.base_index)

    def name_of(self, index: int) -> str | None:
        if self.label is None:
            return None
        return f"{self.label}({index})"


@dataclass(frozen=True)
class CentsScale(TuningSystem):
    """
    Octave-repeating scale defined by cent offsets.

    The table typically begins with 0.0 (unison) and covers one octave.
    """

    base_freq: float
    base_index: int
    cents: tuple[float, ...]
    label: str | None = None

    def __post_init__(self) -> None:
        _validate_base_frequency(self.base_freq)
        object.__setattr__(self, "cents", tuple(float(c) for c in self.cents))
        if not self.cents:
            raise TuningDefinitionError("cents must contain at least one value")
        if not all(math.isfinite(c) for c in self.cents):
            raise TuningDefinitionError("cents must be finite")

    @classmethod
    def a4_440_quarter_tone(cls) -> CentsScale:
        """Quarter-tone scale: 24 notes per octave, 50 cents each."""
        return cls(A4_FREQUENCY, A4_INDEX, tuple(i * 50.0 for i in range(24)), "24-EDO")

    def ratio_for_steps(self, steps: int) -> float:
        """Frequency ratio for a step count relative to the base index."""
        octave, degree = divmod(steps, len(self.cents))
        total = octave * CENTS_PER_OCTAVE + self.cents[degree]
        return 2.0 ** (total / CENTS_PER_OCTAVE)

    def to_frequency(self, index: int) -> float:
        return self.base_freq * self.ratio_for_steps(index - self.base_index)

    def name_of(self, index: int) -> str | None:
        if self.label is None:
            return None
        return f"{self.label}({index})"
