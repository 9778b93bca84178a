"""
Pitch primitives - Pitch, FrequencyPitch, AbstractPitch and PitchLabel.

A pitch is either a literal frequency in Hz or an abstract (index, system)
pair. Abstract pitches are tuning-agnostic: they only become frequencies
or names when resolved through a TuningRegistry.
"""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chuk_music_theory.constants import CENTS_PER_OCTAVE, DEFAULT_FREQUENCY_EPSILON

from .errors import (
    InvalidLiteralFrequencyError,
    LiteralHasNoNameError,
    NameUnavailableError,
    NotAbstractError,
    PitchError,
)
from .system import TuningSystemId

if TYPE_CHECKING:
    from .interval import Interval
    from .registry import SystemKey, TuningRegistry


def validate_literal_frequency(frequency: float) -> float:
    """Return frequency if finite and strictly positive, else raise."""
    if not math.isfinite(frequency) or frequency <= 0:
        raise InvalidLiteralFrequencyError(frequency)
    return frequency


@dataclass(frozen=True)
class PitchLabel:
    """
    How a pitch should be rendered to humans.

    Either a symbolic name supplied by the tuning system (e.g. "12-TET(69)")
    or a literal frequency fallback rendered in Hz.
    """

    name: str | None = None
    frequency: float | None = None

    @classmethod
    def named(cls, name: str) -> PitchLabel:
        return cls(name=name)

    @classmethod
    def from_frequency(cls, frequency: float) -> PitchLabel:
        return cls(frequency=frequency)

    @property
    def is_symbolic(self) -> bool:
        """True when the label is a name rather than a frequency."""
        return self.name is not None

    @property
    def as_frequency(self) -> float | None:
        return self.frequency

    def __str__(self) -> str:
        if self.name is not None:
            return self.name
        return f"{self.frequency:.3f} Hz"


class Pitch(ABC):
    """
    A musical pitch: literal frequency or abstract (index, system).

    Use Pitch.hz() or Pitch.abstract_pitch() to construct one. Introspection
    (is_abstract, index, system_id, transpose) never touches a registry;
    everything that needs a frequency or name takes the registry explicitly.
    """

    __slots__ = ()

    @staticmethod
    def hz(frequency: float) -> FrequencyPitch:
        """Literal frequency pitch."""
        return FrequencyPitch(frequency)

    @staticmethod
    def abstract_pitch(index: int, system: SystemKey) -> AbstractPitch:
        """Abstract pitch (index + tuning system)."""
        return AbstractPitch(index, system)  # type: ignore[arg-type]

    # Introspection

    @property
    def is_frequency(self) -> bool:
        return isinstance(self, FrequencyPitch)

    @property
    def is_abstract(self) -> bool:
        return isinstance(self, AbstractPitch)

    @property
    def as_frequency(self) -> float | None:
        """The literal frequency without resolution, if this is one."""
        return None

    @property
    def system_id(self) -> TuningSystemId | None:
        return None

    def transpose(self, steps: int) -> Pitch:
        """Shift an abstract pitch by steps. Literal frequencies are unchanged."""
        return self

    # Resolution

    @abstractmethod
    def try_freq_hz(self, registry: TuningRegistry) -> float:
        """
        Resolve to a frequency in Hz.

        Raises:
            UnknownSystemError: The pitch's tuning system is not registered
            InvalidLiteralFrequencyError: A literal frequency is not finite and positive
        """

    def freq_hz(self, registry: TuningRegistry) -> float | None:
        """Resolve to a frequency, or None if resolution fails."""
        try:
            return self.try_freq_hz(registry)
        except PitchError:
            return None

    def resolved(self, registry: TuningRegistry) -> FrequencyPitch:
        """Collapse to a literal-frequency pitch."""
        return FrequencyPitch(self.try_freq_hz(registry))

    @abstractmethod
    def try_label(self, registry: TuningRegistry) -> PitchLabel:
        """Symbolic label if the tuning system names this pitch, else a frequency label."""

    def label(self, registry: TuningRegistry) -> PitchLabel | None:
        """Like try_label, but None when the pitch cannot be resolved."""
        try:
            return self.try_label(registry)
        except PitchError:
            return None

    @abstractmethod
    def try_name(self, registry: TuningRegistry) -> str:
        """Symbolic name only; never falls back to a frequency."""

    def approx_eq(
        self,
        other: Pitch,
        registry: TuningRegistry,
        epsilon: float = DEFAULT_FREQUENCY_EPSILON,
    ) -> bool:
        """Compare resolved frequencies within epsilon Hz."""
        lhs = self.try_freq_hz(registry)
        rhs = other.try_freq_hz(registry)
        threshold = max(epsilon, sys.float_info.epsilon)
        return abs(lhs - rhs) <= threshold

    def cents_offset(self, reference: Pitch, registry: TuningRegistry) -> float:
        """Cents from reference to this pitch (positive when this pitch is sharper)."""
        lhs = self.try_freq_hz(registry)
        rhs = reference.try_freq_hz(registry)
        return CENTS_PER_OCTAVE * math.log2(lhs / rhs)

    def interval_to(self, other: Pitch, registry: TuningRegistry) -> Interval:
        """Interval from this pitch up (or down) to other."""
        from .interval import Interval

        return Interval.between(self, other, registry)

    def transpose_interval(self, interval: Interval, registry: TuningRegistry) -> Pitch:
        """Apply interval to this pitch."""
        return interval.apply_to(self, registry)


@dataclass(frozen=True)
class FrequencyPitch(Pitch):
    """Literal frequency in Hz."""

    frequency: float

    @property
    def as_frequency(self) -> float | None:
        return self.frequency

    @property
    def index(self) -> int | None:
        return None

    def try_freq_hz(self, registry: TuningRegistry) -> float:
        return validate_literal_frequency(self.frequency)

    def try_label(self, registry: TuningRegistry) -> PitchLabel:
        return PitchLabel.from_frequency(validate_literal_frequency(self.frequency))

    def try_name(self, registry: TuningRegistry) -> str:
        raise LiteralHasNoNameError()

    def __str__(self) -> str:
        return f"{self.frequency:.3f} Hz"


@dataclass(frozen=True, order=True)
class AbstractPitch(Pitch):
    """
    Abstract pitch reference, independent of any specific temperament.

    Supports + and - with an integer to shift the index.
    """

    index: int
    system: TuningSystemId

    def __post_init__(self) -> None:
        object.__setattr__(self, "system", TuningSystemId.coerce(self.system))

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> AbstractPitch:
        """
        Narrow a Pitch to its abstract form.

        Raises:
            NotAbstractError: The pitch is a literal frequency
        """
        if not isinstance(pitch, AbstractPitch):
            raise NotAbstractError()
        return pitch

    @property
    def system_id(self) -> TuningSystemId | None:
        return self.system

    def transpose(self, steps: int) -> AbstractPitch:
        return AbstractPitch(self.index + steps, self.system)

    def with_system(self, system: SystemKey) -> AbstractPitch:
        """Keep the index, reinterpret it under another tuning system."""
        return AbstractPitch(self.index, TuningSystemId.coerce(system))

    def try_freq_hz(self, registry: TuningRegistry) -> float:
        return registry.resolve_frequency(self.system, self.index)

    def try_label(self, registry: TuningRegistry) -> PitchLabel:
        system = registry.resolve_system(self.system)
        name = system.name_of(self.index)
        if name is not None:
            return PitchLabel.named(name)
        return PitchLabel.from_frequency(system.to_frequency(self.index))

    def try_name(self, registry: TuningRegistry) -> str:
        name = registry.resolve_system(self.system).name_of(self.index)
        if name is None:
            raise NameUnavailableError(self.system, self.index)
        return name

    def __add__(self, steps: int) -> AbstractPitch:
        if not isinstance(steps, int):
            return NotImplemented
        return self.transpose(steps)

    def __sub__(self, steps: int) -> AbstractPitch:
        if not isinstance(steps, int):
            return NotImplemented
        return self.transpose(-steps)

    def __str__(self) -> str:
        return f"{self.index}@{self.system}"
