"""
Tuning system primitives - TuningSystemId, TuningSystem, EqualTemperament.

A tuning system is a rule mapping an abstract integer index to a frequency,
optionally with a display name. Systems are looked up by TuningSystemId in a
TuningRegistry, so the same pitch/interval algebra works for any tuning.
"""

from __future__ import annotations

import math
import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import ControlCharacterError, EmptySystemIdError, TuningDefinitionError


def validate_identifier(value: str) -> None:
    """
    Check that a tuning system identifier is usable as a registry key.

    Raises:
        EmptySystemIdError: The identifier is empty or whitespace only
        ControlCharacterError: The identifier contains a control character
    """
    if not isinstance(value, str):
        raise TypeError(f"Tuning system identifier must be a string, got {type(value).__name__}")
    if not value.strip():
        raise EmptySystemIdError()
    for character in value:
        if unicodedata.category(character) == "Cc":
            raise ControlCharacterError(character)


class TuningSystemId(str):
    """
    Validated identifier for a registered tuning system.

    Behaves as a plain string (hashing, ordering, equality), so registry
    lookups accept either a TuningSystemId or the bare string.

    Examples:
        TuningSystemId("12tet")
        TuningSystemId("") -> EmptySystemIdError
    """

    __slots__ = ()

    def __new__(cls, name: str) -> TuningSystemId:
        validate_identifier(name)
        return super().__new__(cls, name)

    @classmethod
    def coerce(cls, value: str) -> TuningSystemId:
        """Return value unchanged if already an identifier, else validate it."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def __repr__(self) -> str:
        return f"TuningSystemId({str(self)!r})"


class TuningSystem(ABC):
    """
    Behavior of any tuning system (12-TET, 24-TET, just intonation, cents tables).

    Implementations must be immutable so a registry can be shared between
    threads once it is built.
    """

    @abstractmethod
    def to_frequency(self, index: int) -> float:
        """Convert an abstract pitch index to a frequency in Hz."""

    def name_of(self, index: int) -> str | None:
        """Optional symbolic name for the pitch at index."""
        return None


def _validate_base_frequency(base_freq: float) -> None:
    if not math.isfinite(base_freq) or base_freq <= 0:
        raise TuningDefinitionError(f"Base frequency must be finite and positive, got {base_freq}")


@dataclass(frozen=True)
class EqualTemperament(TuningSystem):
    """
    Equal division of the octave into steps_per_octave steps.

    base_index resolves to base_freq; every steps_per_octave indices the
    frequency doubles.

    Examples:
        EqualTemperament(440.0, 69) = 12-TET with A4 at index 69
        EqualTemperament(440.0, 69, 19, "19-TET") = 19 steps per octave
    """

    base_freq: float
    base_index: int
    steps_per_octave: int = 12
    label: str | None = None

    def __post_init__(self) -> None:
        _validate_base_frequency(self.base_freq)
        if self.steps_per_octave <= 0:
            raise TuningDefinitionError(
                f"steps_per_octave must be positive, got {self.steps_per_octave}"
            )

    def with_label(self, label: str) -> EqualTemperament:
        """Return a copy that names its pitches '<label>(<index>)'."""
        return EqualTemperament(self.base_freq, self.base_index, self.steps_per_octave, label)

    def to_frequency(self, index: int) -> float:
        steps = index - self.base_index
        return self.base_freq * 2.0 ** (steps / self.steps_per_octave)

    def name_of(self, index: int) -> str | None:
        if self.label is None:
            return None
        return f"{self.label}({index})"
