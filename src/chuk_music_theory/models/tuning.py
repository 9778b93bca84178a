"""
Tuning models - declarative tuning system definitions.

A TuningDefinition is the YAML-facing description of a tuning system.
build() turns it into the concrete TuningSystem used by the core.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_music_theory.constants import A4_FREQUENCY, A4_INDEX
from chuk_music_theory.core.errors import SystemIdError, TuningDefinitionError
from chuk_music_theory.core.system import EqualTemperament, TuningSystem, validate_identifier
from chuk_music_theory.core.systems import CentsScale, JustIntonation


class TuningKind(str, Enum):
    """How a tuning maps indices to frequencies."""

    EQUAL = "equal"
    JUST = "just"
    CENTS = "cents"


class TuningDefinition(BaseModel):
    """
    A named tuning system definition.

    equal: steps_per_octave equal divisions of the octave
    just: one octave of frequency ratios
    cents: one octave of cent offsets
    """

    name: str = Field(..., min_length=1, description="Registry identifier, e.g. '12tet'")
    description: str = Field(default="", description="Human-readable description")
    kind: TuningKind = Field(..., description="Tuning family")
    base_freq: float = Field(
        default=A4_FREQUENCY, gt=0, allow_inf_nan=False, description="Frequency of base_index in Hz"
    )
    base_index: int = Field(default=A4_INDEX, description="Abstract index sounding at base_freq")
    steps_per_octave: int | None = Field(
        default=None, description="Equal divisions of the octave (equal only)"
    )
    ratios: list[float] | None = Field(
        default=None, description="Ratios per degree (just only)"
    )
    cents: list[float] | None = Field(
        default=None, description="Cent offsets per degree (cents only)"
    )
    label: str | None = Field(
        default=None, description="Pitch name prefix, e.g. '12-TET' -> '12-TET(69)'"
    )

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        # The name becomes the registry identifier
        try:
            validate_identifier(value)
        except SystemIdError as err:
            raise ValueError(str(err)) from err
        return value

    @field_validator("ratios", "cents")
    @classmethod
    def _check_finite(cls, values: list[float] | None) -> list[float] | None:
        if values is not None and not all(math.isfinite(value) for value in values):
            raise ValueError("table entries must be finite")
        return values

    @model_validator(mode="after")
    def _check_table(self) -> TuningDefinition:
        if self.kind == TuningKind.EQUAL:
            if self.steps_per_octave is None or self.steps_per_octave <= 0:
                raise ValueError("equal tunings require a positive steps_per_octave")
        if self.kind == TuningKind.JUST:
            if not self.ratios:
                raise ValueError("just tunings require at least one ratio")
            if any(ratio <= 0 for ratio in self.ratios):
                raise ValueError("ratios must be positive")
        if self.kind == TuningKind.CENTS and not self.cents:
            raise ValueError("cents tunings require at least one cent offset")
        return self

    def build(self) -> TuningSystem:
        """
        Create the concrete tuning system.

        Raises:
            TuningDefinitionError: The table required by kind is missing
        """
        if self.kind == TuningKind.EQUAL and self.steps_per_octave is not None:
            return EqualTemperament(
                self.base_freq, self.base_index, self.steps_per_octave, self.label
            )
        if self.kind == TuningKind.JUST and self.ratios is not None:
            return JustIntonation(self.base_freq, self.base_index, tuple(self.ratios), self.label)
        if self.kind == TuningKind.CENTS and self.cents is not None:
            return CentsScale(self.base_freq, self.base_index, tuple(self.cents), self.label)
        raise TuningDefinitionError(f"{self.kind.value} tuning {self.name} has no table")

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a dict suitable for YAML export."""
        return self.model_dump(mode="json", exclude_none=True)


class TuningMetadata(BaseModel):
    """Lightweight tuning info for listing."""

    name: str
    description: str
    kind: TuningKind

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: TuningDefinition) -> TuningMetadata:
        """Create metadata from a full definition."""
        return cls(
            name=definition.name,
            description=definition.description,
            kind=definition.kind,
        )
