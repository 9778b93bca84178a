"""
Scale catalog - the church modes plus harmonic and melodic minor.

Step tables are in 12-TET semitones; build_pattern resolves them through a
registered system so the resulting intervals carry that system's ratios.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .pitch import AbstractPitch
from .scale import Scale, ScalePattern
from .system import TuningSystemId

if TYPE_CHECKING:
    from .registry import SystemKey, TuningRegistry


class ScaleMode(str, Enum):
    """Named scale patterns."""

    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"

    @property
    def steps(self) -> tuple[int, ...]:
        """Step sizes in semitones, one per degree."""
        return _MODE_STEPS[self]

    @classmethod
    def parse(cls, name: str) -> ScaleMode:
        """
        Parse a mode name like 'dorian', 'Harmonic Minor' or 'major'.

        Raises:
            ValueError: The name is not a known mode
        """
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown scale mode: {name}") from None


_MODE_STEPS: dict[ScaleMode, tuple[int, ...]] = {
    ScaleMode.IONIAN: (2, 2, 1, 2, 2, 2, 1),
    ScaleMode.DORIAN: (2, 1, 2, 2, 2, 1, 2),
    ScaleMode.PHRYGIAN: (1, 2, 2, 2, 1, 2, 2),
    ScaleMode.LYDIAN: (2, 2, 2, 1, 2, 2, 1),
    ScaleMode.MIXOLYDIAN: (2, 2, 1, 2, 2, 1, 2),
    ScaleMode.AEOLIAN: (2, 1, 2, 2, 1, 2, 2),
    ScaleMode.LOCRIAN: (1, 2, 2, 1, 2, 2, 2),
    ScaleMode.HARMONIC_MINOR: (2, 1, 2, 2, 1, 3, 1),
    ScaleMode.MELODIC_MINOR: (2, 1, 2, 2, 2, 2, 1),
}

_ALIASES: dict[str, str] = {
    "major": "ionian",
    "minor": "aeolian",
    "natural_minor": "aeolian",
}


def build_pattern(mode: ScaleMode, system: SystemKey, registry: TuningRegistry) -> ScalePattern:
    """Pattern for mode measured in system."""
    return ScalePattern.from_twelve_tet_steps(mode.steps, system, registry)


def build_scale(
    mode: ScaleMode, root_index: int, system: SystemKey, registry: TuningRegistry
) -> Scale:
    """Scale for mode rooted at abstract index root_index."""
    system_id = TuningSystemId.coerce(system)
    return Scale(AbstractPitch(root_index, system_id), build_pattern(mode, system_id, registry))


def major_scale(root_index: int, system: SystemKey, registry: TuningRegistry) -> Scale:
    return build_scale(ScaleMode.IONIAN, root_index, system, registry)


def minor_scale(root_index: int, system: SystemKey, registry: TuningRegistry) -> Scale:
    return build_scale(ScaleMode.AEOLIAN, root_index, system, registry)
