"""
Constants for the music theory engine.

No magic numbers - reference pitches, tolerances and step bounds live here.
"""

from typing import Final

# Concert pitch reference: A4 = 440 Hz at abstract index 69 (MIDI numbering)
A4_FREQUENCY: Final[float] = 440.0
A4_INDEX: Final[int] = 69

# Cents in one octave (ratio 2:1)
CENTS_PER_OCTAVE: Final[float] = 1200.0

# Default tolerance (in Hz) for Pitch.approx_eq
DEFAULT_FREQUENCY_EPSILON: Final[float] = 1.0e-4

# A chord pattern's first interval must be within this distance of ratio 1.0
ROOT_RATIO_EPSILON: Final[float] = 1.0e-9

# Step deltas are tracked as signed 32-bit counts; anything outside is dropped
MIN_STEP_DELTA: Final[int] = -(2**31)
MAX_STEP_DELTA: Final[int] = 2**31 - 1


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_SYSTEM_ID = "tuning system identifier must not be empty"
    CONTROL_IN_SYSTEM_ID = "tuning system identifier contains control character {character!r}"
    UNKNOWN_SYSTEM = "unknown tuning system: {system_id}"
    DUPLICATE_SYSTEM = "tuning system {system_id} is already registered"
    INVALID_LITERAL_FREQUENCY = "invalid literal frequency: {frequency}"
    NAME_UNAVAILABLE = "tuning system {system_id} does not provide a name for index {index}"
    NOT_ABSTRACT = "pitch is not abstract"
    LITERAL_HAS_NO_NAME = "literal frequency pitches do not have symbolic names"
    NON_FINITE_RATIO = "interval ratio must be finite (got {ratio})"
    NON_POSITIVE_RATIO = "interval ratio must be positive (got {ratio})"
    EMPTY_PATTERN = "pattern must contain at least one interval"
    MISSING_ROOT_INTERVAL = "chord pattern must begin with the identity interval"
    MODE_ROTATION_FAILED = "failed to rotate scale: {cause}"
    EMPTY_CHORD_SYMBOL = "chord symbol cannot be empty"
    INVALID_CHORD_ROOT = "invalid root note: {root!r}"
    UNKNOWN_CHORD_QUALITY = "unknown chord quality: {quality!r}"
