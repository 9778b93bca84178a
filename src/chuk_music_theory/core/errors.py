"""
Error hierarchy for the music theory core.

Every fallible operation raises a subclass of MusicTheoryError. Validation
failures are also ValueErrors and unknown tuning systems are also
LookupErrors, so callers catching builtins keep working.
"""

from __future__ import annotations

from chuk_music_theory.constants import ErrorMessages


class MusicTheoryError(Exception):
    """Base class for every error raised by the core."""


# Identifiers


class SystemIdError(MusicTheoryError, ValueError):
    """A tuning system identifier failed validation."""


class EmptySystemIdError(SystemIdError):
    """Identifier was empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.EMPTY_SYSTEM_ID)


class ControlCharacterError(SystemIdError):
    """Identifier contained a control character (newline, tab, etc.)."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(ErrorMessages.CONTROL_IN_SYSTEM_ID.format(character=character))


# Registry


class RegistryError(MusicTheoryError):
    """A registry mutation was rejected."""


class DuplicateSystemError(RegistryError):
    """Fallible registration of an identifier that already exists."""

    def __init__(self, system_id: str) -> None:
        self.system_id = system_id
        super().__init__(ErrorMessages.DUPLICATE_SYSTEM.format(system_id=system_id))


class TuningDefinitionError(MusicTheoryError, ValueError):
    """A tuning system was constructed with invalid parameters."""


# Pitches


class PitchError(MusicTheoryError):
    """A pitch could not be resolved or inspected."""


class UnknownSystemError(PitchError, LookupError):
    """The requested tuning system is not registered."""

    def __init__(self, system_id: str) -> None:
        self.system_id = system_id
        super().__init__(ErrorMessages.UNKNOWN_SYSTEM.format(system_id=system_id))


class InvalidLiteralFrequencyError(PitchError, ValueError):
    """Literal frequencies must be finite and strictly positive."""

    def __init__(self, frequency: float) -> None:
        self.frequency = frequency
        super().__init__(ErrorMessages.INVALID_LITERAL_FREQUENCY.format(frequency=frequency))


class NameUnavailableError(PitchError):
    """The tuning system has no symbolic name for an index."""

    def __init__(self, system_id: str, index: int) -> None:
        self.system_id = system_id
        self.index = index
        super().__init__(ErrorMessages.NAME_UNAVAILABLE.format(system_id=system_id, index=index))


class NotAbstractError(PitchError):
    """An abstract pitch was expected but a literal frequency was given."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.NOT_ABSTRACT)


class LiteralHasNoNameError(PitchError):
    """Literal frequency pitches never have symbolic names."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.LITERAL_HAS_NO_NAME)


# Intervals


class IntervalError(MusicTheoryError, ValueError):
    """An interval ratio is not finite and strictly positive."""

    def __init__(self, message: str, ratio: float) -> None:
        self.ratio = ratio
        super().__init__(message)


class NonFiniteRatioError(IntervalError):
    """Ratio was NaN or infinite."""

    def __init__(self, ratio: float) -> None:
        super().__init__(ErrorMessages.NON_FINITE_RATIO.format(ratio=ratio), ratio)


class NonPositiveRatioError(IntervalError):
    """Ratio was zero or negative."""

    def __init__(self, ratio: float) -> None:
        super().__init__(ErrorMessages.NON_POSITIVE_RATIO.format(ratio=ratio), ratio)


# Patterns


class PatternError(MusicTheoryError, ValueError):
    """A scale or chord pattern violated its structural invariants."""


class EmptyPatternError(PatternError):
    """Patterns must contain at least one interval."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.EMPTY_PATTERN)


class MissingRootIntervalError(PatternError):
    """Chord patterns must begin with the identity interval."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.MISSING_ROOT_INTERVAL)


# Traversal


class ScaleModeError(MusicTheoryError):
    """Rotating a scale failed while transposing the root."""

    def __init__(self, cause: PitchError | IntervalError) -> None:
        self.cause = cause
        super().__init__(ErrorMessages.MODE_ROTATION_FAILED.format(cause=cause))


# Chord symbols


class ChordSymbolError(MusicTheoryError, ValueError):
    """A chord symbol could not be parsed."""


class EmptyChordSymbolError(ChordSymbolError):
    """Chord symbol was empty."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.EMPTY_CHORD_SYMBOL)


class InvalidRootError(ChordSymbolError):
    """Chord symbol did not start with a note letter A-G."""

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(ErrorMessages.INVALID_CHORD_ROOT.format(root=root))


class UnknownQualityError(ChordSymbolError):
    """Chord symbol suffix did not name a known quality."""

    def __init__(self, quality: str) -> None:
        self.quality = quality
        super().__init__(ErrorMessages.UNKNOWN_CHORD_QUALITY.format(quality=quality))
