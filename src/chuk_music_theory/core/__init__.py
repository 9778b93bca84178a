"""
Core music primitives - the tuning-agnostic algebra layer.

These are the invariants everything else composes on:
- TuningSystem: Rule mapping an abstract index to a frequency (and name)
- TuningRegistry: Validated identifiers -> shared tuning systems
- Pitch: Literal frequency or abstract (index, system)
- Interval: Frequency ratio, with exact steps when measured in one system
- ScalePattern / Scale: Cyclic step patterns anchored at a root, with modes
- ChordPattern / Chord: Intervals from a root, starting with the identity
- DiatonicChord / ChordQuality: Stacked scale degrees and their classification
- ChordSymbol: Parsed chord symbols like "Cmaj7"
"""

from chuk_music_theory.core.catalog import (
    ScaleMode,
    build_pattern,
    build_scale,
    major_scale,
    minor_scale,
)
from chuk_music_theory.core.chord import (
    Chord,
    ChordPattern,
    ChordQuality,
    DiatonicChord,
    Inversion,
    diatonic_seventh,
    diatonic_sevenths,
    diatonic_triad,
    diatonic_triads,
)
from chuk_music_theory.core.errors import (
    ChordSymbolError,
    ControlCharacterError,
    DuplicateSystemError,
    EmptyChordSymbolError,
    EmptyPatternError,
    EmptySystemIdError,
    IntervalError,
    InvalidLiteralFrequencyError,
    InvalidRootError,
    LiteralHasNoNameError,
    MissingRootIntervalError,
    MusicTheoryError,
    NameUnavailableError,
    NonFiniteRatioError,
    NonPositiveRatioError,
    NotAbstractError,
    PatternError,
    PitchError,
    RegistryError,
    ScaleModeError,
    SystemIdError,
    TuningDefinitionError,
    UnknownQualityError,
    UnknownSystemError,
)
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.parsing import (
    Accidental,
    ChordSymbol,
    NoteLetter,
    parse_chord_symbol,
)
from chuk_music_theory.core.pitch import AbstractPitch, FrequencyPitch, Pitch, PitchLabel
from chuk_music_theory.core.registry import TuningRegistry
from chuk_music_theory.core.scale import (
    BoundedScaleDegrees,
    DegreeIntervals,
    DegreeStep,
    Scale,
    ScaleDegrees,
    ScalePattern,
)
from chuk_music_theory.core.system import (
    EqualTemperament,
    TuningSystem,
    TuningSystemId,
    validate_identifier,
)
from chuk_music_theory.core.systems import CentsScale, JustIntonation, TwelveTET, TwentyFourTET

__all__ = [
    # Tuning systems
    "TuningSystemId",
    "TuningSystem",
    "EqualTemperament",
    "TwelveTET",
    "TwentyFourTET",
    "JustIntonation",
    "CentsScale",
    "validate_identifier",
    "TuningRegistry",
    # Pitch
    "Pitch",
    "FrequencyPitch",
    "AbstractPitch",
    "PitchLabel",
    # Interval
    "Interval",
    # Scale
    "ScalePattern",
    "Scale",
    "DegreeIntervals",
    "DegreeStep",
    "ScaleDegrees",
    "BoundedScaleDegrees",
    "ScaleMode",
    "build_pattern",
    "build_scale",
    "major_scale",
    "minor_scale",
    # Chord
    "ChordQuality",
    "ChordPattern",
    "Chord",
    "Inversion",
    "DiatonicChord",
    "diatonic_triad",
    "diatonic_seventh",
    "diatonic_triads",
    "diatonic_sevenths",
    "NoteLetter",
    "Accidental",
    "ChordSymbol",
    "parse_chord_symbol",
    # Errors
    "MusicTheoryError",
    "SystemIdError",
    "EmptySystemIdError",
    "ControlCharacterError",
    "RegistryError",
    "DuplicateSystemError",
    "TuningDefinitionError",
    "PitchError",
    "UnknownSystemError",
    "InvalidLiteralFrequencyError",
    "NameUnavailableError",
    "NotAbstractError",
    "LiteralHasNoNameError",
    "IntervalError",
    "NonFiniteRatioError",
    "NonPositiveRatioError",
    "PatternError",
    "EmptyPatternError",
    "MissingRootIntervalError",
    "ScaleModeError",
    "ChordSymbolError",
    "EmptyChordSymbolError",
    "InvalidRootError",
    "UnknownQualityError",
]
