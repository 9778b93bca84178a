"""
Chord primitives - ChordQuality, ChordPattern, Chord, Inversion, DiatonicChord.

A chord pattern is an ordered list of intervals measured from the root
(not stacked), always starting with the identity. Diatonic chords are built
by stacking every other degree of a Scale, and their quality is recovered
by matching step offsets against a fixed catalog.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from chuk_music_theory.constants import CENTS_PER_OCTAVE, ROOT_RATIO_EPSILON

from .errors import EmptyPatternError, MissingRootIntervalError
from .interval import Interval
from .pitch import AbstractPitch, Pitch
from .system import TuningSystemId

if TYPE_CHECKING:
    from .registry import SystemKey, TuningRegistry
    from .scale import Scale


class ChordQuality(str, Enum):
    """
    Closed catalog of chord qualities.

    Each quality has a fixed ascending semitone-offset signature. Extended
    chords omit inner extensions (an 11th chord has no 9th, a 13th chord
    has neither 9th nor 11th).
    """

    # Triads
    MAJOR_TRIAD = "major_triad"
    MINOR_TRIAD = "minor_triad"
    DIMINISHED_TRIAD = "diminished_triad"
    AUGMENTED_TRIAD = "augmented_triad"
    SUSPENDED_SECOND = "suspended_second"
    SUSPENDED_FOURTH = "suspended_fourth"
    # Seventh chords
    DOMINANT_SEVENTH = "dominant_seventh"
    MAJOR_SEVENTH = "major_seventh"
    MINOR_SEVENTH = "minor_seventh"
    MINOR_MAJOR_SEVENTH = "minor_major_seventh"
    HALF_DIMINISHED_SEVENTH = "half_diminished_seventh"
    DIMINISHED_SEVENTH = "diminished_seventh"
    # Extended chords
    ADD_9 = "add9"
    DOMINANT_9 = "dominant_9"
    MAJOR_9 = "major_9"
    MINOR_9 = "minor_9"
    DOMINANT_11 = "dominant_11"
    MAJOR_11 = "major_11"
    MINOR_11 = "minor_11"
    DOMINANT_13 = "dominant_13"
    MAJOR_13 = "major_13"
    MINOR_13 = "minor_13"

    @property
    def semitone_offsets(self) -> tuple[int, ...]:
        return _OFFSETS[self]

    @property
    def tone_count(self) -> int:
        return len(_OFFSETS[self])

    @property
    def is_seventh(self) -> bool:
        """Four-tone qualities (add9 counts, it has four tones)."""
        return self.tone_count == 4

    @property
    def is_minor(self) -> bool:
        """True when the third above the root is minor."""
        return _OFFSETS[self][1] == 3

    @property
    def symbol(self) -> str:
        """Chord-symbol suffix, e.g. 'm7' or 'maj9'. Major triads are ''."""
        return _SYMBOLS[self]

    @classmethod
    def from_offsets(cls, offsets: Sequence[int]) -> ChordQuality | None:
        """Quality whose signature is exactly offsets, if any."""
        return _BY_OFFSETS.get(tuple(offsets))

    @classmethod
    def classify(cls, pattern: ChordPattern) -> ChordQuality | None:
        """
        Best-effort classification of a pattern.

        None when any interval lost its step information or the signature is
        not in the catalog.
        """
        offsets = pattern.step_offsets()
        if offsets is None:
            return None
        return cls.from_offsets(offsets)

    def build_pattern(self, system: SystemKey, registry: TuningRegistry) -> ChordPattern:
        """Pattern for this quality measured in system."""
        return ChordPattern.from_twelve_tet_offsets(self.semitone_offsets, system, registry)

    def build_chord(self, root_index: int, system: SystemKey, registry: TuningRegistry) -> Chord:
        """Chord of this quality rooted at abstract index root_index."""
        return Chord.from_twelve_tet_offsets(root_index, system, self.semitone_offsets, registry)


_OFFSETS: dict[ChordQuality, tuple[int, ...]] = {
    ChordQuality.MAJOR_TRIAD: (0, 4, 7),
    ChordQuality.MINOR_TRIAD: (0, 3, 7),
    ChordQuality.DIMINISHED_TRIAD: (0, 3, 6),
    ChordQuality.AUGMENTED_TRIAD: (0, 4, 8),
    ChordQuality.SUSPENDED_SECOND: (0, 2, 7),
    ChordQuality.SUSPENDED_FOURTH: (0, 5, 7),
    ChordQuality.DOMINANT_SEVENTH: (0, 4, 7, 10),
    ChordQuality.MAJOR_SEVENTH: (0, 4, 7, 11),
    ChordQuality.MINOR_SEVENTH: (0, 3, 7, 10),
    ChordQuality.MINOR_MAJOR_SEVENTH: (0, 3, 7, 11),
    ChordQuality.HALF_DIMINISHED_SEVENTH: (0, 3, 6, 10),
    ChordQuality.DIMINISHED_SEVENTH: (0, 3, 6, 9),
    ChordQuality.ADD_9: (0, 4, 7, 14),
    ChordQuality.DOMINANT_9: (0, 4, 7, 10, 14),
    ChordQuality.MAJOR_9: (0, 4, 7, 11, 14),
    ChordQuality.MINOR_9: (0, 3, 7, 10, 14),
    ChordQuality.DOMINANT_11: (0, 4, 7, 10, 17),
    ChordQuality.MAJOR_11: (0, 4, 7, 11, 17),
    ChordQuality.MINOR_11: (0, 3, 7, 10, 17),
    ChordQuality.DOMINANT_13: (0, 4, 7, 10, 21),
    ChordQuality.MAJOR_13: (0, 4, 7, 11, 21),
    ChordQuality.MINOR_13: (0, 3, 7, 10, 21),
}

_BY_OFFSETS: dict[tuple[int, ...], ChordQuality] = {
    offsets: quality for quality, offsets in _OFFSETS.items()
}

_SYMBOLS: dict[ChordQuality, str] = {
    ChordQuality.MAJOR_TRIAD: "",
    ChordQuality.MINOR_TRIAD: "m",
    ChordQuality.DIMINISHED_TRIAD: "dim",
    ChordQuality.AUGMENTED_TRIAD: "aug",
    ChordQuality.SUSPENDED_SECOND: "sus2",
    ChordQuality.SUSPENDED_FOURTH: "sus4",
    ChordQuality.DOMINANT_SEVENTH: "7",
    ChordQuality.MAJOR_SEVENTH: "maj7",
    ChordQuality.MINOR_SEVENTH: "m7",
    ChordQuality.MINOR_MAJOR_SEVENTH: "m(maj7)",
    ChordQuality.HALF_DIMINISHED_SEVENTH: "m7♭5",
    ChordQuality.DIMINISHED_SEVENTH: "dim7",
    ChordQuality.ADD_9: "add9",
    ChordQuality.DOMINANT_9: "9",
    ChordQuality.MAJOR_9: "maj9",
    ChordQuality.MINOR_9: "m9",
    ChordQuality.DOMINANT_11: "11",
    ChordQuality.MAJOR_11: "maj11",
    ChordQuality.MINOR_11: "m11",
    ChordQuality.DOMINANT_13: "13",
    ChordQuality.MAJOR_13: "maj13",
    ChordQuality.MINOR_13: "m13",
}


@dataclass(frozen=True)
class ChordPattern:
    """
    Chord tones as intervals from the root, starting with the identity.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(self.intervals))
        if not self.intervals:
            raise EmptyPatternError()
        if abs(self.intervals[0].ratio - 1.0) > ROOT_RATIO_EPSILON:
            raise MissingRootIntervalError()

    @classmethod
    def from_intervals(cls, intervals: Iterable[Interval]) -> ChordPattern:
        """
        Build a pattern from intervals measured from the root.

        Raises:
            EmptyPatternError: No intervals were given
            MissingRootIntervalError: The first interval is not the identity
        """
        return cls(tuple(intervals))

    @classmethod
    def from_twelve_tet_offsets(
        cls,
        semitone_offsets: Sequence[int],
        system: SystemKey,
        registry: TuningRegistry,
    ) -> ChordPattern:
        """Pattern from integer offsets in system; the first offset must be 0."""
        if not semitone_offsets:
            raise EmptyPatternError()
        if semitone_offsets[0] != 0:
            raise MissingRootIntervalError()

        system_id = TuningSystemId.coerce(system)
        root = AbstractPitch(0, system_id)
        return cls.from_intervals(
            Interval.between(root, AbstractPitch(offset, system_id), registry)
            for offset in semitone_offsets
        )

    def __len__(self) -> int:
        return len(self.intervals)

    def step_offsets(self) -> list[int] | None:
        """
        Integer offsets of every tone, or None if any tone lacks exact steps.

        All tones above the root must share one tuning system.
        """
        offsets = [0]
        reference: TuningSystemId | None = None
        for interval in self.intervals[1:]:
            if interval.steps is None:
                return None
            system, delta = interval.steps
            if reference is None:
                reference = system
            elif reference != system:
                return None
            offsets.append(delta)
        return offsets

    def tones(self, root: Pitch, registry: TuningRegistry) -> list[Pitch]:
        """Root first, then every other interval applied to the root."""
        return [root] + [interval.apply_to(root, registry) for interval in self.intervals[1:]]


@dataclass(frozen=True)
class Inversion:
    """
    Which chord tone sits in the bass.

    bass_index 0 is root position, 1 first inversion, and so on.
    """

    bass_index: int

    ROOT: ClassVar[Inversion]
    FIRST: ClassVar[Inversion]
    SECOND: ClassVar[Inversion]
    THIRD: ClassVar[Inversion]

    def __post_init__(self) -> None:
        if self.bass_index < 0:
            raise ValueError(f"Bass index must be non-negative, got {self.bass_index}")

    @classmethod
    def from_bass_index(cls, index: int) -> Inversion:
        return cls(index)

    def __str__(self) -> str:
        if self.bass_index == 0:
            return "root position"
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(self.bass_index, "th")
        return f"{self.bass_index}{suffix} inversion"


Inversion.ROOT = Inversion(0)
Inversion.FIRST = Inversion(1)
Inversion.SECOND = Inversion(2)
Inversion.THIRD = Inversion(3)


@dataclass(frozen=True)
class Chord:
    """
    A chord pattern anchored at a root pitch.

    Examples:
        Chord.from_twelve_tet_offsets(60, "12tet", [0, 4, 7], registry) = C major
        ChordQuality.MINOR_SEVENTH.build_chord(62, "12tet", registry) = Dm7
    """

    root: Pitch
    pattern: ChordPattern

    @classmethod
    def from_twelve_tet_offsets(
        cls,
        root_index: int,
        system: SystemKey,
        semitone_offsets: Sequence[int],
        registry: TuningRegistry,
    ) -> Chord:
        system_id = TuningSystemId.coerce(system)
        pattern = ChordPattern.from_twelve_tet_offsets(semitone_offsets, system_id, registry)
        return cls(AbstractPitch(root_index, system_id), pattern)

    @property
    def tone_count(self) -> int:
        return len(self.pattern)

    @property
    def quality(self) -> ChordQuality | None:
        return ChordQuality.classify(self.pattern)

    def tones(self, registry: TuningRegistry) -> list[Pitch]:
        return self.pattern.tones(self.root, registry)

    def tone(self, index: int, registry: TuningRegistry) -> Pitch | None:
        """Resolve one tone; None past the last tone. Tone 0 is the root."""
        if index < 0 or index >= len(self.pattern):
            return None
        if index == 0:
            return self.root
        return self.pattern.intervals[index].apply_to(self.root, registry)

    def bass_tone(self, inversion: Inversion, registry: TuningRegistry) -> Pitch | None:
        """Chord tone that sounds in the bass for inversion, if the chord has it."""
        return self.tone(inversion.bass_index, registry)

    def detect_inversion(
        self,
        voicing: Iterable[Pitch],
        registry: TuningRegistry,
        tolerance_cents: float = 1.0,
    ) -> Inversion | None:
        """
        Find the inversion of a voicing of this chord.

        The lowest sounding pitch is matched against each chord tone modulo
        the octave. None for an empty voicing or an unmatched bass.
        """
        frequencies = [pitch.try_freq_hz(registry) for pitch in voicing]
        if not frequencies:
            return None
        bass = min(frequencies)

        for index, tone in enumerate(self.tones(registry)):
            cents = CENTS_PER_OCTAVE * math.log2(bass / tone.try_freq_hz(registry))
            distance = cents % CENTS_PER_OCTAVE
            if min(distance, CENTS_PER_OCTAVE - distance) <= tolerance_cents:
                return Inversion.from_bass_index(index)
        return None


_ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_SUFFIXES: dict[ChordQuality, str] = {
    ChordQuality.DIMINISHED_TRIAD: "°",
    ChordQuality.AUGMENTED_TRIAD: "+",
    ChordQuality.SUSPENDED_SECOND: "sus2",
    ChordQuality.SUSPENDED_FOURTH: "sus4",
    ChordQuality.DOMINANT_SEVENTH: "7",
    ChordQuality.MAJOR_SEVENTH: "Δ7",
    ChordQuality.MINOR_SEVENTH: "7",
    ChordQuality.MINOR_MAJOR_SEVENTH: "Δ7",
    ChordQuality.HALF_DIMINISHED_SEVENTH: "ø7",
    ChordQuality.DIMINISHED_SEVENTH: "°7",
    ChordQuality.ADD_9: "add9",
    ChordQuality.DOMINANT_9: "9",
    ChordQuality.MAJOR_9: "Δ9",
    ChordQuality.MINOR_9: "9",
    ChordQuality.DOMINANT_11: "11",
    ChordQuality.MAJOR_11: "Δ11",
    ChordQuality.MINOR_11: "11",
    ChordQuality.DOMINANT_13: "13",
    ChordQuality.MAJOR_13: "Δ13",
    ChordQuality.MINOR_13: "13",
}


def _to_roman(number: int) -> str:
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)


@dataclass(frozen=True)
class DiatonicChord:
    """
    A chord built by stacking every other degree of a scale.

    degree is zero-based and already reduced modulo the scale length.
    """

    degree: int
    chord: Chord
    quality: ChordQuality | None

    @property
    def roman_numeral(self) -> str:
        """
        Roman numeral for the chord: I, ii, vii°, V7, iiø7...

        Case indicates quality (lower case for minor-third chords).
        Unclassified chords get a bare upper-case numeral.
        """
        base = _to_roman(self.degree + 1)
        if self.quality is None:
            return base
        if self.quality.is_minor:
            base = base.lower()
        return base + _ROMAN_SUFFIXES.get(self.quality, "")

    def __str__(self) -> str:
        return self.roman_numeral


def _build_diatonic(
    scale: Scale, degree: int, tone_count: int, registry: TuningRegistry
) -> DiatonicChord:
    if degree < 0:
        raise ValueError(f"Degree must be non-negative, got {degree}")

    reduced = degree % scale.step_count
    root = scale.degree_pitch(reduced, registry)

    intervals = [Interval.identity()]
    for idx in range(1, tone_count):
        target = scale.degree_pitch(reduced + idx * 2, registry)
        intervals.append(Interval.between(root, target, registry))

    chord = Chord(root, ChordPattern.from_intervals(intervals))
    return DiatonicChord(reduced, chord, ChordQuality.classify(chord.pattern))


def diatonic_triad(scale: Scale, degree: int, registry: TuningRegistry) -> DiatonicChord:
    """Three-tone chord stacked on degree (reduced modulo the scale length)."""
    return _build_diatonic(scale, degree, 3, registry)


def diatonic_seventh(scale: Scale, degree: int, registry: TuningRegistry) -> DiatonicChord:
    """Four-tone chord stacked on degree (reduced modulo the scale length)."""
    return _build_diatonic(scale, degree, 4, registry)


def diatonic_triads(scale: Scale, registry: TuningRegistry) -> list[DiatonicChord]:
    """Triads on every degree of the scale."""
    return [_build_diatonic(scale, degree, 3, registry) for degree in range(scale.step_count)]


def diatonic_sevenths(scale: Scale, registry: TuningRegistry) -> list[DiatonicChord]:
    """Seventh chords on every degree of the scale."""
    return [_build_diatonic(scale, degree, 4, registry) for degree in range(scale.step_count)]
