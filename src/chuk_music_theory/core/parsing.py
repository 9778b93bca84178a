"""
Chord symbol parsing - "Cmaj7", "F#m", "Bbdim7", "Eø7".

A symbol is a root letter, an optional accidental (# ♯ b ♭) and a quality
suffix. Parsed symbols can be realised as Chords in any 12-step system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from .chord import Chord, ChordQuality
from .errors import EmptyChordSymbolError, InvalidRootError, UnknownQualityError

if TYPE_CHECKING:
    from .registry import SystemKey, TuningRegistry


class NoteLetter(IntEnum):
    """Natural note letters, valued by semitones above C."""

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    @property
    def semitone_from_c(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.name


class Accidental(Enum):
    """Accidental applied to the root letter."""

    FLAT = -1
    NATURAL = 0
    SHARP = 1

    @property
    def semitone_offset(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return _ACCIDENTAL_SYMBOLS[self]


_ACCIDENTAL_SYMBOLS: dict[Accidental, str] = {
    Accidental.FLAT: "♭",
    Accidental.NATURAL: "",
    Accidental.SHARP: "♯",
}

_ACCIDENTAL_PREFIXES: dict[str, Accidental] = {
    "#": Accidental.SHARP,
    "♯": Accidental.SHARP,
    "b": Accidental.FLAT,
    "♭": Accidental.FLAT,
}

# Every display suffix parses, plus common alternative spellings
_QUALITY_SUFFIXES: dict[str, ChordQuality] = {
    **{quality.symbol: quality for quality in ChordQuality},
    "maj": ChordQuality.MAJOR_TRIAD,
    "min": ChordQuality.MINOR_TRIAD,
    "°": ChordQuality.DIMINISHED_TRIAD,
    "+": ChordQuality.AUGMENTED_TRIAD,
    "sus": ChordQuality.SUSPENDED_FOURTH,
    "M7": ChordQuality.MAJOR_SEVENTH,
    "Δ7": ChordQuality.MAJOR_SEVENTH,
    "min7": ChordQuality.MINOR_SEVENTH,
    "m/maj7": ChordQuality.MINOR_MAJOR_SEVENTH,
    "mM7": ChordQuality.MINOR_MAJOR_SEVENTH,
    "m7b5": ChordQuality.HALF_DIMINISHED_SEVENTH,
    "ø7": ChordQuality.HALF_DIMINISHED_SEVENTH,
    "°7": ChordQuality.DIMINISHED_SEVENTH,
    "M9": ChordQuality.MAJOR_9,
    "Δ9": ChordQuality.MAJOR_9,
    "min9": ChordQuality.MINOR_9,
    "M11": ChordQuality.MAJOR_11,
    "min11": ChordQuality.MINOR_11,
    "M13": ChordQuality.MAJOR_13,
    "min13": ChordQuality.MINOR_13,
}


@dataclass(frozen=True)
class ChordSymbol:
    """
    A parsed chord symbol.

    Examples:
        parse_chord_symbol("C#m7") = ChordSymbol(C, SHARP, MINOR_SEVENTH)
        str(parse_chord_symbol("Bbmaj7")) = "B♭maj7"
    """

    root: NoteLetter
    accidental: Accidental
    quality: ChordQuality

    @property
    def root_semitone(self) -> int:
        """Pitch class of the root, 0-11 (C = 0)."""
        return (self.root.semitone_from_c + self.accidental.semitone_offset) % 12

    def to_chord(self, system: SystemKey, registry: TuningRegistry, octave: int = 4) -> Chord:
        """Realise the symbol with its root in octave (C4 = index 60)."""
        # Cb4 is B3 and B#4 is C5: the accidental may cross the octave boundary
        root_index = (
            (octave + 1) * 12 + self.root.semitone_from_c + self.accidental.semitone_offset
        )
        return self.quality.build_chord(root_index, system, registry)

    def __str__(self) -> str:
        return f"{self.root}{self.accidental}{self.quality.symbol}"


def parse_chord_symbol(text: str) -> ChordSymbol:
    """
    Parse a chord symbol such as 'Cmaj7', 'F#m', 'Bbdim' or 'Eø7'.

    The root letter is case-insensitive; the quality suffix is not
    ('M7' is major seventh, 'm7' is minor seventh).

    Raises:
        EmptyChordSymbolError: text is empty
        InvalidRootError: text does not start with a letter A-G
        UnknownQualityError: the suffix names no known quality
    """
    if not text:
        raise EmptyChordSymbolError()

    letter = text[0].upper()
    if letter not in NoteLetter.__members__:
        raise InvalidRootError(text[0])
    root = NoteLetter[letter]

    rest = text[1:]
    accidental = Accidental.NATURAL
    if rest and rest[0] in _ACCIDENTAL_PREFIXES:
        accidental = _ACCIDENTAL_PREFIXES[rest[0]]
        rest = rest[1:]

    quality = _QUALITY_SUFFIXES.get(rest)
    if quality is None:
        raise UnknownQualityError(rest)
    return ChordSymbol(root, accidental, quality)
