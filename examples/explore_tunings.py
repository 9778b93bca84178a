#!/usr/bin/env python3
"""
Example: One Scale, Several Tunings.

This demonstrates how the same abstract scale sounds in different tuning
systems. Pitches stay abstract (index + system) until they are resolved
through the registry, so a C major scale in 12-TET and in just intonation
share their structure but not their frequencies.

Usage:
    python examples/explore_tunings.py
"""

from chuk_music_theory.core import (
    Interval,
    Pitch,
    ScaleMode,
    build_scale,
    diatonic_sevenths,
    parse_chord_symbol,
)
from chuk_music_theory.tunings import TuningLoader, default_registry


def main() -> None:
    """Walk a scale through every bundled tuning."""
    print("Music Theory Tuning Demo")
    print("=" * 40)
    print()

    print("Available tunings:")
    for meta in TuningLoader().list_tunings():
        print(f"  {meta.name} ({meta.kind.value}): {meta.description}")
    print()

    registry = default_registry()

    # C major from middle C, measured in two systems
    for system in ["12tet", "ji-major"]:
        scale = build_scale(ScaleMode.IONIAN, 60, system, registry)
        print(f"C major in {system}:")
        for step in scale.degrees_up_to(7, registry):
            freq = step.pitch.try_freq_hz(registry)
            print(f"  degree {step.degree}: {freq:8.3f} Hz  ({step.interval.cents():7.2f} cents)")
        print()

    # Tempered vs pure fifth
    tempered = Interval.between(
        Pitch.abstract_pitch(60, "12tet"), Pitch.abstract_pitch(67, "12tet"), registry
    )
    pure = Interval.from_ratio(3 / 2)
    print(f"Tempered fifth: {tempered}  ({tempered.cents():.3f} cents)")
    print(f"Pure fifth:     {pure}  ({pure.cents():.3f} cents)")
    print(f"Difference:     {(pure - tempered).cents():.3f} cents")
    print()

    # Diatonic harmony
    scale = build_scale(ScaleMode.IONIAN, 60, "12tet", registry)
    numerals = [str(chord) for chord in diatonic_sevenths(scale, registry)]
    print("Diatonic sevenths:", " ".join(numerals))

    # Modes
    dorian = scale.mode(1, registry)
    print(f"Mode 1 root: {dorian.root}  (back: {dorian.mode_back(1, registry).root})")
    print()

    # Chord symbols
    for text in ["Cmaj7", "F#m7", "Bbdim7", "G13"]:
        symbol = parse_chord_symbol(text)
        chord = symbol.to_chord("12tet", registry)
        tones = ", ".join(f"{tone.try_freq_hz(registry):.1f}" for tone in chord.tones(registry))
        print(f"  {symbol}: {tones} Hz")


if __name__ == "__main__":
    main()
