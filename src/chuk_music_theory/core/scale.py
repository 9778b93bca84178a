"""
Scale primitives - ScalePattern, Scale and lazy degree traversal.

A ScalePattern is one cycle of degree-to-degree step intervals. Applied
cyclically from a root pitch it generates every degree, including degrees
past the first octave. Scales rotate into modes forward (mode) or
backward (mode_back).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from .errors import EmptyPatternError, IntervalError, PitchError, ScaleModeError
from .interval import Interval
from .pitch import AbstractPitch, Pitch
from .system import TuningSystemId

if TYPE_CHECKING:
    from .registry import SystemKey, TuningRegistry

# Ionian step sizes in 12-TET semitones
_MAJOR_STEPS: tuple[int, ...] = (2, 2, 1, 2, 2, 2, 1)


def _check_degree(degree: int) -> None:
    if degree < 0:
        raise ValueError(f"Degree must be non-negative, got {degree}")


@dataclass(frozen=True)
class ScalePattern:
    """
    Non-empty ordered sequence of step intervals (degree to next degree).

    Immutable and hashable.

    Examples:
        ScalePattern.from_twelve_tet_steps([2, 2, 1, 2, 2, 2, 1], "12tet", registry)
            = the major scale
    """

    steps: tuple[Interval, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))
        if not self.steps:
            raise EmptyPatternError()

    @classmethod
    def from_steps(cls, steps: Iterable[Interval]) -> ScalePattern:
        """
        Build a pattern from step intervals.

        Raises:
            EmptyPatternError: No steps were given
        """
        return cls(tuple(steps))

    @classmethod
    def from_twelve_tet_steps(
        cls,
        semitone_steps: Sequence[int],
        system: SystemKey,
        registry: TuningRegistry,
    ) -> ScalePattern:
        """
        Build a pattern from integer step sizes measured in system.

        Each step is resolved through the registry, so the intervals keep
        exact steps for system and the true ratios of its tuning.
        """
        system_id = TuningSystemId.coerce(system)
        steps = []
        index = 0
        for delta in semitone_steps:
            start = AbstractPitch(index, system_id)
            index += delta
            steps.append(Interval.between(start, AbstractPitch(index, system_id), registry))
        return cls.from_steps(steps)

    def __len__(self) -> int:
        return len(self.steps)

    def rotate(self, offset: int) -> ScalePattern:
        """Rotate left by offset (mod length)."""
        shift = offset % len(self.steps)
        if shift == 0:
            return self
        return ScalePattern(self.steps[shift:] + self.steps[:shift])

    def degree_interval(self, degree: int) -> Interval:
        """
        Cumulative interval from the root to degree.

        Degree 0 is the identity; higher degrees reuse the pattern cyclically.
        """
        _check_degree(degree)
        if degree == 0:
            return Interval.identity()
        length = len(self.steps)
        acc = self.steps[0]
        for idx in range(1, degree):
            acc = acc.compose(self.steps[idx % length])
        return acc

    def degree_intervals(self, highest_degree: int) -> list[Interval]:
        """Intervals for degrees 0..highest_degree inclusive."""
        _check_degree(highest_degree)
        iterator = self.degree_intervals_iter()
        return [next(iterator)[1] for _ in range(highest_degree + 1)]

    def degree_intervals_iter(self) -> DegreeIntervals:
        """Lazy, unbounded (degree, interval) iterator."""
        return DegreeIntervals(self)


class DegreeIntervals(Iterator[tuple[int, Interval]]):
    """
    Lazy cumulative intervals of a pattern: (0, identity), (1, step0), ...

    A composition failure is raised once; the iterator is exhausted afterwards.
    """

    def __init__(self, pattern: ScalePattern) -> None:
        self._steps = pattern.steps
        self._next_degree = 0
        self._current: Interval | None = None
        self._halted = False

    def __iter__(self) -> DegreeIntervals:
        return self

    def __next__(self) -> tuple[int, Interval]:
        if self._halted:
            raise StopIteration

        if self._next_degree == 0:
            self._next_degree = 1
            return (0, Interval.identity())

        step = self._steps[(self._next_degree - 1) % len(self._steps)]
        if self._current is None:
            interval = step
        else:
            try:
                interval = self._current.compose(step)
            except IntervalError:
                self._halted = True
                raise
        self._current = interval

        degree = self._next_degree
        self._next_degree += 1
        return (degree, interval)


class DegreeStep(NamedTuple):
    """One traversal step: degree number, interval from the root, resolved pitch."""

    degree: int
    interval: Interval
    pitch: Pitch


@dataclass(frozen=True)
class Scale:
    """
    A scale pattern anchored at a root pitch.

    Examples:
        Scale.twelve_tet_major(60, "12tet", registry) = C major from middle C
        scale.mode(1, registry) = D dorian
    """

    root: Pitch
    pattern: ScalePattern

    @classmethod
    def from_twelve_tet_steps(
        cls,
        root_index: int,
        system: SystemKey,
        semitone_steps: Sequence[int],
        registry: TuningRegistry,
    ) -> Scale:
        """Scale rooted at abstract index root_index with integer step sizes."""
        pattern = ScalePattern.from_twelve_tet_steps(semitone_steps, system, registry)
        return cls(AbstractPitch(root_index, TuningSystemId.coerce(system)), pattern)

    @classmethod
    def twelve_tet_major(cls, root_index: int, system: SystemKey, registry: TuningRegistry) -> Scale:
        """Major scale (2 2 1 2 2 2 1) rooted at root_index."""
        return cls.from_twelve_tet_steps(root_index, system, _MAJOR_STEPS, registry)

    @property
    def step_count(self) -> int:
        return len(self.pattern)

    # Intervals

    def degree_interval(self, degree: int) -> Interval:
        return self.pattern.degree_interval(degree)

    def degree_intervals(self, highest_degree: int) -> list[Interval]:
        return self.pattern.degree_intervals(highest_degree)

    def degree_interval_iter(self) -> DegreeIntervals:
        return self.pattern.degree_intervals_iter()

    # Pitches

    def degree_pitch(self, degree: int, registry: TuningRegistry) -> Pitch:
        """
        Pitch of degree, applying each step to the root in turn.

        Raises:
            PitchError: An intermediate pitch failed to resolve
        """
        _check_degree(degree)
        steps = self.pattern.steps
        pitch = self.root
        for idx in range(degree):
            pitch = steps[idx % len(steps)].apply_to(pitch, registry)
        return pitch

    def degree_pitches(self, highest_degree: int, registry: TuningRegistry) -> list[Pitch]:
        """Pitches for degrees 0..highest_degree inclusive."""
        _check_degree(highest_degree)
        steps = self.pattern.steps
        current = self.root
        pitches = [current]
        for idx in range(highest_degree):
            current = steps[idx % len(steps)].apply_to(current, registry)
            pitches.append(current)
        return pitches

    def degrees(self, registry: TuningRegistry) -> ScaleDegrees:
        """Unbounded lazy traversal yielding DegreeStep values."""
        return ScaleDegrees(self, registry)

    def degrees_up_to(self, highest_degree: int, registry: TuningRegistry) -> BoundedScaleDegrees:
        """Traversal of degrees 0..highest_degree with an exact len()."""
        _check_degree(highest_degree)
        return BoundedScaleDegrees(self, highest_degree, registry)

    # Modes

    def mode(self, degree: int, registry: TuningRegistry) -> Scale:
        """
        Rotate forward: the new root is degree_pitch(degree).

        Raises:
            PitchError: The new root failed to resolve
        """
        new_root = self.degree_pitch(degree, registry)
        return Scale(new_root, self.pattern.rotate(degree % len(self.pattern)))

    def mode_back(self, degree: int, registry: TuningRegistry) -> Scale:
        """
        Rotate backward: walk degree steps down from the root.

        mode(d).mode_back(d) restores the starting scale for any d.

        Raises:
            ScaleModeError: A step could not be inverted or a pitch failed to resolve
        """
        _check_degree(degree)
        if degree == 0:
            return self
        new_root = self._shift_root_backward(degree, registry)
        length = len(self.pattern)
        rotation = (length - degree % length) % length
        return Scale(new_root, self.pattern.rotate(rotation))

    def mode_with_offset(self, offset: int, registry: TuningRegistry) -> Scale:
        """
        Rotate forward for positive offsets, backward for negative ones.

        Raises:
            ScaleModeError: Rotation failed in either direction
        """
        if offset == 0:
            return self
        if offset > 0:
            try:
                return self.mode(offset, registry)
            except PitchError as err:
                raise ScaleModeError(err) from err
        return self.mode_back(-offset, registry)

    def _shift_root_backward(self, steps: int, registry: TuningRegistry) -> Pitch:
        pattern_steps = self.pattern.steps
        length = len(pattern_steps)
        pitch = self.root
        for offset in range(steps):
            # Walk the pattern in reverse: last step first, wrapping every cycle
            idx = (2 * length - 1 - offset % length) % length
            try:
                pitch = pattern_steps[idx].inverse().apply_to(pitch, registry)
            except (IntervalError, PitchError) as err:
                raise ScaleModeError(err) from err
        return pitch


class ScaleDegrees(Iterator[DegreeStep]):
    """
    Unbounded lazy traversal of a scale.

    Each next() composes one more step and resolves one more pitch. A failure
    is raised once; the iterator is exhausted afterwards.
    """

    def __init__(self, scale: Scale, registry: TuningRegistry) -> None:
        self._scale = scale
        self._registry = registry
        self._next_degree = 0
        self._current_pitch = scale.root
        self._current_interval: Interval | None = None
        self._halted = False

    def __iter__(self) -> ScaleDegrees:
        return self

    def __next__(self) -> DegreeStep:
        if self._halted:
            raise StopIteration

        if self._next_degree == 0:
            self._next_degree = 1
            return DegreeStep(0, Interval.identity(), self._scale.root)

        steps = self._scale.pattern.steps
        step = steps[(self._next_degree - 1) % len(steps)]
        try:
            interval = step if self._current_interval is None else self._current_interval.compose(step)
            pitch = step.apply_to(self._current_pitch, self._registry)
        except (IntervalError, PitchError):
            self._halted = True
            raise
        self._current_interval = interval
        self._current_pitch = pitch

        degree = self._next_degree
        self._next_degree += 1
        return DegreeStep(degree, interval, pitch)


class BoundedScaleDegrees(Iterator[DegreeStep]):
    """Traversal of degrees 0..highest_degree; len() is the remaining count."""

    def __init__(self, scale: Scale, highest_degree: int, registry: TuningRegistry) -> None:
        self._inner = ScaleDegrees(scale, registry)
        self._remaining = highest_degree + 1

    def __iter__(self) -> BoundedScaleDegrees:
        return self

    def __len__(self) -> int:
        return self._remaining

    def __next__(self) -> DegreeStep:
        if self._remaining == 0:
            raise StopIteration
        try:
            item = next(self._inner)
        except StopIteration:
            self._remaining = 0
            raise
        except (IntervalError, PitchError):
            self._remaining = 0
            raise
        self._remaining -= 1
        return item
