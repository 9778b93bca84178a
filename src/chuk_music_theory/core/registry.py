"""
Tuning registry - maps validated identifiers to shared tuning systems.

The registry is built once (register 0..n systems), then read many times
while pitches, intervals, scales and chords are resolved against it.
It performs no locking: finish mutating it before sharing it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from .errors import DuplicateSystemError, UnknownSystemError
from .system import TuningSystem, TuningSystemId

logger = logging.getLogger(__name__)

# Anything accepted where an identifier is expected
SystemKey = TuningSystemId | str


class TuningRegistry:
    """
    Registry of tuning systems keyed by TuningSystemId.

    Lookups accept either a TuningSystemId or the plain string. Iteration is
    always in sorted identifier order.

    Example:
        registry = TuningRegistry().with_system("12tet", TwelveTET())
        registry.resolve_frequency("12tet", 69)  # 440.0
    """

    def __init__(self) -> None:
        self._systems: dict[TuningSystemId, TuningSystem] = {}

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[SystemKey, TuningSystem]]) -> TuningRegistry:
        """Build a registry from (id, system) pairs; later entries win."""
        registry = cls()
        registry.extend(entries)
        return registry

    def copy(self) -> TuningRegistry:
        """Shallow copy sharing the same system instances."""
        clone = TuningRegistry()
        clone._systems = dict(self._systems)
        return clone

    # Mutation

    def insert(self, system_id: SystemKey, system: TuningSystem) -> TuningSystem | None:
        """Insert or replace a tuning system, returning the previous one."""
        key = TuningSystemId.coerce(system_id)
        previous = self._systems.get(key)
        self._systems[key] = system
        if previous is None:
            logger.debug("Registered tuning system %s", key)
        else:
            logger.debug("Replaced tuning system %s", key)
        return previous

    def register(self, system_id: SystemKey, system: TuningSystem) -> None:
        """Register or replace a tuning system."""
        self.insert(system_id, system)

    def register_system(self, system_id: SystemKey, system: TuningSystem) -> None:
        """Register a concrete system under any identifier-like value."""
        self.insert(system_id, system)

    def try_register_system(self, system_id: SystemKey, system: TuningSystem) -> None:
        """
        Register a system, refusing to overwrite an existing entry.

        Raises:
            DuplicateSystemError: The identifier is already registered
        """
        key = TuningSystemId.coerce(system_id)
        if key in self._systems:
            raise DuplicateSystemError(key)
        self.insert(key, system)

    def register_if_absent(self, system_id: SystemKey, system: TuningSystem) -> bool:
        """Register only when the identifier is free. Returns True if inserted."""
        key = TuningSystemId.coerce(system_id)
        if key in self._systems:
            return False
        self.insert(key, system)
        return True

    def with_system(self, system_id: SystemKey, system: TuningSystem) -> TuningRegistry:
        """Builder-style registration returning the registry."""
        self.insert(system_id, system)
        return self

    def get_or_insert_with(
        self, system_id: SystemKey, factory: Callable[[], TuningSystem]
    ) -> TuningSystem:
        """Return the registered system, creating it with factory only if absent."""
        key = TuningSystemId.coerce(system_id)
        existing = self._systems.get(key)
        if existing is not None:
            return existing
        system = factory()
        self._systems[key] = system
        logger.debug("Lazily registered tuning system %s", key)
        return system

    def extend(self, entries: Iterable[tuple[SystemKey, TuningSystem]]) -> None:
        """Insert every (id, system) pair, replacing existing entries."""
        for system_id, system in entries:
            self.insert(system_id, system)

    def replace_systems(self, func: Callable[[TuningSystemId, TuningSystem], TuningSystem]) -> None:
        """Rewrite every stored system in place with func(id, system)."""
        for key in self.ids():
            self._systems[key] = func(key, self._systems[key])
        logger.debug("Replaced %d tuning systems", len(self._systems))

    def remove(self, system_id: SystemKey) -> TuningSystem | None:
        """Remove a system, returning it if it was registered."""
        removed = self._systems.pop(system_id, None)  # type: ignore[arg-type]
        if removed is not None:
            logger.debug("Removed tuning system %s", system_id)
        return removed

    def clear(self) -> None:
        """Remove every registered system."""
        self._systems.clear()
        logger.debug("Cleared tuning registry")

    # Lookup

    def get(self, system_id: SystemKey) -> TuningSystem | None:
        """Look up a system by identifier or plain string."""
        return self._systems.get(system_id)  # type: ignore[call-overload]

    def contains(self, system_id: SystemKey) -> bool:
        """True if the identifier is registered."""
        return system_id in self._systems

    def __contains__(self, system_id: object) -> bool:
        return system_id in self._systems

    def ids(self) -> list[TuningSystemId]:
        """Registered identifiers in sorted order."""
        return sorted(self._systems)

    def systems(self) -> list[TuningSystem]:
        """Registered systems, ordered by identifier."""
        return [self._systems[key] for key in self.ids()]

    def items(self) -> list[tuple[TuningSystemId, TuningSystem]]:
        """(id, system) pairs ordered by identifier."""
        return [(key, self._systems[key]) for key in self.ids()]

    def __iter__(self) -> Iterator[TuningSystemId]:
        return iter(self.ids())

    def __len__(self) -> int:
        return len(self._systems)

    def is_empty(self) -> bool:
        return not self._systems

    def __repr__(self) -> str:
        return f"TuningRegistry(ids={[str(key) for key in self.ids()]})"

    # Resolution

    def resolve_system(self, system_id: SystemKey) -> TuningSystem:
        """
        Return the registered system.

        Raises:
            UnknownSystemError: The identifier is not registered
        """
        system = self.get(system_id)
        if system is None:
            raise UnknownSystemError(system_id)
        return system

    def resolve_frequency(self, system_id: SystemKey, index: int) -> float:
        """Frequency for index in the given system."""
        return self.resolve_system(system_id).to_frequency(index)

    def resolve_name(self, system_id: SystemKey, index: int) -> str | None:
        """Symbolic name for index, or None when the system provides none."""
        return self.resolve_system(system_id).name_of(index)

    def to_frequency(self, system_id: SystemKey, index: int) -> float | None:
        """Like resolve_frequency, but None for unknown systems."""
        system = self.get(system_id)
        return None if system is None else system.to_frequency(index)

    def name_of(self, system_id: SystemKey, index: int) -> str | None:
        """Like resolve_name, but None for unknown systems."""
        system = self.get(system_id)
        return None if system is None else system.name_of(index)
