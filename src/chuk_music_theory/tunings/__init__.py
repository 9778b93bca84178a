"""
Tuning library - YAML definitions of tuning systems.

The bundled library ships 12tet, 24tet, 19tet, ji-major and quarter-tone.
Projects can add or override tunings in their own directory.
"""

from pathlib import Path

from chuk_music_theory.core.registry import TuningRegistry
from chuk_music_theory.tunings.loader import TuningLoader

__all__ = [
    "TuningLoader",
    "default_registry",
]


def default_registry(project_path: Path | None = None) -> TuningRegistry:
    """Registry populated with every available tuning."""
    registry = TuningRegistry()
    TuningLoader(project_path=project_path).populate(registry)
    return registry
