"""
Pydantic models for the music theory engine.

This module provides:
- TuningDefinition: Declarative tuning system (equal, just, cents)
- TuningMetadata: Lightweight listing entry
"""

from chuk_music_theory.models.tuning import TuningDefinition, TuningKind, TuningMetadata

__all__ = [
    "TuningDefinition",
    "TuningKind",
    "TuningMetadata",
]
