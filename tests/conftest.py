"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_music_theory.core import (
    CentsScale,
    JustIntonation,
    TuningRegistry,
    TwelveTET,
    TwentyFourTET,
)


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry() -> TuningRegistry:
    """Registry with 12-TET, 24-TET, just intonation and a cents table."""
    return (
        TuningRegistry()
        .with_system("12tet", TwelveTET.a4_440())
        .with_system("24tet", TwentyFourTET.a4_440())
        .with_system("ji", JustIntonation.a4_440_major())
        .with_system("cents", CentsScale.a4_440_quarter_tone())
    )
