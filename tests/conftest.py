"""
Pytest configuration and shared fixtures.
"""

import random
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so walks are reproducible."""
    return random.Random(1234)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in preset library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_melody" / "presets" / "library"
