"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_scales.library import ScaleFinderSession, ScaleStore


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store() -> ScaleStore:
    """An empty scale store."""
    return ScaleStore()


@pytest.fixture
def session() -> ScaleFinderSession:
    """A fresh scale finder session."""
    return ScaleFinderSession()
