"""Shared fixtures for the maze generator tests."""

import pytest

from mazegen.utils.rng import SeededRNG


@pytest.fixture
def rng() -> SeededRNG:
    """Deterministic random source."""
    return SeededRNG(1234)
