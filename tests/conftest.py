"""Pytest configuration for descriptives tests.

Provides seeded random generators so every test draws from its own,
reproducible stream instead of numpy's global state.
"""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Fresh generator with a fixed seed."""
    return np.random.default_rng(20240611)


@pytest.fixture
def normal_sample(rng) -> np.ndarray:
    """Thirty draws from N(40, 4), like one group of a grouped dataset."""
    return rng.normal(40.0, 4.0, size=30)
