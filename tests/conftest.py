"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydistributions.signrank import SignRankTable


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def table():
    """A private signed-rank table, independent of the thread default."""
    return SignRankTable()
