"""Pytest configuration and shared fixtures for graphclassics tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph tests
- The base seed, for tests that derive one generator per trial
- Restoration of the global debug flag around every test
"""

import os

import numpy as np
import pytest

from graphclassics.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng_seed() -> int:
    """Base seed from the TEST_RNG_SEED environment variable (default: 0)."""
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng(rng_seed) -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    This keeps random graphs reproducible while allowing override for debugging.
    Parametrized trials should seed their own generator with
    ``np.random.default_rng([rng_seed, trial])`` so each trial sees a
    different graph.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(rng_seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture restoring the debug flag a test may have toggled."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
