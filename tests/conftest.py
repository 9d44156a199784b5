"""Test configuration for schwarzschild."""

from math import pi

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so failures are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def schwarzschild_samples(rng):
    """(n, 4) array of (r, phi, theta, t) with r >= 0, phi in [0, 2pi), theta in [0, pi]."""
    n = 200
    return np.column_stack([
        rng.uniform(0.0, 50.0, n),
        rng.uniform(0.0, 2 * pi, n),
        rng.uniform(0.0, pi, n),
        rng.uniform(-100.0, 100.0, n),
    ])


@pytest.fixture
def torch():
    pytest.importorskip('torch')
    import torch
    return torch
