"""Shared fixtures for colour_ops tests."""

import numpy as np
import pytest


@pytest.fixture
def rgba_image():
    """Random 23x17 RGBA image with varied alpha."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(23, 17, 4), dtype=np.uint8)


@pytest.fixture
def rgb_grid():
    """Coarse grid over the RGB cube, shape (N, 3), includes greys and primaries."""
    levels = np.array([0, 1, 17, 64, 127, 128, 200, 254, 255], dtype=np.uint8)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    return np.stack([r.ravel(), g.ravel(), b.ravel()], axis=-1)
