"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def default_layout_config():
    """The layout configuration of the live page (15 nodes on 100x600)."""
    from versesim.core import LayoutConfig
    return LayoutConfig()


@pytest.fixture
def small_layout_config():
    """A small, easy-to-satisfy layout: 5 nodes on a 100x300 canvas."""
    from versesim.core import LayoutConfig
    return LayoutConfig(
        node_count=5,
        height=300.0,
        top_section_height=150.0,
        min_nodes_in_top_section=2,
        min_distance=20.0,
    )


@pytest.fixture
def motion_config():
    """Default motion rules (100x650 canvas, walls at 5)."""
    from versesim.core import MotionConfig
    return MotionConfig()


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
