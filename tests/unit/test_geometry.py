"""Unit tests for node geometry, sizes and hit-testing."""

import math

import pytest

from versesim.core.node import NodeView, State
from versesim.viz.geometry import (
    Box,
    NodeSizes,
    hitbox,
    jitter,
    node_at,
    node_frame,
    seeded_random,
    sizes_for_width,
)


class TestSizes:
    """Tests for responsive node sizes."""

    @pytest.mark.parametrize("width,expected", [
        (320, NodeSizes(4.5, 6.5)),
        (480, NodeSizes(4.5, 6.5)),
        (600, NodeSizes(5.0, 7.0)),
        (768, NodeSizes(5.0, 7.0)),
        (1280, NodeSizes(6.0, 8.0)),
    ])
    def test_breakpoints(self, width, expected):
        assert sizes_for_width(width) == expected


class TestSeededRandom:
    """Tests for the sine-hash pseudo-random function."""

    def test_deterministic(self):
        assert seeded_random(7, 3, 5) == seeded_random(7, 3, 5)

    def test_zero_seed_gives_low(self):
        assert seeded_random(0, 3, 5) == 3.0

    def test_matches_formula(self):
        v = math.sin(4) * 10000
        assert seeded_random(4, 0, 1) == pytest.approx(v - math.floor(v))

    @pytest.mark.parametrize("seed", range(1, 50))
    def test_in_range(self, seed):
        assert 3.0 <= seeded_random(seed, 3, 9) < 9.0

    def test_salts_differ(self):
        assert jitter(5, 1, 3, 5) != jitter(5, 2, 3, 5)


class TestBox:
    """Tests for Box."""

    def test_contains(self):
        box = Box(0.0, 0.0, 10.0, 5.0)
        assert box.contains(5.0, 2.5)
        assert box.contains(10.0, 5.0)
        assert not box.contains(10.1, 2.0)
        assert not box.contains(5.0, -0.1)


class TestNodeFrame:
    """Tests for node body and borders."""

    def test_body_size(self):
        frame = node_frame(NodeView(id=1, x=50.0, y=300.0), NodeSizes(node_radius=6.0))
        assert frame.body.width == pytest.approx(18.0)
        assert frame.body.height == pytest.approx(7.2)
        assert frame.body.x == pytest.approx(41.0)
        assert frame.body.y == pytest.approx(296.4)

    @pytest.mark.parametrize("node_id", range(1, 16))
    def test_borders_nest(self, node_id):
        frame = node_frame(NodeView(id=node_id, x=50.0, y=300.0))
        body, inner, outer = frame.body, frame.inner, frame.outer

        assert outer.x < inner.x < body.x
        assert outer.y < inner.y < body.y
        assert body.right < inner.right < outer.right
        assert body.bottom < inner.bottom < outer.bottom

    def test_padding_ranges(self):
        frame = node_frame(NodeView(id=4, x=50.0, y=300.0))
        assert 3.0 <= frame.body.x - frame.inner.x < 5.0
        assert 3.0 <= frame.inner.x - frame.outer.x < 9.0

    def test_same_node_same_frame(self):
        a = node_frame(NodeView(id=9, x=50.0, y=300.0))
        b = node_frame(NodeView(id=9, x=50.0, y=300.0))
        assert a == b

    def test_near_top_reaches_zero(self):
        frame = node_frame(NodeView(id=2, x=50.0, y=4.0))
        assert frame.inner.y == 0.0
        assert frame.outer.y == 0.0
        # Bottom edges are unaffected by the stretch
        assert frame.inner.bottom > frame.body.bottom


class TestHitTesting:
    """Tests for hitbox and node_at."""

    def test_hitbox_size(self):
        box = hitbox(NodeView(id=1, x=50.0, y=100.0), NodeSizes(6.0, 8.0))
        assert box.width == pytest.approx(24.0)
        assert box.height == pytest.approx(9.6)

    def test_hit_and_miss(self):
        state = State(nodes=(NodeView(1, 50.0, 100.0), NodeView(2, 20.0, 300.0)))

        assert node_at(state, 50.0, 100.0).id == 1
        assert node_at(state, 60.0, 103.0).id == 1  # inside the wide hitbox
        assert node_at(state, 20.0, 300.0).id == 2
        assert node_at(state, 50.0, 200.0) is None

    def test_topmost_wins(self):
        state = State(nodes=(NodeView(1, 50.0, 100.0), NodeView(2, 52.0, 101.0)))
        assert node_at(state, 51.0, 100.5).id == 2

    def test_empty_state(self):
        assert node_at(State(), 50.0, 50.0) is None
