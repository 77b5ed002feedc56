"""Unit tests for Node, Connection, State and Layout."""

import dataclasses

import pytest

from versesim.core.node import (
    Connection,
    Layout,
    Node,
    NodeView,
    State,
    connection_key,
    positions_array,
)


class TestNode:
    """Tests for Node."""

    def test_defaults(self):
        node = Node(id=3, x=1.0, y=2.0)
        assert node.velocity == (0.0, 0.0)
        assert node.position == (1.0, 2.0)

    def test_distance(self):
        a = Node(id=1, x=0.0, y=0.0)
        b = Node(id=2, x=3.0, y=4.0)
        assert a.distance_to(b) == 5.0

    def test_speed(self):
        assert Node(id=1, x=0.0, y=0.0, vx=0.3, vy=0.4).speed == pytest.approx(0.5)

    def test_view(self):
        view = Node(id=7, x=1.5, y=2.5, vx=1.0).view()
        assert view == NodeView(id=7, x=1.5, y=2.5)


class TestConnection:
    """Tests for Connection."""

    def test_key_is_canonical(self):
        assert Connection(source=5, target=2, color="#FFFFFF").key == (2, 5)
        assert Connection(source=2, target=5, color="#FFFFFF").key == (2, 5)

    def test_self_loop_rejected(self):
        with pytest.raises(ValueError):
            Connection(source=4, target=4, color="#FFFFFF")

    def test_immutable(self):
        c = Connection(source=1, target=2, color="#FFFFFF")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.color = "#000000"

    def test_connection_key(self):
        assert connection_key(9, 1) == (1, 9)


class TestState:
    """Tests for State snapshots."""

    def test_lookup(self):
        state = State(nodes=(NodeView(1, 0.0, 0.0), NodeView(2, 5.0, 5.0)))
        assert state.node(2) == NodeView(2, 5.0, 5.0)
        assert state.node(3) is None

    def test_segments(self):
        state = State(
            nodes=(NodeView(1, 0.0, 0.0), NodeView(2, 5.0, 5.0)),
            connections=(Connection(1, 2, "#FF00FF"),),
        )
        ((a, b, color),) = state.segments()
        assert (a.id, b.id, color) == (1, 2, "#FF00FF")


class TestLayout:
    """Tests for Layout."""

    def test_degree(self):
        layout = Layout(
            nodes=[Node(1, 0.0, 0.0), Node(2, 1.0, 1.0), Node(3, 2.0, 2.0)],
            connections=[Connection(1, 2, "#FFFFFF"), Connection(3, 1, "#FFFFFF")],
        )
        assert layout.degree(1) == 2
        assert layout.degree(2) == 1


def test_positions_array():
    arr = positions_array([Node(1, 1.0, 2.0), Node(2, 3.0, 4.0)])
    assert arr.shape == (2, 2)
    assert arr[1, 0] == 3.0


def test_positions_array_empty():
    assert positions_array([]).shape == (0, 2)
