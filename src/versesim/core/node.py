"""
Node and connection primitives shared by the layout and motion layers.

A Node is the only mutable thing in the system: the layout generator creates
it, the motion simulator moves it. Everything the renderer sees is a frozen
snapshot (NodeView / State) so it can never write positions back.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np


@dataclass
class Node:
    """A drifting node on the canvas."""

    id: int  # 1..N, unique
    x: float
    y: float
    vx: float = 0.0  # Per-tick displacement
    vy: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    @property
    def velocity(self) -> tuple[float, float]:
        return self.vx, self.vy

    @property
    def speed(self) -> float:
        return float(np.hypot(self.vx, self.vy))

    def distance_to(self, other: Node) -> float:
        """Euclidean distance to another node."""
        return distance(self.x, self.y, other.x, other.y)

    def view(self) -> NodeView:
        return NodeView(id=self.id, x=self.x, y=self.y)


@dataclass(frozen=True)
class Connection:
    """An undirected, colored edge between two node identities."""

    source: int
    target: int
    color: str

    def __post_init__(self):
        if self.source == self.target:
            raise ValueError(f"Connection cannot join node {self.source} to itself")

    @property
    def key(self) -> tuple[int, int]:
        """Canonical unordered pair (smaller identity first)."""
        return connection_key(self.source, self.target)

    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "color": self.color}


@dataclass(frozen=True)
class NodeView:
    """Read-only position of a node, as handed to the renderer."""

    id: int
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class State:
    """Snapshot of the visualization between two ticks."""

    nodes: tuple[NodeView, ...] = ()
    connections: tuple[Connection, ...] = ()
    tick: int = 0

    def node(self, node_id: int) -> NodeView | None:
        """Look up a node by identity (None if absent)."""
        for view in self.nodes:
            if view.id == node_id:
                return view
        return None

    def segments(self) -> list[tuple[NodeView, NodeView, str]]:
        """Resolve every connection into its two endpoint views and color."""
        by_id = {view.id: view for view in self.nodes}
        return [
            (by_id[c.source], by_id[c.target], c.color)
            for c in self.connections
            if c.source in by_id and c.target in by_id
        ]

    def to_dict(self) -> dict:
        return {
            "nodes": [view.to_dict() for view in self.nodes],
            "connections": [c.to_dict() for c in self.connections],
        }


@dataclass
class Layout:
    """Output of the layout generator: initial nodes plus their connections."""

    nodes: list[Node] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    def degree(self, node_id: int) -> int:
        """Number of connections touching a node."""
        return sum(1 for c in self.connections if node_id in (c.source, c.target))


def connection_key(a: int, b: int) -> tuple[int, int]:
    """Canonical key for the unordered pair {a, b}."""
    return (a, b) if a < b else (b, a)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return float(np.hypot(x1 - x2, y1 - y2))


def positions_array(nodes: Sequence[Node]) -> np.ndarray:
    """Stack node positions into an (N, 2) array."""
    if not nodes:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([[n.x, n.y] for n in nodes], dtype=np.float64)
