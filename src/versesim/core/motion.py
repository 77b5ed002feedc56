"""
Motion simulator: advances node positions one tick at a time.

Each tick has two passes:
1. Free motion with boundary reflection. A move that would leave the
   margin-to-margin box is rejected on that axis and the velocity component
   flips sign. x and y reflect independently.
2. Separation correction. Every node looks at the others (at their pass-1
   positions) and fixes the FIRST spacing violation it finds:
   - vertical gap too small → push vertically to exactly min_vertical_distance
   - otherwise → sit exactly min_distance away along the bearing, and drift
     away at separation_speed

Only one violation per node per tick is resolved, so tight clusters of three
or more nodes can stay in violation for a few ticks. That is accepted.

The simulator does not own a timer. Whoever drives it (an animation, a test,
a loop) calls tick() on its own cadence.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence

from versesim.core.node import Connection, Node, State

logger = logging.getLogger(__name__)


@dataclass
class MotionConfig:
    """Configuration for the per-tick motion rules."""

    width: float = 100.0
    canvas_height: float = 650.0
    margin: float = 5.0  # Reflection walls sit this far inside each edge

    # Tighter than the layout thresholds: nodes may drift closer while moving
    min_distance: float = 15.0
    min_vertical_distance: float = 20.0

    velocity_damping: float = 0.1  # vy after a vertical push = correction * damping
    separation_speed: float = 0.15  # Speed after a proximity correction
    tick_period_ms: int = 50

    def __post_init__(self):
        if self.width <= 2 * self.margin or self.canvas_height <= 2 * self.margin:
            raise ValueError(
                f"Canvas {self.width}x{self.canvas_height} leaves no room inside margin {self.margin}"
            )
        if self.tick_period_ms <= 0:
            raise ValueError(f"tick_period_ms must be > 0, got {self.tick_period_ms}")

    @property
    def x_bounds(self) -> tuple[float, float]:
        return self.margin, self.width - self.margin

    @property
    def y_bounds(self) -> tuple[float, float]:
        return self.margin, self.canvas_height - self.margin


@dataclass
class MotionSimulator:
    """
    Owns the node list and evolves it tick by tick.

    This is the single writer of node positions. Readers get a frozen State
    from current_state() (or as the return value of tick()).
    """

    nodes: list[Node]
    connections: Sequence[Connection] = ()
    config: MotionConfig = field(default_factory=MotionConfig)

    # Simulation state
    tick_count: int = field(default=0, init=False)

    def __post_init__(self):
        self.nodes = [replace(node) for node in self.nodes]
        self.connections = tuple(self.connections)

        ids = [node.id for node in self.nodes]
        if len(set(ids)) != len(ids):
            raise ValueError("Node identities must be unique")
        known = set(ids)
        for c in self.connections:
            if c.source not in known or c.target not in known:
                raise ValueError(f"Connection {c.source}-{c.target} references an unknown node")

    @classmethod
    def from_layout(cls, layout, config: MotionConfig | None = None) -> MotionSimulator:
        """
        Build a simulator over a Layout's nodes and connections.

        The layout canvas is configured separately from the motion walls, so
        nodes placed outside the walls are clamped inside first. Otherwise
        pass 1 would reject every move and they would stay out for good.
        """
        sim = cls(
            nodes=layout.nodes,
            connections=layout.connections,
            config=config if config is not None else MotionConfig(),
        )
        sim.clamp_into_bounds()
        return sim

    def clamp_into_bounds(self) -> int:
        """Clamp every node inside the walls; returns how many were moved."""
        n_moved = 0
        for node in self.nodes:
            x, y = self._clamp(node.x, node.y)
            if (x, y) != node.position:
                logger.debug("Node %d clamped from (%.1f, %.1f) into the walls", node.id, node.x, node.y)
                node.x, node.y = x, y
                n_moved += 1
        return n_moved

    def current_state(self) -> State:
        """Frozen snapshot of the current positions."""
        return State(
            nodes=tuple(node.view() for node in self.nodes),
            connections=self.connections,
            tick=self.tick_count,
        )

    def tick(self) -> State:
        """Advance one tick and return the new state."""
        if self.nodes:
            moved = [self._advance(node) for node in self.nodes]
            self.nodes = [self._separate(i, node, moved) for i, node in enumerate(moved)]
        self.tick_count += 1
        return self.current_state()

    def run(self, n_ticks: int) -> State:
        """Run n ticks back to back."""
        for _ in range(n_ticks):
            self.tick()
        logger.debug("Ran %d ticks (total %d)", n_ticks, self.tick_count)
        return self.current_state()

    def _advance(self, node: Node) -> Node:
        """Pass 1: free motion with per-axis wall reflection."""
        x_min, x_max = self.config.x_bounds
        y_min, y_max = self.config.y_bounds

        x, vx = node.x + node.vx, node.vx
        if x < x_min or x > x_max:
            x, vx = node.x, -vx

        y, vy = node.y + node.vy, node.vy
        if y < y_min or y > y_max:
            y, vy = node.y, -vy

        return Node(id=node.id, x=x, y=y, vx=vx, vy=vy)

    def _separate(self, index: int, node: Node, moved: list[Node]) -> Node:
        """Pass 2: resolve the first spacing violation against the pass-1 snapshot."""
        cfg = self.config
        for j, other in enumerate(moved):
            if j == index:
                continue

            dist = math.hypot(node.x - other.x, node.y - other.y)
            vertical = abs(node.y - other.y)
            if dist == 0:
                # Coincident: no bearing to push along
                continue
            if dist >= cfg.min_distance and vertical >= cfg.min_vertical_distance:
                continue

            x, y, vx, vy = node.x, node.y, node.vx, node.vy
            if vertical < cfg.min_vertical_distance:
                if node.y < other.y:
                    y = other.y - cfg.min_vertical_distance
                else:
                    y = other.y + cfg.min_vertical_distance
                vy = (y - node.y) * cfg.velocity_damping
            else:
                angle = math.atan2(node.y - other.y, node.x - other.x)
                x = other.x + math.cos(angle) * cfg.min_distance
                y = other.y + math.sin(angle) * cfg.min_distance
                vx = math.cos(angle) * cfg.separation_speed
                vy = math.sin(angle) * cfg.separation_speed

            x, y = self._clamp(x, y)
            return Node(id=node.id, x=x, y=y, vx=vx, vy=vy)

        return node

    def _clamp(self, x: float, y: float) -> tuple[float, float]:
        x_min, x_max = self.config.x_bounds
        y_min, y_max = self.config.y_bounds
        return max(x_min, min(x_max, x)), max(y_min, min(y_max, y))


def create_simulator(
    nodes: Iterable[Node],
    connections: Iterable[Connection] = (),
    **config_kwargs,
) -> MotionSimulator:
    """
    Convenience factory for a simulator.

    Args:
        nodes: Initial nodes (copied; the originals are left untouched)
        connections: Connections to carry along in every State
        **config_kwargs: Overrides for MotionConfig fields
    """
    return MotionSimulator(
        nodes=list(nodes),
        connections=tuple(connections),
        config=MotionConfig(**config_kwargs),
    )
