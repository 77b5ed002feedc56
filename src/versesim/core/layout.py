"""
Layout generator: initial placement of nodes and their connectivity graph.

Placement is rejection sampling with two safety nets:
- a bounded number of random draws per node, then a deterministic grid cell
  (so the loop always terminates, even in a hopelessly dense field)
- isolation correction, which pulls a node that landed too far from
  everything back to exactly max_distance from its nearest neighbor

The first few nodes are confined to a "top section" of the canvas so there
is always something visible without scrolling.

Connectivity links every node to its nearest neighbors, deduplicated on the
unordered pair, with a random color per edge.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field

import numpy as np
from scipy.spatial.distance import cdist

from versesim.core.node import Connection, Layout, Node, connection_key, positions_array

logger = logging.getLogger(__name__)


DEFAULT_PALETTE = (
    "#FF1493", "#00FFFF", "#FF00FF", "#FFFF00", "#00FF00",
    "#FF4500", "#FF69B4", "#00CED1", "#FFD700", "#32CD32",
    "#FF6347", "#9370DB", "#20B2AA", "#FFA500", "#FF1493",
    "#00FA9A", "#1E90FF", "#FF69B4", "#BA55D3", "#48D1CC",
)


@dataclass
class LayoutConfig:
    """Configuration for the initial layout."""

    node_count: int = 15
    width: float = 100.0
    height: float = 600.0
    margin: float = 8.0  # Keep-out band along every edge

    # Spacing targets for rejection sampling
    min_distance: float = 50.0
    min_vertical_distance: float = 20.0

    # Isolation correction: nearest neighbor never farther than this
    max_distance: float = 55.0

    # The first min_nodes_in_top_section nodes land above top_section_height
    top_section_height: float = 300.0
    min_nodes_in_top_section: int = 8

    max_attempts: int = 1000  # Random draws per node before grid fallback
    fallback_jitter: float = 0.3  # Fraction of a grid cell
    connections_per_node: int = 10
    initial_speed: float = 0.15  # Velocity components in ±initial_speed/2

    palette: tuple[str, ...] = field(default=DEFAULT_PALETTE)

    def __post_init__(self):
        if self.node_count < 0:
            raise ValueError(f"node_count must be >= 0, got {self.node_count}")
        if self.width <= 2 * self.margin or self.height <= 2 * self.margin:
            raise ValueError(
                f"Canvas {self.width}x{self.height} leaves no room inside margin {self.margin}"
            )
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be > 0, got {self.max_attempts}")
        for name in ("min_distance", "min_vertical_distance", "max_distance"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.connections_per_node < 1:
            raise ValueError("connections_per_node must be >= 1")
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        self.palette = tuple(self.palette)


class LayoutGenerator:
    """
    Places nodes and connects them.

    All randomness comes from the injected numpy Generator, so a seeded
    generator reproduces the same layout exactly.
    """

    def __init__(self, config: LayoutConfig | None = None, rng: np.random.Generator | None = None):
        self.config = config if config is not None else LayoutConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

    def in_top_section(self, node_id: int) -> bool:
        return node_id <= self.config.min_nodes_in_top_section

    def allowed_region(self, node_id: int) -> tuple[float, float, float, float]:
        """Return (x_min, x_max, y_min, y_max) for a node identity."""
        cfg = self.config
        if self.in_top_section(node_id):
            y_max = min(cfg.top_section_height - cfg.margin, cfg.height - cfg.margin)
        else:
            y_max = cfg.height - cfg.margin
        return cfg.margin, cfg.width - cfg.margin, cfg.margin, y_max

    def _uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def _clamp(self, node_id: int, x: float, y: float) -> tuple[float, float]:
        x_min, x_max, y_min, y_max = self.allowed_region(node_id)
        return max(x_min, min(x_max, x)), max(y_min, min(y_max, y))

    def is_well_spaced(self, x: float, y: float, placed: list[Node]) -> bool:
        """True if (x, y) respects both spacing thresholds against every placed node."""
        cfg = self.config
        for other in placed:
            if math.hypot(x - other.x, y - other.y) < cfg.min_distance:
                return False
            if abs(y - other.y) < cfg.min_vertical_distance:
                return False
        return True

    def sample_position(self, node_id: int, placed: list[Node]) -> tuple[float, float] | None:
        """
        Rejection-sample a position for a node.

        Returns None when the retry budget runs out without an acceptable draw.
        """
        x_min, x_max, y_min, y_max = self.allowed_region(node_id)
        for _ in range(self.config.max_attempts):
            x = self._uniform(x_min, x_max)
            y = self._uniform(y_min, y_max)
            if self.is_well_spaced(x, y, placed):
                return x, y
        return None

    def grid_shape(self) -> tuple[int, int]:
        """(cols, rows) of the fallback grid, following the canvas aspect ratio."""
        cfg = self.config
        n = max(cfg.node_count, 1)
        cols = max(1, math.ceil(math.sqrt(n * (cfg.width / cfg.height))))
        rows = math.ceil(n / cols)
        return cols, rows

    def grid_position(self, node_id: int) -> tuple[float, float]:
        """
        Deterministic grid cell for a node, plus a little jitter.

        Top-section nodes get their own, shorter grid so they stay above the
        fold; the jitter is bounded by a fraction of the cell size and the
        result is clamped into the node's allowed region.
        """
        cfg = self.config
        cols, rows = self.grid_shape()
        index = node_id - 1
        cell_width = cfg.width / cols
        grid_x = (index % cols) * cell_width + cell_width / 2
        row = index // cols

        if self.in_top_section(node_id):
            top_rows = math.ceil(cfg.min_nodes_in_top_section / cols)
            cell_height = cfg.top_section_height / top_rows
            grid_y = cfg.margin + row * cell_height + cell_height / 2
        else:
            cell_height = cfg.height / rows
            grid_y = row * cell_height + cell_height / 2

        jx = cell_width * cfg.fallback_jitter
        jy = cell_height * cfg.fallback_jitter
        x = grid_x + self._uniform(-jx, jx)
        y = grid_y + self._uniform(-jy, jy)
        return self._clamp(node_id, x, y)

    def correct_isolation(
        self, node_id: int, x: float, y: float, placed: list[Node]
    ) -> tuple[float, float]:
        """
        Pull an isolated position back toward its nearest placed neighbor.

        If the nearest neighbor is farther than max_distance, the position is
        moved along the bearing from that neighbor to sit exactly max_distance
        away, then clamped into the allowed region.
        """
        if not placed:
            return x, y

        nearest = min(placed, key=lambda other: math.hypot(x - other.x, y - other.y))
        gap = math.hypot(x - nearest.x, y - nearest.y)
        if gap <= self.config.max_distance:
            return x, y

        angle = math.atan2(y - nearest.y, x - nearest.x)
        x = nearest.x + math.cos(angle) * self.config.max_distance
        y = nearest.y + math.sin(angle) * self.config.max_distance
        logger.debug(
            "Node %d was %.1f from node %d, pulled in to %.1f",
            node_id, gap, nearest.id, self.config.max_distance,
        )
        return self._clamp(node_id, x, y)

    def initial_velocity(self) -> tuple[float, float]:
        speed = self.config.initial_speed
        return (
            (float(self.rng.random()) - 0.5) * speed,
            (float(self.rng.random()) - 0.5) * speed,
        )

    def place_nodes(self) -> list[Node]:
        """
        Place node_count nodes in identity order.

        Random draw first, grid cell if that fails, then isolation correction
        regardless of which path produced the position.
        """
        placed: list[Node] = []
        n_fallback = 0

        for node_id in range(1, self.config.node_count + 1):
            position = self.sample_position(node_id, placed)
            if position is None:
                position = self.grid_position(node_id)
                n_fallback += 1
                logger.debug(
                    "Node %d: no valid draw in %d attempts, using grid cell",
                    node_id, self.config.max_attempts,
                )

            x, y = self.correct_isolation(node_id, *position, placed)
            vx, vy = self.initial_velocity()
            placed.append(Node(id=node_id, x=x, y=y, vx=vx, vy=vy))

        if n_fallback:
            logger.debug("%d of %d nodes placed on the fallback grid", n_fallback, len(placed))
        return placed

    def build_connections(self, nodes: list[Node]) -> list[Connection]:
        """
        Connect every node to its nearest neighbors.

        Each node proposes up to connections_per_node nearest others; a pair
        proposed from both ends is kept once, under its canonical key.
        """
        if len(nodes) < 2:
            return []

        positions = positions_array(nodes)
        dist = cdist(positions, positions)
        k = min(self.config.connections_per_node, len(nodes) - 1)
        palette = self.config.palette

        seen: set[tuple[int, int]] = set()
        connections: list[Connection] = []
        for i, node in enumerate(nodes):
            order = [j for j in np.argsort(dist[i], kind="stable") if j != i]
            for j in order[:k]:
                target = nodes[j]
                key = connection_key(node.id, target.id)
                if key in seen:
                    continue
                seen.add(key)
                color = palette[int(self.rng.integers(len(palette)))]
                connections.append(Connection(source=node.id, target=target.id, color=color))
        return connections

    def generate(self) -> Layout:
        """Place the nodes, then connect them."""
        nodes = self.place_nodes()
        connections = self.build_connections(nodes)
        logger.info("Generated layout: %d nodes, %d connections", len(nodes), len(connections))
        return Layout(nodes=nodes, connections=connections)


def generate_layout(config: LayoutConfig | None = None, seed: int | None = None) -> Layout:
    """
    Convenience factory for a complete layout.

    Args:
        config: Layout configuration (defaults if None)
        seed: Seed for the random generator (unseeded if None)

    Returns:
        Layout with nodes and connections
    """
    rng = np.random.default_rng(seed)
    return LayoutGenerator(config, rng).generate()
