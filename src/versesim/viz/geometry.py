"""
Geometry of what gets drawn for each node.

A node is a small horizontal rectangle framed by two hand-drawn-looking
borders. The border paddings are "random" but must not flicker between
frames, so they come from a deterministic sine hash keyed by the node
identity and a per-side salt rather than from a random generator.

Also: responsive node sizes and click hit-testing.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from versesim.core.node import NodeView, State


# Rectangle proportions relative to the node radius
RECT_WIDTH_FACTOR = 3.0
RECT_HEIGHT_FACTOR = 1.2

# Salts for the border paddings: (top, right, bottom, left)
INNER_SALTS = (1, 2, 3, 4)
OUTER_SALTS = (5, 6, 7, 8)
INNER_PADDING_RANGE = (3.0, 5.0)
OUTER_PADDING_RANGE = (3.0, 9.0)


@dataclass(frozen=True)
class NodeSizes:
    """Drawn size and clickable size of a node, in canvas units."""

    node_radius: float = 6.0
    hitbox_radius: float = 8.0


# (max viewport width in px, sizes); first match wins
BREAKPOINTS = (
    (480, NodeSizes(node_radius=4.5, hitbox_radius=6.5)),
    (768, NodeSizes(node_radius=5.0, hitbox_radius=7.0)),
)
DEFAULT_SIZES = NodeSizes()


def sizes_for_width(viewport_width: float) -> NodeSizes:
    """Pick node sizes for a viewport width (pixels); smaller screens get smaller nodes."""
    for max_width, sizes in BREAKPOINTS:
        if viewport_width <= max_width:
            return sizes
    return DEFAULT_SIZES


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle; y grows downward like the canvas."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom


@dataclass(frozen=True)
class NodeFrame:
    """Everything drawn for one node: the body plus inner and outer borders."""

    body: Box
    inner: Box
    outer: Box


def seeded_random(seed: float, low: float, high: float) -> float:
    """
    Deterministic pseudo-random value in [low, high) from a seed.

    frac(sin(seed) * 10000), scaled. Same seed, same value, every frame.
    """
    v = math.sin(seed) * 10000
    return (v - math.floor(v)) * (high - low) + low


def jitter(node_id: int, salt: int, low: float, high: float) -> float:
    """Per-node deterministic value for a given purpose salt."""
    return seeded_random(node_id * salt, low, high)


def _paddings(node_id: int, salts: tuple[int, ...], bounds: tuple[float, float]) -> list[float]:
    return [jitter(node_id, salt, *bounds) for salt in salts]


def body_box(x: float, y: float, radius: float) -> Box:
    """Rectangle of size (3r, 1.2r) centred on (x, y)."""
    width = radius * RECT_WIDTH_FACTOR
    height = radius * RECT_HEIGHT_FACTOR
    return Box(x - width / 2, y - height / 2, width, height)


def node_frame(node: "NodeView", sizes: NodeSizes = DEFAULT_SIZES) -> NodeFrame:
    """
    Compute the node body and its two borders.

    The inner border's top padding is stretched to reach y = 0 when the
    node sits close to the top edge; both borders are clamped at y = 0.
    """
    body = body_box(node.x, node.y, sizes.node_radius)

    top, right, bottom, left = _paddings(node.id, INNER_SALTS, INNER_PADDING_RANGE)
    if body.y - top <= 0:
        top = body.y
    inner = Box(
        x=body.x - left,
        y=max(0.0, body.y - top),
        width=body.width + left + right,
        height=body.height + top + bottom,
    )

    top2, right2, bottom2, left2 = _paddings(node.id, OUTER_SALTS, OUTER_PADDING_RANGE)
    outer = Box(
        x=inner.x - left2,
        y=max(0.0, inner.y - top2),
        width=inner.width + left2 + right2,
        height=inner.height + top2 + bottom2,
    )
    return NodeFrame(body=body, inner=inner, outer=outer)


def hitbox(node: "NodeView", sizes: NodeSizes = DEFAULT_SIZES) -> Box:
    """Clickable region: the body rectangle at hitbox radius."""
    return body_box(node.x, node.y, sizes.hitbox_radius)


def node_at(state: "State", x: float, y: float, sizes: NodeSizes = DEFAULT_SIZES) -> "NodeView | None":
    """
    Node whose hit region contains (x, y), or None.

    Later nodes are drawn on top, so they win overlaps.
    """
    for node in reversed(state.nodes):
        if hitbox(node, sizes).contains(x, y):
            return node
    return None
