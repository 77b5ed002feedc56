"""
Static drawing of the network.

The canvas follows SVG orientation: x in [0, width], y grows downward from 0
to canvas_height. Connections are colored lines, nodes are white rectangles
framed by two thin white borders, on a black background.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from versesim.viz.geometry import DEFAULT_SIZES, Box, NodeSizes, node_frame

if TYPE_CHECKING:
    from versesim.core.node import State


TITLE = "verses on verses"
BACKGROUND = "black"
NODE_COLOR = "#ffffff"
BORDER_WIDTH = 0.6
CONNECTION_WIDTH = 0.8


def _set_box(patch: Rectangle, box: Box):
    patch.set_xy((box.x, box.y))
    patch.set_width(box.width)
    patch.set_height(box.height)


class NetworkArtists:
    """
    The matplotlib artists for one State, updatable in place.

    Keeps one patch triple (body, inner, outer) per node, in state order, and
    a single LineCollection for every connection.
    """

    def __init__(self, ax: Axes, state: "State", sizes: NodeSizes = DEFAULT_SIZES):
        self.ax = ax
        self.sizes = sizes

        self.lines = LineCollection(
            self._segments(state),
            colors=[color for _, _, color in state.segments()] or None,
            linewidths=CONNECTION_WIDTH,
            zorder=1,
        )
        ax.add_collection(self.lines)

        self.patches: dict[int, tuple[Rectangle, Rectangle, Rectangle]] = {}
        for node in state.nodes:
            frame = node_frame(node, sizes)
            body = Rectangle((0, 0), 0, 0, facecolor=NODE_COLOR, edgecolor="none", zorder=3)
            inner = Rectangle((0, 0), 0, 0, fill=False, edgecolor=NODE_COLOR,
                              linewidth=BORDER_WIDTH, zorder=2)
            outer = Rectangle((0, 0), 0, 0, fill=False, edgecolor=NODE_COLOR,
                              linewidth=BORDER_WIDTH, zorder=2)
            for patch, box in zip((body, inner, outer), (frame.body, frame.inner, frame.outer)):
                _set_box(patch, box)
                ax.add_patch(patch)
            self.patches[node.id] = (body, inner, outer)

    @staticmethod
    def _segments(state: "State") -> list[list[tuple[float, float]]]:
        return [[(a.x, a.y), (b.x, b.y)] for a, b, _ in state.segments()]

    def update(self, state: "State"):
        """Move every artist to the positions in state."""
        self.lines.set_segments(self._segments(state))
        for node in state.nodes:
            patches = self.patches.get(node.id)
            if patches is None:
                continue
            frame = node_frame(node, self.sizes)
            for patch, box in zip(patches, (frame.body, frame.inner, frame.outer)):
                _set_box(patch, box)

    def all(self) -> list:
        """Flat list of artists (for animation blitting)."""
        out = [self.lines]
        for patches in self.patches.values():
            out.extend(patches)
        return out


def setup_canvas(ax: Axes, width: float = 100.0, canvas_height: float = 650.0, title: str = TITLE):
    """Black, equal-aspect canvas with y pointing down."""
    ax.set_facecolor(BACKGROUND)
    ax.figure.set_facecolor(BACKGROUND)
    ax.set_xlim(0, width)
    ax.set_ylim(canvas_height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)
    if title:
        ax.set_title(title, color=NODE_COLOR)


def plot_network(
    state: "State",
    ax: Axes | None = None,
    sizes: NodeSizes = DEFAULT_SIZES,
    width: float = 100.0,
    canvas_height: float = 650.0,
    title: str = TITLE,
    figsize: tuple[float, float] = (4, 12),
) -> tuple[Figure, Axes]:
    """
    Draw a snapshot of the network.

    Args:
        state: Snapshot to draw
        ax: Existing axes (creates new figure if None)
        sizes: Node and hitbox radii
        width, canvas_height: Canvas extent in canvas units
        title: Axes title
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    setup_canvas(ax, width=width, canvas_height=canvas_height, title=title)
    NetworkArtists(ax, state, sizes)
    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150):
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", facecolor=fig.get_facecolor())
