"""
Visualization utilities.

- Node geometry (body, borders, hit regions, responsive sizes)
- Static network plots
- Animated, clickable view with the modal card
"""

from versesim.viz.geometry import (
    NodeSizes,
    Box,
    NodeFrame,
    sizes_for_width,
    seeded_random,
    node_frame,
    hitbox,
    node_at,
)

from versesim.viz.network import (
    NetworkArtists,
    plot_network,
    save_figure,
)

from versesim.viz.interactive import (
    ModalState,
    NetworkView,
    show,
)

__all__ = [
    "NodeSizes",
    "Box",
    "NodeFrame",
    "sizes_for_width",
    "seeded_random",
    "node_frame",
    "hitbox",
    "node_at",
    "NetworkArtists",
    "plot_network",
    "save_figure",
    "ModalState",
    "NetworkView",
    "show",
]
