"""
Core simulation primitives.

This layer knows NOTHING about rendering, hit regions, or editorial content.
It only knows:
- Nodes with positions and per-tick velocities
- Connections between node identities
- How to place and connect nodes once (LayoutGenerator)
- How to move them tick by tick (MotionSimulator)
"""

from versesim.core.node import Node, Connection, NodeView, State, Layout
from versesim.core.layout import LayoutConfig, LayoutGenerator, generate_layout, DEFAULT_PALETTE
from versesim.core.motion import MotionConfig, MotionSimulator, create_simulator

__all__ = [
    "Node",
    "Connection",
    "NodeView",
    "State",
    "Layout",
    "LayoutConfig",
    "LayoutGenerator",
    "generate_layout",
    "DEFAULT_PALETTE",
    "MotionConfig",
    "MotionSimulator",
    "create_simulator",
]
