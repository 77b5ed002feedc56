#!/usr/bin/env python3
"""
Demo: verses on verses

Generates the drifting word network, lets it move for a few seconds'
worth of ticks, saves a snapshot, then opens the interactive window.
Click a node to read its word; click outside the card to close it.

Output: output/demo_verses/network.png
"""

import logging
from pathlib import Path

import numpy as np

from versesim.core import LayoutConfig, LayoutGenerator, MotionConfig, MotionSimulator
from versesim.viz import plot_network, save_figure, show


def main(seed: int | None = None, warmup_ticks: int = 200):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  VERSES ON VERSES")
    print("=" * 60)

    print("\n1. Generating layout...")
    layout_config = LayoutConfig()
    layout = LayoutGenerator(layout_config, np.random.default_rng(seed)).generate()
    in_top = sum(1 for n in layout.nodes if n.y <= layout_config.top_section_height)
    print(f"   {len(layout.nodes)} nodes, {len(layout.connections)} connections")
    print(f"   {in_top} nodes in the top {layout_config.top_section_height:.0f} units")

    print(f"\n2. Running {warmup_ticks} ticks...")
    simulator = MotionSimulator.from_layout(layout, MotionConfig())
    state = simulator.run(warmup_ticks)
    xs = [n.x for n in state.nodes]
    ys = [n.y for n in state.nodes]
    print(f"   x range: [{min(xs):.1f}, {max(xs):.1f}]")
    print(f"   y range: [{min(ys):.1f}, {max(ys):.1f}]")

    print("\n3. Saving snapshot...")
    fig, _ = plot_network(state, canvas_height=simulator.config.canvas_height)
    output_path = Path("output/demo_verses/network.png")
    save_figure(fig, output_path)
    print(f"   Saved to: {output_path}")

    print("\n4. Opening interactive view (close the window to exit)...")
    show(simulator)

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
