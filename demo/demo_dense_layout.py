#!/usr/bin/env python3
"""
Demo: layout under pressure

Shows how placement behaves when the spacing targets are unreachable:
rejection sampling gives up and the grid fallback takes over. Plots a
relaxed layout next to an overcrowded one, and reports how many ticks the
motion rules need to clear spacing violations.

Output: output/demo_dense_layout/layouts.png
"""

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from versesim.core import LayoutConfig, LayoutGenerator, MotionSimulator
from versesim.viz import plot_network, save_figure


def count_violations(state, min_distance: float) -> int:
    nodes = state.nodes
    count = 0
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            if math.hypot(nodes[i].x - nodes[j].x, nodes[i].y - nodes[j].y) < min_distance:
                count += 1
    return count


def main(seed: int = 7):
    print("=" * 60)
    print("  DENSE LAYOUT DEMONSTRATION")
    print("=" * 60)

    configs = {
        "relaxed (15 nodes)": LayoutConfig(),
        "crowded (40 nodes)": LayoutConfig(node_count=40, max_attempts=200),
    }

    fig, axes = plt.subplots(1, 2, figsize=(8, 12))
    for ax, (label, config) in zip(axes, configs.items()):
        print(f"\n{label}:")
        layout = LayoutGenerator(config, np.random.default_rng(seed)).generate()
        simulator = MotionSimulator.from_layout(layout)
        min_distance = simulator.config.min_distance

        before = count_violations(simulator.current_state(), min_distance)
        state = simulator.run(100)
        after = count_violations(state, min_distance)

        print(f"   Connections:                {len(layout.connections)}")
        print(f"   Pairs closer than {min_distance:.0f} (t=0):   {before}")
        print(f"   Pairs closer than {min_distance:.0f} (t=100): {after}")

        plot_network(state, ax=ax, title=label, canvas_height=simulator.config.canvas_height)

    output_path = Path("output/demo_dense_layout/layouts.png")
    save_figure(fig, output_path)
    print(f"\n   Saved to: {output_path}")

    plt.show()


if __name__ == "__main__":
    main()
