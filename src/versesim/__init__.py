"""
versesim: "verses on verses", a drifting network of invented words

Labeled nodes float inside a tall, narrow canvas, linked to their nearest
neighbors. Clicking a node opens a card with the word it stands for.

Core concepts:
- A layout is generated once: spaced-out random placement, nearest-neighbor links
- Every tick, nodes drift, bounce off the walls and nudge apart when too close
- Rendering reads a frozen snapshot and never moves anything
"""

__version__ = "0.1.0"
