"""
Static editorial content: node identity → card text.

- ENTRIES: the curated invented words
- describe_node: curated card, or a generic one showing the node's position
"""

from versesim.content.entries import Entry, ENTRIES, describe_node, fallback_entry

__all__ = [
    "Entry",
    "ENTRIES",
    "describe_node",
    "fallback_entry",
]
