"""
Index-based directed graph library.

Stores nodes and edges in dense append-only lists addressed by
integer handles, and provides lazy breadth-first and depth-first
traversals over them.
"""

__version__ = "1.0.0"
__author__ = "indexgraph"

from indexgraph.graph import (
    Graph,
    NodeIndex,
    EdgeIndex,
    GraphBuilder,
    from_edge_pairs,
)
from indexgraph.traversal import Bfs, Dfs

__all__ = [
    "Graph",
    "NodeIndex",
    "EdgeIndex",
    "GraphBuilder",
    "from_edge_pairs",
    "Bfs",
    "Dfs",
]
