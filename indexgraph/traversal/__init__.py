"""
Lazy traversals over a graph.
"""

from indexgraph.traversal.bfs import Bfs
from indexgraph.traversal.dfs import Dfs

__all__ = ["Bfs", "Dfs"]
