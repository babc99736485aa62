"""
Depth-first traversal in pre-order.
"""

import logging
from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from indexgraph.graph.indices import NodeIndex

if TYPE_CHECKING:
    from indexgraph.graph.store import Graph

logger = logging.getLogger(__name__)


class Dfs:
    """
    Depth-first iterator over a graph.

    Keeps an explicit stack of pending nodes. All successors of a node
    are pushed in enumeration order, newest edge first, so the target of
    the oldest edge ends on top and is explored next. Nodes already
    visited are discarded when popped.
    """

    def __init__(self, graph: "Graph", source: NodeIndex):
        graph.check_node(source)
        self._graph = graph
        self._visited = np.zeros(graph.node_count, dtype=bool)
        self._stack: List[NodeIndex] = [source]

    def __iter__(self) -> Iterator[NodeIndex]:
        return self

    def __next__(self) -> NodeIndex:
        while self._stack:
            node = self._stack.pop()
            if self._visited[node.index]:
                continue
            self._visit(node)
            logger.debug(f"DFS visited {node.index}, {len(self._stack)} pending")
            return node
        raise StopIteration

    def _visit(self, node: NodeIndex) -> None:
        self._visited[node.index] = True
        self._stack.extend(self._graph.successors(node))

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Lower and upper bound on the number of remaining items."""
        return 0, self._graph.node_count
