"""
Breadth-first traversal.

Produces one set of nodes per depth level, pulling successors from the
graph only as each level is requested.
"""

import logging
from collections import deque
from typing import Deque, Iterator, Optional, Set, Tuple, TYPE_CHECKING

import numpy as np

from indexgraph.graph.indices import NodeIndex

if TYPE_CHECKING:
    from indexgraph.graph.store import Graph

logger = logging.getLogger(__name__)


class Bfs:
    """
    Breadth-first iterator over a graph.

    Each step yields the frontier at the next depth as a set of node
    indices. A node is marked visited when its frontier is emitted, so
    cycles never bring it back. Visited flags are sized when the
    traversal starts; nodes added to the graph afterwards are not
    supported.
    """

    def __init__(self, graph: "Graph", source: NodeIndex):
        graph.check_node(source)
        self._graph = graph
        self._visited = np.zeros(graph.node_count, dtype=bool)
        self._queue: Deque[Set[NodeIndex]] = deque([{source}])
        self._depth = 0

    def __iter__(self) -> Iterator[Set[NodeIndex]]:
        return self

    def __next__(self) -> Set[NodeIndex]:
        if not self._queue:
            raise StopIteration

        frontier = self._queue.popleft()
        following: Set[NodeIndex] = set()
        for node in frontier:
            following.update(self._visit(node))

        following = {node for node in following if not self._is_visited(node)}
        if following:
            self._queue.append(following)

        logger.debug(
            f"BFS depth {self._depth}: {len(frontier)} nodes, "
            f"{len(following)} queued"
        )
        self._depth += 1
        return frontier

    def _is_visited(self, node: NodeIndex) -> bool:
        return bool(self._visited[node.index])

    def _visit(self, node: NodeIndex):
        self._visited[node.index] = True
        return self._graph.successors(node)

    def nodes(self) -> Iterator[NodeIndex]:
        """Iterate over individual nodes, level by level."""
        for frontier in self:
            yield from frontier

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Lower and upper bound on the number of remaining items."""
        return 0, self._graph.node_count
