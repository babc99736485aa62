"""
Index-based directed graph storage.

Nodes and edges live in two append-only lists. Each node keeps only
the head of its outgoing-edge list; the rest of the list is threaded
through the edges themselves, so adding an edge never reallocates
per-node storage and never invalidates an issued index.
"""

import logging
from dataclasses import dataclass
from typing import (
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    TYPE_CHECKING,
)

from indexgraph.core.exceptions import InvalidIndexError
from indexgraph.graph.indices import EdgeIndex, NodeIndex
from indexgraph.utils.validation import validate_index

if TYPE_CHECKING:
    from indexgraph.traversal.bfs import Bfs
    from indexgraph.traversal.dfs import Dfs

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """A stored value and the head of its outgoing-edge list."""

    value: T
    first_outgoing_edge: Optional[EdgeIndex] = None


@dataclass(frozen=True)
class Edge:
    """An edge target and the next edge leaving the same source."""

    target: NodeIndex
    next_outgoing_edge: Optional[EdgeIndex] = None


class Graph(Generic[T]):
    """
    Directed graph addressed by dense integer handles.

    Nodes and edges can only be added. Every NodeIndex and EdgeIndex
    returned by this graph stays valid for its whole lifetime.
    """

    def __init__(self):
        self._nodes: List[Node[T]] = []
        self._edges: List[Edge] = []

    @classmethod
    def from_edges(cls, pairs: Iterable[Tuple[T, T]]) -> "Graph[T]":
        """
        Build a graph from (source value, target value) pairs.

        Equal values share one node. See GraphBuilder.
        """
        from indexgraph.graph.builder import from_edge_pairs

        return from_edge_pairs(pairs)

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, index: object) -> bool:
        if not isinstance(index, NodeIndex):
            return False
        return validate_index(index.index, len(self._nodes))[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    __hash__ = None

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"

    def copy(self) -> "Graph[T]":
        """Return an independent graph with the same indices."""
        clone = Graph()
        clone._nodes = [Node(n.value, n.first_outgoing_edge) for n in self._nodes]
        clone._edges = list(self._edges)
        return clone

    def add_node(self, value: T) -> NodeIndex:
        """
        Add a node holding value.

        Args:
            value: Value stored in the new node.

        Returns:
            The index of the new node.
        """
        index = NodeIndex(len(self._nodes))
        self._nodes.append(Node(value))
        logger.debug(f"Added node {index.index}: {value!r}")
        return index

    def add_edge(self, source: NodeIndex, target: NodeIndex) -> EdgeIndex:
        """
        Add an edge from source to target.

        The new edge becomes the head of the source's outgoing list, so
        successors are enumerated most recent first.

        Raises:
            InvalidIndexError: If either endpoint is not a node of this graph.
        """
        source_node = self._node(source)
        self._node(target)

        edge_index = EdgeIndex(len(self._edges))
        self._edges.append(Edge(target, source_node.first_outgoing_edge))
        source_node.first_outgoing_edge = edge_index
        logger.debug(f"Added edge {edge_index.index}: {source.index} -> {target.index}")
        return edge_index

    def nodes(self) -> List[Tuple[NodeIndex, T]]:
        """Return (index, value) pairs for all nodes in insertion order."""
        return [(NodeIndex(i), node.value) for i, node in enumerate(self._nodes)]

    def edges(self) -> List[EdgeIndex]:
        """Return all edge indices in insertion order."""
        return [EdgeIndex(i) for i in range(len(self._edges))]

    def successors(self, source: NodeIndex) -> "Successors[T]":
        """Return a lazy iterator over the direct successors of source."""
        return Successors(self, self._node(source).first_outgoing_edge)

    def outgoing_edges(self, source: NodeIndex) -> List[EdgeIndex]:
        """Return the edges leaving source, most recently added first."""
        result = []
        edge = self._node(source).first_outgoing_edge
        while edge is not None:
            result.append(edge)
            edge = self._edges[edge.index].next_outgoing_edge
        return result

    def node_value(self, index: NodeIndex) -> T:
        """Return the value stored at index."""
        return self._node(index).value

    def set_node_value(self, index: NodeIndex, value: T) -> None:
        """Replace the value stored at index in place."""
        self._node(index).value = value

    def edge_target(self, index: EdgeIndex) -> NodeIndex:
        """Return the target node of an edge."""
        return self._edge(index).target

    def find_node(self, value: T) -> Optional[NodeIndex]:
        """
        Find a node holding value.

        Scans in insertion order and returns the first match, or None if
        no node holds value. Callers should not depend on which node is
        returned when several hold equal values.
        """
        for i, node in enumerate(self._nodes):
            if node.value == value:
                return NodeIndex(i)
        return None

    def bfs(self, source: NodeIndex) -> "Bfs":
        """
        Breadth-first iterator starting from source.

        Yields sets of nodes grouped by depth from source. Use
        Bfs.nodes() to iterate over individual nodes instead.
        """
        from indexgraph.traversal.bfs import Bfs

        return Bfs(self, source)

    def dfs(self, source: NodeIndex) -> "Dfs":
        """Depth-first pre-order iterator starting from source."""
        from indexgraph.traversal.dfs import Dfs

        return Dfs(self, source)

    def check_node(self, index: NodeIndex) -> None:
        """Raise InvalidIndexError unless index is a node of this graph."""
        self._node(index)

    def _node(self, index: NodeIndex) -> Node[T]:
        if not isinstance(index, NodeIndex):
            raise TypeError(f"Expected NodeIndex, got {type(index).__name__}")
        is_valid, _ = validate_index(index.index, len(self._nodes), "node")
        if not is_valid:
            raise InvalidIndexError("node", index.index, len(self._nodes))
        return self._nodes[index.index]

    def _edge(self, index: EdgeIndex) -> Edge:
        if not isinstance(index, EdgeIndex):
            raise TypeError(f"Expected EdgeIndex, got {type(index).__name__}")
        is_valid, _ = validate_index(index.index, len(self._edges), "edge")
        if not is_valid:
            raise InvalidIndexError("edge", index.index, len(self._edges))
        return self._edges[index.index]


class Successors(Generic[T]):
    """Iterator walking one node's outgoing-edge list."""

    def __init__(self, graph: Graph[T], first_edge: Optional[EdgeIndex]):
        self._graph = graph
        self._current_edge = first_edge

    def __iter__(self) -> Iterator[NodeIndex]:
        return self

    def __next__(self) -> NodeIndex:
        if self._current_edge is None:
            raise StopIteration
        edge = self._graph._edges[self._current_edge.index]
        self._current_edge = edge.next_outgoing_edge
        return edge.target

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Lower and upper bound on the number of remaining successors."""
        return 0, self._graph.edge_count
