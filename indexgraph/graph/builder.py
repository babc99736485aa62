"""
Graph builder for constructing graphs from value pairs.

Endpoints are looked up by value and inserted on first sight, so equal
values always share a single node. Also reads the textual edge-list
format used by the command-line interface.
"""

import logging
from pathlib import Path
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from indexgraph.core.config import EdgeListConfig
from indexgraph.core.exceptions import EdgeListParseError, NodeNotFoundError
from indexgraph.graph.indices import EdgeIndex, NodeIndex
from indexgraph.graph.store import Graph
from indexgraph.utils.validation import validate_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GraphBuilder(Generic[T]):
    """
    Incrementally builds a graph keyed by node values.

    Lookups are linear scans over the graph, so each insertion is O(n).
    """

    def __init__(self, graph: Optional[Graph[T]] = None):
        self.graph: Graph[T] = graph if graph is not None else Graph()

    def find_or_add_node(self, value: T) -> NodeIndex:
        """Return the node holding value, adding one if none exists."""
        index = self.graph.find_node(value)
        if index is None:
            index = self.graph.add_node(value)
        return index

    def add_edge_pair(self, source: T, target: T) -> EdgeIndex:
        """Add an edge between the nodes holding source and target."""
        source_index = self.find_or_add_node(source)
        target_index = self.find_or_add_node(target)
        return self.graph.add_edge(source_index, target_index)

    def add_edge_pairs(self, pairs: Iterable[Tuple[T, T]]) -> "GraphBuilder[T]":
        for source, target in pairs:
            self.add_edge_pair(source, target)
        return self

    def build(self) -> Graph[T]:
        logger.debug(
            f"Built graph with {self.graph.node_count} nodes "
            f"and {self.graph.edge_count} edges"
        )
        return self.graph


def from_edge_pairs(pairs: Iterable[Tuple[T, T]]) -> Graph[T]:
    """
    Build a graph from (source value, target value) pairs.

    Args:
        pairs: Edge endpoints given by value.

    Returns:
        Graph with one node per distinct value and one edge per pair.
    """
    return GraphBuilder().add_edge_pairs(pairs).build()


def require_node(graph: Graph[T], value: T) -> NodeIndex:
    """
    Find the node holding value.

    Raises:
        NodeNotFoundError: If no node holds value.
    """
    index = graph.find_node(value)
    if index is None:
        raise NodeNotFoundError(value)
    return index


def parse_edge_list(
    lines: Iterable[str], config: Optional[EdgeListConfig] = None
) -> Graph[str]:
    """
    Parse edge-list text into a graph of string values.

    Each line holds one or more pairs such as ``A -> B, B -> C``. A lone
    value declares a node without edges. Blank lines and lines starting
    with the comment prefix are skipped.

    Args:
        lines: Lines of edge-list text.
        config: Edge-list syntax settings.

    Returns:
        Parsed graph.

    Raises:
        EdgeListParseError: If a pair has an empty endpoint or too many arrows.
    """
    config = config or EdgeListConfig()
    builder: GraphBuilder[str] = GraphBuilder()

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith(config.comment_prefix):
            continue

        for item in line.split(config.pair_separator):
            item = item.strip()
            if not item:
                continue
            parts = [part.strip() for part in item.split(config.arrow)]
            if len(parts) == 1:
                builder.find_or_add_node(parts[0])
            elif len(parts) == 2 and all(parts):
                builder.add_edge_pair(parts[0], parts[1])
            else:
                raise EdgeListParseError(
                    f"Malformed edge on line {line_number}: {item!r}",
                    details={"line": line_number, "text": item},
                )

    return builder.build()


def load_edge_list(path: Path, config: Optional[EdgeListConfig] = None) -> Graph[str]:
    """
    Read and parse an edge-list file.

    Raises:
        EdgeListParseError: If the file cannot be read or parsed.
    """
    config = config or EdgeListConfig()
    is_valid, error = validate_path(str(path))
    if not is_valid:
        raise EdgeListParseError(error, details={"path": str(path)})

    try:
        with open(path, "r", encoding=config.encoding) as f:
            lines: List[str] = f.readlines()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise EdgeListParseError(
            f"Cannot read {path}: {e}", details={"path": str(path)}
        ) from e

    graph = parse_edge_list(lines, config)
    logger.info(
        f"Loaded {path}: {graph.node_count} nodes, {graph.edge_count} edges"
    )
    return graph
