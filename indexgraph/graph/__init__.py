"""
Graph storage and construction.

Provides the index-based graph store, the value-keyed builder and
NetworkX conversion helpers.
"""

from indexgraph.graph.indices import NodeIndex, EdgeIndex
from indexgraph.graph.store import Graph, Node, Edge, Successors
from indexgraph.graph.builder import (
    GraphBuilder,
    from_edge_pairs,
    require_node,
    parse_edge_list,
    load_edge_list,
)

__all__ = [
    "NodeIndex",
    "EdgeIndex",
    "Graph",
    "Node",
    "Edge",
    "Successors",
    "GraphBuilder",
    "from_edge_pairs",
    "require_node",
    "parse_edge_list",
    "load_edge_list",
]
