"""
Conversion between indexgraph graphs and NetworkX.
"""

import logging
from typing import Any, Dict

import networkx as nx

from indexgraph.graph.store import Graph

logger = logging.getLogger(__name__)


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Export a graph to a NetworkX multigraph.

    Node keys are the integer node indices with the stored value under
    the ``value`` attribute. Each edge is keyed by its edge index, so
    parallel edges are preserved and edges are added in insertion order.
    """
    nx_graph = nx.MultiDiGraph()
    sources: Dict[int, int] = {}

    for index, value in graph.nodes():
        nx_graph.add_node(index.index, value=value)
        for edge in graph.outgoing_edges(index):
            sources[edge.index] = index.index

    for edge in graph.edges():
        nx_graph.add_edge(
            sources[edge.index], graph.edge_target(edge).index, key=edge.index
        )

    return nx_graph


def from_networkx(nx_graph: nx.Graph) -> Graph:
    """
    Import a NetworkX graph.

    Each NetworkX node object becomes a node value. Nodes and edges are
    added in NetworkX iteration order; undirected edges become a single
    edge in iteration direction.
    """
    graph = Graph()
    indices = {node: graph.add_node(node) for node in nx_graph.nodes()}
    for source, target in nx_graph.edges():
        graph.add_edge(indices[source], indices[target])

    logger.debug(
        f"Imported NetworkX graph: {graph.node_count} nodes, {graph.edge_count} edges"
    )
    return graph


def graph_statistics(graph: Graph) -> Dict[str, Any]:
    """Get graph statistics."""
    if graph.node_count == 0:
        return {
            "node_count": 0,
            "edge_count": 0,
            "self_loops": 0,
            "max_out_degree": 0,
            "density": 0.0,
            "weakly_connected_components": 0,
        }

    nx_graph = to_networkx(graph)
    return {
        "node_count": graph.node_count,
        "edge_count": graph.edge_count,
        "self_loops": nx.number_of_selfloops(nx_graph),
        "max_out_degree": max(d for _, d in nx_graph.out_degree()),
        "density": nx.density(nx_graph),
        "weakly_connected_components": (
            nx.number_weakly_connected_components(nx_graph)
        ),
    }
