"""
Shared helpers for traversal tests.
"""

from indexgraph.graph.builder import require_node

# Seven-node graph with cycles between most pairs of neighbours
SAMPLE_EDGES = [
    ("A", "B"), ("A", "C"), ("A", "E"),
    ("B", "A"), ("B", "D"), ("B", "F"),
    ("C", "A"), ("C", "G"),
    ("D", "B"),
    ("E", "A"), ("E", "F"),
    ("F", "B"), ("F", "E"),
    ("G", "C"),
]


def bfs_values(graph, start):
    """Breadth-first frontiers from the node holding start, as value sets."""
    return [
        {graph.node_value(node) for node in frontier}
        for frontier in graph.bfs(require_node(graph, start))
    ]


def dfs_values(graph, start):
    """Depth-first order from the node holding start, as values."""
    return [graph.node_value(node) for node in graph.dfs(require_node(graph, start))]
