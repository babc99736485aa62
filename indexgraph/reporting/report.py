"""
Report data structures.

Defines the record of one traversal run, with node values resolved
from their indices.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from indexgraph.graph.builder import require_node
from indexgraph.graph.store import Graph

logger = logging.getLogger(__name__)

TRAVERSAL_ORDERS = ("bfs", "dfs")


@dataclass
class TraversalReport:
    """
    Result of a traversal from one root.

    ``steps`` holds one list of node values per emitted item: a whole
    frontier for breadth-first runs, a single node for depth-first or
    flattened runs.
    """

    order: str
    root: Any
    steps: List[List[Any]] = field(default_factory=list)
    flat: bool = False
    node_count: int = 0
    edge_count: int = 0
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def visited_count(self) -> int:
        """Number of distinct nodes reached."""
        return sum(len(step) for step in self.steps)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "order": self.order,
            "root": self.root,
            "steps": self.steps,
            "flat": self.flat,
            "visited_count": self.visited_count,
            "graph": {
                "node_count": self.node_count,
                "edge_count": self.edge_count,
            },
            "generated_at": self.generated_at.isoformat(),
        }


def build_traversal_report(
    graph: Graph,
    order: str,
    root: Any,
    flat: bool = False,
    sort_frontiers: bool = True,
) -> TraversalReport:
    """
    Run a traversal from the node holding root and record its output.

    Args:
        graph: Graph to traverse.
        order: "bfs" or "dfs".
        root: Value of the start node.
        flat: Emit breadth-first nodes one at a time instead of by level.
        sort_frontiers: Sort values within each frontier for stable output.

    Returns:
        Populated TraversalReport.

    Raises:
        NodeNotFoundError: If no node holds root.
        ValueError: If order is unknown.
    """
    if order not in TRAVERSAL_ORDERS:
        raise ValueError(f"Unknown traversal order: {order}")

    source = require_node(graph, root)
    report = TraversalReport(
        order=order,
        root=root,
        flat=flat or order == "dfs",
        node_count=graph.node_count,
        edge_count=graph.edge_count,
    )

    if order == "bfs":
        for frontier in graph.bfs(source):
            values = [graph.node_value(node) for node in frontier]
            if sort_frontiers:
                values.sort(key=str)
            if flat:
                report.steps.extend([value] for value in values)
            else:
                report.steps.append(values)
    else:
        for node in graph.dfs(source):
            report.steps.append([graph.node_value(node)])

    logger.info(f"{order.upper()} from {root!r} reached {report.visited_count} nodes")
    return report
