"""
Stable integer handles for nodes and edges.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class NodeIndex:
    """Handle identifying a node within one graph instance."""

    index: int

    def __int__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"NodeIndex({self.index})"


@dataclass(frozen=True, order=True)
class EdgeIndex:
    """Handle identifying an edge within one graph instance."""

    index: int

    def __int__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"EdgeIndex({self.index})"
