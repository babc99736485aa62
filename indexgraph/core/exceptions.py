"""
Custom exceptions for indexgraph.

Every error carries the component it originated from and a details
dictionary so callers can report failures precisely.
"""


class GraphError(Exception):
    """Base exception for all graph-related errors."""

    def __init__(self, message: str, component: str = None, details: dict = None):
        super().__init__(message)
        self.component = component
        self.details = details or {}

    def __str__(self):
        base_msg = super().__str__()
        if self.component:
            return f"[{self.component}] {base_msg}"
        return base_msg


class InvalidIndexError(GraphError, IndexError):
    """Raised when a node or edge index does not belong to the graph."""

    def __init__(self, kind: str, index: int, size: int):
        super().__init__(
            f"Invalid {kind} index {index} (graph has {size} {kind}s)",
            component="Graph",
            details={"kind": kind, "index": index, "size": size},
        )


class NodeNotFoundError(GraphError, LookupError):
    """Raised when a required node value is absent from the graph."""

    def __init__(self, value):
        super().__init__(
            f"No node with value {value!r}",
            component="Graph",
            details={"value": value},
        )


class EdgeListParseError(GraphError):
    """Raised when edge-list text or files cannot be parsed."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, component="EdgeList", details=details)


class ConfigurationError(GraphError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, component="Config", details=details)
