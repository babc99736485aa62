"""
Core module containing configuration and the exception hierarchy.
"""

from indexgraph.core.config import Config, AppConfig
from indexgraph.core.exceptions import (
    GraphError,
    InvalidIndexError,
    NodeNotFoundError,
    EdgeListParseError,
    ConfigurationError,
)

__all__ = [
    "Config",
    "AppConfig",
    "GraphError",
    "InvalidIndexError",
    "NodeNotFoundError",
    "EdgeListParseError",
    "ConfigurationError",
]
