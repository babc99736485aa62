"""
Utility functions and helpers.

Provides common utilities used across the codebase.
"""

from indexgraph.utils.logging_config import setup_logging, get_logger
from indexgraph.utils.validation import validate_index, validate_path

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_index",
    "validate_path",
]
