"""
Input validation utilities.

Validation functions return a (is_valid, error_message) tuple and
leave raising to the caller.
"""

import os
from pathlib import Path
from typing import Optional, Tuple


def validate_index(index: int, size: int, kind: str = "node") -> Tuple[bool, Optional[str]]:
    """
    Validate a raw integer index against a container size.

    Negative indices are rejected rather than wrapped around.

    Args:
        index: Integer position to check.
        size: Number of elements currently stored.
        kind: Element kind used in the error message.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if isinstance(index, bool) or not isinstance(index, int):
        return False, f"{kind} index must be an integer, got {type(index).__name__}"

    if index < 0:
        return False, f"{kind} index must not be negative: {index}"

    if index >= size:
        return False, f"{kind} index {index} out of range for {size} {kind}s"

    return True, None


def validate_path(path: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a readable local file path.

    Args:
        path: Path to validate.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not path:
        return False, "Path cannot be empty"

    path_obj = Path(path)

    if not path_obj.exists():
        return False, f"Path does not exist: {path}"

    if not path_obj.is_file():
        return False, f"Path is not a file: {path}"

    if not os.access(path_obj, os.R_OK):
        return False, f"Path is not readable: {path}"

    return True, None
