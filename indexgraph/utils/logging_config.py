"""
Logging configuration for indexgraph.

Log records go to stderr (and optionally a file) so that traversal
results written to stdout stay machine readable.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "indexgraph"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    verbose: bool = False,
) -> None:
    """
    Configure logging for the command-line tool.

    Args:
        level: Logging level name, case insensitive.
        log_file: Optional file that receives a copy of every record.
        format_string: Custom format string.
        verbose: Force DEBUG so traversal steps are logged.
    """
    if verbose:
        level = "DEBUG"

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the indexgraph namespace.

    Args:
        name: Dotted module name. Names outside the package are nested
            under it, so ``get_logger("traversal")`` is ``indexgraph.traversal``.

    Returns:
        Logger instance.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
