"""
Traversal result reporting.

Collects traversal output into reports and renders them as text or
JSON for the command-line interface.
"""

from indexgraph.reporting.report import TraversalReport, build_traversal_report
from indexgraph.reporting.formatter import (
    ReportFormatter,
    JSONFormatter,
    TextFormatter,
    format_report,
)

__all__ = [
    "TraversalReport",
    "build_traversal_report",
    "ReportFormatter",
    "JSONFormatter",
    "TextFormatter",
    "format_report",
]
