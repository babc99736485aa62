"""
Report formatters for different output formats.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

from indexgraph.reporting.report import TraversalReport

logger = logging.getLogger(__name__)


class ReportFormatter(ABC):
    """Abstract base class for report formatters."""

    @abstractmethod
    def format(self, report: TraversalReport) -> str:
        """Format a report to string."""
        pass

    def save(self, report: TraversalReport, path: Path) -> None:
        """Save formatted report to file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        content = self.format(report)
        with open(path, "w") as f:
            f.write(content)

        logger.info(f"Report saved to {path}")


class JSONFormatter(ReportFormatter):
    """Formats reports as JSON for machine consumption."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, report: TraversalReport) -> str:
        return json.dumps(
            report.to_dict(), indent=self.indent, default=self._json_serializer
        )

    def _json_serializer(self, obj: Any) -> Any:
        """Render node values json cannot encode by their str form."""
        return str(obj)


class TextFormatter(ReportFormatter):
    """
    Formats reports as human-readable text.

    Breadth-first levels are printed one per line with their depth;
    depth-first runs print the visiting order on a single line.
    """

    def __init__(self, width: int = 60):
        self.width = width
        self.section_char = "="

    def format(self, report: TraversalReport) -> str:
        lines = []
        lines.append(self.section_char * self.width)
        lines.append(f"{report.order.upper()} from {report.root}")
        lines.append(self.section_char * self.width)

        if report.order == "bfs" and not report.flat:
            lines.extend(self._format_levels(report.steps))
        else:
            lines.append(" -> ".join(str(step[0]) for step in report.steps))

        lines.append("")
        lines.append(
            f"Visited {report.visited_count} of {report.node_count} nodes "
            f"({report.edge_count} edges)"
        )
        return "\n".join(lines)

    def _format_levels(self, steps: List[List[Any]]) -> List[str]:
        return [
            f"  depth {depth}: {', '.join(str(value) for value in values)}"
            for depth, values in enumerate(steps)
        ]


def format_report(
    report: TraversalReport,
    format_type: str = "text",
    output_path: Optional[Path] = None,
    indent: int = 2,
) -> str:
    """
    Format and optionally save a report.

    Args:
        report: Report to format.
        format_type: Output format ("text", "json").
        output_path: Optional path to save the report.
        indent: Indentation for JSON output.

    Returns:
        Formatted report string.
    """
    if format_type == "json":
        formatter = JSONFormatter(indent=indent)
    else:
        formatter = TextFormatter()

    formatted = formatter.format(report)

    if output_path:
        formatter.save(report, output_path)

    return formatted
