"""
Command-line interface for indexgraph.

Loads a graph from an edge-list file and runs traversals or queries
against it.
"""

import sys
from pathlib import Path

import click

from indexgraph import __version__
from indexgraph.core.config import Config
from indexgraph.core.exceptions import GraphError
from indexgraph.graph.builder import load_edge_list, require_node
from indexgraph.reporting.formatter import format_report
from indexgraph.reporting.report import build_traversal_report
from indexgraph.utils.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output"
)
@click.option(
    "--log-file",
    type=click.Path(),
    help="Path to log file"
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON configuration file"
)
@click.pass_context
def cli(ctx, verbose, log_file, config_path):
    """
    indexgraph

    Build directed graphs from edge lists and traverse them
    breadth-first or depth-first.
    """
    ctx.ensure_object(dict)

    try:
        Config.reset()
        if config_path:
            config = Config.load_from_file(config_path)
        else:
            config = Config.load_from_env()
    except GraphError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    config.verbose = verbose or config.verbose
    ctx.obj["config"] = config
    ctx.obj["verbose"] = config.verbose

    log_file = log_file or config.log_file
    setup_logging(
        level=config.log_level,
        log_file=Path(log_file) if log_file else None,
        verbose=config.verbose,
    )


def _run_traversal(ctx, order, edge_file, root, format, flat, output):
    config = ctx.obj["config"]
    format = format or config.output.format

    try:
        graph = load_edge_list(Path(edge_file), config.edge_list)
        report = build_traversal_report(
            graph,
            order,
            root,
            flat=flat,
            sort_frontiers=config.output.sort_frontiers,
        )
        formatted = format_report(
            report,
            format_type=format,
            output_path=Path(output) if output else None,
            indent=config.output.json_indent,
        )
    except GraphError as e:
        click.echo(f"Error: {e}", err=True)
        if ctx.obj.get("verbose"):
            import traceback
            traceback.print_exc()
        sys.exit(1)

    if output:
        click.echo(f"Report saved to: {output}")
    else:
        click.echo(formatted)


@cli.command()
@click.argument("edge_file", type=click.Path())
@click.argument("root")
@click.option(
    "--format", "-f",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: from configuration)"
)
@click.option(
    "--flat",
    is_flag=True,
    help="List nodes one at a time instead of grouped by depth"
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file for report"
)
@click.pass_context
def bfs(ctx, edge_file, root, format, flat, output):
    """
    Breadth-first traversal from ROOT.

    Examples:

        indexgraph bfs edges.txt A

        indexgraph bfs edges.txt A -f json -o levels.json
    """
    _run_traversal(ctx, "bfs", edge_file, root, format, flat, output)


@cli.command()
@click.argument("edge_file", type=click.Path())
@click.argument("root")
@click.option(
    "--format", "-f",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: from configuration)"
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file for report"
)
@click.pass_context
def dfs(ctx, edge_file, root, format, output):
    """Depth-first pre-order traversal from ROOT."""
    _run_traversal(ctx, "dfs", edge_file, root, format, False, output)


@cli.command()
@click.argument("edge_file", type=click.Path())
@click.argument("node")
@click.pass_context
def successors(ctx, edge_file, node):
    """List the direct successors of NODE, newest edge first."""
    config = ctx.obj["config"]

    try:
        graph = load_edge_list(Path(edge_file), config.edge_list)
        index = require_node(graph, node)
    except GraphError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for target in graph.successors(index):
        click.echo(graph.node_value(target))


@cli.command()
@click.argument("edge_file", type=click.Path())
@click.pass_context
def stats(ctx, edge_file):
    """Show graph statistics."""
    from indexgraph.graph.interop import graph_statistics

    config = ctx.obj["config"]

    try:
        graph = load_edge_list(Path(edge_file), config.edge_list)
    except GraphError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    statistics = graph_statistics(graph)

    click.echo("Graph Statistics:")
    click.echo("-" * 40)
    click.echo(f"  Nodes: {statistics['node_count']}")
    click.echo(f"  Edges: {statistics['edge_count']}")
    click.echo(f"  Self loops: {statistics['self_loops']}")
    click.echo(f"  Max out-degree: {statistics['max_out_degree']}")
    click.echo(f"  Density: {statistics['density']:.4f}")
    click.echo(f"  Weakly connected components: {statistics['weakly_connected_components']}")


@cli.command()
@click.option(
    "--output", "-o",
    type=click.Path(),
    default="indexgraph.json",
    help="Output path for configuration file"
)
def init(output):
    """
    Initialize configuration file.

    Creates a default configuration file that can be customized.
    """
    Config.reset()
    Config.save_to_file(output)
    click.echo(f"Configuration saved to: {output}")


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
