"""Graph commands: node/edge editing, connectivity, shortest paths, export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wgraph.commands._base import WGraphCommand, WGraphGroup
from wgraph.services.graph import GraphService

if TYPE_CHECKING:
    from wgraph.commands._context import AppContext


# ── node ─────────────────────────────────────────────────────────────


@click.group(
    cls=WGraphGroup,
    examples="""\
  wgraph node add 1
  wgraph node add 2 --info "warehouse"
  wgraph node show 2
  wgraph node rm 1""",
)
def node() -> None:
    """Add, inspect, and remove nodes."""


@node.command(
    "add",
    signed_args=True,
    examples="""\
  wgraph node add 7
  wgraph node add 7 --info "depot"
  wgraph --json node add 8""",
)
@click.argument("key", type=int)
@click.option("--info", default=None, help="Label to store on the node.")
@click.pass_obj
def node_add(app: AppContext, key: int, info: str | None) -> None:
    """Add a node (sets its label if it already exists)."""
    app.emit(GraphService(app.workspace).add_node(key, info=info))


@node.command(
    "rm",
    signed_args=True,
    examples="""\
  wgraph node rm 7""",
)
@click.argument("key", type=int)
@click.pass_obj
def node_rm(app: AppContext, key: int) -> None:
    """Remove a node and all of its edges."""
    app.emit(GraphService(app.workspace).remove_node(key))


@node.command(
    "show",
    signed_args=True,
    examples="""\
  wgraph node show 7
  wgraph --json node show 7""",
)
@click.argument("key", type=int)
@click.pass_obj
def node_show(app: AppContext, key: int) -> None:
    """Show a node and its neighbors."""
    app.emit(GraphService(app.workspace).neighbors(key))


# ── edge ─────────────────────────────────────────────────────────────


@click.group(
    cls=WGraphGroup,
    examples="""\
  wgraph edge add 1 2 3.5
  wgraph edge add 1 3
  wgraph edge rm 1 2""",
)
def edge() -> None:
    """Connect and disconnect nodes."""


@edge.command(
    "add",
    signed_args=True,
    examples="""\
  wgraph edge add 1 2 3.5
  wgraph edge add 1 2        # uses [graph] default_weight
  wgraph edge add -1 2 0.5   # negative node keys are fine""",
)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.argument("weight", type=float, required=False)
@click.pass_obj
def edge_add(app: AppContext, a: int, b: int, weight: float | None) -> None:
    """Connect two nodes, or update the weight of their edge."""
    app.emit(GraphService(app.workspace).connect(a, b, weight))


@edge.command(
    "rm",
    signed_args=True,
    examples="""\
  wgraph edge rm 1 2""",
)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_obj
def edge_rm(app: AppContext, a: int, b: int) -> None:
    """Remove the edge between two nodes."""
    app.emit(GraphService(app.workspace).remove_edge(a, b))


# ── analysis ─────────────────────────────────────────────────────────


@click.command(
    cls=WGraphCommand,
    examples="""\
  wgraph info
  wgraph --graph city.json info""",
)
@click.pass_obj
def info(app: AppContext) -> None:
    """Summarize the graph: counts and connectivity."""
    app.emit(GraphService(app.workspace).info())


@click.command(
    cls=WGraphCommand,
    examples="""\
  wgraph connected
  wgraph --json connected""",
)
@click.pass_obj
def connected(app: AppContext) -> None:
    """Check whether every node can reach every other node."""
    app.emit(GraphService(app.workspace).connected())


@click.command(
    cls=WGraphCommand,
    signed_args=True,
    examples="""\
  wgraph path 0 5
  wgraph --json path 0 5
  wgraph -q path 0 5""",
)
@click.argument("source_id", type=int)
@click.argument("target_id", type=int)
@click.pass_obj
def path(app: AppContext, source_id: int, target_id: int) -> None:
    """Find the shortest weighted path between two nodes."""
    app.emit(GraphService(app.workspace).path(source_id, target_id))


@click.command(
    cls=WGraphCommand,
    examples="""\
  wgraph export graph.graphml""",
)
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def export(app: AppContext, output: Path) -> None:
    """Export the graph as GraphML."""
    app.emit(GraphService(app.workspace).export_graphml(output))
