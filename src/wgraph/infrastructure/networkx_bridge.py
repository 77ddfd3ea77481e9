"""Conversions between :class:`WeightedGraph` and ``networkx.Graph``.

Node attributes ``info`` and ``tag`` and the edge attribute ``weight`` are
carried across. Conversion always copies; neither side aliases the other.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

import networkx as nx

from wgraph.domain.graph import WeightedGraph

_Graph: TypeAlias = nx.Graph

DEFAULT_WEIGHT = 1.0


def to_networkx(graph: WeightedGraph) -> _Graph:
    """Build an undirected NetworkX graph mirroring *graph*.

    Adds all nodes first so isolated nodes are kept.
    """
    g: _Graph = nx.Graph()
    for node in graph.nodes():
        g.add_node(node.key, info=node.info, tag=node.tag)
    for a, b, weight in graph.edges():
        g.add_edge(a, b, weight=weight)
    return g


def from_networkx(g: _Graph) -> WeightedGraph:
    """Build a :class:`WeightedGraph` from an undirected NetworkX graph.

    Self loops and invalid weights (negative, infinite or NaN) are dropped
    by the store's own policy.
    Edges without a ``weight`` attribute get :data:`DEFAULT_WEIGHT`.

    Raises:
        TypeError: A node label is not an integer, or *g* is directed.
    """
    if g.is_directed():
        msg = "Directed graphs are not supported"
        raise TypeError(msg)

    graph = WeightedGraph()
    for key, attrs in g.nodes(data=True):
        if not isinstance(key, int) or isinstance(key, bool):
            msg = f"Node keys must be integers, got {key!r}"
            raise TypeError(msg)
        graph.add_node(key)
        node = graph.get_node(key)
        assert node is not None
        node.info = str(attrs.get("info", ""))
        if "tag" in attrs:
            node.tag = float(attrs["tag"])

    for a, b, attrs in g.edges(data=True):
        graph.connect(a, b, float(attrs.get("weight", DEFAULT_WEIGHT)))
    return graph


def write_graphml(graph: WeightedGraph, target: Path) -> None:
    """Write *graph* as GraphML via NetworkX.

    Raises:
        OSError: The target cannot be written.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    nx.write_graphml(to_networkx(graph), target)
