"""wgraph — weighted undirected graphs with connectivity and shortest-path algorithms."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

from wgraph.domain.graph import NO_EDGE, NodeInfo, WeightedGraph
from wgraph.services.algorithms import NO_PATH, GraphAlgorithms, GraphNotBoundError

try:
    __version__ = _pkg_version("wgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "NO_EDGE",
    "NO_PATH",
    "GraphAlgorithms",
    "GraphNotBoundError",
    "NodeInfo",
    "WeightedGraph",
    "__version__",
]
