"""Domain layer — the graph store and its node type.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""

from wgraph.domain.graph import NO_EDGE, UNVISITED, NodeInfo, WeightedGraph

__all__ = ["NO_EDGE", "UNVISITED", "NodeInfo", "WeightedGraph"]
