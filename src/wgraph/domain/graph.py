"""WeightedGraph — undirected, weighted graph store.

Nodes live in a key -> NodeInfo map; edges live in a key -> {neighbor: weight}
adjacency map, stored on both endpoints.

INVARIANT: ``adjacency[u][v] == adjacency[v][u]`` for every edge.
INVARIANT: ``edge_count`` counts unordered pairs, never both directions.
INVARIANT: Self loops and negative or non-finite weights are silent no-ops.

The modification counter (``mode_count``) is a change detector, not a version
stamp. It is never decremented.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Sentinels shared with the algorithms layer.
NO_EDGE = -1.0
UNVISITED = -1.0


@dataclass(eq=True)
class NodeInfo:
    """A graph vertex.

    Attributes:
        key: Unique, immutable node id.
        info: Free-form label.
        tag: Scratch slot used by algorithms (BFS marker, Dijkstra distance).
            Part of equality.
    """

    key: int
    info: str = ""
    tag: float = UNVISITED

    def __str__(self) -> str:
        return f"({self.key})"


class WeightedGraph:
    """Undirected weighted graph with O(1) node/edge lookups."""

    def __init__(self) -> None:
        self._nodes: dict[int, NodeInfo] = {}
        self._adjacency: dict[int, dict[int, float]] = {}
        self._edge_count = 0
        self._mode_count = 0

    @classmethod
    def restore(
        cls,
        nodes: Iterable[NodeInfo],
        edges: Iterable[tuple[int, int, float]],
        *,
        mode_count: int = 0,
    ) -> WeightedGraph:
        """Build a graph from node records and ``(a, b, weight)`` triples.

        Node records are copied, never aliased. Edges go through
        :meth:`connect`, so invalid edges are dropped by the usual policy.
        The modification counter is then set to *mode_count*.
        """
        graph = cls()
        for node in nodes:
            graph.add_node(node.key)
            copied = graph._nodes[node.key]
            copied.info = node.info
            copied.tag = node.tag
        for a, b, weight in edges:
            graph.connect(a, b, weight)
        graph._mode_count = mode_count
        return graph

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_node(self, key: int) -> NodeInfo | None:
        """Return the node for *key*, or None."""
        return self._nodes.get(key)

    def has_edge(self, a: int, b: int) -> bool:
        """Return True iff both nodes exist and are connected."""
        if a not in self._nodes or b not in self._nodes:
            return False
        return b in self._adjacency[a]

    def get_edge(self, a: int, b: int) -> float:
        """Return the weight of edge ``(a, b)``, or :data:`NO_EDGE`."""
        if not self.has_edge(a, b):
            return NO_EDGE
        return self._adjacency[a][b]

    def nodes(self) -> list[NodeInfo]:
        """Return every node, in insertion order.

        The list is a fresh copy; mutating it does not touch the graph.
        """
        return list(self._nodes.values())

    def neighbors(self, key: int) -> list[NodeInfo] | None:
        """Return the neighbors of *key*, or None if the node is absent.

        An isolated node yields an empty list, which is distinct from None.
        """
        if key not in self._nodes:
            return None
        return [self._nodes[k] for k in self._adjacency[key]]

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield each undirected edge once as ``(a, b, weight)`` with a < b."""
        for a, row in self._adjacency.items():
            for b, weight in row.items():
                if a < b:
                    yield a, b, weight

    def degree(self, key: int) -> int:
        """Return the number of edges incident to *key* (0 if absent)."""
        return len(self._adjacency.get(key, ()))

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def mode_count(self) -> int:
        """Number of successful mutations since construction."""
        return self._mode_count

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_node(self, key: int) -> None:
        """Add a node with an empty label. No-op if *key* already exists."""
        if key in self._nodes:
            return
        self._nodes[key] = NodeInfo(key)
        self._adjacency[key] = {}
        self._mode_count += 1

    def connect(self, a: int, b: int, weight: float) -> None:
        """Connect *a* and *b*, or update the weight of an existing edge.

        Ignored when ``a == b``, when *weight* is negative, infinite or NaN,
        or when either node is missing.
        """
        if a == b or not math.isfinite(weight) or weight < 0:
            return
        if a not in self._nodes or b not in self._nodes:
            return

        if b not in self._adjacency[a]:
            self._edge_count += 1
        self._adjacency[a][b] = weight
        self._adjacency[b][a] = weight
        self._mode_count += 1

    def remove_node(self, key: int) -> NodeInfo | None:
        """Remove *key* and all incident edges; return the removed node.

        Returns None if the node is absent. The modification counter grows by
        the node's degree, one step per destroyed edge.
        """
        node = self._nodes.get(key)
        if node is None:
            return None

        row = self._adjacency.pop(key)
        for neighbor in row:
            del self._adjacency[neighbor][key]
        del self._nodes[key]

        self._edge_count -= len(row)
        self._mode_count += len(row)
        return node

    def remove_edge(self, a: int, b: int) -> None:
        """Remove edge ``(a, b)``. No-op if it does not exist."""
        if not self.has_edge(a, b):
            return
        del self._adjacency[a][b]
        del self._adjacency[b][a]
        self._edge_count -= 1
        self._mode_count += 1

    # ------------------------------------------------------------------
    # Structural helpers
    # ------------------------------------------------------------------

    def copy(self) -> WeightedGraph:
        """Return a deep copy sharing no storage, counter included."""
        return WeightedGraph.restore(
            self._nodes.values(),
            self.edges(),
            mode_count=self._mode_count,
        )

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        """Structural equality: same nodes (key, info, tag) and same adjacency.

        The modification counter is not compared.
        """
        if self is other:
            return True
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return (
            self._edge_count == other._edge_count
            and self._nodes == other._nodes
            and self._adjacency == other._adjacency
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(nodes={self.node_count}, edges={self._edge_count}, "
            f"mode_count={self._mode_count})"
        )
