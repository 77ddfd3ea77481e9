"""GraphAlgorithms — connectivity, shortest paths, cloning, snapshots.

Stateless apart from the currently bound :class:`WeightedGraph`. Every
algorithm talks to the graph through its public API only.

Side effects on node tags are part of the contract:
- ``is_connected()`` leaves BFS markers (0 = reached, -1 = unreached).
- ``shortest_path_dist()`` / ``shortest_path()`` leave Dijkstra distances
  from the source (-1 = not reached before the destination was finalized).

Not thread-safe: tags are working memory, so callers must serialize access
to a bound graph.
"""

from __future__ import annotations

import heapq
import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from wgraph.domain.graph import UNVISITED, NodeInfo, WeightedGraph
from wgraph.infrastructure.snapshot import JsonSnapshotStore

if TYPE_CHECKING:
    from wgraph.infrastructure.snapshot import SnapshotStore

logger = logging.getLogger(__name__)

NO_PATH = -1.0
_REACHED = 0.0


class GraphNotBoundError(RuntimeError):
    """Raised when an algorithm runs before a graph has been bound."""


@dataclass(slots=True)
class _Candidate:
    """A queued Dijkstra record; ``prev`` links back towards the source."""

    node: NodeInfo
    prev: _Candidate | None
    distance: float


class GraphAlgorithms:
    """Algorithms over a bound :class:`WeightedGraph`.

    Usage::

        g = WeightedGraph()
        ...
        algo = GraphAlgorithms(g)
        algo.shortest_path_dist(0, 5)
    """

    def __init__(
        self,
        graph: WeightedGraph | None = None,
        *,
        store: SnapshotStore | None = None,
    ) -> None:
        self._graph = graph
        self._store: SnapshotStore = store if store is not None else JsonSnapshotStore()

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def init(self, graph: WeightedGraph | None) -> None:
        """Bind the graph the algorithms operate on (None unbinds)."""
        self._graph = graph

    @property
    def graph(self) -> WeightedGraph | None:
        """The bound graph, or None while uninitialized."""
        return self._graph

    def _require_graph(self) -> WeightedGraph:
        if self._graph is None:
            msg = "No graph bound; call init() first"
            raise GraphNotBoundError(msg)
        return self._graph

    # ------------------------------------------------------------------
    # copy
    # ------------------------------------------------------------------

    def copy(self) -> WeightedGraph:
        """Deep-copy the bound graph, modification counter included."""
        return self._require_graph().copy()

    # ------------------------------------------------------------------
    # is_connected: BFS reachability
    # ------------------------------------------------------------------

    def is_connected(self) -> bool:
        """Return True iff every node is reachable from every other node.

        An empty graph is connected. Otherwise a BFS starts from the first
        enumerated node and counts dequeued nodes.
        """
        g = self._require_graph()
        all_nodes = g.nodes()
        if not all_nodes:
            return True

        self._reset_tags(all_nodes)
        start = all_nodes[0]
        start.tag = _REACHED

        count = 0
        queue: deque[NodeInfo] = deque([start])
        while queue:
            current = queue.popleft()
            count += 1
            for neighbor in g.neighbors(current.key) or ():
                if neighbor.tag == UNVISITED:
                    neighbor.tag = _REACHED
                    queue.append(neighbor)

        return count == g.node_count

    # ------------------------------------------------------------------
    # Shortest paths: Dijkstra with lazy deletion
    # ------------------------------------------------------------------

    def shortest_path_dist(self, src: int, dest: int) -> float:
        """Return the length of the shortest path, or :data:`NO_PATH`."""
        g = self._require_graph()
        start = g.get_node(src)
        end = g.get_node(dest)
        if start is None or end is None:
            return NO_PATH

        self._dijkstra(start, end)
        return end.tag

    def shortest_path(self, src: int, dest: int) -> list[NodeInfo] | None:
        """Return the nodes of a shortest path ``src ... dest``, or None.

        When several paths share the minimal length, which one is returned
        depends on neighbor enumeration order.
        """
        g = self._require_graph()
        start = g.get_node(src)
        end = g.get_node(dest)
        if start is None or end is None:
            return None

        found = self._dijkstra(start, end)
        if found is None or end.tag == UNVISITED:
            return None

        path: list[NodeInfo] = []
        record: _Candidate | None = found
        while record is not None:
            path.append(record.node)
            record = record.prev
        path.reverse()
        return path

    def _dijkstra(self, src: NodeInfo, dest: NodeInfo) -> _Candidate | None:
        """Run Dijkstra from *src*, stopping once *dest* is finalized.

        Stale heap entries are skipped on extraction instead of being
        decreased in place. Returns the destination's candidate record, or
        None when *dest* is unreachable.
        """
        g = self._require_graph()
        self._reset_tags(g.nodes())

        seq = 0
        heap: list[tuple[float, int, _Candidate]] = [(0.0, seq, _Candidate(src, None, 0.0))]
        src.tag = 0.0
        finalized: set[int] = set()

        while heap:
            _, _, current = heapq.heappop(heap)
            key = current.node.key
            if key in finalized:
                continue
            finalized.add(key)

            if key == dest.key:
                return current

            for neighbor in g.neighbors(key) or ():
                if neighbor.key in finalized:
                    continue
                dist = current.distance + g.get_edge(key, neighbor.key)
                # A zero tag is either the source or a zero-cost hop; both are optimal.
                if neighbor.tag == UNVISITED or (dist <= neighbor.tag and neighbor.tag != 0):
                    neighbor.tag = dist
                    seq += 1
                    heapq.heappush(heap, (dist, seq, _Candidate(neighbor, current, dist)))

        return None

    @staticmethod
    def _reset_tags(nodes: list[NodeInfo]) -> None:
        for node in nodes:
            node.tag = UNVISITED

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def save(self, target: str | Path) -> bool:
        """Serialize the bound graph to *target*. Returns True on success."""
        ok = self._store.save(self._require_graph(), Path(target))
        logger.debug("save %s ok=%s", target, ok)
        return ok

    def load(self, source: str | Path) -> bool:
        """Load a graph from *source* and bind it.

        On failure the currently bound graph is left untouched.
        """
        loaded = self._store.load(Path(source))
        if loaded is None:
            return False
        self._graph = loaded
        logger.debug("load %s nodes=%d edges=%d", source, loaded.node_count, loaded.edge_count)
        return True

    def __repr__(self) -> str:
        return f"GraphAlgorithms(graph={self._graph!r})"
