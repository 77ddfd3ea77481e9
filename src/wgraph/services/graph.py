"""GraphService — workspace graph editing and analysis for the CLI.

Mutations (``add_node``, ``connect``, ``remove_node``, ``remove_edge``) save
the snapshot on success. Queries never write, even though the algorithms
update node tags in memory.

Unlike the store itself, invalid requests are reported explicitly here
(``NOT_FOUND``, ``INVALID_EDGE``, ``NO_EDGE``); the graph is not modified.
"""

from __future__ import annotations

import math
import time
from pathlib import Path
from typing import Any

from wgraph.infrastructure.networkx_bridge import write_graphml
from wgraph.services.base import BaseService, reports_load_errors
from wgraph.services.result import ServiceResult


class GraphService(BaseService):
    """Edits and analyzes the workspace graph."""

    @staticmethod
    def _elapsed_ms(start: float) -> dict[str, Any]:
        return {"elapsed_ms": round((time.perf_counter() - start) * 1000, 3)}

    @staticmethod
    def _not_found(op: str, key: int, label: str | None = None) -> ServiceResult:
        what = f"Node {key} ({label})" if label else f"Node {key}"
        return ServiceResult.fail(op, "NOT_FOUND", f"{what} not found", key=key)

    # ------------------------------------------------------------------
    # info
    # ------------------------------------------------------------------

    @reports_load_errors
    def info(self) -> ServiceResult:
        """Summarize the graph: counts and connectivity."""
        g = self._workspace.graph
        connected = self._algorithms().is_connected()
        return ServiceResult(
            ok=True,
            op="info",
            data={
                "path": str(self._workspace.path),
                "nodes": g.node_count,
                "edges": g.edge_count,
                "mode_count": g.mode_count,
                "connected": connected,
            },
        )

    # ------------------------------------------------------------------
    # Node mutations
    # ------------------------------------------------------------------

    @reports_load_errors
    def add_node(self, key: int, *, info: str | None = None) -> ServiceResult:
        """Add node *key*; optionally set its label. Existing nodes are kept."""
        g = self._workspace.graph
        created = key not in g
        g.add_node(key)
        node = g.get_node(key)
        assert node is not None
        if info is not None:
            node.info = info

        result = self._commit("add_node", {"id": key, "info": node.info, "created": created})
        if result.ok and not created:
            return result.model_copy(update={"warnings": [f"Node {key} already exists"]})
        return result

    @reports_load_errors
    def remove_node(self, key: int) -> ServiceResult:
        """Remove node *key* and every incident edge."""
        g = self._workspace.graph
        degree = g.degree(key)
        removed = g.remove_node(key)
        if removed is None:
            return self._not_found("remove_node", key)
        return self._commit(
            "remove_node",
            {"id": key, "info": removed.info, "edges_removed": degree},
        )

    # ------------------------------------------------------------------
    # Edge mutations
    # ------------------------------------------------------------------

    @reports_load_errors
    def connect(self, a: int, b: int, weight: float | None = None) -> ServiceResult:
        """Connect *a* and *b*, or update the weight of an existing edge.

        *weight* defaults to ``[graph] default_weight``.
        """
        op = "connect"
        if weight is None:
            weight = self._workspace.settings.graph.default_weight
        if a == b:
            return ServiceResult.fail(op, "INVALID_EDGE", f"Self loop on node {a} not allowed")
        if not math.isfinite(weight):
            return ServiceResult.fail(op, "INVALID_EDGE", f"Weight {weight} is not finite")
        if weight < 0:
            return ServiceResult.fail(
                op, "INVALID_EDGE", f"Negative weight {weight} not allowed", weight=weight
            )

        g = self._workspace.graph
        for key, label in [(a, "first"), (b, "second")]:
            if key not in g:
                return self._not_found(op, key, label)

        created = not g.has_edge(a, b)
        g.connect(a, b, weight)
        return self._commit(op, {"a": a, "b": b, "weight": weight, "created": created})

    @reports_load_errors
    def remove_edge(self, a: int, b: int) -> ServiceResult:
        """Remove the edge between *a* and *b*."""
        op = "remove_edge"
        g = self._workspace.graph
        for key, label in [(a, "first"), (b, "second")]:
            if key not in g:
                return self._not_found(op, key, label)
        if not g.has_edge(a, b):
            return ServiceResult.fail(op, "NO_EDGE", f"No edge between {a} and {b}")

        weight = g.get_edge(a, b)
        g.remove_edge(a, b)
        return self._commit(op, {"a": a, "b": b, "weight": weight})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @reports_load_errors
    def neighbors(self, key: int) -> ServiceResult:
        """List the neighbors of *key* with edge weights."""
        g = self._workspace.graph
        node = g.get_node(key)
        adjacent = g.neighbors(key)
        if node is None or adjacent is None:
            return self._not_found("neighbors", key)

        items: list[dict[str, Any]] = [
            {"id": n.key, "info": n.info, "weight": g.get_edge(key, n.key)}
            for n in sorted(adjacent, key=lambda n: n.key)
        ]
        return ServiceResult(
            ok=True,
            op="neighbors",
            data={"id": key, "info": node.info, "count": len(items), "items": items},
        )

    @reports_load_errors
    def connected(self) -> ServiceResult:
        """Report whether every node reaches every other node."""
        g = self._workspace.graph
        start = time.perf_counter()
        connected = self._algorithms().is_connected()
        return ServiceResult(
            ok=True,
            op="connected",
            data={"connected": connected, "nodes": g.node_count},
            meta=self._elapsed_ms(start),
        )

    @reports_load_errors
    def path(self, source_id: int, target_id: int) -> ServiceResult:
        """Find a shortest weighted path between two nodes."""
        op = "path"
        g = self._workspace.graph
        for key, label in [(source_id, "source"), (target_id, "target")]:
            if key not in g:
                return self._not_found(op, key, label)

        start = time.perf_counter()
        nodes = self._algorithms().shortest_path(source_id, target_id)
        meta = self._elapsed_ms(start)
        target = g.get_node(target_id)
        assert target is not None
        if nodes is None:
            return ServiceResult.fail(
                op, "NO_PATH", f"No path between {source_id} and {target_id}"
            ).model_copy(update={"meta": meta})

        steps: list[dict[str, Any]] = []
        prev: int | None = None
        for node in nodes:
            steps.append(
                {
                    "id": node.key,
                    "info": node.info,
                    "weight": 0.0 if prev is None else g.get_edge(prev, node.key),
                }
            )
            prev = node.key

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source_id": source_id,
                "target_id": target_id,
                "distance": target.tag,
                "length": len(nodes) - 1,
                "steps": steps,
            },
            meta=meta,
        )

    @reports_load_errors
    def export_graphml(self, target: Path) -> ServiceResult:
        """Write the graph as GraphML to *target*."""
        g = self._workspace.graph
        try:
            write_graphml(g, target)
        except OSError as exc:
            return ServiceResult.fail(
                "export_graphml", "EXPORT_FAILED", str(exc), path=str(target)
            )
        return ServiceResult(
            ok=True,
            op="export_graphml",
            data={"path": str(target), "nodes": g.node_count, "edges": g.edge_count},
        )
