"""Snapshot persistence — whole-graph save/load as a JSON document.

INVARIANT: ``load(save(g)) == g`` (structural equality) and the
modification counter survives the round trip.
INVARIANT: A failed load returns None and never touches any live graph.
Failures are logged and reported as ``False``/``None``, never raised.

Document layout (``version`` 1)::

    {"format": "wgraph-snapshot", "version": 1, "mode_count": 3,
     "nodes": [{"key": 0, "info": "", "tag": -1.0}, ...],
     "edges": [{"a": 0, "b": 1, "weight": 2.5}, ...]}

Each undirected edge is written once, with ``a < b``.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Literal, Protocol, Self

from pydantic import BaseModel, Field, ValidationError, model_validator

from wgraph.domain.graph import UNVISITED, NodeInfo, WeightedGraph

logger = logging.getLogger(__name__)

SNAPSHOT_FORMAT = "wgraph-snapshot"
SNAPSHOT_VERSION = 1


class SnapshotStore(Protocol):
    """Persistence collaborator used by the algorithms layer."""

    def save(self, graph: WeightedGraph, target: Path) -> bool: ...

    def load(self, source: Path) -> WeightedGraph | None: ...


# ---------------------------------------------------------------------------
# Document schema
# ---------------------------------------------------------------------------


class SnapshotNode(BaseModel):
    """One node record."""

    model_config = {"frozen": True}

    key: int
    info: str = ""
    tag: float = UNVISITED


class SnapshotEdge(BaseModel):
    """One undirected edge record."""

    model_config = {"frozen": True}

    a: int
    b: int
    weight: float = Field(ge=0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _no_self_loop(self) -> Self:
        if self.a == self.b:
            msg = f"self loop on node {self.a}"
            raise ValueError(msg)
        return self


class GraphSnapshot(BaseModel):
    """Complete serialized graph."""

    model_config = {"frozen": True}

    format: Literal["wgraph-snapshot"] = SNAPSHOT_FORMAT
    version: Literal[1] = SNAPSHOT_VERSION
    mode_count: int = Field(default=0, ge=0)
    nodes: list[SnapshotNode] = Field(default_factory=list)
    edges: list[SnapshotEdge] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self) -> Self:
        keys: set[int] = set()
        for node in self.nodes:
            if node.key in keys:
                msg = f"duplicate node key {node.key}"
                raise ValueError(msg)
            keys.add(node.key)

        pairs: set[frozenset[int]] = set()
        for edge in self.edges:
            if edge.a not in keys or edge.b not in keys:
                msg = f"edge ({edge.a}, {edge.b}) references an unknown node"
                raise ValueError(msg)
            pair = frozenset((edge.a, edge.b))
            if pair in pairs:
                msg = f"duplicate edge ({edge.a}, {edge.b})"
                raise ValueError(msg)
            pairs.add(pair)
        return self

    @classmethod
    def from_graph(cls, graph: WeightedGraph) -> GraphSnapshot:
        return cls(
            mode_count=graph.mode_count,
            nodes=[SnapshotNode(key=n.key, info=n.info, tag=n.tag) for n in graph.nodes()],
            edges=[SnapshotEdge(a=a, b=b, weight=w) for a, b, w in graph.edges()],
        )

    def to_graph(self) -> WeightedGraph:
        return WeightedGraph.restore(
            (NodeInfo(n.key, n.info, n.tag) for n in self.nodes),
            ((e.a, e.b, e.weight) for e in self.edges),
            mode_count=self.mode_count,
        )


# ---------------------------------------------------------------------------
# JSON store
# ---------------------------------------------------------------------------


class JsonSnapshotStore:
    """Read and write :class:`GraphSnapshot` documents on the filesystem.

    Args:
        indent: JSON indentation; None writes a single line.
        atomic: Write to a temporary sibling and rename over the target, so
            an interrupted save never truncates an existing snapshot.
    """

    def __init__(self, *, indent: int | None = 2, atomic: bool = True) -> None:
        self.indent = indent
        self.atomic = atomic

    def dumps(self, graph: WeightedGraph) -> str:
        """Serialize *graph* to a JSON string."""
        return GraphSnapshot.from_graph(graph).model_dump_json(indent=self.indent)

    def loads(self, raw: str | bytes) -> WeightedGraph:
        """Parse a JSON string into a new graph.

        Raises:
            pydantic.ValidationError: Malformed or inconsistent document.
        """
        return GraphSnapshot.model_validate_json(raw).to_graph()

    def save(self, graph: WeightedGraph, target: Path) -> bool:
        try:
            payload = self.dumps(graph)
            target.parent.mkdir(parents=True, exist_ok=True)
            if self.atomic:
                self._write_atomic(target, payload)
            else:
                target.write_text(payload, encoding="utf-8")
        except (OSError, ValueError) as exc:
            logger.warning("snapshot.save_failed path=%s error=%s", target, exc)
            return False

        logger.debug(
            "snapshot.saved path=%s nodes=%d edges=%d",
            target,
            graph.node_count,
            graph.edge_count,
        )
        return True

    def load(self, source: Path) -> WeightedGraph | None:
        try:
            raw = source.read_bytes()
            graph = self.loads(raw)
        except OSError as exc:
            logger.warning("snapshot.load_failed path=%s error=%s", source, exc)
            return None
        except ValidationError as exc:
            logger.warning(
                "snapshot.load_failed path=%s error=invalid snapshot (%s)",
                source,
                "; ".join(err["msg"] for err in exc.errors()),
            )
            return None

        logger.debug(
            "snapshot.loaded path=%s nodes=%d edges=%d",
            source,
            graph.node_count,
            graph.edge_count,
        )
        return graph

    @staticmethod
    def _write_atomic(target: Path, payload: str) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            tmp.replace(target)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
