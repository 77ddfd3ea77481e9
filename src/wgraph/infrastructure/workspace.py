"""Workspace — the snapshot file a CLI invocation reads and writes.

Loads lazily: commands that never touch the graph never read the file.
A missing snapshot is an empty graph; an unreadable one is an error the
service layer reports as ``LOAD_FAILED``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wgraph.domain.graph import WeightedGraph
from wgraph.infrastructure.snapshot import JsonSnapshotStore

if TYPE_CHECKING:
    from pathlib import Path

    from wgraph.config.settings import WGraphSettings


class SnapshotLoadError(Exception):
    """The workspace snapshot exists but could not be loaded."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Could not load graph snapshot: {path}")
        self.path = path


class Workspace:
    """Binds settings, a snapshot store, and the graph loaded from it."""

    def __init__(self, settings: WGraphSettings) -> None:
        self.settings = settings
        self.store = JsonSnapshotStore(
            indent=settings.snapshot.indent,
            atomic=settings.snapshot.atomic,
        )
        self._graph: WeightedGraph | None = None

    @property
    def path(self) -> Path:
        return self.settings.graph_path

    @property
    def graph(self) -> WeightedGraph:
        """The workspace graph, loaded on first access.

        Raises:
            SnapshotLoadError: The snapshot file exists but is unreadable.
        """
        if self._graph is None:
            if self.path.exists():
                loaded = self.store.load(self.path)
                if loaded is None:
                    raise SnapshotLoadError(self.path)
                self._graph = loaded
            else:
                self._graph = WeightedGraph()
        return self._graph

    def commit(self) -> bool:
        """Persist the in-memory graph to :attr:`path`."""
        return self.store.save(self.graph, self.path)
