"""Shared pytest fixtures and test helpers for wgraph tests."""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from wgraph.config.settings import WGraphSettings
from wgraph.domain.graph import WeightedGraph
from wgraph.infrastructure.workspace import Workspace


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``WGRAPH_*`` variables from the outer shell out of every test."""
    for name in list(os.environ):
        if name.startswith("WGRAPH_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo ``configure_logging`` calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    wg = logging.getLogger("wgraph")
    wg_level = wg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    wg.setLevel(wg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> WGraphSettings:
    """Settings rooted at a temp directory with no config file."""
    return WGraphSettings.from_cli(workspace_root=tmp_path)


@pytest.fixture
def workspace(settings: WGraphSettings) -> Workspace:
    """Workspace whose snapshot lives at ``tmp_path / graph.json``."""
    return Workspace(settings)


@pytest.fixture
def _isolated_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated snapshot.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes. Tests that need the path can request ``tmp_path`` too.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_graph(
    edges: list[tuple[int, int, float]],
    *,
    nodes: int | list[int] | None = None,
) -> WeightedGraph:
    """Build a graph from ``(a, b, weight)`` triples.

    *nodes* adds extra keys (``range(nodes)`` when an int); endpoints of the
    edges are always added.
    """
    g = WeightedGraph()
    keys = range(nodes) if isinstance(nodes, int) else (nodes or [])
    for key in keys:
        g.add_node(key)
    for a, b, _ in edges:
        g.add_node(a)
        g.add_node(b)
    for a, b, weight in edges:
        g.connect(a, b, weight)
    return g


def graph_creator(v: int, e: int, seed: int) -> WeightedGraph:
    """Random graph with *v* nodes and exactly *e* edges (weights in [0, 10))."""
    rnd = random.Random(seed)
    g = WeightedGraph()
    for key in range(v):
        g.add_node(key)
    max_edges = v * (v - 1) // 2
    assert e <= max_edges, "too many edges requested"
    while g.edge_count < e:
        a = rnd.randrange(v)
        b = rnd.randrange(v)
        if a != b and not g.has_edge(a, b):
            g.connect(a, b, round(rnd.random() * 10, 3))
    return g
