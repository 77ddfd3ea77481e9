"""Randomized cross-checks against NetworkX, plus larger-graph timing bounds.

Thresholds are generous to avoid CI flakes while still catching an
accidental quadratic scan in the store or in Dijkstra.
"""

from __future__ import annotations

import random
import time

import networkx as nx
import pytest

from tests.conftest import graph_creator
from wgraph.domain.graph import WeightedGraph
from wgraph.infrastructure.networkx_bridge import to_networkx
from wgraph.services.algorithms import NO_PATH, GraphAlgorithms

# ── Thresholds (milliseconds) ────────────────────────────────────────

BUILD_MS = 10_000
PATH_MS = 5_000


@pytest.mark.parametrize("seed", range(5))
def test_distances_match_networkx(seed: int) -> None:
    g = graph_creator(60, 150, seed=seed)
    nxg = to_networkx(g)
    algo = GraphAlgorithms(g)
    rnd = random.Random(seed)

    for _ in range(30):
        src = rnd.randrange(60)
        dest = rnd.randrange(60)
        ours = algo.shortest_path_dist(src, dest)
        try:
            expected = nx.dijkstra_path_length(nxg, src, dest, weight="weight")
        except nx.NetworkXNoPath:
            assert ours == NO_PATH
            assert algo.shortest_path(src, dest) is None
            continue
        assert ours == pytest.approx(expected)
        path = algo.shortest_path(src, dest)
        assert path is not None
        assert path[0].key == src
        assert path[-1].key == dest


@pytest.mark.parametrize("seed", range(5))
def test_connectivity_matches_networkx(seed: int) -> None:
    g = graph_creator(30, 35, seed=seed)
    assert GraphAlgorithms(g).is_connected() is nx.is_connected(to_networkx(g))


def test_counts_after_removals() -> None:
    g = graph_creator(10, 30, seed=2)
    for a, b in [(0, 1), (2, 0), (2, 1)]:
        g.remove_edge(a, b)
    edges_left = g.edge_count
    degree = g.degree(2)
    g.remove_node(2)
    g.remove_node(2)
    assert g.node_count == 9
    assert g.edge_count == edges_left - degree


def test_planted_path_is_found() -> None:
    """A cheap chain through random nodes beats every expensive shortcut."""
    rnd = random.Random(1)
    n, path_size = 20_000, 2_000
    g = WeightedGraph()
    for key in range(n):
        g.add_node(key)

    chain = rnd.sample(range(n), path_size)
    total = 0.0
    for a, b in zip(chain, chain[1:]):
        w = rnd.uniform(0, 1.5)
        total += w
        g.connect(a, b, w)
    for _ in range(n * 2):
        a = rnd.randrange(n)
        b = rnd.randrange(n)
        if not g.has_edge(a, b):
            g.connect(a, b, rnd.uniform(total + 1, total * 3))

    algo = GraphAlgorithms(g)
    start = time.perf_counter()
    path = algo.shortest_path(chain[0], chain[-1])
    elapsed_ms = (time.perf_counter() - start) * 1000

    assert path is not None
    assert [node.key for node in path] == chain
    assert algo.shortest_path_dist(chain[0], chain[-1]) == pytest.approx(total)
    assert elapsed_ms < PATH_MS


def test_large_build() -> None:
    start = time.perf_counter()
    g = WeightedGraph()
    for key in range(100_000):
        g.add_node(key)
    for key in range(10, g.node_count):
        for j in range(10):
            g.connect(key - j, key, 0.1 * key)
    elapsed_ms = (time.perf_counter() - start) * 1000

    assert g.edge_count == (100_000 - 10) * 9
    assert elapsed_ms < BUILD_MS
