"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import itertools
import random

import networkx as nx
import pytest

from graphwalk import Graph


@pytest.fixture
def abcd_graph() -> Graph:
    """A–B(1), B–C(2), A–C(4), C–D(1)."""
    g = Graph()
    g.add_undirected_edge("A", "B", 1)
    g.add_undirected_edge("B", "C", 2)
    g.add_undirected_edge("A", "C", 4)
    g.add_undirected_edge("C", "D", 1)
    return g


@pytest.fixture
def make_random_graph():
    """Factory for seeded connected graphs with small non-negative weights."""

    def _make(num_nodes: int, edge_probability: float = 0.4, seed: int = 0,
              max_weight: int = 9, connected: bool = True) -> Graph:
        rng = random.Random(seed)
        g = Graph()
        names = [f"n{i}" for i in range(num_nodes)]
        for name in names:
            g.get_or_create_node(name)

        for a, b in itertools.combinations(names, 2):
            if rng.random() < edge_probability:
                g.add_undirected_edge(a, b, rng.randint(0, max_weight))

        # spanning backbone so the graph is connected
        if connected:
            shuffled = list(names)
            rng.shuffle(shuffled)
            for a, b in zip(shuffled, shuffled[1:]):
                if not g.nodes[a].has_neighbor(g.nodes[b]):
                    g.add_undirected_edge(a, b, rng.randint(0, max_weight))
        return g

    return _make


@pytest.fixture
def to_networkx():
    """Convert a Graph into an equivalent networkx.Graph keyed by name."""

    def _convert(g: Graph) -> nx.Graph:
        h = nx.Graph()
        h.add_nodes_from(g.nodes)
        for e in g.edges():
            h.add_edge(e.origin.name, e.destination.name, weight=e.weight)
        return h

    return _convert


@pytest.fixture
def brute_force_costs():
    """Cheapest simple-path cost from `start` to every reachable node."""

    def _costs(g: Graph, start: str) -> dict:
        best = {start: 0}

        def walk(node, cost, on_path):
            for nbr, w in node.adj.items():
                if nbr.name in on_path:
                    continue
                total = cost + w
                if total < best.get(nbr.name, float("inf")):
                    best[nbr.name] = total
                walk(nbr, total, on_path | {nbr.name})

        walk(g.nodes[start], 0, {start})
        return best

    return _costs


@pytest.fixture
def brute_force_mst_weight():
    """Minimum total weight over every spanning tree, by enumeration."""

    def _weight(g: Graph) -> int:
        names = list(g.nodes)
        edges = [(e.origin.name, e.destination.name, e.weight) for e in g.edges()]
        best = None
        for subset in itertools.combinations(edges, len(names) - 1):
            h = nx.Graph()
            h.add_nodes_from(names)
            h.add_edges_from((a, b) for a, b, _ in subset)
            if nx.is_tree(h):
                total = sum(w for _, _, w in subset)
                best = total if best is None else min(best, total)
        return best

    return _weight
