"""
Shared graph fixtures.

Provides the small scenario graphs (path, weighted, split, tree), a seeded
random graph factory, an invariant checker that also inspects scratch
state, and a Floyd-Warshall reference for shortest-path lengths.
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest

from ugraph import Color, Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root (used to load scripts/route.py)."""
    return Path(__file__).parent.parent


@pytest.fixture
def path_graph() -> Graph:
    """A - B - C - D, default weights."""
    graph = Graph()
    for element in "ABCD":
        graph.add_vertex(element)
    graph.connect("A", "B")
    graph.connect("B", "C")
    graph.connect("C", "D")
    return graph


@pytest.fixture
def weighted_graph() -> Graph:
    """A-B:1, A-C:2, B-D:5, C-D:1 (lightest A->D is A, C, D with weight 3)."""
    graph = Graph()
    for element in "ABCD":
        graph.add_vertex(element)
    graph.connect("A", "B", 1)
    graph.connect("A", "C", 2)
    graph.connect("B", "D", 5)
    graph.connect("C", "D", 1)
    return graph


@pytest.fixture
def split_graph() -> Graph:
    """X - Y, with Z isolated."""
    graph = Graph()
    for element in "XYZ":
        graph.add_vertex(element)
    graph.connect("X", "Y")
    return graph


@pytest.fixture
def tree_graph() -> Graph:
    """
    A small tree:

        A
       / \\
      B   C
      |   |
      D   E
    """
    graph = Graph()
    for element in "ABCDE":
        graph.add_vertex(element)
    graph.connect("A", "B")
    graph.connect("A", "C")
    graph.connect("B", "D")
    graph.connect("C", "E")
    return graph


@pytest.fixture
def random_graph() -> Callable[[int], Graph]:
    """Return a factory building a reproducible random graph from a seed."""

    def build(seed: int, size: int = 8, density: float = 0.3) -> Graph:
        rng = random.Random(seed)
        graph = Graph()
        for i in range(size):
            graph.add_vertex(i)
        for a in range(size):
            for b in range(a + 1, size):
                if rng.random() < density:
                    graph.connect(a, b, rng.randint(1, 9))
        return graph

    return build


@pytest.fixture
def check_invariants() -> Callable[[Graph], None]:
    """Return an assertion helper for the structural invariants of a graph."""

    def check(graph: Graph) -> None:
        degrees = 0
        for a in graph:
            view = graph.vertex(a)
            assert view.marker is Color.NONE
            assert math.isinf(view.distance)
            assert a not in set(view.neighbors())
            for b in view.neighbors():
                assert graph.are_adjacent(b, a)
                assert graph.weight_of(a, b) == graph.weight_of(b, a)
            degrees += view.degree
        assert degrees == 2 * graph.edge_count

    return check


def reference_distances(graph: Graph, weighted: bool = True) -> tuple[dict, np.ndarray]:
    """
    All-pairs shortest distances by Floyd-Warshall.

    Returns:
        (element -> row index, distance matrix with inf for unreachable pairs)
    """
    index = {element: i for i, element in enumerate(graph)}
    dist = np.full((len(index), len(index)), np.inf)
    np.fill_diagonal(dist, 0.0)

    for a, i in index.items():
        for b in graph.neighbors(a):
            dist[i, index[b]] = graph.weight_of(a, b) if weighted else 1.0

    for k in range(len(index)):
        dist = np.minimum(dist, dist[:, k, None] + dist[None, k, :])

    return index, dist


@pytest.fixture
def reference() -> Callable[..., tuple[dict, np.ndarray]]:
    """Return the Floyd-Warshall reference used to check path lengths."""
    return reference_distances
