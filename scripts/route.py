#!/usr/bin/env python3
"""
Route CLI - build a small graph from the command line and query it.

Usage:
    python scripts/route.py --edge A B --edge B C --edge C D --origin A --destination D
    python scripts/route.py --edge A B 1 --edge A C 2 --edge B D 5 --edge C D 1 \\
        --origin A --destination D
    python scripts/route.py --vertex Z --edge X Y --origin X --destination Z

Each --edge takes two element names and an optional weight (default 1).
Vertices named by an edge are created automatically; --vertex adds an
isolated one.

Prints the breadth-first and depth-first visit orders from the origin and
both shortest paths (fewest edges, least weight) to the destination.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ugraph import Graph, GraphError  # noqa: E402
from ugraph.config import DEFAULT_EDGE_WEIGHT, LOG_LEVEL  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Traverse a graph and find shortest paths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--edge",
        nargs="+",
        action="append",
        default=[],
        metavar="ARG",
        help="Edge as: A B [WEIGHT] (repeatable)",
    )
    parser.add_argument(
        "--vertex",
        action="append",
        default=[],
        help="Isolated vertex to add (repeatable)",
    )
    parser.add_argument(
        "--origin",
        "-o",
        required=True,
        help="Element to start from",
    )
    parser.add_argument(
        "--destination",
        "-d",
        required=True,
        help="Element to reach",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def build_graph(edges: list[list[str]], isolated: list[str]) -> Graph:
    """Create a graph from parsed --edge and --vertex arguments."""
    graph = Graph()

    for element in isolated:
        if element not in graph:
            graph.add_vertex(element)

    for spec in edges:
        if len(spec) not in (2, 3):
            raise ValueError(f"--edge expects 'A B [WEIGHT]', got {' '.join(spec)!r}")
        a, b = spec[0], spec[1]
        weight = float(spec[2]) if len(spec) == 3 else DEFAULT_EDGE_WEIGHT
        for element in (a, b):
            if element not in graph:
                graph.add_vertex(element)
        graph.connect(a, b, weight)

    return graph


def path_weight(graph: Graph, path: list[str]) -> float:
    """Sum of edge weights along a path."""
    return sum(graph.weight_of(a, b) for a, b in zip(path, path[1:]))


def format_path(graph: Graph, path: list[str]) -> str:
    if not path:
        return "(no path)"
    return f"{' -> '.join(path)}  [{len(path) - 1} edges, weight {path_weight(graph, path):g}]"


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    try:
        graph = build_graph(args.edge, args.vertex)

        bfs_order: list[str] = []
        dfs_order: list[str] = []
        graph.breadth_first(args.origin, bfs_order.append)
        graph.depth_first(args.origin, dfs_order.append)

        fewest = graph.shortest_path_unweighted(args.origin, args.destination)
        lightest = graph.shortest_path_weighted(args.origin, args.destination)
    except (GraphError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print(f"GRAPH: {graph.vertex_count} vertices, {graph.edge_count} edges")
    print("=" * 60)
    print(f"{'Breadth-first':<16} {' '.join(bfs_order)}")
    print(f"{'Depth-first':<16} {' '.join(dfs_order)}")
    print()
    print(f"{args.origin} → {args.destination}")
    print(f"{'Fewest edges':<16} {format_path(graph, fewest)}")
    print(f"{'Least weight':<16} {format_path(graph, lightest)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
