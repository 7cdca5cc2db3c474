"""
Shortest-path module.

Provides path searches over a graph's vertex table:
- shortest_path_unweighted: fewest edges (breadth-first layering)
- shortest_path_weighted: least total weight (Dijkstra)
- MinHeap: min-priority structure with decrease-key used by Dijkstra
"""

from ugraph.paths.dijkstra import shortest_path_weighted
from ugraph.paths.heap import MinHeap
from ugraph.paths.unweighted import shortest_path_unweighted

__all__ = ["shortest_path_unweighted", "shortest_path_weighted", "MinHeap"]
