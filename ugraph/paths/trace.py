"""
Backward path reconstruction along a distance gradient.

After a shortest-path pass every reached vertex carries its distance from
the origin. Walking from the destination to any neighbour one "step" closer
(as decided by the caller's predicate) eventually reaches the origin.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator, Mapping

from ugraph.graph.vertex import Vertex

# (current, neighbour, edge weight) -> True if neighbour is one step closer
StepRule = Callable[[Vertex, Vertex, float], bool]


def trace_back(
    vertices: Mapping[Hashable, Vertex],
    origin: Vertex,
    destination: Vertex,
    is_step: StepRule,
) -> list[Hashable]:
    """
    Return the elements from origin to destination following is_step.

    Among several qualifying neighbours the first in adjacency order wins.
    The walk never revisits a vertex; if a branch dead-ends (only possible
    when zero-weight edges tie distances) it backs up and tries the next
    candidate. Returns [] if no chain reaches the origin.
    """
    trail = [destination]
    seen = {destination}
    candidates = [_steps_from(vertices, destination, is_step)]

    while trail[-1] is not origin:
        for neighbor in candidates[-1]:
            if neighbor not in seen:
                seen.add(neighbor)
                trail.append(neighbor)
                candidates.append(_steps_from(vertices, neighbor, is_step))
                break
        else:
            trail.pop()
            candidates.pop()
            if not trail:
                return []

    return [vertex.element for vertex in reversed(trail)]


def _steps_from(
    vertices: Mapping[Hashable, Vertex],
    vertex: Vertex,
    is_step: StepRule,
) -> Iterator[Vertex]:
    for edge in vertex.edges.values():
        neighbor = vertices[edge.neighbor]
        if is_step(vertex, neighbor, edge.weight):
            yield neighbor
