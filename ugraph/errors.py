"""
Exception types raised by graph operations.

Each error also derives from the closest builtin, so callers catching
KeyError or ValueError keep working.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all graph errors."""


class ElementNotFound(GraphError, KeyError):
    """An operation referenced an element that is not in the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep plain messages instead
        return Exception.__str__(self)


class DuplicateElement(GraphError, ValueError):
    """An element was added twice."""


class InvalidEdge(GraphError, ValueError):
    """Self-loop, or the two elements are already adjacent."""


class EdgeNotFound(GraphError, KeyError):
    """Disconnect of two elements that are not adjacent."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class GraphBusy(GraphError, RuntimeError):
    """
    A second algorithmic pass, or a structural mutation, was attempted
    while a traversal or shortest-path computation owns the graph.
    """
