"""
Traversal module.

- walk / traverse: one traversal algorithm over a vertex table
- Queue / Stack: pending-set disciplines (breadth-first / depth-first)
"""

from ugraph.traversal.engine import traverse, walk
from ugraph.traversal.pending import PendingSet, Queue, Stack

__all__ = ["walk", "traverse", "PendingSet", "Queue", "Stack"]
