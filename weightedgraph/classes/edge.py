"""
Edge representation for the weighted directed graph.
"""

from typing import Any


class pyedge:
    """
    Directed, weighted edge owned by the outgoing list of its source vertex.

    The source vertex is implicit (it is the adjacency key holding the edge),
    so only the target vertex and the weight are stored. The weight is
    mutable so that re-creating an edge overwrites it in place.
    """

    __slots__ = ('pVertex_end', 'lWeight')

    def __init__(self, lWeight: int, pVertex_end: Any):
        """
        Initialize an edge.

        Args:
            lWeight: Non-negative integer weight
            pVertex_end: Target vertex the edge points to
        """
        self.lWeight = lWeight
        self.pVertex_end = pVertex_end

    def points_to(self, vertex: Any) -> bool:
        """Check whether this edge targets the given vertex."""
        return self.pVertex_end == vertex

    def __eq__(self, other):
        if not isinstance(other, pyedge):
            return NotImplemented
        return self.lWeight == other.lWeight and self.pVertex_end == other.pVertex_end

    def __repr__(self):
        return f"pyedge(lWeight={self.lWeight!r}, pVertex_end={self.pVertex_end!r})"
