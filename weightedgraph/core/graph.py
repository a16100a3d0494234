"""
Core graph data structure for directed, weighted graphs.

This module provides the fundamental adjacency structure and its mutations
without higher-level operations such as partitioning or analysis.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..classes.edge import pyedge
from ..classes.utils import check_not_none, check_weight, count_edges, render_adjacency

logger = logging.getLogger(__name__)


class WeightedGraph:
    """
    Core graph data structure for directed, weighted graphs.

    Each vertex maps to the ordered list of its outgoing edges. This class
    maintains the following invariants under every mutation:
    - A vertex is a key iff it has been created and not removed
    - Every edge target is also a key
    - No edge has a negative weight
    - At most one edge exists per ordered (source, target) pair
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.adjacency_list: Dict[Any, List[pyedge]] = {}

    # ========================================================================
    # VERTEX OPERATIONS
    # ========================================================================

    def create_vertex(self, vertex: Any) -> bool:
        """
        Add a vertex with no outgoing edges.

        Args:
            vertex: Hashable vertex value

        Returns:
            True if the vertex was added, False if it already existed

        Raises:
            InvalidArgumentError: If vertex is None
        """
        check_not_none(vertex, 'vertex')
        if vertex in self.adjacency_list:
            return False

        self.adjacency_list[vertex] = []
        logger.debug(f"Created vertex {vertex!r}")
        return True

    def is_vertex(self, vertex: Any) -> bool:
        """Check whether a vertex exists in the graph."""
        check_not_none(vertex, 'vertex')
        return vertex in self.adjacency_list

    def get_vertices(self) -> List[Any]:
        """
        Get a snapshot of all vertices in insertion order.

        Returns:
            List of vertices; later mutations of the graph do not affect it
        """
        return list(self.adjacency_list.keys())

    def get_vertex_count(self) -> int:
        return len(self.adjacency_list)

    def remove_vertex(self, vertex: Any) -> bool:
        """
        Remove a vertex and every edge that targets it.

        Args:
            vertex: Vertex to remove

        Returns:
            True if the vertex was removed, False if it did not exist

        Raises:
            InvalidArgumentError: If vertex is None
        """
        check_not_none(vertex, 'vertex')
        if vertex not in self.adjacency_list:
            return False

        del self.adjacency_list[vertex]

        removed_edges = 0
        for source, aEdge in self.adjacency_list.items():
            aEdge_kept = [edge for edge in aEdge if not edge.points_to(vertex)]
            if len(aEdge_kept) != len(aEdge):
                removed_edges += len(aEdge) - len(aEdge_kept)
                self.adjacency_list[source] = aEdge_kept

        logger.debug(f"Removed vertex {vertex!r} and {removed_edges} incoming edges")
        return True

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def create_edge(self, source: Any, target: Any, weight: int) -> bool:
        """
        Create an edge, or overwrite the weight of an existing one.

        Missing endpoints are created first, so the target of an edge always
        exists as a vertex. A negative weight leaves the graph untouched.

        Args:
            source: Vertex the edge starts from
            target: Vertex the edge points to
            weight: Non-negative integer weight

        Returns:
            True if the edge was created or updated, False for a negative weight

        Raises:
            InvalidArgumentError: If an argument is None or the weight is not an integer
        """
        check_not_none(source, 'source')
        check_not_none(target, 'target')
        check_weight(weight)

        if weight < 0:
            logger.debug(f"Rejected edge {source!r} -> {target!r} with negative weight {weight}")
            return False

        self.create_vertex(source)
        self.create_vertex(target)

        edge = self._find_edge(source, target)
        if edge is not None:
            edge.lWeight = weight
            logger.debug(f"Updated edge {source!r} -> {target!r} to weight {weight}")
        else:
            self.adjacency_list[source].append(pyedge(weight, target))
            logger.debug(f"Created edge {source!r} -> {target!r} with weight {weight}")

        return True

    def is_edge(self, source: Any, target: Any) -> bool:
        """Check whether source exists and has an edge pointing to target."""
        check_not_none(source, 'source')
        check_not_none(target, 'target')
        return self._find_edge(source, target) is not None

    def edge_cost(self, source: Any, target: Any) -> int:
        """
        Get the weight of the edge from source to target.

        Returns:
            The edge weight, or -1 if the source or the edge does not exist

        Raises:
            InvalidArgumentError: If an argument is None
        """
        check_not_none(source, 'source')
        check_not_none(target, 'target')

        edge = self._find_edge(source, target)
        if edge is None:
            return -1
        return edge.lWeight

    def remove_edge(self, source: Any, target: Any) -> bool:
        """
        Remove the edge from source to target.

        Returns:
            True if the edge was removed, False if the source or the edge does not exist

        Raises:
            InvalidArgumentError: If an argument is None
        """
        check_not_none(source, 'source')
        check_not_none(target, 'target')

        if self._find_edge(source, target) is None:
            return False

        self.adjacency_list[source] = [
            edge for edge in self.adjacency_list[source] if not edge.points_to(target)
        ]
        logger.debug(f"Removed edge {source!r} -> {target!r}")
        return True

    def get_edges(self) -> List[Tuple[Any, Any, int]]:
        """
        Get a snapshot of all edges.

        Returns:
            List of (source, target, weight) tuples in vertex then edge order
        """
        return [
            (source, edge.pVertex_end, edge.lWeight)
            for source, aEdge in self.adjacency_list.items()
            for edge in aEdge
        ]

    def get_edge_count(self) -> int:
        return count_edges(self.adjacency_list)

    def _find_edge(self, source: Any, target: Any) -> Optional[pyedge]:
        """Find the edge from source to target, or None."""
        for edge in self.adjacency_list.get(source, ()):
            if edge.points_to(target):
                return edge
        return None

    # ========================================================================
    # NEIGHBORHOOD QUERIES
    # ========================================================================

    def adjacent_vertices(self, vertex: Any) -> Optional[List[Any]]:
        """
        Get the successors of a vertex.

        Returns:
            Targets of the outgoing edges in edge order, or None if the
            vertex does not exist

        Raises:
            InvalidArgumentError: If vertex is None
        """
        check_not_none(vertex, 'vertex')
        if vertex not in self.adjacency_list:
            return None
        return [edge.pVertex_end for edge in self.adjacency_list[vertex]]

    def predecessors_of_vertex(self, vertex: Any) -> Optional[List[Any]]:
        """
        Get every vertex with an edge pointing to the given vertex.

        Returns:
            Predecessors in vertex order, or None if no edge targets the vertex

        Raises:
            InvalidArgumentError: If vertex is None
        """
        check_not_none(vertex, 'vertex')
        predecessors = [
            source
            for source, aEdge in self.adjacency_list.items()
            for edge in aEdge
            if edge.points_to(vertex)
        ]
        if not predecessors:
            return None
        return predecessors

    def get_sources(self) -> List[Any]:
        """Get source vertices with no incoming edges."""
        targets = {edge.pVertex_end for aEdge in self.adjacency_list.values() for edge in aEdge}
        return [vertex for vertex in self.adjacency_list if vertex not in targets]

    def get_sinks(self) -> List[Any]:
        """Get sink vertices with no outgoing edges."""
        return [vertex for vertex, aEdge in self.adjacency_list.items() if not aEdge]

    def clear(self):
        """Remove every vertex and edge."""
        self.adjacency_list.clear()
        logger.debug("Cleared graph")

    # ========================================================================
    # PYTHON PROTOCOL
    # ========================================================================

    def __len__(self):
        return len(self.adjacency_list)

    def __contains__(self, vertex):
        return vertex is not None and vertex in self.adjacency_list

    def __str__(self):
        return render_adjacency(self.adjacency_list)

    def __repr__(self):
        return (f"{type(self).__name__}(vertices={self.get_vertex_count()}, "
                f"edges={self.get_edge_count()})")
