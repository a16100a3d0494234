"""
Main facade class for weighted graphs.

This module provides the pyweightedgraph class, the public entry point of the
package, which delegates to the core graph and the specialized modules.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np

from ..classes.graph_builders import GraphBuilders
from ..analysis.detection import GraphAnalyzer
from ..operations.partition import GraphPartitioner
from .graph import WeightedGraph


class pyweightedgraph:
    """
    Directed, weighted graph with vertex/edge mutation, adjacency queries and
    partitioning.

    Vertices are any hashable values except None. Each ordered vertex pair
    holds at most one edge with a non-negative integer weight. The graph is
    not thread-safe; guard the whole object with a single lock for concurrent
    use.
    """

    def __init__(self, edges: Optional[Iterable[Tuple[Any, Any, int]]] = None,
                 vertices: Optional[Iterable[Any]] = None,
                 graph: Optional[WeightedGraph] = None):
        """
        Initialize the graph, optionally from edges and extra vertices.

        Args:
            edges: Optional iterable of (source, target, weight) tuples
            vertices: Optional iterable of vertices to create before the edges
            graph: Optional existing WeightedGraph to wrap instead of a new one
        """
        self._graph = graph if graph is not None else WeightedGraph()
        self._builders = GraphBuilders(self._graph)
        self._analyzer = GraphAnalyzer(self._graph)
        self._partitioner = GraphPartitioner(self._graph)

        if edges is not None or vertices is not None:
            self._builders.build_graph(edges=edges, vertices=vertices)

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Any, Mapping[Any, int]]) -> 'pyweightedgraph':
        """Create a graph from a nested {source: {target: weight}} mapping."""
        instance = cls()
        instance._builders.build_from_adjacency(adjacency)
        return instance

    @property
    def adjacency_list(self):
        """Underlying mapping of vertex -> list of outgoing pyedge."""
        return self._graph.adjacency_list

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def create_vertex(self, vertex: Any) -> bool:
        """Add a vertex; False if it already exists."""
        return self._graph.create_vertex(vertex)

    def is_vertex(self, vertex: Any) -> bool:
        """Check whether a vertex exists."""
        return self._graph.is_vertex(vertex)

    def get_vertices(self) -> List[Any]:
        """Get a snapshot of all vertices in insertion order."""
        return self._graph.get_vertices()

    def get_vertex_count(self) -> int:
        return self._graph.get_vertex_count()

    def remove_vertex(self, vertex: Any) -> bool:
        """Remove a vertex and every edge targeting it; False if it does not exist."""
        return self._graph.remove_vertex(vertex)

    def create_edge(self, source: Any, target: Any, weight: int) -> bool:
        """Create or update an edge, creating missing endpoints; False for a negative weight."""
        return self._graph.create_edge(source, target, weight)

    def is_edge(self, source: Any, target: Any) -> bool:
        """Check whether an edge from source to target exists."""
        return self._graph.is_edge(source, target)

    def edge_cost(self, source: Any, target: Any) -> int:
        """Get the weight of an edge, or -1 if it does not exist."""
        return self._graph.edge_cost(source, target)

    def remove_edge(self, source: Any, target: Any) -> bool:
        """Remove an edge; False if it does not exist."""
        return self._graph.remove_edge(source, target)

    def get_edges(self) -> List[Tuple[Any, Any, int]]:
        """Get a snapshot of all edges as (source, target, weight) tuples."""
        return self._graph.get_edges()

    def get_edge_count(self) -> int:
        return self._graph.get_edge_count()

    def adjacent_vertices(self, vertex: Any) -> Optional[List[Any]]:
        """Get the successors of a vertex, or None if it does not exist."""
        return self._graph.adjacent_vertices(vertex)

    def predecessors_of_vertex(self, vertex: Any) -> Optional[List[Any]]:
        """Get the predecessors of a vertex, or None if no edge targets it."""
        return self._graph.predecessors_of_vertex(vertex)

    def get_sources(self) -> List[Any]:
        """Get source vertices with no incoming edges."""
        return self._graph.get_sources()

    def get_sinks(self) -> List[Any]:
        """Get sink vertices with no outgoing edges."""
        return self._graph.get_sinks()

    def clear(self):
        self._graph.clear()

    # ========================================================================
    # GRAPH CONSTRUCTION
    # ========================================================================

    def build_graph(self, edges: Optional[Iterable[Tuple[Any, Any, int]]] = None,
                    vertices: Optional[Iterable[Any]] = None) -> Dict[str, int]:
        """Add vertices and edges in bulk."""
        return self._builders.build_graph(edges=edges, vertices=vertices)

    def rebuild_graph(self, edges: Optional[Iterable[Tuple[Any, Any, int]]] = None,
                      vertices: Optional[Iterable[Any]] = None) -> Dict[str, int]:
        """Clear the graph and rebuild it from edges and vertices."""
        return self._builders.rebuild_graph(edges=edges, vertices=vertices)

    # ========================================================================
    # PARTITIONING OPERATIONS
    # ========================================================================

    def divide_graph(self, subset: Iterable[Any]) -> 'pyweightedgraph':
        """
        Move the internally connected part of a vertex subset into a new graph.

        A subset member moves only if it has at least one edge to another
        member; its edges leaving the subset are dropped from both graphs.

        Args:
            subset: Iterable of vertices to move

        Returns:
            New pyweightedgraph holding the moved vertices and edges
        """
        return type(self)(graph=self._partitioner.divide_graph(subset))

    # ========================================================================
    # ANALYSIS OPERATIONS
    # ========================================================================

    def get_in_degree(self, vertex: Any) -> int:
        return self._analyzer.get_in_degree(vertex)

    def get_out_degree(self, vertex: Any) -> int:
        return self._analyzer.get_out_degree(vertex)

    def validate_graph_structure(self) -> Dict[str, Any]:
        """Validate the adjacency invariants."""
        return self._analyzer.validate_graph_structure()

    def get_graph_statistics(self) -> Dict[str, Any]:
        """Get vertex, edge and degree statistics."""
        return self._analyzer.get_graph_statistics()

    def get_adjacency_matrix(self) -> Tuple[List[Any], np.ndarray]:
        """Get the vertex order and the dense weight matrix (-1 for no edge)."""
        return self._analyzer.get_adjacency_matrix()

    # ========================================================================
    # PYTHON PROTOCOL
    # ========================================================================

    def __len__(self):
        return len(self._graph)

    def __contains__(self, vertex):
        return vertex in self._graph

    def __str__(self):
        return str(self._graph)

    def __repr__(self):
        return (f"{type(self).__name__}(vertices={self.get_vertex_count()}, "
                f"edges={self.get_edge_count()})")
