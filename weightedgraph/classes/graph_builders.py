"""
Graph builders module for weightedgraph.

This module contains utilities for populating a graph in bulk from edge
tuples or nested adjacency mappings. Every vertex and edge goes through the
regular graph operations, so the same argument rules apply. All input is
validated before the graph is touched.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .exceptions import InvalidArgumentError
from .utils import check_not_none, check_weight

logger = logging.getLogger(__name__)


class GraphBuilders:
    """
    Graph construction utilities.

    This class provides methods for building graph structures from edge
    lists and adjacency mappings, and for rebuilding an existing graph.
    """

    def __init__(self, graph):
        """
        Initialize graph builders with reference to the graph.

        Args:
            graph: The WeightedGraph instance to populate
        """
        self.graph = graph

    def build_graph(self, edges: Optional[Iterable[Tuple[Any, Any, int]]] = None,
                    vertices: Optional[Iterable[Any]] = None) -> Dict[str, int]:
        """
        Add vertices and edges to the graph.

        Vertices are created first, then edges in iteration order. Edges with
        a negative weight are skipped.

        Args:
            edges: Iterable of (source, target, weight) tuples
            vertices: Iterable of additional vertices

        Returns:
            Dictionary with 'vertices_created', 'edges_created' and 'edges_skipped' counts

        Raises:
            InvalidArgumentError: If a vertex is None or an edge tuple is malformed;
                the graph is left unchanged
        """
        aEdge_tuple, aVertex = self._prepare(edges, vertices)
        return self._apply(aEdge_tuple, aVertex)

    def build_from_adjacency(self, adjacency: Mapping[Any, Mapping[Any, int]]) -> Dict[str, int]:
        """
        Add vertices and edges from a nested {source: {target: weight}} mapping.

        Sources with an empty inner mapping are still created as vertices.

        Args:
            adjacency: Mapping of source -> mapping of target -> weight

        Returns:
            Same counts as build_graph

        Raises:
            InvalidArgumentError: If the mapping, a source or an inner mapping is
                None, or an inner value is not a mapping
        """
        check_not_none(adjacency, 'adjacency')
        edges = []
        for source, targets in adjacency.items():
            check_not_none(targets, 'adjacency')
            if not hasattr(targets, 'items'):
                raise InvalidArgumentError(
                    'adjacency',
                    f"Targets of {source!r} must be a mapping of target -> weight, "
                    f"got {type(targets).__name__}")
            edges.extend((source, target, weight) for target, weight in targets.items())
        return self.build_graph(edges=edges, vertices=list(adjacency.keys()))

    def rebuild_graph(self, edges: Optional[Iterable[Tuple[Any, Any, int]]] = None,
                      vertices: Optional[Iterable[Any]] = None) -> Dict[str, int]:
        """
        Completely rebuild the graph from a new set of edges.

        The input is validated before the graph is cleared, so invalid input
        leaves the current content in place.

        Args:
            edges: Iterable of (source, target, weight) tuples
            vertices: Iterable of additional vertices

        Returns:
            Same counts as build_graph
        """
        aEdge_tuple, aVertex = self._prepare(edges, vertices)

        self.graph.clear()
        counts = self._apply(aEdge_tuple, aVertex)

        logger.info(f"Rebuilt graph from {counts['edges_created']} edges")
        return counts

    def _prepare(self, edges, vertices) -> Tuple[List[Tuple[Any, Any, Any]], List[Any]]:
        """Materialise and check every edge tuple and vertex without mutating the graph."""
        aEdge_tuple = [] if edges is None else [self._unpack_edge(e) for e in edges]
        for source, target, weight in aEdge_tuple:
            check_not_none(source, 'source')
            check_not_none(target, 'target')
            check_weight(weight)

        aVertex = [] if vertices is None else list(vertices)
        for vertex in aVertex:
            check_not_none(vertex, 'vertex')

        return aEdge_tuple, aVertex

    def _apply(self, aEdge_tuple, aVertex) -> Dict[str, int]:
        counts = {'vertices_created': 0, 'edges_created': 0, 'edges_skipped': 0}

        nVertex_before = self.graph.get_vertex_count()

        for vertex in aVertex:
            self.graph.create_vertex(vertex)

        for source, target, weight in aEdge_tuple:
            if self.graph.create_edge(source, target, weight):
                counts['edges_created'] += 1
            else:
                counts['edges_skipped'] += 1

        counts['vertices_created'] = self.graph.get_vertex_count() - nVertex_before

        if counts['edges_skipped']:
            logger.warning(f"Skipped {counts['edges_skipped']} edges with negative weight")

        logger.debug(f"Built graph with {self.graph.get_vertex_count()} vertices and "
                     f"{self.graph.get_edge_count()} edges")
        return counts

    @staticmethod
    def _unpack_edge(edge_tuple: Any) -> Tuple[Any, Any, Any]:
        check_not_none(edge_tuple, 'edge')
        try:
            source, target, weight = edge_tuple
        except (TypeError, ValueError):
            raise InvalidArgumentError(
                'edge', f"Edge must be a (source, target, weight) tuple, got {edge_tuple!r}") from None
        return source, target, weight
