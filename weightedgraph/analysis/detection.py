"""
Structural analysis for weighted graphs.

This module provides consistency validation, degree statistics and matrix
views of the adjacency structure.
"""

import logging
import numbers
from typing import Any, Dict, List, Tuple
from collections import defaultdict

import numpy as np

from ..classes.edge import pyedge
from ..classes.utils import check_not_none
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphAnalyzer:
    """
    Analyzes the structure of a weighted graph.

    This class provides methods for:
    - Validating the adjacency invariants
    - Computing degree statistics
    - Exporting the adjacency matrix
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the graph analyzer.

        Args:
            graph: WeightedGraph instance to analyze
        """
        self.graph = graph

    def get_in_degree(self, vertex: Any) -> int:
        """Number of edges targeting the vertex, 0 if it does not exist."""
        check_not_none(vertex, 'vertex')
        return sum(
            1 for aEdge in self.graph.adjacency_list.values() for edge in aEdge
            if edge.points_to(vertex)
        )

    def get_out_degree(self, vertex: Any) -> int:
        """Number of edges leaving the vertex, 0 if it does not exist."""
        check_not_none(vertex, 'vertex')
        return len(self.graph.adjacency_list.get(vertex, ()))

    def _compute_degrees(self) -> Tuple[Dict[Any, int], Dict[Any, int]]:
        in_degree = defaultdict(int)
        out_degree = defaultdict(int)
        for source, aEdge in self.graph.adjacency_list.items():
            out_degree[source] = len(aEdge)
            for edge in aEdge:
                in_degree[edge.pVertex_end] += 1
        return in_degree, out_degree

    def validate_graph_structure(self) -> Dict[str, Any]:
        """
        Validate the internal consistency of the graph structure.

        Returns:
            Dictionary containing validation results
        """
        validation_results = {
            'is_valid': True,
            'issues': [],
            'statistics': {}
        }

        adjacency_list = self.graph.adjacency_list
        for source, aEdge in adjacency_list.items():
            if source is None:
                validation_results['issues'].append("None stored as a vertex")

            targets_seen = set()
            for edge in aEdge:
                if not isinstance(edge, pyedge):
                    validation_results['issues'].append(
                        f"Vertex {source!r} holds a non-edge value {edge!r}")
                    continue

                target = edge.pVertex_end
                if target not in adjacency_list:
                    validation_results['issues'].append(
                        f"Edge {source!r} -> {target!r} targets a missing vertex")

                weight = edge.lWeight
                if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
                    validation_results['issues'].append(
                        f"Edge {source!r} -> {target!r} has non-integer weight {weight!r}")
                elif weight < 0:
                    validation_results['issues'].append(
                        f"Edge {source!r} -> {target!r} has negative weight {weight}")

                if target in targets_seen:
                    validation_results['issues'].append(
                        f"Duplicate edge {source!r} -> {target!r}")
                targets_seen.add(target)

        if validation_results['issues']:
            validation_results['is_valid'] = False
            for issue in validation_results['issues']:
                logger.warning(f"Graph validation issue: {issue}")

        validation_results['statistics'] = {
            'total_vertices': self.graph.get_vertex_count(),
            'total_edges': self.graph.get_edge_count(),
            'issue_count': len(validation_results['issues'])
        }

        return validation_results

    def get_graph_statistics(self) -> Dict[str, Any]:
        """
        Get comprehensive statistics about the graph structure.

        Returns:
            Dictionary containing graph statistics
        """
        in_degree, out_degree = self._compute_degrees()
        vertices = self.graph.get_vertices()
        nVertex = len(vertices)

        stats = {
            'vertices': {
                'total': nVertex,
                'sources': len([v for v in vertices if in_degree[v] == 0]),
                'sinks': len([v for v in vertices if out_degree[v] == 0]),
                'isolated': len([v for v in vertices if in_degree[v] == 0 and out_degree[v] == 0])
            },
            'edges': {
                'total': self.graph.get_edge_count(),
                'total_weight': sum(weight for _, _, weight in self.graph.get_edges())
            },
            'connectivity': {
                'avg_out_degree': sum(out_degree.values()) / max(nVertex, 1),
                'avg_in_degree': sum(in_degree.values()) / max(nVertex, 1),
                'max_out_degree': max(out_degree.values()) if out_degree else 0,
                'max_in_degree': max(in_degree.values()) if in_degree else 0
            }
        }

        return stats

    def get_adjacency_matrix(self) -> Tuple[List[Any], np.ndarray]:
        """
        Build a dense adjacency matrix.

        Returns:
            Tuple of the vertex order and a square int64 matrix where entry
            [i, j] holds the weight of the edge vertices[i] -> vertices[j],
            or -1 where no edge exists
        """
        vertices = self.graph.get_vertices()
        index = {vertex: i for i, vertex in enumerate(vertices)}
        matrix = np.full((len(vertices), len(vertices)), -1, dtype=np.int64)

        for source, target, weight in self.graph.get_edges():
            matrix[index[source], index[target]] = weight

        logger.debug(f"Built {len(vertices)}x{len(vertices)} adjacency matrix")
        return vertices, matrix
