"""
Graph partitioning operations.

This module splits a graph into two by moving a subset of vertices, and the
edges between them, into a new graph.
"""

import logging
from typing import Any, Iterable, List

from ..classes.utils import check_not_none
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphPartitioner:
    """
    Handles graph partitioning operations.

    Membership in the new graph is edge-driven: a vertex of the subset moves
    only if it has at least one edge to another member of the subset. All
    edges of a moved vertex that leave the subset are dropped from both
    graphs.
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the partitioner.

        Args:
            graph: WeightedGraph instance to split
        """
        self.graph = graph

    def divide_graph(self, subset: Iterable[Any]) -> WeightedGraph:
        """
        Move the internally connected part of a vertex subset into a new graph.

        Subset members are processed in iteration order:
        1. An existing member is created in the new graph and each of its
           edges whose target is also a member is copied there.
        2. A member with no copied edge is not moved. It is stripped from the
           new graph if step 1 added it, and stays in this graph unchanged.
           A member already present in the new graph as the target of a
           copied edge stays there and also remains in this graph.
        3. Members with at least one copied edge are removed from this graph
           once all members have been processed, cascading to every edge
           that targets them.

        Args:
            subset: Iterable of vertices; members not in the graph are ignored

        Returns:
            New graph of the same type holding the moved vertices and edges

        Raises:
            InvalidArgumentError: If subset or any of its members is None
        """
        check_not_none(subset, 'subset')
        aVertex_subset = list(subset)
        for vertex in aVertex_subset:
            check_not_none(vertex, 'subset member')
        aVertex_subset = list(dict.fromkeys(aVertex_subset))
        subset_members = set(aVertex_subset)

        new_graph = type(self.graph)()
        aVertex_moved: List[Any] = []
        nEdge_copied_total = 0

        for vertex in aVertex_subset:
            if not self.graph.is_vertex(vertex):
                continue

            iFlag_added = new_graph.create_vertex(vertex)

            nEdge_copied = 0
            for edge in self.graph.adjacency_list[vertex]:
                if edge.pVertex_end in subset_members:
                    new_graph.create_edge(vertex, edge.pVertex_end, edge.lWeight)
                    nEdge_copied += 1

            if nEdge_copied == 0:
                if iFlag_added:
                    new_graph.remove_vertex(vertex)
                logger.debug(f"Vertex {vertex!r} has no edge inside the subset, kept in place")
            else:
                aVertex_moved.append(vertex)
                nEdge_copied_total += nEdge_copied

        for vertex in aVertex_moved:
            self.graph.remove_vertex(vertex)

        logger.info(f"Divided graph: moved {len(aVertex_moved)} of {len(aVertex_subset)} "
                    f"requested vertices with {nEdge_copied_total} edges")
        return new_graph
