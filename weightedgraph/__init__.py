"""
weightedgraph - Directed Weighted Graph Library

A Python library providing an in-memory directed graph whose edges carry
non-negative integer weights. It supports vertex and edge mutation,
adjacency queries and an edge-driven partitioning of the graph.

Main Classes:
    pyweightedgraph: Main class for graph storage and queries (facade)
    WeightedGraph: Core adjacency structure
    pyedge: Edge representation (weight, target)

Example:
    >>> from weightedgraph import pyweightedgraph
    >>> graph = pyweightedgraph([("A", "B", 1), ("B", "C", 2)])
    >>> graph.edge_cost("A", "B")
    1
    >>> part = graph.divide_graph(["A", "B"])
"""

import logging

__version__ = "0.1.0"
__author__ = "weightedgraph developers"

from weightedgraph.classes.edge import pyedge
from weightedgraph.classes.exceptions import InvalidArgumentError
from weightedgraph.core.graph import WeightedGraph
from weightedgraph.core.weightedgraph import pyweightedgraph

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'pyweightedgraph',
    'WeightedGraph',
    'pyedge',
    'InvalidArgumentError',
]
