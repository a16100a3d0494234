"""
Core graph data structures and management.

This module contains the fundamental graph representation and the facade
that combines it with partitioning and analysis.
"""

from .graph import WeightedGraph
from .weightedgraph import pyweightedgraph

__all__ = ['WeightedGraph', 'pyweightedgraph']
