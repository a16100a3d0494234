"""
Core data classes for weighted graph representation.

This module contains the fundamental data structures and helpers used
throughout the weightedgraph library.
"""

from .edge import pyedge
from .exceptions import InvalidArgumentError
from .graph_builders import GraphBuilders

__all__ = [
    'pyedge',
    'InvalidArgumentError',
    'GraphBuilders',
]
