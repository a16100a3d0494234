"""
Graph operation modules for restructuring weighted graphs.
"""

from .partition import GraphPartitioner

__all__ = ['GraphPartitioner']
