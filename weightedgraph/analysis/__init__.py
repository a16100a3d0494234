"""
Graph analysis modules for validating and summarizing weighted graphs.
"""

from .detection import GraphAnalyzer

__all__ = ['GraphAnalyzer']
