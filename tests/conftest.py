"""Shared fixtures for weightedgraph tests."""

import pytest

from weightedgraph import pyweightedgraph


@pytest.fixture
def graph() -> pyweightedgraph:
    """Empty graph."""
    return pyweightedgraph()


@pytest.fixture
def chain_graph() -> pyweightedgraph:
    """Chain A -(1)-> B -(2)-> C -(3)-> D."""
    return pyweightedgraph([("A", "B", 1), ("B", "C", 2), ("C", "D", 3)])


@pytest.fixture
def diamond_graph() -> pyweightedgraph:
    """A fans out to B and C, which both point to D."""
    return pyweightedgraph([("A", "B", 4), ("A", "C", 5), ("B", "D", 6), ("C", "D", 7)])
