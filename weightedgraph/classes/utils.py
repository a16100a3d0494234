"""
Utility functions for weightedgraph.

This module provides shared helpers used across the weightedgraph package,
including argument checks and the debug rendering of adjacency lists.
"""

import numbers
from typing import Any, Dict, List

from .edge import pyedge
from .exceptions import InvalidArgumentError


def check_not_none(value: Any, argument_name: str) -> None:
    """
    Reject a missing argument.

    Args:
        value: Argument value to check
        argument_name: Name reported in the error message

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(argument_name)


def check_weight(weight: Any, argument_name: str = 'weight') -> None:
    """
    Reject a missing or non-integer edge weight.

    Negative integers pass this check; they are a soft failure handled by
    the caller.

    Raises:
        InvalidArgumentError: If weight is None, a bool, or not an integer
    """
    check_not_none(weight, argument_name)
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise InvalidArgumentError(
            argument_name,
            f"Input argument '{argument_name}' must be an integer, got {type(weight).__name__}")


def render_adjacency(adjacency_list: Dict[Any, List[pyedge]]) -> str:
    """
    Render an adjacency list as the debug string.

    Each vertex renders as "<v>: " followed by "<v> -(<w>)-> <t>," for every
    outgoing edge and a trailing "| ".

    Args:
        adjacency_list: Mapping of vertex -> list of outgoing edges

    Returns:
        The concatenated rendering, empty for an empty graph
    """
    parts = []
    for vertex, aEdge in adjacency_list.items():
        parts.append(f"{vertex}: ")
        for edge in aEdge:
            parts.append(f"{vertex} -({edge.lWeight})-> {edge.pVertex_end},")
        parts.append("| ")
    return "".join(parts)


def count_edges(adjacency_list: Dict[Any, List[pyedge]]) -> int:
    """Count every edge stored in an adjacency list."""
    return sum(len(aEdge) for aEdge in adjacency_list.values())
