"""Tests for edge-driven graph partitioning."""

import logging

import pytest

from weightedgraph import InvalidArgumentError, WeightedGraph, pyweightedgraph
from weightedgraph.operations import GraphPartitioner


def _adjacency(graph) -> dict:
    """Plain {vertex: [(target, weight), ...]} view for comparisons."""
    return {
        vertex: [(edge.pVertex_end, edge.lWeight) for edge in edges]
        for vertex, edges in graph.adjacency_list.items()
    }


# --- Documented scenarios ---


def test_divide_chain_moves_vertex_with_internal_edge(chain_graph: pyweightedgraph) -> None:
    """A moves with A -> B; B stays in both graphs because its only edge leaves the subset."""
    new_graph = chain_graph.divide_graph({"A", "B"})

    assert _adjacency(new_graph) == {"A": [("B", 1)], "B": []}
    assert _adjacency(chain_graph) == {"B": [("C", 2)], "C": [("D", 3)], "D": []}
    assert chain_graph.edge_cost("A", "B") == -1


@pytest.mark.parametrize("subset", [["A", "B"], ["B", "A"]])
def test_divide_result_independent_of_subset_order(chain_graph: pyweightedgraph, subset) -> None:
    new_graph = chain_graph.divide_graph(subset)
    assert new_graph.get_vertices() == ["A", "B"]
    assert new_graph.get_edges() == [("A", "B", 1)]


def test_divide_isolated_member_stays_in_original(chain_graph: pyweightedgraph) -> None:
    """A subset member without an edge to another member is not moved."""
    new_graph = chain_graph.divide_graph({"D"})

    assert new_graph.get_vertices() == []
    assert chain_graph.is_vertex("D") is True
    assert chain_graph.edge_cost("C", "D") == 3


# --- Edge cases ---


def test_divide_drops_cross_boundary_edges(diamond_graph: pyweightedgraph) -> None:
    """Edges from a moved vertex to outside the subset are removed from both graphs."""
    new_graph = diamond_graph.divide_graph(["A", "B"])

    assert _adjacency(new_graph) == {"A": [("B", 4)], "B": []}
    assert _adjacency(diamond_graph) == {"B": [("D", 6)], "C": [("D", 7)], "D": []}
    assert new_graph.edge_cost("A", "C") == -1


def test_divide_moves_every_member_with_internal_edges() -> None:
    graph = pyweightedgraph([("A", "B", 1), ("B", "A", 2), ("B", "C", 3), ("C", "A", 5)])

    new_graph = graph.divide_graph(["A", "B"])

    assert _adjacency(new_graph) == {"A": [("B", 1)], "B": [("A", 2)]}
    assert _adjacency(graph) == {"C": []}


def test_divide_self_loop_counts_as_internal_edge() -> None:
    graph = pyweightedgraph([("A", "A", 2), ("A", "B", 1)])

    new_graph = graph.divide_graph(["A"])

    assert _adjacency(new_graph) == {"A": [("A", 2)]}
    assert _adjacency(graph) == {"B": []}


def test_divide_ignores_unknown_members(chain_graph: pyweightedgraph) -> None:
    new_graph = chain_graph.divide_graph(["X", "A", "B"])
    assert new_graph.get_vertices() == ["A", "B"]
    assert chain_graph.is_vertex("X") is False


def test_divide_accepts_generator_and_duplicates(chain_graph: pyweightedgraph) -> None:
    new_graph = chain_graph.divide_graph(v for v in ["A", "B", "A"])
    assert new_graph.get_edges() == [("A", "B", 1)]
    assert chain_graph.get_vertices() == ["B", "C", "D"]


def test_divide_empty_subset(chain_graph: pyweightedgraph) -> None:
    new_graph = chain_graph.divide_graph([])
    assert len(new_graph) == 0
    assert chain_graph.get_edge_count() == 3


def test_divide_returns_independent_facade(chain_graph: pyweightedgraph) -> None:
    """The new graph is a full pyweightedgraph that does not share state with the original."""
    new_graph = chain_graph.divide_graph(["A", "B"])
    assert isinstance(new_graph, pyweightedgraph)

    new_graph.create_edge("B", "Z", 9)
    assert chain_graph.is_vertex("Z") is False
    assert chain_graph.edge_cost("B", "Z") == -1


def test_divide_leaves_both_graphs_valid(diamond_graph: pyweightedgraph) -> None:
    new_graph = diamond_graph.divide_graph(["A", "B", "D"])
    assert new_graph.validate_graph_structure()["is_valid"] is True
    assert diamond_graph.validate_graph_structure()["is_valid"] is True


# --- Argument checks ---


def test_divide_rejects_none_member_without_mutation(chain_graph: pyweightedgraph) -> None:
    with pytest.raises(InvalidArgumentError):
        chain_graph.divide_graph(["A", None, "B"])
    assert chain_graph.get_edge_count() == 3
    assert chain_graph.get_vertices() == ["A", "B", "C", "D"]


# --- Partitioner on the core graph ---


def test_partitioner_returns_core_graph_type() -> None:
    core = WeightedGraph()
    core.create_edge("A", "B", 1)

    new_core = GraphPartitioner(core).divide_graph(["A", "B"])

    assert type(new_core) is WeightedGraph
    assert new_core.get_edges() == [("A", "B", 1)]
    assert core.get_vertices() == ["B"]


def test_divide_logs_summary(chain_graph: pyweightedgraph, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="weightedgraph")
    chain_graph.divide_graph(["A", "B"])
    assert "moved 1 of 2 requested vertices with 1 edges" in caplog.text


class _LabelledGraph(pyweightedgraph):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.label = "labelled"


def test_divide_initialises_subclass_instances() -> None:
    """The graph returned by divide_graph goes through the subclass __init__."""
    graph = _LabelledGraph([("A", "B", 1)])

    new_graph = graph.divide_graph(["A", "B"])

    assert type(new_graph) is _LabelledGraph
    assert new_graph.label == "labelled"
    assert new_graph.get_edges() == [("A", "B", 1)]
