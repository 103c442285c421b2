"""Tests for DependencyDag construction, cycle rejection and parent queries.

Validates node insertion, duplicate edge handling, reachability-based cycle
rejection (including self-loops), and the deterministic ordering of parent
and child queries.
"""

from __future__ import annotations

import pytest

from dependy.core.graph import DependencyDag, Edge, EdgeKind
from dependy.exceptions import GraphError, NodeNotFoundError, WouldCycleError


# ===========================================================================
# Helpers
# ===========================================================================


def _make_dag(*nodes: str) -> DependencyDag[str]:
    """Build a DAG containing the given nodes and no edges."""
    dag: DependencyDag[str] = DependencyDag()
    for node in nodes:
        dag.add_node(node)
    return dag


def _build_diamond() -> DependencyDag[str]:
    """Build a -> b, a -> c, b -> d, c -> d (all REQUIRES)."""
    dag = _make_dag("a", "b", "c", "d")
    dag.add_edge("a", "b", EdgeKind.REQUIRES)
    dag.add_edge("a", "c", EdgeKind.REQUIRES)
    dag.add_edge("b", "d", EdgeKind.REQUIRES)
    dag.add_edge("c", "d", EdgeKind.REQUIRES)
    return dag


# ===========================================================================
# Nodes
# ===========================================================================


class TestNodes:
    """Tests for node insertion and membership."""

    def test_empty_graph(self) -> None:
        """A new graph has no nodes and no edges."""
        dag: DependencyDag[str] = DependencyDag()
        assert dag.node_count == 0
        assert dag.edge_count == 0
        assert dag.nodes() == []

    def test_nodes_in_insertion_order(self) -> None:
        """nodes() preserves insertion order."""
        dag = _make_dag("zeta", "alpha", "mu")
        assert dag.nodes() == ["zeta", "alpha", "mu"]
        assert len(dag) == 3

    def test_contains(self) -> None:
        dag = _make_dag("a")
        assert "a" in dag
        assert "b" not in dag

    def test_duplicate_node_rejected(self) -> None:
        """Adding the same node twice raises GraphError."""
        dag = _make_dag("a")
        with pytest.raises(GraphError):
            dag.add_node("a")
        assert dag.node_count == 1

    def test_non_string_keys(self) -> None:
        """Any hashable identity can key a node."""
        dag: DependencyDag[tuple[str, int]] = DependencyDag()
        dag.add_node(("build", 1))
        dag.add_node(("build", 2))
        dag.add_edge(("build", 1), ("build", 2), EdgeKind.REQUIRES)
        assert dag.parents(("build", 2)) == [("build", 1)]


# ===========================================================================
# Edges
# ===========================================================================


class TestEdges:
    """Tests for edge insertion and duplicate handling."""

    def test_add_edge_returns_true(self) -> None:
        dag = _make_dag("a", "b")
        assert dag.add_edge("a", "b", EdgeKind.REQUIRES) is True
        assert dag.edge_count == 1

    def test_duplicate_edge_is_noop(self) -> None:
        """Re-inserting an identical edge returns False and adds nothing."""
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.REQUIRES)
        assert dag.add_edge("a", "b", EdgeKind.REQUIRES) is False
        assert dag.edge_count == 1

    def test_different_kinds_between_same_pair(self) -> None:
        """Edges of different kinds may join the same pair."""
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.REQUIRES)
        dag.add_edge("a", "b", EdgeKind.SUGGESTS)
        assert dag.edge_count == 2
        assert list(dag.edges()) == [
            Edge("a", "b", EdgeKind.REQUIRES),
            Edge("a", "b", EdgeKind.SUGGESTS),
        ]

    def test_unknown_endpoint(self) -> None:
        """Edges to or from unknown nodes raise NodeNotFoundError."""
        dag = _make_dag("a")
        with pytest.raises(NodeNotFoundError) as exc_info:
            dag.add_edge("a", "ghost", EdgeKind.REQUIRES)
        assert exc_info.value.node == "ghost"
        with pytest.raises(KeyError):
            dag.add_edge("ghost", "a", EdgeKind.REQUIRES)

    def test_has_edge_any_kind(self) -> None:
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.FOLLOWS)
        assert dag.has_edge("a", "b")
        assert not dag.has_edge("b", "a")

    def test_has_edge_specific_kind(self) -> None:
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.FOLLOWS)
        assert dag.has_edge("a", "b", EdgeKind.FOLLOWS)
        assert not dag.has_edge("a", "b", EdgeKind.REQUIRES)


# ===========================================================================
# Cycle rejection
# ===========================================================================


class TestCycleRejection:
    """Tests for the on-insert reachability check."""

    def test_direct_cycle(self) -> None:
        """b -> a is rejected once a -> b exists."""
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.REQUIRES)
        with pytest.raises(WouldCycleError) as exc_info:
            dag.add_edge("b", "a", EdgeKind.SUGGESTS)
        err = exc_info.value
        assert (err.source, err.target, err.kind) == ("b", "a", EdgeKind.SUGGESTS)

    def test_transitive_cycle(self) -> None:
        """d -> a is rejected in the diamond a -> {b, c} -> d."""
        dag = _build_diamond()
        assert dag.would_cycle("d", "a")
        with pytest.raises(WouldCycleError):
            dag.add_edge("d", "a", EdgeKind.FOLLOWS)

    def test_self_loop(self) -> None:
        dag = _make_dag("a")
        with pytest.raises(WouldCycleError):
            dag.add_edge("a", "a", EdgeKind.REQUIRES)

    def test_rejected_edge_leaves_graph_unchanged(self) -> None:
        dag = _build_diamond()
        before = list(dag.edges())
        with pytest.raises(WouldCycleError):
            dag.add_edge("d", "b", EdgeKind.REQUIRES)
        assert list(dag.edges()) == before
        assert dag.parents("b") == ["a"]

    def test_parallel_edge_is_not_a_cycle(self) -> None:
        """A shortcut a -> d alongside a -> b -> d is allowed."""
        dag = _build_diamond()
        assert not dag.would_cycle("a", "d")
        assert dag.add_edge("a", "d", EdgeKind.FOLLOWS) is True

    def test_duplicate_check_precedes_cycle_check(self) -> None:
        """An existing edge is reported as a duplicate, never as a cycle."""
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.REQUIRES)
        assert dag.add_edge("a", "b", EdgeKind.REQUIRES) is False


# ===========================================================================
# Parents and children
# ===========================================================================


class TestNeighbours:
    """Tests for parent/child queries."""

    def test_parents_in_insertion_order(self) -> None:
        dag = _build_diamond()
        assert dag.parents("d") == ["b", "c"]
        assert dag.parents("a") == []

    def test_children_in_insertion_order(self) -> None:
        dag = _build_diamond()
        assert dag.children("a") == ["b", "c"]
        assert dag.children("d") == []

    def test_parents_are_distinct(self) -> None:
        """A parent joined by two kinds of edge is listed once."""
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.SUGGESTS)
        dag.add_edge("a", "b", EdgeKind.REQUIRES)
        assert dag.parents("b") == ["a"]
        assert len(dag.parent_edges("b")) == 2

    def test_parents_filtered_by_kind(self) -> None:
        dag = _make_dag("req", "sug", "target")
        dag.add_edge("sug", "target", EdgeKind.SUGGESTS)
        dag.add_edge("req", "target", EdgeKind.REQUIRES)
        assert dag.parents("target", EdgeKind.REQUIRES) == ["req"]
        assert dag.parents("target", EdgeKind.SUGGESTS) == ["sug"]
        assert dag.parents("target", EdgeKind.FOLLOWS) == []

    def test_child_edges(self) -> None:
        dag = _make_dag("a", "b")
        dag.add_edge("a", "b", EdgeKind.FOLLOWS)
        assert dag.child_edges("a") == [Edge("a", "b", EdgeKind.FOLLOWS)]

    def test_parents_of_unknown_node(self) -> None:
        dag = _make_dag("a")
        with pytest.raises(NodeNotFoundError):
            dag.parents("ghost")
