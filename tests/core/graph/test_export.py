"""Tests for DOT export of the dependency DAG."""

from __future__ import annotations

import io

import pytest

from dependy.core.graph import DependencyDag, EdgeKind, export_dot, to_dot


def _build_pair() -> DependencyDag[str]:
    dag: DependencyDag[str] = DependencyDag()
    dag.add_node("first")
    dag.add_node("second")
    dag.add_edge("second", "first", EdgeKind.REQUIRES)
    return dag


class _BrokenSink:
    """A text sink whose writes always fail."""

    def write(self, text: str) -> int:
        raise OSError("disk full")


class TestExportDot:
    """Tests for export_dot / to_dot."""

    def test_exact_output(self) -> None:
        """Nodes first in registration order, then labeled edges."""
        assert to_dot(_build_pair()) == (
            'digraph "dependencies" {\n'
            '    "first";\n'
            '    "second";\n'
            '    "second" -> "first" [label="requires"];\n'
            "}\n"
        )

    def test_empty_graph(self) -> None:
        assert to_dot(DependencyDag()) == 'digraph "dependencies" {\n}\n'

    def test_edge_labels_per_kind(self) -> None:
        dag = _build_pair()
        dag.add_node("third")
        dag.add_edge("first", "third", EdgeKind.FOLLOWS)
        dag.add_edge("second", "third", EdgeKind.SUGGESTS)
        text = to_dot(dag)
        assert '"first" -> "third" [label="follows"];' in text
        assert '"second" -> "third" [label="suggests"];' in text

    def test_custom_graph_name(self) -> None:
        text = to_dot(_build_pair(), graph_name="suite")
        assert text.startswith('digraph "suite" {\n')

    def test_identifiers_are_escaped(self) -> None:
        """Quotes and backslashes inside identities are escaped."""
        dag: DependencyDag[str] = DependencyDag()
        dag.add_node('say "hi"')
        dag.add_node("C:\\tmp")
        text = to_dot(dag)
        assert '    "say \\"hi\\"";\n' in text
        assert '    "C:\\\\tmp";\n' in text

    def test_non_string_identities(self) -> None:
        dag: DependencyDag[int] = DependencyDag()
        dag.add_node(1)
        dag.add_node(2)
        dag.add_edge(1, 2, EdgeKind.REQUIRES)
        assert '"1" -> "2" [label="requires"];' in to_dot(dag)

    def test_writes_to_sink(self) -> None:
        sink = io.StringIO()
        export_dot(_build_pair(), sink)
        assert sink.getvalue() == to_dot(_build_pair())

    def test_sink_errors_propagate(self) -> None:
        with pytest.raises(OSError, match="disk full"):
            export_dot(_build_pair(), _BrokenSink())  # type: ignore[arg-type]
