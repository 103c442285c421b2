"""DOT export of a dependency DAG.

Writes a Graphviz-compatible ``digraph`` with one statement per node
(registration order) and one labeled statement per edge (insertion order).
The output is meant for offline inspection; it has no effect on resolution.

Example::

    digraph "dependencies" {
        "first";
        "second";
        "second" -> "first" [label="requires"];
    }
"""

from __future__ import annotations

import io
from typing import Hashable, TextIO

from dependy.core.graph.dag import DependencyDag

_INDENT = "    "


def _quote(value: Hashable) -> str:
    """Render a node identity as a double-quoted DOT ID."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def export_dot(
    graph: DependencyDag,
    sink: TextIO,
    *,
    graph_name: str = "dependencies",
) -> None:
    """Write the graph to ``sink`` in DOT format.

    Args:
        graph: The DAG to export.
        sink: Any writable text stream. Its I/O errors propagate unchanged.
        graph_name: Name given to the ``digraph`` statement.
    """
    sink.write(f"digraph {_quote(graph_name)} {{\n")
    for node in graph.nodes():
        sink.write(f"{_INDENT}{_quote(node)};\n")
    for edge in graph.edges():
        sink.write(
            f"{_INDENT}{_quote(edge.source)} -> {_quote(edge.target)} "
            f"[label={_quote(edge.kind.value)}];\n"
        )
    sink.write("}\n")


def to_dot(graph: DependencyDag, *, graph_name: str = "dependencies") -> str:
    """Return the DOT rendering of the graph as a string."""
    buffer = io.StringIO()
    export_dot(graph, buffer, graph_name=graph_name)
    return buffer.getvalue()
