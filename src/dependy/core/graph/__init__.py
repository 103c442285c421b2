"""Typed dependency DAG with cycle rejection and DOT export.

Submodules:
    models  -- EdgeKind, Edge
    dag     -- DependencyDag (node/edge insertion, reachability, parents)
    export  -- export_dot, to_dot
"""

from dependy.core.graph.models import Edge, EdgeKind
from dependy.core.graph.dag import DependencyDag
from dependy.core.graph.export import export_dot, to_dot

__all__ = [
    "DependencyDag",
    "Edge",
    "EdgeKind",
    "export_dot",
    "to_dot",
]
