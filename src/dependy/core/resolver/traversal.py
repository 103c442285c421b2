"""Ancestor-ordered traversal of the dependency DAG.

Starting from a node, every direct predecessor is visited (recursively) before
the node itself is emitted. Successors are never pulled in, so only the
node's own ancestor chain ends up ahead of it in the output. The walk uses an
explicit stack so deep chains cannot exhaust the interpreter's recursion
limit.
"""

from __future__ import annotations

from typing import Hashable, Iterator, TypeVar

from dependy.core.graph.dag import DependencyDag

K = TypeVar("K", bound=Hashable)


def ancestor_order(
    graph: DependencyDag[K],
    start: K,
    seen: set[K],
    order: list[K],
) -> None:
    """Append ``start`` and its not-yet-seen ancestors to ``order``.

    Each ancestor is emitted after all of its own ancestors, and ``start``
    is emitted last. Parents are visited in edge-insertion order.

    Args:
        graph: The DAG to walk.
        start: Node to order.
        seen: Nodes already emitted (or in progress) during this resolution.
            Shared across calls so each node is emitted at most once. Updated
            in place.
        order: Output sequence. Appended to in place.
    """
    if start in seen:
        return
    seen.add(start)
    stack: list[tuple[K, Iterator[K]]] = [(start, iter(graph.parents(start)))]

    while stack:
        node, pending = stack[-1]
        for parent in pending:
            if parent not in seen:
                seen.add(parent)
                stack.append((parent, iter(graph.parents(parent))))
                break
        else:
            stack.pop()
            order.append(node)
