"""Directed acyclic graph with typed edges and on-insert cycle rejection.

Nodes are keyed directly by canonical identity. Every edge insertion runs a
reachability check (is the source already downstream of the target?) before
committing, so the graph is acyclic at all times. Iteration order over nodes,
edges and parents is insertion order, which makes every traversal built on
top of the graph deterministic.
"""

from __future__ import annotations

from collections import deque
from typing import Generic, Hashable, Iterator, TypeVar

from dependy.core.graph.models import Edge, EdgeKind
from dependy.exceptions import GraphError, NodeNotFoundError, WouldCycleError

K = TypeVar("K", bound=Hashable)


class DependencyDag(Generic[K]):
    """Adjacency-list DAG whose edges are tagged with an ``EdgeKind``.

    An edge ``A -> B`` means "A must be ordered before B": A is upstream
    (the dependency) and B is downstream (the dependent). Several edges of
    different kinds may join the same pair, but at most one edge of a given
    kind in a given direction.

    Thread safety: This class is NOT thread-safe. External synchronization is
    required for concurrent access.
    """

    def __init__(self) -> None:
        self._incoming: dict[K, list[Edge[K]]] = {}
        self._outgoing: dict[K, list[Edge[K]]] = {}
        self._edges: dict[tuple[K, K, EdgeKind], Edge[K]] = {}

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._incoming)

    @property
    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return len(self._edges)

    def nodes(self) -> list[K]:
        """Return all nodes in insertion order."""
        return list(self._incoming)

    def edges(self) -> Iterator[Edge[K]]:
        """Iterate over all edges in insertion order."""
        return iter(list(self._edges.values()))

    def __contains__(self, node: object) -> bool:
        return node in self._incoming

    def __len__(self) -> int:
        return len(self._incoming)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, node: K) -> None:
        """Add a node to the graph.

        Args:
            node: Canonical identity of the new node.

        Raises:
            GraphError: If the node already exists.
        """
        if node in self._incoming:
            raise GraphError(f"Node {node!r} is already in the graph")
        self._incoming[node] = []
        self._outgoing[node] = []

    def add_edge(self, source: K, target: K, kind: EdgeKind) -> bool:
        """Insert the edge ``source -> target`` of the given kind.

        Args:
            source: Upstream node (ordered first).
            target: Downstream node.
            kind: Relationship carried by the edge.

        Returns:
            True if the edge was inserted, False if an identical edge already
            existed (duplicate insertion is a no-op).

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph.
            WouldCycleError: If the edge would close a cycle. The graph is
                left unchanged.
        """
        self._require(source)
        self._require(target)
        if (source, target, kind) in self._edges:
            return False
        if self.would_cycle(source, target):
            raise WouldCycleError(source, target, kind)

        edge = Edge(source, target, kind)
        self._edges[(source, target, kind)] = edge
        self._outgoing[source].append(edge)
        self._incoming[target].append(edge)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_edge(
        self, source: K, target: K, kind: EdgeKind | None = None
    ) -> bool:
        """Return True if an edge ``source -> target`` exists.

        Args:
            source: Upstream node.
            target: Downstream node.
            kind: Restrict the check to one edge kind. None matches any kind.
        """
        if kind is not None:
            return (source, target, kind) in self._edges
        return any(
            edge.target == target for edge in self._outgoing.get(source, ())
        )

    def would_cycle(self, source: K, target: K) -> bool:
        """Return True if adding ``source -> target`` would close a cycle.

        That is the case exactly when the source is reachable from the
        target (a self-loop included). Uses BFS over outgoing edges.
        """
        if source == target:
            return True
        visited: set[K] = {target}
        queue: deque[K] = deque([target])
        while queue:
            current = queue.popleft()
            for edge in self._outgoing[current]:
                if edge.target == source:
                    return True
                if edge.target not in visited:
                    visited.add(edge.target)
                    queue.append(edge.target)
        return False

    def parent_edges(self, node: K) -> list[Edge[K]]:
        """Return the incoming edges of a node in insertion order."""
        self._require(node)
        return list(self._incoming[node])

    def child_edges(self, node: K) -> list[Edge[K]]:
        """Return the outgoing edges of a node in insertion order."""
        self._require(node)
        return list(self._outgoing[node])

    def parents(self, node: K, kind: EdgeKind | None = None) -> list[K]:
        """Return the distinct direct predecessors of a node.

        Args:
            node: The node whose parents to list.
            kind: Only follow edges of this kind. None follows every kind.

        Returns:
            Parent nodes in the order their first matching edge was inserted.
        """
        self._require(node)
        seen: dict[K, None] = {}
        for edge in self._incoming[node]:
            if kind is None or edge.kind is kind:
                seen.setdefault(edge.source)
        return list(seen)

    def children(self, node: K, kind: EdgeKind | None = None) -> list[K]:
        """Return the distinct direct successors of a node."""
        self._require(node)
        seen: dict[K, None] = {}
        for edge in self._outgoing[node]:
            if kind is None or edge.kind is kind:
                seen.setdefault(edge.target)
        return list(seen)

    def _require(self, node: K) -> None:
        if node not in self._incoming:
            raise NodeNotFoundError(node)
