"""Dependency resolver: registration, graph expansion and execution order.

``DependencyResolver`` owns the registry, the DAG and the result tracker.
Resolution runs in three phases:

1. **Expansion** -- a FIFO work queue seeded with the requested roots is
   drained; each canonical identity is expanded once, inserting a REQUIRES
   edge from every requirement and a SUGGESTS edge from every suggestion
   into it. An edge that would close a cycle aborts the call.
2. **Follows edges** -- consecutive roots are joined by a FOLLOWS edge where
   no other edge already orders the pair. FOLLOWS edges that would close a
   cycle are dropped, so declaration order never blocks resolution.
3. **Ordering** -- each root, in request order, is emitted after its
   not-yet-emitted ancestors (see ``ancestor_order``).

Edges committed before a failure are kept. A resolver that raised is still
usable, but its graph reflects the partial expansion.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Generic, Hashable, Iterable, TextIO, TypeVar

from dependy.core.graph.dag import DependencyDag
from dependy.core.graph.export import export_dot
from dependy.core.graph.models import EdgeKind
from dependy.core.resolver.registry import UnitRegistry
from dependy.core.resolver.results import ResultTracker
from dependy.core.resolver.traversal import ancestor_order
from dependy.core.units import Dependency
from dependy.exceptions import (
    CircularDependency,
    DependencyNotFound,
    RequirementNotFound,
    RequirementsNotFound,
    SuggestionNotFound,
    SuggestionsNotFound,
    WouldCycleError,
)

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class DependencyResolver(Generic[K]):
    """Builds a dependency DAG from unit declarations and orders it.

    Example::

        resolver = DependencyResolver()
        resolver.add_dependency(SimpleDependency("first", requirements=["deux"]))
        resolver.add_dependency(SimpleDependency("second", provides=["deux"]))
        resolver.resolve(["first"])   # ["second", "first"]

    Thread safety: This class is NOT thread-safe. Every public method reads
    and writes shared graph state; concurrent callers must hold a single
    lock around each call.
    """

    def __init__(self) -> None:
        self._graph: DependencyDag[K] = DependencyDag()
        self._registry: UnitRegistry[K] = UnitRegistry()
        self._results: ResultTracker[K] = ResultTracker()

    @property
    def graph(self) -> DependencyDag[K]:
        """The underlying DAG. Treat as read-only."""
        return self._graph

    @property
    def registry(self) -> UnitRegistry[K]:
        """The name/alias registry. Treat as read-only."""
        return self._registry

    @property
    def results(self) -> ResultTracker[K]:
        """Outcomes recorded through ``mark_success``/``mark_failure``."""
        return self._results

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_dependency(self, dependency: Dependency[K]) -> None:
        """Register a unit and create its graph node.

        Args:
            dependency: Any object exposing ``name``, ``requirements``,
                ``suggestions`` and ``provides``.

        Raises:
            DuplicateUnitError: If the unit's name is already registered or
                is an alias of another unit.
            AliasConflictError: If one of its aliases belongs to another unit.
        """
        name = dependency.name
        self._registry.register(
            name,
            requirements=dependency.requirements,
            suggestions=dependency.suggestions,
            provides=dependency.provides,
        )
        self._graph.add_node(name)
        logger.debug(
            "Registered %r (requires=%r, suggests=%r, provides=%r)",
            name,
            list(dependency.requirements),
            list(dependency.suggestions),
            list(dependency.provides),
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_dependencies(self, dependencies: Iterable[Dependency[K]]) -> list[K]:
        """Resolve a list of unit declarations by their names.

        See ``resolve`` for the contract.
        """
        return self.resolve([dep.name for dep in dependencies])

    def resolve(self, roots: Iterable[K]) -> list[K]:
        """Compute the execution order for the requested roots.

        Args:
            roots: Names or aliases to run, in declared order. Duplicates are
                allowed.

        Returns:
            Canonical identities in execution order. Every requirement or
            suggestion (direct or transitive) of a root precedes it.

        Raises:
            DependencyNotFound: A root is not a known name or alias.
            RequirementsNotFound: No requirement list is on file for a unit.
            SuggestionsNotFound: No suggestion list is on file for a unit.
            RequirementNotFound: A unit requires an unknown name.
            SuggestionNotFound: A unit suggests an unknown name.
            CircularDependency: A requires/suggests edge would close a cycle.
        """
        requested = list(roots)
        if not requested:
            return []

        self._expand(requested)
        self._add_follows_edges(requested)

        order: list[K] = []
        seen: set[K] = set()
        for root in requested:
            ancestor_order(self._graph, self._lookup(root), seen, order)

        logger.debug("Resolved %r -> %r", requested, order)
        return order

    def _expand(self, roots: list[K]) -> None:
        """Drain the work queue, inserting requires/suggests edges."""
        queue: deque[K] = deque(roots)
        expanded: set[K] = set()

        while queue:
            identity = self._lookup(queue.popleft())
            if identity in expanded:
                continue
            expanded.add(identity)

            requirements = self._registry.requirements_of(identity)
            if requirements is None:
                raise RequirementsNotFound(identity)
            for requirement in requirements:
                queue.append(requirement)
                source = self._registry.canonical(requirement)
                if source is None:
                    raise RequirementNotFound(identity, requirement)
                self._link(source, identity, EdgeKind.REQUIRES, requirement)

            suggestions = self._registry.suggestions_of(identity)
            if suggestions is None:
                raise SuggestionsNotFound(identity)
            for suggestion in suggestions:
                queue.append(suggestion)
                source = self._registry.canonical(suggestion)
                if source is None:
                    raise SuggestionNotFound(identity, suggestion)
                self._link(source, identity, EdgeKind.SUGGESTS, suggestion)

    def _link(self, source: K, identity: K, kind: EdgeKind, declared: K) -> None:
        try:
            if self._graph.add_edge(source, identity, kind):
                logger.debug("Edge %r -> %r (%s)", source, identity, kind)
        except WouldCycleError as exc:
            raise CircularDependency(identity, declared) from exc

    def _add_follows_edges(self, roots: list[K]) -> None:
        """Join consecutive roots with FOLLOWS edges where nothing orders them."""
        for previous_key, this_key in zip(roots, roots[1:]):
            previous = self._lookup(previous_key)
            current = self._lookup(this_key)
            if self._graph.has_edge(previous, current):
                continue
            try:
                self._graph.add_edge(previous, current, EdgeKind.FOLLOWS)
            except WouldCycleError:
                logger.debug(
                    "Skipping follows edge %r -> %r: would create a cycle",
                    previous,
                    current,
                )

    def _lookup(self, key: K) -> K:
        identity = self._registry.canonical(key)
        if identity is None:
            raise DependencyNotFound(key)
        return identity

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def required_parents_of(self, identity: K) -> list[K]:
        """Return the units with a direct REQUIRES edge into ``identity``.

        Suggests and follows edges are ignored. Accepts aliases.

        Raises:
            DependencyNotFound: If ``identity`` is not a known name or alias.
        """
        return self._graph.parents(self._lookup(identity), EdgeKind.REQUIRES)

    def parents_of(self, identity: K) -> list[K]:
        """Return the units with a direct edge of any kind into ``identity``."""
        return self._graph.parents(self._lookup(identity))

    def failed_requirements(self, identity: K) -> list[K]:
        """Return the direct requirements of ``identity`` marked as failed.

        A non-empty result means the unit should not run.
        """
        return [
            parent
            for parent in self.required_parents_of(identity)
            if self._results.outcome(parent) is False
        ]

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def mark_success(self, identity: K) -> None:
        self._results.mark_success(identity)

    def mark_failure(self, identity: K) -> None:
        self._results.mark_failure(identity)

    def reset_results(self) -> None:
        """Clear every recorded outcome. The graph is left untouched."""
        self._results.reset()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self, sink: TextIO, *, graph_name: str = "dependencies") -> None:
        """Write the current graph to ``sink`` in DOT format."""
        export_dot(self._graph, sink, graph_name=graph_name)
