"""Dependy exception hierarchy.

All public exceptions inherit from DependyError, giving callers a single
base class to catch when they want to handle any Dependy-specific failure
without swallowing unrelated errors.

Resolution failures are named after the condition they report
(``RequirementNotFound``, ``CircularDependency``, ...) and all derive from
``ResolutionError``. Every error carries the offending identity, or the
(dependent, dependency) pair, as attributes for diagnostics.
"""

from __future__ import annotations

from typing import Any


class DependyError(Exception):
    """Base exception for all Dependy errors."""


# ---------------------------------------------------------------------------
# Graph engine
# ---------------------------------------------------------------------------


class GraphError(DependyError):
    """Raised for structural failures inside the dependency DAG."""


class WouldCycleError(GraphError):
    """Raised when inserting an edge would close a cycle in the DAG."""

    def __init__(self, source: Any, target: Any, kind: Any) -> None:
        self.source = source
        self.target = target
        self.kind = kind
        super().__init__(
            f"Edge {source!r} -> {target!r} ({kind}) would create a cycle"
        )


class NodeNotFoundError(GraphError, KeyError):
    """Raised when an operation names a node the DAG does not contain."""

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"Node {node!r} is not in the graph")

    def __str__(self) -> str:
        return str(self.args[0])


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


class RegistrationError(DependyError):
    """Raised when a unit declaration cannot be registered."""


class DuplicateUnitError(RegistrationError):
    """Raised when a unit's identity is already registered or aliased."""

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Unit {name!r} is already registered")


class AliasConflictError(RegistrationError):
    """Raised when a unit provides an alias already owned by another unit."""

    def __init__(self, alias: Any, owner: Any, claimant: Any) -> None:
        self.alias = alias
        self.owner = owner
        self.claimant = claimant
        super().__init__(
            f"Alias {alias!r} of {claimant!r} is already provided by {owner!r}"
        )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class ResolutionError(DependyError):
    """Raised when dependency resolution fails.

    Covers unknown names, inconsistent unit declarations, and requirement
    or suggestion edges that would create a circular dependency.
    """


class RequirementsNotFound(ResolutionError):
    """No requirement list is on file for a unit that was never registered."""

    def __init__(self, identity: Any) -> None:
        self.identity = identity
        super().__init__(f"No requirements registered for {identity!r}")


class SuggestionsNotFound(ResolutionError):
    """No suggestion list is on file for a unit that was never registered."""

    def __init__(self, identity: Any) -> None:
        self.identity = identity
        super().__init__(f"No suggestions registered for {identity!r}")


class RequirementNotFound(ResolutionError):
    """A unit requires a name that was never registered or aliased."""

    def __init__(self, identity: Any, requirement: Any) -> None:
        self.identity = identity
        self.requirement = requirement
        super().__init__(
            f"{identity!r} requires {requirement!r}, which is not registered"
        )


class SuggestionNotFound(ResolutionError):
    """A unit suggests a name that was never registered or aliased."""

    def __init__(self, identity: Any, suggestion: Any) -> None:
        self.identity = identity
        self.suggestion = suggestion
        super().__init__(
            f"{identity!r} suggests {suggestion!r}, which is not registered"
        )


class DependencyNotFound(ResolutionError):
    """A requested root could not be resolved through the alias map."""

    def __init__(self, identity: Any) -> None:
        self.identity = identity
        super().__init__(f"Dependency {identity!r} is not registered")


class CircularDependency(ResolutionError):
    """A requires or suggests edge would close a cycle."""

    def __init__(self, identity: Any, dependency: Any) -> None:
        self.identity = identity
        self.dependency = dependency
        super().__init__(
            f"Circular dependency between {identity!r} and {dependency!r}"
        )
