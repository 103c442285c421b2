"""Dependy: deterministic execution ordering for interdependent units."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from dependy.core.graph import DependencyDag, Edge, EdgeKind, export_dot, to_dot
from dependy.core.resolver import (
    DependencyResolver,
    ResultTracker,
    UnitRegistry,
    ancestor_order,
)
from dependy.core.units import Dependency, SimpleDependency
from dependy.exceptions import (
    AliasConflictError,
    CircularDependency,
    DependencyNotFound,
    DependyError,
    DuplicateUnitError,
    GraphError,
    NodeNotFoundError,
    RegistrationError,
    RequirementNotFound,
    RequirementsNotFound,
    ResolutionError,
    SuggestionNotFound,
    SuggestionsNotFound,
    WouldCycleError,
)

__all__ = [
    "AliasConflictError",
    "CircularDependency",
    "Dependency",
    "DependencyDag",
    "DependencyNotFound",
    "DependencyResolver",
    "DependyError",
    "DuplicateUnitError",
    "Edge",
    "EdgeKind",
    "GraphError",
    "NodeNotFoundError",
    "RegistrationError",
    "RequirementNotFound",
    "RequirementsNotFound",
    "ResolutionError",
    "ResultTracker",
    "SimpleDependency",
    "SuggestionNotFound",
    "SuggestionsNotFound",
    "UnitRegistry",
    "WouldCycleError",
    "__version__",
    "ancestor_order",
    "export_dot",
    "to_dot",
]
