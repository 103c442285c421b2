"""Dependency resolution: registry, expansion, ordering and outcomes.

Submodules:
    registry   -- UnitRegistry (name/alias map and relationship store)
    traversal  -- ancestor_order (iterative ancestors-first walk)
    results    -- ResultTracker (per-unit success/failure)
    engine     -- DependencyResolver (the public entry point)
"""

from dependy.core.resolver.registry import UnitRegistry
from dependy.core.resolver.results import ResultTracker
from dependy.core.resolver.traversal import ancestor_order
from dependy.core.resolver.engine import DependencyResolver

__all__ = [
    "DependencyResolver",
    "ResultTracker",
    "UnitRegistry",
    "ancestor_order",
]
