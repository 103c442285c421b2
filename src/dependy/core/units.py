"""Unit declarations consumed by the resolver.

A unit is anything with a name and three name sequences: the units it
requires, the units it suggests, and the aliases it provides. Test
frameworks and build tools can register their own objects as long as they
expose these four attributes; ``SimpleDependency`` covers the common case.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, Protocol, Sequence, TypeVar, runtime_checkable

K = TypeVar("K", bound=Hashable)


@runtime_checkable
class Dependency(Protocol[K]):
    """Structural interface of a unit declaration."""

    @property
    def name(self) -> K: ...

    @property
    def requirements(self) -> Sequence[K]: ...

    @property
    def suggestions(self) -> Sequence[K]: ...

    @property
    def provides(self) -> Sequence[K]: ...


@dataclass(frozen=True)
class SimpleDependency(Generic[K]):
    """A plain unit declaration.

    Attributes:
        name: Canonical identity of the unit.
        requirements: Names (or aliases) that must run before this unit, and
            whose failure should prevent it from running.
        suggestions: Names (or aliases) that should run before this unit.
        provides: Extra names under which other units may refer to this one.
    """

    name: K
    requirements: tuple[K, ...] = field(default_factory=tuple)
    suggestions: tuple[K, ...] = field(default_factory=tuple)
    provides: tuple[K, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the declaration immutable.
        object.__setattr__(self, "requirements", tuple(self.requirements))
        object.__setattr__(self, "suggestions", tuple(self.suggestions))
        object.__setattr__(self, "provides", tuple(self.provides))
