"""Name/alias registry and relationship store.

Maps every key a unit can be referred to by (its own name and each alias it
provides) to the unit's canonical identity, and keeps the requirement and
suggestion lists each unit declared. Both are consulted repeatedly while a
resolution expands its work queue.
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, TypeVar

from dependy.exceptions import AliasConflictError, DuplicateUnitError

K = TypeVar("K", bound=Hashable)


class UnitRegistry(Generic[K]):
    """Key-to-identity mapping plus per-identity relationship lists.

    Registration is strict: an identity may be registered once, and an alias
    may be provided by one unit only. Checks run before anything is recorded,
    so a rejected registration leaves the registry unchanged.

    Thread safety: This class is NOT thread-safe. External synchronization is
    required for concurrent access.
    """

    def __init__(self) -> None:
        self._canonical: dict[K, K] = {}
        self._requirements: dict[K, tuple[K, ...]] = {}
        self._suggestions: dict[K, tuple[K, ...]] = {}
        self._aliases: dict[K, tuple[K, ...]] = {}

    @property
    def identities(self) -> list[K]:
        """Return all canonical identities in registration order."""
        return list(self._requirements)

    def __contains__(self, key: object) -> bool:
        return key in self._canonical

    def __len__(self) -> int:
        return len(self._requirements)

    def register(
        self,
        name: K,
        requirements: Iterable[K] = (),
        suggestions: Iterable[K] = (),
        provides: Iterable[K] = (),
    ) -> None:
        """Record a unit's identity, aliases and relationship lists.

        Args:
            name: Canonical identity of the unit.
            requirements: Keys of units this unit requires.
            suggestions: Keys of units this unit suggests.
            provides: Aliases this unit answers to.

        Raises:
            DuplicateUnitError: If ``name`` is already an identity or an alias.
            AliasConflictError: If an alias is already taken by another unit.
        """
        if name in self._canonical:
            raise DuplicateUnitError(name)

        aliases: list[K] = []
        for alias in provides:
            if alias == name or alias in aliases:
                continue
            owner = self._canonical.get(alias)
            if owner is not None:
                raise AliasConflictError(alias, owner, name)
            aliases.append(alias)

        self._canonical[name] = name
        for alias in aliases:
            self._canonical[alias] = name
        self._aliases[name] = tuple(aliases)
        self._requirements[name] = tuple(requirements)
        self._suggestions[name] = tuple(suggestions)

    def canonical(self, key: K) -> K | None:
        """Resolve a name or alias to its canonical identity.

        Returns:
            The canonical identity, or None if the key is unknown.
        """
        return self._canonical.get(key)

    def requirements_of(self, identity: K) -> tuple[K, ...] | None:
        """Return the declared requirements of a canonical identity, or None."""
        return self._requirements.get(identity)

    def suggestions_of(self, identity: K) -> tuple[K, ...] | None:
        """Return the declared suggestions of a canonical identity, or None."""
        return self._suggestions.get(identity)

    def aliases_of(self, identity: K) -> tuple[K, ...]:
        """Return the aliases a canonical identity provides (empty if unknown)."""
        return self._aliases.get(identity, ())
