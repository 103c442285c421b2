"""Per-unit outcome bookkeeping.

The resolver never reads these outcomes itself. Callers record whether each
unit succeeded after running it, and consult the tracker (usually together
with ``DependencyResolver.required_parents_of``) to decide whether a later
unit should be skipped because something it requires failed.
"""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


class ResultTracker(Generic[K]):
    """Mapping of identity to last recorded outcome (True = success)."""

    def __init__(self) -> None:
        self._results: dict[K, bool] = {}

    def __contains__(self, identity: object) -> bool:
        return identity in self._results

    def __len__(self) -> int:
        return len(self._results)

    def mark_success(self, identity: K) -> None:
        self._results[identity] = True

    def mark_failure(self, identity: K) -> None:
        self._results[identity] = False

    def reset(self) -> None:
        """Forget every recorded outcome."""
        self._results.clear()

    def outcome(self, identity: K) -> bool | None:
        """Return the recorded outcome, or None if the identity is unmarked."""
        return self._results.get(identity)

    @property
    def succeeded(self) -> list[K]:
        """Identities whose last outcome was a success, in marking order."""
        return [k for k, ok in self._results.items() if ok]

    @property
    def failed(self) -> list[K]:
        """Identities whose last outcome was a failure, in marking order."""
        return [k for k, ok in self._results.items() if not ok]

    def as_dict(self) -> dict[K, bool]:
        """Return a copy of the outcome mapping."""
        return dict(self._results)
