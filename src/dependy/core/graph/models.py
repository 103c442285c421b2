"""Edge types for the dependency DAG."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


class EdgeKind(Enum):
    """Relationship carried by an edge ``source -> target``.

    In every case the source is ordered before the target.
    """

    #: Target requires source; a failure of the source should prevent the
    #: target from running.
    REQUIRES = "requires"

    #: Target suggests source; ordering only.
    SUGGESTS = "suggests"

    #: Target follows source in the requested list; tie-break only.
    FOLLOWS = "follows"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Edge(Generic[K]):
    """A directed, typed edge between two canonical identities."""

    source: K
    target: K
    kind: EdgeKind
