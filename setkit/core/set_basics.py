"""Set Wrappers — method-style access to every set operation on a wrapped set.

Invariants:
    - Wrappers hold a reference, not a copy: take_random mutates the wrapped set
    - Every method delegates to the free function of the same name (no second implementation)
    - Predicate arguments may be raw sets or other wrappers
    - len(), `in` and iteration delegate to the wrapped set

Design Decisions:
    - Thin adapter over subclassing set: frozenset and dict views wrap the same way
    - RecordSetBasics subclass carries pluck so only record collections expose it
"""

import random
from collections.abc import Callable, Iterator, Set
from dataclasses import dataclass
from typing import Any, Generic

from setkit.core import set_relations
from setkit.core.classify import classify
from setkit.core.domain_types import E, K, Record
from setkit.core.pluck import pluck
from setkit.core.take_random import take_random


def _unwrap(other: "Set | SetBasics") -> Set:
    return other.items if isinstance(other, SetBasics) else other


@dataclass(eq=False)
class SetBasics(Generic[E]):
    """Wraps a set and exposes the set operations as methods."""

    items: Set[E]

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, element: object) -> bool:
        return element in self.items

    def __iter__(self) -> Iterator[E]:
        return iter(self.items)

    # ─── Relations ───────────────────────────────────────────────

    def is_equal_to(self, other: "Set | SetBasics") -> bool:
        return set_relations.is_equal_to(self.items, _unwrap(other))

    def is_disjoint_with(self, other: "Set | SetBasics") -> bool:
        return set_relations.is_disjoint_with(self.items, _unwrap(other))

    def is_intersecting_with(self, other: "Set | SetBasics") -> bool:
        return set_relations.is_intersecting_with(self.items, _unwrap(other))

    def is_subset_of(self, other: "Set | SetBasics") -> bool:
        return set_relations.is_subset_of(self.items, _unwrap(other))

    def is_superset_of(self, other: "Set | SetBasics") -> bool:
        return set_relations.is_superset_of(self.items, _unwrap(other))

    def is_strict_subset_of(self, other: "Set | SetBasics") -> bool:
        return set_relations.is_strict_subset_of(self.items, _unwrap(other))

    def is_strict_superset_of(self, other: "Set | SetBasics") -> bool:
        return set_relations.is_strict_superset_of(self.items, _unwrap(other))

    # ─── Extraction and grouping ─────────────────────────────────

    def take_random(
        self,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        default: Any = None,
    ) -> Any:
        """Remove a random element of the wrapped set and return it (default if empty)."""
        return take_random(self.items, seed=seed, rng=rng, default=default)

    def classify(self, classifier: Callable[[E], K]) -> dict[K, set[E]]:
        return classify(self.items, classifier)


@dataclass(eq=False)
class RecordSetBasics(SetBasics[Record]):
    """SetBasics for sets whose elements are string-keyed records."""

    def pluck(self, key: str) -> list[Any]:
        """Values at key from every record holding a non-None value there."""
        return pluck(self.items, key)
