"""Set Relations — equality, subset/superset and overlap predicates between two sets.

Invariants:
    - Pure functions: neither argument is mutated
    - Total over any pair of collections.abc.Set values (set, frozenset, dict views)
    - The empty set is a subset of every set (itself included), equal only to
      another empty set, and disjoint from every set (itself included)
    - is_disjoint_with(a, b) == not is_intersecting_with(a, b), always

Design Decisions:
    - Cardinality fast-reject before containment: containment over an arbitrary
      Set is linear, the length check is O(1)
    - Containment walks the argument that must be contained and probes the other,
      so cost is bounded by the smaller side once lengths pass the check
    - Overlap iterates the smaller set: O(min(|a|, |b|)) without building an intersection
"""

from collections.abc import Set


def _contains_all(container: Set, items: Set) -> bool:
    return all(item in container for item in items)


def is_equal_to(a: Set, b: Set) -> bool:
    """True if a and b contain exactly the same elements.

    >>> is_equal_to({"a", "b", "c"}, {"b", "a", "c"})
    True
    >>> is_equal_to({"a", "b", "c"}, {"a", "b"})
    False
    """
    return len(a) == len(b) and _contains_all(b, a)


def is_disjoint_with(a: Set, b: Set) -> bool:
    """True if a and b have no elements in common.

    >>> is_disjoint_with({"a", "b", "c"}, {"d", "e", "f"})
    True
    >>> is_disjoint_with({"a", "b", "c"}, {"d", "e", "b"})
    False
    """
    smaller, larger = (a, b) if len(a) <= len(b) else (b, a)
    return not any(item in larger for item in smaller)


def is_intersecting_with(a: Set, b: Set) -> bool:
    """True if a and b have at least one element in common.

    >>> is_intersecting_with({"a", "b", "c"}, {"d", "e", "b"})
    True
    """
    return not is_disjoint_with(a, b)


def is_subset_of(a: Set, b: Set) -> bool:
    """True if every element of a is contained in b.

    >>> is_subset_of({"a", "b", "c"}, {"a", "b", "c", "d"})
    True
    >>> is_subset_of({"a", "b", "c"}, {"a", "b", "f"})
    False
    """
    return len(a) <= len(b) and _contains_all(b, a)


def is_superset_of(a: Set, b: Set) -> bool:
    """True if every element of b is contained in a."""
    return len(a) >= len(b) and _contains_all(a, b)


def is_strict_subset_of(a: Set, b: Set) -> bool:
    """True if a is a subset of b and b has at least one element a lacks."""
    return len(a) < len(b) and _contains_all(b, a)


def is_strict_superset_of(a: Set, b: Set) -> bool:
    """True if a is a superset of b and a has at least one element b lacks."""
    return len(a) > len(b) and _contains_all(a, b)
