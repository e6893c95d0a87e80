"""Classification — partition a set into groups keyed by a caller-supplied function.

Invariants:
    - Every input element lands in exactly one group: the one for classifier(element)
    - Union of all groups == input; groups are pairwise disjoint
    - Group sets are new objects; the input is never modified
    - Key order follows first encounter, which callers must not rely on

Design Decisions:
    - dict.setdefault over defaultdict: the result is a plain dict, no missing-key surprises
    - Classifier exceptions propagate unchanged
"""

import logging
from collections.abc import Callable, Iterable

from setkit.core.domain_types import E, K

logger = logging.getLogger(__name__)


def classify(s: Iterable[E], classifier: Callable[[E], K]) -> dict[K, set[E]]:
    """Group all elements of s with the same value for classifier.

    >>> classify({"aaa", "bbb", "cc", "a", "bb"}, len) == {
    ...     1: {"a"}, 2: {"cc", "bb"}, 3: {"aaa", "bbb"},
    ... }
    True
    """
    groups: dict[K, set[E]] = {}
    for element in s:
        groups.setdefault(classifier(element), set()).add(element)
    logger.debug(
        "classify produced %d group(s)", len(groups),
        extra={"operation": "classify", "group_count": len(groups)},
    )
    return groups
