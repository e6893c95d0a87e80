"""Random Extraction — remove and return one uniformly chosen element of a set.

Invariants:
    - Empty set: no mutation, returns `default` (absence is a normal outcome, not an error)
    - Non-empty set: exactly one element removed, len(s) decreases by exactly one
    - Index drawn uniformly from [0, len(s)), element taken at that position of the
      current iteration order
    - Same seed + same contents + same iteration order -> same element

Design Decisions:
    - Generator scoped to the call (random.Random(seed)) or injected by the caller,
      never the module-level random functions: reproducible without global state
    - `default` parameter: a set holding None stays distinguishable from an empty set
    - Receiver checked against MutableSet before anything runs: frozenset fails fast
    - Rejections logged at WARNING with error_code before raising
"""

import logging
import random
from collections.abc import MutableSet
from itertools import islice
from typing import TypeVar

from setkit.core.domain_types import E
from setkit.core.errors import ImmutableSetError, InvalidArgumentError, SetKitError

logger = logging.getLogger(__name__)

D = TypeVar("D")


def take_random(
    s: MutableSet[E],
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    default: D | None = None,
) -> E | D | None:
    """Remove a random element of s and return it.

    Returns `default` (None unless given) if s is empty.

    `seed` seeds a generator created for this call only; `rng` supplies a
    caller-owned generator instead. Passing both is an error.
    """
    error: SetKitError | None = None
    if not isinstance(s, MutableSet):
        error = ImmutableSetError(type(s).__name__, "take_random")
    elif seed is not None and rng is not None:
        error = InvalidArgumentError("take_random accepts seed or rng, not both", "take_random")
    if error is not None:
        logger.warning(
            "take_random rejected: %s", error.message,
            extra={"operation": "take_random", "error_code": error.code},
        )
        raise error

    size = len(s)
    if size == 0:
        return default

    generator = rng if rng is not None else random.Random(seed)
    index = generator.randrange(size)
    element = next(islice(s, index, None))
    s.remove(element)
    logger.debug(
        "take_random removed element at index %d", index,
        extra={"operation": "take_random", "set_size": size},
    )
    return element
