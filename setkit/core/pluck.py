"""Field Projection — pull one named field out of every record in a collection.

Invariants:
    - Output order is the collection's iteration order
    - Missing key and None value are the same case: the record is omitted (not an error)
    - Falsy present values (0, "", False, []) are kept
    - Every element is checked to be a Mapping before any value is projected; a rejection is
      logged at WARNING with its error_code before raising

Design Decisions:
    - Accepts any iterable of mappings: builtin dicts are unhashable, so real callers
      hold records in frozen mappings inside sets, or in lists/tuples
    - Absence resolved through domain_types.lookup so None and missing collapse once
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from setkit.core.domain_types import MISSING, Record, lookup
from setkit.core.errors import NotARecordError

logger = logging.getLogger(__name__)


def pluck(records: Iterable[Record], key: str) -> list[Any]:
    """Plucks a list of values from records using a key.

    >>> products = [
    ...     {"sku": "FOO-1", "title": "Backpack", "price": 9.99},
    ...     {"sku": "FOO-2", "title": "Wallet", "price": 8.99},
    ... ]
    >>> pluck(products, "title")
    ['Backpack', 'Wallet']
    """
    items = list(records)
    for item in items:
        if not isinstance(item, Mapping):
            error = NotARecordError(type(item).__name__)
            logger.warning(
                "pluck rejected: %s", error.message,
                extra={"operation": "pluck", "error_code": error.code},
            )
            raise error

    values = [v for v in (lookup(item, key) for item in items) if v is not MISSING]
    omitted = len(items) - len(values)
    if omitted:
        logger.debug(
            "pluck omitted %d record(s) without %r", omitted, key,
            extra={"operation": "pluck", "set_size": len(items)},
        )
    return values
