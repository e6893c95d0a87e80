"""Domain Types — type variables and aliases shared by the set operations.

Invariants:
    - E is the element type of the receiving set, K the classifier key type
    - Record is read-only: pluck never mutates the records it projects
    - MISSING is the single "no value" marker; None-valued and absent keys both map to it

Design Decisions:
    - collections.abc.Set over builtin set in signatures: frozenset and dict views qualify
    - Sentinel object over Optional: a stored None and a missing key collapse to one case
"""

from collections.abc import Mapping
from typing import Any, Final, TypeVar


E = TypeVar("E")
K = TypeVar("K")

Record = Mapping[str, Any]


class _Missing:
    """Marker for "no value", distinct from every value a record can hold."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class FrozenRecord(Mapping[str, Any]):
    """Hashable, read-only record so string-keyed maps can live inside a set.

    Values must be hashable. Equality and hash follow the key/value pairs,
    so two records with the same fields collapse into one set element.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, *args: Any, **kwargs: Any):
        self._data: dict[str, Any] = dict(*args, **kwargs)
        self._hash: int | None = None

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"FrozenRecord({self._data!r})"


def lookup(record: Record, key: str) -> Any:
    """Value at key, or MISSING when the key is absent or holds None."""
    value = record.get(key, MISSING)
    return MISSING if value is None else value
