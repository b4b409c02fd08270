"""Three-way comparison helpers and the sortedness predicate."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, TypeVar

from .errors import InvalidArgumentError


class Comparable(Protocol):
    """Anything that defines a total order through ``<``."""

    def __lt__(self, other: Any, /) -> bool: ...


E = TypeVar("E", bound=Comparable)

Comparator = Callable[[Any, Any], int]


def natural_compare(a: Comparable, b: Comparable) -> int:
    """Return -1, 0 or 1 ordering *a* against *b* by their own ``<``."""

    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def is_sorted(sequence: Sequence[E], compare: Comparator | None = None) -> bool:
    """Return True iff *sequence* is non-decreasing under *compare*.

    Adjacent pairs are checked from the back of the sequence towards the front
    and the scan stops at the first pair that is out of order. Empty and
    single-element sequences are always sorted.
    """

    if sequence is None:
        raise InvalidArgumentError("sequence must not be None")
    compare = compare or natural_compare
    for idx in range(len(sequence) - 1, 0, -1):
        if compare(sequence[idx], sequence[idx - 1]) < 0:
            return False
    return True
