"""In-place sorting algorithms selectable through :class:`SortAlgorithm`."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, MutableSequence

from .errors import InvalidArgumentError
from .ordering import Comparator, E, is_sorted, natural_compare

logger = logging.getLogger(__name__)


class SortAlgorithm(Enum):
    INSERTION = "insertion"
    BUBBLE = "bubble"
    SELECTION = "selection"
    MERGE = "merge"

    @classmethod
    def parse(cls, value: SortAlgorithm | str) -> SortAlgorithm:
        """Resolve a member from itself, its name or its value (case-insensitive)."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        choices = ", ".join(member.name for member in cls)
        raise InvalidArgumentError(f"Unknown sort algorithm {value!r}; expected one of {choices}")


SortFunction = Callable[[MutableSequence[E], Comparator], None]


def selection_sort(values: MutableSequence[E], compare: Comparator | None = None) -> None:
    """Swap the minimum of each remaining suffix into place."""

    compare = compare or natural_compare
    size = len(values)
    for i in range(size):
        min_idx = i
        for j in range(i + 1, size):
            if compare(values[j], values[min_idx]) < 0:
                min_idx = j
        values[i], values[min_idx] = values[min_idx], values[i]


def insertion_sort(values: MutableSequence[E], compare: Comparator | None = None) -> None:
    """Stable insertion sort; linear on input that is already sorted."""

    compare = compare or natural_compare
    for j in range(1, len(values)):
        key = values[j]
        i = j - 1
        while i >= 0 and compare(values[i], key) > 0:
            values[i + 1] = values[i]
            i -= 1
        values[i + 1] = key


def bubble_sort(values: MutableSequence[E], compare: Comparator | None = None) -> None:
    """Stable bubble sort that stops after the first pass without swaps."""

    compare = compare or natural_compare
    size = len(values)
    if is_sorted(values, compare):
        return
    for i in range(size):
        swapped = False
        for j in range(1, size - i):
            if compare(values[j - 1], values[j]) > 0:
                values[j - 1], values[j] = values[j], values[j - 1]
                swapped = True
        if not swapped:
            logger.debug("Bubble sort settled after %s pass(es)", i + 1)
            break


def merge_sort(values: MutableSequence[E], compare: Comparator | None = None) -> None:
    """Stable top-down merge sort over the whole sequence."""

    _merge_sort(values, 0, len(values) - 1, compare or natural_compare)


def _merge_sort(values: MutableSequence[E], left: int, right: int, compare: Comparator) -> None:
    if left < right:
        mid = (left + right) // 2
        _merge_sort(values, left, mid, compare)
        _merge_sort(values, mid + 1, right, compare)
        _merge(values, left, mid, right, compare)


def _merge(values: MutableSequence[E], left: int, mid: int, right: int, compare: Comparator) -> None:
    """Merge the sorted runs ``[left, mid]`` and ``[mid + 1, right]`` back into *values*."""

    lower = [values[idx] for idx in range(left, mid + 1)]
    upper = [values[idx] for idx in range(mid + 1, right + 1)]
    li = ri = 0
    out = left
    while li < len(lower) and ri < len(upper):
        # ties go to the lower run
        if compare(lower[li], upper[ri]) <= 0:
            values[out] = lower[li]
            li += 1
        else:
            values[out] = upper[ri]
            ri += 1
        out += 1
    for item in lower[li:]:
        values[out] = item
        out += 1
    for item in upper[ri:]:
        values[out] = item
        out += 1


ALGORITHMS: dict[SortAlgorithm, SortFunction] = {
    SortAlgorithm.INSERTION: insertion_sort,
    SortAlgorithm.BUBBLE: bubble_sort,
    SortAlgorithm.SELECTION: selection_sort,
    SortAlgorithm.MERGE: merge_sort,
}
