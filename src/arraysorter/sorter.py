"""Stateful wrapper that sorts a held sequence with a selected algorithm."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Generic

from .algorithms import ALGORITHMS, SortAlgorithm
from .config import SorterSettings, load_settings
from .errors import InvalidArgumentError, UnsupportedAlgorithmError
from .ordering import Comparator, E, natural_compare

logger = logging.getLogger(__name__)


def _check_sequence(sequence: object) -> None:
    if sequence is None:
        raise InvalidArgumentError("sequence must not be None")
    if not isinstance(sequence, MutableSequence):
        raise InvalidArgumentError(
            f"sequence must be a mutable sequence, got {type(sequence).__name__}"
        )


def _check_algorithm(algorithm: object) -> None:
    if algorithm is None:
        raise InvalidArgumentError("algorithm must not be None")
    if not isinstance(algorithm, SortAlgorithm):
        raise InvalidArgumentError(f"algorithm must be a SortAlgorithm, got {algorithm!r}")


class Sorter(Generic[E]):
    """Sorts a mutable sequence in place using one of :class:`SortAlgorithm`.

    The sequence and algorithm can be swapped between calls to :meth:`sort`,
    and the same instance may be reused any number of times. ``compare`` is an
    optional three-way comparator; by default elements are ordered by ``<``.
    """

    def __init__(
        self,
        sequence: MutableSequence[E],
        algorithm: SortAlgorithm = SortAlgorithm.INSERTION,
        *,
        compare: Comparator | None = None,
    ) -> None:
        _check_sequence(sequence)
        _check_algorithm(algorithm)
        self._sequence = sequence
        self._algorithm = algorithm
        self._compare = compare or natural_compare

    @classmethod
    def from_settings(
        cls,
        sequence: MutableSequence[E],
        settings: SorterSettings | None = None,
        *,
        compare: Comparator | None = None,
    ) -> Sorter[E]:
        settings = settings or load_settings()
        return cls(sequence, settings.default_algorithm, compare=compare)

    @property
    def algorithm(self) -> SortAlgorithm:
        return self._algorithm

    @algorithm.setter
    def algorithm(self, algorithm: SortAlgorithm) -> None:
        self.set_algorithm(algorithm)

    def set_algorithm(self, algorithm: SortAlgorithm) -> None:
        _check_algorithm(algorithm)
        logger.debug("Switching sort algorithm %s -> %s", self._algorithm.name, algorithm.name)
        self._algorithm = algorithm

    @property
    def sequence(self) -> MutableSequence[E]:
        return self._sequence

    @sequence.setter
    def sequence(self, sequence: MutableSequence[E]) -> None:
        self.set_sequence(sequence)

    def get_sequence(self) -> MutableSequence[E]:
        """Return the held sequence, sorted or not."""

        return self._sequence

    def set_sequence(self, sequence: MutableSequence[E]) -> None:
        _check_sequence(sequence)
        self._sequence = sequence

    def sort(self) -> None:
        """Sort the held sequence in place with the active algorithm."""

        sort_fn = ALGORITHMS.get(self._algorithm)
        if sort_fn is None:
            raise UnsupportedAlgorithmError(f"No implementation registered for {self._algorithm!r}")
        logger.debug("Sorting %s element(s) with %s", len(self._sequence), self._algorithm.name)
        sort_fn(self._sequence, self._compare)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self._algorithm.name}, size={len(self._sequence)})"
