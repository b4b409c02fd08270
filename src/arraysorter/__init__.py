"""arraysorter public package exports."""

from .algorithms import ALGORITHMS, SortAlgorithm, bubble_sort, insertion_sort, merge_sort, selection_sort
from .config import SorterSettings, load_settings
from .errors import InvalidArgumentError, SorterError, UnsupportedAlgorithmError
from .ordering import Comparable, Comparator, is_sorted, natural_compare
from .sorter import Sorter

__all__ = [
    "ALGORITHMS",
    "Comparable",
    "Comparator",
    "InvalidArgumentError",
    "SortAlgorithm",
    "Sorter",
    "SorterError",
    "SorterSettings",
    "UnsupportedAlgorithmError",
    "bubble_sort",
    "insertion_sort",
    "is_sorted",
    "load_settings",
    "merge_sort",
    "natural_compare",
    "selection_sort",
]
