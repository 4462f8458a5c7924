"""
Generic entry point for picking a sorting algorithm at call time.

Usage:
    from orst import Algorithm, sort_with

    sort_with(items, Algorithm.QUICK)
    sort_with(items, "insertion")
    sort_with(items, MyCustomSorter())
"""

from __future__ import annotations
from collections.abc import MutableSequence
from enum import Enum
from typing import Any, Union
import logging

from .insertionsort import InsertionSort
from .quicksort import QuickSort
from .selectionsort import SelectionSort
from .sorter import Sorter

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    """Names of the built-in sorters."""

    INSERTION = "insertion"
    SELECTION = "selection"
    QUICK = "quick"


# Sorters are stateless; one shared instance each.
SORTERS: dict[Algorithm, Sorter] = {
    Algorithm.INSERTION: InsertionSort(),
    Algorithm.SELECTION: SelectionSort(),
    Algorithm.QUICK: QuickSort(),
}

Strategy = Union[Algorithm, str, Sorter, "type[Sorter]"]


def get_sorter(strategy: Strategy) -> Sorter:
    """
    Resolve a strategy selector to a sorter.

    Args:
        strategy: An ``Algorithm`` member, its string value, a sorter
                  class, or any object with a ``sort(seq)`` method.

    Raises:
        ValueError: ``strategy`` is a string naming no known algorithm.
        TypeError: ``strategy`` is neither a name nor a sorter, or is a
                   sequence (``list`` and friends have their own ``sort``).
    """
    if isinstance(strategy, str):
        try:
            return SORTERS[Algorithm(strategy)]
        except ValueError:
            known = ", ".join(a.value for a in Algorithm)
            raise ValueError(
                f"Unknown sorting algorithm {strategy!r} (expected one of: {known})"
            ) from None
    # Sequences such as list carry their own sort() with a different signature.
    if isinstance(strategy, MutableSequence) or (
        isinstance(strategy, type) and issubclass(strategy, MutableSequence)
    ):
        raise TypeError(
            f"Expected an Algorithm, algorithm name or Sorter, got sequence {strategy!r}"
        )
    if isinstance(strategy, type) and issubclass(strategy, Sorter):
        # Sorter classes take no constructor arguments.
        return strategy()
    if isinstance(strategy, Sorter) and callable(strategy.sort):
        return strategy
    raise TypeError(
        f"Expected an Algorithm, algorithm name or Sorter, got {type(strategy).__name__}"
    )


def sort_with(seq: MutableSequence[Any], strategy: Strategy) -> None:
    """Sort ``seq`` in place using the sorter selected by ``strategy``."""
    sorter = get_sorter(strategy)
    logger.debug("Sorting %d elements with %r", len(seq), sorter)
    sorter.sort(seq)
