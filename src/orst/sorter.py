"""
The shared sorting contract.

Every sorter is a stateless object with a single ``sort`` method that
permutes a mutable sequence into non-decreasing order in place. Conformance
is structural: any object with a matching ``sort`` is a ``Sorter``.
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Sorter(Protocol):
    """
    In-place comparison sort.

    Implementations reorder ``seq`` by swapping positions only, so the
    multiset of elements is preserved. Elements must be totally ordered;
    a ``TypeError`` from comparing incomparable elements propagates as-is
    and may leave ``seq`` partially permuted.
    """

    def sort(self, seq: MutableSequence[Any]) -> None:
        ...


def swap(seq: MutableSequence[T], i: int, j: int) -> None:
    """Exchange the elements at positions i and j."""
    seq[i], seq[j] = seq[j], seq[i]
