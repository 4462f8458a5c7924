"""
In-place quicksort with a first-element pivot.

Sub-ranges are tracked as (lo, hi) pairs on an explicit stack, so the
O(n) depth reached on sorted or reverse-sorted input never touches the
interpreter's recursion limit.
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any

from .sorter import swap


def _partition(seq: MutableSequence[Any], lo: int, hi: int) -> int:
    """
    Partition seq[lo:hi] around seq[lo] and return the pivot's final index.

    Afterwards everything in seq[lo:p] is <= pivot and everything in
    seq[p + 1:hi] is > pivot.
    """
    pivot = seq[lo]
    # Cursors run over the remainder seq[lo + 1:hi].
    left = lo + 1
    right = hi
    while left < right:
        if seq[left] <= pivot:
            left += 1
        else:
            right -= 1
            if seq[right] <= pivot:
                swap(seq, left, right)
                left += 1

    pivot_idx = left - 1
    swap(seq, lo, pivot_idx)
    return pivot_idx


def _quicksort(seq: MutableSequence[Any], lo: int, hi: int) -> None:
    pending = [(lo, hi)]
    while pending:
        lo, hi = pending.pop()
        n = hi - lo
        if n <= 1:
            continue
        if n == 2:
            if seq[lo] > seq[lo + 1]:
                swap(seq, lo, lo + 1)
            continue

        p = _partition(seq, lo, hi)
        pending.append((p + 1, hi))
        pending.append((lo, p))


class QuickSort:
    """
    O(n log n) average, O(n^2) worst case, not stable.

    Example:
        things = [7, 3, 1, 9, 4, 2, 8, 5, 6, 10]
        QuickSort().sort(things)
        # pivot 7 -> [5, 3, 1, 6, 4, 2] 7 [8, 9, 10], then each side
    """

    def sort(self, seq: MutableSequence[Any]) -> None:
        _quicksort(seq, 0, len(seq))

    def __repr__(self) -> str:
        return "QuickSort()"
