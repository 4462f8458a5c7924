"""Selection sort: repeatedly move the smallest remaining element forward."""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any

from .sorter import swap


class SelectionSort:
    """
    Always O(n^2), not stable.

    Ties resolve to the first minimum found by a left-to-right scan.
    """

    def sort(self, seq: MutableSequence[Any]) -> None:
        n = len(seq)
        for unsorted in range(n):
            smallest = unsorted
            for i in range(unsorted + 1, n):
                if seq[i] < seq[smallest]:
                    smallest = i
            if smallest != unsorted:
                swap(seq, unsorted, smallest)

    def __repr__(self) -> str:
        return "SelectionSort()"
