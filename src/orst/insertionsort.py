"""Insertion sort: grow a sorted prefix one element at a time."""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any

from .sorter import swap


class InsertionSort:
    """
    Stable, O(n^2) worst case and O(n) on already-sorted input.

    Each new element is swapped leftward while its left neighbour is
    strictly greater, so equal elements never pass each other.
    """

    def sort(self, seq: MutableSequence[Any]) -> None:
        # [sorted | unsorted]
        for unsorted in range(1, len(seq)):
            i = unsorted
            while i > 0 and seq[i - 1] > seq[i]:
                swap(seq, i - 1, i)
                i -= 1

    def __repr__(self) -> str:
        return "InsertionSort()"
