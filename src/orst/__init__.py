"""
orst: textbook in-place comparison sorts plus small text and list helpers.

Provides insertion sort, selection sort and quicksort behind a common
``Sorter`` protocol, a dispatcher for choosing one at call time, a lazy
string splitter and a list-literal helper.

Usage:
    from orst import QuickSort, sort_with, Algorithm

    items = [4, 2, 3, 1]
    QuickSort().sort(items)              # items == [1, 2, 3, 4]

    sort_with(items, Algorithm.INSERTION)
    sort_with(items, "selection")
"""

from .sorter import Sorter, swap
from .insertionsort import InsertionSort
from .selectionsort import SelectionSort
from .quicksort import QuickSort
from .dispatch import Algorithm, SORTERS, get_sorter, sort_with
from .strsplit import CharDelimiter, Delimiter, StrDelimiter, StrSplit, until_char
from .vecmac import avec

__version__ = "0.1.0"
__all__ = [
    # Sorting contract
    "Sorter",
    "swap",
    # Algorithms
    "InsertionSort",
    "SelectionSort",
    "QuickSort",
    # Dispatch
    "Algorithm",
    "SORTERS",
    "get_sorter",
    "sort_with",
    # Text splitting
    "Delimiter",
    "StrDelimiter",
    "CharDelimiter",
    "StrSplit",
    "until_char",
    # Lists
    "avec",
]
