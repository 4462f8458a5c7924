"""List-literal construction helper."""

from __future__ import annotations
from typing import TypeVar

T = TypeVar("T")


def avec(*elements: T) -> list[T]:
    """
    Build a new list from the given elements, in order.

    ``avec()`` is an empty list, ``avec(42, 43)`` is ``[42, 43]``.
    """
    return list(elements)
