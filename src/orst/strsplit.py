"""
Lazy string splitting with pluggable delimiters.

``StrSplit`` walks a haystack once, yielding each piece as it is reached
instead of building the whole list up front like ``str.split``.

Usage:
    from orst import StrSplit

    list(StrSplit("a b c", " "))        # ['a', 'b', 'c']
    next(StrSplit("key=value", "="))    # 'key'
"""

from __future__ import annotations
from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class Delimiter(Protocol):
    """Locates the next delimiter occurrence in a string."""

    def find_next(self, s: str) -> tuple[int, int] | None:
        """Return the ``(start, end)`` span of the next match, or None."""
        ...


class StrDelimiter:
    """Matches a fixed, non-empty substring."""

    def __init__(self, text: str):
        if not text:
            raise ValueError("Delimiter text must not be empty")
        self.text = text

    def find_next(self, s: str) -> tuple[int, int] | None:
        start = s.find(self.text)
        if start < 0:
            return None
        return start, start + len(self.text)

    def __repr__(self) -> str:
        return f"StrDelimiter({self.text!r})"


class CharDelimiter:
    """Matches a single code point."""

    def __init__(self, char: str):
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        self.char = char

    def find_next(self, s: str) -> tuple[int, int] | None:
        start = s.find(self.char)
        if start < 0:
            return None
        return start, start + 1

    def __repr__(self) -> str:
        return f"CharDelimiter({self.char!r})"


def _as_delimiter(delimiter: str | Delimiter) -> Delimiter:
    if isinstance(delimiter, str):
        if len(delimiter) == 1:
            return CharDelimiter(delimiter)
        return StrDelimiter(delimiter)
    if isinstance(delimiter, Delimiter):
        return delimiter
    raise TypeError(
        f"Expected a str or Delimiter, got {type(delimiter).__name__}"
    )


class StrSplit(Iterator[str]):
    """
    Iterator over the pieces of ``haystack`` between delimiter matches.

    Yields one more piece than there are matches: a trailing delimiter
    produces a trailing empty string, and an empty haystack yields a single
    empty string. Once the final piece has been returned the iterator is
    exhausted.

    Args:
        haystack: The text to split.
        delimiter: A ``str`` (one code point becomes a ``CharDelimiter``,
                   longer text a ``StrDelimiter``) or any ``Delimiter``.
    """

    def __init__(self, haystack: str, delimiter: str | Delimiter):
        self._remainder: str | None = haystack
        self._delimiter = _as_delimiter(delimiter)

    def __iter__(self) -> StrSplit:
        return self

    def __next__(self) -> str:
        remainder = self._remainder
        if remainder is None:
            raise StopIteration

        span = self._delimiter.find_next(remainder)
        if span is None:
            self._remainder = None
            return remainder

        start, end = span
        self._remainder = remainder[end:]
        return remainder[:start]

    def __repr__(self) -> str:
        return f"StrSplit({self._remainder!r}, {self._delimiter!r})"


def until_char(s: str, c: str) -> str:
    """Return ``s`` up to (not including) the first ``c``, or all of ``s``."""
    return next(StrSplit(s, CharDelimiter(c)))
