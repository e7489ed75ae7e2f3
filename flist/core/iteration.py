from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, TypeVar

if TYPE_CHECKING:
    from flist.core.nodes import FList

T = TypeVar("T")


class FListIterator(Iterator[T]):
    """Single-pass forward cursor over an `FList`.

    The cursor is the only mutable state: each advance rebinds it to the
    current node's tail. Once it reaches `Nil` every further `next()` raises
    `StopIteration`.
    """

    def __init__(self, start: "FList[T]") -> None:
        self._cursor = start

    def has_next(self) -> bool:
        return not self._cursor.is_empty

    def __next__(self) -> T:
        cursor = self._cursor
        if cursor.is_empty:
            raise StopIteration
        self._cursor = cursor.tail
        return cursor.head

    def __iter__(self) -> "FListIterator[T]":
        return self
