from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

import numpy as np

from flist import config as fl_config
from flist.core.iteration import FListIterator

if TYPE_CHECKING:
    from flist.algo.registry import TraversalKernels

T = TypeVar("T")
U = TypeVar("U")


def _kernels() -> "TraversalKernels":
    # algo imports the node types, so resolve it on first use
    from flist.algo import get_kernels

    return get_kernels()


class FList(Generic[T]):
    """Persistent singly-linked list with exactly two variants, `Nil` and `Cons`."""

    def __new__(cls, *args: Any, **kwargs: Any) -> "FList[T]":
        if cls is FList:
            raise TypeError("FList is closed; construct Nil or Cons instead.")
        return super().__new__(cls)

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    @property
    def size(self) -> int:
        """Element count, recomputed on every access."""

        return _kernels().size(self)

    def map(self, f: Callable[[T], U]) -> "FList[U]":
        return _kernels().map(self, f)

    def filter(self, f: Callable[[T], bool]) -> "FList[T]":
        return _kernels().filter(self, f)

    def fold(self, base: U, f: Callable[[U, T], U]) -> U:
        """Reduce the list, combining the last element first and the head last.

        ``flist_of(x1, x2, x3).fold(b, f) == f(f(f(b, x3), x2), x1)``.
        """

        return _kernels().fold(self, base, f)

    def reverse(self) -> "FList[T]":
        return _kernels().reverse(self)

    def prepend(self, value: T) -> "FList[T]":
        return Cons(value, self)

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """Materialise the elements into a 1-D array, head first."""

        return np.asarray(list(iter(self)), dtype=dtype)

    def __iter__(self) -> FListIterator[T]:
        return FListIterator(self)

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return not self.is_empty

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FList):
            return NotImplemented
        left: FList[Any] = self
        right: FList[Any] = other
        while isinstance(left, Cons) and isinstance(right, Cons):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return left.is_empty and right.is_empty

    def __hash__(self) -> int:
        return hash(tuple(iter(self)))

    def __repr__(self) -> str:
        limit = fl_config.runtime_config().repr_limit
        items: list[str] = []
        cursor: FList[Any] = self
        while isinstance(cursor, Cons):
            if 0 < limit <= len(items):
                items.append("...")
                break
            items.append(repr(cursor.head))
            cursor = cursor.tail
        return f"FList[{', '.join(items)}]"


@dataclass(frozen=True, eq=False, repr=False)
class Nil(FList[T]):
    """The empty list. Every `Nil` compares and hashes equal to `NIL`."""

    @property
    def is_empty(self) -> bool:
        return True


@dataclass(frozen=True, eq=False, repr=False)
class Cons(FList[T]):
    head: T
    tail: FList[T]

    @property
    def is_empty(self) -> bool:
        return False


NIL: Nil[Any] = Nil()


def nil() -> FList[Any]:
    return NIL
