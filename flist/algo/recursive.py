"""Structural recursion over `Nil`/`Cons`, one call frame per element.

Depth is bounded by the interpreter recursion limit; see `FLIST_RECURSION_LIMIT`.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from flist.core.nodes import NIL, Cons, FList

from .registry import TraversalKernels


def size(lst: FList[Any]) -> int:
    if isinstance(lst, Cons):
        return 1 + size(lst.tail)
    return 0


def map_list(lst: FList[Any], f: Callable[[Any], Any]) -> FList[Any]:
    if isinstance(lst, Cons):
        return Cons(f(lst.head), map_list(lst.tail, f))
    return NIL


def filter_list(lst: FList[Any], f: Callable[[Any], bool]) -> FList[Any]:
    if isinstance(lst, Cons):
        if f(lst.head):
            return Cons(lst.head, filter_list(lst.tail, f))
        return filter_list(lst.tail, f)
    return NIL


def fold(lst: FList[Any], base: Any, f: Callable[[Any, Any], Any]) -> Any:
    if isinstance(lst, Cons):
        return f(fold(lst.tail, base, f), lst.head)
    return base


def reverse(lst: FList[Any]) -> FList[Any]:
    def _reverse(remaining: FList[Any], acc: FList[Any]) -> FList[Any]:
        if isinstance(remaining, Cons):
            return _reverse(remaining.tail, Cons(remaining.head, acc))
        return acc

    return _reverse(lst, NIL)


def build(values: Sequence[Any]) -> FList[Any]:
    def _build(index: int) -> FList[Any]:
        if index >= len(values):
            return NIL
        return Cons(values[index], _build(index + 1))

    return _build(0)


KERNELS = TraversalKernels(
    name="recursive",
    size=size,
    map=map_list,
    filter=filter_list,
    fold=fold,
    reverse=reverse,
    build=build,
)
