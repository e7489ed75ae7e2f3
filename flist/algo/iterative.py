"""Worklist equivalents of the recursive kernels.

Each kernel calls user functions in the same order as its recursive
counterpart: `map` and `filter` head to tail, `fold` last element first.
"""

from __future__ import annotations

from typing import Any, Callable, List, Sequence

from flist.core.nodes import NIL, Cons, FList

from .registry import TraversalKernels


def _heads(lst: FList[Any]) -> List[Any]:
    # list(lst) would size itself via FList.__len__ and the configured kernel
    return list(iter(lst))


def _rebuild(values: List[Any]) -> FList[Any]:
    result: FList[Any] = NIL
    for value in reversed(values):
        result = Cons(value, result)
    return result


def size(lst: FList[Any]) -> int:
    count = 0
    cursor = lst
    while isinstance(cursor, Cons):
        count += 1
        cursor = cursor.tail
    return count


def map_list(lst: FList[Any], f: Callable[[Any], Any]) -> FList[Any]:
    return _rebuild([f(value) for value in lst])


def filter_list(lst: FList[Any], f: Callable[[Any], bool]) -> FList[Any]:
    return _rebuild([value for value in lst if f(value)])


def fold(lst: FList[Any], base: Any, f: Callable[[Any, Any], Any]) -> Any:
    acc = base
    for value in reversed(_heads(lst)):
        acc = f(acc, value)
    return acc


def reverse(lst: FList[Any]) -> FList[Any]:
    acc: FList[Any] = NIL
    cursor = lst
    while isinstance(cursor, Cons):
        acc = Cons(cursor.head, acc)
        cursor = cursor.tail
    return acc


def build(values: Sequence[Any]) -> FList[Any]:
    result: FList[Any] = NIL
    for index in range(len(values) - 1, -1, -1):
        result = Cons(values[index], result)
    return result


KERNELS = TraversalKernels(
    name="iterative",
    size=size,
    map=map_list,
    filter=filter_list,
    fold=fold,
    reverse=reverse,
    build=build,
)
