from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np

from flist.algo.registry import get_kernels
from flist.core.nodes import Cons, FList
from flist.logging import get_logger

LOGGER = get_logger("core.construction")

T = TypeVar("T")


def _check_indexable(values: Any) -> None:
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(
                f"flist_from_sequence expects a 1-D array, got shape {values.shape}."
            )
        return
    if isinstance(values, FList) or not isinstance(values, Sequence):
        raise TypeError(
            f"flist_from_sequence expects an indexable sequence, got {type(values).__name__}."
        )


def flist_from_sequence(values: Sequence[T] | np.ndarray) -> FList[T]:
    """Build a list holding `values` in their original order.

    Parameters
    ----------
    values:
        Fixed-size indexable input: any `collections.abc.Sequence` or a 1-D
        `numpy.ndarray`. Elements are read by index only.
    """

    _check_indexable(values)
    LOGGER.debug(
        "Building list from %d values of %s.", len(values), type(values).__name__
    )
    return get_kernels().build(values)


def flist_of(*values: T) -> FList[T]:
    return flist_from_sequence(values)


def cons(head: T, tail: FList[T]) -> FList[T]:
    """Prepend `head`, sharing `tail` with every other list that holds it."""

    if not isinstance(tail, FList):
        raise TypeError(f"cons expects an FList tail, got {type(tail).__name__}.")
    return Cons(head, tail)
