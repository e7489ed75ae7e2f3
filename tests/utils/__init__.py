"""Shared test utilities for flist."""

from .strategies import (
    TRAVERSALS,
    int_arrays,
    int_lists,
    mixed_lists,
    traversals,
)

__all__ = ["TRAVERSALS", "int_arrays", "int_lists", "mixed_lists", "traversals"]
