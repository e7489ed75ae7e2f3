"""Traversal kernels implementing the structural list operations."""

from .registry import (
    TraversalKernels,
    get_kernels,
    register_kernels,
    registered_traversals,
)
from . import iterative, recursive

register_kernels(iterative.KERNELS)
register_kernels(recursive.KERNELS)

__all__ = [
    "TraversalKernels",
    "get_kernels",
    "register_kernels",
    "registered_traversals",
    "iterative",
    "recursive",
]
