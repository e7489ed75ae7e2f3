"""flist: persistent singly-linked lists.

Quick Start
-----------
>>> from flist import flist_of
>>>
>>> numbers = flist_of(1, 2, 3)
>>> numbers.map(lambda x: x * 2)
FList[2, 4, 6]
>>> numbers.filter(lambda x: x % 2 == 0)
FList[2]
>>> numbers.fold("", lambda acc, x: acc + str(x))
'321'

Classes
-------
FList : Base of the two list variants, `Nil` and `Cons`.
FListIterator : Single-pass forward iterator over a list.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("flist")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .core import (
    NIL,
    Cons,
    FList,
    FListIterator,
    Nil,
    cons,
    flist_from_sequence,
    flist_of,
    nil,
)
from .algo import TraversalKernels, get_kernels, registered_traversals

__all__ = [
    "__version__",
    "NIL",
    "Cons",
    "FList",
    "FListIterator",
    "Nil",
    "cons",
    "flist_from_sequence",
    "flist_of",
    "nil",
    "TraversalKernels",
    "get_kernels",
    "registered_traversals",
]
