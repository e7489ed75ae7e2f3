"""Persistent list variants, iteration, and construction helpers."""

from .nodes import NIL, Cons, FList, Nil, nil
from .iteration import FListIterator
from .construction import cons, flist_from_sequence, flist_of

__all__ = [
    "NIL",
    "Cons",
    "FList",
    "FListIterator",
    "Nil",
    "cons",
    "flist_from_sequence",
    "flist_of",
    "nil",
]
