from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple

from flist import config as fl_config
from flist.core.nodes import FList
from flist.logging import get_logger

LOGGER = get_logger("algo.registry")


@dataclass(frozen=True)
class TraversalKernels:
    """One strategy's implementation of every structural list operation."""

    name: str
    size: Callable[[FList[Any]], int]
    map: Callable[[FList[Any], Callable[[Any], Any]], FList[Any]]
    filter: Callable[[FList[Any], Callable[[Any], bool]], FList[Any]]
    fold: Callable[[FList[Any], Any, Callable[[Any, Any], Any]], Any]
    reverse: Callable[[FList[Any]], FList[Any]]
    build: Callable[[Sequence[Any]], FList[Any]]


_REGISTRY: Dict[str, TraversalKernels] = {}


def register_kernels(kernels: TraversalKernels) -> None:
    if kernels.name in _REGISTRY:
        raise ValueError(f"Traversal kernels '{kernels.name}' are already registered.")
    _REGISTRY[kernels.name] = kernels
    LOGGER.debug("Registered traversal kernels '%s'.", kernels.name)


def registered_traversals() -> Tuple[str, ...]:
    return tuple(sorted(_REGISTRY))


def get_kernels(name: str | None = None) -> TraversalKernels:
    """Return the kernels registered as `name`, or the configured traversal."""

    key = fl_config.runtime_config().traversal if name is None else name.strip().lower()
    try:
        return _REGISTRY[key]
    except KeyError:
        raise ValueError(
            f"Unknown traversal '{key}'. Expected one of {registered_traversals()}."
        ) from None
