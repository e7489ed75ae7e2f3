from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache

_SUPPORTED_TRAVERSALS = {"iterative", "recursive"}
_DEFAULT_REPR_LIMIT = 10


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _infer_traversal_from_env() -> str:
    traversal = os.getenv("FLIST_TRAVERSAL", "iterative").strip().lower()
    if traversal not in _SUPPORTED_TRAVERSALS:
        raise ValueError(
            f"Unsupported traversal '{traversal}'. Expected one of {_SUPPORTED_TRAVERSALS}."
        )
    return traversal


def _infer_repr_limit_from_env() -> int:
    limit = _parse_optional_int(os.getenv("FLIST_REPR_LIMIT"))
    if limit is None:
        return _DEFAULT_REPR_LIMIT
    return limit


@dataclass(frozen=True)
class RuntimeConfig:
    traversal: str
    log_level: str
    repr_limit: int
    recursion_limit: int | None

    @property
    def stack_safe(self) -> bool:
        return self.traversal == "iterative"

    @property
    def truncates_repr(self) -> bool:
        return self.repr_limit > 0


def _apply_runtime_flags(config: RuntimeConfig) -> None:
    if config.traversal != "recursive" or config.recursion_limit is None:
        return
    current = sys.getrecursionlimit()
    if config.recursion_limit <= current:
        logging.getLogger("flist").debug(
            "Recursion limit %d already covers requested %d; leaving it unchanged.",
            current,
            config.recursion_limit,
        )
        return
    sys.setrecursionlimit(config.recursion_limit)


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("flist")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    traversal = _infer_traversal_from_env()
    log_level = os.getenv("FLIST_LOG_LEVEL", "INFO").upper()
    repr_limit = _infer_repr_limit_from_env()
    recursion_limit = _parse_optional_int(os.getenv("FLIST_RECURSION_LIMIT"))

    config = RuntimeConfig(
        traversal=traversal,
        log_level=log_level,
        repr_limit=repr_limit,
        recursion_limit=recursion_limit,
    )
    _configure_logging(config.log_level)
    _apply_runtime_flags(config)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()


def describe_runtime() -> dict[str, object]:
    """Return the active configuration as a plain mapping."""

    config = runtime_config()
    return {
        "traversal": config.traversal,
        "log_level": config.log_level,
        "repr_limit": config.repr_limit,
        "recursion_limit": config.recursion_limit,
        "interpreter_recursion_limit": sys.getrecursionlimit(),
    }
