from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Tuple

VALUE_PARSERS: Dict[str, Callable[[str], Any]] = {
    "int": int,
    "float": float,
    "str": str,
}

MAPS: Dict[str, Callable[[Any], Any]] = {
    "double": lambda x: x * 2,
    "square": lambda x: x * x,
    "negate": operator.neg,
    "str": str,
    "upper": lambda x: str(x).upper(),
}

FILTERS: Dict[str, Callable[[Any], bool]] = {
    "even": lambda x: x % 2 == 0,
    "odd": lambda x: x % 2 != 0,
    "positive": lambda x: x > 0,
    "nonempty": bool,
}

# (base, combine) pairs; combine receives (acc, element)
FOLDS: Dict[str, Tuple[Any, Callable[[Any, Any], Any]]] = {
    "sum": (0, operator.add),
    "product": (1, operator.mul),
    "concat": ("", lambda acc, x: acc + str(x)),
    "count": (0, lambda acc, _: acc + 1),
}

_TABLES: Dict[str, Dict[str, Any]] = {
    "value type": VALUE_PARSERS,
    "map": MAPS,
    "filter": FILTERS,
    "fold": FOLDS,
}


def resolve_named(kind: str, name: str) -> Any:
    """Return the registered entry called `name` in the `kind` table."""

    table = _TABLES[kind]
    key = name.strip().lower()
    if key not in table:
        raise ValueError(f"Unknown {kind} '{name}'. Expected one of {sorted(table)}.")
    return table[key]


def parse_values(raw: list[str], value_type: str) -> list[Any]:
    parser = resolve_named("value type", value_type)
    try:
        return [parser(item) for item in raw]
    except ValueError as exc:
        raise ValueError(f"Cannot parse values as {value_type}: {exc}") from exc


__all__ = [
    "FILTERS",
    "FOLDS",
    "MAPS",
    "VALUE_PARSERS",
    "parse_values",
    "resolve_named",
]
