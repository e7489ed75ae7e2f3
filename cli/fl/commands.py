from __future__ import annotations

import json
from typing import Any, List, Optional

import typer

from flist import FList, flist_from_sequence
from flist import config as fl_config
from flist.logging import get_logger

from .options import parse_values, resolve_named

LOGGER = get_logger("cli")


def _named(kind: str, name: str, param: str) -> Any:
    try:
        return resolve_named(kind, name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=param) from exc


def _check_format(output_format: str) -> str:
    fmt = output_format.strip().lower()
    if fmt not in {"text", "json"}:
        raise typer.BadParameter(
            f"Unsupported format '{output_format}'. Expected 'text' or 'json'.",
            param_hint="--format",
        )
    return fmt


def run_command(
    values: Optional[List[str]] = typer.Argument(None, help="Elements of the list, head first."),
    value_type: str = typer.Option("int", "--type", help="Element type: int, float or str."),
    map_name: Optional[str] = typer.Option(None, "--map", help="Named transform applied to each element."),
    filter_name: Optional[str] = typer.Option(None, "--filter", help="Named predicate selecting elements."),
    reverse: bool = typer.Option(False, "--reverse", help="Reverse the list after map and filter."),
    fold_name: Optional[str] = typer.Option(None, "--fold", help="Named reduction applied last."),
    output_format: str = typer.Option("text", "--format", help="Output format: text or json."),
) -> None:
    """Build a list from VALUES and apply map, filter, reverse, then fold."""

    fmt = _check_format(output_format)
    try:
        parsed = parse_values(values or [], value_type)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--type") from exc

    current: FList[Any] = flist_from_sequence(parsed)
    try:
        if map_name is not None:
            current = current.map(_named("map", map_name, "--map"))
        if filter_name is not None:
            current = current.filter(_named("filter", filter_name, "--filter"))
        if reverse:
            current = current.reverse()
        if fold_name is not None:
            base, combine = _named("fold", fold_name, "--fold")
            result = current.fold(base, combine)
            LOGGER.debug("Folded list with '%s'.", fold_name)
            if fmt == "json":
                typer.echo(json.dumps({"fold": result}))
            else:
                typer.echo(str(result))
            return
    except TypeError as exc:
        raise typer.BadParameter(
            f"Operation does not apply to {value_type} values: {exc}"
        ) from exc

    if fmt == "json":
        typer.echo(json.dumps({"values": list(current), "size": current.size}))
    else:
        typer.echo(repr(current))


def config_command(
    output_format: str = typer.Option("text", "--format", help="Output format: text or json."),
) -> None:
    """Print the active runtime configuration."""

    fmt = _check_format(output_format)
    described = fl_config.describe_runtime()
    if fmt == "json":
        typer.echo(json.dumps(described, indent=2, sort_keys=True))
        return
    for key, value in described.items():
        typer.echo(f"{key}: {value}")


__all__ = ["config_command", "run_command"]
