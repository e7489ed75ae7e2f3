from __future__ import annotations

import typer

from .commands import config_command, run_command


_HELP = """Persistent list (flist) command line interface.

Subcommands build lists from values and inspect runtime configuration."""

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    help=_HELP,
)


@app.callback()
def fl_callback() -> None:
    """Root callback reserved for shared options (none yet)."""
    pass


app.command("run", help="Build a list and apply map/filter/reverse/fold.")(run_command)
app.command("config", help="Show the active runtime configuration.")(config_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
