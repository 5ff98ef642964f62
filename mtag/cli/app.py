from __future__ import annotations

import os
from pathlib import Path

import typer

from mtag import __version__
from mtag.cli.commands.next_cmd import next_cmd
from mtag.cli.commands.previous_cmd import previous
from mtag.cli.commands.tags_cmd import tags
from mtag.cli.context import CONFIG_ENV, ROOT_ENV, VERBOSE_ENV
from mtag.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Namespaced semantic-version tags for monorepo releases.",
)


# Commands
app.command("next")(next_cmd)
app.command()(previous)
app.command()(tags)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Repository root (default: $MTAG_ROOT or the current directory).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to mtag.toml (default: <root>/mtag.toml when present).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug diagnostics."),
) -> None:
    del version
    if root is not None:
        try:
            resolved = root.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --root: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not resolved.is_dir():
            typer.echo(f"error: --root '{resolved}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        os.environ[ROOT_ENV] = str(resolved)

    if config is not None:
        os.environ[CONFIG_ENV] = str(config)
    if verbose:
        os.environ[VERBOSE_ENV] = "1"


def main() -> None:
    app()
