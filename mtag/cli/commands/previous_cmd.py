from __future__ import annotations

import os

import typer

from mtag.cli.commands._helpers import (
    build_request,
    check_output_format,
    exit_on_error,
)
from mtag.cli.commands._options import FETCH_OPTION, FORMAT_OPTION, REPO_OPTION, SOURCE_OPTION
from mtag.cli.context import build_context
from mtag.services.payload import previous_payload, render
from mtag.services.resolve import previous_tag


def previous(
    ref: str | None = typer.Argument(
        None, help="Pushed ref, e.g. refs/tags/payments/v1.2.0 (default: $GITHUB_REF)."
    ),
    source: str | None = SOURCE_OPTION,
    repo: str | None = REPO_OPTION,
    fetch: bool | None = FETCH_OPTION,
    fmt: str = FORMAT_OPTION,
) -> None:
    """Find the previous tag and hotfixes for a pushed tag."""
    ctx = build_context()
    if ref is None:
        ref = os.environ.get("GITHUB_REF", "")

    output_format = check_output_format(ctx, fmt)
    request = build_request(ctx, source=source, repo=repo, fetch=fetch)
    result = exit_on_error(previous_tag(request, ref=ref, console=ctx.console), ctx)
    typer.echo(render(previous_payload(result), output_format))
