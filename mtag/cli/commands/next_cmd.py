from __future__ import annotations

import typer

from mtag.cli.commands._helpers import (
    build_request,
    check_output_format,
    exit_on_error,
)
from mtag.cli.commands._options import FETCH_OPTION, FORMAT_OPTION, REPO_OPTION, SOURCE_OPTION
from mtag.cli.context import build_context
from mtag.services.payload import next_payload, render
from mtag.services.resolve import next_tag
from mtag.tags.bump import parse_bump_kind, select_bump_kind
from mtag.tags.model import BumpKind


def next_cmd(
    namespace: str = typer.Argument(..., help="Component namespace (tag prefix)."),
    major: bool = typer.Option(False, "--major", help="Bump the major version."),
    minor: bool = typer.Option(False, "--minor", help="Bump the minor version."),
    patch: bool = typer.Option(False, "--patch", help="Bump the patch version."),
    rc: bool = typer.Option(False, "--rc", help="Start or advance a release candidate."),
    bump: str | None = typer.Option(
        None, "--bump", help="Bump kind by name: major, minor, patch or rc."
    ),
    source: str | None = SOURCE_OPTION,
    repo: str | None = REPO_OPTION,
    fetch: bool | None = FETCH_OPTION,
    fmt: str = FORMAT_OPTION,
) -> None:
    """Compute the next tag of a namespace."""
    ctx = build_context()

    flags = {
        BumpKind.MAJOR: major,
        BumpKind.MINOR: minor,
        BumpKind.PATCH: patch,
        BumpKind.PRE_RELEASE: rc,
    }
    if bump is not None:
        flags[exit_on_error(parse_bump_kind(bump), ctx)] = True
    kind = exit_on_error(select_bump_kind(flags), ctx)

    output_format = check_output_format(ctx, fmt)
    request = build_request(ctx, source=source, repo=repo, fetch=fetch)
    resolved = next_tag(request, namespace=namespace, bump=kind, console=ctx.console)
    result = exit_on_error(resolved, ctx)
    typer.echo(render(next_payload(result), output_format))
