"""Shared helpers for CLI commands."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, NoReturn, cast

import typer

from mtag.core.config import SOURCE_KINDS, SourceKind
from mtag.core.errors import ErrorCode
from mtag.core.result import Err, Result
from mtag.output.console import Style
from mtag.services.errors import TagSourceError
from mtag.services.payload import OutputFormat
from mtag.services.resolve import TagRequest
from mtag.tags.errors import ValidationError

if TYPE_CHECKING:
    from mtag.cli.context import CLIContext

OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("json", "env")


def exit_with(
    ctx: CLIContext, message: str, *, code: ErrorCode, hint: str | None = None
) -> NoReturn:
    ctx.console.error(message)
    if hint:
        ctx.console.print(f"hint: {hint}", Style.DIM)
    raise typer.Exit(code=int(code))


def error_code(error: ValidationError | TagSourceError) -> ErrorCode:
    if isinstance(error, ValidationError):
        return ErrorCode.USER_ERROR
    if error.kind in {"gh_failed", "invalid_payload"}:
        return ErrorCode.NETWORK_ERROR
    if error.kind == "missing_repo":
        return ErrorCode.USER_ERROR
    return ErrorCode.ENV_ERROR


def exit_on_error[T](result: Result[T, ValidationError | TagSourceError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit with its code."""
    if isinstance(result, Err):
        error = result.error
        exit_with(ctx, error.message, code=error_code(error), hint=error.hint)
    return result.value


def build_request(
    ctx: CLIContext,
    *,
    source: str | None,
    repo: str | None,
    fetch: bool | None,
) -> TagRequest:
    """Merge command-line overrides onto the configured tag source."""
    configured = ctx.config.source
    if source is not None and source not in SOURCE_KINDS:
        exit_with(
            ctx,
            f"invalid --source: {source}",
            code=ErrorCode.USER_ERROR,
            hint=f"valid options: {', '.join(SOURCE_KINDS)}",
        )

    merged = replace(
        configured,
        kind=cast(SourceKind, source) if source is not None else configured.kind,
        repo=repo if repo is not None else configured.repo,
        fetch=fetch if fetch is not None else configured.fetch,
    )
    return TagRequest(root=ctx.root, source=merged, namespaces_dir=ctx.namespaces_dir)


def check_output_format(ctx: CLIContext, fmt: str) -> OutputFormat:
    if fmt not in OUTPUT_FORMATS:
        exit_with(
            ctx,
            f"invalid --format: {fmt}",
            code=ErrorCode.USER_ERROR,
            hint=f"valid options: {', '.join(OUTPUT_FORMATS)}",
        )
    return cast(OutputFormat, fmt)
