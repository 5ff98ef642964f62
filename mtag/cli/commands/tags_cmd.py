from __future__ import annotations

import typer

from mtag.cli.commands._helpers import build_request, exit_on_error
from mtag.cli.commands._options import FETCH_OPTION, REPO_OPTION, SOURCE_OPTION
from mtag.cli.context import build_context
from mtag.output.console import Style
from mtag.services.resolve import namespace_history
from mtag.tags.classify import classify
from mtag.tags.formatter import format_tag


def tags(
    namespace: str = typer.Argument(..., help="Component namespace (tag prefix)."),
    source: str | None = SOURCE_OPTION,
    repo: str | None = REPO_OPTION,
    fetch: bool | None = FETCH_OPTION,
) -> None:
    """List the tags of a namespace, newest first."""
    ctx = build_context()
    request = build_request(ctx, source=source, repo=repo, fetch=fetch)
    listed = namespace_history(request, namespace=namespace, console=ctx.console)
    history = exit_on_error(listed, ctx)

    if not history:
        ctx.out.print(f"no tags for {namespace}", Style.DIM)
        return

    rows = [(format_tag(t), str(classify(t)), "yes" if t.is_stable else "no") for t in history]
    ctx.out.table(("tag", "kind", "stable"), rows)
