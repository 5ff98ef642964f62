from __future__ import annotations

from pathlib import Path

from mtag.core.config import SourceConfig
from mtag.core.result import Err, Ok, Result
from mtag.git.repository import Repository
from mtag.output.console import ConsoleProtocol
from mtag.services.errors import TagSourceError
from mtag.services.gh import ensure_gh_available, list_repo_tags


def load_raw_tags(
    *,
    root: Path,
    namespace: str,
    source: SourceConfig,
    console: ConsoleProtocol,
) -> Result[list[str], TagSourceError]:
    """Materialize every raw tag name visible for `namespace`.

    The git source pre-filters with a `<namespace>/*` glob; the github source
    returns the whole repository listing. Either way the index does the real
    namespace filtering.
    """
    match source.kind:
        case "git":
            return _load_git_tags(
                root=root, namespace=namespace, fetch=source.fetch, console=console
            )
        case "github":
            return _load_github_tags(root=root, repo=source.repo, console=console)


def _load_git_tags(
    *, root: Path, namespace: str, fetch: bool, console: ConsoleProtocol
) -> Result[list[str], TagSourceError]:
    repo = Repository(root)
    if not repo.exists():
        return Err(
            TagSourceError(
                kind="not_a_repository",
                message=f"not a git repository: {root}",
                hint="run inside the monorepo or pass --root",
            )
        )

    if fetch:
        console.debug("fetching tags from remote")
        fetched = repo.fetch_tags()
        if isinstance(fetched, Err):
            return Err(
                TagSourceError(
                    kind="git_failed",
                    message="git fetch --tags failed",
                    hint=fetched.error.message,
                )
            )

    listed = repo.list_tags(f"{namespace}/*")
    if isinstance(listed, Err):
        return Err(
            TagSourceError(
                kind="git_failed", message="git tag -l failed", hint=listed.error.message
            )
        )

    console.debug(f"git listed {len(listed.value)} tag(s) for {namespace}/*")
    return Ok(listed.value)


def _load_github_tags(
    *, root: Path, repo: str | None, console: ConsoleProtocol
) -> Result[list[str], TagSourceError]:
    if repo is None:
        return Err(
            TagSourceError(
                kind="missing_repo",
                message="github tag source needs a repository",
                hint="pass --repo owner/name or set source.repo in mtag.toml",
            )
        )

    available = ensure_gh_available()
    if isinstance(available, Err):
        return available

    def on_page(page: int, count: int) -> None:
        console.debug(f"gh tags page {page}: {count} tag(s)")

    return list_repo_tags(root=root, repo=repo, on_page=on_page)
