from __future__ import annotations

import json
import shutil
from collections.abc import Callable
from pathlib import Path
from time import sleep

from mtag.core.result import Err, Ok, Result
from mtag.core.structured import as_obj_list, as_str_dict, get_str
from mtag.platform.process import ProcessError
from mtag.platform.process import run as run_process
from mtag.services.errors import TagSourceError
from mtag.services.timeouts import (
    GH_READ_RETRY_ATTEMPTS,
    GH_READ_RETRY_DELAY_SECONDS,
    GH_TAGS_PER_PAGE,
    GH_TIMEOUT_SECONDS,
)


def _is_transient_gh_error(error: ProcessError) -> bool:
    text = f"{error.stderr}\n{error.stdout}".lower()
    markers = (
        "timed out",
        "timeout",
        "connection reset",
        "connection refused",
        "temporarily unavailable",
        "service unavailable",
        "bad gateway",
        "gateway timeout",
        "tls handshake timeout",
        "network is unreachable",
        "http 429",
        "http 500",
        "http 502",
        "http 503",
        "http 504",
    )
    return any(marker in text for marker in markers)


def run_gh_read(
    *,
    root: Path,
    cmd: list[str],
    message: str,
    timeout: float = GH_TIMEOUT_SECONDS,
    retry_attempts: int = GH_READ_RETRY_ATTEMPTS,
) -> Result[str, TagSourceError]:
    """Run a read-only gh command, retrying transient failures with linear back-off."""
    attempts = max(1, retry_attempts)
    for attempt in range(attempts):
        result = run_process(cmd, cwd=root, timeout=timeout)
        if isinstance(result, Ok):
            return result

        error = result.error
        if attempt < attempts - 1 and _is_transient_gh_error(error):
            sleep(GH_READ_RETRY_DELAY_SECONDS * (attempt + 1))
            continue

        return Err(
            TagSourceError(kind="gh_failed", message=message, hint=error.stderr.strip() or None)
        )

    return Err(TagSourceError(kind="gh_failed", message=message))


def ensure_gh_available() -> Result[None, TagSourceError]:
    if shutil.which("gh") is None:
        return Err(
            TagSourceError(
                kind="gh_missing",
                message="gh: missing",
                hint="Install GitHub CLI: https://cli.github.com/",
            )
        )
    return Ok(None)


def gh_api_json(*, root: Path, endpoint: str) -> Result[object, TagSourceError]:
    result = run_gh_read(
        root=root, cmd=["gh", "api", endpoint], message=f"gh api failed: {endpoint}"
    )
    if isinstance(result, Err):
        return result

    try:
        obj: object = json.loads(result.value)
    except json.JSONDecodeError as e:
        return Err(
            TagSourceError(
                kind="invalid_payload",
                message=f"gh api returned invalid JSON: {e}",
                hint=endpoint,
            )
        )
    return Ok(obj)


def list_repo_tags(
    *,
    root: Path,
    repo: str,
    on_page: Callable[[int, int], None] | None = None,
) -> Result[list[str], TagSourceError]:
    """Every tag name of `repo` (owner/name), draining all pages.

    A page shorter than GH_TAGS_PER_PAGE is the last one.
    """
    names: list[str] = []
    page = 1
    while True:
        endpoint = f"repos/{repo}/tags?per_page={GH_TAGS_PER_PAGE}&page={page}"
        obj = gh_api_json(root=root, endpoint=endpoint)
        if isinstance(obj, Err):
            return obj

        items = as_obj_list(obj.value)
        if items is None:
            return Err(
                TagSourceError(
                    kind="invalid_payload",
                    message=f"unexpected tags payload for {repo}",
                    hint=endpoint,
                )
            )

        for item in items:
            data = as_str_dict(item)
            name = get_str(data, "name") if data is not None else None
            if name is not None:
                names.append(name)

        if on_page is not None:
            on_page(page, len(items))
        if len(items) < GH_TAGS_PER_PAGE:
            return Ok(names)
        page += 1
