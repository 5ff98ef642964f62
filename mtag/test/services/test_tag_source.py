from __future__ import annotations

from pathlib import Path

import pytest

from mtag.core.config import SourceConfig
from mtag.core.result import Err, Ok
from mtag.git.repository import GitError
from mtag.output.console import MockConsole
from mtag.services import tag_source as source_mod


class FakeRepository:
    fetched = False

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return True

    def fetch_tags(self):
        FakeRepository.fetched = True
        return Ok(None)

    def list_tags(self, pattern: str | None = None):
        assert pattern == "api/*"
        return Ok(["api/v1.0.0", "api/v1.1.0"])


@pytest.fixture(autouse=True)
def _reset_fake() -> None:
    FakeRepository.fetched = False


def test_git_source_lists_namespace_glob(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(source_mod, "Repository", FakeRepository)
    console = MockConsole()

    result = source_mod.load_raw_tags(
        root=tmp_path, namespace="api", source=SourceConfig(), console=console
    )
    assert result == Ok(["api/v1.0.0", "api/v1.1.0"])
    assert FakeRepository.fetched is False
    assert console.find("git listed 2 tag(s) for api/*")


def test_git_source_fetches_first(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(source_mod, "Repository", FakeRepository)

    result = source_mod.load_raw_tags(
        root=tmp_path, namespace="api", source=SourceConfig(fetch=True), console=MockConsole()
    )
    assert isinstance(result, Ok)
    assert FakeRepository.fetched is True


def test_git_source_fetch_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    class FailingFetch(FakeRepository):
        def fetch_tags(self):
            return Err(GitError(command="fetch", message="could not read from remote"))

    monkeypatch.setattr(source_mod, "Repository", FailingFetch)

    result = source_mod.load_raw_tags(
        root=tmp_path, namespace="api", source=SourceConfig(fetch=True), console=MockConsole()
    )
    assert isinstance(result, Err)
    assert result.error.kind == "git_failed"
    assert result.error.hint == "could not read from remote"


def test_git_source_requires_repository(tmp_path: Path) -> None:
    result = source_mod.load_raw_tags(
        root=tmp_path, namespace="api", source=SourceConfig(), console=MockConsole()
    )
    assert isinstance(result, Err)
    assert result.error.kind == "not_a_repository"


def test_github_source_requires_repo(tmp_path: Path) -> None:
    result = source_mod.load_raw_tags(
        root=tmp_path, namespace="api", source=SourceConfig(kind="github"), console=MockConsole()
    )
    assert isinstance(result, Err)
    assert result.error.kind == "missing_repo"


def test_github_source_uses_gh(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def fake_list(*, root: Path, repo: str, on_page=None):
        seen["repo"] = repo
        if on_page is not None:
            on_page(1, 1)
        return Ok(["api/v3.0.0"])

    monkeypatch.setattr(source_mod, "ensure_gh_available", lambda: Ok(None))
    monkeypatch.setattr(source_mod, "list_repo_tags", fake_list)
    console = MockConsole()

    result = source_mod.load_raw_tags(
        root=tmp_path,
        namespace="api",
        source=SourceConfig(kind="github", repo="acme/platform"),
        console=console,
    )
    assert result == Ok(["api/v3.0.0"])
    assert seen["repo"] == "acme/platform"
    assert console.find("gh tags page 1: 1 tag(s)")
