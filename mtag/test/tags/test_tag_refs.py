from __future__ import annotations

from pathlib import Path

import pytest

from mtag.core.result import Err, Ok
from mtag.tags.model import VersionTag
from mtag.tags.refs import parse_ref, validate_namespace


def test_parse_tag_ref() -> None:
    result = parse_ref("refs/tags/card-webhook/v1.1.0")
    assert isinstance(result, Ok)
    assert result.value.kind == "tag"
    assert result.value.name == "card-webhook/v1.1.0"
    assert result.value.tag == VersionTag("card-webhook", 1, 1, 0)


def test_parse_branch_ref() -> None:
    result = parse_ref("refs/heads/main")
    assert isinstance(result, Ok)
    assert result.value.kind == "branch"
    assert result.value.name == "main"
    assert result.value.tag is None


@pytest.mark.parametrize(
    ("ref", "reason"),
    [
        ("", "ref is required"),
        ("refs/pull/1/merge", "ref must be a tag"),
        ("refs/tags/v1.0.0", "namespace is required"),
        ("refs/tags/api/", "version is required"),
        ("refs/tags/api/1.0.0", "invalid semver format"),
        ("refs/tags/api/v1.0.0-rc.1", "invalid semver format"),
        ("refs/tags/a/b/v1.0.0", "namespace is required"),
    ],
)
def test_parse_ref_rejects(ref: str, reason: str) -> None:
    result = parse_ref(ref)
    assert isinstance(result, Err)
    assert result.error.kind == "invalid_ref"
    assert result.error.message.endswith(reason)


def test_parse_ref_checks_namespace_directory(tmp_path: Path) -> None:
    (tmp_path / "payments").mkdir()

    ok = parse_ref("refs/tags/payments/v1.0.0", namespaces_dir=tmp_path)
    assert isinstance(ok, Ok)

    missing = parse_ref("refs/tags/ledger/v1.0.0", namespaces_dir=tmp_path)
    assert isinstance(missing, Err)
    assert missing.error.kind == "invalid_namespace"
    assert missing.error.message == "invalid namespace ledger"


def test_validate_namespace() -> None:
    assert validate_namespace("payments") == Ok("payments")

    bad = validate_namespace("pay/ments")
    assert isinstance(bad, Err)
    assert bad.error.kind == "invalid_namespace"


def test_validate_namespace_rejects_plain_file(tmp_path: Path) -> None:
    (tmp_path / "payments").write_text("", encoding="utf-8")
    result = validate_namespace("payments", namespaces_dir=tmp_path)
    assert isinstance(result, Err)
    assert result.error.kind == "invalid_namespace"
