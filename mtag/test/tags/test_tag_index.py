from __future__ import annotations

from mtag.tags.index import build_index
from mtag.tags.model import NamespaceTagSet, VersionTag


def test_build_index_keeps_only_namespace() -> None:
    raw = [
        "payments/v1.0.0",
        "ledger/v9.0.0",
        "payments/v1.1.0",
        "payments-v2/v3.0.0",
        "Payments/v4.0.0",
    ]
    index = build_index(raw, "payments")
    assert index == NamespaceTagSet(
        namespace="payments",
        tags=(VersionTag("payments", 1, 0, 0), VersionTag("payments", 1, 1, 0)),
    )


def test_build_index_skips_unparsable_tags() -> None:
    raw = ["payments/v1.0.0", "payments/release-2020", "v0.9.0", "payments/v1.0.0-beta.1", ""]
    index = build_index(raw, "payments")
    assert index.tags == (VersionTag("payments", 1, 0, 0),)


def test_build_index_keeps_listing_order() -> None:
    raw = ["api/v2.0.0", "api/v1.0.0", "api/v1.5.0"]
    index = build_index(raw, "api")
    assert [t.major for t in index.tags] == [2, 1, 1]


def test_build_index_collapses_duplicates() -> None:
    raw = ["api/v1.0.0", "api/1.0.0", "api/v1.0.0"]
    index = build_index(raw, "api")
    assert index.tags == (VersionTag("api", 1, 0, 0),)


def test_build_index_empty() -> None:
    index = build_index([], "api")
    assert len(index) == 0
    assert not index
