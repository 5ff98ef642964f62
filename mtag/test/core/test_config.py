"""Tests for mtag.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from mtag.core.config import (
    Config,
    NamespacesConfig,
    SourceConfig,
    load_config,
    load_config_or_default,
)
from mtag.core.result import Err, Ok


class TestDefaults:
    def test_source_defaults(self) -> None:
        config = SourceConfig()
        assert config.kind == "git"
        assert config.repo is None
        assert config.fetch is False

    def test_config_defaults(self) -> None:
        config = Config()
        assert config.source == SourceConfig()
        assert config.namespaces == NamespacesConfig(dir=None)

    def test_frozen(self) -> None:
        config = SourceConfig()
        with pytest.raises(AttributeError):
            config.kind = "github"  # type: ignore[misc]


class TestFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "source": {"kind": "github", "repo": " acme/platform ", "fetch": True},
                "namespaces": {"dir": "internal"},
            }
        )
        assert config.source == SourceConfig(kind="github", repo="acme/platform", fetch=True)
        assert config.namespaces.dir == "internal"

    def test_unknown_source_kind(self) -> None:
        with pytest.raises(ValueError, match="source.kind"):
            Config.from_dict({"source": {"kind": "svn"}})

    @pytest.mark.parametrize(
        ("data", "match"),
        [
            ({"source": {"kind": 7}}, "source.kind must be a string"),
            ({"source": {"repo": 3}}, "source.repo must be a string"),
            ({"source": {"fetch": "true"}}, "source.fetch must be true or false"),
            ({"source": "github"}, r"\[source\] must be a table"),
            ({"namespaces": []}, r"\[namespaces\] must be a table"),
            ({"namespaces": {"dir": False}}, "namespaces.dir must be a string"),
        ],
    )
    def test_wrong_types_are_rejected(self, data: dict[str, object], match: str) -> None:
        with pytest.raises(TypeError, match=match):
            Config.from_dict(data)

    def test_blank_repo_is_unset(self) -> None:
        assert Config.from_dict({"source": {"repo": "  "}}).source.repo is None


class TestLoadConfig:
    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "mtag.toml"
        path.write_text('[source]\nkind = "github"\nrepo = "acme/platform"\n', encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.source.kind == "github"
        assert result.value.source.repo == "acme/platform"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "mtag.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.path == tmp_path / "mtag.toml"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "mtag.toml"
        path.write_text("[source\n", encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "mtag.toml"
        path.write_text('[source]\nkind = "svn"\n', encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_wrong_type_is_config_error(self, tmp_path: Path) -> None:
        path = tmp_path / "mtag.toml"
        path.write_text('[source]\nkind = "git"\nfetch = "yes"\n', encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Err)
        assert "source.fetch must be true or false" in result.error.message
        assert result.error.path == path

    def test_or_default_without_file(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "mtag.toml") == Ok(Config())

    def test_or_default_still_reports_broken_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mtag.toml"
        path.write_text("not toml at all = = =", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)
