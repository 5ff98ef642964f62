"""Typed loading of the optional `mtag.toml` file.

Example:

    [source]
    kind = "github"
    repo = "acme/platform"
    fetch = false

    [namespaces]
    dir = "internal"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "NamespacesConfig",
    "SourceConfig",
    "SourceKind",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "mtag.toml"

SourceKind = Literal["git", "github"]
SOURCE_KINDS: tuple[SourceKind, ...] = ("git", "github")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SourceConfig:
    """Where raw tag names are listed from."""

    kind: SourceKind = "git"
    # owner/name, only used by the github source
    repo: str | None = None
    fetch: bool = False


@dataclass(frozen=True, slots=True)
class NamespacesConfig:
    """Namespace constraints.

    When `dir` is set, a namespace is only accepted if `<root>/<dir>/<namespace>`
    is an existing directory.
    """

    dir: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    source: SourceConfig = field(default_factory=SourceConfig)
    namespaces: NamespacesConfig = field(default_factory=NamespacesConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML.

        Raises:
            TypeError: If a key is present with the wrong type.
            ValueError: If `source.kind` names an unknown source.
        """
        source = _table(data, "source")
        namespaces = _table(data, "namespaces")

        kind = _str(source, "source.kind") or "git"
        if kind not in SOURCE_KINDS:
            raise ValueError(f"source.kind must be one of {', '.join(SOURCE_KINDS)}, got '{kind}'")

        fetch = _bool(source, "source.fetch")
        return cls(
            source=SourceConfig(
                kind=cast(SourceKind, kind),
                repo=_str(source, "source.repo"),
                fetch=fetch if fetch is not None else False,
            ),
            namespaces=NamespacesConfig(dir=_str(namespaces, "namespaces.dir")),
        )


def _key(name: str) -> str:
    return name.rsplit(".", 1)[-1]


def _table(data: Mapping[str, object], name: str) -> StrDict:
    if name not in data:
        return {}
    table = as_str_dict(data[name])
    if table is None:
        raise TypeError(f"[{name}] must be a table")
    return table


def _str(table: StrDict, name: str) -> str | None:
    key = _key(name)
    if key in table and not isinstance(table[key], str):
        raise TypeError(f"{name} must be a string")
    return get_str(table, key)


def _bool(table: StrDict, name: str) -> bool | None:
    value = table.get(_key(name))
    if value is None or isinstance(value, bool):
        return value
    raise TypeError(f"{name} must be true or false")


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and validate configuration from a TOML file.

    Args:
        path: Path to the mtag.toml file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the default Config."""
    if not path.exists():
        return Ok(Config())
    return load_config(path)
