"""Validation of the git ref a release workflow was triggered by."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from mtag.core.result import Err, Ok, Result
from mtag.tags.errors import ValidationError
from mtag.tags.model import VersionTag
from mtag.tags.parser import is_valid_namespace, parse_tag

_TAGS_PREFIX = "refs/tags/"
_HEADS_PREFIX = "refs/heads/"
_SEMVER_RE = re.compile(r"^v\d+\.\d+\.\d+(?:-\d+)?$", re.ASCII)


@dataclass(frozen=True, slots=True)
class RefTarget:
    kind: Literal["tag", "branch"]
    name: str
    tag: VersionTag | None = None


def _invalid_ref(ref: str, reason: str) -> Err[ValidationError]:
    return Err(ValidationError(kind="invalid_ref", message=f"invalid ref '{ref}': {reason}"))


def parse_ref(
    ref: str, *, namespaces_dir: Path | None = None
) -> Result[RefTarget, ValidationError]:
    """Parse `refs/tags/<namespace>/v<M>.<m>.<p>[-<n>]`.

    Branch refs are accepted and reported as such so callers can emit an
    empty result. When `namespaces_dir` is given the namespace must name one
    of its subdirectories.
    """
    ref = ref.strip()
    if not ref:
        return _invalid_ref(ref, "ref is required")

    if ref.startswith(_HEADS_PREFIX):
        return Ok(RefTarget(kind="branch", name=ref[len(_HEADS_PREFIX) :]))

    if not ref.startswith(_TAGS_PREFIX):
        return _invalid_ref(ref, "ref must be a tag")

    name = ref[len(_TAGS_PREFIX) :]
    parts = name.split("/")
    if len(parts) != 2 or not parts[0]:
        return _invalid_ref(ref, "namespace is required")
    namespace, version = parts
    if not version:
        return _invalid_ref(ref, "version is required")
    if not is_valid_namespace(namespace):
        return _invalid_ref(ref, f"invalid namespace '{namespace}'")
    if _SEMVER_RE.match(version) is None:
        return _invalid_ref(ref, "invalid semver format")

    if namespaces_dir is not None:
        checked = check_namespace_dir(namespace, namespaces_dir=namespaces_dir)
        if isinstance(checked, Err):
            return checked

    parsed = parse_tag(name)
    if isinstance(parsed, Err):
        return _invalid_ref(ref, parsed.error.message)
    return Ok(RefTarget(kind="tag", name=name, tag=parsed.value))


def check_namespace_dir(namespace: str, *, namespaces_dir: Path) -> Result[None, ValidationError]:
    if not (namespaces_dir / namespace).is_dir():
        return Err(
            ValidationError(
                kind="invalid_namespace",
                message=f"invalid namespace {namespace}",
                hint=f"no directory {namespaces_dir / namespace}",
            )
        )
    return Ok(None)


def validate_namespace(
    namespace: str, *, namespaces_dir: Path | None = None
) -> Result[str, ValidationError]:
    """Check a namespace given on the command line."""
    if not is_valid_namespace(namespace):
        return Err(
            ValidationError(
                kind="invalid_namespace",
                message=f"invalid namespace '{namespace}'",
                hint="use letters, digits, '-' and '_' only",
            )
        )
    if namespaces_dir is not None:
        checked = check_namespace_dir(namespace, namespaces_dir=namespaces_dir)
        if isinstance(checked, Err):
            return checked
    return Ok(namespace)
