"""Tag source -> namespace index -> resolver, for the CLI commands.

Request preconditions (namespace, ref, bump kind) are checked before any tag
is fetched; a failure returns a single error and no partial result.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mtag.core.config import SourceConfig
from mtag.core.result import Err, Ok, Result
from mtag.output.console import ConsoleProtocol
from mtag.services.errors import TagSourceError
from mtag.services.tag_source import load_raw_tags
from mtag.tags.errors import ValidationError
from mtag.tags.formatter import format_tag
from mtag.tags.index import build_index
from mtag.tags.model import (
    BumpKind,
    NamespaceTagSet,
    PreviousTagResult,
    ResolutionResult,
    VersionTag,
)
from mtag.tags.refs import parse_ref, validate_namespace
from mtag.tags.resolver import resolve, resolve_for_tag, sort_tags

type ResolveError = ValidationError | TagSourceError


@dataclass(frozen=True, slots=True)
class TagRequest:
    """Where and how to look up tags for one invocation."""

    root: Path
    source: SourceConfig
    namespaces_dir: Path | None = None


def _name(tag: VersionTag | None) -> str:
    return format_tag(tag) if tag is not None else "null"


def _load_tag_set(
    request: TagRequest, namespace: str, console: ConsoleProtocol
) -> Result[NamespaceTagSet, TagSourceError]:
    console.debug(f"namespace = {namespace}")
    console.debug(f"source = {request.source.kind}")
    raw = load_raw_tags(
        root=request.root, namespace=namespace, source=request.source, console=console
    )
    if isinstance(raw, Err):
        return raw

    tag_set = build_index(raw.value, namespace)
    console.debug(f"{len(tag_set)} of {len(raw.value)} listed tag(s) belong to {namespace}")
    return Ok(tag_set)


def next_tag(
    request: TagRequest,
    *,
    namespace: str,
    bump: BumpKind,
    console: ConsoleProtocol,
) -> Result[ResolutionResult, ResolveError]:
    checked = validate_namespace(namespace, namespaces_dir=request.namespaces_dir)
    if isinstance(checked, Err):
        return checked

    tag_set = _load_tag_set(request, namespace, console)
    if isinstance(tag_set, Err):
        return tag_set

    resolved = resolve(tag_set.value, bump)
    if isinstance(resolved, Err):
        return resolved

    result = resolved.value
    console.debug(f"bump = {result.bump}")
    console.debug(f"current = {_name(result.current)}")
    if result.hotfixes:
        console.debug(f"hotfixes = {', '.join(format_tag(t) for t in result.hotfixes)}")
    console.info(f"previous tag: {_name(result.previous)} and tag: {_name(result.next)}.")
    return Ok(result)


def previous_tag(
    request: TagRequest,
    *,
    ref: str,
    console: ConsoleProtocol,
) -> Result[PreviousTagResult | None, ResolveError]:
    """Previous tag for a pushed ref; Ok(None) for branch refs."""
    target = parse_ref(ref, namespaces_dir=request.namespaces_dir)
    if isinstance(target, Err):
        return target

    tag = target.value.tag
    if tag is None:
        console.debug(f"{ref} is a branch, nothing to resolve")
        return Ok(None)

    tag_set = _load_tag_set(request, tag.namespace, console)
    if isinstance(tag_set, Err):
        return tag_set

    result = resolve_for_tag(tag_set.value, tag)
    console.debug(f"type = {result.bump}")
    if result.hotfixes:
        console.debug(f"hotfixes = {', '.join(format_tag(t) for t in result.hotfixes)}")
    console.info(f"previous tag: {_name(result.previous)} and tag: {_name(result.tag)}.")
    return Ok(result)


def namespace_history(
    request: TagRequest,
    *,
    namespace: str,
    console: ConsoleProtocol,
) -> Result[list[VersionTag], ResolveError]:
    """Tags of a namespace, newest first."""
    checked = validate_namespace(namespace, namespaces_dir=request.namespaces_dir)
    if isinstance(checked, Err):
        return checked

    tag_set = _load_tag_set(request, namespace, console)
    if isinstance(tag_set, Err):
        return tag_set
    return Ok(sort_tags(tag_set.value.tags, descending=True))
