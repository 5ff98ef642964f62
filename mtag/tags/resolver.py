"""Next/previous tag resolution for one namespace.

Ordering: major, minor, patch ascending; at equal major.minor.patch every
release candidate (`-N`) sorts before the stable release.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace

from mtag.core.result import Err, Ok, Result
from mtag.tags.classify import classify
from mtag.tags.errors import ValidationError
from mtag.tags.model import (
    BumpKind,
    NamespaceTagSet,
    PreviousTagResult,
    ResolutionResult,
    VersionTag,
)

VersionKey = tuple[int, int, int, int, int]


def version_key(tag: VersionTag) -> VersionKey:
    """Sort key implementing the total order over tags."""
    if tag.pre_release is None:
        return (tag.major, tag.minor, tag.patch, 1, 0)
    return (tag.major, tag.minor, tag.patch, 0, tag.pre_release)


def sort_tags(tags: Iterable[VersionTag], *, descending: bool = False) -> list[VersionTag]:
    return sorted(tags, key=version_key, reverse=descending)


def _latest(
    tags: Iterable[VersionTag], predicate: Callable[[VersionTag], bool]
) -> VersionTag | None:
    matching = [t for t in tags if predicate(t)]
    if not matching:
        return None
    return max(matching, key=version_key)


def find_previous(
    tags: tuple[VersionTag, ...], current: VersionTag, bump: BumpKind
) -> Result[VersionTag | None, ValidationError]:
    """The tag release notes for a `bump` release on top of `current` diff against."""
    match bump:
        case BumpKind.MAJOR:
            return Ok(_latest(tags, lambda t: t.major < current.major))
        case BumpKind.MINOR:
            return Ok(
                _latest(tags, lambda t: t.major == current.major and t.minor < current.minor)
            )
        case BumpKind.PATCH:
            return Ok(
                _latest(
                    tags,
                    lambda t: (t.major, t.minor) == (current.major, current.minor)
                    and t.patch < current.patch,
                )
            )
        case BumpKind.PRE_RELEASE:
            return Ok(_previous_for_pre_release(tags, current))
        case _:
            return Err(_invalid_bump(bump))


def _previous_for_pre_release(
    tags: tuple[VersionTag, ...], current: VersionTag
) -> VersionTag | None:
    current_pre = current.pre_release
    if current_pre is None:
        # A fresh RC line on a stable base diffs against the stable release
        # before that base.
        limit = version_key(current)
        return _latest(tags, lambda t: t.pre_release is None and version_key(t) < limit)

    same_line = _latest(
        tags,
        lambda t: t.triple == current.triple
        and t.pre_release is not None
        and t.pre_release < current_pre,
    )
    if same_line is not None:
        return same_line
    return _latest(tags, lambda t: t.triple < current.triple)


def next_version(current: VersionTag, bump: BumpKind) -> Result[VersionTag, ValidationError]:
    match bump:
        case BumpKind.MAJOR:
            return Ok(replace(current, major=current.major + 1, minor=0, patch=0, pre_release=None))
        case BumpKind.MINOR:
            return Ok(replace(current, minor=current.minor + 1, patch=0, pre_release=None))
        case BumpKind.PATCH:
            return Ok(replace(current, patch=current.patch + 1, pre_release=None))
        case BumpKind.PRE_RELEASE:
            # Never moves major.minor.patch: starts or advances the RC counter.
            pre = 0 if current.pre_release is None else current.pre_release + 1
            return Ok(replace(current, pre_release=pre))
        case _:
            return Err(_invalid_bump(bump))


def find_hotfixes(tags: tuple[VersionTag, ...], current: VersionTag) -> tuple[VersionTag, ...]:
    """Patch releases of the minor line that `current`'s minor supersedes.

    Requires the stable `M.(m-1).0` base to exist; returns them ascending.
    """
    base_minor = current.minor - 1
    has_base = any(
        t.pre_release is None
        and t.major == current.major
        and t.minor == base_minor
        and t.patch == 0
        for t in tags
    )
    if not has_base:
        return ()

    patches = (
        t
        for t in tags
        if t.pre_release is None
        and t.major == current.major
        and t.minor == base_minor
        and t.patch > 0
    )
    return tuple(sort_tags(patches))


def resolve(tag_set: NamespaceTagSet, bump: BumpKind) -> Result[ResolutionResult, ValidationError]:
    """Compute current, previous, next and hotfixes for a `bump` release."""
    if not isinstance(bump, BumpKind):
        return Err(_invalid_bump(bump))

    tags = tag_set.tags
    current = max(tags, key=version_key) if tags else VersionTag.root(tag_set.namespace)

    previous = find_previous(tags, current, bump)
    if isinstance(previous, Err):
        return previous

    nxt = next_version(current, bump)
    if isinstance(nxt, Err):
        return nxt

    hotfixes = find_hotfixes(tags, current) if bump is BumpKind.MINOR else ()
    return Ok(
        ResolutionResult(
            namespace=tag_set.namespace,
            bump=bump,
            current=current,
            previous=previous.value,
            next=nxt.value,
            hotfixes=hotfixes,
        )
    )


def resolve_for_tag(tag_set: NamespaceTagSet, tag: VersionTag) -> PreviousTagResult:
    """Previous tag and hotfixes for `tag`, an existing (just pushed) tag.

    Only history up to and including `tag` counts; tags cut later are ignored.
    """
    bump = classify(tag)
    limit = version_key(tag)
    history = tuple(t for t in tag_set.tags if version_key(t) < limit) + (tag,)

    previous = find_previous(history, tag, bump)
    # classify() only yields enum members, so find_previous cannot fail here.
    previous_tag = previous.value if isinstance(previous, Ok) else None
    hotfixes = find_hotfixes(history, tag) if bump is BumpKind.MINOR else ()
    return PreviousTagResult(tag=tag, bump=bump, previous=previous_tag, hotfixes=hotfixes)


def _invalid_bump(bump: object) -> ValidationError:
    valid = ", ".join(k.value for k in BumpKind)
    return ValidationError(
        kind="invalid_bump_kind",
        message=f"invalid bump kind: {bump!r}",
        hint=f"valid options: {valid}",
    )
