from __future__ import annotations

from mtag.tags.model import VersionTag


def format_version(tag: VersionTag) -> str:
    """`M.m.p` or `M.m.p-N`, without namespace or `v` prefix."""
    version = f"{tag.major}.{tag.minor}.{tag.patch}"
    if tag.pre_release is not None:
        version += f"-{tag.pre_release}"
    return version


def format_short_tag(tag: VersionTag) -> str:
    """The part of the tag name after the namespace (`v1.2.3`)."""
    return f"v{format_version(tag)}"


def format_tag(tag: VersionTag) -> str:
    """Canonical tag name, always `v`-prefixed."""
    return f"{tag.namespace}/{format_short_tag(tag)}"
