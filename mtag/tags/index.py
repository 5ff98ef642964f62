from __future__ import annotations

from collections.abc import Iterable

from mtag.core.result import Ok
from mtag.tags.model import NamespaceTagSet, VersionTag
from mtag.tags.parser import parse_tag


def build_index(raw_tags: Iterable[str], namespace: str) -> NamespaceTagSet:
    """Collect the tags of `namespace` from a raw tag listing.

    Names that do not parse are skipped. Listing order is kept; duplicates
    collapse to their first occurrence.
    """
    seen: set[VersionTag] = set()
    tags: list[VersionTag] = []
    for raw in raw_tags:
        parsed = parse_tag(raw)
        if not isinstance(parsed, Ok):
            continue
        tag = parsed.value
        if tag.namespace != namespace or tag in seen:
            continue
        seen.add(tag)
        tags.append(tag)
    return NamespaceTagSet(namespace=namespace, tags=tuple(tags))
