from __future__ import annotations

import re

from mtag.core.result import Err, Ok, Result
from mtag.tags.errors import ParseError
from mtag.tags.model import NAMESPACE_RE, VersionTag

# The "v" is optional: tags cut before the prefix convention have none.
_TAG_RE = re.compile(r"^([A-Za-z0-9_-]+)/v?(\d+)\.(\d+)\.(\d+)(?:-(\d+))?$", re.ASCII)


def is_valid_namespace(namespace: str) -> bool:
    return NAMESPACE_RE.fullmatch(namespace) is not None


def parse_tag(raw: str) -> Result[VersionTag, ParseError]:
    m = _TAG_RE.match(raw.strip())
    if m is None:
        return Err(ParseError(raw=raw))

    pre = m.group(5)
    return Ok(
        VersionTag(
            namespace=m.group(1),
            major=int(m.group(2)),
            minor=int(m.group(3)),
            patch=int(m.group(4)),
            pre_release=int(pre) if pre is not None else None,
        )
    )
