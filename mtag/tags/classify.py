from __future__ import annotations

from mtag.tags.model import BumpKind, VersionTag


def classify(tag: VersionTag) -> BumpKind:
    """Bump kind implied by the shape of a tag's version.

    A pre-release number wins over everything else; otherwise trailing zeros
    decide (`X.0.0` major, `X.Y.0` minor, anything else patch).
    """
    if tag.pre_release is not None:
        return BumpKind.PRE_RELEASE
    if tag.minor == 0 and tag.patch == 0:
        return BumpKind.MAJOR
    if tag.patch == 0:
        return BumpKind.MINOR
    return BumpKind.PATCH
