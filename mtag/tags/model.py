from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

NAMESPACE_RE = re.compile(r"^[A-Za-z0-9_-]+$", re.ASCII)


class BumpKind(Enum):
    """Kind of version increment. The value is the CLI/config spelling."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE_RELEASE = "rc"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VersionTag:
    """A parsed `<namespace>/v<major>.<minor>.<patch>[-<pre_release>]` tag.

    `pre_release is None` means a stable release.
    """

    namespace: str
    major: int
    minor: int
    patch: int
    pre_release: int | None = None

    def __post_init__(self) -> None:
        if NAMESPACE_RE.fullmatch(self.namespace) is None:
            raise ValueError(f"invalid namespace: {self.namespace!r}")
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError(f"negative version component: {self.major}.{self.minor}.{self.patch}")
        if self.pre_release is not None and self.pre_release < 0:
            raise ValueError(f"negative pre-release number: {self.pre_release}")

    @property
    def is_stable(self) -> bool:
        return self.pre_release is None

    @property
    def triple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @classmethod
    def root(cls, namespace: str) -> VersionTag:
        """The implicit 0.0.0 every namespace starts from."""
        return cls(namespace=namespace, major=0, minor=0, patch=0)


@dataclass(frozen=True, slots=True)
class NamespaceTagSet:
    """Parsed tags of a single namespace, in listing order."""

    namespace: str
    tags: tuple[VersionTag, ...] = ()

    def __len__(self) -> int:
        return len(self.tags)

    def __bool__(self) -> bool:
        return bool(self.tags)


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    namespace: str
    bump: BumpKind
    current: VersionTag
    previous: VersionTag | None
    next: VersionTag
    hotfixes: tuple[VersionTag, ...] = ()

    @property
    def tag(self) -> VersionTag:
        """The tag to create: `next`, scoped to the namespace."""
        return self.next

    @property
    def is_stable_release(self) -> bool:
        return self.next.pre_release is None


@dataclass(frozen=True, slots=True)
class PreviousTagResult:
    """Previous tag and hotfix set for a tag that already exists (just pushed)."""

    tag: VersionTag
    bump: BumpKind
    previous: VersionTag | None
    hotfixes: tuple[VersionTag, ...] = ()

    @property
    def is_stable_release(self) -> bool:
        return self.tag.pre_release is None
