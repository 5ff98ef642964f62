"""Error payloads for tag parsing and request validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ValidationErrorKind = Literal[
    "invalid_bump_kind",
    "multiple_or_no_bump_kind_selected",
    "invalid_namespace",
    "invalid_ref",
]


@dataclass(frozen=True, slots=True)
class ParseError:
    """A raw tag name that is not `<namespace>/v<M>.<m>.<p>[-<n>]`.

    Only one kind exists today; the index drops such tags without reporting.
    """

    raw: str
    kind: Literal["malformed"] = "malformed"

    @property
    def message(self) -> str:
        return f"malformed tag: {self.raw!r}"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A request precondition that failed before any tag was looked at."""

    kind: ValidationErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
