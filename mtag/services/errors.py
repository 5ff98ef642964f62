from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class TagSourceError:
    kind: Literal[
        "git_failed",
        "not_a_repository",
        "gh_missing",
        "gh_failed",
        "invalid_payload",
        "missing_repo",
    ]
    message: str
    hint: str | None = None
