"""Machine-readable output of resolutions for CI steps.

Key names match what the release workflows already read (`tagPRD`,
`previousTag`, `shortTag`, ...). One shape differs: `hotfixes` is a JSON list
of full tag names (`payments/v1.1.1`), where those workflows received a
comma-joined string of bare versions. The `env` format comma-joins the same
full names.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Literal

from mtag.tags.formatter import format_short_tag, format_tag, format_version
from mtag.tags.model import PreviousTagResult, ResolutionResult, VersionTag

OutputFormat = Literal["json", "env"]

Payload = dict[str, object]


def version_dict(tag: VersionTag) -> dict[str, int | None]:
    return {
        "major": tag.major,
        "minor": tag.minor,
        "patch": tag.patch,
        "preRelease": tag.pre_release,
    }


def next_payload(result: ResolutionResult) -> Payload:
    previous = result.previous
    return {
        "tag": format_tag(result.tag),
        "version": format_version(result.next),
        "current": version_dict(result.current),
        "next": version_dict(result.next),
        "previous": version_dict(previous) if previous is not None else None,
        "previousTag": format_tag(previous) if previous is not None else None,
        "hotfixes": [format_tag(t) for t in result.hotfixes],
        "tagPRD": result.is_stable_release,
    }


def previous_payload(result: PreviousTagResult | None) -> Payload:
    """Payload for a pushed ref; a branch ref (None) yields empty values."""
    if result is None:
        return {
            "tagPrdSemver": False,
            "tag": None,
            "shortTag": "",
            "previousTag": None,
            "hotfixes": [],
        }

    previous = result.previous
    return {
        "tagPrdSemver": result.is_stable_release,
        "tag": format_tag(result.tag),
        "shortTag": format_short_tag(result.tag),
        "previousTag": format_tag(previous) if previous is not None else None,
        "hotfixes": [format_tag(t) for t in result.hotfixes],
    }


def _env_value(value: object) -> str:
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case list():
            return ",".join(_env_value(v) for v in value)
        case dict():
            return json.dumps(value, separators=(",", ":"))
        case _:
            return str(value)


def render(payload: Mapping[str, object], fmt: OutputFormat) -> str:
    """Render as one JSON object, or as `key=value` lines for $GITHUB_OUTPUT."""
    if fmt == "json":
        return json.dumps(payload)
    return "\n".join(f"{key}={_env_value(value)}" for key, value in payload.items())
