from __future__ import annotations

from collections.abc import Mapping

from mtag.core.result import Err, Ok, Result
from mtag.tags.errors import ValidationError
from mtag.tags.model import BumpKind

_ALIASES: dict[str, BumpKind] = {
    "major": BumpKind.MAJOR,
    "minor": BumpKind.MINOR,
    "patch": BumpKind.PATCH,
    "rc": BumpKind.PRE_RELEASE,
    "pre-release": BumpKind.PRE_RELEASE,
    "prerelease": BumpKind.PRE_RELEASE,
}


def valid_bump_names() -> str:
    return ", ".join(k.value for k in BumpKind)


def parse_bump_kind(name: str | None) -> Result[BumpKind, ValidationError]:
    if name is None or not name.strip():
        return Err(
            ValidationError(
                kind="invalid_bump_kind",
                message="bump kind is required",
                hint=f"valid options: {valid_bump_names()}",
            )
        )

    kind = _ALIASES.get(name.strip().lower())
    if kind is None:
        return Err(
            ValidationError(
                kind="invalid_bump_kind",
                message=f"invalid bump kind: {name}",
                hint=f"valid options: {valid_bump_names()}",
            )
        )
    return Ok(kind)


def select_bump_kind(flags: Mapping[BumpKind, bool]) -> Result[BumpKind, ValidationError]:
    """Return the single selected bump kind out of a set of CLI flags."""
    selected = [kind for kind in BumpKind if flags.get(kind, False)]
    if len(selected) == 1:
        return Ok(selected[0])

    if not selected:
        message = "no bump kind selected"
    else:
        message = f"multiple bump kinds selected: {', '.join(k.value for k in selected)}"
    return Err(
        ValidationError(
            kind="multiple_or_no_bump_kind_selected",
            message=message,
            hint="pass exactly one of --major, --minor, --patch, --rc",
        )
    )
