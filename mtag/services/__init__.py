"""Glue between tag sources, the resolver and CI output."""

from mtag.services.errors import TagSourceError
from mtag.services.payload import next_payload, previous_payload, render
from mtag.services.resolve import (
    TagRequest,
    namespace_history,
    next_tag,
    previous_tag,
)

__all__ = [
    "TagRequest",
    "TagSourceError",
    "namespace_history",
    "next_payload",
    "next_tag",
    "previous_payload",
    "previous_tag",
    "render",
]
