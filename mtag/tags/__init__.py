"""Namespaced semantic-version tags: parsing, ordering and resolution."""

from .bump import parse_bump_kind, select_bump_kind
from .classify import classify
from .errors import ParseError, ValidationError
from .formatter import format_short_tag, format_tag, format_version
from .index import build_index
from .model import BumpKind, NamespaceTagSet, PreviousTagResult, ResolutionResult, VersionTag
from .parser import parse_tag
from .refs import RefTarget, parse_ref, validate_namespace
from .resolver import resolve, resolve_for_tag, sort_tags, version_key

__all__ = [
    # model
    "BumpKind",
    "NamespaceTagSet",
    "PreviousTagResult",
    "ResolutionResult",
    "VersionTag",
    # errors
    "ParseError",
    "ValidationError",
    # operations
    "build_index",
    "classify",
    "format_short_tag",
    "format_tag",
    "format_version",
    "parse_bump_kind",
    "parse_ref",
    "parse_tag",
    "resolve",
    "resolve_for_tag",
    "select_bump_kind",
    "sort_tags",
    "validate_namespace",
    "version_key",
    # refs
    "RefTarget",
]
