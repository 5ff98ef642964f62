"""Typer options shared by the tag commands."""

from __future__ import annotations

import typer

SOURCE_OPTION = typer.Option(None, "--source", help="Tag source: git or github.")
REPO_OPTION = typer.Option(None, "--repo", help="owner/name, for the github source.")
FETCH_OPTION = typer.Option(
    None,
    "--fetch/--no-fetch",
    help="Fetch tags from the remote before listing (git source).",
)
FORMAT_OPTION = typer.Option(
    "json",
    "--format",
    help="json, or env for key=value lines ($GITHUB_OUTPUT).",
)
