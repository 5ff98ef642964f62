"""Local git repository access for tag listings.

Usage:
    repo = Repository(Path("/path/to/monorepo"))

    match repo.list_tags("payments/*"):
        case Ok(names):
            print(names)
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mtag.core.result import Err, Ok, Result
from mtag.platform.process import ProcessError
from mtag.platform.process import run as run_process

GIT_TIMEOUT_SECONDS = 30.0
GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0

__all__ = [
    "GIT_NETWORK_TIMEOUT_SECONDS",
    "GIT_TIMEOUT_SECONDS",
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A single git working copy.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        """Check if this is a git working copy (.git dir, or file for worktrees)."""
        return (self.path / ".git").exists()

    def list_tags(self, pattern: str | None = None) -> Result[list[str], GitError]:
        """List tag names, optionally filtered by a `git tag -l` glob."""
        args = ["tag", "-l"]
        if pattern:
            args.append(pattern)
        match self._run(args):
            case Err(e):
                return Err(
                    GitError(
                        command="tag",
                        message=e.stderr.strip() or "git tag failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok([line.strip() for line in stdout.splitlines() if line.strip()])

    def fetch_tags(self) -> Result[None, GitError]:
        """Fetch all tags from the default remote.

        CI checkouts are usually shallow and tagless, so listings are only
        complete after this.
        """
        match self._run(["fetch", "--tags", "--force", "--quiet"]):
            case Err(e):
                return Err(
                    GitError(
                        command="fetch",
                        message=e.stderr.strip() or "git fetch --tags failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(_):
                return Ok(None)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        command = args[0] if args else ""
        timeout = (
            GIT_NETWORK_TIMEOUT_SECONDS if command == "fetch" else GIT_TIMEOUT_SECONDS
        )
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path, timeout=timeout)
