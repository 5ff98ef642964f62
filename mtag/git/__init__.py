"""Git operations used to list namespace tags."""

from mtag.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
