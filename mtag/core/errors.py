"""Exit codes for the mtag CLI.

The numeric values are part of the CI contract and should remain stable:
- 0: Success
- 1: User error (bad bump selection, malformed ref, unknown namespace)
- 2: Environment error (missing git/gh, unreadable config)
- 4: Network error (remote tag listing failed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes for mtag commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
