"""Exit codes for the release-issues CLI.

Every failure of a report run ends the process; the code tells scripts
which stage gave up:
- 0: Success
- 1: User error (invalid flag combination)
- 2: Environment error (config file, token file, issues link)
- 3: Network error (GitLab client, list or detail call)
- 4: I/O error (report file could not be written)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are stable."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 3
    IO_ERROR = 4
