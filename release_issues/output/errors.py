"""Error presentation utilities.

Centralized error formatting and exit code mapping for report runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from release_issues.core.config import ConfigError
from release_issues.core.errors import ErrorCode
from release_issues.core.filters import FilterError
from release_issues.core.links import LinkError
from release_issues.output.console import Style
from release_issues.services.errors import (
    ClientFailed,
    DetailFailed,
    ListFailed,
    ReportError,
    TokenUnreadable,
    WriteFailed,
)

if TYPE_CHECKING:
    from release_issues.output.console import ConsoleProtocol

__all__ = ["print_report_error", "report_error_exit_code"]


def print_report_error(error: ReportError, console: ConsoleProtocol) -> None:
    """Print report error to console with appropriate formatting."""
    match error:
        case FilterError(message=message):
            console.error(message)
        case ConfigError(message=message, path=path):
            console.error(message)
            if path is not None:
                console.print(f"config: {path}", Style.DIM)
        case TokenUnreadable(path=path, reason=reason, hint=hint):
            console.error(f"Failed to read GitLab token from file: {reason}")
            console.print(f"hint: {hint} ({path})", Style.DIM)
        case LinkError(message=message):
            console.error(f"Failed to extract project path: {message}")
        case ClientFailed(url=url, reason=reason):
            console.error(f"Failed to create GitLab client for {url}: {reason}")
        case ListFailed(project=project, reason=reason):
            console.error(f"Failed to list project issues for {project}: {reason}")
        case DetailFailed(project=project, iid=iid, reason=reason):
            console.error(f"Failed to get detailed issue {project}#{iid}: {reason}")
        case WriteFailed(path=path, reason=reason):
            console.error(f"Failed to write CSV file {path}: {reason}")


def report_error_exit_code(error: ReportError) -> int:
    """Get exit code for a report error."""
    match error:
        case FilterError():
            return int(ErrorCode.USER_ERROR)
        case ConfigError() | TokenUnreadable() | LinkError():
            return int(ErrorCode.ENV_ERROR)
        case ClientFailed() | ListFailed() | DetailFailed():
            return int(ErrorCode.NETWORK_ERROR)
        case WriteFailed():
            return int(ErrorCode.IO_ERROR)
