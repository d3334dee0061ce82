"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from release_issues.core.result import Err, Result
from release_issues.output.errors import print_report_error, report_error_exit_code
from release_issues.services.errors import ReportError

if TYPE_CHECKING:
    from release_issues.cli.context import CLIContext

T = TypeVar("T")


def exit_on_error(result: Result[T, ReportError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code.

    This is the single place where a failed report run ends the process.
    """
    if isinstance(result, Err):
        print_report_error(result.error, ctx.console)
        exit_with_code(report_error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)


def version_callback(value: bool) -> None:
    """Eager ``--version`` handler: print the version and stop."""
    if value:
        from release_issues import __version__

        typer.echo(__version__)
        raise typer.Exit(code=0)
