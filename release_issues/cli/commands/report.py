"""Report command - write open release issues to a CSV file."""

from __future__ import annotations

from pathlib import Path

import typer

from release_issues.cli.commands._helpers import exit_on_error, version_callback
from release_issues.cli.context import build_context
from release_issues.core.filters import FilterCriteria
from release_issues.output.console import Style
from release_issues.services.release_report import ReleaseReportService


def report(
    release: str = typer.Option(
        "", "--release", "-release", "-r", help="Specify the release label"
    ),
    ready_for_test: bool = typer.Option(
        False, "--ready-for-test", "-ready-for-test", help="Flag to filter READY-FOR-TEST issues"
    ),
    blocker: str = typer.Option(
        "",
        "--blocker",
        "-blocker",
        "-b",
        help="Specify the blocker label (staging-upgrade or production-upgrade)",
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Config file (default: user config.toml)", show_default=False
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", help="Directory for the CSV report", show_default=False
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """List open GitLab issues for a release and write them to a CSV file."""
    del version
    ctx = build_context(config)

    service = ReleaseReportService(config=ctx.config, console=ctx.console, output_dir=output_dir)
    criteria = FilterCriteria(release=release, ready_for_test=ready_for_test, blocker=blocker)
    outcome = exit_on_error(service.run(criteria), ctx)

    ctx.console.success("CSV file created successfully.")
    ctx.console.print(f"{outcome.path} ({outcome.rows} issues)", Style.DEFAULT)
