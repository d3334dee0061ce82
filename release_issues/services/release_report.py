from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from release_issues.core.config import Config
from release_issues.core.filters import FilterCriteria, build_label_sets
from release_issues.core.links import extract_project_path
from release_issues.core.result import Err, Ok, Result
from release_issues.output.console import ConsoleProtocol
from release_issues.services.credentials import load_token, resolve_token_path
from release_issues.services.errors import ClientFailed, ReportError
from release_issues.services.gitlab import PAGE_SIZE, IssueTracker, connect
from release_issues.services.report import ReportWriter, format_row, report_filename

Connector = Callable[[str, str], Result[IssueTracker, ClientFailed]]


@dataclass(frozen=True, slots=True)
class ReportOutcome:
    path: Path
    rows: int


class ReleaseReportService:
    """Produce the open-issues CSV for a release.

    Steps run in order and the first failure is returned as-is:
    validate flags, read the token, resolve the project, connect, list,
    then fetch and write each issue. Flags are validated before anything
    touches the filesystem or the network.
    """

    def __init__(
        self,
        *,
        config: Config,
        console: ConsoleProtocol,
        output_dir: Path | None = None,
        connector: Connector = connect,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._config = config
        self._console = console
        self._output_dir = output_dir or Path(config.report.output_dir)
        self._connect = connector
        self._now = now

    def run(self, criteria: FilterCriteria) -> Result[ReportOutcome, ReportError]:
        valid = criteria.validate()
        if isinstance(valid, Err):
            return valid

        console = self._console
        gitlab = self._config.gitlab
        console.info("Starting the program...")

        token_path = resolve_token_path(gitlab.token_file, console)
        console.info(f"Token file path: {token_path}")
        token = load_token(token_path)
        if isinstance(token, Err):
            return token

        console.info(f"GitLab issues link: {gitlab.issues_link}")
        project = extract_project_path(gitlab.issues_link)
        if isinstance(project, Err):
            return project
        console.info(f"Project path: {project.value}")

        tracker = self._connect(gitlab.server(), token.value)
        if isinstance(tracker, Err):
            return tracker
        console.info("GitLab client created successfully.")

        labels = build_label_sets(criteria)
        listed = tracker.value.list_open_issues(project.value, labels)
        if isinstance(listed, Err):
            return listed
        issues = listed.value
        console.info(f"Project issues listed successfully ({len(issues)} found).")
        if len(issues) >= PAGE_SIZE:
            console.warning(
                f"only the first {PAGE_SIZE} issues are fetched; the report may be incomplete"
            )

        path = self._output_dir / report_filename(self._now())
        created = ReportWriter.create(path)
        if isinstance(created, Err):
            return created
        console.info(f"CSV file created: {path}")

        with created.value as writer:
            console.info("Header written to CSV successfully.")
            for summary in issues:
                detail = tracker.value.get_issue(project.value, summary.iid)
                if isinstance(detail, Err):
                    return detail
                written = writer.write_row(format_row(summary, detail.value))
                if isinstance(written, Err):
                    return written

            flushed = writer.flush()
            if isinstance(flushed, Err):
                return flushed

            return Ok(ReportOutcome(path=path, rows=writer.rows_written))
