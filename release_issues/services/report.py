"""CSV report writing.

A report is written fresh on every run to
``issues_output_<YYYY-MM-DD_HH-MM-SS>.csv``. Two runs in the same second
write to the same name; the later one wins.
"""

from __future__ import annotations

import csv
from dataclasses import astuple, dataclass
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import IO

from release_issues.core.result import Err, Ok, Result
from release_issues.services.errors import WriteFailed
from release_issues.services.gitlab import IssueDetail, IssueSummary

__all__ = [
    "REPORT_HEADER",
    "UNASSIGNED",
    "ReportRow",
    "ReportWriter",
    "format_row",
    "report_filename",
]

REPORT_HEADER = ("Issue", "Summary", "Assignee", "Author", "Date of Creation")
UNASSIGNED = "Unassigned"

_FILENAME_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"
_CREATED_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class ReportRow:
    """One CSV line, fields in header order."""

    issue: str
    summary: str
    assignee: str
    author: str
    created: str

    def as_list(self) -> list[str]:
        return list(astuple(self))


def report_filename(now: datetime) -> str:
    return f"issues_output_{now.strftime(_FILENAME_TIME_FORMAT)}.csv"


def format_row(summary: IssueSummary, detail: IssueDetail) -> ReportRow:
    """Build a row from the list entry and its detail record.

    The assignee comes from the list entry, everything else from the detail.
    """
    return ReportRow(
        issue=f"[#{summary.iid}]({detail.web_url})",
        summary=detail.title,
        assignee=summary.assignee or UNASSIGNED,
        author=detail.author,
        created=detail.created_at.strftime(_CREATED_FORMAT),
    )


class ReportWriter:
    """Sequential CSV writer for one report file.

    Usage:
        match ReportWriter.create(path):
            case Ok(writer):
                with writer:
                    writer.write_row(row)
            case Err(error):
                ...

    The file is truncated on creation and closed when the ``with`` block
    exits, whatever the outcome. Rows already written stay on disk.
    """

    def __init__(self, path: Path, handle: IO[str]) -> None:
        self.path = path
        self.rows_written = 0
        self._handle = handle
        self._writer = csv.writer(handle)

    @classmethod
    def create(cls, path: Path) -> Result[ReportWriter, WriteFailed]:
        """Create the file and write the header."""
        try:
            handle = path.open("w", encoding="utf-8", newline="")
        except OSError as e:
            return Err(WriteFailed(path=path, reason=e.strerror or str(e)))

        writer = cls(path, handle)
        header = writer._write(list(REPORT_HEADER))
        if isinstance(header, Err):
            writer.close()
            return header
        return Ok(writer)

    def write_row(self, row: ReportRow) -> Result[None, WriteFailed]:
        result = self._write(row.as_list())
        if isinstance(result, Ok):
            self.rows_written += 1
        return result

    def _write(self, fields: list[str]) -> Result[None, WriteFailed]:
        try:
            self._writer.writerow(fields)
        except OSError as e:
            return Err(WriteFailed(path=self.path, reason=e.strerror or str(e)))
        return Ok(None)

    def flush(self) -> Result[None, WriteFailed]:
        try:
            self._handle.flush()
        except OSError as e:
            return Err(WriteFailed(path=self.path, reason=e.strerror or str(e)))
        return Ok(None)

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> ReportWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
