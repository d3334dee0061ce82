"""GitLab issue access.

This module provides:
- IssueTracker: Protocol for the two calls the report needs (injectable for tests)
- GitLabIssueTracker: Real implementation using python-gitlab
- MockIssueTracker: In-memory implementation for testing

Only the first page of the issue list is requested. Callers can compare the
result length with ``PAGE_SIZE`` to detect a truncated list.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import gitlab
import requests
from gitlab.exceptions import GitlabError

from release_issues.core.result import Err, Ok, Result
from release_issues.core.structured import as_str_dict, get_int, get_str, get_table
from release_issues.services.errors import ClientFailed, DetailFailed, ListFailed

if TYPE_CHECKING:
    from release_issues.core.filters import LabelSets

__all__ = [
    "PAGE_SIZE",
    "IssueSummary",
    "IssueDetail",
    "IssueTracker",
    "GitLabIssueTracker",
    "MockIssueTracker",
    "connect",
    "parse_issue_detail",
    "parse_issue_summary",
]

PAGE_SIZE = 100
OPENED = "opened"


@dataclass(frozen=True, slots=True)
class IssueSummary:
    """Issue as returned by the list call.

    Attributes:
        iid: Project-scoped issue number
        title: Issue title
        assignee: Display name of the first assignee, None when unassigned
        web_url: Browser URL of the issue
    """

    iid: int
    title: str
    assignee: str | None
    web_url: str


@dataclass(frozen=True, slots=True)
class IssueDetail:
    """Issue as returned by the single-issue call."""

    iid: int
    title: str
    author: str
    created_at: datetime
    web_url: str


def parse_issue_summary(data: Mapping[str, object]) -> IssueSummary | None:
    """Build an IssueSummary from an issue payload, None if malformed."""
    iid = get_int(data, "iid")
    if iid is None:
        return None
    assignee = get_table(data, "assignee")
    return IssueSummary(
        iid=iid,
        title=get_str(data, "title", strip=False) or "",
        assignee=get_str(assignee, "name", strip=False) if assignee else None,
        web_url=get_str(data, "web_url") or "",
    )


def parse_issue_detail(data: Mapping[str, object]) -> IssueDetail | None:
    """Build an IssueDetail from an issue payload, None if malformed."""
    iid = get_int(data, "iid")
    author = get_table(data, "author") or {}
    created = get_str(data, "created_at")
    if iid is None or created is None:
        return None
    try:
        created_at = datetime.fromisoformat(created)
    except ValueError:
        return None
    return IssueDetail(
        iid=iid,
        title=get_str(data, "title", strip=False) or "",
        author=get_str(author, "username", strip=False) or "",
        created_at=created_at,
        web_url=get_str(data, "web_url") or "",
    )


@runtime_checkable
class IssueTracker(Protocol):
    """Protocol for the issue calls made by a report run."""

    def list_open_issues(
        self, project: str, labels: LabelSets
    ) -> Result[list[IssueSummary], ListFailed]:
        """List open issues of a project, first page only.

        Args:
            project: Project path (``group/sub/project``)
            labels: Labels issues must carry and must not carry

        Returns:
            Ok with issues in service order, or Err with ListFailed
        """
        ...

    def get_issue(self, project: str, iid: int) -> Result[IssueDetail, DetailFailed]:
        """Fetch one issue by its project-scoped number."""
        ...


class GitLabIssueTracker:
    """Issue tracker backed by python-gitlab.

    Library and transport errors are turned into Err values here; nothing
    raised by python-gitlab or requests escapes this class.
    """

    def __init__(self, client: gitlab.Gitlab) -> None:
        self._client = client

    def list_open_issues(
        self, project: str, labels: LabelSets
    ) -> Result[list[IssueSummary], ListFailed]:
        params: dict[str, object] = {
            "state": OPENED,
            "per_page": PAGE_SIZE,
            "get_all": False,
        }
        if labels.include:
            params["labels"] = list(labels.include)
        if labels.exclude:
            params["not[labels]"] = ",".join(labels.exclude)

        try:
            handle = self._client.projects.get(project, lazy=True)
            raw_issues = handle.issues.list(**params)
        except (GitlabError, requests.RequestException) as e:
            return Err(ListFailed(project=project, reason=str(e)))

        issues: list[IssueSummary] = []
        for raw in raw_issues:
            summary = parse_issue_summary(as_str_dict(raw.attributes) or {})
            if summary is None:
                return Err(ListFailed(project=project, reason="malformed issue in list response"))
            issues.append(summary)
        return Ok(issues)

    def get_issue(self, project: str, iid: int) -> Result[IssueDetail, DetailFailed]:
        try:
            handle = self._client.projects.get(project, lazy=True)
            raw = handle.issues.get(iid)
        except (GitlabError, requests.RequestException) as e:
            return Err(DetailFailed(project=project, iid=iid, reason=str(e)))

        detail = parse_issue_detail(as_str_dict(raw.attributes) or {})
        if detail is None:
            return Err(DetailFailed(project=project, iid=iid, reason="malformed issue response"))
        return Ok(detail)


def connect(url: str, token: str) -> Result[IssueTracker, ClientFailed]:
    """Create an authenticated GitLab issue tracker.

    Args:
        url: GitLab server base URL
        token: Personal access token

    Returns:
        Ok with the tracker, or Err with ClientFailed
    """
    try:
        client = gitlab.Gitlab(url=url, private_token=token)
    except (GitlabError, ValueError) as e:
        return Err(ClientFailed(url=url, reason=str(e)))
    return Ok(GitLabIssueTracker(client))


class MockIssueTracker:
    """In-memory issue tracker for testing.

    Usage:
        tracker = MockIssueTracker(issues=[summary], details={1: detail})
        result = tracker.list_open_issues("a/b/c/d", LabelSets())
        assert result == Ok([summary])
    """

    def __init__(
        self,
        issues: Sequence[IssueSummary] = (),
        details: Mapping[int, IssueDetail] | None = None,
        *,
        list_error: str | None = None,
    ) -> None:
        self._issues = list(issues)
        self._details = dict(details or {})
        self._list_error = list_error
        self.calls: list[tuple[str, object]] = []

    def list_open_issues(
        self, project: str, labels: LabelSets
    ) -> Result[list[IssueSummary], ListFailed]:
        self.calls.append(("list_open_issues", labels))
        if self._list_error is not None:
            return Err(ListFailed(project=project, reason=self._list_error))
        return Ok(list(self._issues))

    def get_issue(self, project: str, iid: int) -> Result[IssueDetail, DetailFailed]:
        self.calls.append(("get_issue", iid))
        detail = self._details.get(iid)
        if detail is None:
            return Err(DetailFailed(project=project, iid=iid, reason="404 Not found (mock)"))
        return Ok(detail)
