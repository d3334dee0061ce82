"""Tests for release_issues.output.errors module."""

from __future__ import annotations

from pathlib import Path

import pytest

from release_issues.core.config import ConfigError
from release_issues.core.errors import ErrorCode
from release_issues.core.filters import FilterError
from release_issues.core.links import LinkError
from release_issues.output.console import MockConsole, Style
from release_issues.output.errors import print_report_error, report_error_exit_code
from release_issues.services.errors import (
    ClientFailed,
    DetailFailed,
    ListFailed,
    ReportError,
    TokenUnreadable,
    WriteFailed,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (FilterError("Release label is required"), ErrorCode.USER_ERROR),
        (ConfigError("Invalid TOML syntax"), ErrorCode.ENV_ERROR),
        (TokenUnreadable(path="/home/qa/.gitlab", reason="No such file"), ErrorCode.ENV_ERROR),
        (LinkError(link="x", message="invalid GitLab issues link: x"), ErrorCode.ENV_ERROR),
        (ClientFailed(url="https://gitlab.com", reason="bad url"), ErrorCode.NETWORK_ERROR),
        (ListFailed(project="a/b/c/d", reason="401 Unauthorized"), ErrorCode.NETWORK_ERROR),
        (DetailFailed(project="a/b/c/d", iid=7, reason="404"), ErrorCode.NETWORK_ERROR),
        (WriteFailed(path=Path("out.csv"), reason="No space left"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: ReportError, code: ErrorCode) -> None:
    assert report_error_exit_code(error) == int(code)


def test_every_error_prints_one_error_line() -> None:
    errors: list[ReportError] = [
        FilterError("Release label is required"),
        ConfigError("Invalid TOML syntax", path=Path("config.toml")),
        TokenUnreadable(path="/home/qa/.gitlab", reason="No such file"),
        LinkError(link="x", message="invalid GitLab issues link: x"),
        ClientFailed(url="https://gitlab.com", reason="bad url"),
        ListFailed(project="a/b/c/d", reason="401 Unauthorized"),
        DetailFailed(project="a/b/c/d", iid=7, reason="404"),
        WriteFailed(path=Path("out.csv"), reason="No space left"),
    ]
    for error in errors:
        console = MockConsole()
        print_report_error(error, console)
        assert console.count(Style.ERROR) == 1


def test_token_error_has_hint() -> None:
    console = MockConsole()
    print_report_error(TokenUnreadable(path="/home/qa/.gitlab", reason="No such file"), console)
    assert "Failed to read GitLab token from file: No such file" in console.text
    hints = [o for o in console.outputs if o.style == Style.DIM]
    assert hints and "/home/qa/.gitlab" in hints[0].message


def test_detail_error_names_issue() -> None:
    console = MockConsole()
    print_report_error(DetailFailed(project="a/b/c/d", iid=7, reason="404"), console)
    assert "a/b/c/d#7" in console.text
