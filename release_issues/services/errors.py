from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from release_issues.core.config import ConfigError
from release_issues.core.filters import FilterError
from release_issues.core.links import LinkError


@dataclass(frozen=True, slots=True)
class TokenUnreadable:
    path: str
    reason: str
    hint: str = "Store a GitLab personal access token in the token file"


@dataclass(frozen=True, slots=True)
class ClientFailed:
    url: str
    reason: str


@dataclass(frozen=True, slots=True)
class ListFailed:
    project: str
    reason: str


@dataclass(frozen=True, slots=True)
class DetailFailed:
    project: str
    iid: int
    reason: str


@dataclass(frozen=True, slots=True)
class WriteFailed:
    path: Path
    reason: str


ReportError = (
    FilterError
    | ConfigError
    | LinkError
    | TokenUnreadable
    | ClientFailed
    | ListFailed
    | DetailFailed
    | WriteFailed
)
