"""GitLab issues link parsing.

Only handles links shaped like
``https://<host>/<group>/<subgroup>/<subgroup>/<project>/-/issues/...``:
the project path is always the first four path segments.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from .result import Err, Ok, Result

__all__ = [
    "DEFAULT_ISSUES_LINK",
    "LinkError",
    "extract_project_path",
    "server_url",
]

DEFAULT_ISSUES_LINK = (
    "https://gitlab.com/f5/volterra/support/technical/-/issues/?sort=created_date&state=opened"
)

_PROJECT_SEGMENTS = 4


@dataclass(frozen=True, slots=True)
class LinkError:
    """Issues link could not be turned into a project path."""

    link: str
    message: str


def extract_project_path(link: str) -> Result[str, LinkError]:
    """Return the project path (``a/b/c/d``) of an issues link.

    Args:
        link: Full issues URL

    Returns:
        Ok with the slash-joined project path, or Err with LinkError
    """
    try:
        parts = urlsplit(link)
    except ValueError as e:
        return Err(LinkError(link=link, message=f"Error parsing GitLab issues link: {e}"))

    # Leading "/" yields an empty first segment
    segments = parts.path.split("/")
    project = segments[1 : _PROJECT_SEGMENTS + 1]
    if len(segments) < _PROJECT_SEGMENTS + 1 or not all(project):
        return Err(LinkError(link=link, message=f"invalid GitLab issues link: {link}"))

    return Ok("/".join(project))


def server_url(link: str) -> str | None:
    """Return ``scheme://host`` of a link, or None if it has neither."""
    try:
        parts = urlsplit(link)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return f"{parts.scheme}://{parts.netloc}"
