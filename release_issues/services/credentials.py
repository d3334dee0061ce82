"""GitLab token loading.

The token file holds a personal access token, optionally written as
``token:<value>``. Surrounding whitespace and that prefix are removed; the
token itself is never checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from release_issues.core.result import Err, Ok, Result
from release_issues.platform.paths import expand_home
from release_issues.services.errors import TokenUnreadable

if TYPE_CHECKING:
    from release_issues.output.console import ConsoleProtocol

__all__ = ["TOKEN_PREFIX", "load_token", "parse_token", "resolve_token_path"]

TOKEN_PREFIX = "token:"


def parse_token(raw: str) -> str:
    return raw.strip().removeprefix(TOKEN_PREFIX)


def resolve_token_path(path: str, console: ConsoleProtocol) -> str:
    """Expand ``~`` in the token file path.

    If the home directory cannot be resolved, warn and keep the path as is.
    """
    result = expand_home(path)
    if isinstance(result, Err):
        console.warning(result.error.message)
        return path
    return result.value


def load_token(path: str) -> Result[str, TokenUnreadable]:
    """Read and clean the token stored at path."""
    try:
        with open(path, encoding="utf-8") as handle:
            raw = handle.read()
    except OSError as e:
        return Err(TokenUnreadable(path=path, reason=e.strerror or str(e)))
    except UnicodeDecodeError as e:
        return Err(TokenUnreadable(path=path, reason=f"not valid UTF-8: {e.reason}"))
    return Ok(parse_token(raw))
