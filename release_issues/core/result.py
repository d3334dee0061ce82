"""Result type for explicit error handling.

Every stage of the report pipeline returns ``Ok(value)`` or ``Err(error)``
instead of raising, so the CLI can decide in one place how a failure ends
the process.

Usage:
    match extract_project_path(link):
        case Ok(path):
            console.info(f"Project path: {path}")
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
