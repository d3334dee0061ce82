"""Platform-aware path utilities.

Locates the user's home directory and the user-level configuration
directory, and expands ``~`` in user-supplied paths.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from release_issues.core.result import Err, Ok, Result

__all__ = [
    "APP_NAME",
    "HomeError",
    "clear_caches",
    "expand_home",
    "home",
    "is_windows",
    "user_config_dir",
    "user_config_path",
]

# Application name used for directory naming
APP_NAME = "release-issues"


@dataclass(frozen=True, slots=True)
class HomeError:
    message: str


def is_windows() -> bool:
    return os.name == "nt"


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    Uses USERPROFILE on Windows, HOME on Unix, then Path.home().

    Raises:
        RuntimeError: If the home directory cannot be determined.
    """
    if is_windows():
        userprofile = os.environ.get("USERPROFILE")
        if userprofile:
            return Path(userprofile)
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            return Path(home_env)

    return Path.home()


def expand_home(path: str) -> Result[str, HomeError]:
    """Replace the first ``~`` in path with the home directory.

    Returns Err when the home directory cannot be resolved; callers decide
    whether to carry on with the unexpanded path.
    """
    try:
        resolved = home()
    except RuntimeError as e:
        return Err(HomeError(f"cannot resolve home directory: {e}"))
    return Ok(path.replace("~", str(resolved), 1))


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """Get the user-level configuration directory.

    Location: ~/.config/release-issues/ (Linux/macOS) or
    %APPDATA%/release-issues/ (Windows).
    """
    if is_windows():
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


def user_config_path() -> Path:
    return user_config_dir() / "config.toml"


def clear_caches() -> None:
    """Clear cached paths (tests change environment variables)."""
    home.cache_clear()
    user_config_dir.cache_clear()
