"""Typed configuration loading and access.

The configuration file is optional. Every value defaults to what the tool
has always used, so a run without a config file queries the same project
with the same token file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .links import DEFAULT_ISSUES_LINK, server_url
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GitLabConfig",
    "ReportConfig",
    "load_config",
    "load_config_or_default",
    "DEFAULT_GITLAB_URL",
    "DEFAULT_TOKEN_FILE",
]

DEFAULT_GITLAB_URL = "https://gitlab.com"
DEFAULT_TOKEN_FILE = "~/.gitlab"
DEFAULT_OUTPUT_DIR = "."


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitLabConfig:
    """Where the issues live and how to authenticate.

    ``url`` is optional: when unset, the server is taken from the issues link.
    """

    url: str | None = None
    issues_link: str = DEFAULT_ISSUES_LINK
    token_file: str = DEFAULT_TOKEN_FILE

    def server(self) -> str:
        return self.url or server_url(self.issues_link) or DEFAULT_GITLAB_URL


@dataclass(frozen=True, slots=True)
class ReportConfig:
    output_dir: str = DEFAULT_OUTPUT_DIR


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    gitlab: GitLabConfig = field(default_factory=GitLabConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        gitlab: StrDict = get_table(data, "gitlab") or {}
        report: StrDict = get_table(data, "report") or {}

        return cls(
            gitlab=GitLabConfig(
                url=get_str(gitlab, "url"),
                issues_link=get_str(gitlab, "issues_link") or DEFAULT_ISSUES_LINK,
                token_file=get_str(gitlab, "token_file") or DEFAULT_TOKEN_FILE,
            ),
            report=ReportConfig(
                output_dir=get_str(report, "output_dir") or DEFAULT_OUTPUT_DIR,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config if the file exists, otherwise return defaults.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
