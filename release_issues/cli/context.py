from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from release_issues.core.config import Config, ConfigError, load_config, load_config_or_default
from release_issues.core.result import Err, Ok, Result
from release_issues.output.console import ConsoleProtocol, RichConsole
from release_issues.output.errors import print_report_error, report_error_exit_code
from release_issues.platform.paths import user_config_path


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def resolve_config(config_path: Path | None) -> Result[Config, ConfigError]:
    """Load an explicit config file, or the user config if present."""
    if config_path is not None:
        return load_config(config_path.expanduser())
    try:
        default_path = user_config_path()
    except RuntimeError:
        # No home directory: nothing to read, run with defaults
        return Ok(Config())
    return load_config_or_default(default_path)


def build_context(config_path: Path | None = None) -> CLIContext:
    console = RichConsole()
    result = resolve_config(config_path)
    if isinstance(result, Err):
        print_report_error(result.error, console)
        raise typer.Exit(code=report_error_exit_code(result.error))

    return CLIContext(config=result.value, console=console)
