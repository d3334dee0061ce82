from __future__ import annotations

import typer

from release_issues.cli.commands.report import report

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)

# Single command: typer runs it without a subcommand name
app.command()(report)


def main() -> None:
    app()
