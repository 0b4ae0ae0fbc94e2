#!/usr/bin/env python3
"""
ssoadm - Directory group administration

A CLI tool for updating group descriptions and memberships in AWS Identity Center.
"""
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .commands import group, profile
from .commands.common import config
from .utils.logging_config import LogFormat, LoggingConfig, LogLevel, get_logger, setup_logging

app = typer.Typer(
    help="Directory group administration - update group descriptions and memberships in AWS Identity Center.",
    add_completion=True,
    no_args_is_help=True,
)
console = Console()

app.add_typer(profile.app, name="profile")
app.add_typer(group.app, name="group")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress logging"),
    debug: bool = typer.Option(False, "--debug", help="Show debug logging"),
    log_format: LogFormat = typer.Option(
        LogFormat.DETAILED, "--log-format", help="Log output format", case_sensitive=False
    ),
):
    """Configure logging for all commands."""
    if debug:
        level = LogLevel.DEBUG
    elif verbose:
        level = LogLevel.INFO
    else:
        try:
            level = LogLevel(config.get_log_level())
        except ValueError:
            level = LogLevel.WARNING

    setup_logging(LoggingConfig.from_settings(config.get("logging"), level, log_format))
    get_logger("cli").debug(f"Logging configured at {level.value}")


@app.command()
def version():
    """Show the application version and exit."""
    console.print(f"ssoadm version: {__version__}")
    raise typer.Exit()


def run(args: Optional[list] = None) -> None:
    """Entry point for the ssoadm console script."""
    app(args=args)


if __name__ == "__main__":
    run()
