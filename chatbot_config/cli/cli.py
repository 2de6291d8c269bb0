# chatbot_config/cli/cli.py
"""
chatbot-config CLI - main application.

A single default action runs the configuration wizard. Heavy imports happen
only when the wizard actually runs.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer

from chatbot_config import __version__
from chatbot_config.logging.logger import configure_logging

app = typer.Typer(
    name="chatbot-config",
    help="Creates a new chatbot configuration.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    prefix: Optional[str] = typer.Option(
        None, "--prefix", "-p", help="The prefix for the stack."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Creates a new chatbot configuration."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    from chatbot_config.cli.commands import create as mod

    mod.command(prefix=prefix)


if __name__ == "__main__":
    app()
