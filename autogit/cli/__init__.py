"""CLI entry point for autogit."""

import typer

from autogit.cli.main import main_command


app = typer.Typer(
    name="autogit",
    help="autogit: commit files with the messages embedded in them",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
]
