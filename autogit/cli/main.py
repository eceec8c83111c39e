"""Main CLI command for committing files with their embedded messages."""

from typing import List, Optional

import typer
from dotenv import load_dotenv

from autogit import __version__
from autogit.config import EmptyMessagePolicy, build_config
from autogit.exceptions import AutoGitError
from autogit.git import GitCommitter, GitError, get_repo_root
from autogit.paths import build_file_refs
from autogit.pipeline import CommitPipeline, PipelineStatus
from autogit.result import ErrorKind


USAGE = "Usage: autogit <path> [<path> ...]"


def _echo_err(message: str) -> None:
    typer.echo(message, err=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"autogit {__version__}")
        raise typer.Exit()


def main_command(
    paths: Optional[List[str]] = typer.Argument(
        None,
        help="Files to commit. Their /*#COMMIT_MESSAGE ... #*/ blocks become the commit message",
        show_default=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show each pipeline step as it runs",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Commit files using the commit messages embedded in them.

    Each file's commit message block is removed from the file before the
    commit. If anything fails, every file is restored to its original content.
    """
    if not paths:
        typer.echo(USAGE)
        raise typer.Exit(1)

    # Load environment variables from .env file
    load_dotenv()

    try:
        config = build_config()
    except AutoGitError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    try:
        repo_root = get_repo_root(config.work_dir)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    files = build_file_refs(paths, config.work_dir, config.home_dir)
    committer = GitCommitter(
        repo_root,
        allow_empty_message=config.empty_message == EmptyMessagePolicy.ALLOW,
    )
    pipeline = CommitPipeline(config, committer, echo=_echo_err, debug=debug)

    outcome = pipeline.run(files)

    if outcome.status == PipelineStatus.COMMITTED:
        typer.echo("Commit successful!", err=True)
        if outcome.commit_id:
            typer.echo(outcome.commit_id)
    elif outcome.status == PipelineStatus.SKIPPED:
        typer.echo("No commit message found. Nothing was committed.", err=True)
    elif outcome.error is not None and outcome.error.kind == ErrorKind.EMPTY_MESSAGE:
        typer.echo(
            "No /*#COMMIT_MESSAGE block found in any file. No file was changed.",
            err=True,
        )
        raise typer.Exit(1)
    elif outcome.restored:
        typer.echo("Commit failed! Files were restored.", err=True)
        raise typer.Exit(1)
    else:
        typer.echo("Commit failed! No file was changed.", err=True)
        raise typer.Exit(1)
