"""Commit pipeline for autogit.

Runs the steps that turn a set of files into one commit:

1. Snapshot every file
2. Extract and aggregate the commit message blocks
3. Strip the blocks from every file
4. Stage and commit the files

Every step returns a Result; exceptions escaping a step are turned into one.
If a step fails once files may have been modified, every file is restored
from its snapshot. Snapshots are deleted whatever the outcome.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from autogit.aggregator import get_message
from autogit.comments import delete_commit_comments
from autogit.config import AutoGitConfig, EmptyMessagePolicy
from autogit.git.committer import Committer
from autogit.paths import FileRef
from autogit.result import Err, ErrorKind, Ok, Result
from autogit.snapshot import BackupRecord, SnapshotManager, get_snapshot_dir


class PipelineStatus(Enum):
    """Terminal states of a pipeline run."""

    COMMITTED = "committed"  # Files stripped and committed
    SKIPPED = "skipped"  # No commit message found, nothing changed
    RECOVERED = "recovered"  # A step failed, files restored


class PipelineStep(Enum):
    """Steps of a pipeline run, in order."""

    INIT = "init"
    SNAPSHOT = "snapshot"
    AGGREGATE = "aggregate"
    STRIP = "strip"
    COMMIT = "commit"


@dataclass
class PipelineOutcome:
    """Result of a pipeline run."""

    status: PipelineStatus
    step: PipelineStep = PipelineStep.INIT  # Last step that was started
    restored: bool = False  # Files were rewritten from their snapshots
    message: str = ""
    commit_id: Optional[str] = None
    error: Optional[Err] = None
    restore_error: Optional[Err] = None
    cleanup_error: Optional[Err] = None
    stripped_files: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status != PipelineStatus.RECOVERED


def _silent(_message: str) -> None:
    pass


class CommitPipeline:
    """Commits files using the messages embedded in them."""

    def __init__(
        self,
        config: AutoGitConfig,
        committer: Committer,
        echo: Callable[[str], None] = _silent,
        debug: bool = False,
    ):
        self.config = config
        self.committer = committer
        self.echo = echo
        self.debug = debug
        self.snapshots = SnapshotManager(get_snapshot_dir(config.tmp_dir))

    def _debug(self, message: str) -> None:
        if self.debug:
            self.echo(message)

    def _aggregate(self, files: list[FileRef]) -> Result:
        try:
            message = get_message(files, self.config.header_template)
        except (OSError, UnicodeDecodeError) as e:
            return Err(ErrorKind.IO, f"Cannot read commit messages: {e}")
        return Ok(message)

    def _strip(self, files: list[FileRef]) -> Result:
        stripped = []
        for file in files:
            try:
                if delete_commit_comments(file.path):
                    stripped.append(file.path)
            except (OSError, UnicodeDecodeError) as e:
                return Err(ErrorKind.IO, f"Cannot remove commit message from {file.path}: {e}")
        return Ok(stripped)

    def _commit(self, files: list[FileRef], message: str) -> Result:
        return self.committer.stage_and_commit([file.path for file in files], message)

    def _run_steps(self, files: list[FileRef], records: list[BackupRecord], outcome: PipelineOutcome) -> Optional[Err]:
        """Run snapshot, aggregate, strip and commit; return the first error."""
        outcome.step = PipelineStep.SNAPSHOT
        self._debug(f"Snapshotting {len(files)} file(s) to {self.snapshots.snapshot_dir}")
        result = self.snapshots.create_copies(files)
        if isinstance(result, Err):
            return result
        records.extend(result.value)

        outcome.step = PipelineStep.AGGREGATE
        self._debug("Collecting commit messages")
        result = self._aggregate(files)
        if isinstance(result, Err):
            return result
        outcome.message = result.value

        if not outcome.message:
            policy = self.config.empty_message
            if policy == EmptyMessagePolicy.FAIL:
                return Err(ErrorKind.EMPTY_MESSAGE, "No commit message block found in any file")
            if policy == EmptyMessagePolicy.SKIP:
                self._debug("No commit message block found; skipping commit")
                outcome.status = PipelineStatus.SKIPPED
                return None

        outcome.step = PipelineStep.STRIP
        self._debug("Removing commit message blocks")
        result = self._strip(files)
        if isinstance(result, Err):
            return result
        outcome.stripped_files = result.value

        outcome.step = PipelineStep.COMMIT
        self._debug("Committing")
        result = self._commit(files, outcome.message)
        if isinstance(result, Err):
            return result
        outcome.commit_id = result.value
        outcome.status = PipelineStatus.COMMITTED
        return None

    def _recover(self, records: list[BackupRecord], outcome: PipelineOutcome, error: Err) -> None:
        outcome.status = PipelineStatus.RECOVERED
        outcome.error = error
        outcome.commit_id = None

        # Files are only modified from the strip step on
        if outcome.step in (PipelineStep.STRIP, PipelineStep.COMMIT):
            restored = self.snapshots.restore_copies(records)
            outcome.restored = True
            if isinstance(restored, Err):
                outcome.restore_error = restored
                self.echo(str(restored))

        self.echo(str(error))

    def run(self, files: list[FileRef]) -> PipelineOutcome:
        """Commit files with the messages embedded in them.

        Args:
            files: Files to commit, in the order their messages appear.

        Returns:
            The outcome. On failure every file has been restored to the
            content it had before the run.
        """
        records: list[BackupRecord] = []
        outcome = PipelineOutcome(status=PipelineStatus.COMMITTED)

        try:
            try:
                error = self._run_steps(files, records, outcome)
            except Exception as e:
                kind = ErrorKind.COMMIT if outcome.step == PipelineStep.COMMIT else ErrorKind.IO
                error = Err(kind, f"{type(e).__name__}: {e}")

            if error is not None:
                self._recover(records, outcome, error)
        finally:
            cleaned = self.snapshots.delete_copies(records)
            if isinstance(cleaned, Err):
                outcome.cleanup_error = cleaned
                self.echo(str(cleaned))

        return outcome
