"""Snapshot manager for autogit.

Contains:
- get_snapshot_dir: Directory holding snapshots inside the temp directory
- compute_snapshot_key: Snapshot file name for a source path
- SnapshotManager: Creates, restores and deletes file snapshots
"""

import hashlib
from pathlib import Path

from autogit.paths import FileRef
from autogit.result import Err, ErrorKind, Ok, Result
from autogit.snapshot.models import BackupRecord


SNAPSHOT_DIR_NAME = "autogit"


def get_snapshot_dir(tmp_dir: Path) -> Path:
    """Return the directory used for snapshots.

    Args:
        tmp_dir: The process-wide temporary directory.

    Returns:
        Path to <tmp_dir>/autogit.
    """
    return tmp_dir / SNAPSHOT_DIR_NAME


def compute_snapshot_key(path: str) -> str:
    """Compute the snapshot file name for a source path.

    The key depends only on the path string, never on file content.

    Args:
        path: Absolute path of the source file.

    Returns:
        SHA256 hex digest of the path.
    """
    return hashlib.sha256(path.encode()).hexdigest()


class SnapshotManager:
    """Creates, restores and deletes file snapshots in one directory."""

    def __init__(self, snapshot_dir: Path):
        self.snapshot_dir = Path(snapshot_dir)

    def _snapshot_path(self, record: BackupRecord) -> Path:
        return self.snapshot_dir / record.filename

    def create_copies(self, files: list[FileRef]) -> Result:
        """Snapshot every file before it is modified.

        If any file cannot be snapshotted, the snapshots already written by
        this call are removed and an error is returned.

        Args:
            files: Files to snapshot.

        Returns:
            Ok with one BackupRecord per file, or Err(IO).
        """
        try:
            self.snapshot_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(ErrorKind.IO, f"Cannot create snapshot directory {self.snapshot_dir}: {e}")

        records: list[BackupRecord] = []
        for file in files:
            key = compute_snapshot_key(file.path)
            if any(record.filename == key for record in records):
                self.delete_copies(records)
                return Err(ErrorKind.IO, f"Duplicate snapshot key for {file.path}")

            copy = self.snapshot_dir / key
            try:
                copy.write_bytes(Path(file.path).read_bytes())
            except OSError as e:
                self.delete_copies(records)
                return Err(ErrorKind.IO, f"Cannot snapshot {file.path}: {e}")

            records.append(BackupRecord(original=file.path, filename=key, copy=str(copy)))

        return Ok(records)

    def restore_copies(self, records: list[BackupRecord]) -> Result:
        """Overwrite every original file with its snapshot.

        Records whose snapshot no longer exists are skipped. A failure on one
        record does not stop the others.

        Args:
            records: Records returned by create_copies.

        Returns:
            Ok with the restored paths, or Err(IO) naming every failure.
        """
        restored: list[str] = []
        failures: list[str] = []

        for record in records:
            snapshot = self._snapshot_path(record)
            if not snapshot.exists():
                continue
            try:
                Path(record.original).write_bytes(snapshot.read_bytes())
                restored.append(record.original)
            except OSError as e:
                failures.append(f"{record.original}: {e}")

        if failures:
            return Err(ErrorKind.IO, "Failed to restore " + "; ".join(failures))
        return Ok(restored)

    def delete_copies(self, records: list[BackupRecord]) -> Result:
        """Remove every snapshot file.

        Snapshots that are already gone count as removed, so calling this
        more than once for the same records is safe.

        Args:
            records: Records returned by create_copies.

        Returns:
            Ok with the removed snapshot paths, or Err(IO) naming every failure.
        """
        removed: list[str] = []
        failures: list[str] = []

        for record in records:
            snapshot = self._snapshot_path(record)
            try:
                snapshot.unlink()
                removed.append(str(snapshot))
            except FileNotFoundError:
                continue
            except OSError as e:
                failures.append(f"{snapshot}: {e}")

        if failures:
            return Err(ErrorKind.IO, "Failed to delete " + "; ".join(failures))
        return Ok(removed)
