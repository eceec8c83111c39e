"""Snapshot data models for autogit."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BackupRecord:
    """Snapshot of one file, taken before it is modified."""

    original: str  # Absolute path of the snapshotted file
    filename: str  # Name of the snapshot inside the snapshot directory
    copy: str  # Absolute path of the snapshot
