"""Snapshot module for autogit.

This package keeps byte-identical copies of files while they are modified:
- models: BackupRecord
- manager: SnapshotManager, get_snapshot_dir, compute_snapshot_key
"""

# Models
from autogit.snapshot.models import (
    BackupRecord,
)

# Manager
from autogit.snapshot.manager import (
    SNAPSHOT_DIR_NAME,
    SnapshotManager,
    compute_snapshot_key,
    get_snapshot_dir,
)


__all__ = [
    # Models
    "BackupRecord",
    # Manager
    "SNAPSHOT_DIR_NAME",
    "SnapshotManager",
    "compute_snapshot_key",
    "get_snapshot_dir",
]
