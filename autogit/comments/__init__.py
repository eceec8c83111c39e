"""Commit message block handling for autogit.

This package provides:
- markers: Marker tokens and the pattern shared by extraction and removal
- extractor: find_commit_blocks, get_commit_comments, split_comment_lines
- stripper: strip_commit_blocks, delete_commit_comments
"""

# Markers
from autogit.comments.markers import (
    COMMIT_BLOCK_RE,
    COMMIT_MESSAGE_END,
    COMMIT_MESSAGE_START,
)

# Extraction
from autogit.comments.extractor import (
    find_commit_blocks,
    get_commit_comments,
    split_comment_lines,
)

# Removal
from autogit.comments.stripper import (
    delete_commit_comments,
    strip_commit_blocks,
)


__all__ = [
    # Markers
    "COMMIT_BLOCK_RE",
    "COMMIT_MESSAGE_END",
    "COMMIT_MESSAGE_START",
    # Extraction
    "find_commit_blocks",
    "get_commit_comments",
    "split_comment_lines",
    # Removal
    "delete_commit_comments",
    "strip_commit_blocks",
]
