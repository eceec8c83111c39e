"""Commit message extraction.

Contains:
- find_commit_blocks: Find the inner text of every commit message block
- get_commit_comments: Read a file and return its commit message blocks
- split_comment_lines: Split a block into its non-blank lines
"""

from typing import Optional

from autogit.comments.markers import COMMIT_BLOCK_RE, read_text


def find_commit_blocks(text: str) -> list[str]:
    """Find every commit message block in text.

    Args:
        text: File content.

    Returns:
        Inner text of each block, in file order.
    """
    return [match.group(1) for match in COMMIT_BLOCK_RE.finditer(text)]


def get_commit_comments(path: Optional[str]) -> Optional[list[str]]:
    """Get the commit message blocks embedded in a file.

    Args:
        path: Absolute path of the file.

    Returns:
        Inner text of each block (empty list if the file has none), or None
        if no path was given.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if not path:
        return None
    return find_commit_blocks(read_text(path))


def split_comment_lines(comment: str) -> list[str]:
    """Split a commit message block into lines, dropping blank ones."""
    return [line for line in comment.split("\n") if line]
