"""Commit message block removal.

Contains:
- strip_commit_blocks: Remove every commit message block from text
- delete_commit_comments: Remove the blocks from a file in place
"""

from typing import Optional

from autogit.comments.markers import (
    COMMIT_BLOCK_RE,
    COMMIT_BLOCK_WITH_EOL_RE,
    LEADING_BLANK_LINES_RE,
    read_text,
    write_text,
)


def strip_commit_blocks(text: str) -> str:
    """Remove every commit message block from text.

    A block that starts a line is removed together with the line break that
    follows its end token; a block that starts mid-line leaves the rest of
    its line in place. Blank lines left at the start of the text are removed.

    Args:
        text: File content.

    Returns:
        Content without commit message blocks. Unchanged if there are none.
    """
    if not COMMIT_BLOCK_RE.search(text):
        return text
    stripped = COMMIT_BLOCK_WITH_EOL_RE.sub("", text)
    return LEADING_BLANK_LINES_RE.sub("", stripped)


def delete_commit_comments(path: Optional[str]) -> bool:
    """Remove the commit message blocks from a file, in place.

    The file is only rewritten when it contains at least one block.

    Args:
        path: Absolute path of the file.

    Returns:
        True if the file was rewritten, False otherwise.

    Raises:
        OSError: If the file cannot be read or written.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if not path:
        return False

    text = read_text(path)
    stripped = strip_commit_blocks(text)
    if stripped == text:
        return False

    write_text(path, stripped)
    return True
