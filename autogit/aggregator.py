"""Commit message aggregation for autogit.

Every file's commit message blocks are rendered as sections headed by the
file's <parent>/<name> label, then joined into the final commit message.
"""

from typing import Optional

from autogit.comments import get_commit_comments, split_comment_lines
from autogit.config import DEFAULT_HEADER_TEMPLATE
from autogit.paths import FileRef


def render_section(
    label: str,
    lines: list[str],
    header_template: str = DEFAULT_HEADER_TEMPLATE,
) -> str:
    """Render one file's message lines as a labeled section.

    Args:
        label: The file's <parent>/<name> label.
        lines: Non-blank message lines, in order.
        header_template: Header format; "{label}" is replaced by label.

    Returns:
        The header line, one line per message line, and a trailing newline.
    """
    header = header_template.replace("{label}", label)
    return "\n".join([header] + lines) + "\n"


def get_commit_messages(
    label: str,
    comments: list[str],
    header_template: str = DEFAULT_HEADER_TEMPLATE,
) -> list[str]:
    """Render every commit message block of a file as a section.

    Blocks with no non-blank line produce no section.

    Args:
        label: The file's <parent>/<name> label.
        comments: Inner text of each block.
        header_template: Header format for each section.

    Returns:
        One rendered section per non-empty block.
    """
    sections = []
    for comment in comments:
        lines = split_comment_lines(comment)
        if lines:
            sections.append(render_section(label, lines, header_template))
    return sections


def get_message(
    files: list[FileRef],
    header_template: Optional[str] = None,
) -> str:
    """Build the commit message for a set of files.

    Args:
        files: Files in the order they were given.
        header_template: Header format for each section.

    Returns:
        All sections joined by newlines, or "" if no file has a block.

    Raises:
        OSError: If a file cannot be read.
    """
    header_template = header_template or DEFAULT_HEADER_TEMPLATE
    sections: list[str] = []

    for file in files:
        comments = get_commit_comments(file.path)
        if comments:
            sections.extend(get_commit_messages(file.label, comments, header_template))

    return "\n".join(sections)
