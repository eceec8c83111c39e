"""In-file commit message marker format.

A commit message block starts with the literal token "/*#COMMIT_MESSAGE"
followed by a newline and ends with the literal token "#*/":

    /*#COMMIT_MESSAGE
    Fix rounding in invoice totals
    #*/
"""

import re


COMMIT_MESSAGE_START = "/*#COMMIT_MESSAGE\n"
COMMIT_MESSAGE_END = "#*/"

# Non-greedy so that several blocks in one file are matched separately
COMMIT_BLOCK_RE = re.compile(
    re.escape(COMMIT_MESSAGE_START) + r"(.*?)" + re.escape(COMMIT_MESSAGE_END),
    re.DOTALL,
)

# Same blocks as COMMIT_BLOCK_RE. A block that starts a line also takes the
# line break after its end token; a block that starts mid-line leaves it.
COMMIT_BLOCK_WITH_EOL_RE = re.compile(
    r"^(?:" + COMMIT_BLOCK_RE.pattern + r")\n?|" + COMMIT_BLOCK_RE.pattern,
    re.DOTALL | re.MULTILINE,
)

LEADING_BLANK_LINES_RE = re.compile(r"\A\n+")


def read_text(path: str) -> str:
    """Read a file as UTF-8 without newline translation."""
    with open(path, "rb") as f:
        return f.read().decode("utf-8")


def write_text(path: str, text: str) -> None:
    """Write a file as UTF-8 without newline translation."""
    with open(path, "wb") as f:
        f.write(text.encode("utf-8"))
