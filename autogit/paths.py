"""Input path handling for autogit.

Contains:
- FileRef: A file given on the command line
- resolve_path: Turn a command-line argument into an absolute path
- get_parent_directory_name: Name of the directory containing a path
- build_file_refs: Build FileRefs for a list of arguments
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class FileRef(BaseModel):
    """A file to commit."""

    model_config = ConfigDict(frozen=True)

    name: str
    parent: str
    path: str

    @property
    def label(self) -> str:
        """Identifying label used in the commit message: <parent>/<name>."""
        return f"{self.parent}/{self.name}"


def resolve_path(arg: str, work_dir: Path, home_dir: Path) -> str:
    """Turn a command-line argument into an absolute path.

    Accepted forms:
    - /absolute/path: used unchanged
    - ./relative/path: relative to work_dir
    - ~/path or '~/path (shell-quoted tilde): relative to home_dir
    - anything else: relative to work_dir

    Args:
        arg: The path argument as given.
        work_dir: Directory relative paths are resolved against.
        home_dir: The user's home directory.

    Returns:
        The absolute path as a string.
    """
    if arg.startswith("/"):
        return os.path.normpath(arg)
    if arg.startswith("./"):
        return os.path.normpath(os.path.join(str(work_dir), arg[2:]))
    if arg.startswith("'~/"):
        return os.path.normpath(os.path.join(str(home_dir), arg[3:].rstrip("'")))
    if arg.startswith("~/"):
        return os.path.normpath(os.path.join(str(home_dir), arg[2:]))
    return os.path.normpath(os.path.join(str(work_dir), arg))


def get_parent_directory_name(path: Optional[str]) -> Optional[str]:
    """Get the name of the directory that contains path.

    Args:
        path: An absolute path.

    Returns:
        The immediate parent directory name ("" for files at the filesystem
        root), or None if no path was given.
    """
    if not path:
        return None
    return Path(path).parent.name


def build_file_refs(args: list[str], work_dir: Path, home_dir: Path) -> list[FileRef]:
    """Build FileRefs for the given arguments.

    Arguments that resolve to the same absolute path are collapsed into the
    first occurrence; input order is otherwise preserved.

    Args:
        args: Path arguments as given on the command line.
        work_dir: Directory relative paths are resolved against.
        home_dir: The user's home directory.

    Returns:
        One FileRef per distinct resolved path.
    """
    files: list[FileRef] = []
    seen: set[str] = set()

    for arg in args:
        path = resolve_path(arg, work_dir, home_dir)
        if path in seen:
            continue
        seen.add(path)
        files.append(
            FileRef(
                name=Path(path).name,
                parent=get_parent_directory_name(path) or "",
                path=path,
            )
        )

    return files
