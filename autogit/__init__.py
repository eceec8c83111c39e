"""Commit files using commit messages embedded in their contents."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("autogit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
