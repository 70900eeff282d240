"""Filesystem capability and path helpers.

This module provides the FileProvider abstraction the explorer operates
through, its OS-backed default, and pure path resolution helpers.
"""

from fsexplorer.fs.paths import (
    join_filename,
    resolve_target,
    split_filename,
    without_extension,
)
from fsexplorer.fs.provider import FileProvider, OSFileProvider

__all__ = [
    "FileProvider",
    "OSFileProvider",
    "join_filename",
    "resolve_target",
    "split_filename",
    "without_extension",
]
