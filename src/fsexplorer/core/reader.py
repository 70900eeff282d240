"""Recursive directory reader.

This module walks a directory through a FileProvider and materializes its
contents as File and Folder entries. Reading never mutates the filesystem.
"""

from collections.abc import Callable
from typing import Any, TypeVar

import structlog

from fsexplorer.core.constants import DEFAULT_ENCODING
from fsexplorer.core.errors import DirectoryNotValid, PathDidNotExist
from fsexplorer.core.models import Entry, File, Folder
from fsexplorer.fs.paths import resolve_target, split_filename
from fsexplorer.fs.provider import FileProvider
from fsexplorer.utils.debug import debug

T = TypeVar("T")

logger = structlog.get_logger(__name__)


def read_tree(
    provider: FileProvider,
    path: str,
    include_folders: bool = False,
    recursive: bool = False,
) -> list[Entry]:
    """Read the entries of a directory.

    Args:
        provider: Filesystem capability to read through
        path: Directory to read, optionally starting with ``~``
        include_folders: Whether sub-folders produce Folder entries
        recursive: Whether Folder entries are filled with their contents

    Returns:
        Entries in the order the provider listed them

    Raises:
        DirectoryNotValid: If the directory (or a nested one) cannot be listed
        PathDidNotExist: If a listed item disappears before it is probed
    """
    target = resolve_target(path)

    try:
        names = provider.list_directory(target)
    except OSError as e:
        logger.debug("read.list_failed", path=target, error=str(e))
        raise DirectoryNotValid(target) from e

    entries: list[Entry] = []
    for name in names:
        entry = _read_item(provider, target, name, include_folders, recursive)
        if entry is not None:
            entries.append(entry)

    debug(f"Read {len(entries)} entries from {target}")
    return entries


def _read_item(
    provider: FileProvider,
    directory: str,
    name: str,
    include_folders: bool,
    recursive: bool,
) -> Entry | None:
    """Classify one listed name and build its entry.

    Returns:
        The entry, or None for a folder excluded by include_folders
    """
    item_path = resolve_target(directory, name)
    exists, is_directory = provider.probe(item_path)
    if not exists:
        raise PathDidNotExist(item_path)

    if not is_directory:
        base, extension = split_filename(name)
        return File(
            name=base,
            extension=extension,
            content=_read_optional(
                lambda: provider.read_text(item_path, DEFAULT_ENCODING), item_path
            ),
            attributes=_read_attributes(provider, item_path),
        )

    if not include_folders:
        return None

    contents: list[Entry] = []
    if recursive:
        contents = read_tree(provider, item_path, include_folders, recursive)

    return Folder(
        name=name,
        contents=contents,
        attributes=_read_attributes(provider, item_path),
    )


def _read_attributes(provider: FileProvider, path: str) -> dict[str, Any] | None:
    return _read_optional(lambda: provider.read_attributes(path), path)


def _read_optional(read: Callable[[], T], path: str) -> T | None:
    """Run a best-effort read, returning None when it fails.

    Scanning keeps going when attributes or content cannot be read; the
    discarded error is only reported through debug output.
    """
    try:
        return read()
    except (OSError, UnicodeDecodeError) as e:
        debug(f"Best-effort read failed for {path}: {e}")
        return None
