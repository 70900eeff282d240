"""Tree writer with strategy-driven conflict handling and batch rollback.

This module persists File and Folder entries through a FileProvider:
- Files are gated by the WriteStrategy when their target already exists
- Folders are created with intermediate directories, then their contents
  are written into them as one batch
- A batch written under safe or overwrite is all-or-nothing: when any entry
  fails, every entry already written in that batch is removed again before
  MultipleErrors is raised
- Under skippable, failures are reported as per-entry outcomes and nothing
  is rolled back
"""

from collections.abc import Sequence
from typing import assert_never

import structlog

from fsexplorer.core.constants import DEFAULT_ENCODING
from fsexplorer.core.errors import (
    DirectoryNotValid,
    ExplorerError,
    FileExist,
    FileNotValid,
    MultipleErrors,
    PathDidNotExist,
    WriteError,
)
from fsexplorer.core.models import EntryOutcome, File, Folder, WriteStrategy
from fsexplorer.fs.paths import resolve_target
from fsexplorer.fs.provider import FileProvider
from fsexplorer.utils.debug import debug

logger = structlog.get_logger(__name__)


def write_entries(
    provider: FileProvider,
    entries: Sequence[File | Folder],
    path: str,
    strategy: WriteStrategy = WriteStrategy.SAFE,
) -> list[EntryOutcome]:
    """Write sibling entries into a destination directory.

    Args:
        provider: Filesystem capability to write through
        entries: Files and folders to write, in order
        path: Destination directory
        strategy: Conflict handling for existing targets

    Returns:
        One outcome per entry, in order

    Raises:
        PathDidNotExist: If path is empty
        MultipleErrors: If any entry failed under safe or overwrite; the
            batch has been rolled back when this is raised
    """
    if not path:
        raise PathDidNotExist(path)

    return _write_batch(provider, list(entries), path, WriteStrategy(strategy))


def write_entry(
    provider: FileProvider,
    entry: File | Folder,
    path: str,
    strategy: WriteStrategy = WriteStrategy.SAFE,
) -> EntryOutcome:
    """Write a single entry, failing fast with the entry's own error.

    Under skippable a failure is returned as a failed outcome instead.

    Raises:
        PathDidNotExist: If path is empty
        FileNotValid: If a file has an empty name
        DirectoryNotValid: If a folder has an empty name
        FileExist: If a file exists under the safe strategy
        WriteError: If the provider cannot create the target
        MultipleErrors: If a folder's contents failed and were rolled back
    """
    if not path:
        raise PathDidNotExist(path)

    strategy = WriteStrategy(strategy)
    try:
        return _write_entry(provider, entry, path, strategy)
    except (ExplorerError, OSError) as e:
        if strategy is not WriteStrategy.SKIPPABLE:
            raise
        return _failed(entry, path, e)


def _write_batch(
    provider: FileProvider,
    entries: list[File | Folder],
    path: str,
    strategy: WriteStrategy,
) -> list[EntryOutcome]:
    """Attempt every entry, then roll back the batch if any of them failed."""
    outcomes: list[EntryOutcome] = []
    errors: list[Exception] = []

    for entry in entries:
        try:
            outcomes.append(_write_entry(provider, entry, path, strategy))
        except (ExplorerError, OSError) as e:
            if strategy is WriteStrategy.SKIPPABLE:
                outcomes.append(_failed(entry, path, e))
            else:
                errors.append(e)

    if errors:
        _rollback(provider, outcomes)
        logger.warning(
            "write.batch_rolled_back",
            path=path,
            strategy=strategy.value,
            failed=len(errors),
            rolled_back=len(outcomes),
        )
        raise MultipleErrors(errors)

    return outcomes


def _write_entry(
    provider: FileProvider,
    entry: File | Folder,
    path: str,
    strategy: WriteStrategy,
) -> EntryOutcome:
    match entry:
        case File():
            return _write_file(provider, entry, path, strategy)
        case Folder():
            return _write_folder(provider, entry, path, strategy)
        case _:
            assert_never(entry)


def _write_file(
    provider: FileProvider,
    file: File,
    path: str,
    strategy: WriteStrategy,
) -> EntryOutcome:
    if not file.name:
        raise FileNotValid(file.filename)

    target = resolve_target(path, file.filename)

    if provider.exists(target):
        if strategy is WriteStrategy.SAFE:
            raise FileExist(target)
        if strategy is WriteStrategy.SKIPPABLE:
            debug(f"Skipped existing file: {target}")
            return EntryOutcome(entry=file, path=target, status="skipped")

    contents = None
    if file.content is not None:
        contents = file.content.encode(DEFAULT_ENCODING)

    # create_file replaces an existing target
    if not provider.create_file(target, contents, file.attributes):
        raise WriteError(target)

    return EntryOutcome(entry=file, path=target, status="written")


def _write_folder(
    provider: FileProvider,
    folder: Folder,
    path: str,
    strategy: WriteStrategy,
) -> EntryOutcome:
    if not folder.name:
        raise DirectoryNotValid(folder.name)

    target = resolve_target(path, folder.name)
    existed = provider.exists(target)
    # A merged folder keeps its own permissions and modification date
    attributes = None if existed else folder.attributes

    try:
        provider.create_directory(target, True, attributes)
    except OSError as e:
        logger.info("write.directory_failed", path=target, error=str(e))
        raise WriteError(target) from e

    created = not existed
    try:
        children = _write_batch(provider, list(folder.contents), target, strategy)
    except MultipleErrors:
        if created:
            _discard(provider, target)
        raise

    return EntryOutcome(
        entry=folder,
        path=target,
        status="written",
        created=created,
        children=children,
    )


def _rollback(provider: FileProvider, outcomes: list[EntryOutcome]) -> None:
    """Remove everything the given outcomes wrote.

    A folder that existed before the write is kept and only its written
    children are removed.
    """
    for outcome in outcomes:
        if outcome.status != "written":
            continue
        if isinstance(outcome.entry, Folder) and not outcome.created:
            _rollback(provider, outcome.children)
        else:
            _discard(provider, outcome.path)


def _discard(provider: FileProvider, path: str) -> None:
    """Remove a path, ignoring failures.

    Rollback removals are fire-and-forget: they are neither retried nor
    reported to the caller.
    """
    try:
        provider.remove(path)
    except OSError as e:
        debug(f"Rollback could not remove {path}: {e}")


def _failed(entry: File | Folder, path: str, error: Exception) -> EntryOutcome:
    name = entry.filename if isinstance(entry, File) else entry.name
    target = resolve_target(path, name) if name else path
    logger.info("write.entry_failed", path=target, error=str(error))
    return EntryOutcome(entry=entry, path=target, status="failed", error=error)
