"""Explorer facade over the reader, writer and deleter.

The Explorer binds the operations to one FileProvider so callers do not
pass it on every call. Construct one where it is needed; there is no
shared default instance.
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from typing import Any

import structlog

from fsexplorer.core import deleter, reader, writer
from fsexplorer.core.errors import PathDidNotExist
from fsexplorer.core.models import (
    BatchFileOperation,
    BatchFolderOperation,
    Entry,
    EntryOutcome,
    File,
    Folder,
    SingleFileOperation,
    SingleFolderOperation,
    WriteOperation,
    WriteStrategy,
)
from fsexplorer.fs.provider import FileProvider, OSFileProvider


class Explorer:
    """Reads, writes and deletes File and Folder entries.

    Example:
        >>> explorer = Explorer()
        >>> notes = File(name="notes", extension="txt", content="hi")
        >>> explorer.write(notes, "~/tmp")
    """

    def __init__(
        self, provider: FileProvider | None = None, logger: Any = None
    ) -> None:
        """Initialize explorer.

        Args:
            provider: Filesystem capability; defaults to the OS-backed one
            logger: Optional structlog logger instance
        """
        self._provider = provider or OSFileProvider()
        self._logger = logger or structlog.get_logger(__name__)

    @property
    def current_directory_path(self) -> str:
        """Working directory reported by the provider."""
        return self._provider.current_directory()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def read(
        self,
        path: str,
        include_folders: bool = False,
        recursive: bool = False,
    ) -> list[Entry]:
        """Read the entries of the directory at path.

        See fsexplorer.core.reader.read_tree for details.
        """
        entries = reader.read_tree(self._provider, path, include_folders, recursive)
        self._logger.debug("explorer.read", path=path, entries=len(entries))
        return entries

    def list(
        self,
        path: str,
        include_folders: bool = False,
        recursive: bool = False,
    ) -> list[Entry]:
        """Deprecated alias of read()."""
        warnings.warn(
            "Explorer.list() is deprecated, use Explorer.read()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.read(path, include_folders, recursive)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def write(
        self,
        entries: File | Folder | Sequence[File | Folder] | WriteOperation,
        path: str | None = None,
        strategy: WriteStrategy = WriteStrategy.SAFE,
    ) -> list[EntryOutcome]:
        """Write files and folders into a destination directory.

        Args:
            entries: One entry, a sequence of sibling entries, or a
                WriteOperation carrying both entries and path
            path: Destination directory; taken from the WriteOperation
                when omitted
            strategy: Conflict handling for existing targets

        Returns:
            One outcome per top-level entry

        Raises:
            PathDidNotExist: If the destination path is empty
            MultipleErrors: If the batch failed and was rolled back
        """
        if isinstance(entries, WriteOperation):
            path = entries.path if path is None else path
            entries = entries.entries
        elif isinstance(entries, (File, Folder)):
            entries = [entries]

        outcomes = writer.write_entries(self._provider, entries, path or "", strategy)
        self._logger.info(
            "explorer.write",
            path=path,
            strategy=WriteStrategy(strategy).value,
            entries=len(outcomes),
        )
        return outcomes

    def write_file(
        self,
        operation: SingleFileOperation,
        strategy: WriteStrategy = WriteStrategy.SAFE,
    ) -> EntryOutcome:
        """Write one file, raising its own error on failure."""
        return writer.write_entry(
            self._provider, operation.file, operation.path, strategy
        )

    def write_files(
        self,
        operation: BatchFileOperation,
        strategy: WriteStrategy = WriteStrategy.SAFE,
    ) -> list[EntryOutcome]:
        """Write several files as one batch."""
        return self.write(operation.files, operation.path, strategy)

    def write_folder(
        self,
        operation: SingleFolderOperation,
        strategy: WriteStrategy = WriteStrategy.SAFE,
    ) -> EntryOutcome:
        """Write one folder and its contents, raising its own error on failure."""
        return writer.write_entry(
            self._provider, operation.folder, operation.path, strategy
        )

    def write_folders(
        self,
        operation: BatchFolderOperation,
        strategy: WriteStrategy = WriteStrategy.SAFE,
    ) -> list[EntryOutcome]:
        """Write several folders as one batch."""
        return self.write(operation.folders, operation.path, strategy)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self, entry: File | Folder, path: str) -> None:
        """Remove an entry from the directory at path.

        Provider failures propagate unchanged.
        """
        deleter.delete_entry(self._provider, entry, path)

    def delete_file(self, operation: SingleFileOperation) -> None:
        self.delete(operation.file, operation.path)

    def delete_folder(self, operation: SingleFolderOperation) -> None:
        self.delete(operation.folder, operation.path)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_file_exist(self, path: str) -> bool:
        """Return True if anything exists at path."""
        return self._provider.exists(path)

    def is_file(self, path: str) -> bool:
        """Return True for a file, False for a directory.

        Raises:
            PathDidNotExist: If nothing exists at path
        """
        exists, is_directory = self._provider.probe(path)
        if not exists:
            raise PathDidNotExist(path)
        return not is_directory
