"""fsexplorer: typed reading and writing of file and folder trees.

Directory trees are read into File and Folder entries and written back under
a conflict strategy (safe, skippable, overwrite), with failed batches rolled
back. All filesystem access goes through an injectable FileProvider.
"""

from fsexplorer.core.errors import (
    DirectoryNotValid,
    ExplorerError,
    FileExist,
    FileNotValid,
    MultipleErrors,
    PathDidNotExist,
    WriteError,
)
from fsexplorer.core.explorer import Explorer
from fsexplorer.core.models import (
    BatchFileOperation,
    BatchFolderOperation,
    Entry,
    EntryOutcome,
    File,
    Folder,
    OutcomeSummary,
    SingleFileOperation,
    SingleFolderOperation,
    WriteOperation,
    WriteStrategy,
    summarize_outcomes,
)
from fsexplorer.fs.provider import FileProvider, OSFileProvider

__all__ = [
    "BatchFileOperation",
    "BatchFolderOperation",
    "DirectoryNotValid",
    "Entry",
    "EntryOutcome",
    "Explorer",
    "ExplorerError",
    "File",
    "FileExist",
    "FileNotValid",
    "FileProvider",
    "Folder",
    "MultipleErrors",
    "OSFileProvider",
    "OutcomeSummary",
    "PathDidNotExist",
    "SingleFileOperation",
    "SingleFolderOperation",
    "WriteError",
    "WriteOperation",
    "WriteStrategy",
    "summarize_outcomes",
]
