"""Pydantic models for explorer entries and write operations.

These models define the data structures used throughout fsexplorer:
- File / Folder: the two cases of the Entry union
- WriteStrategy: conflict handling for writes
- Operation wrappers: an entry (or entries) paired with a destination path
- EntryOutcome: per-entry result of a write

Entries are frozen value objects owned by the caller.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from fsexplorer.fs.paths import join_filename


class WriteStrategy(str, Enum):
    """Strategy applied when a write target already exists.

    Attributes:
        SAFE: Fail the operation if the target file exists
        SKIPPABLE: Leave an existing target untouched and report it as skipped
        OVERWRITE: Always replace the target
    """

    SAFE = "safe"
    SKIPPABLE = "skippable"
    OVERWRITE = "overwrite"


class File(BaseModel):
    """A text file entry.

    Attributes:
        name: Base name without extension
        content: Text content, None for an empty or unreadable file
        extension: Extension without the leading dot
        attributes: Opaque provider attributes (permissions, dates, ...)
    """

    kind: Literal["file"] = "file"
    name: str
    content: str | None = None
    extension: str | None = None
    attributes: dict[str, Any] | None = None

    model_config = {"frozen": True}

    @property
    def filename(self) -> str:
        """Name on disk, including the extension when present."""
        return join_filename(self.name, self.extension)


class Folder(BaseModel):
    """A folder entry holding an ordered list of child entries.

    Attributes:
        name: Folder name
        contents: Child files and folders, possibly empty
        attributes: Opaque provider attributes
    """

    kind: Literal["folder"] = "folder"
    name: str
    contents: list["Entry"] = Field(default_factory=list)
    attributes: dict[str, Any] | None = None

    model_config = {"frozen": True}

    @property
    def files(self) -> list[File]:
        """Direct child files, in order."""
        return [entry for entry in self.contents if isinstance(entry, File)]

    @property
    def folders(self) -> list["Folder"]:
        """Direct child folders, in order."""
        return [entry for entry in self.contents if isinstance(entry, Folder)]


Entry = Annotated[File | Folder, Field(discriminator="kind")]

Folder.model_rebuild()


class SingleFileOperation(BaseModel):
    """A file paired with the directory it is written to or deleted from."""

    file: File
    path: str

    model_config = {"frozen": True}


class BatchFileOperation(BaseModel):
    """Several files sharing one destination directory."""

    files: list[File]
    path: str

    model_config = {"frozen": True}


class SingleFolderOperation(BaseModel):
    """A folder paired with its parent directory."""

    folder: Folder
    path: str

    model_config = {"frozen": True}


class BatchFolderOperation(BaseModel):
    """Several folders sharing one parent directory."""

    folders: list[Folder]
    path: str

    model_config = {"frozen": True}


class WriteOperation(BaseModel):
    """Mixed files and folders written into one destination directory."""

    entries: list[Entry]
    path: str

    model_config = {"frozen": True}


OutcomeStatus = Literal["written", "skipped", "failed"]


@dataclass
class EntryOutcome:
    """Result of writing a single entry.

    Attributes:
        entry: The entry that was processed
        path: Resolved target path
        status: written, skipped (existing target under skippable) or failed
        created: True when this write created the target folder
        error: Failure for a failed outcome
        children: Outcomes of a folder's contents
    """

    entry: File | Folder
    path: str
    status: OutcomeStatus
    created: bool = False
    error: Exception | None = None
    children: list["EntryOutcome"] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True unless the entry failed."""
        return self.status != "failed"


@dataclass
class OutcomeSummary:
    """Counts of outcomes across a write, nested children included."""

    total: int
    written: int
    skipped: int
    failed: int
    errors: list[Exception] | None = None


def summarize_outcomes(outcomes: Sequence[EntryOutcome]) -> OutcomeSummary:
    """Count written, skipped and failed entries recursively.

    Args:
        outcomes: Outcomes returned by a write

    Returns:
        OutcomeSummary with per-status counts and collected errors
    """
    written = 0
    skipped = 0
    failed = 0
    errors: list[Exception] = []

    pending = list(outcomes)
    while pending:
        outcome = pending.pop()
        if outcome.status == "written":
            written += 1
        elif outcome.status == "skipped":
            skipped += 1
        else:
            failed += 1
            if outcome.error is not None:
                errors.append(outcome.error)
        pending.extend(outcome.children)

    return OutcomeSummary(
        total=written + skipped + failed,
        written=written,
        skipped=skipped,
        failed=failed,
        errors=errors if errors else None,
    )
