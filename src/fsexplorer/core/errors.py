"""Custom exceptions for fsexplorer.

This module defines the typed exceptions raised by the read, write and
delete operations. Provider failures during delete are not translated and
surface as the provider's own exception.
"""

from typing import Any


class ExplorerError(Exception):
    """Base exception for all fsexplorer errors.

    All custom exceptions inherit from this base class so callers can catch
    every explorer failure with a single handler.
    """

    code: str = "explorer_error"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting.

        Returns:
            Dictionary with the error code and message
        """
        return {"error": self.code, "message": str(self)}


class PathDidNotExist(ExplorerError):
    """Raised when a path is empty or does not resolve to an existing item.

    Attributes:
        path: The offending path
    """

    code = "path_did_not_exist"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path} did not exist")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {**super().to_dict(), "path": self.path}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"PathDidNotExist(path={self.path!r})"


class FileExist(ExplorerError):
    """Raised when the safe strategy finds the target file already present.

    Attributes:
        file: Resolved path of the existing file
    """

    code = "file_exist"

    def __init__(self, file: str) -> None:
        self.file = file
        super().__init__(f"{file} is already exist")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {**super().to_dict(), "file": self.file}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"FileExist(file={self.file!r})"


class FileNotValid(ExplorerError):
    """Raised when a file entry cannot be written (e.g. empty name).

    Attributes:
        file: The file name that was rejected
    """

    code = "file_not_valid"

    def __init__(self, file: str) -> None:
        self.file = file
        super().__init__(f"{file} is not valid")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {**super().to_dict(), "file": self.file}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"FileNotValid(file={self.file!r})"


class DirectoryNotValid(ExplorerError):
    """Raised for an empty folder name or a directory that cannot be listed.

    Attributes:
        directory: The folder name or directory path that was rejected
    """

    code = "directory_not_valid"

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"{directory} is not valid")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {**super().to_dict(), "directory": self.directory}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"DirectoryNotValid(directory={self.directory!r})"


class WriteError(ExplorerError):
    """Raised when the provider fails to create a file or directory.

    Attributes:
        file: Resolved path that could not be written
    """

    code = "write_error"

    def __init__(self, file: str) -> None:
        self.file = file
        super().__init__(f"unable to write file at {file}")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {**super().to_dict(), "file": self.file}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"WriteError(file={self.file!r})"


class MultipleErrors(ExplorerError):
    """Raised when a batch write failed and its successful entries were rolled back.

    Attributes:
        errors: Every per-entry failure collected from the batch, in order
    """

    code = "multiple_errors"

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = list(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"{len(self.errors)} error(s) occurred: {details}")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting.

        Nested explorer errors are expanded; other exceptions are reported
        by type and message.
        """
        nested: list[dict[str, Any]] = []
        for error in self.errors:
            if isinstance(error, ExplorerError):
                nested.append(error.to_dict())
            else:
                nested.append({"error": type(error).__name__, "message": str(error)})
        return {**super().to_dict(), "errors": nested}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"MultipleErrors(errors={self.errors!r})"
