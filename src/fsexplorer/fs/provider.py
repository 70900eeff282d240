"""File provider capability used by the explorer operations.

The explorer never calls OS primitives directly. Every existence check,
create, remove, listing and read goes through a FileProvider, so tests can
supply fakes that fix the return value of each call.
"""

import os
import shutil
import stat
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from fsexplorer.core.constants import (
    ATTR_MODIFICATION_DATE,
    ATTR_PERMISSIONS,
    ATTR_SIZE,
    ATTR_TYPE,
    DEFAULT_ENCODING,
)
from fsexplorer.utils.debug import debug


class FileProvider(ABC):
    """Filesystem capability consumed by the explorer.

    Methods that can fail either return a flag (``exists``, ``create_file``)
    or raise the implementation's native exception, which the explorer
    translates or propagates depending on the operation.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at path."""

    @abstractmethod
    def probe(self, path: str) -> tuple[bool, bool]:
        """Return (exists, is_directory) for path."""

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove the file or directory tree at path.

        Raises:
            OSError: If the item is missing or cannot be removed
        """

    @abstractmethod
    def create_file(
        self,
        path: str,
        contents: bytes | None,
        attributes: dict[str, Any] | None = None,
    ) -> bool:
        """Create or replace a file, returning False on failure."""

    @abstractmethod
    def create_directory(
        self,
        path: str,
        recursive: bool,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """Create a directory, with intermediate directories when recursive.

        Raises:
            OSError: If the directory cannot be created
        """

    @abstractmethod
    def list_directory(self, path: str) -> list[str]:
        """Return the names inside a directory.

        Raises:
            OSError: If path is missing or not a directory
        """

    @abstractmethod
    def read_attributes(self, path: str) -> dict[str, Any]:
        """Return the attributes of the item at path.

        Raises:
            OSError: If the attributes cannot be read
        """

    @abstractmethod
    def read_text(self, path: str, encoding: str = DEFAULT_ENCODING) -> str:
        """Return the text content of the file at path.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid text
        """

    @abstractmethod
    def current_directory(self) -> str:
        """Return the process working directory."""


class OSFileProvider(FileProvider):
    """FileProvider backed by the host operating system."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def probe(self, path: str) -> tuple[bool, bool]:
        target = Path(path)
        if not target.exists():
            return False, False
        return True, target.is_dir()

    def remove(self, path: str) -> None:
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
        debug(f"Removed: {target}")

    def create_file(
        self,
        path: str,
        contents: bytes | None,
        attributes: dict[str, Any] | None = None,
    ) -> bool:
        target = Path(path)
        try:
            target.write_bytes(contents or b"")
        except OSError as e:
            debug(f"Failed to create file {target}: {e}")
            return False

        try:
            _apply_attributes(target, attributes)
        except OSError as e:
            debug(f"Failed to apply attributes to {target}: {e}")
            target.unlink(missing_ok=True)
            return False

        debug(f"Created file: {target}")
        return True

    def create_directory(
        self,
        path: str,
        recursive: bool,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        target = Path(path)
        existed = target.is_dir()
        target.mkdir(parents=recursive, exist_ok=recursive)
        try:
            _apply_attributes(target, attributes)
        except OSError:
            if not existed:
                target.rmdir()
            raise
        debug(f"Created directory: {target}")

    def list_directory(self, path: str) -> list[str]:
        return os.listdir(path)

    def read_attributes(self, path: str) -> dict[str, Any]:
        info = os.stat(path)
        return {
            ATTR_PERMISSIONS: stat.S_IMODE(info.st_mode),
            ATTR_MODIFICATION_DATE: datetime.fromtimestamp(info.st_mtime, tz=UTC),
            ATTR_SIZE: info.st_size,
            ATTR_TYPE: "directory" if stat.S_ISDIR(info.st_mode) else "file",
        }

    def read_text(self, path: str, encoding: str = DEFAULT_ENCODING) -> str:
        # Decode the raw bytes so line endings come back as written
        return Path(path).read_bytes().decode(encoding)

    def current_directory(self) -> str:
        return os.getcwd()


def _apply_attributes(target: Path, attributes: dict[str, Any] | None) -> None:
    """Apply the writable attributes to a freshly created item.

    Unknown keys are ignored so attributes read from another provider can be
    passed back unchanged.

    Raises:
        OSError: If chmod or utime fails, or a value has the wrong type
    """
    if not attributes:
        return

    permissions = attributes.get(ATTR_PERMISSIONS)
    if permissions is not None:
        try:
            mode = int(permissions)
        except (TypeError, ValueError) as e:
            raise OSError(f"invalid permissions {permissions!r}") from e
        os.chmod(target, mode)

    modified = attributes.get(ATTR_MODIFICATION_DATE)
    if isinstance(modified, datetime):
        timestamp = modified.timestamp()
        os.utime(target, (timestamp, timestamp))
