"""Removal of single file and folder entries."""

import structlog

from fsexplorer.core.models import File, Folder
from fsexplorer.fs.paths import resolve_target
from fsexplorer.fs.provider import FileProvider

logger = structlog.get_logger(__name__)


def delete_entry(provider: FileProvider, entry: File | Folder, path: str) -> None:
    """Remove an entry from the directory at path.

    Folders are removed together with their contents. Provider failures
    (missing item, permission denied) propagate unchanged.

    Args:
        provider: Filesystem capability to remove through
        entry: File or folder to remove; only its name is used
        path: Directory containing the entry
    """
    name = entry.filename if isinstance(entry, File) else entry.name
    target = resolve_target(path, name)
    provider.remove(target)
    logger.debug("delete.removed", path=target)
