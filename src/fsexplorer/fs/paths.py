"""Path utilities for explorer operations.

This module resolves a base path and an entry name into the target path the
provider operates on, and splits file names into base name and extension.
All helpers are pure string functions; nothing here touches the filesystem.
"""

from pathlib import Path

from fsexplorer.core.constants import (
    EXTENSION_SEPARATOR,
    HOME_PREFIX,
    PATH_SEPARATOR,
)


def expand_home(path: str) -> str:
    """Replace a leading ``~`` with the user's home directory.

    Args:
        path: Path that may start with ``~``

    Returns:
        Path with the home prefix expanded
    """
    if not path.startswith(HOME_PREFIX):
        return path
    return str(Path.home()) + path[len(HOME_PREFIX) :]


def resolve_target(base: str, suffix: str = "") -> str:
    """Join a base path and a suffix with exactly one separator.

    Args:
        base: Directory path, optionally starting with ``~``
        suffix: Entry name or relative path appended to the base

    Returns:
        The joined path. An empty suffix returns the normalized base.

    Examples:
        >>> resolve_target("/tmp/", "/notes.txt/")
        '/tmp/notes.txt'
    """
    expanded = expand_home(base)
    head = expanded.rstrip(PATH_SEPARATOR)
    tail = suffix.strip(PATH_SEPARATOR)

    if not tail:
        if not head and expanded.startswith(PATH_SEPARATOR):
            return PATH_SEPARATOR
        return head

    return f"{head}{PATH_SEPARATOR}{tail}"


def without_extension(name: str) -> str:
    """Remove the extension from a file name.

    Only the part after the last dot is removed, so ``"a.b.c"`` becomes
    ``"a.b"``. A name without a dot is returned unchanged.
    """
    dot_index = name.rfind(EXTENSION_SEPARATOR)
    if dot_index < 0:
        return name
    return name[:dot_index]


def split_filename(name: str) -> tuple[str, str | None]:
    """Split a file name into base name and extension.

    Dotfiles whose only dot is the leading character (``.bashrc``) are not
    split, so the base name stays non-empty. A trailing dot (``notes.``) is
    kept in the name so joining the parts gives back the listed name.

    Args:
        name: File name as listed in its directory

    Returns:
        Tuple of (base name, extension or None)
    """
    dot_index = name.rfind(EXTENSION_SEPARATOR)
    if dot_index <= 0 or dot_index == len(name) - 1:
        return name, None

    base = without_extension(name)
    return base, name[len(base) + len(EXTENSION_SEPARATOR) :]


def join_filename(name: str, extension: str | None) -> str:
    """Build a file name from a base name and an optional extension."""
    if not extension:
        return name
    return f"{name}{EXTENSION_SEPARATOR}{extension}"
