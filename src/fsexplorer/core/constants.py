"""Core constants for fsexplorer.

This module defines constants used throughout the library:
- Text encoding and path separator used when resolving and writing entries
- Attribute keys understood by the OS-backed file provider
- Environment variable names
"""

# ============================================================================
# Paths and Content
# ============================================================================

#: Separator used when joining a base path with an entry name
PATH_SEPARATOR: str = "/"

#: Prefix expanded to the user's home directory
HOME_PREFIX: str = "~"

#: Encoding used for file content on write and read
DEFAULT_ENCODING: str = "utf-8"

#: Separator between a file's base name and its extension
EXTENSION_SEPARATOR: str = "."

# ============================================================================
# Attributes
# ============================================================================

#: POSIX permission bits (int), applied with chmod
ATTR_PERMISSIONS: str = "permissions"

#: Last modification time (datetime), applied with utime
ATTR_MODIFICATION_DATE: str = "modification_date"

#: Size in bytes, reported on read only
ATTR_SIZE: str = "size"

#: Entry type ("file" or "directory"), reported on read only
ATTR_TYPE: str = "type"

# ============================================================================
# Environment
# ============================================================================

#: Enables debug output when set to 1/true/yes
DEBUG_ENV_VAR: str = "FSEXPLORER_DEBUG"
