"""Debug utility for fsexplorer.

Provides a single debug() function that can be toggled via the
FSEXPLORER_DEBUG environment variable. Best-effort reads and rollback
deletes report their discarded errors here instead of raising.

Usage:
    from fsexplorer.utils.debug import debug

    debug("Scanning directory")
    debug(f"Rolled back {count} entries")

Environment:
    FSEXPLORER_DEBUG: Set to '1', 'true', 'yes' (case-insensitive) to enable
                      debug output. Any other value or unset disables it.

Example:
    $ FSEXPLORER_DEBUG=1 python script.py    # Debug enabled
    $ python script.py                       # Debug disabled (default)
"""

import os
import sys
from typing import Any

from fsexplorer.core.constants import DEBUG_ENV_VAR

# Determine if debug mode is enabled at module import time
_DEBUG_ENABLED = os.environ.get(DEBUG_ENV_VAR, "").lower() in (
    "1",
    "true",
    "yes",
)


def debug(msg: Any) -> None:
    """Print debug message if FSEXPLORER_DEBUG is enabled.

    Args:
        msg: Message to print. Will be converted to string.

    Note:
        The environment variable is read at module import time. Changing it
        afterwards has no effect unless the module is reloaded.
    """
    if _DEBUG_ENABLED:
        print(f"[DEBUG] {msg}", file=sys.stdout)
