# src/scaffold/environment.py
"""Environment signals read by the pruning executor."""

import os

from .constants import IDE_SYNC_ENV_VARS


def is_ide_sync_active() -> bool:
    """Check if an IDE is importing the project model.

    True when any of ``IDE_SYNC_ENV_VARS`` is set to ``true``
    (case-insensitive). Mutating the task graph during such a sync can break
    model resolution in the IDE.
    """
    return any(
        os.getenv(var, "false").strip().lower() == "true" for var in IDE_SYNC_ENV_VARS
    )
