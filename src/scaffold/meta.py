# src/scaffold/meta.py
"""Program identity shared by the CLI, logger and config loader."""

from dataclasses import dataclass


# --- program identity ---
PROGRAM_PACKAGE: str = "scaffold"
PROGRAM_SCRIPT: str = "scaffold"
PROGRAM_DISPLAY: str = "Scaffold"
PROGRAM_ENV: str = "SCAFFOLD"
PROGRAM_CONFIG: str = "scaffold"

DESCRIPTION: str = (
    "Derive per-module build settings and prune the task graph "
    "down to the current development mode."
)

VERSION: str = "0.4.0"


@dataclass(frozen=True)
class Metadata:
    """Version information reported by ``--version``."""

    version: str
    commit: str = "unknown"

    def __str__(self) -> str:
        return f"{self.version} ({self.commit})"


def get_metadata() -> Metadata:
    return Metadata(version=VERSION)
