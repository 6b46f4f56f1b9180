# src/scaffold/logs.py

import logging
from typing import cast

from apathetic_logging import (
    Logger,
    registerDefaultLogLevel,
    registerLogger,
    registerLogLevelEnvVars,
)

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE


class AppLogger(Logger):
    """App logger with helpers for per-task configuration decisions."""

    def task_decision(self, module: str, task: str, outcome: str) -> None:
        """Trace what happened to one task of one module."""
        self.trace(f"[{module}] {task}: {outcome}")


# --- Logger initialization ---------------------------------------------------

# Installed before any logger exists, so the app logger gets the helpers.
logging.setLoggerClass(AppLogger)

# Register TRACE and SILENT levels
AppLogger.extendLoggingModule()

# Env vars and default must be registered before any loggers are created
registerLogLevelEnvVars(
    [f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL]
)
registerDefaultLogLevel(DEFAULT_LOG_LEVEL)

registerLogger(PROGRAM_PACKAGE)

_APP_LOGGER = cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))


# --- Convenience utils ---------------------------------------------------------


def getAppLogger() -> AppLogger:  # noqa: N802
    """Return the configured app logger."""
    return _APP_LOGGER
