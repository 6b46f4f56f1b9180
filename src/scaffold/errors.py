# src/scaffold/errors.py

from typing import Any


class ConfigurationError(ValueError):
    """Malformed static input; aborts configuration of the affected module.

    Subclasses ValueError so the CLI reports it as a controlled termination.
    ``value`` holds the offending input.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value
