# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator

import pytest

import scaffold.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset logger level before and after each test for isolation.

    The app logger is a module-level singleton, and the CLI and
    resolve_config() both change its level.
    """
    logger = mod_logs.getAppLogger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)


@pytest.fixture(autouse=True)
def no_ide_sync(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's IDE environment from leaking into tests."""
    monkeypatch.delenv("IDEA_SYNC_ACTIVE", raising=False)
    monkeypatch.delenv("SCAFFOLD_IDE_SYNC", raising=False)


# ----------------------------------------------------------------------
# Hooks
# ----------------------------------------------------------------------


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Automatically skip debug tests unless asked for."""
    keywords = config.getoption("-k") or ""
    if "debug" in keywords.lower():
        return  # user explicitly requested them, don't skip

    for item in items:
        if "debug" in item.keywords:
            item.add_marker(
                pytest.mark.skip(reason="Skipped debug test (use -k debug to run)"),
            )
