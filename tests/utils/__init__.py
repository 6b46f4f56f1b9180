# tests/utils/__init__.py

from .builders import (
    disabled_names,
    make_flags,
    make_graph,
    make_project,
    make_variants,
    snapshot,
    write_layout,
)
from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT


__all__ = [  # noqa: RUF022
    # builders
    "disabled_names",
    "make_flags",
    "make_graph",
    "make_project",
    "make_variants",
    "snapshot",
    "write_layout",
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_ROOT",
]
