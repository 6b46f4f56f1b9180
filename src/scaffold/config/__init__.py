# src/scaffold/config/__init__.py

"""Configuration handling for scaffold.

Project layout files are located, loaded, validated and resolved here.
"""

from .config_loader import (
    find_config,
    load_and_validate_config,
    load_config,
    parse_config,
)
from .config_resolve import resolve_config, resolve_flag
from .config_types import (
    FlagResolved,
    ModuleConfig,
    ModuleConfigResolved,
    ModuleKindName,
    OriginType,
    RootConfig,
    RootConfigResolved,
    TaskConfig,
    TaskConfigResolved,
)
from .config_validate import ValidationSummary, validate_config


__all__ = [  # noqa: RUF022
    # config_loader
    "find_config",
    "load_and_validate_config",
    "load_config",
    "parse_config",
    # config_resolve
    "resolve_config",
    "resolve_flag",
    # config_types
    "FlagResolved",
    "ModuleConfig",
    "ModuleConfigResolved",
    "ModuleKindName",
    "OriginType",
    "RootConfig",
    "RootConfigResolved",
    "TaskConfig",
    "TaskConfigResolved",
    # config_validate
    "ValidationSummary",
    "validate_config",
]
