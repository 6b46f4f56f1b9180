# src/scaffold/config/config_types.py


from pathlib import Path
from typing import Literal, TypedDict

from typing_extensions import NotRequired


OriginType = Literal["cli", "config", "properties", "default", "env"]

ModuleKindName = Literal[
    "application",
    "library",
    "jvm",
    "multiplatform",
    "benchmark",
]


class TaskConfig(TypedDict):
    name: str
    depends_on: NotRequired[list[str]]
    description: NotRequired[str]


class ModuleConfig(TypedDict, total=False):
    path: str  # colon-delimited, e.g. ":data:api-client"
    kind: ModuleKindName
    build_types: list[str]  # default: ["debug", "release"]
    tasks: list[str | TaskConfig]  # tasks the host registers for this module


class RootConfig(TypedDict, total=False):
    modules: list[ModuleConfig]

    # property files, relative to the config file
    properties: list[str]
    # explicit flag values, override property files
    flags: dict[str, str | bool]

    active_variant: str
    log_level: str
    strict_config: bool


# Resolved types - all fields are guaranteed to be present with final values
class TaskConfigResolved(TypedDict):
    name: str
    depends_on: list[str]
    description: str


class ModuleConfigResolved(TypedDict):
    path: str
    kind: ModuleKindName
    build_types: list[str]
    tasks: list[TaskConfigResolved]


class FlagResolved(TypedDict):
    value: bool
    origin: OriginType  # provenance


class RootConfigResolved(TypedDict):
    modules: list[ModuleConfigResolved]

    # merged property values handed to each module's flag source
    properties: dict[str, str]
    debug_only: FlagResolved
    enable_ios: FlagResolved

    active_variant: str
    log_level: str
    strict_config: bool

    # meta only
    config_path: Path | None
    config_root: Path
