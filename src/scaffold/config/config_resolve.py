# src/scaffold/config/config_resolve.py


import argparse
import os
from difflib import get_close_matches
from pathlib import Path
from typing import Any

from apathetic_utils import cast_hint

from scaffold.constants import (
    DEFAULT_ACTIVE_VARIANT,
    DEFAULT_BUILD_TYPES,
    DEFAULT_DEBUG_ONLY,
    DEFAULT_ENABLE_IOS,
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROPERTIES_FILE,
    DEFAULT_STRICT_CONFIG,
    PROP_DEBUG_ONLY,
    PROP_ENABLE_IOS,
)
from scaffold.logs import getAppLogger
from scaffold.meta import PROGRAM_ENV
from scaffold.properties import load_properties

from .config_types import (
    FlagResolved,
    ModuleConfig,
    ModuleConfigResolved,
    RootConfig,
    RootConfigResolved,
    TaskConfigResolved,
)


def _flag_text(value: str | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def resolve_flag(
    name: str,
    *,
    cli_value: bool | None,
    flags: dict[str, str | bool],
    properties: dict[str, str],
    default: bool,
) -> FlagResolved:
    """Resolve one boolean flag: cli -> config flags -> properties -> default."""
    if cli_value is not None:
        return {"value": cli_value, "origin": "cli"}
    if name in flags:
        value = _flag_text(flags[name]).strip().lower() == "true"
        return {"value": value, "origin": "config"}
    if name in properties:
        value = properties[name].strip().lower() == "true"
        return {"value": value, "origin": "properties"}
    return {"value": default, "origin": "default"}


def _resolve_property_paths(
    root_cfg: RootConfig,
    args: argparse.Namespace,
    config_dir: Path,
    cwd: Path,
) -> list[Path]:
    paths: list[Path] = []
    if "properties" in root_cfg:
        paths.extend((config_dir / p).resolve() for p in root_cfg["properties"])
    else:
        default = config_dir / DEFAULT_PROPERTIES_FILE
        if default.exists():
            paths.append(default.resolve())
    # --properties adds to the config's list, relative to cwd
    paths.extend((cwd / p).resolve() for p in getattr(args, "properties", None) or [])
    return paths


def _resolve_log_level(root_cfg: RootConfig, args: argparse.Namespace) -> str:
    """log_level: arg -> env -> root -> default."""
    if getattr(args, "log_level", None):
        return str(args.log_level)
    for env_key in (f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL):
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    return root_cfg.get("log_level", DEFAULT_LOG_LEVEL)


def _resolve_tasks(raw_tasks: list[Any]) -> list[TaskConfigResolved]:
    tasks: list[TaskConfigResolved] = []
    for raw in raw_tasks:
        if isinstance(raw, str):
            tasks.append({"name": raw, "depends_on": [], "description": ""})
        else:
            tasks.append(
                {
                    "name": raw["name"],
                    "depends_on": list(raw.get("depends_on", [])),
                    "description": raw.get("description", ""),
                }
            )
    return tasks


def resolve_module_config(module: ModuleConfig) -> ModuleConfigResolved:
    return {
        "path": module["path"],
        "kind": module["kind"].strip().lower(),  # type: ignore[typeddict-item]
        "build_types": list(module.get("build_types", DEFAULT_BUILD_TYPES)),
        "tasks": _resolve_tasks(module.get("tasks", [])),
    }


def resolve_config(
    root_input: RootConfig,
    args: argparse.Namespace,
    config_dir: Path,
    cwd: Path,
    config_path: Path | None = None,
) -> RootConfigResolved:
    """Fully resolve a loaded RootConfig into a ready-to-run RootConfigResolved.

    Also syncs the app logger to the resolved log level.
    """
    logger = getAppLogger()
    root_cfg = cast_hint(RootConfig, dict(root_input))

    modules_input = root_cfg.get("modules", [])
    logger.trace(
        f"[resolve_config] Resolving root config with {len(modules_input)} module(s)"
    )

    # ------------------------------
    # Log level
    # ------------------------------
    log_level = _resolve_log_level(root_cfg, args)
    logger.setLevel(log_level.upper())

    # ------------------------------
    # Properties and flags
    # ------------------------------
    properties: dict[str, str] = {}
    for path in _resolve_property_paths(root_cfg, args, config_dir, cwd):
        logger.trace(f"[resolve_config] Loading properties from {path}")
        properties.update(load_properties(path))

    flags = dict(root_cfg.get("flags", {}))
    for name, value in flags.items():
        properties[name] = _flag_text(value)

    debug_only = resolve_flag(
        PROP_DEBUG_ONLY,
        cli_value=getattr(args, "debug_only", None),
        flags=flags,
        properties=properties,
        default=DEFAULT_DEBUG_ONLY,
    )
    enable_ios = resolve_flag(
        PROP_ENABLE_IOS,
        cli_value=getattr(args, "enable_ios", None),
        flags=flags,
        properties=properties,
        default=DEFAULT_ENABLE_IOS,
    )
    # modules read flags from properties, so write the winners back
    properties[PROP_DEBUG_ONLY] = _flag_text(debug_only["value"])
    properties[PROP_ENABLE_IOS] = _flag_text(enable_ios["value"])
    logger.trace(
        f"[resolve_config] {PROP_DEBUG_ONLY}={debug_only}, "
        f"{PROP_ENABLE_IOS}={enable_ios}"
    )

    # ------------------------------
    # Modules
    # ------------------------------
    wanted: list[str] = list(getattr(args, "module", None) or [])
    modules = [resolve_module_config(m) for m in modules_input]
    if wanted:
        known = {m["path"] for m in modules}
        unknown = [p for p in wanted if p not in known]
        if unknown:
            xmsg = f"Unknown module path(s): {', '.join(unknown)}"
            close = get_close_matches(unknown[0], sorted(known), n=1, cutoff=0.6)
            if close:
                xmsg += f"\nHint: did you mean {close[0]}?"
            raise ValueError(xmsg)
        modules = [m for m in modules if m["path"] in wanted]

    active_variant = (
        getattr(args, "active_variant", None)
        or root_cfg.get("active_variant")
        or DEFAULT_ACTIVE_VARIANT
    )

    resolved_root: RootConfigResolved = {
        "modules": modules,
        "properties": properties,
        "debug_only": debug_only,
        "enable_ios": enable_ios,
        "active_variant": active_variant,
        "log_level": log_level,
        "strict_config": root_cfg.get("strict_config", DEFAULT_STRICT_CONFIG),
        "config_path": config_path,
        "config_root": config_dir,
    }
    return resolved_root
