# src/scaffold/config/config_loader.py


import argparse
from pathlib import Path
from typing import Any

from apathetic_schema import ApatheticSchema_ValidationSummary as ValidationSummary
from apathetic_utils import (
    cast_hint,
    load_jsonc,
    load_toml,
    plural,
    remove_path_in_error_message,
)

from scaffold.logs import getAppLogger
from scaffold.meta import PROGRAM_CONFIG

from .config_types import RootConfig
from .config_validate import validate_config


CONFIG_SUFFIX_PRIORITY: dict[str, int] = {".toml": 0, ".json": 1}


def find_config(args: argparse.Namespace, cwd: Path) -> Path | None:
    """Locate a project layout file.

    Search order:
      1. Explicit path from CLI (--config)
      2. .{PROGRAM_CONFIG}.toml / .{PROGRAM_CONFIG}.json in cwd, then parents

    Returns the first matching path, or None if no config was found.
    """
    logger = getAppLogger()

    # --- 1. Explicit config path ---
    if getattr(args, "config", None):
        config = Path(args.config).expanduser().resolve()
        logger.trace(f"[find_config] Checking explicit path: {config}")
        if not config.exists():
            xmsg = f"Specified config file not found: {config}"
            raise FileNotFoundError(xmsg)
        if config.is_dir():
            xmsg = f"Specified config path is a directory, not a file: {config}"
            raise ValueError(xmsg)
        return config

    # --- 2. Default candidates, closest to cwd wins ---
    candidate_names = [f".{PROGRAM_CONFIG}{suffix}" for suffix in CONFIG_SUFFIX_PRIORITY]
    current = cwd
    found: list[Path] = []
    while True:
        found = [current / name for name in candidate_names if (current / name).exists()]
        if found:
            break
        parent = current.parent
        if parent == current:  # Reached filesystem root
            break
        current = parent

    if not found:
        logger.debug("No config file found in %s or parents", cwd)
        return None

    if len(found) > 1:
        names = ", ".join(p.name for p in found)
        logger.warning(
            "Multiple config files detected (%s); using %s.", names, found[0].name
        )
    return found[0]


def load_config(config_path: Path) -> dict[str, Any] | list[Any] | None:
    """Load raw configuration data from a .toml or .json file.

    JSON layouts may carry comments and trailing commas. Returns None for
    intentionally empty JSON files.
    """
    logger = getAppLogger()
    logger.trace(f"[load_config] Loading from {config_path} ({config_path.suffix})")

    try:
        if config_path.suffix == ".toml":
            return load_toml(config_path, required=True)
        return load_jsonc(config_path)
    except ValueError as e:
        clean_msg = remove_path_in_error_message(str(e), config_path)
        xmsg = (
            f"Error while loading configuration file '{config_path.name}': {clean_msg}"
        )
        raise ValueError(xmsg) from e


def parse_config(raw: dict[str, Any] | list[Any] | None) -> dict[str, Any] | None:
    """Normalize supported shorthands into the root mapping.

    A bare list is taken as the module list.
    """
    if raw is None:
        return None
    if isinstance(raw, list):
        return {"modules": raw}
    return dict(raw)


def _validation_summary(
    summary: ValidationSummary,
    config_path: Path,
) -> None:
    """Log a validation summary: counts first, then the detailed sections."""
    logger = getAppLogger()
    mode = "strict mode" if summary.strict else "lenient mode"

    counts: list[str] = []
    if summary.errors:
        counts.append(f"{len(summary.errors)} error{plural(summary.errors)}")
    if summary.strict_warnings:
        counts.append(
            f"{len(summary.strict_warnings)} strict warning"
            f"{plural(summary.strict_warnings)}",
        )
    if summary.warnings:
        counts.append(
            f"{len(summary.warnings)} normal warning{plural(summary.warnings)}",
        )
    counts_msg = f"\nFound {', '.join(counts)}." if counts else ""

    if not summary.valid:
        logger.error(
            "Failed to validate layout file %s (%s).%s",
            config_path.name,
            mode,
            counts_msg,
        )
    elif counts:
        logger.warning(
            "Validated layout file %s (%s) with warnings.%s",
            config_path.name,
            mode,
            counts_msg,
        )
    else:
        logger.debug("Validated %s (%s) successfully.", config_path.name, mode)

    if summary.warnings:
        msg_summary = "\n  • ".join(summary.warnings)
        logger.warning("\nWarnings (non-fatal):\n  • %s", msg_summary)


def load_and_validate_config(
    args: argparse.Namespace,
    cwd: Path,
) -> tuple[Path, RootConfig, ValidationSummary] | None:
    """Find, load, parse and validate the layout file.

    Returns None when no config file exists.

    Raises:
        ValueError: If the configuration is invalid.
    """
    config_path = find_config(args, cwd)
    if config_path is None:
        return None

    parsed = parse_config(load_config(config_path))
    if parsed is None:
        parsed = {}

    strict_arg: bool | None = getattr(args, "strict_config", None)
    summary = validate_config(parsed, strict=strict_arg)
    _validation_summary(summary, config_path)

    if not summary.valid:
        details = "\n  • ".join([*summary.errors, *summary.strict_warnings])
        xmsg = f"Invalid configuration in {config_path.name}:\n  • {details}"
        raise ValueError(xmsg)

    return config_path, cast_hint(RootConfig, parsed), summary
