# src/scaffold/config/config_validate.py


from typing import Any

from apathetic_schema import (
    ApatheticSchema_SchemaErrorAggregator as SchemaErrorAggregator,
    ApatheticSchema_ValidationSummary as ValidationSummary,
    check_schema_conformance,
    collect_msg,
    flush_schema_aggregators,
    warn_keys_once,
)
from apathetic_utils import cast_hint, literal_to_set, schema_from_typeddict

from scaffold.constants import DEFAULT_STRICT_CONFIG
from scaffold.logs import getAppLogger

from .config_types import ModuleConfig, ModuleKindName, RootConfig, TaskConfig


# --- constants ------------------------------------------------------

MODULE_KINDS: set[str] = literal_to_set(ModuleKindName)

MODULE_ONLY_KEYS = {"path", "kind", "build_types", "tasks"}
MODULE_ONLY_MSG = (
    "Ignored {keys} {ctx}: these options belong to a [[modules]] entry."
)

ROOT_ONLY_KEYS = {"properties", "flags", "active_variant", "log_level"}
ROOT_ONLY_MSG = "Ignored {keys} {ctx}: these options only apply at the root level."

# Field-specific type examples for better error messages
FIELD_EXAMPLES: dict[str, str] = {
    "root.properties": '["gradle.properties"]',
    "root.flags": '{ "app.debugOnly" = "true" }',
    "root.active_variant": '"debug"',
    "root.log_level": '"debug"',
    "root.strict_config": "true",
    "root.modules.*.path": '":data:api-client"',
    "root.modules.*.build_types": '["debug", "release"]',
    "root.modules.*.tasks": '["assemble", { name = "lint" }]',
    "root.modules.*.tasks.*.depends_on": '["lintAnalyzeDebug"]',
}


# ---------------------------------------------------------------------------
# main validator
# ---------------------------------------------------------------------------


def _set_valid_and_return(
    *,
    summary: ValidationSummary,  # could be modified
    agg: SchemaErrorAggregator,  # could be modified
) -> ValidationSummary:
    flush_schema_aggregators(summary=summary, agg=agg)
    summary.valid = not summary.errors and not summary.strict_warnings
    return summary


def _validate_root(
    parsed_cfg: dict[str, Any],
    *,
    summary: ValidationSummary,  # modified
    agg: SchemaErrorAggregator,  # modified
) -> None:
    logger = getAppLogger()
    logger.trace(f"[validate_root] Validating root with {len(parsed_cfg)} keys")

    _ok, prewarn_root = warn_keys_once(
        "module-only",
        MODULE_ONLY_KEYS,
        parsed_cfg,
        "in top-level configuration",
        MODULE_ONLY_MSG,
        strict_config=summary.strict,
        summary=summary,
        agg=agg,
    )

    ok = check_schema_conformance(
        parsed_cfg,
        schema_from_typeddict(RootConfig),
        "in top-level configuration",
        strict_config=summary.strict,
        summary=summary,
        prewarn=prewarn_root,
        ignore_keys={"modules"},
        base_path="root",
        field_examples=FIELD_EXAMPLES,
    )
    if not ok and not (summary.errors or summary.strict_warnings):
        collect_msg(
            "Top-level configuration invalid.",
            strict=True,
            summary=summary,
            is_error=True,
        )


def _validate_task_table(
    task: dict[str, Any],
    context: str,
    *,
    summary: ValidationSummary,  # modified
) -> None:
    name = task.get("name")
    if not isinstance(name, str) or not name:
        collect_msg(
            f"{context}: task table needs a non-empty `name`",
            strict=True,
            summary=summary,
            is_error=True,
        )
    check_schema_conformance(
        task,
        schema_from_typeddict(TaskConfig),
        context,
        strict_config=summary.strict,
        summary=summary,
        base_path="root.modules.*.tasks.*",
        field_examples=FIELD_EXAMPLES,
    )


def _validate_module(
    module: dict[str, Any],
    index: int,
    *,
    summary: ValidationSummary,  # modified
    agg: SchemaErrorAggregator,  # modified
) -> str | None:
    """Check one module entry; returns its path when the path is usable."""
    path: Any = module.get("path")
    if isinstance(path, str) and path.startswith(":"):
        context = f"in module {path}"
    else:
        context = f"in module #{index + 1}"
        collect_msg(
            f"{context}: `path` must be a colon-delimited module path like"
            f" ':app' (got {path!r})",
            strict=True,
            summary=summary,
            is_error=True,
        )
        path = None

    kind: Any = module.get("kind")
    if not isinstance(kind, str) or kind.strip().lower() not in MODULE_KINDS:
        valid = ", ".join(sorted(MODULE_KINDS))
        collect_msg(
            f"{context}: `kind` must be one of {valid} (got {kind!r})",
            strict=True,
            summary=summary,
            is_error=True,
        )

    build_types: Any = module.get("build_types", [])
    if isinstance(build_types, list) and not all(build_types):
        collect_msg(
            f"{context}: `build_types` must not contain empty names",
            strict=True,
            summary=summary,
            is_error=True,
        )

    _ok, prewarn = warn_keys_once(
        "root-only",
        ROOT_ONLY_KEYS,
        module,
        context,
        ROOT_ONLY_MSG,
        strict_config=summary.strict,
        summary=summary,
        agg=agg,
    )

    check_schema_conformance(
        module,
        schema_from_typeddict(ModuleConfig),
        context,
        strict_config=summary.strict,
        summary=summary,
        prewarn=prewarn,
        ignore_keys={"kind"},
        base_path="root.modules.*",
        field_examples=FIELD_EXAMPLES,
    )

    # tables inside `tasks` are only shape-checked by the schema above
    tasks: Any = module.get("tasks", [])
    if isinstance(tasks, list):
        for task in cast_hint(list[Any], tasks):
            if isinstance(task, dict):
                _validate_task_table(task, context, summary=summary)
            elif task == "":
                collect_msg(
                    f"{context}: task name must not be empty",
                    strict=True,
                    summary=summary,
                    is_error=True,
                )
    return path


def _validate_modules(
    parsed_cfg: dict[str, Any],
    *,
    summary: ValidationSummary,  # modified
    agg: SchemaErrorAggregator,  # modified
) -> None:
    logger = getAppLogger()
    modules_raw: Any = parsed_cfg.get("modules", [])
    logger.trace("[validate_modules] Validating modules")

    if not isinstance(modules_raw, list):
        collect_msg(
            "`modules` must be a list of modules.",
            strict=True,
            summary=summary,
            is_error=True,
        )
        return

    if not modules_raw:
        collect_msg(
            "No `modules` defined; nothing will be configured.",
            strict=False,
            summary=summary,
        )
        return

    seen: set[str] = set()
    for i, module in enumerate(cast_hint(list[Any], modules_raw)):
        logger.trace(f"[validate_modules] Checking module #{i + 1}")
        if not isinstance(module, dict):
            collect_msg(
                f"Module #{i + 1} must be an object"
                " with named keys (not a list or value)",
                strict=True,
                summary=summary,
                is_error=True,
            )
            continue

        path = _validate_module(
            cast_hint(dict[str, Any], module), i, summary=summary, agg=agg
        )
        if path is None:
            continue
        if path in seen:
            collect_msg(
                f"in module {path}: declared more than once",
                strict=True,
                summary=summary,
                is_error=True,
            )
        seen.add(path)


def validate_config(
    parsed_cfg: dict[str, Any],
    *,
    strict: bool | None = None,
) -> ValidationSummary:
    """Validate a parsed layout mapping.

    strict=True  →  unknown or misplaced keys become fatal
    strict=False →  they stay warnings
    strict=None  →  the layout's own `strict_config` decides
    """
    logger = getAppLogger()
    logger.trace(f"[validate_config] Starting validation (strict={strict})")

    strict_from_root: Any = parsed_cfg.get("strict_config")
    if strict is not None:
        strict_config = strict
    elif isinstance(strict_from_root, bool):
        strict_config = strict_from_root
    else:
        strict_config = DEFAULT_STRICT_CONFIG

    summary = ValidationSummary(
        valid=True,
        errors=[],
        strict_warnings=[],
        warnings=[],
        strict=strict_config,
    )
    agg: SchemaErrorAggregator = {}

    _validate_root(parsed_cfg, summary=summary, agg=agg)
    _validate_modules(parsed_cfg, summary=summary, agg=agg)

    return _set_valid_and_return(summary=summary, agg=agg)
