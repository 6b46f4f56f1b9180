# src/scaffold/__init__.py

"""Scaffold: build-mode derivation and task-graph pruning for multi-module builds.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use and custom integrations.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - resolve_build_mode()  → BuildMode from the debugOnly / enableIos flags
    - derive_namespace()    → dotted namespace from a module path
    - rules_for()           → per-module-kind rule tables
    - expand_pattern()      → "{VARIANT}" placeholder expansion
    - GraphPruner           → disable matched tasks in a task graph
    - apply_plugin()        → configure a Project according to its kind
    - main()                → CLI entrypoint
"""

from .build import ModuleResult, configure_module, run_configuration
from .cli import main
from .errors import ConfigurationError
from .graph import Task, TaskGraph, TaskGraphProvider
from .meta import PROGRAM_DISPLAY, PROGRAM_PACKAGE, PROGRAM_SCRIPT, Metadata
from .mode import BuildMode, resolve_build_mode, resolve_build_mode_from
from .namespace import derive_namespace
from .patterns import PatternScope, TaskNamePattern, expand_pattern
from .plugins import (
    AndroidPlugin,
    AppPlugin,
    BasePlugin,
    BenchmarkPlugin,
    JvmPlugin,
    LibraryPlugin,
    MultiplatformPlugin,
    apply_plugin,
)
from .project import Project
from .properties import FlagSource
from .prune import GraphPruner, PruneReport, prune_graph
from .rules import ModuleKind, RuleSet, rules_for
from .variants import Variant, VariantMatrix, VariantProvider


__all__ = [  # noqa: RUF022
    # build
    "ModuleResult",
    "configure_module",
    "run_configuration",
    # cli
    "main",
    # errors
    "ConfigurationError",
    # graph
    "Task",
    "TaskGraph",
    "TaskGraphProvider",
    # meta
    "Metadata",
    "PROGRAM_DISPLAY",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    # mode
    "BuildMode",
    "resolve_build_mode",
    "resolve_build_mode_from",
    # namespace
    "derive_namespace",
    # patterns
    "PatternScope",
    "TaskNamePattern",
    "expand_pattern",
    # plugins
    "AndroidPlugin",
    "AppPlugin",
    "BasePlugin",
    "BenchmarkPlugin",
    "JvmPlugin",
    "LibraryPlugin",
    "MultiplatformPlugin",
    "apply_plugin",
    # project
    "Project",
    # properties
    "FlagSource",
    # prune
    "GraphPruner",
    "PruneReport",
    "prune_graph",
    # rules
    "ModuleKind",
    "RuleSet",
    "rules_for",
    # variants
    "Variant",
    "VariantMatrix",
    "VariantProvider",
]
