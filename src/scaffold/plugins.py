# src/scaffold/plugins.py
"""Module-kind plugins.

Each plugin resolves the build mode once, derives whatever per-module
settings its kind needs and registers task pruning on the graph's finalize
hook, where the variant matrix is already known.
"""

from dataclasses import replace
from types import MappingProxyType

from .constants import RELEASE_BUILD_TYPE
from .errors import ConfigurationError
from .logs import getAppLogger
from .mode import BuildMode, resolve_build_mode_from
from .namespace import derive_namespace
from .project import Project
from .prune import GraphPruner
from .rules import ModuleKind, rules_for
from .variants import Variant


class BasePlugin:
    kind: ModuleKind | None = None
    derives_namespace: bool = False

    def __init__(self, pruner: GraphPruner | None = None) -> None:
        self.pruner = pruner or GraphPruner()

    def apply(self, project: Project) -> None:
        logger = getAppLogger()
        logger.trace(f"[plugin] applying {type(self).__name__} to {project.path}")

        project.mode = resolve_build_mode_from(project.flags)
        if self.derives_namespace:
            project.namespace = derive_namespace(
                project.flags.package_name(), project.path
            )
        self.configure(project, project.mode)
        self.register_pruning(project)

    def configure(self, project: Project, mode: BuildMode) -> None:
        """Kind-specific setup, run after the mode is known."""

    def register_pruning(self, project: Project) -> None:
        kind = self.kind or project.kind
        rule_set = rules_for(kind)

        def prune_tasks() -> None:
            if project.mode is None:
                xmsg = f"Build mode was never resolved for {project.path}"
                raise ConfigurationError(xmsg, value=project.path)
            report = self.pruner.prune(
                rule_set,
                project.mode,
                project.variant_matrix.variants(),
                project.active_variant,
                project.graph,
            )
            project.reports.append(report)

        project.graph.on_finalized(prune_tasks)


class AndroidPlugin(BasePlugin):
    """Shared base of application and library modules.

    Instrumented tests are off for every variant and unit tests are off for
    release builds.
    """

    derives_namespace = True

    def configure(self, project: Project, mode: BuildMode) -> None:
        def with_test_settings(variant: Variant) -> Variant:
            return replace(
                variant,
                android_test=False,
                unit_test=(
                    variant.unit_test and variant.build_type != RELEASE_BUILD_TYPE
                ),
            )

        project.variant_matrix.adjust_variants(with_test_settings)


class LibraryPlugin(AndroidPlugin):
    kind = ModuleKind.LIBRARY


class AppPlugin(AndroidPlugin):
    kind = ModuleKind.APPLICATION

    def configure(self, project: Project, mode: BuildMode) -> None:
        super().configure(project, mode)
        if not mode.debug_only:
            return

        def keep_debug(variant: Variant) -> bool:
            return variant.build_type == project.active_variant

        # debug-only builds never materialize the other variants
        project.variant_matrix.before_variants(keep_debug)


class JvmPlugin(BasePlugin):
    kind = ModuleKind.JVM


class MultiplatformPlugin(BasePlugin):
    kind = ModuleKind.MULTIPLATFORM

    def configure(self, project: Project, mode: BuildMode) -> None:
        # native frameworks use the bare package name as their bundle id
        project.namespace = project.flags.package_name()


class BenchmarkPlugin(BasePlugin):
    kind = ModuleKind.BENCHMARK
    derives_namespace = True

    def configure(self, project: Project, mode: BuildMode) -> None:
        # profile generation needs release builds
        project.baseline_profile = not mode.debug_only


PLUGINS: MappingProxyType[ModuleKind, type[BasePlugin]] = MappingProxyType(
    {
        ModuleKind.APPLICATION: AppPlugin,
        ModuleKind.LIBRARY: LibraryPlugin,
        ModuleKind.JVM: JvmPlugin,
        ModuleKind.MULTIPLATFORM: MultiplatformPlugin,
        ModuleKind.BENCHMARK: BenchmarkPlugin,
    }
)


def apply_plugin(project: Project, pruner: GraphPruner | None = None) -> BasePlugin:
    """Apply the plugin registered for ``project.kind``."""
    try:
        plugin_cls = PLUGINS[project.kind]
    except KeyError:
        xmsg = f"No plugin registered for module kind {project.kind!r}"
        raise ConfigurationError(xmsg, value=project.kind) from None
    plugin = plugin_cls(pruner)
    plugin.apply(project)
    return plugin
