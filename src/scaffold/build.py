# src/scaffold/build.py

from dataclasses import dataclass

from .config.config_types import ModuleConfigResolved, RootConfigResolved
from .graph import TaskGraph
from .logs import getAppLogger
from .plugins import apply_plugin
from .project import Project
from .properties import FlagSource
from .prune import GraphPruner, PruneReport
from .rules import ModuleKind
from .variants import VariantMatrix


@dataclass
class ModuleResult:
    project: Project

    @property
    def report(self) -> PruneReport:
        """Combined report across every prune pass of the module."""
        combined = PruneReport(skipped=bool(self.project.reports))
        for report in self.project.reports:
            combined.skipped = combined.skipped and report.skipped
            combined.expanded.extend(report.expanded)
            combined.disabled.extend(report.disabled)
            combined.already_disabled.extend(report.already_disabled)
            combined.missing.extend(report.missing)
        return combined

    def as_dict(self) -> dict[str, object]:
        project = self.project
        mode = project.mode
        variants = project.variant_matrix.variants()
        return {
            "path": project.path,
            "kind": project.kind.value,
            "namespace": project.namespace,
            "debug_only": mode.debug_only if mode else None,
            "ios_enabled": mode.ios_enabled if mode else None,
            "variants": [v.name for v in variants],
            "unit_test_variants": [v.name for v in variants if v.unit_test],
            "android_test_variants": [v.name for v in variants if v.android_test],
            "baseline_profile": project.baseline_profile,
            "prune": self.report.as_dict(),
            "enabled_tasks": [
                t.name for t in project.graph.realize_all() if t.will_execute
            ],
        }


def create_project(
    module: ModuleConfigResolved,
    flags: FlagSource,
    active_variant: str,
) -> Project:
    graph = TaskGraph()
    for task in module["tasks"]:
        graph.register(
            task["name"],
            depends_on=task["depends_on"],
            description=task["description"],
        )
    return Project(
        path=module["path"],
        kind=ModuleKind.parse(module["kind"]),
        flags=flags,
        graph=graph,
        variant_matrix=VariantMatrix(module["build_types"]),
        active_variant=active_variant,
    )


def configure_module(
    module: ModuleConfigResolved,
    flags: FlagSource,
    active_variant: str,
    pruner: GraphPruner | None = None,
) -> ModuleResult:
    """Create, configure and finalize one module."""
    logger = getAppLogger()
    project = create_project(module, flags, active_variant)
    apply_plugin(project, pruner)
    project.finalize()
    logger.debug(
        "Configured %s (%s): %d task(s) disabled",
        project.path,
        project.kind.value,
        len(project.reports[-1].disabled) if project.reports else 0,
    )
    return ModuleResult(project)


def run_configuration(
    resolved: RootConfigResolved,
    pruner: GraphPruner | None = None,
) -> list[ModuleResult]:
    """Configure every module of a resolved layout.

    Modules are independent: each gets its own flag source and graph.
    """
    logger = getAppLogger()
    pruner = pruner or GraphPruner()
    if pruner.sync_active:
        logger.info("IDE sync detected; task graphs will not be pruned.")

    results: list[ModuleResult] = []
    for module in resolved["modules"]:
        flags = FlagSource(resolved["properties"])
        results.append(
            configure_module(module, flags, resolved["active_variant"], pruner)
        )
    return results
