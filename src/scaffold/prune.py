# src/scaffold/prune.py
"""Disable tasks that are irrelevant to the current build mode.

Names are planned first and only then applied to the graph, so a rule that
produces the same name twice, or a second pass over the same graph, never
does anything the first pass did not already do.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .constants import DEFAULT_ACTIVE_VARIANT, DISABLED_DESCRIPTION
from .environment import is_ide_sync_active
from .graph import Task, TaskGraphProvider, never_run
from .logs import getAppLogger
from .mode import BuildMode
from .patterns import PatternScope, TaskNamePattern, expand_pattern
from .rules import RuleSet
from .variants import Variant


@dataclass
class PruneReport:
    """What one ``prune`` pass did.

    ``expanded`` is the deduplicated plan; every name in it ends up in
    exactly one of ``disabled``, ``already_disabled`` or ``missing``.
    """

    expanded: list[str] = field(default_factory=list)
    disabled: list[str] = field(default_factory=list)
    already_disabled: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    skipped: bool = False

    @property
    def matched(self) -> list[str]:
        return [*self.disabled, *self.already_disabled]

    @property
    def expanded_count(self) -> int:
        return len(self.expanded)

    @property
    def matched_count(self) -> int:
        return len(self.disabled) + len(self.already_disabled)

    def as_dict(self) -> dict[str, object]:
        return {
            "skipped": self.skipped,
            "expanded": list(self.expanded),
            "disabled": list(self.disabled),
            "already_disabled": list(self.already_disabled),
            "missing": list(self.missing),
        }


def _expand_group(
    patterns: Iterable[TaskNamePattern],
    variants: Sequence[Variant],
    active_variant: str,
) -> list[str]:
    names: list[str] = []
    for pattern in patterns:
        if not pattern.is_variant_aware:
            # one canonical name, even for a module without variants
            names.append(pattern.template)
            continue
        for variant in variants:
            if (
                pattern.scope is PatternScope.KEPT_VARIANT
                and variant.name == active_variant
            ):
                continue
            names.append(expand_pattern(pattern, variant))
    return names


def _dedupe(names: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(names))


def disable_task(task: Task) -> bool:
    """Neutralize ``task``; returns False if it was already neutralized."""
    already = (
        not task.enabled
        and never_run in task.guards
        and not task.depends_on
        and task.description == DISABLED_DESCRIPTION
    )
    task.disable()
    # second line of defense against plugins that re-enable tasks
    task.add_guard(never_run)
    # dependents must tolerate the missing outputs; they are not cascaded
    task.clear_dependencies()
    task.set_description(DISABLED_DESCRIPTION)
    return not already


class GraphPruner:
    """Apply a rule set to a task graph.

    Args:
        sync_active: True while an IDE is importing the project; ``prune``
            then returns without touching the graph. Defaults to reading
            the environment once, at construction.
    """

    def __init__(self, *, sync_active: bool | None = None) -> None:
        self.sync_active = is_ide_sync_active() if sync_active is None else sync_active

    def plan(
        self,
        rule_set: RuleSet,
        mode: BuildMode,
        variants: Sequence[Variant],
        active_variant: str = DEFAULT_ACTIVE_VARIANT,
    ) -> list[str]:
        """Expand ``rule_set`` into the deduplicated list of task names."""
        names = _expand_group(rule_set.always_disable, variants, active_variant)
        if mode.debug_only:
            names += _expand_group(rule_set.debug_only_disable, variants, active_variant)
        if not mode.ios_enabled:
            names += rule_set.ios_disable
        return _dedupe(names)

    def prune(
        self,
        rule_set: RuleSet,
        mode: BuildMode,
        variants: Sequence[Variant],
        active_variant: str,
        graph: TaskGraphProvider,
    ) -> PruneReport:
        logger = getAppLogger()
        report = PruneReport()

        # partial graph mutation during a sync corrupts the IDE model
        if self.sync_active:
            logger.debug("IDE sync active; leaving the task graph untouched.")
            report.skipped = True
            return report

        report.expanded = self.plan(rule_set, mode, variants, active_variant)

        for name in report.expanded:
            task = graph.find_by_name(name)
            if task is None:
                logger.task_decision("prune", name, "not registered, skipping")
                report.missing.append(name)
                continue
            if disable_task(task):
                logger.task_decision("prune", name, "disabled")
                report.disabled.append(name)
            else:
                logger.task_decision("prune", name, "already disabled")
                report.already_disabled.append(name)

        logger.debug(
            "Pruned %d task(s), %d already disabled, %d of %d name(s) not present.",
            len(report.disabled),
            len(report.already_disabled),
            len(report.missing),
            report.expanded_count,
        )
        return report


def prune_graph(
    rule_set: RuleSet,
    mode: BuildMode,
    variants: Sequence[Variant],
    active_variant: str,
    graph: TaskGraphProvider,
) -> PruneReport:
    """Prune ``graph`` using the environment's IDE-sync signal."""
    return GraphPruner().prune(rule_set, mode, variants, active_variant, graph)
