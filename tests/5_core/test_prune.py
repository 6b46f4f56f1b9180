# tests/5_core/test_prune.py
"""Tests for GraphPruner.prune() against a task graph."""

import pytest

import scaffold.graph as mod_graph
import scaffold.logs as mod_logs
import scaffold.mode as mod_mode
import scaffold.prune as mod_prune
import scaffold.rules as mod_rules
from tests.utils import disabled_names, make_graph, make_variants, snapshot


NORMAL = mod_mode.resolve_build_mode(debug_only=False, enable_ios=False)
DEBUG_ONLY = mod_mode.resolve_build_mode(debug_only=True, enable_ios=False)
DEBUG_RELEASE = make_variants("debug", "release")


def test_disabled_task_is_fully_neutralized() -> None:
    # --- setup ---
    graph = make_graph("compile", "lint", depends_on={"lint": ["compile"]})
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.JVM)

    # --- execute ---
    report = pruner.prune(rules, NORMAL, DEBUG_RELEASE, "debug", graph)

    # --- verify ---
    lint = graph.get("lint")
    assert report.disabled == ["lint"]
    assert lint.enabled is False
    assert lint.will_execute is False
    assert mod_graph.never_run in lint.guards
    assert lint.depends_on == []
    assert lint.description == "DISABLED"
    assert graph.get("compile").will_execute


def test_active_variant_lint_survives() -> None:
    # --- setup ---
    graph = make_graph("lintDebug", "lintRelease", "lintAnalyzeDebug")
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.APPLICATION)

    # --- execute ---
    pruner.prune(rules, NORMAL, DEBUG_RELEASE, "debug", graph)

    # --- verify ---
    assert disabled_names(graph) == {"lintRelease"}


def test_missing_tasks_are_tolerated() -> None:
    # --- setup ---
    graph = make_graph("assemble")
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.JVM)

    # --- execute ---
    report = pruner.prune(rules, NORMAL, (), "debug", graph)

    # --- verify ---
    assert report.disabled == ["assemble"]
    assert report.missing == ["lint", "lintFix", "updateLintBaseline"]
    assert report.matched_count == 1
    assert report.expanded_count == 4


def test_only_planned_names_are_realized() -> None:
    # --- setup ---
    graph = make_graph("assemble", "compileKotlin", "test")
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.JVM)

    # --- execute ---
    pruner.prune(rules, NORMAL, (), "debug", graph)

    # --- verify ---
    assert graph.is_realized("assemble")
    assert not graph.is_realized("compileKotlin")
    assert not graph.is_realized("test")


def test_second_pass_changes_nothing() -> None:
    # --- setup ---
    graph = make_graph(
        "assemble",
        "assembleRelease",
        "bundleReleaseAar",
        "lint",
        "lintRelease",
        "lintDebug",
        "compileDebugKotlin",
        depends_on={"assembleRelease": ["compileDebugKotlin"]},
    )
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.LIBRARY)
    first = pruner.prune(rules, DEBUG_ONLY, DEBUG_RELEASE, "debug", graph)
    before = snapshot(graph)

    # --- execute ---
    second = pruner.prune(rules, DEBUG_ONLY, DEBUG_RELEASE, "debug", graph)

    # --- verify ---
    assert snapshot(graph) == before
    assert second.disabled == []
    assert second.already_disabled == first.disabled
    assert second.matched == first.matched


def test_ios_tasks_disabled_in_debug_only_without_ios() -> None:
    # --- setup ---
    graph = make_graph("allTests", "iosArm64Test", "assembleXCFramework", "jvmTest")
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.MULTIPLATFORM)

    # --- execute ---
    pruner.prune(rules, DEBUG_ONLY, DEBUG_RELEASE, "debug", graph)

    # --- verify ---
    assert disabled_names(graph) == {"allTests", "iosArm64Test", "assembleXCFramework"}


@pytest.mark.parametrize("enable_ios", [True, False])
def test_ios_tasks_kept_in_normal_mode(enable_ios: bool) -> None:  # noqa: FBT001
    # --- setup ---
    graph = make_graph("iosArm64Test", "assembleXCFramework")
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.MULTIPLATFORM)
    mode = mod_mode.resolve_build_mode(debug_only=False, enable_ios=enable_ios)

    # --- execute ---
    pruner.prune(rules, mode, DEBUG_RELEASE, "debug", graph)

    # --- verify ---
    assert disabled_names(graph) == set()


def test_sync_active_leaves_graph_untouched() -> None:
    # --- setup ---
    graph = make_graph("assemble", "lint")
    pruner = mod_prune.GraphPruner(sync_active=True)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.JVM)
    before = snapshot(graph)

    # --- execute ---
    report = pruner.prune(rules, NORMAL, (), "debug", graph)

    # --- verify ---
    assert report.skipped is True
    assert report.expanded == []
    assert snapshot(graph) == before


def test_sync_signal_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- setup ---
    monkeypatch.setenv("IDEA_SYNC_ACTIVE", "TRUE")
    graph = make_graph("lint")

    # --- execute ---
    report = mod_prune.prune_graph(
        mod_rules.rules_for(mod_rules.ModuleKind.JVM), NORMAL, (), "debug", graph
    )

    # --- verify ---
    assert report.skipped is True
    assert graph.get("lint").enabled is True


def test_disable_task_reports_prior_state() -> None:
    task = mod_graph.Task(name="lint", depends_on=["compile"])
    assert mod_prune.disable_task(task) is True
    assert mod_prune.disable_task(task) is False


def test_report_as_dict() -> None:
    # --- setup ---
    graph = make_graph("lint")
    pruner = mod_prune.GraphPruner(sync_active=False)

    # --- execute ---
    report = pruner.prune(
        mod_rules.rules_for(mod_rules.ModuleKind.JVM), NORMAL, (), "debug", graph
    )

    # --- verify ---
    assert report.as_dict() == {
        "skipped": False,
        "expanded": ["assemble", "lint", "lintFix", "updateLintBaseline"],
        "disabled": ["lint"],
        "already_disabled": [],
        "missing": ["assemble", "lintFix", "updateLintBaseline"],
    }


def test_each_task_outcome_is_logged(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- setup ---
    decisions: list[tuple[str, str]] = []

    def record(_self: object, _module: str, task: str, outcome: str) -> None:
        decisions.append((task, outcome))

    monkeypatch.setattr(mod_logs.AppLogger, "task_decision", record)
    graph = make_graph("lint")
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.JVM)

    # --- execute ---
    pruner.prune(rules, NORMAL, DEBUG_RELEASE, "debug", graph)
    pruner.prune(rules, NORMAL, DEBUG_RELEASE, "debug", graph)

    # --- verify ---
    lint_outcomes = [outcome for task, outcome in decisions if task == "lint"]
    assert lint_outcomes == ["disabled", "already disabled"]
