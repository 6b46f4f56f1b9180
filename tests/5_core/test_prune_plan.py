# tests/5_core/test_prune_plan.py
"""Tests for GraphPruner.plan() name expansion."""

import scaffold.mode as mod_mode
import scaffold.patterns as mod_patterns
import scaffold.prune as mod_prune
import scaffold.rules as mod_rules
from tests.utils import make_variants


NORMAL = mod_mode.resolve_build_mode(debug_only=False, enable_ios=False)
DEBUG_ONLY = mod_mode.resolve_build_mode(debug_only=True, enable_ios=False)
DEBUG_ONLY_IOS = mod_mode.resolve_build_mode(debug_only=True, enable_ios=True)
DEBUG_RELEASE = make_variants("debug", "release")


def test_library_normal_mode_plan() -> None:
    # --- setup ---
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.LIBRARY)

    # --- execute ---
    plan = pruner.plan(rules, NORMAL, DEBUG_RELEASE, "debug")

    # --- verify ---
    assert plan == [
        "assemble",
        "assembleRelease",
        "bundleReleaseAar",
        "lintAnalyzeRelease",
    ]


def test_plan_has_no_duplicates() -> None:
    """Library debug-only repeats assemble/bundle patterns; names appear once."""
    # --- setup ---
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.LIBRARY)

    # --- execute ---
    plan = pruner.plan(rules, DEBUG_ONLY, DEBUG_RELEASE, "debug")

    # --- verify ---
    assert len(plan) == len(set(plan))
    assert plan.count("assembleRelease") == 1
    # unconditional lint patterns hit the active variant too
    assert {"lint", "lintDebug", "lintRelease", "lintFixDebug"} <= set(plan)


def test_kept_variant_skips_active_variant() -> None:
    # --- setup ---
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.RuleSet(always_disable=mod_patterns.kept_variant("lint{VARIANT}"))
    variants = make_variants("debug", "staging", "release")

    # --- execute ---
    plan = pruner.plan(rules, NORMAL, variants, "staging")

    # --- verify ---
    assert plan == ["lintDebug", "lintRelease"]


def test_placeholder_free_patterns_need_no_variants() -> None:
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.JVM)
    assert pruner.plan(rules, NORMAL, ()) == [
        "assemble",
        "lint",
        "lintFix",
        "updateLintBaseline",
    ]


def test_debug_only_group_depends_on_mode() -> None:
    # --- setup ---
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.MULTIPLATFORM)

    # --- execute ---
    normal = pruner.plan(rules, NORMAL, DEBUG_RELEASE)
    debug_only = pruner.plan(rules, DEBUG_ONLY, DEBUG_RELEASE)

    # --- verify ---
    assert "allTests" not in normal
    assert "allTests" in debug_only


def test_ios_group_follows_ios_enabled() -> None:
    # --- setup ---
    pruner = mod_prune.GraphPruner(sync_active=False)
    rules = mod_rules.rules_for(mod_rules.ModuleKind.MULTIPLATFORM)

    # --- execute ---
    without_ios = pruner.plan(rules, DEBUG_ONLY, DEBUG_RELEASE)
    with_ios = pruner.plan(rules, DEBUG_ONLY_IOS, DEBUG_RELEASE)
    normal = pruner.plan(rules, NORMAL, DEBUG_RELEASE)

    # --- verify ---
    assert "assembleXCFramework" in without_ios
    assert "assembleXCFramework" not in with_ios
    # release builds always keep iOS
    assert "assembleXCFramework" not in normal
