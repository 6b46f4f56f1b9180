# src/scaffold/rules.py
"""Per-module-kind tables of tasks to disable.

These tables are the single source of truth for what gets turned off and
when; everything downstream is mechanical. They are built once at import
and shared read-only by every module of the same kind.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .errors import ConfigurationError
from .patterns import TaskNamePattern, kept_variant, unconditional


class ModuleKind(Enum):
    APPLICATION = "application"
    LIBRARY = "library"
    JVM = "jvm"
    MULTIPLATFORM = "multiplatform"
    BENCHMARK = "benchmark"

    @classmethod
    def parse(cls, raw: str) -> "ModuleKind":
        try:
            return cls(raw.strip().lower())
        except ValueError:
            valid = ", ".join(repr(k.value) for k in cls)
            xmsg = f"Unknown module kind {raw!r}. Must be one of: {valid}"
            raise ConfigurationError(xmsg, value=raw) from None


@dataclass(frozen=True)
class RuleSet:
    always_disable: tuple[TaskNamePattern, ...] = ()
    debug_only_disable: tuple[TaskNamePattern, ...] = ()
    # literal names, never variant-parameterized
    ios_disable: tuple[str, ...] = ()


# --- shared pattern groups ---------------------------------------------------

# Compiler metrics and reports generation.
COMPOSE_METRICS = unconditional(
    "generateComposeCompilerReports",
    "generateComposeCompilerMetrics",
)

# Device/connected tests; unit tests stay.
DEVICE_TESTS = unconditional(
    "connectedAndroidTest",
    "deviceAndroidTest",
)

# Lint runs on one variant only, reporting is aggregated at the app level.
APP_LINT_EXCEPT_ACTIVE = kept_variant(
    # analyze
    "lintAnalyze{VARIANT}",
    # report
    "lint{VARIANT}",
    "lintReport{VARIANT}",
    "copy{VARIANT}LintReports",
    # fix
    "lintFix{VARIANT}",
    # baseline
    "updateLintBaseline{VARIANT}",
)

LIBRARY_LINT = unconditional(
    # report
    "lint",
    "lint{VARIANT}",
    "lintReport{VARIANT}",
    "copy{VARIANT}LintReports",
    # fix
    "lintFix",
    "lintFix{VARIANT}",
    # baseline
    "updateLintBaseline",
    "updateLintBaseline{VARIANT}",
)

IOS_TASKS: tuple[str, ...] = (
    # linking (final framework creation)
    "linkDebugFrameworkIosArm64",
    "linkReleaseFrameworkIosArm64",
    "linkDebugFrameworkIosSimulatorArm64",
    "linkReleaseFrameworkIosSimulatorArm64",
    # tests
    "iosArm64Test",
    "iosSimulatorArm64Test",
    # assembly
    "assembleIosArm64",
    "assembleIosSimulatorArm64",
    # XCFramework
    "assembleDebugXCFramework",
    "assembleReleaseXCFramework",
    "assembleXCFramework",
)


# --- rule sets ---------------------------------------------------------------

APPLICATION_RULES = RuleSet(
    always_disable=APP_LINT_EXCEPT_ACTIVE,
    debug_only_disable=(
        *kept_variant("assemble{VARIANT}", "bundle{VARIANT}", "install{VARIANT}"),
        *COMPOSE_METRICS,
        *DEVICE_TESTS,
    ),
)

# Library modules are consumed as individual elements, not bundled AARs.
LIBRARY_RULES = RuleSet(
    always_disable=(
        *unconditional("assemble"),
        *kept_variant("assemble{VARIANT}", "bundle{VARIANT}Aar"),
        *kept_variant("lintAnalyze{VARIANT}"),
    ),
    debug_only_disable=(
        *LIBRARY_LINT,
        *kept_variant("assemble{VARIANT}", "bundle{VARIANT}Aar"),
        *COMPOSE_METRICS,
    ),
)

# Lint for JVM modules is aggregated at the app level.
JVM_RULES = RuleSet(
    always_disable=unconditional("assemble", "lint", "lintFix", "updateLintBaseline"),
)

MULTIPLATFORM_RULES = RuleSet(
    debug_only_disable=(
        *unconditional("allTests", "publishAllPublicationsToMavenLocalRepository"),
        *COMPOSE_METRICS,
        *DEVICE_TESTS,
    ),
    ios_disable=IOS_TASKS,
)

BENCHMARK_RULES = RuleSet()

RULES: MappingProxyType[ModuleKind, RuleSet] = MappingProxyType(
    {
        ModuleKind.APPLICATION: APPLICATION_RULES,
        ModuleKind.LIBRARY: LIBRARY_RULES,
        ModuleKind.JVM: JVM_RULES,
        ModuleKind.MULTIPLATFORM: MULTIPLATFORM_RULES,
        ModuleKind.BENCHMARK: BENCHMARK_RULES,
    }
)


def rules_for(kind: ModuleKind) -> RuleSet:
    """Return the shared rule set for ``kind``.

    Raises:
        ConfigurationError: If no rule set is registered for ``kind``.
    """
    try:
        return RULES[kind]
    except KeyError:
        xmsg = f"No rule set registered for module kind {kind!r}"
        raise ConfigurationError(xmsg, value=kind) from None
