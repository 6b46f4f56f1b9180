# src/scaffold/patterns.py
"""Task-name patterns and placeholder expansion."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .constants import VARIANT_PLACEHOLDER


if TYPE_CHECKING:
    from .variants import Variant


class PatternScope(Enum):
    UNCONDITIONAL = "unconditional"  # every variant
    KEPT_VARIANT = "kept_variant"  # every variant except the active one


@dataclass(frozen=True)
class TaskNamePattern:
    template: str
    scope: PatternScope = PatternScope.UNCONDITIONAL

    @property
    def is_variant_aware(self) -> bool:
        return VARIANT_PLACEHOLDER in self.template


def capitalize_first(value: str) -> str:
    """Upper-case the first character only (``releaseCandidate`` → ``ReleaseCandidate``).

    Unlike ``str.capitalize()`` the remaining characters are left untouched.
    """
    return value[:1].upper() + value[1:]


def expand_pattern(pattern: "str | TaskNamePattern", variant: "Variant | str") -> str:
    """Substitute the variant name into a task-name template.

    Patterns without the placeholder come back unchanged.
    """
    template = pattern.template if isinstance(pattern, TaskNamePattern) else pattern
    if VARIANT_PLACEHOLDER not in template:
        return template

    name = variant if isinstance(variant, str) else variant.name
    return template.replace(VARIANT_PLACEHOLDER, capitalize_first(name))


def unconditional(*templates: str) -> tuple[TaskNamePattern, ...]:
    return tuple(TaskNamePattern(t, PatternScope.UNCONDITIONAL) for t in templates)


def kept_variant(*templates: str) -> tuple[TaskNamePattern, ...]:
    return tuple(TaskNamePattern(t, PatternScope.KEPT_VARIANT) for t in templates)
