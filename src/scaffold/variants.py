# src/scaffold/variants.py
"""Variant matrix: the variants a module materializes."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .constants import DEFAULT_BUILD_TYPES
from .errors import ConfigurationError
from .logs import getAppLogger


@dataclass(frozen=True)
class Variant:
    name: str
    build_type: str
    unit_test: bool = True
    android_test: bool = True


VariantFilter = Callable[[Variant], bool]
VariantAdjuster = Callable[[Variant], Variant]


class VariantProvider(Protocol):
    def variants(self) -> Sequence[Variant]: ...


class VariantMatrix:
    """Variants of one module, available only after ``compute()``.

    Filters registered with ``before_variants()`` run during computation and
    drop every variant for which one of them returns False.
    Adjusters registered with ``adjust_variants()`` then rewrite each kept
    variant, in registration order.
    """

    def __init__(self, build_types: Iterable[str] = DEFAULT_BUILD_TYPES) -> None:
        self._candidates = [Variant(name=bt, build_type=bt) for bt in build_types]
        self._filters: list[VariantFilter] = []
        self._adjusters: list[VariantAdjuster] = []
        self._computed: tuple[Variant, ...] | None = None

    @property
    def computed(self) -> bool:
        return self._computed is not None

    def before_variants(self, keep: VariantFilter) -> None:
        self._check_open("before_variants")
        self._filters.append(keep)

    def adjust_variants(self, adjust: VariantAdjuster) -> None:
        self._check_open("adjust_variants")
        self._adjusters.append(adjust)

    def _check_open(self, hook: str) -> None:
        if self._computed is not None:
            xmsg = f"{hook}() called after the variant matrix was computed"
            raise ConfigurationError(xmsg)

    def compute(self) -> tuple[Variant, ...]:
        if self._computed is None:
            kept = [
                v for v in self._candidates if all(keep(v) for keep in self._filters)
            ]
            for adjust in self._adjusters:
                kept = [adjust(v) for v in kept]
            self._computed = tuple(kept)
            getAppLogger().trace(
                f"[variants] computed {[v.name for v in self._computed]}"
                f" from {[v.name for v in self._candidates]}"
            )
        return self._computed

    def variants(self) -> tuple[Variant, ...]:
        if self._computed is None:
            xmsg = "Variants are not available before the variant matrix is computed"
            raise ConfigurationError(xmsg)
        return self._computed
