# tests/5_core/test_variant_matrix.py
"""Tests for VariantMatrix."""

from dataclasses import replace

import pytest

import scaffold.errors as mod_errors
import scaffold.variants as mod_variants


def test_variants_unavailable_before_compute() -> None:
    matrix = mod_variants.VariantMatrix()
    with pytest.raises(mod_errors.ConfigurationError, match="not available"):
        matrix.variants()


def test_default_build_types() -> None:
    # --- setup ---
    matrix = mod_variants.VariantMatrix()

    # --- execute ---
    matrix.compute()

    # --- verify ---
    assert [v.name for v in matrix.variants()] == ["debug", "release"]
    assert matrix.variants()[1] == mod_variants.Variant("release", "release")


def test_filters_drop_variants() -> None:
    # --- setup ---
    matrix = mod_variants.VariantMatrix(["debug", "staging", "release"])
    matrix.before_variants(lambda v: v.build_type != "release")

    # --- execute ---
    computed = matrix.compute()

    # --- verify ---
    assert [v.name for v in computed] == ["debug", "staging"]


def test_compute_is_stable() -> None:
    matrix = mod_variants.VariantMatrix()
    assert matrix.compute() is matrix.compute()


def test_filters_after_compute_are_rejected() -> None:
    matrix = mod_variants.VariantMatrix()
    matrix.compute()
    with pytest.raises(mod_errors.ConfigurationError):
        matrix.before_variants(lambda _v: True)


def test_adjusters_rewrite_kept_variants() -> None:
    # --- setup ---
    matrix = mod_variants.VariantMatrix(["debug", "staging", "release"])
    matrix.before_variants(lambda v: v.build_type != "staging")
    matrix.adjust_variants(lambda v: replace(v, android_test=False))

    # --- execute ---
    computed = matrix.compute()

    # --- verify ---
    assert computed == (
        mod_variants.Variant("debug", "debug", android_test=False),
        mod_variants.Variant("release", "release", android_test=False),
    )


def test_adjust_after_compute_is_rejected() -> None:
    matrix = mod_variants.VariantMatrix()
    matrix.compute()
    with pytest.raises(mod_errors.ConfigurationError, match="adjust_variants"):
        matrix.adjust_variants(lambda v: v)
