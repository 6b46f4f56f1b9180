# tests/5_core/test_load_config.py

from argparse import Namespace
from pathlib import Path

import pytest

import scaffold.config as mod_config
from tests.utils import write_layout


def test_load_toml(tmp_path: Path) -> None:
    # --- setup ---
    cfg = write_layout(
        tmp_path / ".scaffold.toml",
        {"active_variant": "debug", "modules": [{"path": ":app", "kind": "application"}]},
    )

    # --- execute ---
    data = mod_config.load_config(cfg)

    # --- verify ---
    assert data == {
        "active_variant": "debug",
        "modules": [{"path": ":app", "kind": "application"}],
    }


def test_empty_file_loads_as_none(tmp_path: Path) -> None:
    cfg = tmp_path / ".scaffold.json"
    cfg.write_text("   \n")
    assert mod_config.load_config(cfg) is None


def test_malformed_json_raises_value_error(tmp_path: Path) -> None:
    cfg = tmp_path / ".scaffold.json"
    cfg.write_text("{ not json")
    with pytest.raises(ValueError, match=".scaffold.json"):
        mod_config.load_config(cfg)


def test_scalar_json_raises_value_error(tmp_path: Path) -> None:
    cfg = tmp_path / ".scaffold.json"
    cfg.write_text("42")
    with pytest.raises(ValueError, match=".scaffold.json"):
        mod_config.load_config(cfg)


def test_bare_list_is_module_list() -> None:
    modules = [{"path": ":app", "kind": "application"}]
    assert mod_config.parse_config(modules) == {"modules": modules}
    assert mod_config.parse_config(None) is None


def test_load_and_validate_returns_none_without_config(tmp_path: Path) -> None:
    args = Namespace(config=None, strict_config=None)
    assert mod_config.load_and_validate_config(args, tmp_path) is None


def test_load_and_validate_rejects_invalid_layout(tmp_path: Path) -> None:
    # --- setup ---
    write_layout(tmp_path / ".scaffold.json", [{"path": "app", "kind": "application"}])
    args = Namespace(config=None, strict_config=None)

    # --- execute and verify ---
    with pytest.raises(ValueError, match="Invalid configuration"):
        mod_config.load_and_validate_config(args, tmp_path)


def test_load_and_validate_strict_flag_from_cli(tmp_path: Path) -> None:
    # --- setup ---
    write_layout(tmp_path / ".scaffold.json", {"modules": [], "extra": 1})

    # --- execute ---
    lenient = mod_config.load_and_validate_config(
        Namespace(config=None, strict_config=None), tmp_path
    )

    # --- verify ---
    assert lenient is not None
    assert lenient[2].warnings
    with pytest.raises(ValueError, match="extra"):
        mod_config.load_and_validate_config(
            Namespace(config=None, strict_config=True), tmp_path
        )


def test_json_layout_allows_comments_and_trailing_commas(tmp_path: Path) -> None:
    # --- setup ---
    cfg = tmp_path / ".scaffold.json"
    cfg.write_text(
        "{\n"
        "  // modules configured by this layout\n"
        '  "modules": [\n'
        '    { "path": ":app", "kind": "application", },\n'
        "  ],\n"
        "}\n"
    )

    # --- execute ---
    data = mod_config.load_config(cfg)

    # --- verify ---
    assert data == {"modules": [{"path": ":app", "kind": "application"}]}
