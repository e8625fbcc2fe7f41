from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against missing, corrupted or malformed config files.
3. Persistence (Save/Load) without touching real user data.
4. Override merging rules.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from vexplorer.domain.config import get_default_config, load_config, merge_config, save_config
from vexplorer.domain.constants import CURRENT_CONFIG_VERSION


@pytest.fixture
def config_path(tmp_path: Path):
    """Redirect the module-level CONFIG_FILE into a temporary folder."""
    path = tmp_path / "VExplorer" / "config.json"
    with patch("vexplorer.domain.config.CONFIG_FILE", str(path)):
        yield path


def test_default_config_schema() -> None:
    config = get_default_config()
    assert config["default_extension"] == ".txt"
    assert config["recognized_extensions"] == []
    assert config["save_on_exit"] is True
    assert config["load_sample"] is True
    assert config["storage_dir"].endswith("vexplorer_files")


def test_load_missing_file_returns_defaults(config_path: Path) -> None:
    assert not config_path.exists()
    assert load_config() == get_default_config()


def test_load_corrupted_file_returns_defaults(config_path: Path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{ incomplete json ", encoding="utf-8")
    assert load_config() == get_default_config()


@pytest.mark.parametrize("payload", [[1, 2, 3], {"settings": "oops"}])
def test_load_malformed_structure_returns_defaults(config_path: Path, payload) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps(payload), encoding="utf-8")
    assert load_config() == get_default_config()


def test_save_then_load_roundtrip(config_path: Path) -> None:
    config = get_default_config()
    config["default_extension"] = ".md"
    config["save_on_exit"] = False

    assert save_config(config) is True

    stored = json.loads(config_path.read_text(encoding="utf-8"))
    assert stored["version"] == CURRENT_CONFIG_VERSION

    loaded = load_config()
    assert loaded["default_extension"] == ".md"
    assert loaded["save_on_exit"] is False


def test_load_ignores_unknown_keys(config_path: Path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(
        json.dumps({"version": CURRENT_CONFIG_VERSION, "settings": {"bogus": 1, "locale": "es"}}),
        encoding="utf-8",
    )
    loaded = load_config()
    assert "bogus" not in loaded
    assert loaded["locale"] == "es"


def test_merge_config_skips_none_and_unknown() -> None:
    base = get_default_config()
    merged = merge_config(base, {"default_extension": None, "load_sample": False, "extra": 1})
    assert merged["default_extension"] == base["default_extension"]
    assert merged["load_sample"] is False
    assert "extra" not in merged
    assert base["load_sample"] is True
