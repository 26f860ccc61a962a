"""
test_config_manager.py
----------------------
Unit tests for config file loading and merging.
"""

import json

import pytest

from stressfall.core.services import config_manager
from stressfall.core.services.config_manager import ConfigError, load_config


# ===========================================================
# Loaders
# ===========================================================

def test_load_yaml(tmp_path):
    path = tmp_path / "tuning.yaml"
    path.write_text("board:\n  width: 300\n", encoding="utf-8")
    assert load_config(str(path)) == {"board": {"width": 300}}


def test_load_json(tmp_path):
    path = tmp_path / "tuning.json"
    path.write_text(json.dumps({"session": {"duration": 30}}), encoding="utf-8")
    assert load_config(str(path)) == {"session": {"duration": 30}}


def test_load_py_module(tmp_path):
    path = tmp_path / "tuning.py"
    path.write_text("DEFAULT_CONFIG = {'session': {'dodge_reward': 5}}\n", encoding="utf-8")
    assert load_config(str(path)) == {"session": {"dodge_reward": 5}}


def test_empty_yaml_yields_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path), {"a": 1}) == {"a": 1}


def test_bundled_game_file_is_indexed():
    config_manager.rebuild_file_index()
    data = load_config("game")
    assert data["board"] == {"width": 480, "height": 640}
    assert "_notes" not in data


# ===========================================================
# Errors
# ===========================================================

def test_missing_file_returns_defaults():
    assert load_config("nowhere.yaml", {"x": 1}) == {"x": 1}


def test_missing_file_strict_raises():
    with pytest.raises(ConfigError):
        load_config("nowhere.yaml", strict=True)


def test_malformed_yaml_strict_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("board: [1, 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path), strict=True)


def test_non_mapping_top_level_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


# ===========================================================
# Merging
# ===========================================================

def test_merge_is_recursive_and_skips_notes(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("_notes: ignore me\nboard:\n  width: 300\n", encoding="utf-8")
    defaults = {"board": {"width": 480, "height": 640}, "_notes": "also ignored"}

    merged = load_config(str(path), defaults)

    assert merged == {"board": {"width": 300, "height": 640}}
    assert defaults["board"]["width"] == 480
