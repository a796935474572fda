"""
Tests for configuration management.
"""

import json

import pytest

from cpg_hmm.config import (
    ConfigManager,
    get_config,
    load_config_file,
    reset_config,
    set_config,
    update_config,
)


@pytest.fixture(autouse=True)
def clean_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    assert get_config("generation", "length") == 30
    assert get_config("generation", "seed") is None
    assert get_config("logging", "level") == "INFO"


def test_get_section():
    section = get_config("generation")
    assert set(section) == {"length", "seed"}


def test_unknown_key():
    assert get_config("generation", "missing") is None
    assert get_config("missing") == {}


def test_set_and_reset():
    set_config("generation", "length", 99)
    assert get_config("generation", "length") == 99
    reset_config()
    assert get_config("generation", "length") == 30


def test_update_merges_sections():
    update_config({"generation": {"seed": 7}, "extra": {"key": "value"}})
    assert get_config("generation", "seed") == 7
    assert get_config("generation", "length") == 30
    assert get_config("extra", "key") == "value"


def test_reset_does_not_leak_nested_changes():
    set_config("logging", "level", "DEBUG")
    reset_config()
    assert ConfigManager().get("logging", "level") == "INFO"


def test_load_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"generation": {"length": 12}}))
    load_config_file(str(path))
    assert get_config("generation", "length") == 12


def test_load_invalid_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("not json")
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config_file(str(path))


class TestEnvironment:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CPG_HMM_LENGTH", "50")
        monkeypatch.setenv("CPG_HMM_SEED", "3")
        monkeypatch.setenv("CPG_HMM_LOG_LEVEL", "debug")
        manager = ConfigManager()
        assert manager.get("generation", "length") == 50
        assert manager.get("generation", "seed") == 3
        assert manager.get("logging", "level") == "debug"

    def test_invalid_env_ignored(self, monkeypatch):
        monkeypatch.setenv("CPG_HMM_LENGTH", "many")
        manager = ConfigManager()
        assert manager.get("generation", "length") == 30

    def test_config_file_from_env(self, monkeypatch, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"generation": {"length": 8, "seed": 1}}))
        monkeypatch.setenv("CPG_HMM_CONFIG", str(path))
        monkeypatch.setenv("CPG_HMM_SEED", "2")
        manager = ConfigManager()
        assert manager.get("generation", "length") == 8
        assert manager.get("generation", "seed") == 2
