"""Tests for configuration and the preferences store."""

from __future__ import annotations

import json

import pytest

from models.diff import DiffOptions, DiffPreferences, DiffViewMode
from services.config_manager import ConfigManager
from services.preferences import (
    DIFF_STORAGE_KEYS,
    ConfigPreferencesStore,
    InMemoryPreferencesStore,
    preferences_from_entries,
)


@pytest.fixture
def saved_preferences():
    return DiffPreferences(
        original_json='{"a": 1}',
        modified_json='{"a": 2}',
        view_mode=DiffViewMode.UNIFIED,
        options=DiffOptions(ignore_case=True, max_differences=10),
    )


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults(self, isolated_config):
        config = isolated_config.get_config()
        assert config["limits"]["maxInputBytes"] == 1024 * 1024
        assert config["limits"]["maxDepth"] == 200
        assert config["diff"]["max_differences"] == 500

    def test_uses_env_directory(self, isolated_config, tmp_path):
        assert isolated_config.config_file == tmp_path / "config" / "config.json"

    def test_save_and_reload(self, isolated_config):
        isolated_config.set("logLevel", "DEBUG")
        reloaded = ConfigManager(str(isolated_config.config_file.parent))
        assert reloaded.get("logLevel") == "DEBUG"
        assert reloaded.get_limit("maxDepth") == 200

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        config_dir = tmp_path / "corrupt"
        config_dir.mkdir()
        (config_dir / "config.json").write_text("{not json", encoding="utf-8")
        manager = ConfigManager(str(config_dir))
        assert manager.get("logLevel") == "INFO"

    def test_singleton(self):
        assert ConfigManager.get_instance() is ConfigManager.get_instance()


class TestInMemoryStore:
    """Tests for InMemoryPreferencesStore."""

    def test_defaults_when_empty(self):
        preferences = InMemoryPreferencesStore().load()
        assert preferences == DiffPreferences()

    def test_round_trip(self, saved_preferences):
        store = InMemoryPreferencesStore()
        store.save(saved_preferences)
        assert store.load() == saved_preferences

    def test_clear_inputs_keeps_settings(self, saved_preferences):
        store = InMemoryPreferencesStore()
        store.save(saved_preferences)
        store.clear_inputs()
        loaded = store.load()
        assert loaded.original_json == ""
        assert loaded.modified_json == ""
        assert loaded.view_mode == DiffViewMode.UNIFIED
        assert loaded.options.ignore_case


class TestConfigStore:
    """Tests for ConfigPreferencesStore."""

    def test_persists_under_fixed_keys(self, isolated_config, saved_preferences):
        ConfigPreferencesStore(isolated_config).save(saved_preferences)

        stored = json.loads(isolated_config.config_file.read_text(encoding="utf-8"))
        entries = stored["preferences"]
        assert entries[DIFF_STORAGE_KEYS["original"]] == '{"a": 1}'
        assert entries[DIFF_STORAGE_KEYS["view_mode"]] == "unified"

        assert ConfigPreferencesStore(isolated_config).load() == saved_preferences

    def test_clear_inputs(self, isolated_config, saved_preferences):
        store = ConfigPreferencesStore(isolated_config)
        store.save(saved_preferences)
        store.clear_inputs()
        assert store.load().original_json == ""
        assert store.load().view_mode == DiffViewMode.UNIFIED


class TestEntryParsing:
    """Unreadable stored values fall back to defaults."""

    def test_bad_values(self):
        preferences = preferences_from_entries(
            {
                DIFF_STORAGE_KEYS["view_mode"]: "sideways",
                DIFF_STORAGE_KEYS["options"]: {"max_differences": -1},
            }
        )
        assert preferences.view_mode == DiffViewMode.SIDE_BY_SIDE
        assert preferences.options == DiffOptions()
