"""
Preferences Store - Storage port for UI shell state

The comparison core never reads or writes preferences; the HTTP shell
receives a store through dependency injection.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import ValidationError

from models.diff import DiffOptions, DiffPreferences, DiffViewMode
from services.config_manager import ConfigManager

logger = logging.getLogger(__name__)

# Fixed identifiers for persisted values
DIFF_STORAGE_KEYS = {
    "original": "data-formatter-diff-original",
    "modified": "data-formatter-diff-modified",
    "view_mode": "data-formatter-diff-view-mode",
    "options": "data-formatter-diff-options",
}


def preferences_to_entries(preferences: DiffPreferences) -> dict[str, object]:
    return {
        DIFF_STORAGE_KEYS["original"]: preferences.original_json,
        DIFF_STORAGE_KEYS["modified"]: preferences.modified_json,
        DIFF_STORAGE_KEYS["view_mode"]: preferences.view_mode.value,
        DIFF_STORAGE_KEYS["options"]: preferences.options.model_dump(),
    }


def preferences_from_entries(entries: dict[str, object]) -> DiffPreferences:
    """Rebuild preferences; unreadable values fall back to defaults"""
    defaults = DiffPreferences()
    try:
        view_mode = DiffViewMode(entries.get(DIFF_STORAGE_KEYS["view_mode"], defaults.view_mode))
    except ValueError:
        view_mode = defaults.view_mode
    try:
        options = DiffOptions.model_validate(entries.get(DIFF_STORAGE_KEYS["options"]) or {})
    except ValidationError as e:
        logger.warning("[PreferencesStore] Ignoring stored options: %s", e.error_count())
        options = defaults.options

    return DiffPreferences(
        original_json=str(entries.get(DIFF_STORAGE_KEYS["original"], "") or ""),
        modified_json=str(entries.get(DIFF_STORAGE_KEYS["modified"], "") or ""),
        view_mode=view_mode,
        options=options,
    )


class PreferencesStore(Protocol):
    """Load/save capability owned by the shell"""

    def load(self) -> DiffPreferences: ...

    def save(self, preferences: DiffPreferences) -> None: ...

    def clear_inputs(self) -> None: ...


class InMemoryPreferencesStore:
    """Non-persistent store"""

    def __init__(self):
        self._entries: dict[str, object] = {}

    def load(self) -> DiffPreferences:
        return preferences_from_entries(self._entries)

    def save(self, preferences: DiffPreferences) -> None:
        self._entries.update(preferences_to_entries(preferences))

    def clear_inputs(self) -> None:
        self._entries.pop(DIFF_STORAGE_KEYS["original"], None)
        self._entries.pop(DIFF_STORAGE_KEYS["modified"], None)


class ConfigPreferencesStore:
    """Store backed by the "preferences" section of config.json"""

    def __init__(self, config_manager: ConfigManager):
        self.config_manager = config_manager

    def load(self) -> DiffPreferences:
        entries = self.config_manager.get_config().get("preferences") or {}
        return preferences_from_entries(entries)

    def save(self, preferences: DiffPreferences) -> None:
        self.config_manager.set("preferences", preferences_to_entries(preferences))

    def clear_inputs(self) -> None:
        entries = dict(self.config_manager.get_config().get("preferences") or {})
        entries.pop(DIFF_STORAGE_KEYS["original"], None)
        entries.pop(DIFF_STORAGE_KEYS["modified"], None)
        self.config_manager.set("preferences", entries)
