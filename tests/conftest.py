"""Shared fixtures for backend tests."""

from __future__ import annotations

import pytest

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config singleton at a fresh temp directory for every test."""
    monkeypatch.setenv("JSONDIFF_CONFIG_DIR", str(tmp_path / "config"))
    ConfigManager._instance = None
    yield ConfigManager.get_instance()
    ConfigManager._instance = None


@pytest.fixture
def simple_pair():
    """Object pair with one change of each type."""
    original = '{"name": "Alice", "age": 30, "tags": ["a", "b"]}'
    modified = '{"name": "Alicia", "tags": ["a", "b"], "email": "alice@example.com"}'
    return original, modified
