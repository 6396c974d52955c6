"""Preferences API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from models.diff import DiffPreferences
from services.config_manager import ConfigManager
from services.preferences import ConfigPreferencesStore, PreferencesStore

router = APIRouter()


def get_preferences_store() -> PreferencesStore:
    """Storage capability injected into the routes; override in tests"""
    return ConfigPreferencesStore(ConfigManager.get_instance())


@router.get("", response_model=DiffPreferences)
async def get_preferences(store: PreferencesStore = Depends(get_preferences_store)) -> DiffPreferences:
    """Get persisted inputs, view mode and options"""
    return store.load()


@router.put("", response_model=DiffPreferences)
async def update_preferences(
    preferences: DiffPreferences,
    store: PreferencesStore = Depends(get_preferences_store),
) -> DiffPreferences:
    """Replace persisted preferences"""
    try:
        store.save(preferences)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return store.load()


@router.delete("/inputs")
async def clear_inputs(store: PreferencesStore = Depends(get_preferences_store)) -> dict[str, Any]:
    """Clear both persisted inputs, keeping view mode and options"""
    try:
        store.clear_inputs()
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "success", "message": "Inputs cleared"}
