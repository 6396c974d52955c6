"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from models.diff import DiffOptions
from services.delta_engine import DEFAULT_MAX_DEPTH
from services.json_validator import MAX_INPUT_BYTES

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        # 1st: explicit argument, 2nd: environment, 3rd: ~/.jsondiff_backend
        config_dir = config_dir or os.environ.get("JSONDIFF_CONFIG_DIR")
        if not config_dir:
            config_dir = os.path.expanduser("~/.jsondiff_backend")

        try:
            config_path = Path(config_dir)
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("[ConfigManager] Cannot write to %s: %s", config_dir, e)
            self._config_file = None

        # Last resort: temp dir
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "jsondiff_backend"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.info("[ConfigManager] Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file, encoding="utf-8") as f:
                config.update(json.load(f))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("[ConfigManager] Error loading config: %s", e)
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": DiffOptions().model_dump(),
            "limits": {
                "maxInputBytes": MAX_INPUT_BYTES,
                "maxDepth": DEFAULT_MAX_DEPTH,
            },
            "server": {"host": "0.0.0.0", "port": 8000},
            "logLevel": "INFO",
            "preferences": {},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def get_limit(self, name: str) -> int:
        """Get a numeric limit from the "limits" section"""
        limits = self._config.get("limits", {})
        return int(limits.get(name, self._default_config()["limits"][name]))
