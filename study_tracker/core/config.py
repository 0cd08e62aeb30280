"""
Configuration management for Study Tracker
Handles loading and saving storage settings and view preferences
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


class Config:
    """
    Configuration manager for the study tracker

    Two sections: 'settings' picks the storage backend, directory, blob key
    and log level; 'preferences' feeds the view builders (urgent window,
    dashboard and activity limits, calendar cell counts).
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration manager

        Args:
            config_dir: Path to configuration directory (defaults to ./config)
        """
        if config_dir is None:
            config_dir = PROJECT_ROOT / "config"

        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.settings_file = self.config_dir / "settings.json"
        self.preferences_file = self.config_dir / "preferences.json"

        # Load configurations
        self.settings = self._load_json(self.settings_file, self._default_settings())
        self.preferences = self._load_json(self.preferences_file, self._default_preferences())

    def _load_json(self, file_path: Path, default: Dict[str, Any]) -> Dict[str, Any]:
        """Load JSON file or return default if file doesn't exist or is unreadable"""
        if file_path.exists():
            try:
                with open(file_path, 'r') as f:
                    loaded = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Ignoring unreadable config file {file_path}: {e}")
                return default
            if not isinstance(loaded, dict):
                logger.warning(f"Ignoring config file {file_path}: expected an object")
                return default
            # Keys added in newer versions fall back to their defaults
            return {**default, **loaded}
        else:
            # Create file with defaults
            self._save_json(file_path, default)
            return default

    def _save_json(self, file_path: Path, data: Dict[str, Any]) -> None:
        """Save data to JSON file"""
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=2)

    def _default_settings(self) -> Dict[str, Any]:
        """Default system settings"""
        return {
            "storage_backend": "file",
            "storage_directory": "data/storage",
            "storage_key": "tasks",
            "log_level": "INFO",
        }

    def _default_preferences(self) -> Dict[str, Any]:
        """Default view preferences"""
        return {
            "urgent_window_days": 3,
            "dashboard_pending_limit": 5,
            "activity_limit": 5,
            "calendar_total_cells": 42,
            "calendar_max_trailing_days": 14,
        }

    def get(self, key: str, section: str = "settings", default: Any = None) -> Any:
        """
        Get configuration value

        Args:
            key: Configuration key
            section: Configuration section ('settings', 'preferences')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        section_map = {
            "settings": self.settings,
            "preferences": self.preferences,
        }

        return section_map.get(section, {}).get(key, default)

    def set(self, key: str, value: Any, section: str = "settings") -> None:
        """
        Set configuration value and save to disk

        Args:
            key: Configuration key
            value: Value to set
            section: Configuration section ('settings', 'preferences')
        """
        section_map = {
            "settings": (self.settings, self.settings_file),
            "preferences": (self.preferences, self.preferences_file),
        }

        if section in section_map:
            config_dict, file_path = section_map[section]
            config_dict[key] = value
            self._save_json(file_path, config_dict)

    def get_storage_directory(self) -> Path:
        """Get full path to the blob storage directory"""
        path = Path(self.settings["storage_directory"]).expanduser()
        if path.is_absolute():
            return path
        return PROJECT_ROOT / path
