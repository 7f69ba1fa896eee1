"""
Settings management class
- Save/load settings in JSON format
- Resolve the model API key from the environment or the settings file
"""
from __future__ import annotations
import json
import os
import logging
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Optional

from utils.system import get_app_data_dir
from .defaults import (
    SETTINGS_FILENAME,
    API_KEY_ENV_VAR,
    CLAUDE_MODEL,
    CLAUDE_MAX_TOKENS,
)

logger = logging.getLogger(__name__)

@dataclass
class Settings:
    """Application settings"""
    api_key: str = ""
    model: str = CLAUDE_MODEL
    max_tokens: int = CLAUDE_MAX_TOKENS
    last_output_dir: str = ""


class SettingsManager:
    """Manages settings reading and writing"""

    def __init__(self, settings_path: Optional[Path] = None):
        if settings_path is None:
            settings_path = get_app_data_dir() / SETTINGS_FILENAME
        self._settings_path = Path(settings_path)
        self._settings: Settings = Settings()
        self._load()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def settings_path(self) -> Path:
        return self._settings_path

    @property
    def api_key(self) -> str:
        """API key, the environment variable winning over the stored value"""
        return os.environ.get(API_KEY_ENV_VAR) or self._settings.api_key

    def update(self, **kwargs) -> None:
        """Update settings and save"""
        for key, value in kwargs.items():
            if hasattr(self._settings, key):
                setattr(self._settings, key, value)
            else:
                logger.warning(f"Ignoring unknown setting: {key}")
        self._save()

    def _load(self) -> None:
        """Load settings from file"""
        if self._settings_path.exists():
            try:
                with open(self._settings_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                    self._settings = Settings(**data)
            except (json.JSONDecodeError, TypeError):
                logger.warning(f"Invalid settings file, using defaults: {self._settings_path}")
                self._settings = Settings()

    def _save(self) -> None:
        """Save settings to file"""
        try:
            with open(self._settings_path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self._settings), f, indent=2, ensure_ascii=False)
        except (IOError, OSError) as e:
            logger.error(f"Failed to save settings: {e}")
