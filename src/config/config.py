import logging
import os
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path(__file__).with_name('settings.yaml')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Config:
    def __init__(self, settings_file: Optional[Path] = None):
        settings = self._load_settings(settings_file or SETTINGS_FILE)

        self.max_numbers = self._int_setting('COUNTDOWN_MAX_NUMBERS', settings.get('max_numbers', 6))
        self.target_min = self._int_setting('COUNTDOWN_TARGET_MIN', settings.get('target_min', 1))
        self.target_max = self._int_setting('COUNTDOWN_TARGET_MAX', settings.get('target_max', 999))
        self.allow_duplicates = bool(settings.get('allow_duplicates', False))
        self.log_level = os.getenv('COUNTDOWN_LOG_LEVEL', settings.get('log_level', 'WARNING')).upper()

        # Validate the combined settings
        if self.max_numbers < 1:
            raise ValueError("max_numbers must be at least 1")
        if self.target_min > self.target_max:
            raise ValueError("target_min must not exceed target_max")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @staticmethod
    def _int_setting(env_name: str, default) -> int:
        raw = os.getenv(env_name, default)
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"{env_name} must be an integer, got {raw!r}") from None

    def _load_settings(self, path: Path) -> dict:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                settings = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning("Settings file %s not found, using built-in defaults", path)
            return {}
        except yaml.YAMLError as e:
            logger.error("YAML parsing error in %s: %s", path, e)
            raise

        if not settings:
            logger.debug("Empty settings file %s", path)
            return {}
        if not isinstance(settings, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")
        return settings
