# src/grader/utils/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from grader.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Read-only view over one settings.json file.
    Each command line tool owns an instance pointing at its own package's settings.
    """

    def __init__(self, settings_file: Path):
        self.settings_file = Path(settings_file)
        self._config: Dict[str, Any] = {}
        self.reset()

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'grader.checks_file'.
        """
        value = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    def reset(self) -> None:
        """(Re)loads the configuration from the settings file; falls back to an empty config."""
        if not self.settings_file.exists():
            logger.warning("Settings file not found at %s. Using empty config.", self.settings_file)
            self._config = {}
            return
        try:
            self._config = json.loads(self.settings_file.read_text(encoding="utf-8"))
            logger.debug("Configuration loaded from %s.", self.settings_file)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", self.settings_file, e, exc_info=True)
            self._config = {}


# Settings of the grader CLI.
config_manager = ConfigManager(PathUtils.get_settings_file())
