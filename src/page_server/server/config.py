# src/page_server/server/config.py
from pathlib import Path

from grader.utils.config_manager import ConfigManager

SETTINGS_FILE = Path(__file__).resolve().parent.parent / "settings.json"

# Settings of the page server, independent of the grader's.
server_config = ConfigManager(SETTINGS_FILE)
