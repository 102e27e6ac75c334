# tests/grader/test_config.py
import json
import logging

import pytest

from grader.utils.config_manager import ConfigManager, config_manager
from grader.utils.configure_logging import LogWithTqdm, configure_logger
from page_server.server.config import server_config

MOCK_SETTINGS_CONTENT = {
    "debug": {"level": "INFO"},
    "grader": {"html_file": "home.html", "checks_file": "rules.json"},
}


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    return path


def test_packaged_grader_settings():
    assert config_manager.get_nested("grader.html_file") == "index.html"
    assert config_manager.get_nested("grader.checks_file") == "checks.json"
    assert config_manager.get_nested("server.port") is None


def test_packaged_server_settings_are_separate():
    assert server_config.settings_file != config_manager.settings_file
    assert server_config.get_nested("server.port") == 5000
    assert server_config.get_nested("server.static_dir") == "public"


def test_get_nested(settings_file):
    manager = ConfigManager(settings_file)
    assert manager.get_nested("grader.checks_file") == "rules.json"
    assert manager.get_nested("non.existent.key", "default") == "default"
    assert manager.get_nested("debug.level.deeper", "x") == "x"


def test_reset_picks_up_changes(settings_file):
    manager = ConfigManager(settings_file)
    settings_file.write_text(json.dumps({"debug": {"level": "ERROR"}}))
    manager.reset()
    assert manager.get_nested("debug.level") == "ERROR"
    assert manager.get_nested("grader.html_file") is None


def test_missing_settings_file_gives_defaults(tmp_path):
    manager = ConfigManager(tmp_path / "absent.json")
    assert manager.get_nested("grader.html_file", "index.html") == "index.html"


def test_broken_settings_file_gives_defaults(settings_file):
    settings_file.write_text("{not json")
    manager = ConfigManager(settings_file)
    assert manager.get_nested("debug.level", "WARNING") == "WARNING"


def test_configure_logger_installs_tqdm_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logger("debug", silenced_loggers={"werkzeug": "ERROR"})
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], LogWithTqdm)
        assert root.level == logging.DEBUG
        assert logging.getLogger("werkzeug").level == logging.ERROR
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("werkzeug").setLevel(logging.NOTSET)
