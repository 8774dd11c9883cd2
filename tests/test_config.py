"""
Tests for utils/config.py - YAML configuration with environment overrides
"""

import pytest

import calendar_mcp.utils.config as config_module
from calendar_mcp.utils.config import clear_config_cache, get_config, get_config_value


CONFIG_YAML = """
server:
  log_level: DEBUG
  transport: http
  host: 0.0.0.0
  port: 8080
mcp:
  name: Team Calendar
tokens:
  storage_path: /var/lib/calendar-mcp/tokens.json
calendar:
  default_timezone: Europe/Berlin
conflict_detection:
  default_duplicate_threshold: 0.8
  search_padding_hours: 12
"""


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    monkeypatch.setattr(config_module, "CONFIG_FILE_PATH", str(path))
    clear_config_cache()
    return path


class TestGetConfig:
    """Tests for get_config."""

    def test_defaults_without_file(self):
        config = get_config()

        assert config["transport"] == "stdio"
        assert config["port"] == 3000
        assert config["mcp_server_name"] == "Google Calendar"
        assert config["default_timezone"] == "UTC"
        assert config["conflict_detection"] == {}
        assert config["token_encryption_key"] == "test_encryption_key_for_pytest"

    def test_values_from_file(self, config_file):
        config = get_config()

        assert config["transport"] == "http"
        assert config["host"] == "0.0.0.0"
        assert config["port"] == 8080
        assert config["log_level"] == "DEBUG"
        assert config["mcp_server_name"] == "Team Calendar"
        assert config["token_storage_path"] == "/var/lib/calendar-mcp/tokens.json"
        assert config["default_timezone"] == "Europe/Berlin"
        assert config["conflict_detection"]["search_padding_hours"] == 12

    def test_environment_takes_precedence(self, config_file, monkeypatch):
        monkeypatch.setenv("MCP_TRANSPORT", "stdio")
        monkeypatch.setenv("GOOGLE_CLIENT_ID", "env-client")

        config = get_config()

        assert config["transport"] == "stdio"
        assert config["google_client_id"] == "env-client"

    def test_cached_until_cleared(self, config_file):
        assert get_config() is get_config()

        config_file.write_text("mcp:\n  name: Renamed\n")
        assert get_config_value("mcp_server_name") == "Team Calendar"

        clear_config_cache()
        assert get_config_value("mcp_server_name") == "Renamed"

    def test_invalid_yaml_falls_back_to_defaults(self, tmp_path, monkeypatch):
        path = tmp_path / "broken.yaml"
        path.write_text("server: [unclosed")
        monkeypatch.setattr(config_module, "CONFIG_FILE_PATH", str(path))
        clear_config_cache()

        assert get_config()["transport"] == "stdio"

    def test_detection_config_reads_section(self, config_file):
        from calendar_mcp.conflict import load_detection_config

        detection = load_detection_config()

        assert detection.default_duplicate_threshold == 0.8
        assert detection.search_padding_hours == 12
        assert detection.blocking_threshold == 0.95


class TestLogLevel:
    """Tests for the logger reading its level from the cached config."""

    def test_default_level(self):
        import logging
        from calendar_mcp.utils.logger import get_log_level

        assert get_log_level() == logging.INFO

    def test_level_from_file(self, config_file):
        import logging
        from calendar_mcp.utils.logger import get_log_level, setup_logger

        assert get_log_level() == logging.DEBUG

        logger = setup_logger("calendar_mcp.test_logger")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        setup_logger("calendar_mcp.test_logger", level=logging.WARNING)
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self, tmp_path, monkeypatch):
        import logging
        from calendar_mcp.utils.logger import get_log_level

        path = tmp_path / "config.yaml"
        path.write_text("server:\n  log_level: chatty\n")
        monkeypatch.setattr(config_module, "CONFIG_FILE_PATH", str(path))
        clear_config_cache()

        assert get_log_level() == logging.INFO
