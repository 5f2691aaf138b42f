"""Unit tests for configuration management.

Tests cover configuration loading, validation, environment variable overrides,
and error handling.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from anet_gateway.config import (
    Config,
    LoggingConfig,
    ParsingConfig,
    get_logging_config,
    get_parsing_config,
    load_config,
)
from anet_gateway.config.defaults import DEFAULT_CONFIG
from anet_gateway.utils.exceptions import ConfigurationError

ENV_VARS = [
    "ANET_DEFAULT_FORMAT",
    "ANET_NORMALIZE_RESPONSE_CODE",
    "ANET_LOG_LEVEL",
    "ANET_LOG_FILE",
    "ANET_REDACT_CARD_DATA",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove ANET_* overrides so tests see only what they set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path: Path):
    """Return a writer for temporary JSON configuration files."""
    def _write(content) -> Path:
        path = tmp_path / "config.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path
    return _write


class TestConfigurationSchema:
    """Test pydantic configuration models validation."""

    def test_defaults(self) -> None:
        # Arrange & Act
        config = Config()

        # Assert
        assert config.parsing.default_format == "auto"
        assert config.parsing.normalize_response_code is True
        assert config.logging.level == "INFO"
        assert config.logging.redact_card_data is True

    def test_format_case_insensitive(self) -> None:
        assert ParsingConfig(default_format="XML").default_format == "xml"

    def test_invalid_format(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ParsingConfig(default_format="yaml")

        assert "Invalid default_format" in str(exc_info.value)

    def test_logging_config_case_insensitive(self) -> None:
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_logging_config_invalid_level(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            LoggingConfig(level="LOUD")

        assert "Invalid log level" in str(exc_info.value)

    def test_defaults_dict_matches_schema(self) -> None:
        assert Config(**DEFAULT_CONFIG) == Config()


class TestLoadConfig:
    """Test configuration file loading."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "absent.json")

        assert config == Config()

    def test_loads_file(self, config_file) -> None:
        # Arrange
        path = config_file({
            "parsing": {"default_format": "json", "normalize_response_code": False},
            "logging": {"level": "warning"},
        })

        # Act
        config = load_config(path)

        # Assert
        assert config.parsing.default_format == "json"
        assert config.parsing.normalize_response_code is False
        assert config.logging.level == "WARNING"

    def test_partial_file_keeps_defaults(self, config_file) -> None:
        config = load_config(config_file({"logging": {"level": "ERROR"}}))

        assert config.parsing.default_format == "auto"
        assert config.logging.redact_card_data is True

    def test_malformed_json(self, config_file) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file('{"parsing": '))

        assert "Invalid JSON in config file" in str(exc_info.value)
        assert "Fix:" in str(exc_info.value)

    def test_non_object_json(self, config_file) -> None:
        with pytest.raises(ConfigurationError):
            load_config(config_file("[]"))

    def test_invalid_values(self, config_file) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file({"parsing": {"default_format": "csv"}}))

        assert "Configuration validation failed" in str(exc_info.value)


class TestEnvironmentOverrides:
    """Test ANET_* environment variable overrides."""

    def test_env_overrides_file(self, config_file, monkeypatch) -> None:
        # Arrange
        path = config_file({"parsing": {"default_format": "json"}, "logging": {"level": "INFO"}})
        monkeypatch.setenv("ANET_DEFAULT_FORMAT", "xml")
        monkeypatch.setenv("ANET_LOG_LEVEL", "DEBUG")

        # Act
        config = load_config(path)

        # Assert
        assert config.parsing.default_format == "xml"
        assert config.logging.level == "DEBUG"

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("1", True),
        ("YES", True),
        ("false", False),
        ("0", False),
    ])
    def test_boolean_overrides(self, tmp_path: Path, monkeypatch, raw, expected) -> None:
        monkeypatch.setenv("ANET_NORMALIZE_RESPONSE_CODE", raw)
        monkeypatch.setenv("ANET_REDACT_CARD_DATA", raw)

        config = load_config(tmp_path / "absent.json")

        assert config.parsing.normalize_response_code is expected
        assert config.logging.redact_card_data is expected

    def test_log_file_override(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("ANET_LOG_FILE", str(tmp_path / "gw.log"))

        config = load_config(tmp_path / "absent.json")

        assert config.logging.log_file == tmp_path / "gw.log"

    def test_invalid_env_value(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("ANET_LOG_LEVEL", "CHATTY")

        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "absent.json")


class TestHelpers:
    """Test configuration accessor helpers."""

    def test_section_helpers(self) -> None:
        config = Config()

        assert get_parsing_config(config) is config.parsing
        assert get_logging_config(config) is config.logging
