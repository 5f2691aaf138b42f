"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading functionality, including
support for JSON configuration files, environment variable overrides, and
configuration validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from anet_gateway.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from anet_gateway.config.schema import Config, LoggingConfig, ParsingConfig
from anet_gateway.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "ANET_"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.
    
    Configuration is loaded with the following precedence (highest to lowest):
    1. CLI arguments (handled by caller)
    2. Environment variables (ANET_* prefix)
    3. Configuration file (JSON)
    4. Default values
    
    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json
        
    Returns:
        Validated Config instance
        
    Raises:
        ConfigurationError: If configuration is invalid or malformed
        
    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> config.parsing.default_format
        'auto'
    """
    # Load .env file if present in project root
    load_dotenv()
    
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)
    
    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)
    
    try:
        return Config(**config_dict)
    except (ValidationError, TypeError) as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file or return defaults.
    
    Args:
        config_path: Path to configuration file
        
    Returns:
        Configuration dictionary
        
    Raises:
        ConfigurationError: If JSON is malformed or not an object
    """
    if not config_path.exists():
        logger.info(
            f"Config file not found: {config_path}. Using default configuration."
        )
        # Return a deep copy of defaults to avoid mutation
        return json.loads(json.dumps(DEFAULT_CONFIG))
    
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file: {config_path}\n"
            f"Error: {e}\n"
            f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}\n"
            f"Error: {e}\n"
            f"Fix: Check file permissions and path"
        ) from e
    
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config file must contain a JSON object: {config_path}"
        )
    
    logger.info(f"Loaded configuration from {config_path}")
    return config_dict


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with ANET_ prefix.
    
    Recognized variables:
    - ANET_DEFAULT_FORMAT, ANET_NORMALIZE_RESPONSE_CODE
    - ANET_LOG_LEVEL, ANET_LOG_FILE, ANET_REDACT_CARD_DATA
    
    Args:
        config_dict: Configuration dictionary to update
        
    Returns:
        Updated configuration dictionary with environment overrides applied
    """
    # Parsing section
    if default_format := os.getenv(f"{ENV_PREFIX}DEFAULT_FORMAT"):
        config_dict.setdefault("parsing", {})["default_format"] = default_format
        logger.debug("Override: default_format from environment")
    
    if normalize := os.getenv(f"{ENV_PREFIX}NORMALIZE_RESPONSE_CODE"):
        config_dict.setdefault("parsing", {})["normalize_response_code"] = _parse_bool(
            normalize
        )
        logger.debug("Override: normalize_response_code from environment")
    
    # Logging section
    if log_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config_dict.setdefault("logging", {})["level"] = log_level
        logger.debug("Override: log_level from environment")
    
    if log_file := os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config_dict.setdefault("logging", {})["log_file"] = log_file
        logger.debug("Override: log_file from environment")
    
    if redact := os.getenv(f"{ENV_PREFIX}REDACT_CARD_DATA"):
        config_dict.setdefault("logging", {})["redact_card_data"] = _parse_bool(redact)
        logger.debug("Override: redact_card_data from environment")
    
    return config_dict


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string (case-insensitive)."""
    return value.lower() in ("true", "1", "yes", "on")


def get_parsing_config(config: Config) -> ParsingConfig:
    """Get parsing configuration."""
    return config.parsing


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.
    
    Args:
        config: Configuration instance
        
    Returns:
        LoggingConfig instance
        
    Example:
        >>> config = load_config()
        >>> logging_config = get_logging_config(config)
        >>> print(logging_config.level)
    """
    return config.logging
