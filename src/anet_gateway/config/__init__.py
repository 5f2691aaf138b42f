"""Config module.

This module provides configuration management functionality.
"""

from anet_gateway.config.manager import (
    get_logging_config,
    get_parsing_config,
    load_config,
)
from anet_gateway.config.schema import (
    Config,
    LoggingConfig,
    ParsingConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_logging_config",
    "get_parsing_config",
    # Configuration models
    "Config",
    "LoggingConfig",
    "ParsingConfig",
]
