"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "parsing": {
        # Detect JSON vs XML from the payload itself
        "default_format": "auto",
        # XML sends responseCode as xs:int, JSON as a string
        "normalize_response_code": True,
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/anet-gateway.log",
        # Card data is masked unless the user opts out
        "redact_card_data": True,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
