"""Logging configuration and logger factory for the anet-gateway library.

Two handlers are installed on the root logger:

- console: terse format at the requested level; never shows raw payloads
- file: full format at DEBUG with rotation; raw payloads are kept here,
  masked by the card data redacting formatter

Raw gateway bodies are logged with ``extra={PAYLOAD_FLAG: True}`` so the
console can drop them even under ``--verbose``.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .formatters import CardDataRedactingFormatter

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"
DEFAULT_LOG_FILE = Path("logs") / "anet-gateway.log"
LOG_FILE_ENV_VAR = "ANET_LOG_FILE"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

# Record attribute marking a raw response body
PAYLOAD_FLAG = "anet_payload"

# Attribute set on handlers installed here, so reconfiguring leaves others alone
_HANDLER_TAG = "_anet_gateway_handler"

logger = logging.getLogger(__name__)


class ConsolePayloadFilter(logging.Filter):
    """Drop records carrying a raw response body."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, PAYLOAD_FLAG, False)


def _resolve_log_file(log_file: Optional[Path]) -> Path:
    if log_file is not None:
        return Path(log_file)
    env_log_file = os.environ.get(LOG_FILE_ENV_VAR)
    return Path(env_log_file) if env_log_file else DEFAULT_LOG_FILE


def _remove_installed_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()


def _console_handler(level: int, redact_card_data: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        CardDataRedactingFormatter(fmt=CONSOLE_LOG_FORMAT, redact_card_data=redact_card_data)
    )
    handler.addFilter(ConsolePayloadFilter())
    setattr(handler, _HANDLER_TAG, True)
    return handler


def _file_handler(log_file: Path, redact_card_data: bool) -> logging.Handler:
    handler = RotatingFileHandler(
        filename=str(log_file),
        maxBytes=MAX_LOG_FILE_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        CardDataRedactingFormatter(fmt=FILE_LOG_FORMAT, redact_card_data=redact_card_data)
    )
    setattr(handler, _HANDLER_TAG, True)
    return handler


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    redact_card_data: bool = True,
) -> None:
    """Configure console and file logging for anet-gateway.

    Safe to call repeatedly: handlers from a previous call are replaced,
    handlers installed by anything else are left in place.

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            The file handler always logs at DEBUG.
        log_file: Path to log file. If None, uses the ANET_LOG_FILE
            environment variable if set, else logs/anet-gateway.log.
        redact_card_data: Whether to mask card numbers and hashes

    Raises:
        ValueError: If invalid log level is provided
        RuntimeError: If log directory cannot be created

    Example:
        >>> configure_logging(level="DEBUG")
        >>> configure_logging(level="INFO", log_file=Path("custom/gateway.log"))
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    log_file = _resolve_log_file(log_file)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(
            f"Failed to create log directory: {log_file.parent}. "
            f"Ensure write permissions are available. Error: {e}"
        ) from e

    root_logger = logging.getLogger()
    _remove_installed_handlers(root_logger)
    root_logger.setLevel(logging.DEBUG)

    root_logger.addHandler(_console_handler(numeric_level, redact_card_data))
    try:
        root_logger.addHandler(_file_handler(log_file, redact_card_data))
    except OSError as e:
        root_logger.warning(
            f"Failed to create file handler for {log_file}: {e}. "
            f"Logging to console only."
        )


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for the specified module."""
    return logging.getLogger(module_name)
