"""Logging Audit module.

This module provides logging configuration and audit trail functionality.
"""

from .audit import log_audit_event
from .formatters import CardDataRedactingFormatter
from .logger import PAYLOAD_FLAG, ConsolePayloadFilter, configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_audit_event",
    "CardDataRedactingFormatter",
    "ConsolePayloadFilter",
    "PAYLOAD_FLAG",
]
