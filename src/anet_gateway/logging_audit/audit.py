"""Audit trail functionality for the anet-gateway library.

This module provides structured audit logging for tracking which gateway
responses were inspected and how they were classified.
"""

import time
import uuid
from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)

# Key fields logged first, in this order
FIELD_ORDER = [
    "status",
    "input_file",
    "response_type",
    "response_code",
    "transaction_reference",
    "code",
    "duration",
    "error_message",
    "correlation_id",
]


def log_audit_event(event_type: str, details: Dict[str, Any]) -> None:
    """Log an audit trail event.
    
    Creates a structured audit log entry with standard fields. Audit events
    are logged at INFO level, or ERROR level when ``status`` is "failure".
    
    Args:
        event_type: Type of operation (e.g., "RESPONSE_INSPECTED", "RESPONSE_PARSE_FAILED")
        details: Dictionary with event details. Common fields include:
                - input_file: Path to the inspected payload
                - status: "success", "pending" or "failure"
                - response_code: Transaction response code
                - transaction_reference: Gateway transaction id
                - duration: Operation duration in seconds
                - error_message: Error details (if status is failure)
                - correlation_id: Optional correlation ID for tracking related events
                
    Example:
        >>> log_audit_event("RESPONSE_INSPECTED", {
        ...     "input_file": "response.json",
        ...     "status": "success",
        ...     "response_code": 1,
        ...     "transaction_reference": "2149394533",
        ... })
    """
    details = dict(details)
    details.setdefault("timestamp", time.time())
    details.setdefault("correlation_id", str(uuid.uuid4()))
    
    message_parts = [f"AUDIT [{event_type}]"]
    
    for field in FIELD_ORDER:
        if field in details:
            value = details[field]
            if field == "duration" and isinstance(value, (int, float)):
                message_parts.append(f"{field}={value:.2f}s")
            else:
                message_parts.append(f"{field}={value}")
    
    # Remaining fields not in the standard order
    for key, value in details.items():
        if key not in FIELD_ORDER and key != "timestamp":
            message_parts.append(f"{key}={value}")
    
    audit_message = " | ".join(message_parts)
    
    if details.get("status") == "failure":
        logger.error(audit_message)
    else:
        logger.info(audit_message)
