"""Custom log formatters for the anet-gateway library.

This module provides specialized formatters for logging, including card data redaction.
"""

import logging
import re
from typing import Callable, List, Tuple, Union

Replacement = Union[str, Callable[[re.Match[str]], str]]


def _mask_pan(match: re.Match[str]) -> str:
    digits = match.group(0)
    return "X" * (len(digits) - 4) + digits[-4:]


class CardDataRedactingFormatter(logging.Formatter):
    """Formatter that masks cardholder data in log messages.
    
    Raw gateway payloads are logged at DEBUG level. This formatter keeps only
    the last four digits of anything that looks like a card number and drops
    card codes and transaction hashes.
    
    Attributes:
        redact_card_data: Whether to enable redaction
        patterns: List of (regex_pattern, replacement) tuples for redaction
        
    Example:
        >>> formatter = CardDataRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_card_data=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """
    
    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_card_data: bool = True,
    ) -> None:
        """Initialize the CardDataRedactingFormatter.
        
        Args:
            fmt: Log message format string
            datefmt: Date format string (optional)
            redact_card_data: Whether to enable card data redaction
        """
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_card_data = redact_card_data
        
        self.patterns: List[Tuple[re.Pattern[str], Replacement]] = [
            # Primary account numbers: 13 to 19 consecutive digits
            (re.compile(r'(?<!\d)\d{13,19}(?!\d)'), _mask_pan),
            
            # Card codes in XML and JSON payloads
            (re.compile(r'<cardCode>[^<]*</cardCode>'), '<cardCode>[REDACTED]</cardCode>'),
            (re.compile(r'"cardCode"\s*:\s*"[^"]*"'), '"cardCode": "[REDACTED]"'),
            
            # Transaction hashes in XML, JSON and key=value messages
            (re.compile(r'<transHash>[^<]*</transHash>'), '<transHash>[HASH-REDACTED]</transHash>'),
            (re.compile(r'"transHash"\s*:\s*"[^"]*"'), '"transHash": "[HASH-REDACTED]"'),
            (re.compile(r'trans_?hash=\S+', re.IGNORECASE), 'trans_hash=[HASH-REDACTED]'),
        ]
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional card data redaction.
        
        Args:
            record: Log record to format
            
        Returns:
            Formatted log message with card data redacted if enabled
        """
        original = super().format(record)
        
        if self.redact_card_data:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)
        
        return original
