"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_FORMATS = ["auto", "json", "xml"]


class ParsingConfig(BaseModel):
    """Configuration for turning gateway payloads into response trees.
    
    Attributes:
        default_format: Payload format used when none is given (auto, json or xml)
        normalize_response_code: Convert ``transactionResponse.responseCode``
            to an integer at parse time
    """
    
    default_format: str = Field(
        default="auto",
        description="Payload format: auto, json or xml"
    )
    normalize_response_code: bool = Field(
        default=True,
        description="Normalize responseCode to int while parsing"
    )
    
    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate payload format.
        
        Args:
            v: Format string
            
        Returns:
            Validated format (lowercase)
            
        Raises:
            ValueError: If format is not one of: auto, json, xml
        """
        v_lower = v.lower()
        if v_lower not in VALID_FORMATS:
            raise ValueError(
                f"Invalid default_format: {v}. Must be one of: {', '.join(VALID_FORMATS)}"
            )
        return v_lower


class LoggingConfig(BaseModel):
    """Configuration for logging.
    
    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_card_data: Whether to mask card numbers and transaction hashes in logs
    """
    
    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/anet-gateway.log"),
        description="Log file path"
    )
    redact_card_data: bool = Field(
        default=True,
        description="Mask card numbers and transaction hashes in logs"
    )
    
    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.
        
        Args:
            v: Log level string
            
        Returns:
            Validated log level (uppercase)
            
        Raises:
            ValueError: If log level is not valid
        """
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.
    
    Attributes:
        parsing: Payload parsing configuration
        logging: Logging configuration
        
    Example:
        >>> config = Config(parsing=ParsingConfig(default_format="xml"))
        >>> config.parsing.default_format
        'xml'
        >>> config.logging.level
        'INFO'
    """
    
    parsing: ParsingConfig = ParsingConfig()
    logging: LoggingConfig = LoggingConfig()
