"""Custom exception classes for the Authorize.Net gateway response library.

All exceptions inherit from AnetGatewayError to allow catching all custom exceptions.
Response accessors never raise; these are raised by the parsing and
configuration layers only.
"""


class AnetGatewayError(Exception):
    """Base exception for all anet-gateway custom exceptions."""

    pass


class ResponseParseError(AnetGatewayError):
    """Raised when a gateway payload cannot be turned into a response tree.
    
    Examples:
        - Malformed JSON or XML
        - JSON document that is not an object
        - Unknown payload format requested
    """

    def __init__(self, message: str, payload_format: str | None = None) -> None:
        super().__init__(message)
        self.payload_format = payload_format


class ConfigurationError(AnetGatewayError):
    """Raised when configuration loading or validation fails.
    
    Examples:
        - Invalid configuration file format
        - Unknown default payload format
        - Invalid log level
    """

    pass
