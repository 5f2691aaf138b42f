"""anet-gateway - Authorize.Net API response classification.

Parses JSON or XML gateway responses into a normalized tree and exposes
typed accessors for the transaction outcome.
"""

__version__ = "0.1.0"

from anet_gateway.parsers import parse_response
from anet_gateway.responses import Response, ResponseTree, TransactionResponse, codes_equal

__all__ = [
    "__version__",
    "Response",
    "ResponseTree",
    "TransactionResponse",
    "codes_equal",
    "parse_response",
]
