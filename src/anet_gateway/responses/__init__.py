"""Responses module.

This module provides the normalized response tree and the accessors that
classify gateway responses.
"""

from anet_gateway.responses.envelope import Response
from anet_gateway.responses.transaction import TransactionResponse, codes_equal
from anet_gateway.responses.tree import ResponseTree, as_tree

__all__ = [
    "Response",
    "ResponseTree",
    "TransactionResponse",
    "as_tree",
    "codes_equal",
]
