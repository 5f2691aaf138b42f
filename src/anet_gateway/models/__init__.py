"""Models module.

This module provides the gateway enumeration constants and the message
collection types found in gateway responses.
"""

from anet_gateway.models.constants import (
    RESPONSE_CODE_APPROVED,
    RESPONSE_CODE_DECLINED,
    RESPONSE_CODE_ERROR,
    RESPONSE_CODE_PENDING,
    RESULT_CODE_ERROR,
    RESULT_CODE_OK,
    ResponseCode,
    ResultCode,
)
from anet_gateway.models.messages import (
    Errors,
    MessageCollection,
    Messages,
    ResponseMessage,
    TransactionMessages,
)

__all__ = [
    "RESPONSE_CODE_APPROVED",
    "RESPONSE_CODE_DECLINED",
    "RESPONSE_CODE_ERROR",
    "RESPONSE_CODE_PENDING",
    "RESULT_CODE_ERROR",
    "RESULT_CODE_OK",
    "ResponseCode",
    "ResultCode",
    "Errors",
    "MessageCollection",
    "Messages",
    "ResponseMessage",
    "TransactionMessages",
]
