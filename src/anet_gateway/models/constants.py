"""Authorize.Net API enumeration constants.

Values are taken from the gateway schema (AnetApiSchema.xsd) and the
transaction response field documentation. They must match the gateway
exactly since they are compared against what the gateway sends back.
"""

from enum import Enum, IntEnum
from typing import Dict


class ResponseCode(IntEnum):
    """Overall transaction outcome (``transactionResponse.responseCode``)."""

    APPROVED = 1
    DECLINED = 2
    ERROR = 3
    PENDING = 4  # held for review


class ResultCode(str, Enum):
    """Envelope result code (``messages.resultCode``)."""

    OK = "Ok"
    ERROR = "Error"


RESPONSE_CODE_APPROVED = ResponseCode.APPROVED.value
RESPONSE_CODE_DECLINED = ResponseCode.DECLINED.value
RESPONSE_CODE_ERROR = ResponseCode.ERROR.value
RESPONSE_CODE_PENDING = ResponseCode.PENDING.value

RESULT_CODE_OK = ResultCode.OK.value
RESULT_CODE_ERROR = ResultCode.ERROR.value

# Address Verification Service
AVS_RESULT_CODE_A = "A"
AVS_RESULT_CODE_B = "B"
AVS_RESULT_CODE_E = "E"
AVS_RESULT_CODE_G = "G"
AVS_RESULT_CODE_N = "N"
AVS_RESULT_CODE_P = "P"
AVS_RESULT_CODE_R = "R"
AVS_RESULT_CODE_S = "S"
AVS_RESULT_CODE_U = "U"
AVS_RESULT_CODE_W = "W"
AVS_RESULT_CODE_X = "X"
AVS_RESULT_CODE_Y = "Y"
AVS_RESULT_CODE_Z = "Z"

AVS_RESULT_DESCRIPTIONS: Dict[str, str] = {
    AVS_RESULT_CODE_A: "Address (Street) matches, ZIP does not",
    AVS_RESULT_CODE_B: "Address information not provided for AVS check",
    AVS_RESULT_CODE_E: "AVS error",
    AVS_RESULT_CODE_G: "Non-U.S. Card Issuing Bank",
    AVS_RESULT_CODE_N: "No Match on Address (Street) or ZIP",
    AVS_RESULT_CODE_P: "AVS not applicable for this transaction",
    AVS_RESULT_CODE_R: "Retry - System unavailable or timed out",
    AVS_RESULT_CODE_S: "Service not supported by issuer",
    AVS_RESULT_CODE_U: "Address information is unavailable",
    AVS_RESULT_CODE_W: "Nine digit ZIP matches, Address (Street) does not",
    AVS_RESULT_CODE_X: "Address (Street) and nine digit ZIP match",
    AVS_RESULT_CODE_Y: "Address (Street) and five digit ZIP match",
    AVS_RESULT_CODE_Z: "Five digit ZIP matches, Address (Street) does not",
}

# Card code verification
CVV_RESULT_CODE_M = "M"
CVV_RESULT_CODE_N = "N"
CVV_RESULT_CODE_P = "P"
CVV_RESULT_CODE_S = "S"
CVV_RESULT_CODE_U = "U"

CVV_RESULT_DESCRIPTIONS: Dict[str, str] = {
    CVV_RESULT_CODE_M: "Match",
    CVV_RESULT_CODE_N: "No Match",
    CVV_RESULT_CODE_P: "Not Processed",
    CVV_RESULT_CODE_S: "Should have been present",
    CVV_RESULT_CODE_U: "Issuer unable to process request",
}

# Cardholder authentication verification (3-D Secure)
CAVV_RESULT_CODE_NOT_VALIDATED = ""
CAVV_RESULT_CODE_0 = "0"
CAVV_RESULT_CODE_1 = "1"
CAVV_RESULT_CODE_2 = "2"
CAVV_RESULT_CODE_3 = "3"
CAVV_RESULT_CODE_4 = "4"
CAVV_RESULT_CODE_7 = "7"
CAVV_RESULT_CODE_8 = "8"
CAVV_RESULT_CODE_9 = "9"
CAVV_RESULT_CODE_A = "A"
CAVV_RESULT_CODE_B = "B"

CAVV_RESULT_DESCRIPTIONS: Dict[str, str] = {
    CAVV_RESULT_CODE_NOT_VALIDATED: "CAVV not validated",
    CAVV_RESULT_CODE_0: "CAVV not validated because erroneous data was submitted",
    CAVV_RESULT_CODE_1: "CAVV failed validation",
    CAVV_RESULT_CODE_2: "CAVV passed validation",
    CAVV_RESULT_CODE_3: "CAVV validation could not be performed; issuer attempt incomplete",
    CAVV_RESULT_CODE_4: "CAVV validation could not be performed; issuer system error",
    "5": "Reserved for future use",
    "6": "Reserved for future use",
    CAVV_RESULT_CODE_7: "CAVV attempt - failed validation - issuer available (U.S.-issued card/non-U.S acquirer)",
    CAVV_RESULT_CODE_8: "CAVV attempt - passed validation - issuer available (U.S.-issued card/non-U.S. acquirer)",
    CAVV_RESULT_CODE_9: "CAVV attempt - failed validation - issuer unavailable (U.S.-issued card/non-U.S. acquirer)",
    CAVV_RESULT_CODE_A: "CAVV attempt - passed validation - issuer unavailable (U.S.-issued card/non-U.S. acquirer)",
    CAVV_RESULT_CODE_B: "CAVV passed validation, information only, no liability shift",
}


def describe_code(table: Dict[str, str], code: object) -> str | None:
    """Look up the description of a verification result code.

    Codes are matched on their string form so an XML ``2`` and a JSON ``"2"``
    resolve to the same entry.

    Args:
        table: One of the ``*_RESULT_DESCRIPTIONS`` tables
        code: Result code as read from the response, or None

    Returns:
        Description text, or None if the code is absent or unknown

    Example:
        >>> describe_code(CVV_RESULT_DESCRIPTIONS, "M")
        'Match'
    """
    if code is None:
        return None
    return table.get(str(code).strip())
