"""Transaction response accessor.

A TransactionResponse can contain the full details of a transaction creation
or fetch result, or the errors that prevented it. It reads the
``transactionResponse`` block of a normalized tree and combines it with the
envelope fields of the surrounding response.
"""

from typing import Any, Callable, Optional

from anet_gateway.models.constants import (
    AVS_RESULT_DESCRIPTIONS,
    CAVV_RESULT_DESCRIPTIONS,
    CVV_RESULT_DESCRIPTIONS,
    RESPONSE_CODE_APPROVED,
    RESPONSE_CODE_DECLINED,
    RESPONSE_CODE_ERROR,
    RESPONSE_CODE_PENDING,
    describe_code,
)
from anet_gateway.models.messages import Errors, ResponseMessage, TransactionMessages
from anet_gateway.responses.envelope import Response
from anet_gateway.responses.tree import ResponseTree, as_tree


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def codes_equal(left: Any, right: Any) -> bool:
    """Compare two gateway codes, tolerating string/integer representation.

    The JSON API sends every number as a string while the XML schema types
    ``responseCode`` as ``xs:int``, so "1" and 1 must compare equal.

    Args:
        left: Code as read from a response (str, int or None)
        right: Code to compare against

    Returns:
        True if both are integer-like and numerically equal, or both are
        otherwise equal as stripped strings. None never equals anything.

    Example:
        >>> codes_equal("1", 1)
        True
        >>> codes_equal(None, 1)
        False
    """
    if left is None or right is None:
        return False

    left_int = _as_int(left)
    right_int = _as_int(right)
    if left_int is not None and right_int is not None:
        return left_int == right_int

    return str(left).strip() == str(right).strip()


def _first_present(*candidates: Callable[[], Any]) -> Any:
    """Evaluate candidates in order and return the first present value.

    None and the empty string count as absent; other falsy values such as 0
    are returned.
    """
    for candidate in candidates:
        value = candidate()
        if value is not None and value != "":
            return value
    return None


def _entry_field(entry: Optional[ResponseMessage], name: str) -> Any:
    return getattr(entry, name) if entry is not None else None


class TransactionResponse:
    """Accessor for the outcome of a transaction request.

    Wraps one normalized response tree and an envelope Response over the same
    tree. Holds no mutable state; every property is a read of the tree.

    Attributes:
        request: Originating request context, opaque to the accessor
        data: The normalized ResponseTree
        envelope: Envelope-level response providing ``is_successful``,
            ``response_is_successful``, ``code`` and ``message``

    Example:
        >>> response = TransactionResponse(None, {
        ...     "messages": {"resultCode": "Ok"},
        ...     "transactionResponse": {"responseCode": "1", "transId": "2149394533"},
        ... })
        >>> response.is_successful
        True
        >>> response.transaction_reference
        '2149394533'
    """

    def __init__(self, request: Any, data: Any, envelope: Optional[Response] = None) -> None:
        self.request = request
        self.data: ResponseTree = as_tree(data)
        self.envelope = envelope if envelope is not None else Response(self.data, request)

    def get_value(self, path: str) -> Any:
        return self.data.get(path)

    @property
    def is_successful(self) -> bool:
        """Whether the transaction is successful and complete.

        There must be no overall error, and the transaction must be approved.
        """
        return self.envelope.is_successful and codes_equal(
            self.response_code, RESPONSE_CODE_APPROVED
        )

    @property
    def is_pending(self) -> bool:
        """Whether the transaction is held for review."""
        return self.envelope.response_is_successful and codes_equal(
            self.response_code, RESPONSE_CODE_PENDING
        )

    @property
    def is_declined(self) -> bool:
        return codes_equal(self.response_code, RESPONSE_CODE_DECLINED)

    @property
    def is_error(self) -> bool:
        return codes_equal(self.response_code, RESPONSE_CODE_ERROR)

    @property
    def response_code(self) -> Any:
        """Transaction response code, one of ``RESPONSE_CODE_*``, uncoerced."""
        return self.get_value("transactionResponse.responseCode")

    @property
    def transaction_messages(self) -> TransactionMessages:
        """Transaction messages; an empty collection if there are none."""
        return TransactionMessages.coerce(
            self.get_value("transactionResponse.transactionMessages")
        )

    @property
    def transaction_errors(self) -> Errors:
        """Transaction errors; an empty collection if there are none."""
        return Errors.coerce(self.get_value("transactionResponse.errors"))

    @property
    def transaction_message(self) -> Optional[str]:
        """Text of the first error, else of the first transaction message."""
        return _first_present(
            lambda: _entry_field(self.transaction_errors.first, "text"),
            lambda: _entry_field(self.transaction_messages.first, "text"),
        )

    @property
    def transaction_code(self) -> Optional[str]:
        """Code of the first error, else of the first transaction message."""
        return _first_present(
            lambda: _entry_field(self.transaction_errors.first, "code"),
            lambda: _entry_field(self.transaction_messages.first, "code"),
        )

    @property
    def code(self) -> Optional[str]:
        """Transaction-level code if available, else the envelope code."""
        return _first_present(
            lambda: self.transaction_code,
            lambda: self.envelope.code,
        )

    @property
    def message(self) -> Optional[str]:
        """Transaction-level message text if available, else the envelope message."""
        return _first_present(
            lambda: self.transaction_message,
            lambda: self.envelope.message,
        )

    @property
    def transaction_reference(self) -> Optional[str]:
        """ID created for the transaction by the remote gateway."""
        return self.get_value("transactionResponse.transId")

    @property
    def auth_code(self) -> Optional[str]:
        """Six character authorization code."""
        return self.get_value("transactionResponse.authCode")

    @property
    def avs_result_code(self) -> Optional[str]:
        """Single letter, one of ``AVS_RESULT_CODE_*``."""
        return self.get_value("transactionResponse.avsResultCode")

    @property
    def cvv_result_code(self) -> Optional[str]:
        """Single letter, one of ``CVV_RESULT_CODE_*``."""
        return self.get_value("transactionResponse.cvvResultCode")

    @property
    def cavv_result_code(self) -> Any:
        """One of ``CAVV_RESULT_CODE_*``."""
        return self.get_value("transactionResponse.cavvResultCode")

    @property
    def ref_trans_id(self) -> Optional[str]:
        """Reference to the previous, related transaction."""
        return self.get_value("transactionResponse.refTransID")

    @property
    def trans_hash(self) -> Optional[str]:
        """Transaction hash, upper case MD5."""
        return self.get_value("transactionResponse.transHash")

    @property
    def account_number(self) -> Optional[str]:
        """Last four digits of the card or bank account, formatted XXXX1234."""
        return self.get_value("transactionResponse.accountNumber")

    @property
    def account_type(self) -> Optional[str]:
        """Card type, or "eCheck" for bank account payments."""
        return self.get_value("transactionResponse.accountType")

    @property
    def avs_result_description(self) -> Optional[str]:
        return describe_code(AVS_RESULT_DESCRIPTIONS, self.avs_result_code)

    @property
    def cvv_result_description(self) -> Optional[str]:
        return describe_code(CVV_RESULT_DESCRIPTIONS, self.cvv_result_code)

    @property
    def cavv_result_description(self) -> Optional[str]:
        return describe_code(CAVV_RESULT_DESCRIPTIONS, self.cavv_result_code)

    def to_dict(self) -> dict:
        """Summarize the transaction outcome for JSON serialization.

        Returns:
            Dictionary of classification flags, codes, messages and the
            pass-through verification fields.

        Example:
            >>> summary = response.to_dict()
            >>> summary["successful"]
            True
        """
        return {
            "response_type": self.data.response_type,
            "ref_id": self.envelope.ref_id,
            "result_code": self.envelope.result_code,
            "successful": self.is_successful,
            "pending": self.is_pending,
            "response_code": self.response_code,
            "code": self.code,
            "message": self.message,
            "transaction_reference": self.transaction_reference,
            "auth_code": self.auth_code,
            "avs_result_code": self.avs_result_code,
            "cvv_result_code": self.cvv_result_code,
            "cavv_result_code": self.cavv_result_code,
            "ref_trans_id": self.ref_trans_id,
            "account_number": self.account_number,
            "account_type": self.account_type,
            "errors": self.transaction_errors.to_list(),
            "transaction_messages": self.transaction_messages.to_list(),
        }

    def __repr__(self) -> str:
        return (
            f"TransactionResponse(response_code={self.response_code!r}, "
            f"transaction_reference={self.transaction_reference!r}, "
            f"code={self.code!r})"
        )
