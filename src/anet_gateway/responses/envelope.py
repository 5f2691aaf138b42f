"""Envelope-level response contract.

Every Authorize.Net API response carries an outer ``messages`` block with a
``resultCode`` of "Ok" or "Error" and one or more (code, text) messages,
plus the ``refId`` echoed from the request. This module exposes those fields
over a normalized ResponseTree.
"""

from typing import Any, Optional

from anet_gateway.models.constants import RESULT_CODE_OK
from anet_gateway.models.messages import Messages
from anet_gateway.responses.tree import ResponseTree, as_tree


class Response:
    """Base response accessor over a normalized response tree.

    All accessors are pure reads: nothing here raises on missing data, absent
    values come back as None.

    Attributes:
        request: Originating request context, opaque to the accessor
        data: The normalized ResponseTree

    Example:
        >>> response = Response({"messages": {"resultCode": "Ok"}})
        >>> response.response_is_successful
        True
    """

    def __init__(self, data: Any, request: Any = None) -> None:
        self.request = request
        self.data: ResponseTree = as_tree(data)

    def get_value(self, path: str) -> Any:
        """Return the value at a dotted path in the response tree, or None."""
        return self.data.get(path)

    @property
    def result_code(self) -> Optional[str]:
        return self.get_value("messages.resultCode")

    @property
    def response_is_successful(self) -> bool:
        """True if the envelope reports resultCode "Ok"."""
        return self.result_code == RESULT_CODE_OK

    @property
    def is_successful(self) -> bool:
        """Envelope-level success.

        Equal to ``response_is_successful`` here. Kept as its own predicate so
        subclasses and wrappers can tighten it without touching the raw
        result code check.
        """
        return self.response_is_successful

    @property
    def response_messages(self) -> Messages:
        """Envelope messages; an empty collection when there are none."""
        return Messages.coerce(self.get_value("messages.message"))

    @property
    def code(self) -> Optional[str]:
        first = self.response_messages.first
        return first.code if first is not None else None

    @property
    def message(self) -> Optional[str]:
        first = self.response_messages.first
        return first.text if first is not None else None

    @property
    def ref_id(self) -> Optional[str]:
        return self.get_value("refId")

    @property
    def response_type(self) -> Optional[str]:
        return self.data.response_type

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(result_code={self.result_code!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )
