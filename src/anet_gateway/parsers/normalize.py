"""Normalization of raw gateway documents into a ResponseTree.

JSON and XML payloads decode to slightly different raw shapes. This module
maps both onto one normalized layout so accessors do not care which
transport format was used:

- ``messages.message`` becomes a ``Messages`` collection
- ``transactionResponse.messages`` becomes ``transactionResponse.transactionMessages``
  (a ``TransactionMessages`` collection; entries use ``description`` for text)
- ``transactionResponse.errors`` becomes an ``Errors`` collection
  (entries use ``errorCode``/``errorText``)
- ``transactionResponse.responseCode`` becomes an ``int`` when integer-like
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from anet_gateway.models.messages import (
    Errors,
    MessageCollection,
    Messages,
    ResponseMessage,
    TransactionMessages,
)
from anet_gateway.responses.tree import ResponseTree

logger = logging.getLogger(__name__)


def _as_list(value: Any) -> List[Any]:
    """Treat a single entry as a one-element list, None as empty."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _unwrap(value: Any, child_name: str) -> List[Any]:
    """Return the entries of a wrapper such as ``<errors><error/>...</errors>``.

    JSON sends the entries as a bare list; XML nests them under a repeated
    child element.
    """
    if isinstance(value, Mapping):
        return _as_list(value.get(child_name))
    return _as_list(value)


def _build_collection(
    collection_cls: type,
    entries: List[Any],
    code_key: str,
    text_key: str,
) -> MessageCollection:
    items = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            logger.warning(f"Skipping malformed {collection_cls.__name__} entry: {entry!r}")
            continue
        code = entry.get(code_key)
        text = entry.get(text_key)
        items.append(ResponseMessage(
            code=str(code) if code is not None else None,
            text=text,
        ))
    return collection_cls(items)


def normalize_response_code(value: Any) -> Any:
    """Normalize a response code to ``int`` when it is integer-like.

    Args:
        value: Raw ``responseCode`` value (str, int or None)

    Returns:
        The integer code, or the original value if it is not integer-like

    Example:
        >>> normalize_response_code("1")
        1
        >>> normalize_response_code("P")
        'P'
    """
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            return int(stripped)
    return value


def _normalize_transaction(
    transaction: Mapping[str, Any],
    normalize_code: bool,
) -> Dict[str, Any]:
    normalized = dict(transaction)

    if "messages" in normalized:
        raw_messages = normalized.pop("messages")
        normalized["transactionMessages"] = _build_collection(
            TransactionMessages, _unwrap(raw_messages, "message"), "code", "description"
        )

    if "errors" in normalized:
        normalized["errors"] = _build_collection(
            Errors, _unwrap(normalized["errors"], "error"), "errorCode", "errorText"
        )

    if normalize_code and "responseCode" in normalized:
        normalized["responseCode"] = normalize_response_code(normalized["responseCode"])

    return normalized


def normalize_document(
    document: Mapping[str, Any],
    response_type: Optional[str] = None,
    normalize_code: bool = True,
) -> ResponseTree:
    """Build a normalized ResponseTree from a decoded gateway document.

    Args:
        document: Decoded JSON object or XML-to-dict conversion
        response_type: Name of the gateway response document, if known
        normalize_code: Whether to convert ``responseCode`` to ``int``

    Returns:
        Read-only ResponseTree
    """
    normalized: Dict[str, Any] = dict(document)

    envelope = normalized.get("messages")
    if isinstance(envelope, Mapping):
        envelope = dict(envelope)
        envelope["message"] = _build_collection(
            Messages, _as_list(envelope.get("message")), "code", "text"
        )
        normalized["messages"] = envelope

    transaction = normalized.get("transactionResponse")
    if isinstance(transaction, Mapping):
        normalized["transactionResponse"] = _normalize_transaction(transaction, normalize_code)

    tree = ResponseTree(normalized, response_type=response_type)
    logger.debug(
        f"Normalized {response_type or 'gateway'} response: "
        f"resultCode={tree.get('messages.resultCode')}, "
        f"responseCode={tree.get('transactionResponse.responseCode')!r}"
    )
    return tree
