"""JSON response parser."""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from anet_gateway.parsers.normalize import normalize_document
from anet_gateway.responses.tree import ResponseTree
from anet_gateway.utils.exceptions import ResponseParseError

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def decode_json_payload(payload: Union[str, bytes]) -> str:
    """Decode a JSON payload to text and drop any leading byte order mark.

    The gateway prefixes its JSON responses with a UTF-8 BOM, which
    ``json.loads`` rejects.
    """
    if isinstance(payload, (bytes, bytearray)):
        try:
            text = bytes(payload).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ResponseParseError(
                f"JSON response is not valid UTF-8: {e}", payload_format="json"
            ) from e
    else:
        text = payload
    return text.lstrip(UTF8_BOM)


def parse_json_response(
    payload: Union[str, bytes, Mapping[str, Any]],
    response_type: Optional[str] = None,
    normalize_code: bool = True,
) -> ResponseTree:
    """Parse an Authorize.Net JSON response into a normalized tree.

    Args:
        payload: Raw JSON text/bytes, or an already-decoded JSON object
        response_type: Name of the response document, if known
            (JSON responses do not carry it)
        normalize_code: Whether to convert ``responseCode`` to ``int``

    Returns:
        Normalized ResponseTree

    Raises:
        ResponseParseError: If the payload is not valid JSON or not a JSON object

    Example:
        >>> tree = parse_json_response('{"messages": {"resultCode": "Ok", "message": []}}')
        >>> tree.get("messages.resultCode")
        'Ok'
    """
    logger.info("Parsing JSON gateway response")

    if isinstance(payload, Mapping):
        document = payload
    else:
        text = decode_json_payload(payload)
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResponseParseError(
                f"Invalid JSON response: {e}. "
                f"Check JSON syntax at line {e.lineno}, column {e.colno}",
                payload_format="json",
            ) from e

    if not isinstance(document, Mapping):
        raise ResponseParseError(
            f"JSON response must be an object, got {type(document).__name__}",
            payload_format="json",
        )

    return normalize_document(document, response_type=response_type, normalize_code=normalize_code)
