"""Parsers module.

This module turns raw gateway payloads (JSON or XML) into normalized
response trees, detecting the format when it is not given.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from anet_gateway.parsers.json_parser import UTF8_BOM, parse_json_response
from anet_gateway.parsers.normalize import normalize_document, normalize_response_code
from anet_gateway.parsers.xml_parser import parse_xml_response
from anet_gateway.responses.tree import ResponseTree
from anet_gateway.utils.exceptions import ResponseParseError

logger = logging.getLogger(__name__)

FORMAT_AUTO = "auto"
FORMAT_JSON = "json"
FORMAT_XML = "xml"
SUPPORTED_FORMATS = (FORMAT_AUTO, FORMAT_JSON, FORMAT_XML)


def detect_format(payload: Union[str, bytes, Mapping[str, Any]]) -> str:
    """Detect whether a payload is JSON or XML.

    Looks at the first character after any byte order mark and whitespace.

    Args:
        payload: Raw payload, or a decoded JSON object

    Returns:
        "json" or "xml"

    Raises:
        ResponseParseError: If the format cannot be determined
    """
    if isinstance(payload, Mapping):
        return FORMAT_JSON

    if isinstance(payload, (bytes, bytearray)):
        head = bytes(payload[:512]).lstrip(b"\xef\xbb\xbf").lstrip()[:1]
        head = head.decode("ascii", errors="replace")
    else:
        head = payload.lstrip(UTF8_BOM).lstrip()[:1]

    if head == "<":
        return FORMAT_XML
    if head in ("{", "["):
        return FORMAT_JSON

    raise ResponseParseError(
        "Cannot detect response format: payload is neither JSON nor XML"
        + (f" (starts with {head!r})" if head else " (empty payload)")
    )


def parse_response(
    payload: Union[str, bytes, Mapping[str, Any]],
    fmt: Optional[str] = None,
    normalize_code: bool = True,
) -> ResponseTree:
    """Parse a gateway payload into a normalized ResponseTree.

    Args:
        payload: Raw JSON/XML text or bytes, or a decoded JSON object
        fmt: "json", "xml", or "auto"/None to detect from the payload
        normalize_code: Whether to convert ``responseCode`` to ``int``

    Returns:
        Normalized ResponseTree

    Raises:
        ResponseParseError: If the format is unknown or the payload is malformed

    Example:
        >>> tree = parse_response(b'\\xef\\xbb\\xbf{"messages": {"resultCode": "Ok"}}')
        >>> tree.get("messages.resultCode")
        'Ok'
    """
    if fmt is None or fmt == FORMAT_AUTO:
        fmt = detect_format(payload)
        logger.debug(f"Detected response format: {fmt}")

    fmt = fmt.lower()
    if fmt == FORMAT_JSON:
        return parse_json_response(payload, normalize_code=normalize_code)
    if fmt == FORMAT_XML:
        if isinstance(payload, Mapping):
            raise ResponseParseError(
                "Decoded JSON objects cannot be parsed as XML", payload_format=FORMAT_XML
            )
        return parse_xml_response(payload, normalize_code=normalize_code)

    raise ResponseParseError(
        f"Unknown response format: {fmt}. "
        f"Must be one of: {', '.join(SUPPORTED_FORMATS)}"
    )


__all__ = [
    "FORMAT_AUTO",
    "FORMAT_JSON",
    "FORMAT_XML",
    "SUPPORTED_FORMATS",
    "detect_format",
    "normalize_document",
    "normalize_response_code",
    "parse_json_response",
    "parse_response",
    "parse_xml_response",
]
