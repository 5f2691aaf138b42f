"""XML response parser.

Converts an AnetApi XML response document into the same raw dictionary
shape the JSON API produces, then normalizes it.
"""

import logging
from typing import Any, Dict, Union

from lxml import etree

from anet_gateway.parsers.normalize import normalize_document
from anet_gateway.responses.tree import ResponseTree
from anet_gateway.utils.exceptions import ResponseParseError

logger = logging.getLogger(__name__)

# Authorize.Net API namespace
ANET_NS = "AnetApi/xml/v1/schema/AnetApiSchema.xsd"


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def element_to_value(element: etree._Element) -> Any:
    """Convert an element to a plain Python value.

    Elements with children become dicts keyed by local name; a child name
    that repeats becomes a list. Leaf elements become their stripped text, or
    None when empty. Attributes are ignored.

    Args:
        element: Parsed lxml element

    Returns:
        dict, str or None
    """
    children = [child for child in element if isinstance(child.tag, str)]
    if not children:
        text = (element.text or "").strip()
        return text or None

    value: Dict[str, Any] = {}
    for child in children:
        name = _local_name(child)
        child_value = element_to_value(child)
        if name in value:
            existing = value[name]
            if isinstance(existing, list):
                existing.append(child_value)
            else:
                value[name] = [existing, child_value]
        else:
            value[name] = child_value
    return value


def parse_xml_response(
    payload: Union[str, bytes],
    normalize_code: bool = True,
) -> ResponseTree:
    """Parse an Authorize.Net XML response into a normalized tree.

    Args:
        payload: XML text or bytes
        normalize_code: Whether to convert ``responseCode`` to ``int``

    Returns:
        Normalized ResponseTree with ``response_type`` set to the root
        element name (e.g. "createTransactionResponse")

    Raises:
        ResponseParseError: If XML is malformed or empty

    Example:
        >>> tree = parse_xml_response(
        ...     "<createTransactionResponse><messages><resultCode>Ok</resultCode>"
        ...     "</messages></createTransactionResponse>"
        ... )
        >>> tree.response_type
        'createTransactionResponse'
    """
    logger.info("Parsing XML gateway response")

    if isinstance(payload, str):
        payload = payload.encode("utf-8")

    try:
        root = etree.fromstring(payload, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise ResponseParseError(
            f"Invalid XML response: {e}. "
            "Check if response is a valid AnetApi XML document.",
            payload_format="xml",
        ) from e

    response_type = _local_name(root)
    namespace = etree.QName(root).namespace
    if namespace and namespace != ANET_NS:
        logger.warning(
            f"Unexpected namespace on {response_type}: {namespace}. "
            f"Expected {ANET_NS}. Attempting to parse anyway."
        )

    document = element_to_value(root)
    if not isinstance(document, dict):
        document = {}

    return normalize_document(document, response_type=response_type, normalize_code=normalize_code)
