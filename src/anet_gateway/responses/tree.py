"""Normalized, read-only response tree with dotted-path lookup.

The parsers produce one of these from a JSON or XML payload. Response
accessors only ever read from it through ``get()``.
"""

from collections.abc import Mapping, Sequence
from dataclasses import is_dataclass
from types import MappingProxyType
from typing import Any, Optional

from anet_gateway.models.messages import MessageCollection

PATH_SEPARATOR = "."
FIRST_SEGMENT = "first"


def _freeze(value: Any) -> Any:
    """Recursively wrap mappings and lists in read-only equivalents."""
    if isinstance(value, MessageCollection):
        return value
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, MessageCollection):
        return value
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def _step(node: Any, segment: str) -> Any:
    """Resolve a single path segment against a node, None when unresolvable."""
    if isinstance(node, Mapping):
        return node.get(segment)

    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if segment == FIRST_SEGMENT:
            return node[0] if len(node) > 0 else None
        if segment.isascii() and segment.isdigit():
            index = int(segment)
            return node[index] if index < len(node) else None
        return None

    # Entry objects such as ResponseMessage expose their fields as attributes
    if is_dataclass(node) and not isinstance(node, type):
        return getattr(node, segment, None)

    return None


class ResponseTree:
    """Immutable nested structure addressable by dotted paths.

    Path segments index mappings by key and dataclass entries by attribute.
    On sequences a decimal segment indexes by position and ``first`` picks
    element 0. Any miss along the way resolves to None; lookups never raise.

    Attributes:
        response_type: Name of the gateway response document, if known
            (e.g. "createTransactionResponse")

    Example:
        >>> tree = ResponseTree({"transactionResponse": {"transId": "2149394533"}})
        >>> tree.get("transactionResponse.transId")
        '2149394533'
        >>> tree.get("transactionResponse.missing.deeper") is None
        True
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None,
                 response_type: Optional[str] = None) -> None:
        self._root = _freeze(dict(data or {}))
        self.response_type = response_type

    def get(self, path: str, default: Any = None) -> Any:
        """Return the value at a dotted path.

        Args:
            path: Dotted path, e.g. "transactionResponse.errors.first.text"
            default: Value returned when the path does not resolve

        Returns:
            The value found, or ``default`` if any segment is missing or None
        """
        if not path:
            return default

        node: Any = self._root
        for segment in path.split(PATH_SEPARATOR):
            node = _step(node, segment)
            if node is None:
                return default
        return node

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.get(path) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseTree):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"ResponseTree(response_type={self.response_type!r}, data={self.to_dict()!r})"

    def to_dict(self) -> dict:
        """Return a mutable deep copy of the tree as plain dicts and lists."""
        return _thaw(self._root)


def as_tree(data: Any) -> ResponseTree:
    """Wrap a plain mapping in a ResponseTree, passing trees through unchanged."""
    if isinstance(data, ResponseTree):
        return data
    return ResponseTree(data)
