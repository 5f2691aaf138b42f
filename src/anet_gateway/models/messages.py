"""Message and error collections carried in gateway responses.

The gateway returns three lists with the same (code, text) shape:

- envelope messages (``messages.message``)
- transaction messages (``transactionResponse.messages.message``)
- transaction errors (``transactionResponse.errors.error``)

Each is wrapped in an immutable, ordered collection. An empty collection is a
valid value and is distinct from the collection being absent from the response.
"""

from collections.abc import Iterable as IterableABC
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, overload


@dataclass(frozen=True)
class ResponseMessage:
    """A single (code, text) entry.

    Attributes:
        code: Gateway message or error code (e.g. "I00001", "1", "E00027")
        text: Human-readable message text

    Example:
        >>> msg = ResponseMessage(code="1", text="This transaction has been approved.")
        >>> msg.code
        '1'
    """

    code: Optional[str]
    text: Optional[str]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"code": self.code, "text": self.text}


class MessageCollection(Sequence):
    """Ordered, read-only sequence of ResponseMessage entries.

    Supports ``len()``, iteration, indexing and truthiness like a tuple, and
    adds ``first`` which is None on an empty collection instead of raising.
    """

    # Raw wrapper element and key names accepted by coerce()
    wrapper_key: Optional[str] = None
    code_keys: tuple[str, ...] = ("code",)
    text_keys: tuple[str, ...] = ("text",)

    def __init__(self, items: Iterable[ResponseMessage] = ()) -> None:
        self._items: tuple[ResponseMessage, ...] = tuple(items)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, Any]]) -> "MessageCollection":
        """Build a collection from (code, text) pairs.

        Args:
            pairs: Iterable of (code, text) tuples

        Returns:
            New collection of the calling class
        """
        return cls(ResponseMessage(code=code, text=text) for code, text in pairs)

    @classmethod
    def coerce(cls, value: Any) -> "MessageCollection":
        """Return ``value`` as a collection of the calling class.

        Accepts an existing collection, a sequence of ResponseMessage entries
        or mappings, a single mapping, or the raw gateway wrapper such as
        ``{"error": [...]}``. Entry mappings may use the raw gateway key names
        (``errorCode``/``errorText``, ``description``). Entries carrying none
        of the known keys are skipped. None, scalars and strings become an
        empty collection.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            if cls.wrapper_key is not None and cls.wrapper_key in value:
                return cls.coerce(value[cls.wrapper_key])
            value = [value]
        if isinstance(value, (str, bytes)) or not isinstance(value, IterableABC):
            return cls()

        items = []
        for item in value:
            if isinstance(item, ResponseMessage):
                items.append(item)
            elif isinstance(item, Mapping):
                entry = cls._entry_from_mapping(item)
                if entry is not None:
                    items.append(entry)
        return cls(items)

    @classmethod
    def _entry_from_mapping(cls, item: Mapping[str, Any]) -> Optional[ResponseMessage]:
        code_key = next((key for key in cls.code_keys if key in item), None)
        text_key = next((key for key in cls.text_keys if key in item), None)
        if code_key is None and text_key is None:
            return None
        code = item[code_key] if code_key is not None else None
        return ResponseMessage(
            code=str(code) if code is not None else None,
            text=item[text_key] if text_key is not None else None,
        )

    @property
    def first(self) -> Optional[ResponseMessage]:
        return self._items[0] if self._items else None

    @overload
    def __getitem__(self, index: int) -> ResponseMessage: ...

    @overload
    def __getitem__(self, index: slice) -> "MessageCollection": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ResponseMessage]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageCollection):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def to_list(self) -> list[dict]:
        """Convert to a list of ``{"code", "text"}`` dictionaries."""
        return [item.to_dict() for item in self._items]


class Messages(MessageCollection):
    """Envelope-level messages (``messages.message``)."""

    wrapper_key = "message"


class TransactionMessages(MessageCollection):
    """Informational messages attached to a transaction result."""

    wrapper_key = "message"
    text_keys = ("text", "description")


class Errors(MessageCollection):
    """Errors attached to a transaction result."""

    wrapper_key = "error"
    code_keys = ("code", "errorCode")
    text_keys = ("text", "errorText")
