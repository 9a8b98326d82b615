"""Message chains: ordered sequences of message elements."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Protocol, TypeVar, runtime_checkable

from miraiclient.registry import MessageRegistry
from miraiclient.types import _JsonText

T = TypeVar("T")


@runtime_checkable
class _Message(Protocol):
    """What a chain expects of each element."""

    type: str

    def to_json(self) -> Any: ...

    def load(self, data: Any) -> None: ...


class MessageChain(_JsonText):
    """An ordered list of messages with the id and time of its source.

    Elements are any objects with a ``type`` name, a ``to_json()`` method
    and, for decoding, a ``load(data)`` method. Elements of type ``"Plain"``
    carry their text in a ``text`` attribute.
    """

    def __init__(self, messages: Iterable[Any] | None = None) -> None:
        self._messages: list[Any] = list(messages) if messages is not None else []
        self.message_id = 0
        self.timestamp = 0

    def add(self, message: Any) -> MessageChain:
        """Append a message and return the chain for further calls."""
        self._messages.append(message)
        return self

    def insert(self, index: int, message: Any) -> None:
        """Insert a message before position ``index``."""
        self._messages.insert(index, message)

    def remove(self, message: Any) -> None:
        """Remove every message equal to ``message``."""
        self._messages = [m for m in self._messages if m != message]

    def remove_at(self, index: int) -> Any:
        """Remove the message at ``index`` and return it."""
        return self._messages.pop(index)

    def clear(self) -> None:
        """Remove all messages."""
        self._messages.clear()

    def get_all(self, kind: type[T]) -> list[T]:
        """Return every message that is an instance of ``kind``, in order."""
        return [m for m in self._messages if isinstance(m, kind)]

    def get_first(self, kind: type[T]) -> T:
        """Return the first message that is an instance of ``kind``.

        Raises LookupError if there is none.
        """
        for m in self._messages:
            if isinstance(m, kind):
                return m
        raise LookupError(f"no message of type {kind.__name__} in chain")

    def _plain_texts(self) -> Iterator[str]:
        for m in self._messages:
            if getattr(m, "type", None) == "Plain":
                text = getattr(m, "text", None)
                if isinstance(text, str):
                    yield text

    def plain_text(self) -> str:
        """Return the text of all plain messages joined together."""
        return "".join(self._plain_texts())

    def first_plain_text(self) -> str:
        """Return the text of the first plain message, or an empty string."""
        return next(self._plain_texts(), "")

    @classmethod
    def from_json(cls, data: list[dict[str, Any]], registry: MessageRegistry) -> MessageChain:
        """Decode a chain, building elements through ``registry``.

        A leading ``"Source"`` element supplies the message id and time;
        element types unknown to the registry are skipped.
        """
        chain = cls()
        if not data:
            return chain
        try:
            first = data[0]
            if first["type"] == "Source":
                chain.message_id = int(first["id"])
                chain.timestamp = int(first["time"])
        except (KeyError, TypeError, ValueError, IndexError):
            chain.message_id = 0
            chain.timestamp = 0
        # Forwarded nodes carry no Source, so every element is considered.
        for item in data:
            type_name = item.get("type") if isinstance(item, dict) else None
            if not isinstance(type_name, str):
                continue
            message = registry.create(type_name)
            if message is not None:
                message.load(item)
                chain._messages.append(message)
        return chain

    def to_json(self) -> list[Any]:
        return [m.to_json() for m in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._messages)

    def __getitem__(self, index: int) -> Any:
        return self._messages[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageChain):
            return NotImplemented
        if len(self._messages) != len(other._messages):
            return False
        return all(a == b for a, b in zip(self._messages, other._messages))

    def __add__(self, other: object) -> MessageChain:
        if not isinstance(other, MessageChain):
            return NotImplemented
        combined = MessageChain(self._messages + other._messages)
        combined.message_id = self.message_id
        combined.timestamp = self.timestamp
        return combined

    def __repr__(self) -> str:
        return f"MessageChain({self._messages!r})"