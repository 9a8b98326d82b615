"""Lookup of message factories by their wire type name."""

from __future__ import annotations

from typing import Any, Callable


class MessageRegistry:
    """Maps message type names such as ``"Plain"`` to factories.

    A factory is called with no arguments and returns a fresh, empty
    message. The first factory registered for a name is kept; later
    registrations under the same name are ignored.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Any]] = {}

    def register(self, type_name: str, factory: Callable[[], Any]) -> None:
        """Register ``factory`` under ``type_name`` unless the name is taken."""
        self._factories.setdefault(type_name, factory)

    def create(self, type_name: str) -> Any | None:
        """Return a new message for ``type_name``, or None if it is unknown."""
        factory = self._factories.get(type_name)
        return None if factory is None else factory()

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._factories