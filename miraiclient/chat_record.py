"""Persistent pools of chat lines from which random replies are drawn."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

TRIM_THRESHOLD = 10000
TRIM_COUNT = 5000
MIN_POOL_SIZE = 10
FALLBACK_REPLY = "嗯嗯"


class ChatRecord:
    """A list of recorded messages kept in a JSON file.

    The file holds ``{"chat_record": [ ... ]}``.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.messages: list[str] = []

    def load(self) -> None:
        """Append the messages stored in the file to the record."""
        with self.path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        stored = data.get("chat_record") if isinstance(data, dict) else None
        for message in stored or []:
            if not isinstance(message, str):
                raise TypeError(f"chat record entry is not a string: {message!r}")
            self.messages.append(message)

    def save(self) -> None:
        """Overwrite the file with the current messages."""
        text = json.dumps(
            {"chat_record": self.messages}, ensure_ascii=False, separators=(",", ":")
        )
        self.path.write_text(text, encoding="utf-8")

    def add(self, message: str) -> None:
        """Record a new message."""
        self.messages.append(message)

    def trim(self) -> None:
        """Drop the oldest half once the record reaches its limit."""
        if len(self.messages) >= TRIM_THRESHOLD:
            del self.messages[:TRIM_COUNT]

    def pick(self, rand_value: int) -> str:
        """Choose a message by ``rand_value``; a stock reply if the pool is small."""
        if len(self.messages) <= MIN_POOL_SIZE:
            return FALLBACK_REPLY
        return self.messages[rand_value % len(self.messages)]

    def __len__(self) -> int:
        return len(self.messages)


class RandomSpeakController:
    """A set of chat records, one per file."""

    def __init__(self, paths: Iterable[str | Path]) -> None:
        self.records = [ChatRecord(path) for path in paths]

    def load(self) -> None:
        """Load every record from its file."""
        for record in self.records:
            record.load()