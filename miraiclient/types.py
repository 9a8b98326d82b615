"""Identifier types, permission and music-share enums, and upload results."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any


class _JsonText:
    """Mixin whose string form is the compact JSON of ``to_json()``."""

    def to_json(self) -> Any:  # pragma: no cover - overridden
        raise NotImplementedError

    def __str__(self) -> str:
        return json.dumps(self.to_json(), ensure_ascii=False, separators=(",", ":"))


@total_ordering
class UID:
    """Base of the QQ number and group number types.

    Two identifiers compare equal when their numbers are equal, whatever
    their kind.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = -1) -> None:
        if type(self) is UID:
            raise TypeError("UID is abstract; use QQ or GID")
        self._value = int(value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UID):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UID):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class QQ(UID):
    """A QQ account number; -1 when unset."""

    __slots__ = ()


class GID(UID):
    """A QQ group number; -1 when unset."""

    __slots__ = ()


class GroupPermission(Enum):
    """Permission of a member within a group."""

    MEMBER = "MEMBER"
    ADMINISTRATOR = "ADMINISTRATOR"
    OWNER = "OWNER"

    def __str__(self) -> str:
        return self.value


def parse_group_permission(text: str) -> GroupPermission:
    """Return the permission named by its wire string."""
    try:
        return GroupPermission(text)
    except ValueError:
        raise ValueError(f"unknown group permission: {text!r}") from None


class MusicShareKind(Enum):
    """Music services that a music share can point at."""

    NeteaseCloudMusic = "NeteaseCloudMusic"
    QQMusic = "QQMusic"
    MiguMusic = "MiguMusic"
    KugouMusic = "KugouMusic"
    KuwoMusic = "KuwoMusic"

    def __str__(self) -> str:
        return self.value


def parse_music_share_kind(name: str) -> MusicShareKind:
    """Return the music share kind with the given name."""
    try:
        return MusicShareKind(name)
    except ValueError:
        raise ValueError(f"unknown music share kind: {name!r}") from None


@dataclass
class MiraiImage:
    """An uploaded image, usable in image messages."""

    id: str = ""
    url: str = ""
    path: str = ""


FriendImage = MiraiImage
GroupImage = MiraiImage
TempImage = MiraiImage


@dataclass
class MiraiVoice:
    """An uploaded voice clip, usable in voice messages."""

    id: str = ""
    url: str = ""
    path: str = ""
    length: int = 0


@dataclass
class MiraiFile:
    """A file uploaded and sent to a group."""

    id: str = ""
    file_name: str = ""
    file_size: int = 0
    internal_id: int = 102