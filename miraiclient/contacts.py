"""Friends, groups, group members, profiles and group settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from miraiclient.types import (
    GID,
    QQ,
    GroupPermission,
    _JsonText,
    parse_group_permission,
)


@dataclass
class Friend(_JsonText):
    """A QQ friend."""

    qq: QQ = field(default_factory=QQ)
    nickname: str = ""
    remark: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Friend:
        return cls(
            qq=QQ(data["id"]),
            nickname=data["nickname"],
            remark=data["remark"],
        )

    def to_json(self) -> dict[str, Any]:
        return {"id": int(self.qq), "nickname": self.nickname, "remark": self.remark}


@dataclass
class Group(_JsonText):
    """A QQ group and the bot's permission in it."""

    gid: GID = field(default_factory=GID)
    name: str = ""
    permission: GroupPermission = GroupPermission.MEMBER

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Group:
        return cls(
            gid=GID(data["id"]),
            name=data["name"],
            permission=parse_group_permission(data["permission"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": int(self.gid),
            "name": self.name,
            "permission": self.permission.value,
        }


@dataclass
class GroupMember(_JsonText):
    """A member of a QQ group."""

    qq: QQ = field(default_factory=QQ)
    member_name: str = ""
    special_title: str = ""
    join_timestamp: int = 0
    last_speak_timestamp: int = 0
    mute_time_remaining: int = 0
    permission: GroupPermission = GroupPermission.MEMBER
    group: Group = field(default_factory=Group)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GroupMember:
        return cls(
            qq=QQ(data["id"]),
            member_name=data["memberName"],
            special_title=data["specialTitle"],
            join_timestamp=data["joinTimestamp"],
            last_speak_timestamp=data["lastSpeakTimestamp"],
            mute_time_remaining=data["muteTimeRemaining"],
            permission=parse_group_permission(data["permission"]),
            group=Group.from_json(data["group"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": int(self.qq),
            "memberName": self.member_name,
            "permission": self.permission.value,
            "specialTitle": self.special_title,
            "joinTimestamp": self.join_timestamp,
            "lastSpeakTimestamp": self.last_speak_timestamp,
            "muteTimeRemaining": self.mute_time_remaining,
            "group": self.group.to_json(),
        }


@dataclass
class Profile(_JsonText):
    """A user's public profile."""

    age: int = 0
    level: int = 0
    sign: str = ""
    sex: str = ""
    nickname: str = ""
    email: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Profile:
        return cls(
            nickname=data["nickname"],
            email=data["email"],
            sex=data["sex"],
            sign=data["sign"],
            age=data["age"],
            level=data["level"],
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "nickname": self.nickname,
            "email": self.email,
            "sex": self.sex,
            "sign": self.sign,
            "age": self.age,
            "level": self.level,
        }


@dataclass
class GroupConfig(_JsonText):
    """Settings of a group."""

    name: str = ""
    confess_talk: bool = False
    allow_member_invite: bool = False
    auto_approve: bool = False
    anonymous_chat: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GroupConfig:
        return cls(
            name=data["name"],
            confess_talk=bool(data["confessTalk"]),
            allow_member_invite=bool(data["allowMemberInvite"]),
            auto_approve=bool(data["autoApprove"]),
            anonymous_chat=bool(data["anonymousChat"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "confessTalk": self.confess_talk,
            "allowMemberInvite": self.allow_member_invite,
            "autoApprove": self.auto_approve,
            "anonymousChat": self.anonymous_chat,
        }