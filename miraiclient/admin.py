"""Contact queries, group management and group file operations."""

from __future__ import annotations

from typing import Any

from miraiclient.contacts import Friend, Group, GroupConfig, GroupMember, Profile
from miraiclient.files import GroupFile
from miraiclient.transport import Transport
from miraiclient.types import GID, QQ

GROUP_FILES_READ_TIMEOUT = 60.0


class GroupAdminMixin:
    """Operations on contacts, groups and group files.

    Classes using this mixin provide a ``transport`` (a Transport) and the
    ``session_key`` of an open session.
    """

    transport: Transport
    session_key: str

    def _session(self, **extra: Any) -> dict[str, Any]:
        return {"sessionKey": self.session_key, **extra}

    def friend_list(self) -> list[Friend]:
        reply = self.transport.get("/friendList", self._session())
        return [Friend.from_json(item) for item in reply["data"]]

    def group_list(self) -> list[Group]:
        reply = self.transport.get("/groupList", self._session())
        return [Group.from_json(item) for item in reply["data"]]

    def group_members(self, gid: GID) -> list[GroupMember]:
        reply = self.transport.get("/memberList", self._session(target=int(gid)))
        return [GroupMember.from_json(item) for item in reply["data"]]

    def group_member_info(self, gid: GID, member: QQ) -> GroupMember:
        reply = self.transport.get(
            "/memberInfo", self._session(target=int(gid), memberId=int(member))
        )
        return GroupMember.from_json(reply)

    def bot_profile(self) -> Profile:
        return Profile.from_json(self.transport.get("/botProfile", self._session()))

    def friend_profile(self, qq: QQ) -> Profile:
        reply = self.transport.get("/friendProfile", self._session(target=int(qq)))
        return Profile.from_json(reply)

    def group_member_profile(self, gid: GID, member: QQ) -> Profile:
        reply = self.transport.get(
            "/memberProfile", self._session(target=int(gid), memberId=int(member))
        )
        return Profile.from_json(reply)

    def user_profile(self, qq: QQ) -> Profile:
        reply = self.transport.get("/userProfile", self._session(target=int(qq)))
        return Profile.from_json(reply)

    def _set_group_member_info(
        self, gid: GID, member: QQ, name: str, special_title: str
    ) -> None:
        self.transport.post_json(
            "/memberInfo",
            self._session(
                target=int(gid),
                memberId=int(member),
                info={"name": name, "specialTitle": special_title},
            ),
        )

    def set_group_member_name(self, gid: GID, member: QQ, name: str) -> None:
        """Change a member's group card, keeping the special title."""
        current = self.group_member_info(gid, member)
        self._set_group_member_info(gid, member, name, current.special_title)

    def set_group_member_special_title(self, gid: GID, member: QQ, title: str) -> None:
        """Change a member's special title, keeping the group card."""
        current = self.group_member_info(gid, member)
        self._set_group_member_info(gid, member, current.member_name, title)

    def group_files(
        self,
        gid: GID,
        with_download_info: bool = False,
        offset: int = 0,
        size: int = 20,
        parent_id: str = "",
    ) -> list[GroupFile]:
        """List one page of a group directory."""
        params = self._session(
            target=int(gid),
            id=parent_id,
            offset=offset,
            size=size,
            withDownloadInfo="true" if with_download_info else "false",
        )
        # Listing files is slow on the server side.
        self.transport.read_timeout = GROUP_FILES_READ_TIMEOUT
        reply = self.transport.get("/file/list", params)
        return [GroupFile.from_json(item) for item in reply["data"]]

    def group_file_by_id(
        self, gid: GID, file_id: str, with_download_info: bool = False
    ) -> GroupFile:
        params = self._session(
            target=int(gid),
            id=file_id,
            withDownloadInfo="true" if with_download_info else "false",
        )
        return GroupFile.from_json(self.transport.get("/file/info", params))

    def group_file_mkdir(self, gid: GID, directory_name: str) -> GroupFile:
        reply = self.transport.post_json(
            "/file/mkdir",
            self._session(group=int(gid), dictionaryName=directory_name),
        )
        return GroupFile.from_json(reply)

    def group_file_rename(self, group_file: GroupFile, new_name: str) -> None:
        self.transport.post_json(
            "/file/rename",
            self._session(
                target=int(group_file.group.gid), id=group_file.id, renameTo=new_name
            ),
        )

    def group_file_move(self, group_file: GroupFile, target_id: str) -> None:
        self.transport.post_json(
            "/file/move",
            self._session(
                target=int(group_file.group.gid), id=group_file.id, moveTo=target_id
            ),
        )

    def group_file_delete(self, group_file: GroupFile) -> None:
        self.transport.post_json(
            "/file/delete",
            self._session(target=int(group_file.group.gid), id=group_file.id),
        )

    def mute_all(self, gid: GID) -> None:
        self.transport.post_json("/muteAll", self._session(target=int(gid)))

    def unmute_all(self, gid: GID) -> None:
        self.transport.post_json("/unmuteAll", self._session(target=int(gid)))

    def mute(self, gid: GID, member: QQ, seconds: int) -> None:
        self.transport.post_json(
            "/mute",
            self._session(target=int(gid), memberId=int(member), time=int(seconds)),
        )

    def unmute(self, gid: GID, member: QQ) -> None:
        self.transport.post_json(
            "/unmute", self._session(target=int(gid), memberId=int(member))
        )

    def kick(self, gid: GID, member: QQ, reason: str = "") -> None:
        self.transport.post_json(
            "/kick",
            self._session(target=int(gid), memberId=int(member), reason_msg=reason),
        )

    def recall(self, message_id: int) -> None:
        self.transport.post_json("/recall", self._session(target=int(message_id)))

    def quit_group(self, gid: GID) -> None:
        self.transport.post_json("/quit", self._session(target=int(gid)))

    def delete_friend(self, qq: QQ) -> None:
        self.transport.post_json("/deleteFriend", self._session(target=int(qq)))

    def group_config(self, gid: GID) -> GroupConfig:
        reply = self.transport.get("/groupConfig", self._session(target=int(gid)))
        return GroupConfig.from_json(reply)

    def set_group_config(self, gid: GID, config: GroupConfig) -> None:
        self.transport.post_json(
            "/groupConfig", self._session(target=int(gid), config=config.to_json())
        )

    def set_group_admin(self, gid: GID, member: QQ, assign: bool) -> None:
        self.transport.post_json(
            "/memberAdmin",
            self._session(target=int(gid), memberId=int(member), assign=bool(assign)),
        )