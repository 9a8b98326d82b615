"""Group files and their download information."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from miraiclient.contacts import Group
from miraiclient.types import QQ, _JsonText


@dataclass
class FileDownloadInfo(_JsonText):
    """Where and how often a group file has been downloaded."""

    download_url: str = ""
    sha1: str = ""
    md5: str = ""
    download_count: int = 0
    upload_time: int = 0
    last_modify_time: int = 0
    uploader: QQ = field(default_factory=QQ)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> FileDownloadInfo:
        return cls(
            download_url=data["url"],
            sha1=data["sha1"],
            md5=data["md5"],
            download_count=data["downloadTimes"],
            upload_time=data["uploadTime"],
            last_modify_time=data["lastModifyTime"],
            uploader=QQ(data["uploaderId"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "url": self.download_url,
            "sha1": self.sha1,
            "md5": self.md5,
            "downloadTimes": self.download_count,
            "uploadTime": self.upload_time,
            "lastModifyTime": self.last_modify_time,
            "uploaderId": int(self.uploader),
        }


@dataclass
class GroupFile(_JsonText):
    """A file or directory in a group's file area.

    ``parent`` is None when the parent is the root directory.
    """

    is_directory: bool = False
    size: int = 0
    name: str = ""
    id: str = ""
    path: str = ""
    group: Group = field(default_factory=Group)
    parent: GroupFile | None = None
    download_info: FileDownloadInfo | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GroupFile:
        parent_data = data.get("parent")
        parent = None
        if parent_data and parent_data.get("id") is not None:
            parent = cls.from_json(parent_data)
        info_data = data.get("downloadInfo")
        download_info = (
            FileDownloadInfo.from_json(info_data) if info_data is not None else None
        )
        return cls(
            is_directory=not data["isFile"],
            size=data["size"],
            name=data["name"],
            id=data["id"],
            path=data["path"],
            group=Group.from_json(data["contact"]),
            parent=parent,
            download_info=download_info,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "id": self.id,
            "path": self.path,
            "size": self.size,
            "contact": self.group.to_json(),
            "isFile": not self.is_directory,
            "isDirectory": self.is_directory,
            "parent": self.parent.to_json() if self.parent is not None else self._root_json(),
            "downloadInfo": self.download_info.to_json() if self.download_info else None,
        }

    def _root_json(self) -> dict[str, Any]:
        return {
            "id": None,
            "parent": None,
            "downloadInfo": None,
            "name": "",
            "path": "/",
            "Size": 0,
            "isFile": False,
            "isDirectory": True,
            "contact": self.group.to_json(),
        }