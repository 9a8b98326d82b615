import json

import pytest

from miraiclient.contacts import Group
from miraiclient.files import FileDownloadInfo, GroupFile
from miraiclient.types import GID, QQ

CONTACT = {"id": 2002, "name": "test group", "permission": "MEMBER"}
INFO = {
    "url": "http://localhost/download/file.pdf",
    "sha1": "sha1value",
    "md5": "md5value",
    "downloadTimes": 4,
    "uploadTime": 1600000000,
    "lastModifyTime": 1600000100,
    "uploaderId": 1001,
}
ROOT_CHILD = {
    "name": "docs",
    "id": "/dir-id",
    "path": "/docs",
    "size": 0,
    "isFile": False,
    "contact": CONTACT,
    "parent": None,
    "downloadInfo": None,
}
FILE = {
    "name": "file.pdf",
    "id": "/file-id",
    "path": "/docs/file.pdf",
    "size": 2048,
    "isFile": True,
    "contact": CONTACT,
    "parent": ROOT_CHILD,
    "downloadInfo": INFO,
}


def test_download_info_round_trip():
    info = FileDownloadInfo.from_json(INFO)
    assert info.uploader == QQ(1001)
    assert info.download_count == 4
    assert info.to_json() == INFO


def test_download_info_missing_key():
    with pytest.raises(KeyError):
        FileDownloadInfo.from_json({"url": "x"})


def test_group_file_from_json():
    f = GroupFile.from_json(FILE)
    assert f.name == "file.pdf"
    assert f.size == 2048
    assert f.is_directory is False
    assert f.group.gid == GID(2002)
    assert f.download_info is not None
    assert f.download_info.md5 == "md5value"
    assert f.parent.name == "docs"
    assert f.parent.is_directory is True
    assert f.parent.parent is None


def test_group_file_without_parent_or_info():
    f = GroupFile.from_json(ROOT_CHILD)
    assert f.parent is None
    assert f.download_info is None


def test_root_parent_json():
    f = GroupFile(name="a", id="/a", path="/a", group=Group(gid=GID(9)))
    parent = f.to_json()["parent"]
    assert parent["id"] is None
    assert parent["path"] == "/"
    assert parent["Size"] == 0
    assert parent["isDirectory"] is True
    assert parent["contact"]["id"] == 9


def test_to_json_flags_and_null_download_info():
    data = GroupFile.from_json(ROOT_CHILD).to_json()
    assert data["isFile"] is False
    assert data["isDirectory"] is True
    assert data["downloadInfo"] is None


def test_group_file_round_trip():
    f = GroupFile.from_json(FILE)
    again = GroupFile.from_json(f.to_json())
    assert again == f


def test_group_file_str_is_json():
    f = GroupFile.from_json(FILE)
    assert json.loads(str(f)) == f.to_json()