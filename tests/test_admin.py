import json
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from miraiclient.admin import GroupAdminMixin
from miraiclient.contacts import Friend, Group, GroupConfig, GroupMember, Profile
from miraiclient.files import GroupFile
from miraiclient.transport import MiraiApiHttpError, Transport
from miraiclient.types import GID, QQ, GroupPermission

BASE = "http://localhost:8080"
KEY = "SESSIONKEY"


class _Bot(GroupAdminMixin):
    def __init__(self):
        self.transport = Transport("localhost", 8080)
        self.session_key = KEY


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


def _query(call):
    return {k: v[0] for k, v in parse_qs(urlparse(call.request.url).query).items()}


def _body(call):
    return json.loads(call.request.body)


GROUP = Group(GID(100), "group", GroupPermission.ADMINISTRATOR)
MEMBER = GroupMember(QQ(200), "card", "title", 1, 2, 0, GroupPermission.MEMBER, GROUP)
FILE = GroupFile(False, 12, "a.txt", "/abc", "/a.txt", GROUP)


def test_friend_list(mock):
    friend = Friend(QQ(1), "nick", "remark")
    mock.add(responses.GET, BASE + "/friendList", json={"code": 0, "data": [friend.to_json()]})
    assert _Bot().friend_list() == [friend]
    assert _query(mock.calls[0]) == {"sessionKey": KEY}


def test_group_list(mock):
    mock.add(responses.GET, BASE + "/groupList", json={"code": 0, "data": [GROUP.to_json()]})
    assert _Bot().group_list() == [GROUP]


def test_group_members_sends_target(mock):
    mock.add(responses.GET, BASE + "/memberList", json={"code": 0, "data": [MEMBER.to_json()]})
    assert _Bot().group_members(GID(100)) == [MEMBER]
    assert _query(mock.calls[0])["target"] == "100"


def test_group_member_info(mock):
    mock.add(responses.GET, BASE + "/memberInfo", json=MEMBER.to_json())
    assert _Bot().group_member_info(GID(100), QQ(200)) == MEMBER
    query = _query(mock.calls[0])
    assert (query["target"], query["memberId"]) == ("100", "200")


@pytest.mark.parametrize(
    "path, call",
    [
        ("/botProfile", lambda b: b.bot_profile()),
        ("/friendProfile", lambda b: b.friend_profile(QQ(5))),
        ("/memberProfile", lambda b: b.group_member_profile(GID(100), QQ(5))),
        ("/userProfile", lambda b: b.user_profile(QQ(5))),
    ],
)
def test_profiles(mock, path, call):
    profile = Profile(20, 3, "sign", "MALE", "nick", "someone@example.com")
    mock.add(responses.GET, BASE + path, json=profile.to_json())
    assert call(_Bot()) == profile


def test_set_group_member_name_keeps_title(mock):
    mock.add(responses.GET, BASE + "/memberInfo", json=MEMBER.to_json())
    mock.add(responses.POST, BASE + "/memberInfo", json={"code": 0})
    assert _Bot().set_group_member_name(GID(100), QQ(200), "new card") is None
    body = _body(mock.calls[1])
    assert body["info"] == {"name": "new card", "specialTitle": MEMBER.special_title}
    assert body["sessionKey"] == KEY


def test_set_group_member_special_title_keeps_name(mock):
    mock.add(responses.GET, BASE + "/memberInfo", json=MEMBER.to_json())
    mock.add(responses.POST, BASE + "/memberInfo", json={"code": 0})
    assert _Bot().set_group_member_special_title(GID(100), QQ(200), "new title") is None
    assert _body(mock.calls[1])["info"] == {"name": MEMBER.member_name, "specialTitle": "new title"}


def test_group_files_query_and_timeout(mock):
    mock.add(responses.GET, BASE + "/file/list", json={"code": 0, "data": [FILE.to_json()]})
    bot = _Bot()
    files = bot.group_files(GID(100), True, 3, 7, "/dir")
    assert files == [FILE]
    query = _query(mock.calls[0])
    assert query["withDownloadInfo"] == "true"
    assert (query["offset"], query["size"], query["id"]) == ("3", "7", "/dir")
    assert bot.transport.read_timeout == 60


def test_group_file_by_id(mock):
    mock.add(responses.GET, BASE + "/file/info", json=FILE.to_json())
    assert _Bot().group_file_by_id(GID(100), "/abc") == FILE
    assert _query(mock.calls[0])["withDownloadInfo"] == "false"


def test_group_file_mkdir(mock):
    mock.add(responses.POST, BASE + "/file/mkdir", json=FILE.to_json())
    assert _Bot().group_file_mkdir(GID(100), "docs") == FILE
    body = _body(mock.calls[0])
    assert (body["group"], body["dictionaryName"]) == (100, "docs")


def test_group_file_rename_move_delete(mock):
    for path in ("/file/rename", "/file/move", "/file/delete"):
        mock.add(responses.POST, BASE + path, json={"code": 0})
    bot = _Bot()
    results = [
        bot.group_file_rename(FILE, "b.txt"),
        bot.group_file_move(FILE, "/dir"),
        bot.group_file_delete(FILE),
    ]
    assert results == [None, None, None]
    bodies = [_body(call) for call in mock.calls]
    assert bodies[0]["renameTo"] == "b.txt"
    assert bodies[1]["moveTo"] == "/dir"
    assert all(b["target"] == 100 and b["id"] == "/abc" for b in bodies)


def test_mute_and_unmute(mock):
    mock.add(responses.POST, BASE + "/mute", json={"code": 0})
    mock.add(responses.POST, BASE + "/unmute", json={"code": 0})
    bot = _Bot()
    assert bot.mute(GID(100), QQ(200), 60) is None
    assert bot.unmute(GID(100), QQ(200)) is None
    assert _body(mock.calls[0])["time"] == 60
    assert _body(mock.calls[1]) == {"sessionKey": KEY, "target": 100, "memberId": 200}


def test_mute_all_and_unmute_all(mock):
    mock.add(responses.POST, BASE + "/muteAll", json={"code": 0})
    mock.add(responses.POST, BASE + "/unmuteAll", json={"code": 0})
    bot = _Bot()
    assert bot.mute_all(GID(100)) is None
    assert bot.unmute_all(GID(100)) is None
    assert [_body(c)["target"] for c in mock.calls] == [100, 100]


def test_kick_default_reason_is_empty(mock):
    mock.add(responses.POST, BASE + "/kick", json={"code": 0})
    assert _Bot().kick(GID(100), QQ(200)) is None
    assert _body(mock.calls[0])["reason_msg"] == ""


def test_recall_quit_delete_friend(mock):
    for path in ("/recall", "/quit", "/deleteFriend"):
        mock.add(responses.POST, BASE + path, json={"code": 0})
    bot = _Bot()
    results = [bot.recall(77), bot.quit_group(GID(100)), bot.delete_friend(QQ(200))]
    assert results == [None, None, None]
    assert [_body(c)["target"] for c in mock.calls] == [77, 100, 200]


def test_group_config_round_trip(mock):
    config = GroupConfig("name", True, False, True, False)
    mock.add(responses.GET, BASE + "/groupConfig", json=config.to_json())
    mock.add(responses.POST, BASE + "/groupConfig", json={"code": 0})
    bot = _Bot()
    fetched = bot.group_config(GID(100))
    bot.set_group_config(GID(100), fetched)
    assert fetched == config
    assert _body(mock.calls[1])["config"] == config.to_json()


def test_set_group_admin(mock):
    mock.add(responses.POST, BASE + "/memberAdmin", json={"code": 0})
    assert _Bot().set_group_admin(GID(100), QQ(200), True) is None
    assert _body(mock.calls[0])["assign"] is True


def test_server_error_propagates(mock):
    mock.add(responses.POST, BASE + "/quit", json={"code": 10, "msg": "no permission"})
    with pytest.raises(MiraiApiHttpError) as info:
        _Bot().quit_group(GID(100))
    assert info.value.code == 10