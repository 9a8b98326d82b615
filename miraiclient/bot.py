"""A client for one bot session on a mirai-api-http server."""

from __future__ import annotations

import dataclasses
import json
import re
from typing import Any, Sequence

import requests

from miraiclient.admin import GroupAdminMixin
from miraiclient.chain import MessageChain
from miraiclient.contacts import Friend
from miraiclient.options import SessionOptions
from miraiclient.transport import (
    MiraiApiHttpError,
    NetworkError,
    Transport,
    read_file,
)
from miraiclient.types import GID, QQ, UID, MiraiFile, MiraiImage, MiraiVoice

_PATH_SEPARATORS = re.compile(r"[/\\]")


def _base_name(path: str) -> str:
    return _PATH_SEPARATORS.split(str(path))[-1]


class MiraiBot(GroupAdminMixin):
    """A session on mirai-api-http: sending messages, uploads and commands.

    Call ``connect`` before anything else and ``disconnect`` when done, so
    that the server releases the session.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self._http_session = session
        self._transport: Transport | None = None
        self.options: SessionOptions | None = None
        self.session_key = ""
        self.bot_qq = QQ()

    @property
    def transport(self) -> Transport:  # type: ignore[override]
        if self._transport is None:
            raise RuntimeError("the bot is not connected")
        return self._transport

    def _require_options(self) -> SessionOptions:
        if self.options is None:
            raise RuntimeError("the bot is not connected")
        return self.options

    def _verify(self, verify_key: str) -> str:
        reply = self.transport.post_json("/verify", {"verifyKey": verify_key})
        return reply["session"]

    def _bind(self, qq: QQ) -> None:
        self.transport.post_json(
            "/bind", {"sessionKey": self.session_key, "qq": int(qq)}
        )

    def _release(self, qq: QQ) -> None:
        self.transport.post_json(
            "/release", {"sessionKey": self.session_key, "qq": int(qq)}
        )

    def connect(self, options: SessionOptions) -> None:
        """Open a session: verify the key, then bind the bot account.

        In single mode the bot account is asked of the server instead.
        """
        self.options = dataclasses.replace(options)
        self._transport = Transport(
            options.http_hostname, options.http_port, self._http_session
        )
        self.session_key = ""
        if options.enable_verify:
            self.session_key = self._verify(options.verify_key)
        if not options.single_mode:
            self.bot_qq = options.bot_qq
            self._bind(options.bot_qq)
        else:
            info = self.session_info()
            self.options.bot_qq = info.qq
            self.bot_qq = info.qq

    def reconnect(self) -> None:
        """Verify and bind again with the options of the last ``connect``."""
        options = self._require_options()
        if options.enable_verify:
            self.session_key = self._verify(options.verify_key)
        if not options.single_mode:
            self._bind(options.bot_qq)

    def disconnect(self) -> None:
        """Release the session on the server."""
        self._release(self.bot_qq)

    def mirai_api_http_version(self) -> str:
        """Return the version string of the mirai-api-http plugin."""
        response = self.transport.request("GET", "/about")
        if response.status_code != 200:
            raise MiraiApiHttpError(-1, response.text)
        try:
            body = json.loads(response.content)
        except ValueError as exc:
            raise NetworkError(f"malformed reply: {exc}") from exc
        if int(body["code"]) == 0:
            return body["data"]["version"]
        raise RuntimeError(str(body.get("msg", "")))

    def session_info(self) -> Friend:
        """Return the account bound to the current session."""
        reply = self.transport.get("/sessionInfo", {"sessionKey": self.session_key})
        return Friend.from_json(reply["data"]["qq"])

    def _send(self, path: str, chain: MessageChain, quote: int, **target: Any) -> int:
        data: dict[str, Any] = {"sessionKey": self.session_key, **target}
        data["messageChain"] = chain.to_json()
        if quote:
            data["quote"] = int(quote)
        reply = self.transport.post_json(path, data)
        return int(reply["messageId"])

    def send_friend_message(self, target: QQ, chain: MessageChain, quote: int = 0) -> int:
        """Send to a friend; a non-zero ``quote`` quotes that message id."""
        return self._send("/sendFriendMessage", chain, quote, target=int(target))

    def send_group_message(self, target: GID, chain: MessageChain, quote: int = 0) -> int:
        """Send to a group; a non-zero ``quote`` quotes that message id."""
        return self._send("/sendGroupMessage", chain, quote, target=int(target))

    def send_temp_message(
        self, gid: GID, qq: QQ, chain: MessageChain, quote: int = 0
    ) -> int:
        """Send a temporary message to a group member."""
        return self._send(
            "/sendTempMessage", chain, quote, group=int(gid), qq=int(qq)
        )

    def send_nudge(self, target: QQ, subject: UID) -> None:
        """Nudge ``target`` within a group or a friend chat given by ``subject``."""
        kind = "Group" if isinstance(subject, GID) else "Friend"
        self.transport.post_json(
            "/sendNudge",
            {
                "sessionKey": self.session_key,
                "target": int(target),
                "subject": int(subject),
                "kind": kind,
            },
        )

    def set_essence(self, message_id: int) -> None:
        """Mark a group message as essence."""
        self.transport.post_json(
            "/setEssence", {"sessionKey": self.session_key, "target": int(message_id)}
        )

    def _upload_image(self, path: str, kind: str) -> MiraiImage:
        name = _base_name(path)
        content = read_file(path)
        reply = self.transport.post_multipart(
            "/uploadImage",
            {"sessionKey": self.session_key, "type": kind},
            {"img": (name, content, "image/png")},
        )
        return MiraiImage(
            id=reply["imageId"],
            url=reply.get("url") or "",
            path=reply.get("path") or "",
        )

    def upload_friend_image(self, path: str) -> MiraiImage:
        return self._upload_image(path, "friend")

    def upload_group_image(self, path: str) -> MiraiImage:
        return self._upload_image(path, "group")

    def upload_temp_image(self, path: str) -> MiraiImage:
        return self._upload_image(path, "temp")

    def upload_group_voice(self, path: str) -> MiraiVoice:
        """Upload an amr voice clip for use in group messages."""
        name = _base_name(path)
        content = read_file(path)
        reply = self.transport.post_multipart(
            "/uploadVoice",
            {"sessionKey": self.session_key, "type": "group"},
            {"voice": (name, content, "application/octet-stream")},
        )
        url = reply.get("url")
        return MiraiVoice(
            id=reply["voiceId"],
            url=url if url is not None else "",
            path=reply["path"],
        )

    def upload_file_and_send(self, gid: GID, path: str) -> MiraiFile:
        """Upload a file to the root of a group's file area."""
        name = _base_name(path)
        content = read_file(path)
        reply = self.transport.post_multipart(
            "/uploadFileAndSend",
            {
                "sessionKey": self.session_key,
                "type": "Group",
                "target": str(int(gid)),
                "path": "/" + name,
            },
            {"file": (name, content, "application/octet-stream")},
        )
        return MiraiFile(id=reply["id"], file_name=name, file_size=len(content))

    def register_command(
        self,
        name: str,
        alias: Sequence[str],
        description: str,
        help_message: str = "",
    ) -> None:
        """Register a console command under ``name`` and its aliases."""
        self.transport.post_json(
            "/cmd/register",
            {
                "sessionKey": self.session_key,
                "name": name,
                "alias": list(alias),
                "description": description,
                "usage": help_message,
            },
        )

    def send_command(self, command: Sequence[str]) -> None:
        """Run a command: its name first, then its arguments."""
        chain = [{"type": "Plain", "text": part} for part in command]
        self.transport.post_json(
            "/cmd/execute", {"sessionKey": self.session_key, "command": chain}
        )