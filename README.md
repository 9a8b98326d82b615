# miraiclient

A Python library for bots that talk to a mirai-api-http server over its HTTP
adapter. It provides:

- session handling: verifying a key, binding a bot account, releasing the session;
- sending friend, group and temporary messages, nudges and essence marks;
- message chains: building chains to send and decoding chains received as JSON;
- contacts: friends, groups, group members, profiles and group settings;
- group files: listing, looking up, creating directories, renaming, moving and deleting;
- group administration: muting, kicking, recalling, quitting, setting admins and member cards;
- uploads: images, voice clips and files;
- console commands: registering and running them;
- a chat record kept in a JSON file that a bot can draw random replies from.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Session options

`miraiclient.options.SessionOptions` is a dataclass holding the connection
settings. Its defaults are `http_hostname` and `websocket_hostname`
`"localhost"`, `http_port` and `websocket_port` `8080`, `enable_verify`
`True`, `single_mode` `False`, `reserved_sync_id` `"-1"`, `cache_size` `4096`,
`thread_pool_size` `6`, an unset `bot_qq` (`QQ(-1)`) and an empty
`verify_key`. Options can be built three ways:

```python
from miraiclient.options import SessionOptions

# from arguments of the form --key=value; other arguments are ignored
options = SessionOptions.from_command_line(
    ["--hostname=localhost", "--port=8080", "--bot-qq=123456", "--verify-key=placeholder"]
)

# from a JSON file
options = SessionOptions.from_json_file("session.json")

# from an already parsed mapping
options = SessionOptions.from_json({"hostname": "localhost", "port": 8080, "botQQ": 123456})
```

`from_command_line()` with no argument reads `sys.argv`. Both camelCase keys
(`httpPort`, `verifyKey`, `singleMode`, ...) and dashed keys (`http-port`,
`verify-key`, `single-mode`, ...) are understood; a dashed key takes a string
and, where both appear, wins over its camelCase form. `hostname` and `port`
set the HTTP and WebSocket values together. A value of the wrong JSON type
raises `TypeError`.

## Using the bot

```python
from miraiclient.bot import MiraiBot
from miraiclient.chain import MessageChain
from miraiclient.types import GID, QQ

bot = MiraiBot()
bot.connect(options)
print(bot.mirai_api_http_version())

for group in bot.group_list():
    print(group.to_json())

bot.mute(GID(123456), QQ(654321), 60)
bot.unmute(GID(123456), QQ(654321))

bot.register_command("hello", ["hi"], "Say hello", "/hello <words>")
bot.send_command(["hello", "arg1", "arg2"])

# always release the session before the program ends
bot.disconnect()
```

`connect` verifies `verify_key` (when `enable_verify` is set) and binds
`bot_qq`; in single mode it asks the server which account the session
belongs to instead. `reconnect` repeats this with the same options.

The send methods (`send_friend_message`, `send_group_message`,
`send_temp_message`) take a `MessageChain`, quote the given message id when
`quote` is non-zero, and return the id of the sent message. `send_nudge`
nudges within a group when the subject is a `GID` and within a friend chat
otherwise.

`MiraiBot` inherits the contact, file and administration calls of
`miraiclient.admin.GroupAdminMixin`: `friend_list`, `group_list`,
`group_members`, `group_member_info`, `bot_profile`, `friend_profile`,
`group_member_profile`, `user_profile`, `set_group_member_name`,
`set_group_member_special_title`, `group_files`, `group_file_by_id`,
`group_file_mkdir`, `group_file_rename`, `group_file_move`,
`group_file_delete`, `mute_all`, `unmute_all`, `mute`, `unmute`, `kick`,
`recall`, `quit_group`, `delete_friend`, `group_config`, `set_group_config`
and `set_group_admin`. `group_files` raises the transport's read timeout to
60 seconds, since listing files is slow.

Uploads (`upload_friend_image`, `upload_group_image`, `upload_temp_image`,
`upload_group_voice`, `upload_file_and_send`) read the file from disk and
return a `MiraiImage`, `MiraiVoice` or `MiraiFile` from `miraiclient.types`.

A `requests.Session` may be passed to `MiraiBot(session)` to control how HTTP
requests are made.

## Errors

`miraiclient.transport` defines the errors raised by every call:

- `NetworkError` (a `ConnectionError`) when the server cannot be reached;
- `MiraiApiHttpError` (a `RuntimeError`, with `code` and `message`) when a
  reply carries a non-zero `code`, or when `/about` answers with a status other
  than 200;
- `ValueError` when a reply body is not JSON.

The lower-level `Transport` class (`get`, `post_json`, `post_multipart`) and
`parse_response` are available for calls the bot does not wrap.

## Identifiers and data types

`miraiclient.types` has `QQ` and `GID`, integer-valued identifiers that are
hashable, ordered, convertible with `int()` and default to `-1`;
`GroupPermission` (`MEMBER`, `ADMINISTRATOR`, `OWNER`) with
`parse_group_permission`; and `MusicShareKind` with `parse_music_share_kind`.
`miraiclient.contacts` and `miraiclient.files` hold the dataclasses `Friend`,
`Group`, `GroupMember`, `Profile`, `GroupConfig`, `FileDownloadInfo` and
`GroupFile`, each with `from_json` and `to_json`; `str()` of any of them is
its compact JSON.

## Message chains

`miraiclient.chain.MessageChain` is an ordered list of message elements with
the `message_id` and `timestamp` of its source. It supports `len()`,
iteration, indexing, equality and `+`, and offers `add` (chainable), `insert`,
`remove` (every equal element), `remove_at`, `clear`, `get_all`, `get_first`
(raises `LookupError` when nothing matches), `plain_text` and
`first_plain_text`.

An element is any object with a `type` name and a `to_json()` method;
elements of type `"Plain"` carry their text in a `text` attribute. To decode
chains, register element classes in a `miraiclient.registry.MessageRegistry`;
each class is created with no arguments and filled by its `load(data)` method.
Unknown element types are skipped, and a leading `"Source"` element supplies
the id and timestamp.

```python
from dataclasses import dataclass

from miraiclient.chain import MessageChain
from miraiclient.registry import MessageRegistry


@dataclass
class Plain:
    text: str = ""
    type: str = "Plain"

    def load(self, data):
        self.text = data["text"]

    def to_json(self):
        return {"type": "Plain", "text": self.text}


registry = MessageRegistry()
registry.register("Plain", Plain)
chain = MessageChain.from_json(
    [{"type": "Source", "id": 1, "time": 2}, {"type": "Plain", "text": "hi"}],
    registry,
)
print(chain.plain_text(), chain.message_id)
```

## Chat records

`miraiclient.chat_record.ChatRecord` keeps a list of past messages in a JSON
file of the form `{"chat_record": [...]}`. `load` appends the stored messages,
`save` overwrites the file, `add` records one more. Once 10,000 messages are
held, `trim` drops the oldest 5,000. `pick(n)` returns the message at
`n % len(record)`, or the fixed reply `"嗯嗯"` while ten or fewer are stored.
`RandomSpeakController` holds one record per path and loads them all.

```python
from miraiclient.chat_record import ChatRecord

record = ChatRecord("chat_record.json")
record.load()
record.add("hello there")
record.trim()
record.save()
print(record.pick(42))
```

## What the package does not do

- It does not receive events. There is no WebSocket listener, no event
  callbacks and no handling of incoming messages or friend and group
  requests; the WebSocket settings in `SessionOptions` are stored but unused,
  as are `thread_pool_size`, `cache_size` and `reserved_sync_id`.
- It ships no message element classes (plain text, images, faces, mentions
  and so on) and registers none by default; the caller supplies them.
- It has no command-line program; it is a library only.