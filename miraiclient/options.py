"""Connection settings for a mirai-api-http session."""

from __future__ import annotations

import json
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from miraiclient.types import QQ

_ARGUMENT = re.compile(r"--([^=]+)=(\S+)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_C_INTEGER = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"option {key!r} must be a string")
    return value


def _number(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, str) or not isinstance(value, (int, float)):
        raise TypeError(f"option {key!r} must be a number")
    return int(value)


def _flag(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"option {key!r} must be a boolean")
    return value


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _c_integer(text: str) -> int:
    """Parse like C ``strtoll`` with base 0; 0 when nothing parses."""
    match = _C_INTEGER.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def _is_true(text: str) -> bool:
    return text in ("1", "true")


@dataclass
class SessionOptions:
    """Where mirai-api-http listens and how to open a session with it."""

    enable_verify: bool = True
    single_mode: bool = False
    http_port: int = 8080
    websocket_port: int = 8080
    reserved_sync_id: str = "-1"
    cache_size: int = 4096
    thread_pool_size: int = 6
    bot_qq: QQ = field(default_factory=QQ)
    http_hostname: str = "localhost"
    websocket_hostname: str = "localhost"
    verify_key: str = ""

    @classmethod
    def from_command_line(cls, argv: Sequence[str] | None = None) -> SessionOptions:
        """Build options from ``--key=value`` arguments; others are ignored."""
        if argv is None:
            argv = sys.argv
        config: dict[str, str] = {}
        for argument in argv:
            match = _ARGUMENT.fullmatch(argument)
            if match is not None:
                config[match.group(1)] = match.group(2)
        return cls.from_json(config)

    @classmethod
    def from_json_file(cls, path: str) -> SessionOptions:
        """Build options from a JSON file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_json(json.load(handle))

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> SessionOptions:
        """Build options from a mapping; later, more specific keys win."""
        opts = cls()
        if "hostname" in data:
            hostname = _text(data, "hostname")
            opts.websocket_hostname = hostname
            opts.http_hostname = hostname
        if "httpHostname" in data:
            opts.http_hostname = _text(data, "httpHostname")
        if "http-hostname" in data:
            opts.http_hostname = _text(data, "http-hostname")
        if "websocketHostname" in data:
            opts.websocket_hostname = _text(data, "websocketHostname")
        if "websocket-hostname" in data:
            opts.websocket_hostname = _text(data, "websocket-hostname")
        if "port" in data:
            raw = data["port"]
            port = _leading_int(raw) if isinstance(raw, str) else _number(data, "port")
            opts.http_port = port
            opts.websocket_port = port
        if "httpPort" in data:
            opts.http_port = _number(data, "httpPort")
        if "http-port" in data:
            opts.http_port = _leading_int(_text(data, "http-port"))
        if "websocketPort" in data:
            opts.websocket_port = _number(data, "websocketPort")
        if "websocket-port" in data:
            opts.websocket_port = _leading_int(_text(data, "websocket-port"))
        if "botQQ" in data:
            opts.bot_qq = QQ(_number(data, "botQQ"))
        if "bot-qq" in data:
            opts.bot_qq = QQ(_c_integer(_text(data, "bot-qq")))
        if "verifyKey" in data:
            opts.verify_key = _text(data, "verifyKey")
        if "verify-key" in data:
            opts.verify_key = _text(data, "verify-key")
        if "enableVerify" in data:
            opts.enable_verify = _flag(data, "enableVerify")
        if "enable-verify" in data:
            opts.enable_verify = _is_true(_text(data, "enable-verify"))
        if "singleMode" in data:
            opts.single_mode = _flag(data, "singleMode")
        if "single-mode" in data:
            opts.single_mode = _is_true(_text(data, "single-mode"))
        if "reservedSyncId" in data:
            opts.reserved_sync_id = _text(data, "reservedSyncId")
        if "reserved-sync-id" in data:
            opts.reserved_sync_id = _text(data, "reserved-sync-id")
        if "cacheSize" in data:
            opts.cache_size = _number(data, "cacheSize")
        if "cache-size" in data:
            opts.cache_size = _leading_int(_text(data, "cache-size"))
        if "threadPoolSize" in data:
            opts.thread_pool_size = _number(data, "threadPoolSize")
        if "thread-pool-size" in data:
            opts.thread_pool_size = _leading_int(_text(data, "thread-pool-size"))
        return opts