"""HTTP client for the mirai-api-http bot interface, with message chains and chat records."""

__version__ = "2.4.0"
__all__ = [
    "admin",
    "bot",
    "chain",
    "chat_record",
    "contacts",
    "files",
    "options",
    "registry",
    "transport",
    "types",
]