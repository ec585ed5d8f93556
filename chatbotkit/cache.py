"""In-memory cache of chats, users and chat member statuses."""

from __future__ import annotations

import enum
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

_DEBUG_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _debug_quote(value: str) -> str:
    escaped = []
    for char in value:
        if char in _DEBUG_ESCAPES:
            escaped.append(_DEBUG_ESCAPES[char])
        elif not char.isprintable():
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


class ChatKind(enum.Enum):
    PRIVATE = "private"
    BASIC_GROUP = "basic_group"
    SUPERGROUP = "supergroup"
    SECRET = "secret"


@dataclass(frozen=True)
class CompactChat:
    """The parts of a chat the bot keeps around."""

    kind: ChatKind
    title: str
    permissions: Mapping[str, bool] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.kind is ChatKind.PRIVATE:
            return "PM"
        return _debug_quote(self.title)


@dataclass(frozen=True)
class CompactUser:
    """The parts of a user the bot keeps around."""

    id: int
    first_name: str
    last_name: str = ""
    username: str | None = None
    is_bot: bool = False
    language_code: str = ""

    def __str__(self) -> str:
        if self.username is not None:
            return f"@{self.username}"
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


class Cache:
    """Latest known state of chats, users and member statuses."""

    def __init__(self) -> None:
        self._chats: dict[int, CompactChat] = {}
        self._users: dict[int, CompactUser] = {}
        self._member_status: dict[tuple[int, int], Any] = {}

    def get_chat(self, chat_id: int) -> CompactChat | None:
        return self._chats.get(chat_id)

    def get_user(self, user_id: int) -> CompactUser | None:
        return self._users.get(user_id)

    def get_member_status(self, chat_id: int, member_id: int) -> Hashable | None:
        return self._member_status.get((chat_id, member_id))

    def set_member_status(self, chat_id: int, member_id: int, status: Any) -> None:
        self._member_status[(chat_id, member_id)] = status

    def update_new_chat(self, chat_id: int, chat: CompactChat) -> None:
        self._chats[chat_id] = chat

    def update_chat_title(self, chat_id: int, title: str) -> None:
        chat = self._chats.get(chat_id)
        if chat is not None:
            self._chats[chat_id] = replace(chat, title=title)

    def update_chat_permissions(self, chat_id: int, permissions: Mapping[str, bool]) -> None:
        chat = self._chats.get(chat_id)
        if chat is not None:
            self._chats[chat_id] = replace(chat, permissions=dict(permissions))

    def update_user(self, user: CompactUser) -> None:
        self._users[user.id] = user

    def update_chat_member(self, chat_id: int, user_id: int, status: Any) -> None:
        self._member_status[(chat_id, user_id)] = status