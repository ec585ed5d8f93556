"""Building formatted chat messages out of nested text entities."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field


class EntityType(enum.Enum):
    """Kinds of formatting and detected entities in a message text."""

    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    TEXT_URL = "text_url"
    BOT_COMMAND = "bot_command"
    MENTION = "mention"
    MENTION_NAME = "mention_name"
    URL = "url"
    EMAIL_ADDRESS = "email_address"
    PHONE_NUMBER = "phone_number"
    BANK_CARD_NUMBER = "bank_card_number"


@dataclass(frozen=True)
class TextEntity:
    """A span of a message text, measured in UTF-16 code units."""

    offset: int
    length: int
    type: EntityType
    url: str | None = None


@dataclass
class FormattedText:
    """Plain text together with its formatting entities."""

    text: str = ""
    entities: list[TextEntity] = field(default_factory=list)


def utf16_len(text: str) -> int:
    """Length of ``text`` in UTF-16 code units."""
    return sum(2 if ord(char) > 0xFFFF else 1 for char in text)


@dataclass(frozen=True)
class Entity:
    """A piece of text, or a formatting applied to nested entities."""

    content: str = ""
    kind: EntityType | None = None
    children: tuple[Entity, ...] = ()
    url: str | None = None

    def bold(self) -> Entity:
        return Entity(kind=EntityType.BOLD, children=(self,))

    def italic(self) -> Entity:
        return Entity(kind=EntityType.ITALIC, children=(self,))

    def code(self) -> Entity:
        return Entity(kind=EntityType.CODE, children=(self,))

    def text_url(self, url: str) -> Entity:
        return Entity(kind=EntityType.TEXT_URL, children=(self,), url=url)


def text(value: str) -> Entity:
    """Plain, unformatted text."""
    return Entity(content=value)


def bold(value: str) -> Entity:
    return text(value).bold()


def italic(value: str) -> Entity:
    return text(value).italic()


def code(value: str) -> Entity:
    return text(value).code()


def text_url(value: str, url: str) -> Entity:
    return text(value).text_url(url)


def _format(
    entities: Iterable[Entity], parts: list[str], offset: int
) -> tuple[list[TextEntity], int]:
    result: list[TextEntity] = []
    for entity in entities:
        if entity.kind is None:
            parts.append(entity.content)
            end = offset + utf16_len(entity.content)
            nested: list[TextEntity] = []
        else:
            nested, end = _format(entity.children, parts, offset)
            result.append(TextEntity(offset, end - offset, entity.kind, entity.url))
        result.extend(nested)
        offset = end
    return result, offset


def formatted_text(entities: Iterable[Entity]) -> FormattedText:
    """Flatten entities into text plus a list of entity spans, outer spans first."""
    parts: list[str] = []
    spans, _ = _format(entities, parts, 0)
    return FormattedText("".join(parts), spans)