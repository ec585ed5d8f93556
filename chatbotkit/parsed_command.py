"""Extraction of a bot command from the start of a message."""

from __future__ import annotations

from dataclasses import dataclass

from .message_entities import EntityType, FormattedText


@dataclass
class ParsedCommand:
    """A command name, the bot it is addressed to, and its arguments."""

    name: str
    bot_username: str | None
    arguments: str

    @staticmethod
    def parse(formatted: FormattedText) -> ParsedCommand | None:
        """Parse a command entity at offset 0, or return ``None`` if there is none."""
        entity = next(
            (
                e
                for e in formatted.entities
                if e.type is EntityType.BOT_COMMAND and e.offset == 0
            ),
            None,
        )
        if entity is None:
            return None

        start = entity.offset + 1
        end = entity.length
        command = formatted.text[start:end]

        name, separator, username = command.partition("@")
        return ParsedCommand(
            name=name.lower(),
            bot_username=username if separator else None,
            arguments=formatted.text[end:].lstrip(),
        )