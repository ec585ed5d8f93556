"""Converters that pull typed command arguments off the front of a string."""

from __future__ import annotations

import string
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .cache import CompactChat, CompactUser

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_TRUE_WORDS = frozenset({"true", "yes", "on", "enable", "enabled"})
_FALSE_WORDS = frozenset({"false", "no", "off", "disable", "disabled"})


class ConversionError(Exception):
    """A command argument could not be converted."""


class MissingArgument(ConversionError):
    """The argument that was expected is not there."""

    def __init__(self) -> None:
        super().__init__("missing command argument")


class BadArgument(ConversionError):
    """The argument is present but is not acceptable."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"bad command argument: {reason}")
        self.reason = reason


@dataclass(frozen=True)
class ReplyTarget:
    """The message a command message replies to.

    ``quote`` is the quoted part of it, if any. ``text`` is its text or caption,
    meaningful only when ``content_available`` is true; otherwise the replied
    message has to be fetched.
    """

    quote: str | None = None
    text: str | None = None
    content_available: bool = True


@dataclass
class ConversionContext:
    """What a converter may need to know about the command message."""

    user: CompactUser
    chat: CompactChat | None = None
    reply_to: ReplyTarget | None = None
    fetch_replied_text: Callable[[], Awaitable[str | None]] | None = None


class Converter(Protocol):
    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[Any, str]: ...


def ascii_lower(value: str) -> str:
    """Lowercase ASCII letters only, keeping the length of the string."""
    return value.translate(_ASCII_LOWER)


class Word:
    """A single word, ended by ASCII whitespace."""

    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[str, str]:
        stripped = arguments.lstrip()
        end = next(
            (index for index, char in enumerate(stripped) if char in _ASCII_WHITESPACE),
            None,
        )
        if end is None:
            word, rest = stripped, ""
        else:
            word, rest = stripped[:end], stripped[end + 1:]
        if not word:
            raise MissingArgument()
        return word, rest


class Optional:
    """The inner argument, or ``None`` with the input untouched if it fails."""

    def __init__(self, inner: Converter) -> None:
        self.inner = inner

    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[Any, str]:
        try:
            return await self.inner.convert(ctx, arguments)
        except ConversionError:
            return None, arguments


class Pair:
    """Two arguments, one after the other."""

    def __init__(self, first: Converter, second: Converter) -> None:
        self.first = first
        self.second = second

    async def convert(
        self, ctx: ConversionContext, arguments: str
    ) -> tuple[tuple[Any, Any], str]:
        first, rest = await self.first.convert(ctx, arguments)
        second, rest = await self.second.convert(ctx, rest)
        return (first, second), rest


class Reply:
    """The text of the replied message; leaves the arguments untouched."""

    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[str, str]:
        reply = ctx.reply_to
        if reply is None:
            raise MissingArgument()

        if reply.quote is not None:
            return reply.quote, arguments

        if reply.content_available:
            text = reply.text
        else:
            if ctx.fetch_replied_text is None:
                raise ConversionError("replied message could not be fetched")
            try:
                text = await ctx.fetch_replied_text()
            except ConversionError:
                raise
            except Exception as exc:
                raise ConversionError(str(exc)) from exc

        if text is None:
            raise BadArgument("replied message doesn't contain any text.")
        return text, arguments


class StringGreedy:
    """Everything that is left, without leading whitespace."""

    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[str, str]:
        argument = arguments.lstrip()
        if not argument:
            raise MissingArgument()
        return argument, ""


class StringGreedyOrReply:
    """Everything that is left, or else the text of the replied message."""

    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[str, str]:
        argument, rest = await Optional(StringGreedy()).convert(ctx, arguments)
        if argument is not None:
            return argument, rest

        replied, _ = await Reply().convert(ctx, rest)
        argument, _ = await StringGreedy().convert(ctx, replied)
        return argument, ""


class Boolean:
    """A yes/no word such as ``on``, ``off``, ``true`` or ``disabled``."""

    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[bool, str]:
        word, rest = await Word().convert(ctx, arguments)
        word = ascii_lower(word)
        if word in _TRUE_WORDS:
            return True, rest
        if word in _FALSE_WORDS:
            return False, rest
        raise BadArgument("argument cannot be converted to a bool.")