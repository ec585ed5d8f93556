import pytest

from chatbotkit.cache import ChatKind, CompactChat, CompactUser
from chatbotkit.convert_argument import BadArgument, ConversionContext, MissingArgument
from chatbotkit.google_translate import (
    Language,
    SourceTargetLanguages,
    get_language_name,
)


def make_context(language_code="user_language_code"):
    return ConversionContext(
        user=CompactUser(
            id=0,
            first_name="user_first_name",
            last_name="user_last_name",
            username="user_username",
            language_code=language_code,
        ),
        chat=CompactChat(ChatKind.SUPERGROUP, "chat_title"),
    )


def test_get_language_name():
    assert get_language_name("EN") == "English"
    assert get_language_name("zh-TW") == "Chinese (Traditional)"
    assert get_language_name("xx") is None


@pytest.mark.asyncio
async def test_language_converter():
    ctx = make_context()
    with pytest.raises(MissingArgument):
        await Language().convert(ctx, "")
    with pytest.raises(BadArgument):
        await Language().convert(ctx, "foo")

    assert await Language().convert(ctx, "en") == ("en", "")
    assert await Language().convert(ctx, "en foo") == ("en", " foo")
    assert await Language().convert(ctx, "english") == ("en", "")
    assert await Language().convert(ctx, "english FOO") == ("en", " FOO")
    assert await Language().convert(ctx, "ENGLISH foo") == ("en", " foo")
    assert await Language().convert(ctx, "chinese (simplified)") == ("zh-cn", "")

    with pytest.raises(BadArgument):
        await Language().convert(ctx, "chinese")
    with pytest.raises(BadArgument):
        await Language().convert(ctx, "chinese  (simplified)")

    assert await Language().convert(ctx, "chinese (simplified) FOO") == ("zh-cn", " FOO")
    assert await Language().convert(ctx, "CHINESE (SIMPLIFIED) foo") == ("zh-cn", " foo")


@pytest.mark.asyncio
async def test_source_target_languages_converter():
    ctx = make_context()
    converter = SourceTargetLanguages()
    assert await converter.convert(ctx, "") == ((None, "user_language_code"), "")
    assert await converter.convert(ctx, "en") == ((None, "en"), "")
    assert await converter.convert(ctx, "en foo") == ((None, "en"), " foo")
    assert await converter.convert(ctx, "chinese (simplified) english") == (
        ("zh-cn", "en"),
        "",
    )
    assert await converter.convert(ctx, "chinese (simplified) english foo") == (
        ("zh-cn", "en"),
        " foo",
    )


@pytest.mark.asyncio
async def test_source_target_defaults_to_english():
    ctx = make_context(language_code="")
    assert await SourceTargetLanguages().convert(ctx, "hello") == ((None, "en"), "hello")