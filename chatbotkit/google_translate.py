"""Language codes and names understood by the translation commands."""

from __future__ import annotations

from collections.abc import Iterator

from .convert_argument import (
    BadArgument,
    ConversionContext,
    ConversionError,
    MissingArgument,
    ascii_lower,
)

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")

# One language per line: the code, a space, then the English name.
# Order matters: earlier entries win when several prefixes match.
_LANGUAGE_TABLE = """
af Afrikaans
sq Albanian
am Amharic
ar Arabic
hy Armenian
as Assamese
ay Aymara
az Azerbaijani
bm Bambara
eu Basque
be Belarusian
bn Bengali
bho Bhojpuri
bs Bosnian
bg Bulgarian
ca Catalan
ceb Cebuano
zh-cn Chinese (Simplified)
zh Chinese (Simplified)
zh-tw Chinese (Traditional)
co Corsican
hr Croatian
cs Czech
da Danish
dv Dhivehi
doi Dogri
nl Dutch
en English
eo Esperanto
et Estonian
ee Ewe
fil Filipino
fi Finnish
fr French
fy Frisian
gl Galician
ka Georgian
de German
el Greek
gn Guarani
gu Gujarati
ht Haitian Creole
ha Hausa
haw Hawaiian
he Hebrew
iw Hebrew
hi Hindi
hmn Hmong
hu Hungarian
is Icelandic
ig Igbo
ilo Ilocano
id Indonesian
ga Irish
it Italian
ja Japanese
jv Javanese
jw Javanese
kn Kannada
kk Kazakh
km Khmer
rw Kinyarwanda
gom Konkani
ko Korean
kri Krio
ku Kurdish
ckb Kurdish
ky Kyrgyz
lo Lao
la Latin
lv Latvian
ln Lingala
lt Lithuanian
lg Luganda
lb Luxembourgish
mk Macedonian
mai Maithili
mg Malagasy
ms Malay
ml Malayalam
mt Maltese
mi Maori
mr Marathi
mni-mtei Meiteilon
lus Mizo
mn Mongolian
my Myanmar
ne Nepali
no Norwegian
ny Nyanja
or Odia
om Oromo
ps Pashto
fa Persian
pl Polish
pt Portuguese
pa Punjabi
qu Quechua
ro Romanian
ru Russian
sm Samoan
sa Sanskrit
gd Scots Gaelic
nso Sepedi
sr Serbian
st Sesotho
sn Shona
sd Sindhi
si Sinhala
sk Slovak
sl Slovenian
so Somali
es Spanish
su Sundanese
sw Swahili
sv Swedish
tl Tagalog
tg Tajik
ta Tamil
tt Tatar
te Telugu
th Thai
ti Tigrinya
ts Tsonga
tr Turkish
tk Turkmen
ak Twi
uk Ukrainian
ur Urdu
ug Uyghur
uz Uzbek
vi Vietnamese
cy Welsh
xh Xhosa
yi Yiddish
yo Yoruba
zu Zulu
"""

LANGUAGES: tuple[tuple[str, str], ...] = tuple(
    (code, name)
    for code, name in (line.split(" ", 1) for line in _LANGUAGE_TABLE.strip().splitlines())
)

DEFAULT_TARGET_LANGUAGE = "en"


def get_language_name(language_code: str) -> str | None:
    """Name of the language with the given code, case-insensitively."""
    wanted = ascii_lower(language_code)
    return next((name for known, name in LANGUAGES if known == wanted), None)


def _prefixes() -> Iterator[tuple[str, str]]:
    """Yield ``(code, prefix)`` pairs in matching order: code first, then name."""
    for language_code, language in LANGUAGES:
        yield language_code, language_code
        yield language_code, ascii_lower(language)


class Language:
    """A language given by its code or its full name; yields the code."""

    async def convert(self, ctx: ConversionContext, arguments: str) -> tuple[str, str]:
        arguments = arguments.lstrip()
        if not arguments:
            raise MissingArgument()

        lowercase = ascii_lower(arguments)
        for language_code, prefix in _prefixes():
            if not lowercase.startswith(prefix):
                continue
            rest = arguments[len(prefix):]
            if not rest or rest[0] in _ASCII_WHITESPACE:
                return language_code, rest

        raise BadArgument("unknown language code or name.")


class SourceTargetLanguages:
    """An optional source language followed by an optional target language.

    Yields ``(source, target)``. With a single language it is the target; with
    none the target is the user's language, or English if that is unknown.
    """

    async def convert(
        self, ctx: ConversionContext, arguments: str
    ) -> tuple[tuple[str | None, str], str]:
        try:
            first, rest = await Language().convert(ctx, arguments)
        except ConversionError:
            target = ctx.user.language_code or DEFAULT_TARGET_LANGUAGE
            return (None, target), arguments

        try:
            second, rest = await Language().convert(ctx, rest)
        except ConversionError:
            return (None, first), rest

        return (first, second), rest