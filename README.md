# chatbotkit

Building blocks for chat bots: parsing commands and their arguments, composing
formatted replies, rate limiting users, caching chat state, and setting up logging.

## Install

```
pip install chatbotkit
```

## Modules

- `chatbotkit.text_utils`: `truncate_with_ellipsis`, `format_duration` (seconds to
  `"5s"`, `"2m 3s"` or `"1h 4m"`), `progress_bar` (a 20-cell `[====------]` bar) and
  `check_prompt`, which returns a reason string when a prompt is longer than 1024
  characters or 8 lines, and `None` otherwise.
- `chatbotkit.rate_limit`: `RateLimiter(limit, duration)`. `update_rate_limit(key, time)`
  records an event and returns `None`, or, when the key already has `limit` events
  within `duration` seconds, the remaining cooldown in seconds without recording it.
- `chatbotkit.message_entities`: build formatted text from `text`, `bold`, `italic`,
  `code` and `text_url` entities, which can be nested with the `Entity` methods of
  the same names. `formatted_text` flattens them into a `FormattedText` holding the
  text and a list of `TextEntity` spans. Offsets and lengths are counted in UTF-16
  code units (see `utf16_len`), outer spans before inner ones.
- `chatbotkit.parsed_command`: `ParsedCommand.parse(formatted)` reads a
  `BOT_COMMAND` entity at offset 0 and returns the lower-cased command name, the bot
  username after `@` if any, and the remaining arguments; `None` if there is no command.
- `chatbotkit.cache`: `Cache` keeps `CompactChat`s, `CompactUser`s and member statuses
  in memory. `str()` of a chat is `PM` for private chats and the quoted title
  otherwise; of a user, `@username` or the full name.
- `chatbotkit.config`: `Config` with the set of chat ids that have
  `markov_chain_learning` enabled, stored as MessagePack. `load_config(path)` returns a
  default `Config` when the file does not exist; `Config.save(path)` writes it. Both
  default to `config.dat`.
- `chatbotkit.convert_argument`: async converters that take a value off the front of
  an argument string. Each has `await converter.convert(ctx, arguments)`, returning
  `(value, rest)` and raising `MissingArgument` or `BadArgument` (both
  `ConversionError`). They are `Word`, `Optional(inner)`, `Pair(first, second)`,
  `StringGreedy`, `Reply`, `StringGreedyOrReply` and `Boolean`. The
  `ConversionContext` carries the user, the chat and, for `Reply`, a `ReplyTarget`
  and an optional coroutine that fetches the replied message's text.
- `chatbotkit.google_translate`: the `LANGUAGES` table, `get_language_name`, and the
  converters `Language` (a code or full name, giving the code) and
  `SourceTargetLanguages` (giving `(source, target)`; the target falls back to the
  user's language code, then to `en`).
- `chatbotkit.api_utils`: `check_server_error` raises `ServerError` for an HTML 5xx
  `httpx.Response`; `cloudflare_storage_url` returns an `httpx.URL` or raises
  `InvalidCloudflareStorageUrl`; `simultaneous_download` fetches URLs concurrently
  with an `httpx.AsyncClient` and returns the bodies in order.
- `chatbotkit.file_download`: `parse_filename` reads the `filename` from a
  `Content-Disposition` value; `response_filename` falls back to the last URL
  path segment.
- `chatbotkit.message_queue`: `MessageQueue` lets code wait for messages by their
  temporary id until `message_sent` reports the sent message or a `MessageSendError`.
- `chatbotkit.image_utils`: `collage(images, image_size, gap)` lays Pillow images out
  on a near-square grid.
- `chatbotkit.logchamp`: `init(filename=".log")` adds a coloured console handler and a
  plain file handler to the root logger. `TargetFilter` passes every record from
  `chatbotkit` loggers and INFO and above from others. Calling `init` twice raises
  `RuntimeError`.

## Example

```python
import asyncio

from chatbotkit.cache import CompactUser
from chatbotkit.convert_argument import Boolean, ConversionContext, Pair, Word
from chatbotkit.message_entities import bold, formatted_text, text
from chatbotkit.rate_limit import RateLimiter
from chatbotkit.text_utils import format_duration, progress_bar

result = formatted_text([text("hello "), bold("world")])
print(result.text, result.entities)

limiter = RateLimiter(1, 60)
limiter.update_rate_limit(42, 1000)
cooldown = limiter.update_rate_limit(42, 1010)
print(f"try again in {format_duration(cooldown)}")  # try again in 50s

print(progress_bar(5, 10))  # [==========----------]

ctx = ConversionContext(user=CompactUser(id=42, first_name="Alice"))
(name, enabled), rest = asyncio.run(Pair(Word(), Boolean()).convert(ctx, "learning on extra"))
print(name, enabled, rest)  # learning True extra
```

## What it does not do

The package holds no bot of its own. It does not connect to a chat service, receive
updates, dispatch commands or send replies; the caller feeds it messages, chat and
user data and decides what to do with the results. `file_download` only works out
file names and does not download files, and the Markov chain setting in `Config` is
stored but no text generation is included.

## Tests

```
pip install -e ".[test]"
pytest
```