"""Small helpers for formatting text shown to chat users."""

from __future__ import annotations

_ELLIPSIS = "…"
_BAR_WIDTH = 20
_MAX_PROMPT_CHARS = 1024
_MAX_PROMPT_LINES = 8


def truncate_with_ellipsis(text: str, max_len: int) -> str:
    """Shorten ``text`` to ``max_len`` characters, ending it with an ellipsis."""
    if len(text) > max_len:
        return text[: max_len - 1] + _ELLIPSIS
    return text


def format_duration(duration: int) -> str:
    """Format a number of seconds as a short human-readable duration."""
    hours = (duration // 3600) % 60
    minutes = (duration // 60) % 60
    seconds = duration % 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"


def progress_bar(current: int, maximum: int) -> str:
    """Render a fixed-width text progress bar."""
    if current == 0:
        return "[" + "-" * _BAR_WIDTH + "]"
    if current >= maximum:
        return "[" + "=" * _BAR_WIDTH + "]"

    step = maximum / _BAR_WIDTH
    filled = int(current / step)
    return "[" + "=" * filled + "-" * (_BAR_WIDTH - filled) + "]"


def _line_count(text: str) -> int:
    if not text:
        return 0
    count = text.count("\n") + 1
    if text.endswith("\n"):
        count -= 1
    return count


def check_prompt(prompt: str) -> str | None:
    """Return a reason why ``prompt`` is rejected, or ``None`` if it is acceptable."""
    if len(prompt) > _MAX_PROMPT_CHARS:
        return "this prompt is too long (>1024)."
    if _line_count(prompt) > _MAX_PROMPT_LINES:
        return "this prompt has too many lines (>8)."
    return None