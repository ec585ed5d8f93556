import pytest

from chatbotkit.text_utils import (
    check_prompt,
    format_duration,
    progress_bar,
    truncate_with_ellipsis,
)


@pytest.mark.parametrize(
    ("current", "maximum", "expected"),
    [
        (0, 10, "[--------------------]"),
        (5, 10, "[==========----------]"),
        (10, 10, "[====================]"),
        (0, 1, "[--------------------]"),
        (1, 1, "[====================]"),
        (0, 0, "[--------------------]"),
        (1, 0, "[====================]"),
    ],
)
def test_progress_bar(current, maximum, expected):
    assert progress_bar(current, maximum) == expected


def test_progress_bar_width_is_constant():
    for current in range(0, 30):
        assert len(progress_bar(current, 29)) == 22


def test_truncate_with_ellipsis_shortens_long_text():
    assert truncate_with_ellipsis("hello", 3) == "he…"


def test_truncate_with_ellipsis_keeps_short_text():
    assert truncate_with_ellipsis("hello", 5) == "hello"
    assert truncate_with_ellipsis("hi", 10) == "hi"


def test_format_duration_seconds():
    assert format_duration(0) == "0s"
    assert format_duration(59) == "59s"


def test_format_duration_minutes():
    assert format_duration(61) == "1m 1s"


def test_format_duration_hours():
    assert format_duration(3661) == "1h 1m"


def test_check_prompt_accepts_normal_prompt():
    assert check_prompt("a cat on a mat") is None


def test_check_prompt_rejects_long_prompt():
    assert check_prompt("a" * 1025) == "this prompt is too long (>1024)."
    assert check_prompt("a" * 1024) is None


def test_check_prompt_rejects_many_lines():
    assert check_prompt("\n".join(["x"] * 9)) == "this prompt has too many lines (>8)."
    assert check_prompt("\n".join(["x"] * 8) + "\n") is None