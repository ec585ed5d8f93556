import logging
import re

import pytest

from chatbotkit.logchamp import ConsoleFormatter, TargetFilter, init

TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")


def _record(name, level, msg="message", args=()):
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_console_format_contains_parts():
    output = ConsoleFormatter().format(_record("chatbotkit.x", logging.WARNING, "disk %s", ("full",)))
    assert "disk full" in output
    assert "WARN" in output
    assert "WARNING" not in output
    assert TIMESTAMP.search(output)


def test_console_format_trace_level():
    output = ConsoleFormatter().format(_record("chatbotkit", 5))
    assert "TRACE" in output


@pytest.mark.parametrize(
    ("name", "level", "expected"),
    [
        ("chatbotkit", logging.DEBUG, True),
        ("chatbotkit.cache", logging.DEBUG, True),
        ("httpx", logging.DEBUG, False),
        ("httpx", logging.INFO, True),
        ("httpx", logging.ERROR, True),
        ("chatbotkitextra", logging.DEBUG, False),
    ],
)
def test_target_filter(name, level, expected):
    assert TargetFilter().filter(_record(name, level)) is expected


def test_init_writes_filtered_file(tmp_path, root_logger):
    path = tmp_path / "bot.log"
    init(str(path))
    logging.getLogger("chatbotkit.test").debug("hello %s", "world")
    logging.getLogger("somelib").debug("hidden")
    logging.getLogger("somelib").info("shown")
    for handler in root_logger.handlers:
        handler.flush()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("[chatbotkit.test DEBUG] hello world")
    assert lines[1].endswith("[somelib INFO] shown")
    assert TIMESTAMP.match(lines[0])


def test_init_twice_fails(tmp_path, root_logger):
    init(str(tmp_path / "a.log"))
    with pytest.raises(RuntimeError):
        init(str(tmp_path / "b.log"))