"""Logging setup: coloured output on the console and a plain log file."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

from termcolor import colored

APP_TARGET = "chatbotkit"
LOG_FILENAME = ".log"

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_COLORS = {
    "ERROR": "light_red",
    "WARN": "light_yellow",
    "INFO": "light_cyan",
    "DEBUG": "magenta",
    "TRACE": "green",
}


def _level_name(levelno: int) -> str:
    if levelno >= logging.ERROR:
        return "ERROR"
    if levelno >= logging.WARNING:
        return "WARN"
    if levelno >= logging.INFO:
        return "INFO"
    if levelno >= logging.DEBUG:
        return "DEBUG"
    return "TRACE"


def _timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, timezone.utc).strftime(_TIMESTAMP_FORMAT)


class ConsoleFormatter(logging.Formatter):
    """Timestamp, coloured level and message."""

    def format(self, record: logging.LogRecord) -> str:
        level = _level_name(record.levelno)
        return " ".join(
            (
                colored(_timestamp(record), "dark_grey"),
                colored(level, _LEVEL_COLORS[level]),
                record.getMessage(),
            )
        )


class _FileFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        level = _level_name(record.levelno)
        return f"{_timestamp(record)} [{record.name} {level}] {record.getMessage()}"


class TargetFilter(logging.Filter):
    """Pass everything from the application's loggers, and INFO and above from others."""

    def __init__(self, app: str = APP_TARGET) -> None:
        super().__init__()
        self.app = app

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.split(".", 1)[0] == self.app:
            return True
        return record.levelno >= logging.INFO


class _LogchampHandler(logging.Handler):
    """Marker base so that a second initialisation can be detected."""


class _ConsoleHandler(logging.StreamHandler, _LogchampHandler):
    pass


class _FileHandler(logging.FileHandler, _LogchampHandler):
    pass


def init(filename: str = LOG_FILENAME) -> None:
    """Install the console and file handlers on the root logger."""
    root = logging.getLogger()
    if any(isinstance(handler, _LogchampHandler) for handler in root.handlers):
        raise RuntimeError("logging has already been initialised")

    console = _ConsoleHandler(sys.stdout)
    console.setFormatter(ConsoleFormatter())
    file_handler = _FileHandler(filename, mode="w", encoding="utf-8")
    file_handler.setFormatter(_FileFormatter())

    for handler in (console, file_handler):
        handler.addFilter(TargetFilter())
        root.addHandler(handler)
    root.setLevel(logging.DEBUG)