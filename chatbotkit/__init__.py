"""Building blocks for chat bots: argument converters, formatted text, rate limiting, caching and logging."""

__version__ = "0.1.0"