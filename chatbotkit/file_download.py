"""Working out the name of a downloaded file."""

from __future__ import annotations

from urllib.parse import urlsplit

MEBIBYTE = 1024 * 1024


def parse_filename(value: str) -> str | None:
    """Return the ``filename`` directive of a ``Content-Disposition`` header, if any."""
    for directive in value.split(";"):
        pair = directive.strip().split("=")
        if pair[0] == "filename":
            if len(pair) < 2:
                raise ValueError(f"malformed Content-Disposition header: {value!r}")
            return pair[1].strip('"')
    return None


def response_filename(content_disposition: str | None, url: str) -> str:
    """Name for a response body: from its header, else the last segment of its URL."""
    if content_disposition is not None:
        filename = parse_filename(content_disposition)
        if filename is not None:
            return filename
    return urlsplit(str(url)).path.rsplit("/", 1)[-1]