"""Helpers for talking to external HTTP services."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from urllib.parse import urlsplit

import httpx

CLOUDFLARE_STORAGE = "r2.cloudflarestorage.com"

# Schemes whose URLs are meaningless without a host.
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


class ServerError(Exception):
    """An external service answered with a server error page."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"server error ({status_code})")
        self.status_code = status_code


class InvalidCloudflareStorageUrl(ValueError):
    """A URL is not a valid Cloudflare storage URL.

    ``reason`` is ``PARSE_ERROR`` when the URL cannot be parsed and
    ``INVALID_DOMAIN`` when it points somewhere else.
    """

    PARSE_ERROR = "parse_error"
    INVALID_DOMAIN = "invalid_domain"

    def __init__(self, reason: str, url: str) -> None:
        super().__init__(f"{reason}: {url!r}")
        self.reason = reason
        self.url = url


def check_server_error(response: httpx.Response) -> httpx.Response:
    """Return ``response`` unless it is an HTML 5xx page, which raises ``ServerError``."""
    content_type = response.headers.get("content-type", "")
    if response.is_server_error and content_type.startswith("text/html"):
        raise ServerError(response.status_code)
    return response


def cloudflare_storage_url(url: str) -> httpx.URL:
    """Parse ``url`` and make sure it points to Cloudflare storage."""
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidCloudflareStorageUrl(InvalidCloudflareStorageUrl.PARSE_ERROR, url) from exc

    if not parts.scheme or (parts.scheme in _HOST_REQUIRED_SCHEMES and not parts.hostname):
        raise InvalidCloudflareStorageUrl(InvalidCloudflareStorageUrl.PARSE_ERROR, url)

    host = parts.hostname
    if not host or not host.endswith(CLOUDFLARE_STORAGE):
        raise InvalidCloudflareStorageUrl(InvalidCloudflareStorageUrl.INVALID_DOMAIN, url)

    try:
        return httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidCloudflareStorageUrl(InvalidCloudflareStorageUrl.PARSE_ERROR, url) from exc


async def simultaneous_download(
    http_client: httpx.AsyncClient, urls: Iterable[str | httpx.URL]
) -> list[bytes]:
    """Download all ``urls`` concurrently and return their bodies in order."""

    async def fetch(url: str | httpx.URL) -> bytes:
        response = await http_client.get(url)
        return response.content

    return list(await asyncio.gather(*(fetch(url) for url in urls)))