# /combiner/domain/locators.py
from __future__ import annotations

from collections.abc import Iterable

HTTP_SCHEME = "http://"
HTTPS_SCHEME = "https://"


def normalize_url(url: str) -> str:
    """Prefix ``http://`` unless the locator already names http or https."""
    if url.startswith((HTTP_SCHEME, HTTPS_SCHEME)):
        return url
    return HTTP_SCHEME + url


def normalize_urls(urls: Iterable[str]) -> list[str]:
    return [normalize_url(u) for u in urls]
