# /combiner/ports/http_fetcher.py
from __future__ import annotations

from typing import Protocol


class ContentFetcherPort(Protocol):
    async def fetch(self, url: str) -> str:
        """GET one normalized url; return its body or raise FetchError."""
