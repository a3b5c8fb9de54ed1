# /combiner/adapters/http/aiohttp_fetcher.py
from __future__ import annotations

import asyncio
import logging

import aiohttp
from yarl import URL

from combiner.config import settings
from combiner.domain.errors import BodyReadError, RequestBuildError, StatusError, TransportError

LOG = logging.getLogger("adapter.http_fetcher")

_TRANSPORT_ERRORS = (aiohttp.ClientError, TimeoutError, OSError)


class AiohttpFetcher:
    """
    Loop-aware aiohttp fetcher.
    FastAPI's TestClient and asyncio.run callers may each bring a new event loop.
    We detect loop changes and rebuild the connector/session so we never hold
    a session tied to a closed loop.
    """

    def __init__(self, *, verify_tls: bool | None = None, timeout_seconds: float | None = None) -> None:
        self._verify_tls = settings.VERIFY_TLS if verify_tls is None else verify_tls
        total = settings.FETCH_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
        self._timeout = aiohttp.ClientTimeout(total=total)
        self._connector: aiohttp.TCPConnector | None = None
        self._session: aiohttp.ClientSession | None = None
        self._loop: asyncio.AbstractEventLoop | None = None  # track owning loop

    async def _ensure_session(self) -> aiohttp.ClientSession:
        loop = asyncio.get_running_loop()
        loop_changed = self._loop is not None and self._loop is not loop

        if loop_changed:
            # old session belonged to a different (likely closed) loop -> close & reset
            try:
                if self._session and not self._session.closed:
                    await self._session.close()
            finally:
                self._session = None
                self._connector = None
                self._loop = None

        if self._session is None or self._session.closed:
            # limit=0: no cap on simultaneous requests
            self._connector = aiohttp.TCPConnector(limit=0)
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                timeout=self._timeout,
                raise_for_status=False,
            )
            self._loop = loop

        return self._session

    @staticmethod
    def _build_target(url: str) -> URL:
        try:
            target = URL(url)
        except (TypeError, ValueError) as e:
            raise RequestBuildError(url, e) from e
        if not target.is_absolute() or not target.host:
            raise RequestBuildError(url, "missing host")
        return target

    async def fetch(self, url: str) -> str:
        """
        GET `url` and return its body text. Raises RequestBuildError,
        TransportError, StatusError or BodyReadError; cancellation propagates.
        """
        target = self._build_target(url)
        sess = await self._ensure_session()

        LOG.info("fetching", extra={"extra": {"url": url, "verify_tls": self._verify_tls}})
        try:
            async with sess.get(target, ssl=self._verify_tls) as resp:
                if not 200 <= resp.status <= 299:
                    raise StatusError(url, resp.status)
                try:
                    body = await resp.read()
                except _TRANSPORT_ERRORS as e:
                    raise BodyReadError(url, e) from e
        except aiohttp.InvalidURL as e:
            raise RequestBuildError(url, e) from e
        except _TRANSPORT_ERRORS as e:
            LOG.warning("fetch.failed", extra={"extra": {"url": url, "error": type(e).__name__}})
            raise TransportError(url, e) from e

        return body.decode("utf-8", errors="replace")

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        self._connector = None
        self._loop = None
