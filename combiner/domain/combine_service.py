# /combiner/domain/combine_service.py
from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from combiner.domain.errors import FetchError
from combiner.domain.locators import normalize_urls
from combiner.domain.outcomes import FetchFailure, FetchOutcome, FetchSuccess, OperationContext
from combiner.ports.http_fetcher import ContentFetcherPort

LOG = logging.getLogger("combine_service")

# Enqueued by the watcher once every fetch task has finished.
_END = object()


class CombineService:
    """
    Fetches every url concurrently and joins the bodies in reverse input order.

    All per-call state (slots, outcome queue, cancellation context) lives in
    fetch_and_combine's frame, so one instance can serve overlapping calls.
    Only the injected fetcher (and its connection pool) is shared.
    """

    def __init__(self, fetcher: ContentFetcherPort) -> None:
        self.fetcher = fetcher

    # --- fan-out ---

    async def _fetch_one(
        self,
        ctx: OperationContext,
        index: int,
        url: str,
        outbox: asyncio.Queue,
    ) -> None:
        if ctx.cancelled:
            return
        try:
            body = await self.fetcher.fetch(url)
        except FetchError as e:
            outbox.put_nowait(FetchFailure(index=index, url=url, error=e))
            return
        except Exception as e:
            LOG.exception("fetch.unexpected_error", extra={"extra": {"url": url}})
            outbox.put_nowait(FetchFailure(index=index, url=url, error=FetchError(url, e)))
            return
        outbox.put_nowait(FetchSuccess(index=index, body=body))

    @staticmethod
    async def _watch(tasks: list[asyncio.Task], outbox: asyncio.Queue) -> None:
        await asyncio.gather(*tasks, return_exceptions=True)
        outbox.put_nowait(_END)

    # --- fan-in ---

    @staticmethod
    def _assemble(slots: list[str | None]) -> str:
        return "".join(reversed(slots))

    async def fetch_and_combine(self, urls: Sequence[str]) -> str:
        """
        Return the bodies of `urls` concatenated from last to first.

        Raises the first FetchError observed; the remaining fetches are
        cancelled and whatever they produce afterwards is dropped.
        """
        if not urls:
            return ""

        targets = normalize_urls(urls)
        ctx = OperationContext()
        # Unbounded, so late writers never wait on a reader that has left.
        outbox: asyncio.Queue[FetchOutcome | object] = asyncio.Queue()
        slots: list[str | None] = [None] * len(targets)

        LOG.info("combine.start", extra={"extra": {"urls": len(targets)}})
        fetches = [ctx.spawn(self._fetch_one(ctx, i, u, outbox)) for i, u in enumerate(targets)]
        ctx.spawn(self._watch(fetches, outbox))

        try:
            while True:
                outcome = await outbox.get()
                if outcome is _END:
                    combined = self._assemble(slots)
                    LOG.info(
                        "combine.done",
                        extra={"extra": {"urls": len(targets), "bytes": len(combined)}},
                    )
                    return combined
                if isinstance(outcome, FetchFailure):
                    ctx.cancel()
                    LOG.warning(
                        "combine.failed",
                        extra={
                            "extra": {
                                "url": outcome.url,
                                "index": outcome.index,
                                "error": str(outcome.error),
                            }
                        },
                    )
                    raise outcome.error
                slots[outcome.index] = outcome.body
        except asyncio.CancelledError:
            ctx.cancel()
            raise
