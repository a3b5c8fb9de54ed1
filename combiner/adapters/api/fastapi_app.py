# /combiner/adapters/api/fastapi_app.py
from __future__ import annotations
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from combiner.config import settings
from combiner.adapters.http.aiohttp_fetcher import AiohttpFetcher
from combiner.adapters.system.logging_cfg import configure_logger
from combiner.domain.combine_service import CombineService
from combiner.domain.errors import FetchError

LOG = logging.getLogger("adapter.api")
configure_logger()

# Session is created lazily on first fetch, inside the serving loop.
_fetcher = AiohttpFetcher()
_service = CombineService(_fetcher)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    await _fetcher.close()


app = FastAPI(title="url-combiner", lifespan=lifespan)


def get_service() -> CombineService:
    return _service


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/getUrlContents", response_class=PlainTextResponse)
async def get_url_contents(service: CombineService = Depends(get_service)) -> PlainTextResponse:
    try:
        content = await service.fetch_and_combine(settings.DEFAULT_URLS)
    except FetchError as e:
        LOG.error("combine.error", extra={"extra": {"url": e.url, "error": str(e)}})
        return PlainTextResponse(str(e), status_code=500)
    return PlainTextResponse(content, status_code=200)
