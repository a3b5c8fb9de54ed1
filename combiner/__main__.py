# /combiner/__main__.py
from __future__ import annotations

import logging

import uvicorn

from combiner.adapters.api.fastapi_app import app
from combiner.config import settings

LOG = logging.getLogger("combiner")


def main() -> None:
    LOG.info(
        f"Server started at http://localhost:{settings.PORT}",
        extra={"extra": {"host": settings.HOST, "port": settings.PORT}},
    )
    # log_config=None keeps our JSON handler on the root logger
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
