# /combiner/config.py
from __future__ import annotations

import os

from pydantic import BaseModel


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    return float(raw) if raw else None


class Settings(BaseModel):
    # Listener
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT") or "8080")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Outbound fetches
    VERIFY_TLS: bool = os.getenv("VERIFY_TLS", "true").lower() == "true"
    FETCH_TIMEOUT_SECONDS: float | None = _optional_float("FETCH_TIMEOUT_SECONDS")  # unset = no timeout

    # Example read-me resources served by /getUrlContents
    DEFAULT_URLS: list[str] = [
        "raw.githubusercontent.com/GoogleContainerTools/distroless/main/java/README.md",
        "raw.githubusercontent.com/golang/go/master/README.md",
    ]


settings = Settings()
