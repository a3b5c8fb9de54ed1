# /combiner/domain/errors.py
from __future__ import annotations


class FetchError(Exception):
    """A single locator could not be retrieved; fatal to the whole combine."""

    def __init__(self, url: str, cause: object) -> None:
        self.url = url
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"failed to fetch {self.url}: {self.cause}"


class RequestBuildError(FetchError):
    def _describe(self) -> str:
        return f"failed to create request for {self.url}: {self.cause}"


class TransportError(FetchError):
    def _describe(self) -> str:
        return f"failed to fetch content from {self.url}: {self.cause}"


class StatusError(FetchError):
    def __init__(self, url: str, status: int) -> None:
        self.status = status
        super().__init__(url, f"status {status}")

    def _describe(self) -> str:
        return f"non-success status code {self.status} from {self.url}"


class BodyReadError(FetchError):
    def _describe(self) -> str:
        return f"failed to read content from {self.url}: {self.cause}"
