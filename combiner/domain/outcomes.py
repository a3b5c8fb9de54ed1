# /combiner/domain/outcomes.py
from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass
from typing import Any

from combiner.domain.errors import FetchError

# ==== Fetch outcomes ====


@dataclass(slots=True, frozen=True)
class FetchSuccess:
    index: int  # position in the caller's list
    body: str


@dataclass(slots=True, frozen=True)
class FetchFailure:
    index: int
    url: str
    error: FetchError


FetchOutcome = FetchSuccess | FetchFailure


# ==== Per-call cancellation ====


class OperationContext:
    """
    Cancellation signal shared by every fetch of one combine call.
    cancel() activates once and cancels the tasks still in flight; workers
    that have not issued their request yet see `cancelled` and stand down.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._tasks: list[asyncio.Task] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.append(task)
        return task

    def cancel(self) -> bool:
        """Return True only for the call that actually activated the signal."""
        if self._cancelled:
            return False
        self._cancelled = True
        for task in self._tasks:
            if not task.done():
                task.cancel()
        return True
