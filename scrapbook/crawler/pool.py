# scrapbook/crawler/pool.py
"""
Bounded worker pool shared by the discovery and fetch/extract phases.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

from scrapbook.logger import logger

T = TypeVar("T")

_log = logger.getChild("pool")


class WorkerPool(Generic[T]):
    """Runs a fixed number of workers that drain one shared queue.

    ``run`` returns only after every worker has seen the queue empty, so no
    work started by the pool outlives the call.
    """

    def __init__(self, concurrency: int, name: str = "pool") -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self.concurrency = concurrency
        self.name = name

    async def run(self, queue: asyncio.Queue[T], handler: Callable[[T], Awaitable[None]]) -> int:
        """Drain ``queue`` through ``handler``; return the number of items handled."""
        counts = [0] * self.concurrency
        async with asyncio.TaskGroup() as tg:
            for idx in range(self.concurrency):
                tg.create_task(self._worker(idx, queue, handler, counts))
        processed = sum(counts)
        _log.debug("%s: %d items handled by %d workers", self.name, processed, self.concurrency)
        return processed

    async def _worker(
        self,
        idx: int,
        queue: asyncio.Queue[T],
        handler: Callable[[T], Awaitable[None]],
        counts: list[int],
    ) -> None:
        while True:
            try:
                item = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            try:
                await handler(item)
            except Exception:
                _log.exception("%s worker %d failed on %r", self.name, idx, item)
            finally:
                counts[idx] += 1
                queue.task_done()
