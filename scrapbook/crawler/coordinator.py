# scrapbook/crawler/coordinator.py
"""
Fetch/extract phase: a fixed pool of workers drains the session queue.
"""
from __future__ import annotations

import time
from typing import Sequence

from scrapbook.crawler.extractor import extract
from scrapbook.crawler.models import CrawlSummary, MatchType
from scrapbook.crawler.pool import WorkerPool
from scrapbook.crawler.session import CrawlSession
from scrapbook.errors import NetworkFailure
from scrapbook.logger import logger

_log = logger.getChild("coordinator")


class CrawlCoordinator:
    """Fetches every target once, records its matches and reports progress."""

    def __init__(self, session: CrawlSession, fetcher) -> None:
        self.session = session
        self.fetcher = fetcher
        self.pool: WorkerPool[str] = WorkerPool(session.config.concurrency, name="scan")

    async def run(self, urls: Sequence[str]) -> CrawlSummary:
        """Resolves once all workers found the queue empty; fires the completion signal."""
        total = self.session.seed(list(urls))
        _log.info("Scanning %d pages with %d workers", total, self.pool.concurrency)
        start = time.monotonic()
        await self.pool.run(self.session.queue, self._scan)
        duration = time.monotonic() - start
        _log.info("Finished: %d pages in %.2f s", self.session.progress.completed, duration)
        return self.session.finish()

    async def _scan(self, url: str) -> None:
        try:
            page = await self.fetcher.fetch(url)
        except NetworkFailure as exc:
            self.session.report_error(exc)
        else:
            for match_type in MatchType:
                added = self.session.stores[match_type].record(extract(page.content, match_type), url)
                if added:
                    _log.debug("%s: %d new %s matches", url, added, match_type.value)
        finally:
            self.session.advance()
