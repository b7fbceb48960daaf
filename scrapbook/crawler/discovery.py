# scrapbook/crawler/discovery.py
"""
Depth-bounded discovery of same-domain links.

Levels are explored in order through the shared worker pool: every page of
depth ``d`` is finished before depth ``d + 1`` starts. A URL is marked
visited before it is explored, so it is entered at most once and always at
its shortest hop distance from the origin.
"""
from __future__ import annotations

import asyncio
from typing import List, Optional

from scrapbook.crawler.link_extractor import extract_links
from scrapbook.crawler.pool import WorkerPool
from scrapbook.crawler.session import CrawlSession
from scrapbook.errors import NetworkFailure, ParseFailure
from scrapbook.logger import logger
from scrapbook.utils import normalize_url

_log = logger.getChild("discovery")


class LinkDiscoverer:
    """Builds the crawl target list for a session. Never raises on page errors."""

    def __init__(self, session: CrawlSession, fetcher) -> None:
        self.session = session
        self.fetcher = fetcher
        self.pool: WorkerPool[str] = WorkerPool(session.config.discovery_concurrency, name="discovery")

    async def discover(self, origin: Optional[str] = None, max_depth: Optional[int] = None) -> List[str]:
        """Return the discovered same-domain URLs (origin not included unless linked back after it)."""
        session = self.session
        frontier = [normalize_url(origin) if origin else session.origin]
        limit = session.config.max_depth if max_depth is None else max_depth
        depth = 0

        _log.info("Discovery from %s, depth %d", frontier[0], limit)
        while frontier and depth <= limit:
            queue: asyncio.Queue[str] = asyncio.Queue()
            for url in frontier:
                if session.mark_visited(url):
                    queue.put_nowait(url)

            next_level: dict[str, None] = {}

            async def explore(url: str) -> None:
                for link in await self._links_of(url):
                    if link not in session.visited:
                        session.add_discovered(link)
                        next_level.setdefault(link, None)

            await self.pool.run(queue, explore)
            _log.debug("Depth %d done: %d new links", depth, len(next_level))
            frontier = list(next_level)
            depth += 1

        _log.info("Discovery finished: %d URLs, %d pages explored", len(session.discovered), len(session.visited))
        return list(session.discovered)

    async def _links_of(self, url: str) -> List[str]:
        try:
            page = await self.fetcher.fetch(url)
        except NetworkFailure as exc:
            self.session.report_error(exc)
            return []
        try:
            return extract_links(page, self.session.domain, self.session.report_error)
        except ParseFailure as exc:
            self.session.report_error(exc)
            return []
