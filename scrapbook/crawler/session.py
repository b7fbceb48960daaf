# scrapbook/crawler/session.py
"""
State of one crawl: visited/discovered URLs, the crawl queue, match stores,
progress and reported errors. Each session is independent of all others.
"""
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from scrapbook.config import CrawlConfig
from scrapbook.crawler.models import CrawlSummary, Match, MatchType, Progress
from scrapbook.crawler.store import MatchStore
from scrapbook.errors import ErrorSink, ScrapbookError, log_error
from scrapbook.sink import NullSink, ResultSink
from scrapbook.utils import normalize_url, remove_duplicates


class CrawlSession:
    """Owns every piece of state shared by the workers of one crawl."""

    def __init__(
        self,
        config: CrawlConfig,
        sink: Optional[ResultSink] = None,
        on_error: Optional[ErrorSink] = None,
    ) -> None:
        self.config = config
        self.sink: ResultSink = sink if sink is not None else NullSink()
        self._on_error: ErrorSink = on_error if on_error is not None else log_error

        self.origin: str = normalize_url(str(config.origin_url))
        self.domain: str = config.domain

        self.visited: set[str] = set()
        self.discovered: Dict[str, None] = {}
        self.queue: asyncio.Queue[str] = asyncio.Queue()
        self.stores: Dict[MatchType, MatchStore] = {
            match_type: MatchStore(match_type, self._publish_match) for match_type in MatchType
        }
        self.progress = Progress()
        self.errors: List[ScrapbookError] = []

    # -- discovery ---------------------------------------------------------- #

    def mark_visited(self, url: str) -> bool:
        """Insert into VisitedSet; False when it was already there."""
        if url in self.visited:
            return False
        self.visited.add(url)
        return True

    def add_discovered(self, url: str) -> None:
        self.discovered.setdefault(url, None)

    def targets(self) -> List[str]:
        """Origin plus every discovered URL, duplicates removed, order kept."""
        return remove_duplicates([self.origin, *self.discovered])

    # -- fetch/extract ------------------------------------------------------ #

    def seed(self, urls: List[str]) -> int:
        for url in remove_duplicates(urls):
            self.queue.put_nowait(url)
        self.progress = Progress(completed=0, total=self.queue.qsize())
        return self.progress.total

    def advance(self) -> None:
        """Count one finished unit of work and publish the new progress."""
        self.progress.completed += 1
        self.sink.on_progress(Progress(self.progress.completed, self.progress.total))

    def finish(self) -> CrawlSummary:
        self.progress.finished = True
        self.sink.on_progress(Progress(self.progress.completed, self.progress.total, True))
        summary = self.summary()
        self.sink.on_complete(summary)
        return summary

    def summary(self) -> CrawlSummary:
        return CrawlSummary(
            total=self.progress.total,
            completed=self.progress.completed,
            failed=len(self.errors),
            matches={match_type: len(store) for match_type, store in self.stores.items()},
        )

    def matches(self, match_type: MatchType) -> List[Match]:
        return self.stores[match_type].matches()

    # -- errors ------------------------------------------------------------- #

    def report_error(self, error: ScrapbookError) -> None:
        self.errors.append(error)
        self._on_error(error)

    def _publish_match(self, match: Match) -> None:
        self.sink.on_match(match)
