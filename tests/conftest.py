# File: tests/conftest.py
import asyncio
import random
from typing import Callable, Dict, Iterable, List, Optional

import pytest

from scrapbook.config import CrawlConfig
from scrapbook.crawler.models import CrawlSummary, Match, PageData, Progress
from scrapbook.errors import NetworkFailure


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


ORIGIN = "http://example.com"


class FakeFetcher:
    """
    In-memory stand-in for Fetcher: serves ``pages`` (url -> html), raises
    NetworkFailure for unknown or ``failing`` URLs, tracks in-flight requests.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        failing: Iterable[str] = (),
        latency: Optional[Callable[[str], float]] = None,
    ) -> None:
        self.pages = pages
        self.failing = set(failing)
        self.latency = latency
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.latency(url) if self.latency else 0)
            if url in self.failing or url not in self.pages:
                raise NetworkFailure(url, "unreachable")
            return PageData(url, self.pages[url])
        finally:
            self.in_flight -= 1


class RecordingSink:
    """ResultSink that remembers every event it receives."""

    def __init__(self) -> None:
        self.progress: List[Progress] = []
        self.matches: List[Match] = []
        self.completions: List[CrawlSummary] = []

    def on_progress(self, progress: Progress) -> None:
        self.progress.append(progress)

    def on_match(self, match: Match) -> None:
        self.matches.append(match)

    def on_complete(self, summary: CrawlSummary) -> None:
        self.completions.append(summary)


def anchors(*hrefs: str) -> str:
    links = "".join(f'<a href="{href}">{href}</a>' for href in hrefs)
    return f"<html><body>{links}</body></html>"


@pytest.fixture()
def make_config() -> Callable[..., CrawlConfig]:
    """Factory for configs pointing at the fake origin."""

    def _make(**overrides) -> CrawlConfig:
        values = {"origin_url": ORIGIN, "max_depth": 2, "timeout": 2.0}
        values.update(overrides)
        return CrawlConfig(**values)

    return _make


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def jitter() -> Callable[[str], float]:
    """Random per-request latency up to 10 ms."""
    rng = random.Random(1234)
    return lambda _url: rng.uniform(0, 0.01)
