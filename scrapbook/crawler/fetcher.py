# scrapbook/crawler/fetcher.py
"""
Fetcher module: the only place that talks HTTP. One GET per URL, no retry by default.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from scrapbook.config import CrawlConfig
from scrapbook.crawler.models import PageData
from scrapbook.errors import NetworkFailure
from scrapbook.logger import logger

_log = logger.getChild("fetcher")

RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)


def normalize_whitespace(text: str) -> str:
    """Replace non-breaking spaces, they break token boundaries for the patterns."""
    return text.replace("\u00a0", " ")


class Fetcher:
    """Fetches page text through an aiohttp session.

    Owns the session when none is injected; use it as an async context manager.
    """

    def __init__(self, config: CrawlConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> PageData:
        """
        GET the URL and return its text.

        Raises NetworkFailure on transport errors, timeouts and non-2xx answers.
        Retries only when ``retry_times`` was raised above zero.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized")

        attempts = 0
        while True:
            try:
                async with self.session.get(url) as resp:
                    if resp.status in RETRY_STATUS and attempts < self.config.retry_times:
                        raise ClientError(f"retryable status {resp.status}")
                    if not 200 <= resp.status < 300:
                        raise NetworkFailure(url, f"HTTP {resp.status}", status=resp.status)
                    text = await resp.text(errors="replace")
                    return PageData(url, normalize_whitespace(text), str(resp.url))
            except (ClientError, asyncio.TimeoutError) as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    raise NetworkFailure(url, str(exc) or type(exc).__name__) from exc
                backoff = min(2**attempts, 60)
                _log.debug("Retry %d/%d for %s after %d s", attempts, self.config.retry_times, url, backoff)
                await asyncio.sleep(backoff)
