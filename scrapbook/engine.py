# File: scrapbook/engine.py
"""scrapbook.engine: Orchestration layer для запуска обхода."""

from __future__ import annotations

from typing import Optional

from scrapbook.config import CrawlConfig
from scrapbook.crawler.coordinator import CrawlCoordinator
from scrapbook.crawler.discovery import LinkDiscoverer
from scrapbook.crawler.fetcher import Fetcher
from scrapbook.crawler.session import CrawlSession
from scrapbook.errors import ErrorSink
from scrapbook.logger import logger
from scrapbook.sink import ResultSink

__all__ = ["start_scan", "run_session"]


async def run_session(session: CrawlSession, fetcher) -> CrawlSession:
    """Поиск ссылок, затем загрузка и извлечение через один и тот же fetcher."""
    await LinkDiscoverer(session, fetcher).discover()
    await CrawlCoordinator(session, fetcher).run(session.targets())
    return session


async def start_scan(
    config: CrawlConfig,
    sink: Optional[ResultSink] = None,
    on_error: Optional[ErrorSink] = None,
) -> CrawlSession:
    """Запускает полный обход по конфигурации и возвращает заполненную сессию.

    Ошибки отдельных страниц уходят в ``on_error``; наружу выходят только
    ошибки, не относящиеся к страницам (например, сбой создания сессии).
    """
    logger.info("Starting scrape of %s", config.origin_url)
    session = CrawlSession(config, sink=sink, on_error=on_error)
    async with Fetcher(config) as fetcher:
        return await run_session(session, fetcher)
