# File: scrapbook/aggregator.py
"""scrapbook.aggregator: Сборка итогового отчёта из хранилищ совпадений."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, TypedDict

from scrapbook.crawler.models import Match, MatchType
from scrapbook.crawler.session import CrawlSession


class MatchInfo(TypedDict):
    """Одна строка результата: тип, значение и страница-источник."""

    type: str
    value: str
    source_url: str


@dataclass(slots=True)
class ScrapeReport:
    """Результаты обхода сайта: email-адреса и телефоны с источниками."""

    domain: str
    emails: List[MatchInfo] = field(default_factory=list)
    phones: List[MatchInfo] = field(default_factory=list)
    pages_scanned: int = 0
    errors: int = 0
    generated_at: str = field(default_factory=lambda: datetime.now().isoformat(timespec="seconds"))

    def rows(self) -> List[MatchInfo]:
        """Все совпадения подряд: сначала email, затем телефоны."""
        return [*self.emails, *self.phones]


def _to_info(matches: Iterable[Match]) -> List[MatchInfo]:
    return [
        {"type": m.type.label, "value": m.value, "source_url": m.source_url} for m in matches
    ]


def build_report(session: CrawlSession) -> ScrapeReport:
    """Собирает ScrapeReport из хранилищ сессии (в порядке записи)."""
    return ScrapeReport(
        domain=session.domain,
        emails=_to_info(session.matches(MatchType.EMAIL)),
        phones=_to_info(session.matches(MatchType.PHONE)),
        pages_scanned=session.progress.completed,
        errors=len(session.errors),
    )
