# scrapbook/crawler/models.py
"""
Data models for the Scrapbook crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


@dataclass(slots=True)
class PageData:
    """Holds the requested URL, the decoded page text and the final response URL."""

    url: str
    content: str
    base_url: Optional[str] = None


class MatchType(str, Enum):
    """Kinds of contact identifiers the extractor knows about."""

    EMAIL = "email"
    PHONE = "phone"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class Match:
    """One extracted fact: a value seen on a source page."""

    type: MatchType
    value: str
    source_url: str

    @property
    def key(self) -> str:
        return f"{self.value}|{self.source_url}"


@dataclass(slots=True)
class Progress:
    """Fetch/extract progress; ``total`` is fixed once the queue is seeded."""

    completed: int = 0
    total: int = 0
    finished: bool = False

    @property
    def ratio(self) -> float:
        return self.completed / self.total if self.total else 1.0


@dataclass(slots=True)
class CrawlSummary:
    """Payload of the completion signal."""

    total: int
    completed: int
    failed: int
    matches: Dict[MatchType, int] = field(default_factory=dict)
