# scrapbook/crawler/extractor.py
"""
Pattern-based extraction of contact identifiers from page text.

Patterns are deliberately coarse. Phone candidates are permissive (8-30
characters of digits and separators) and are narrowed by a digit-count
filter afterwards; emails get no extra filter.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Pattern

from scrapbook.crawler.models import MatchType

PATTERNS: Dict[MatchType, Pattern[str]] = {
    # ASCII word boundaries: "почтаinfo@x.ru" still yields info@x.ru
    MatchType.EMAIL: re.compile(r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-z]{2,}\b", re.ASCII),
    # TODO: split into per-region formats once the digit-count thresholds are revisited
    MatchType.PHONE: re.compile(r"(?:\+|00)?[0-9\s\-().]{8,30}"),
}

PHONE_MIN_DIGITS = 8
PHONE_MAX_DIGITS = 15

_NON_DIGIT = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class PatternMatches:
    """Lazy, restartable sequence of raw matches of one pattern in a text."""

    text: str
    pattern: Pattern[str]

    def __iter__(self) -> Iterator[str]:
        return (m.group(0) for m in self.pattern.finditer(self.text))


def extract(text: str, match_type: MatchType) -> PatternMatches:
    return PatternMatches(text, PATTERNS[match_type])


def is_plausible_phone(value: str) -> bool:
    """True when the candidate carries 8 to 15 digits, separators ignored."""
    digits = _NON_DIGIT.sub("", value)
    return PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS


def clean_candidates(values: Iterable[str], match_type: MatchType) -> Iterator[str]:
    """Trim candidates and drop the ones failing the type's validity filter."""
    for raw in values:
        value = raw.strip()
        if not value:
            continue
        if match_type is MatchType.PHONE and not is_plausible_phone(value):
            continue
        yield value
