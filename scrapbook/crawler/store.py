# scrapbook/crawler/store.py
"""
Deduplicating store of extracted matches, one per match type.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Optional

from scrapbook.crawler.extractor import clean_candidates
from scrapbook.crawler.models import Match, MatchType

MatchCallback = Callable[[Match], None]


class MatchStore:
    """Maps identity key (``value|source_url``) to the first Match recorded for it.

    ``record`` has no await inside, so concurrent workers on one event loop
    cannot interleave within it: the first writer of a key wins, later ones no-op.
    """

    def __init__(self, match_type: MatchType, on_match: Optional[MatchCallback] = None) -> None:
        self.type = match_type
        self._on_match = on_match
        self._matches: Dict[str, Match] = {}

    def record(self, values: Iterable[str], source_url: str) -> int:
        """Store every new candidate found on ``source_url``; return how many were added."""
        applied = 0
        for value in clean_candidates(values, self.type):
            match = Match(self.type, value, source_url)
            if match.key in self._matches:
                continue
            self._matches[match.key] = match
            applied += 1
            if self._on_match is not None:
                self._on_match(match)
        return applied

    def __contains__(self, key: object) -> bool:
        return key in self._matches

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self._matches.values())

    def matches(self) -> List[Match]:
        return list(self._matches.values())
