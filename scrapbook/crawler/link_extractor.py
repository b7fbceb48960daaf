# scrapbook/crawler/link_extractor.py
"""
Link extraction for the discovery phase.
"""
from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from scrapbook.crawler.models import PageData
from scrapbook.errors import ErrorSink, MalformedLink, ParseFailure
from scrapbook.utils import is_same_domain, resolve_url

_SKIPPED_SCHEMES = ("mailto:", "javascript:", "tel:", "data:")


def extract_links(page: PageData, domain: str, on_error: Optional[ErrorSink] = None) -> List[str]:
    """
    Extract normalized same-domain links from PageData content.

    Raises ParseFailure when the markup cannot be parsed. An anchor whose
    href cannot be resolved is reported as MalformedLink and skipped;
    non-http(s) targets are dropped like foreign links.
    Order of first appearance is kept, duplicates are dropped.
    """
    try:
        soup = BeautifulSoup(page.content, "html.parser")
        anchors = soup.find_all("a", href=True)
    except Exception as exc:  # html.parser raises assorted errors on broken markup
        raise ParseFailure(page.url, str(exc)) from exc

    base = page.base_url or page.url
    seen: set[str] = set()
    links: List[str] = []
    for tag in anchors:
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.lower().startswith(_SKIPPED_SCHEMES):
            continue
        try:
            absolute = resolve_url(raw, base)
        except ValueError as exc:
            if on_error is not None:
                on_error(MalformedLink(raw, str(exc)))
            continue
        # sms:, skype:, ftp: and the like are foreign, not malformed
        if absolute is None:
            continue
        if is_same_domain(absolute, domain) and absolute not in seen:
            seen.add(absolute)
            links.append(absolute)
    return links
