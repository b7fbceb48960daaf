# File: scrapbook/utils.py
"""scrapbook.utils: Утилитарные функции для нормализации URL и работы со списками адресов."""

from __future__ import annotations

from typing import Collection, List, Optional, Sequence
from urllib.parse import urldefrag, urljoin, urlparse

from scrapbook.logger import logger

__all__: Sequence[str] = (
    "normalize_url",
    "resolve_url",
    "extract_domain",
    "is_same_domain",
    "remove_duplicates",
)


def normalize_url(url: str) -> str:
    """Нормализует URL: убирает фрагмент и завершающие слеши, приводит к нижнему регистру."""
    without_fragment, _ = urldefrag(url)
    normalized = without_fragment.rstrip("/").lower()
    logger.debug("Normalized URL: %s -> %s", url, normalized)
    return normalized


def resolve_url(href: str, base_url: str) -> Optional[str]:
    """Разрешает href относительно адреса страницы и нормализует результат.

    Для адресов с другой схемой (sms:, skype:, ftp: ...) возвращает None.
    ValueError (например, битый IPv6-хост или http-адрес без хоста)
    пробрасывается вызывающему.
    """
    absolute = urljoin(base_url, href.strip())
    parsed = urlparse(absolute)
    if parsed.scheme not in ("http", "https"):
        return None
    if not parsed.netloc:
        raise ValueError(f"no host in URL: {absolute!r}")
    return normalize_url(absolute)


def extract_domain(url: str) -> str:
    """Возвращает имя хоста из URL (без порта), в нижнем регистре."""
    return (urlparse(url).hostname or "").lower()


def is_same_domain(url: str, domain: str) -> bool:
    """Проверяет, что хост URL совпадает с доменом сайта."""
    try:
        host: Optional[str] = urlparse(url).hostname
    except ValueError:
        return False
    return host is not None and host.lower() == domain.lower()


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка URL, сохраняя порядок."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
