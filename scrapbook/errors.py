# File: scrapbook/errors.py
"""scrapbook.errors: Ошибки обхода и канал их доставки.

Все три вида ошибок обрабатываются там, где возникли: страница с ошибкой
считается обработанной, обход продолжается. Куда уходит информация об ошибке,
решает вызывающий код через :data:`ErrorSink`.
"""

from __future__ import annotations

from typing import Callable, Optional

from scrapbook.logger import logger

__all__ = [
    "ScrapbookError",
    "NetworkFailure",
    "ParseFailure",
    "MalformedLink",
    "ErrorSink",
    "log_error",
]


class ScrapbookError(Exception):
    """Базовый класс ошибок Scrapbook."""


class NetworkFailure(ScrapbookError):
    """Запрос не завершился: DNS, таймаут, транспорт или статус вне 2xx."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"{url}: {reason}")


class ParseFailure(ScrapbookError):
    """Содержимое страницы не удалось разобрать как HTML."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class MalformedLink(ScrapbookError):
    """Ссылку из href нельзя привести к абсолютному URL."""

    def __init__(self, href: str, reason: str) -> None:
        self.href = href
        self.reason = reason
        super().__init__(f"{href!r}: {reason}")


ErrorSink = Callable[[ScrapbookError], None]


def log_error(error: ScrapbookError) -> None:
    """Канал ошибок по умолчанию: предупреждение в лог проекта."""
    logger.warning("%s: %s", type(error).__name__, error)
