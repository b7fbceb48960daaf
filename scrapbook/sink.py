# File: scrapbook/sink.py
"""scrapbook.sink: Получатели результатов обхода (прогресс, новые совпадения, завершение)."""

from __future__ import annotations

from typing import Protocol

import click

from scrapbook.crawler.models import CrawlSummary, Match, MatchType, Progress

__all__ = ["ResultSink", "NullSink", "ConsoleSink"]


class ResultSink(Protocol):
    """Интерфейс, через который ядро сообщает о ходе обхода."""

    def on_progress(self, progress: Progress) -> None: ...

    def on_match(self, match: Match) -> None: ...

    def on_complete(self, summary: CrawlSummary) -> None: ...


class NullSink:
    """Ничего не делает; используется, когда вызывающему не нужны события."""

    def on_progress(self, progress: Progress) -> None:
        pass

    def on_match(self, match: Match) -> None:
        pass

    def on_complete(self, summary: CrawlSummary) -> None:
        pass


class ConsoleSink:
    """Печатает строки результатов и счётчик прогресса в stderr по мере обхода."""

    def __init__(self, domain: str, *, quiet: bool = False) -> None:
        self.domain = domain
        self.quiet = quiet

    def on_progress(self, progress: Progress) -> None:
        if self.quiet:
            return
        if progress.finished:
            click.secho(f"Finished scanning {progress.total} pages.", fg="green", err=True)
        else:
            click.echo(
                f"Scanning {progress.completed} / {progress.total} pages... {progress.ratio:.0%}",
                err=True,
            )

    def on_match(self, match: Match) -> None:
        if self.quiet:
            return
        click.echo(f"{match.type.label:<6} {match.value}  <- {match.source_url}", err=True)

    def on_complete(self, summary: CrawlSummary) -> None:
        emails = summary.matches.get(MatchType.EMAIL, 0)
        phones = summary.matches.get(MatchType.PHONE, 0)
        click.secho(
            f"Results for {self.domain}: {emails} emails, {phones} phones "
            f"from {summary.completed} pages",
            bold=True,
            err=True,
        )
        if summary.failed:
            click.secho(f"{summary.failed} errors during the crawl, see log", fg="yellow", err=True)
