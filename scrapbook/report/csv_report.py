# File: scrapbook/report/csv_report.py
"""scrapbook.report.csv_report: Табличный экспорт совпадений в CSV."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Union

from scrapbook.aggregator import ScrapeReport

HEADER = ("Type", "Value", "Source URL")


def render_csv(report: ScrapeReport, output_path: Union[Path, str]) -> Path:
    """Пишет строки ``Type,Value,Source URL`` (все поля в кавычках) и возвращает путь к файлу."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_ALL)
        writer.writerow(HEADER)
        for row in report.rows():
            writer.writerow((row["type"], row["value"], row["source_url"]))

    return output
