# File: scrapbook/report/__init__.py
"""scrapbook.report: Экспорт результатов (JSON, CSV, HTML), используемый CLI и тестами."""

from __future__ import annotations

from scrapbook.report.csv_report import render_csv
from scrapbook.report.html_report import render_html
from scrapbook.report.json_report import render_json

__all__ = ["render_json", "render_csv", "render_html"]
