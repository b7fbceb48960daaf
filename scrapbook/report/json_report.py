# scrapbook/report/json_report.py

"""
Генерация JSON-отчёта для проекта Scrapbook.

Формат: ``{"emails": [{"email", "url"}], "phones": [{"phone", "url"}]}``.
"""
import json
from pathlib import Path
from typing import Any, Dict, List

from scrapbook.aggregator import ScrapeReport


def report_payload(report: ScrapeReport) -> Dict[str, List[Dict[str, Any]]]:
    """Приводит отчёт к структуре экспорта JSON."""
    return {
        'emails': [{'email': row['value'], 'url': row['source_url']} for row in report.emails],
        'phones': [{'phone': row['value'], 'url': row['source_url']} for row in report.phones],
    }


def render_json(report: ScrapeReport, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект ScrapeReport с результатами обхода
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from scrapbook.report.json_report import render_json
    report_path = render_json(report, 'reports/results-example.com.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report_payload(report), f, ensure_ascii=False, indent=2)

    return output
