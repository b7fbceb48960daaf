# === FILE: scrapbook/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска Scrapbook через командную строку.

Команды:
  scrape    Обойти сайт, собрать email и телефоны, вывести/сохранить отчёты
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязателен)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только консоль, если не указан)
  --log-format FORMAT Формат логирования

Команда scrape опции:
  --depth INT         Глубина обхода ссылок (1..10, по умолчанию 2)
  --concurrency INT   Число параллельных загрузок (по умолчанию 5)
  --timeout SEC       Таймаут одного запроса
  --json PATH         Сохранить JSON-отчёт в файл
  --csv PATH          Сохранить CSV-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --scan-timeout SEC  Таймаут всего обхода (секунд)
  --quiet             Не печатать строки и прогресс по ходу обхода

Пример:
  scrapbook scrape https://example.com --depth 2 --csv results.csv
"""
import asyncio
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from scrapbook import __version__
from scrapbook.aggregator import build_report
from scrapbook.config import load_config, with_overrides
from scrapbook.engine import start_scan
from scrapbook.logger import DEFAULT_FORMAT, init_logging
from scrapbook.report.csv_report import render_csv
from scrapbook.report.html_report import render_html
from scrapbook.report.json_report import render_json, report_payload
from scrapbook.sink import ConsoleSink

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='Scrapbook, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд Scrapbook CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    cfg = None
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except Exception as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


def _effective_config(ctx, url, **overrides):
    base = ctx.obj.get('config')
    if base is None and url is None:
        # ни URL, ни --config: пробуем configs/default.yaml в текущей папке
        try:
            base = load_config(None)
        except FileNotFoundError:
            print_error('Не задан URL: передайте его аргументом или в конфиге (origin_url)')
        except Exception as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    try:
        return with_overrides(base, origin_url=url, **overrides)
    except ValidationError as e:
        print_error(f'Неверные параметры: {e}')


@cli.command('scrape', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option('--depth', '-d', 'depth', default=None, help='Глубина обхода ссылок (1..10)')
@click.option('--concurrency', 'concurrency', type=int, default=None, help='Число параллельных загрузок')
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--csv', 'csv_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить CSV-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (по умолчанию встроенный)'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option('--scan-timeout', 'scan_timeout', type=float, default=None, help='Таймаут всего обхода (секунд)')
@click.option('--quiet', '-q', is_flag=True, help='Не печатать находки и прогресс по ходу обхода')
@click.pass_context
def scrape(ctx, url, depth, concurrency, timeout, json_output, csv_output, html_output,
           template_dir, pretty, scan_timeout, quiet):
    """Обойти сайт и собрать контакты."""
    cfg = _effective_config(ctx, url, max_depth=depth, concurrency=concurrency, timeout=timeout)
    sink = ConsoleSink(cfg.domain, quiet=quiet)
    click.echo(f'Scraping {cfg.origin_url} (depth {cfg.max_depth})', err=True)
    try:
        if scan_timeout:
            session = asyncio.run(
                asyncio.wait_for(start_scan(cfg, sink=sink), timeout=scan_timeout)
            )
        else:
            session = asyncio.run(start_scan(cfg, sink=sink))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {scan_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    report = build_report(session)

    # Если не сохраняем в файл, печатаем в stdout
    if not (json_output or csv_output or html_output):
        indent = 2 if pretty else None
        click.echo(json.dumps(report_payload(report), ensure_ascii=False, indent=indent))
        return

    exports = (
        ('JSON', json_output, lambda path: render_json(report, path)),
        ('CSV', csv_output, lambda path: render_csv(report, path)),
        ('HTML', html_output, lambda path: render_html(report, template_dir, path)),
    )
    for label, path, render in exports:
        if not path:
            continue
        try:
            saved = render(path)
            click.echo(f'{label} report: {saved}')
        except Exception as e:
            print_error(f'Ошибка при сохранении {label}: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.pass_context
def show_config(ctx, url):
    """Показать итоговую конфигурацию в JSON."""
    cfg = _effective_config(ctx, url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
