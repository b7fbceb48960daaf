# File: tests/test_report.py
import csv
import json

import pytest

from scrapbook.aggregator import build_report
from scrapbook.config import CrawlConfig
from scrapbook.crawler.models import MatchType
from scrapbook.crawler.session import CrawlSession
from scrapbook.report import render_csv, render_html, render_json


@pytest.fixture()
def report():
    session = CrawlSession(CrawlConfig(origin_url="http://example.com"))
    session.stores[MatchType.EMAIL].record(["a@x.com", "<b@x.com>"], "http://example.com/a")
    session.stores[MatchType.PHONE].record(["555-123-4567"], "http://example.com/b")
    return build_report(session)


def test_build_report(report):
    assert report.domain == "example.com"
    assert [row["value"] for row in report.rows()] == ["a@x.com", "<b@x.com>", "555-123-4567"]
    assert report.phones[0]["type"] == "Phone"


def test_render_json(report, tmp_path):
    path = render_json(report, tmp_path / "out" / "results.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["emails"][0] == {"email": "a@x.com", "url": "http://example.com/a"}
    assert data["phones"] == [{"phone": "555-123-4567", "url": "http://example.com/b"}]


def test_render_csv(report, tmp_path):
    path = render_csv(report, tmp_path / "results.csv")
    text = path.read_text(encoding="utf-8")
    assert text.splitlines()[0] == '"Type","Value","Source URL"'
    rows = list(csv.reader(text.splitlines()))
    assert rows[1:] == [
        ["Email", "a@x.com", "http://example.com/a"],
        ["Email", "<b@x.com>", "http://example.com/a"],
        ["Phone", "555-123-4567", "http://example.com/b"],
    ]


def test_render_html(report, tmp_path):
    html = render_html(report, None, tmp_path / "results.html").read_text(encoding="utf-8")
    assert "<title>Results for example.com</title>" in html
    assert "555-123-4567" in html
    assert "&lt;b@x.com&gt;" in html


def test_render_html_empty_tables(tmp_path):
    empty = build_report(CrawlSession(CrawlConfig(origin_url="http://example.com")))
    html = render_html(empty, None, tmp_path / "empty.html").read_text(encoding="utf-8")
    assert html.count("No results") == 2
