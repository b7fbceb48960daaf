# File: tests/test_utils.py
import pytest

from scrapbook.crawler.link_extractor import extract_links
from scrapbook.crawler.models import PageData
from scrapbook.errors import MalformedLink
from scrapbook.utils import (
    extract_domain,
    is_same_domain,
    normalize_url,
    remove_duplicates,
    resolve_url,
)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("HTTP://Example.com/Path/#Top", "http://example.com/path"),
        ("http://example.com///", "http://example.com"),
        ("https://example.com/a?q=1", "https://example.com/a?q=1"),
        ("http://example.com/a", "http://example.com/a"),
    ],
)
def test_normalize_url(url, expected):
    assert normalize_url(url) == expected


def test_scheme_is_part_of_identity():
    assert normalize_url("http://example.com/a") != normalize_url("https://example.com/a")


def test_resolve_relative_href():
    assert resolve_url("../Contact/", "http://example.com/team/people") == "http://example.com/contact"


@pytest.mark.parametrize("href", ["http://[::1", "https://"])
def test_resolve_rejects_unusable_href(href):
    with pytest.raises(ValueError):
        resolve_url(href, "http://example.com/")


@pytest.mark.parametrize("href", ["mailto:a@x.com", "sms:+15551234567", "skype:john?call", "ftp://example.com/f"])
def test_resolve_other_schemes_give_none(href):
    assert resolve_url(href, "http://example.com/") is None


def test_same_domain_ignores_port_and_case():
    assert is_same_domain("http://LOCALHOST:8080/a", "localhost")
    assert not is_same_domain("http://sub.example.com/", "example.com")
    assert extract_domain("https://Example.com:443/x") == "example.com"


def test_remove_duplicates_keeps_order():
    assert remove_duplicates(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_extract_links_filters_and_reports_malformed():
    html = (
        '<a href="/a/">A</a><a href="/A#part">A again</a>'
        '<a href="http://other.com/x">X</a><a href="mailto:a@x.com">mail</a>'
        '<a href="http://[::1">broken</a><a href="b">B</a><a>no href</a>'
    )
    errors = []
    links = extract_links(PageData("http://example.com/dir/", html), "example.com", errors.append)

    assert links == ["http://example.com/a", "http://example.com/dir/b"]
    assert len(errors) == 1
    assert isinstance(errors[0], MalformedLink)


def test_extract_links_skips_other_schemes_silently():
    html = (
        '<a href="sms:+15551234567">sms</a><a href="skype:john?call">skype</a>'
        '<a href="viber://chat?number=123">viber</a><a href="ftp://example.com/f">ftp</a>'
        '<a href="/ok">ok</a>'
    )
    errors = []
    links = extract_links(PageData("http://example.com/", html), "example.com", errors.append)

    assert links == ["http://example.com/ok"]
    assert errors == []
