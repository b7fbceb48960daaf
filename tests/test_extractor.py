# File: tests/test_extractor.py
import pytest

from scrapbook.crawler.extractor import clean_candidates, extract, is_plausible_phone
from scrapbook.crawler.models import MatchType
from scrapbook.crawler.store import MatchStore


def test_email_matches():
    text = "contact: a@x.com, sales: Jane.Doe+web@mail.example.org."
    assert list(extract(text, MatchType.EMAIL)) == ["a@x.com", "Jane.Doe+web@mail.example.org"]


def test_email_needs_two_letter_tld():
    assert list(extract("root@localhost and x@y.c", MatchType.EMAIL)) == []


def test_email_boundary_next_to_cyrillic():
    assert list(extract("почтаinfo@x.ru, пишите", MatchType.EMAIL)) == ["info@x.ru"]


def test_matches_are_restartable():
    matches = extract("a@x.com b@y.com", MatchType.EMAIL)
    assert list(matches) == list(matches) == ["a@x.com", "b@y.com"]


def test_phone_candidates_are_trimmed():
    raw = list(extract("<p>call 555-123-4567</p>", MatchType.PHONE))
    assert raw == [" 555-123-4567"]
    assert list(clean_candidates(raw, MatchType.PHONE)) == ["555-123-4567"]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1234567", False),
        ("12-34-56-78", True),
        ("+1 (555) 123-4567", True),
        ("123 456 789 012 345", True),
        ("0000 0000 0000 0000", False),
    ],
)
def test_phone_digit_count_filter(value, expected):
    assert is_plausible_phone(value) is expected


def test_short_digit_run_is_not_a_phone():
    store = MatchStore(MatchType.PHONE)
    assert store.record(extract("ID 1234 567 and serial 0000 0000 0000 0000", MatchType.PHONE), "u") == 0
    assert len(store) == 0


def test_phone_amid_punctuation_recorded_once():
    text = "Tel.: +1 (555) 123-4567; again: +1 (555) 123-4567;"
    store = MatchStore(MatchType.PHONE)
    assert store.record(extract(text, MatchType.PHONE), "http://example.com/b") == 1
    [match] = store.matches()
    assert match.value == "+1 (555) 123-4567"
    assert match.key == "+1 (555) 123-4567|http://example.com/b"


def test_emails_have_no_extra_filter():
    assert list(clean_candidates(["  a@x.com  ", "   "], MatchType.EMAIL)) == ["a@x.com"]
