# tests/analytics/test_authors.py
import pytest

from libroclub.analytics.authors import parse_author_list, title_case

def test_parse_author_list_title_cases_each_name():
    assert parse_author_list("more than,one name") == ["More Than", "One Name"]

def test_parse_author_list_ignores_space_after_comma():
    assert parse_author_list("A, B") == parse_author_list("A,B") == ["A", "B"]

def test_parse_author_list_keeps_order_and_repeats():
    assert parse_author_list("zed,amy,zed") == ["Zed", "Amy", "Zed"]

@pytest.mark.parametrize("text", [None, "", "   ", ",", " , "])
def test_parse_author_list_empty(text):
    assert parse_author_list(text) == []

def test_parse_author_list_drops_blank_tokens():
    assert parse_author_list("author 1,,author 3,") == ["Author 1", "Author 3"]

@pytest.mark.parametrize("text, expected", [
    ("the test title", "The Test Title"),
    ("tHE tEST", "The Test"),
    ("ursula k. le guin", "Ursula K. Le Guin"),
    ("don't panic", "Don't Panic"),
    ("single", "Single"),
    ("", ""),
])
def test_title_case(text, expected):
    assert title_case(text) == expected
