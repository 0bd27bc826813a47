"""Tests for the in-memory list filters"""
from prep_tracker.app.services import filters

ROWS = [
    {"company": "Acme", "role": "Backend Engineer", "status": "Applied", "difficulty": "Hard"},
    {"company": "Globex", "role": "PM", "status": "Rejected", "difficulty": "easy"},
    {"company": "Initech", "role": None, "status": "Applied", "difficulty": None},
]


def test_blank_search_matches_everything():
    assert filters.apply(ROWS, search="", search_fields=("company",)) == ROWS
    assert filters.apply(ROWS, search="  ", search_fields=("company",)) == ROWS
    assert filters.apply(ROWS, search=None, search_fields=("company",)) == ROWS


def test_search_is_case_insensitive_over_fields():
    result = filters.apply(ROWS, search="ENGINEER", search_fields=("company", "role"))
    assert [r["company"] for r in result] == ["Acme"]


def test_search_skips_null_fields():
    assert filters.apply(ROWS, search="x", search_fields=("role",)) == []


def test_exact_all_and_none_match_everything():
    assert filters.apply(ROWS, exact={"status": "all"}) == ROWS
    assert filters.apply(ROWS, exact={"status": None}) == ROWS


def test_exact_match():
    result = filters.apply(ROWS, exact={"status": "Applied"})
    assert [r["company"] for r in result] == ["Acme", "Initech"]
    assert filters.apply(ROWS, exact={"status": "applied"}) == []


def test_exact_case_insensitive():
    result = filters.apply(ROWS, exact={"difficulty": "EASY"}, case_insensitive=("difficulty",))
    assert [r["company"] for r in result] == ["Globex"]


def test_search_and_exact_combine():
    result = filters.apply(ROWS, search="i", search_fields=("company",), exact={"status": "Applied"})
    assert [r["company"] for r in result] == ["Initech"]


def test_works_on_objects():
    class Row:
        company = "Acme"
        status = "Applied"

    assert filters.matches_search(Row(), "acm", ("company",))
    assert filters.matches_exact(Row(), "status", "Applied")
