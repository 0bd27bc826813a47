"""Tests for /api/practice"""
import pytest

from prep_tracker.app.models.past_question import PastQuestion


@pytest.fixture
def questions(db_session):
    db_session.add_all([
        PastQuestion(company="Google", role="SWE", question_text="Reverse a linked list", category="Technical", difficulty="Easy"),
        PastQuestion(company="Amazon", question_text="Tell me about a conflict", category="Behavioral", difficulty="Medium"),
        PastQuestion(company="Meta", question_text="Design a news feed", category="System Design", difficulty="Hard"),
    ])
    db_session.commit()


def test_questions_are_public(client, questions):
    r = client.get("/api/practice/questions")
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 3
    assert [q["company"] for q in data["items"]] == ["Amazon", "Google", "Meta"]


def test_question_filters_case_insensitive(client, questions):
    r = client.get("/api/practice/questions", params={"difficulty": "hard"})
    assert [q["company"] for q in r.json()["items"]] == ["Meta"]

    r = client.get("/api/practice/questions", params={"category": "behavioral"})
    assert [q["company"] for q in r.json()["items"]] == ["Amazon"]

    r = client.get("/api/practice/questions", params={"search": "LINKED"})
    assert [q["company"] for q in r.json()["items"]] == ["Google"]

    r = client.get("/api/practice/questions", params={"search": "goo", "difficulty": "all"})
    assert [q["company"] for q in r.json()["items"]] == ["Google"]


def test_questions_are_read_only(client, auth_headers):
    r = client.post("/api/practice/questions", headers=auth_headers, json={"company": "x", "question_text": "y"})
    assert r.status_code == 405


def test_record_and_list_tests(client, auth_headers):
    r = client.post(
        "/api/practice/tests",
        headers=auth_headers,
        json={"title": "Arrays", "total_questions": 8, "correct_answers": 6, "time_taken_seconds": 900},
    )
    assert r.status_code == 201
    assert r.json()["score_percent"] == 75.0
    assert r.json()["category"] == "DSA"

    r = client.post("/api/practice/tests", headers=auth_headers, json={"title": "Empty"})
    assert r.json()["score_percent"] is None

    data = client.get("/api/practice/tests", headers=auth_headers).json()
    assert data["total"] == 2


def test_tests_require_auth(client):
    assert client.get("/api/practice/tests").status_code == 401


def test_score_cannot_exceed_total(client, auth_headers):
    r = client.post(
        "/api/practice/tests", headers=auth_headers, json={"title": "Bad", "total_questions": 3, "correct_answers": 4}
    )
    assert r.status_code == 422

    created = client.post(
        "/api/practice/tests", headers=auth_headers, json={"title": "Ok", "total_questions": 3, "correct_answers": 2}
    ).json()
    r = client.patch(f"/api/practice/tests/{created['id']}", headers=auth_headers, json={"correct_answers": 5})
    assert r.status_code == 422
    r = client.patch(f"/api/practice/tests/{created['id']}", headers=auth_headers, json={"correct_answers": 3})
    assert r.status_code == 200
    assert r.json()["score_percent"] == 100.0


def test_tests_cannot_be_deleted(client, auth_headers):
    created = client.post("/api/practice/tests", headers=auth_headers, json={"title": "Keep"}).json()
    r = client.delete(f"/api/practice/tests/{created['id']}", headers=auth_headers)
    assert r.status_code == 405
