"""Tests for GET /api/schedule"""


def _create(client, headers, when: str, company: str):
    r = client.post(
        "/api/interviews",
        headers=headers,
        json={"company": company, "role": "SWE", "interview_date": when},
    )
    assert r.status_code == 201, r.text


def test_schedule_returns_only_requested_month(client, auth_headers):
    _create(client, auth_headers, "2030-05-10T09:00:00", "Acme")
    _create(client, auth_headers, "2030-05-10T15:00:00", "Beta")
    _create(client, auth_headers, "2030-05-31T23:30:00", "Core")
    _create(client, auth_headers, "2030-06-01T00:00:00", "June")
    _create(client, auth_headers, "2030-04-30T12:00:00", "April")

    r = client.get("/api/schedule", headers=auth_headers, params={"month": "2030-05", "day": "2030-05-10"})
    assert r.status_code == 200
    data = r.json()
    assert data["month"] == "2030-05"
    assert [i["company"] for i in data["items"]] == ["Acme", "Beta", "Core"]
    assert data["dates"] == ["2030-05-10", "2030-05-31"]
    assert data["day"] == "2030-05-10"
    assert [i["company"] for i in data["day_items"]] == ["Acme", "Beta"]


def test_schedule_december_rolls_over(client, auth_headers):
    _create(client, auth_headers, "2030-12-31T10:00:00", "Dec")
    _create(client, auth_headers, "2031-01-01T10:00:00", "Jan")

    data = client.get("/api/schedule", headers=auth_headers, params={"month": "2030-12"}).json()
    assert [i["company"] for i in data["items"]] == ["Dec"]
    assert data["day_items"] == []


def test_schedule_bad_month(client, auth_headers):
    r = client.get("/api/schedule", headers=auth_headers, params={"month": "May 2030"})
    assert r.status_code == 422
    assert r.json() == {"error": "month must be formatted YYYY-MM"}


def test_schedule_is_private(client, auth_headers, other_headers):
    _create(client, auth_headers, "2030-05-10T09:00:00", "Acme")
    data = client.get("/api/schedule", headers=other_headers, params={"month": "2030-05"}).json()
    assert data["items"] == []
