"""Tests for /api/applications"""
from datetime import date, datetime


def _create(client, headers, **fields):
    body = {"company": "Acme", "role": "SWE", **fields}
    r = client.post("/api/applications", headers=headers, json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_applied_date_defaults_to_today(client, auth_headers):
    created = _create(client, auth_headers)
    assert created["applied_date"] == date.today().isoformat()
    assert created["status"] == "Applied"


def test_applications_newest_first(client, auth_headers):
    _create(client, auth_headers, company="Old", applied_date="2024-01-10")
    _create(client, auth_headers, company="New", applied_date="2024-03-15")

    items = client.get("/api/applications", headers=auth_headers).json()["items"]
    assert [i["company"] for i in items] == ["New", "Old"]


def test_applications_filter_and_search(client, auth_headers):
    _create(client, auth_headers, company="Acme", role="Backend Engineer", status="Rejected")
    _create(client, auth_headers, company="Globex", role="Data Engineer")
    _create(client, auth_headers, company="Initech", role="PM")

    r = client.get("/api/applications", headers=auth_headers, params={"status": "Rejected"})
    assert [i["company"] for i in r.json()["items"]] == ["Acme"]

    r = client.get("/api/applications", headers=auth_headers, params={"search": "engineer"})
    assert sorted(i["company"] for i in r.json()["items"]) == ["Acme", "Globex"]

    r = client.get(
        "/api/applications", headers=auth_headers, params={"search": "glob", "status": "Applied"}
    )
    assert [i["company"] for i in r.json()["items"]] == ["Globex"]
    assert r.json()["total"] == 3


def test_invalid_status_rejected(client, auth_headers):
    r = client.post(
        "/api/applications", headers=auth_headers, json={"company": "Acme", "role": "SWE", "status": "Ghosted"}
    )
    assert r.status_code == 422


def test_update_status(client, auth_headers):
    created = _create(client, auth_headers)
    r = client.patch(f"/api/applications/{created['id']}", headers=auth_headers, json={"status": "Shortlisted"})
    assert r.status_code == 200
    assert r.json()["status"] == "Shortlisted"
    assert r.json()["company"] == "Acme"


def test_delete_application_keeps_linked_interview(client, auth_headers):
    application = _create(client, auth_headers, applied_date="2024-03-15")
    r = client.post(
        "/api/interviews",
        headers=auth_headers,
        json={
            "company": "Acme",
            "role": "SWE",
            "interview_date": "2030-01-01T10:00:00Z",
            "application_id": application["id"],
        },
    )
    assert r.status_code == 201

    assert client.delete(f"/api/applications/{application['id']}", headers=auth_headers).status_code == 204

    items = client.get("/api/interviews", headers=auth_headers).json()["items"]
    assert len(items) == 1
    assert items[0]["application_id"] is None


def test_created_application_is_listed_as_sent(client, auth_headers):
    _create(client, auth_headers, role="Engineer", status="Applied", applied_date="2025-01-10")

    body = client.get("/api/applications", headers=auth_headers).json()
    assert body["total"] == 1
    item = body["items"][0]
    assert item["company"] == "Acme"
    assert item["role"] == "Engineer"
    assert item["status"] == "Applied"
    assert item["applied_date"] == "2025-01-10"
    assert item["notes"] is None
    assert item["job_url"] is None
    assert datetime.fromisoformat(item["updated_at"]) >= datetime.fromisoformat(item["created_at"])
