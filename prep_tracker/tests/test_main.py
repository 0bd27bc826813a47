"""Tests for app-level routes and error rendering"""


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "version" in r.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_unknown_route_returns_error_body(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Not found"}


def test_validation_errors_use_error_body(client, auth_headers):
    r = client.post("/api/contacts", headers=auth_headers, json={"company": "Acme"})
    assert r.status_code == 422
    assert r.json()["error"].startswith("name")
