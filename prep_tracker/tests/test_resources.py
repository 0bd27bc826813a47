"""Tests for /api/resources"""


def _create(client, headers, **fields):
    body = {"title": "Two Sum", **fields}
    r = client.post("/api/resources", headers=headers, json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_resources_require_auth(client):
    assert client.get("/api/resources").status_code == 401


def test_create_and_list(client, auth_headers, test_user):
    created = _create(client, auth_headers, category="System Design", url="https://example.com")
    assert created["user_id"] == test_user.id
    assert created["is_completed"] is False

    r = client.get("/api/resources", headers=auth_headers)
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 1
    assert data["completed"] == 0
    assert data["items"][0]["id"] == created["id"]


def test_create_rejects_unknown_category(client, auth_headers):
    r = client.post("/api/resources", headers=auth_headers, json={"title": "x", "category": "Cooking"})
    assert r.status_code == 422
    assert "error" in r.json()


def test_create_requires_title(client, auth_headers):
    r = client.post("/api/resources", headers=auth_headers, json={"category": "DSA"})
    assert r.status_code == 422


def test_filter_by_category_and_search(client, auth_headers):
    _create(client, auth_headers, title="Binary Search", category="DSA")
    _create(client, auth_headers, title="Load Balancers", category="System Design", notes="search engines")
    _create(client, auth_headers, title="STAR method", category="Behavioral")

    r = client.get("/api/resources", headers=auth_headers, params={"category": "DSA"})
    assert [i["title"] for i in r.json()["items"]] == ["Binary Search"]

    r = client.get("/api/resources", headers=auth_headers, params={"search": "SEARCH"})
    titles = sorted(i["title"] for i in r.json()["items"])
    assert titles == ["Binary Search", "Load Balancers"]

    r = client.get("/api/resources", headers=auth_headers, params={"category": "all"})
    assert len(r.json()["items"]) == 3
    assert r.json()["total"] == 3


def test_toggle_flips_completion(client, auth_headers):
    created = _create(client, auth_headers)

    r = client.post(f"/api/resources/{created['id']}/toggle", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["is_completed"] is True
    assert r.json()["completed_at"] is not None

    r = client.post(f"/api/resources/{created['id']}/toggle", headers=auth_headers)
    assert r.json()["is_completed"] is False
    assert r.json()["completed_at"] is None


def test_update_partial(client, auth_headers):
    created = _create(client, auth_headers, notes="keep me")
    r = client.patch(f"/api/resources/{created['id']}", headers=auth_headers, json={"title": "Three Sum"})
    assert r.status_code == 200
    assert r.json()["title"] == "Three Sum"
    assert r.json()["notes"] == "keep me"


def test_delete_then_delete_again(client, auth_headers):
    created = _create(client, auth_headers)
    r = client.delete(f"/api/resources/{created['id']}", headers=auth_headers)
    assert r.status_code == 204
    r = client.delete(f"/api/resources/{created['id']}", headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Resource not found"}


def test_other_user_cannot_touch_resource(client, auth_headers, other_headers):
    created = _create(client, auth_headers)

    assert client.get("/api/resources", headers=other_headers).json()["items"] == []
    r = client.patch(f"/api/resources/{created['id']}", headers=other_headers, json={"title": "x"})
    assert r.status_code == 404
    r = client.post(f"/api/resources/{created['id']}/toggle", headers=other_headers)
    assert r.status_code == 404
    r = client.delete(f"/api/resources/{created['id']}", headers=other_headers)
    assert r.status_code == 404

    r = client.get("/api/resources", headers=auth_headers)
    assert r.json()["items"][0]["title"] == "Two Sum"


def test_mutation_invalidates_cache(client, auth_headers, test_user):
    from unittest.mock import AsyncMock, patch

    with patch("prep_tracker.app.utils.cache.invalidate_user", new_callable=AsyncMock) as invalidate:
        _create(client, auth_headers)
    invalidate.assert_awaited_once_with(test_user.id)
