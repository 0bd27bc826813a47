"""Tests for the analytics aggregations and GET /api/analytics/summary"""
from datetime import date, datetime

from prep_tracker.app.services import analytics


def test_histogram_counts_and_default():
    rows = [{"outcome": "Passed"}, {"outcome": "Passed"}, {"outcome": "Failed"}, {"outcome": None}]
    result = analytics.histogram(rows, "outcome", default="Pending", key_name="outcome")
    assert sorted((r["outcome"], r["count"]) for r in result) == [("Failed", 1), ("Passed", 2), ("Pending", 1)]


def test_histogram_skips_nulls_without_default():
    rows = [{"status": "Applied"}, {"status": None}]
    assert analytics.histogram(rows, "status", key_name="status") == [{"status": "Applied", "count": 1}]


def test_completion_ratio_zero_total():
    assert analytics.completion_ratio(0, 0) == 0.0
    assert analytics.completion_ratio(1, 4) == 0.25


def test_completion_by_category():
    rows = [
        {"category": "DSA", "is_completed": True},
        {"category": "DSA", "is_completed": False},
        {"category": "Behavioral", "is_completed": False},
    ]
    result = {r["category"]: r for r in analytics.completion_by_category(rows)}
    assert result["DSA"]["total"] == 2
    assert result["DSA"]["completed"] == 1
    assert result["DSA"]["ratio"] == 0.5
    assert result["Behavioral"]["ratio"] == 0.0


def test_month_buckets_merge_years():
    rows = [
        {"applied_date": date(2023, 3, 1)},
        {"applied_date": date(2024, 3, 15)},
        {"applied_date": date(2024, 4, 2)},
    ]
    assert analytics.month_buckets(rows, "applied_date") == [
        {"month": "Mar", "count": 2},
        {"month": "Apr", "count": 1},
    ]


def test_weekly_activity_current_week_only():
    today = date(2026, 10, 14)  # Wednesday
    events = [
        datetime(2026, 10, 12, 9),   # Monday
        datetime(2026, 10, 14, 18),  # Wednesday
        datetime(2026, 10, 14, 19),
        datetime(2026, 10, 11, 23),  # previous Sunday
    ]
    result = analytics.weekly_activity(events, today)
    assert [d["completed"] for d in result] == [1, 0, 2, 0, 0, 0, 0]


def test_progress_over_time_four_weeks():
    today = date(2026, 10, 28)
    events = [
        datetime(2026, 10, 28),  # W4
        datetime(2026, 10, 22),  # W4 (6 days ago)
        datetime(2026, 10, 21),  # W3
        datetime(2026, 10, 1),   # W1 (27 days ago)
        datetime(2026, 9, 30),   # out of range
    ]
    result = analytics.progress_over_time(events, today)
    assert result == [
        {"week": "W1", "tasks": 1},
        {"week": "W2", "tasks": 0},
        {"week": "W3", "tasks": 1},
        {"week": "W4", "tasks": 2},
    ]


def test_analytics_summary_shape():
    summary = analytics.analytics_summary(
        applications=[{"applied_date": date(2024, 3, 15)}],
        resources=[{"category": "DSA", "is_completed": True, "completed_at": None}],
        interviews=[{"outcome": "Passed"}, {"outcome": None}],
        roadmap_items=[],
        practice_tests=[],
        today=date(2024, 3, 20),
    )
    assert summary["application_count"] == 1
    assert summary["applications_by_month"] == [{"month": "Mar", "count": 1}]
    assert summary["resources_by_category"][0]["category"] == "DSA"
    assert {o["outcome"] for o in summary["interview_outcomes"]} == {"Passed", "Pending"}
    assert len(summary["progress_over_time"]) == 4


def test_analytics_endpoint(client, auth_headers):
    client.post("/api/applications", headers=auth_headers, json={"company": "Acme", "role": "SWE", "applied_date": "2024-03-15"})
    client.post("/api/resources", headers=auth_headers, json={"title": "Graphs", "category": "DSA", "is_completed": True})
    client.post(
        "/api/interviews",
        headers=auth_headers,
        json={"company": "Acme", "role": "SWE", "interview_date": "2024-04-01T10:00:00", "outcome": "Failed"},
    )

    r = client.get("/api/analytics/summary", headers=auth_headers)
    assert r.status_code == 200
    data = r.json()
    assert data["application_count"] == 1
    assert data["applications_by_month"] == [{"month": "Mar", "count": 1}]
    assert data["resources_by_category"] == [{"category": "DSA", "total": 1, "completed": 1, "ratio": 1.0}]
    assert data["interview_outcomes"] == [{"outcome": "Failed", "count": 1}]
    assert data["progress_over_time"][-1]["tasks"] == 1


def test_analytics_requires_auth(client):
    assert client.get("/api/analytics/summary").status_code == 401
