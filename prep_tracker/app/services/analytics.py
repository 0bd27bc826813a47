"""
Aggregations for the dashboard and analytics pages.

Pure functions over rows that were already fetched; no I/O. Rows may be ORM
objects or dicts. Groupings keep first-occurrence order because charts map
by key, not by position.
"""
import math
from collections import OrderedDict
from datetime import date, datetime, timedelta
from typing import Any, Callable, Iterable, Mapping, Optional

# Locale-independent month labels
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _get(row: Any, field: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


def _as_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


def round_percent(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return int(math.floor(part / whole * 100 + 0.5))


def histogram(
    rows: Iterable[Any],
    field: str,
    default: Optional[str] = None,
    key_name: str = "key",
) -> list[dict]:
    """Count rows per value of `field`. None values count under `default` (skipped if no default)."""
    counts: "OrderedDict[Any, int]" = OrderedDict()
    for row in rows:
        value = _get(row, field)
        if value is None:
            if default is None:
                continue
            value = default
        counts[value] = counts.get(value, 0) + 1
    return [{key_name: k, "count": n} for k, n in counts.items()]


def completion_ratio(completed: int, total: int) -> float:
    """completed / total, defined as 0.0 when there is nothing to complete."""
    if not total:
        return 0.0
    return completed / total


def completion_by_category(
    rows: Iterable[Any],
    category_field: str = "category",
    is_done: Callable[[Any], bool] = lambda r: bool(_get(r, "is_completed")),
) -> list[dict]:
    stats: "OrderedDict[str, dict]" = OrderedDict()
    for row in rows:
        category = _get(row, category_field)
        entry = stats.setdefault(category, {"category": category, "total": 0, "completed": 0})
        entry["total"] += 1
        if is_done(row):
            entry["completed"] += 1
    for entry in stats.values():
        entry["ratio"] = completion_ratio(entry["completed"], entry["total"])
    return list(stats.values())


def month_label(value: Any) -> Optional[str]:
    d = _as_date(value)
    return MONTH_LABELS[d.month - 1] if d else None


def month_buckets(rows: Iterable[Any], field: str) -> list[dict]:
    """
    Count rows per short month label. Rows from different years that fall in
    the same calendar month share one bucket.
    """
    counts: "OrderedDict[str, int]" = OrderedDict()
    for row in rows:
        label = month_label(_get(row, field))
        if label is None:
            continue
        counts[label] = counts.get(label, 0) + 1
    return [{"month": m, "count": n} for m, n in counts.items()]


def completion_events(*groups: tuple[Iterable[Any], str]) -> list[datetime]:
    """Collect non-null completion timestamps from (rows, field) pairs."""
    events = []
    for rows, field in groups:
        for row in rows:
            value = _get(row, field)
            if value is not None:
                events.append(value)
    return events


def weekly_activity(events: Iterable[Any], today: date) -> list[dict]:
    """Completions per weekday (Mon..Sun) for the week containing `today`."""
    monday = today - timedelta(days=today.weekday())
    counts = [0] * 7
    for value in events:
        d = _as_date(value)
        if d is None:
            continue
        offset = (d - monday).days
        if 0 <= offset < 7:
            counts[offset] += 1
    return [{"day": WEEKDAY_LABELS[i], "completed": counts[i]} for i in range(7)]


def progress_over_time(events: Iterable[Any], today: date, weeks: int = 4) -> list[dict]:
    """Completions per trailing 7-day window, W1 (oldest) .. W{weeks} (ending today)."""
    counts = [0] * weeks
    for value in events:
        d = _as_date(value)
        if d is None:
            continue
        days_ago = (today - d).days
        if 0 <= days_ago < weeks * 7:
            counts[weeks - 1 - days_ago // 7] += 1
    return [{"week": f"W{i + 1}", "tasks": counts[i]} for i in range(weeks)]


def dashboard_summary(
    resources: list,
    applications: list,
    interviews: list,
    contacts: list,
    roadmap_items: list,
    practice_tests: list,
    now: datetime,
) -> dict:
    completed_resources = sum(1 for r in resources if _get(r, "is_completed"))
    completed_roadmap = sum(1 for r in roadmap_items if _get(r, "status") == "completed")
    upcoming = sum(
        1 for i in interviews if _get(i, "interview_date") is not None and _get(i, "interview_date") > now
    )
    events = completion_events(
        (resources, "completed_at"), (roadmap_items, "completed_at"), (practice_tests, "completed_at")
    )
    return {
        "total_resources": len(resources),
        "completed_resources": completed_resources,
        "total_applications": len(applications),
        "upcoming_interviews": upcoming,
        "total_contacts": len(contacts),
        "roadmap_progress": round_percent(completed_roadmap, len(roadmap_items)),
        "applications_by_status": histogram(applications, "status", key_name="status"),
        "weekly_activity": weekly_activity(events, now.date()),
    }


def analytics_summary(
    applications: list,
    resources: list,
    interviews: list,
    roadmap_items: list,
    practice_tests: list,
    today: date,
) -> dict:
    events = completion_events(
        (resources, "completed_at"), (roadmap_items, "completed_at"), (practice_tests, "completed_at")
    )
    return {
        "applications_by_month": month_buckets(applications, "applied_date"),
        "resources_by_category": completion_by_category(resources),
        "interview_outcomes": histogram(interviews, "outcome", default="Pending", key_name="outcome"),
        "progress_over_time": progress_over_time(events, today),
        "application_count": len(applications),
    }
