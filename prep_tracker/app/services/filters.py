"""
In-memory filter/search predicates applied to an already-fetched row set.

Per-user volumes are small, so list endpoints fetch everything the user owns
and narrow it here. Rows may be ORM objects or dicts.
"""
from typing import Any, Iterable, Mapping, Sequence

ALL = "all"


def _value(row: Any, field: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


def matches_search(row: Any, search: str | None, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match over any of `fields`. Blank search matches all."""
    needle = (search or "").strip().lower()
    if not needle:
        return True
    for field in fields:
        value = _value(row, field)
        if value and needle in str(value).lower():
            return True
    return False


def matches_exact(row: Any, field: str, value: str | None, case_insensitive: bool = False) -> bool:
    """Exact match on a discriminant field. None, "" and "all" match everything."""
    if value is None or value == "" or value == ALL:
        return True
    actual = _value(row, field)
    if case_insensitive:
        return actual is not None and str(actual).lower() == str(value).lower()
    return actual == value


def apply(
    rows: Iterable[Any],
    search: str | None = None,
    search_fields: Sequence[str] = (),
    exact: Mapping[str, str | None] | None = None,
    case_insensitive: Sequence[str] = (),
) -> list:
    exact = exact or {}
    return [
        row
        for row in rows
        if matches_search(row, search, search_fields)
        and all(
            matches_exact(row, field, value, case_insensitive=field in case_insensitive)
            for field, value in exact.items()
        )
    ]
