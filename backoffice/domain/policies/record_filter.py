"""RecordFilterPolicy — search token plus exact-match filters over records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

# Fields searched on the vessel-order page
ASSIGNMENT_SEARCH_FIELDS: tuple[str, ...] = (
    "motherVessel",
    "lighterVessel",
    "vesselName",
    "workerName",
    "clientName",
)


def matches_search(record: Mapping, token: str | None, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match on any of *fields*; empty token matches."""
    needle = (token or "").strip().lower()
    if not needle:
        return True
    for name in fields:
        value = record.get(name)
        if value is not None and needle in str(value).lower():
            return True
    return False


def matches_exact(record: Mapping, field: str, expected) -> bool:
    """Exact match on one field; an empty filter value matches everything."""
    if expected is None or expected == "":
        return True
    value = record.get(field)
    if value is None:
        return False
    return str(value) == str(expected)


def filter_records(
    records: Sequence[Mapping],
    *,
    search: str | None = None,
    search_fields: Iterable[str] = (),
    exact: Mapping[str, object] | None = None,
) -> list:
    """Return the records passing every active filter (logical AND).

    The input sequence is never modified; a new list is returned.
    """
    fields = tuple(search_fields)
    exact = exact or {}
    return [
        r
        for r in records
        if matches_search(r, search, fields)
        and all(matches_exact(r, name, value) for name, value in exact.items())
    ]


def filter_assignments(
    records: Sequence[Mapping],
    search: str | None = None,
    status: str | None = None,
    client_id: str | None = None,
) -> list:
    """Vessel-order filter: search token, status and client id."""
    return filter_records(
        records,
        search=search,
        search_fields=ASSIGNMENT_SEARCH_FIELDS,
        exact={"status": status, "clientId": client_id},
    )
