"""CSV header and cell normalization — BOM, stray whitespace, header styles."""

from __future__ import annotations

import re

from backoffice.domain.value_objects.coercion import to_number

# Columns stored as numbers; everything else stays text
NUMERIC_FIELDS = frozenset({
    "salary",
    "dailyRate",
    "rate",
    "hours",
    "amount",
    "ratePerDay",
    "conveyance",
    "dutyDays",
    "revenue",
    "totalAmount",
    "daysWorked",
    "grossSalary",
    "advances",
    "netPay",
    "taxPercent",
    "taxAmount",
    "total",
})


def normalize_column_name(name: str) -> str:
    """Map a sheet header onto the camelCase record key.

    "Client Name", "client_name" and "CLIENT-NAME" all become
    ``clientName``; a header that is already camelCase is kept, and a
    leading capital is lowered ("RatePerDay" -> "ratePerDay", "ID" -> "id").
    """
    name = name.replace("\ufeff", "").strip()
    words = [w for w in re.split(r"[\s _\-]+", name) if w]
    if not words:
        return ""
    if len(words) == 1:
        word = re.sub(r"[^\w]", "", words[0])
        if word.isupper():
            return word.lower()
        return word[:1].lower() + word[1:]
    words = [re.sub(r"[^\w]", "", w) for w in words]
    return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:] if w)


def normalize_columns(columns: list[str]) -> dict[str, str]:
    """Return mapping of original column names to normalized names."""
    return {col: normalize_column_name(col) for col in columns}


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def clean_row(row: dict[str, str | None]) -> dict:
    """Drop empty cells and store numeric columns as numbers."""
    record = {}
    for key, raw in row.items():
        value = clean_string(raw)
        if not key or value is None:
            continue
        record[key] = to_number(value) if key in NUMERIC_FIELDS else value
    return record
