"""Tests for CSV normalizer functions."""

from backoffice.adapters.csv_loader.normalizer import (
    clean_row,
    clean_string,
    normalize_column_name,
)

# ─── normalize_column_name ───────────────────────────────────────────


def test_strip_trailing_spaces():
    assert normalize_column_name("  Name  ") == "name"


def test_remove_bom():
    assert normalize_column_name("\ufeffName") == "name"


def test_words_become_camel_case():
    assert normalize_column_name("Client Name") == "clientName"
    assert normalize_column_name("Rate Per Day") == "ratePerDay"


def test_snake_and_kebab_case():
    assert normalize_column_name("mother_vessel") == "motherVessel"
    assert normalize_column_name("LIGHTER-VESSEL") == "lighterVessel"


def test_non_breaking_space():
    assert normalize_column_name("Start\u00a0Date") == "startDate"


def test_camel_case_kept():
    assert normalize_column_name("totalAmount") == "totalAmount"
    assert normalize_column_name("RatePerDay") == "ratePerDay"


def test_uppercase_single_word():
    assert normalize_column_name("ID") == "id"
    assert normalize_column_name("NID") == "nid"


def test_bom_plus_trailing_space():
    assert normalize_column_name("\ufeff  Worker Name  ") == "workerName"


# ─── clean_string ────────────────────────────────────────────────────


def test_clean_string_strips():
    assert clean_string("  hello  ") == "hello"


def test_clean_string_empty_to_none():
    assert clean_string("   ") is None
    assert clean_string("") is None


def test_clean_string_none():
    assert clean_string(None) is None


# ─── clean_row ───────────────────────────────────────────────────────


def test_clean_row_drops_empty_cells():
    assert clean_row({"name": "Karim", "phone": "  ", "nid": None}) == {"name": "Karim"}


def test_clean_row_numeric_columns():
    row = clean_row({"ratePerDay": "500", "conveyance": "n/a", "phone": "0171"})
    assert row == {"ratePerDay": 500.0, "conveyance": 0.0, "phone": "0171"}
