"""Tests for the sheet CSV loader."""

import csv
import tempfile
from pathlib import Path

from backoffice.adapters.csv_loader.loader import find_sheet, load_sheet
from backoffice.domain.value_objects.enums import Entity


def _write_csv(rows: list[dict], path: Path, encoding: str = "utf-8-sig") -> None:
    """Helper to write a test CSV file."""
    if not rows:
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)


def test_load_sheet_basic():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "employees.csv"
        _write_csv([
            {"ID": "EMP-1", "Name": "Karim", "Phone": "01711", "Daily Rate": "600", "Status": "active"},
            {"ID": "EMP-2", "Name": "Salma", "Phone": "", "Daily Rate": "", "Status": "inactive"},
        ], csv_path)

        rows = load_sheet(csv_path)
        assert len(rows) == 2
        assert rows[0] == {
            "id": "EMP-1",
            "name": "Karim",
            "phone": "01711",
            "dailyRate": 600.0,
            "status": "active",
        }
        assert "phone" not in rows[1]


def test_blank_rows_skipped():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "clients.csv"
        with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
            f.write("Name,Phone\n")
            f.write("ABC Shipping,0181\n")
            f.write(",\n")

        assert load_sheet(csv_path) == [{"name": "ABC Shipping", "phone": "0181"}]


def test_semicolon_delimiter_sniffing():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "vessel_orders.csv"
        with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
            f.write("Client Name;Mother Vessel;Rate Per Day\n")
            f.write("ABC;MV Star;500\n")

        rows = load_sheet(csv_path)
        assert rows == [{"clientName": "ABC", "motherVessel": "MV Star", "ratePerDay": 500.0}]


def test_tab_delimiter_sniffing():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "advances.csv"
        with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
            f.write("Employee Name\tAmount\n")
            f.write("Karim\t1500\n")

        assert load_sheet(csv_path) == [{"employeeName": "Karim", "amount": 1500.0}]


def test_find_sheet_exact_stem():
    with tempfile.TemporaryDirectory() as tmpdir:
        data_dir = Path(tmpdir)
        for name in ("day_labor.csv", "day-labor-workers.csv", "notes.txt"):
            (data_dir / name).write_text("a\n1\n", encoding="utf-8")

        assert find_sheet(data_dir, Entity.DAY_LABOR).name == "day_labor.csv"
        assert find_sheet(data_dir, Entity.DAY_LABOR_WORKER).name == "day-labor-workers.csv"
        assert find_sheet(data_dir, Entity.INVOICE) is None
