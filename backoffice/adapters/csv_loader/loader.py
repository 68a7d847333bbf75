"""CSV loader — reads sheet exports into camelCase records."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from backoffice.adapters.csv_loader.normalizer import clean_row, normalize_columns
from backoffice.domain.value_objects.enums import Entity

logger = logging.getLogger(__name__)

# File-name hints per entity; the first matching *.csv wins
SHEET_HINTS: dict[Entity, tuple[str, ...]] = {
    Entity.EMPLOYEE: ("employees", "staff"),
    Entity.CLIENT: ("clients", "customers"),
    Entity.GUARD_DUTY: ("guard_duty", "guardduty", "attendance"),
    Entity.VESSEL_ORDER: ("vessel_orders", "vesselorders", "orders"),
    Entity.VESSEL_PERSONNEL: ("vessel_personnel", "vesselpersonnel", "personnel"),
    Entity.DAY_LABOR_WORKER: ("day_labor_workers", "daylaborworkers", "workers"),
    Entity.DAY_LABOR: ("day_labor", "daylabor", "labor"),
    Entity.ADVANCE: ("advances",),
    Entity.SALARY: ("salary", "salaries", "payroll"),
    Entity.INVOICE: ("invoices",),
}


def _sniff_dialect(sample: str) -> type[csv.Dialect]:
    """Pick the delimiter (comma/semicolon/tab) that splits the header line most."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    counts = {d: first_line.count(d) for d in (";", ",", "\t")}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect
    return csv.excel


def load_sheet(file_path: Path, encoding: str = "utf-8-sig") -> list[dict]:
    """Read one exported sheet.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        One dict per row with camelCase keys; empty cells are dropped.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = normalize_columns(reader.fieldnames)
        rows = []
        for raw_row in reader:
            record = clean_row({col_map[k]: v for k, v in raw_row.items() if k is not None})
            if record:
                rows.append(record)

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def find_sheet(data_dir: Path, entity: Entity) -> Path | None:
    """Find the CSV export for *entity* by file-name hint."""
    files = sorted(data_dir.glob("*.csv"))
    for hint in SHEET_HINTS[entity]:
        for f in files:
            stem = f.stem.lower().replace("-", "_").replace(" ", "_")
            if stem == hint:
                logger.info("Found CSV: %s (matched hint '%s')", f.name, hint)
                return f
    return None
