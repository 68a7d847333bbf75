"""Import sheet CSV exports into the local store.

Usage:
    python -m backoffice.tools.seed_db
    python -m backoffice.tools.seed_db --data-dir data
    python -m backoffice.tools.seed_db --drop  # replace existing records
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from backoffice.adapters.csv_loader.loader import find_sheet, load_sheet
from backoffice.adapters.local_storage.local_record_store import generate_id, iso_timestamp
from backoffice.adapters.persistence.database import async_session_factory, create_schema
from backoffice.adapters.persistence.kv_repository import SqlKeyValueStore
from backoffice.application.ports.key_value_store import KeyValueStore
from backoffice.domain.value_objects.enums import Entity

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def seed(data_dir: Path, kv: KeyValueStore, drop: bool = False) -> dict[str, int]:
    """Load every sheet found in *data_dir*. Returns imported row counts per entity.

    Rows keep their sheet ``id`` when present; rows whose id is already
    stored are skipped unless *drop* replaces the whole collection.
    """
    counts: dict[str, int] = {}
    now = datetime.now(timezone.utc)

    for entity in Entity:
        csv_path = find_sheet(data_dir, entity)
        if csv_path is None:
            logger.info("No CSV for %s, skipping", entity.value)
            continue

        existing = [] if drop else await kv.get(entity.storage_key, [])
        known_ids = {str(r.get("id")) for r in existing if r.get("id")}
        added = 0

        for row in load_sheet(csv_path):
            record_id = str(row.get("id") or "")
            if record_id and record_id in known_ids:
                logger.debug("%s '%s' already exists, skipping", entity.value, record_id)
                continue
            if not record_id:
                record_id = generate_id(entity.id_prefix, now)
                while record_id in known_ids:
                    record_id = generate_id(entity.id_prefix, now)
            row["id"] = record_id
            row.setdefault("createdAt", iso_timestamp(now))
            existing.append(row)
            known_ids.add(record_id)
            added += 1

        await kv.set(entity.storage_key, existing)
        counts[entity.value] = added

    logger.info(
        "Seed complete: %s",
        ", ".join(f"{n} {name}" for name, n in counts.items()) or "nothing imported",
    )
    return counts


async def _verify_data(kv: KeyValueStore) -> None:
    """Print record counts per collection."""
    print(f"\n{'='*50}")
    print("LOCAL STORE CONTENTS")
    print(f"{'='*50}")
    for entity in Entity:
        items = await kv.get(entity.storage_key, [])
        print(f"{entity.value:<20} {len(items)}")
    print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Import sheet CSV exports into the local store")
    parser.add_argument(
        "--data-dir", type=str, default="data",
        help="Directory containing CSV files (default: data)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Replace existing records instead of merging",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only print what is stored, don't import",
    )
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    async def run_all():
        await create_schema()
        kv = SqlKeyValueStore(async_session_factory)
        if not args.verify_only:
            await seed(data_dir, kv, drop=args.drop)
        await _verify_data(kv)

    asyncio.run(run_all())


if __name__ == "__main__":
    main()
