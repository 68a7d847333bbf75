"""Local record store — the same action vocabulary over a key-value blob store."""

from __future__ import annotations

import asyncio
import logging
import random
from collections import defaultdict
from collections.abc import Awaitable, Callable
from datetime import date, datetime, timezone

from backoffice.application.ports.key_value_store import KeyValueStore
from backoffice.application.ports.record_store import RecordStore
from backoffice.domain.policies.dashboard import compute_dashboard_stats
from backoffice.domain.value_objects.actions import ACTION_TARGETS, Action
from backoffice.domain.value_objects.api_response import ApiResponse
from backoffice.domain.value_objects.enums import LIST_FILTERS, Entity, Operation

logger = logging.getLogger(__name__)

RECORD_NOT_FOUND = "Record not found"

Handler = Callable[[Entity | None, dict], Awaitable[ApiResponse]]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """2024-01-01T08:30:00.000Z, the format sheet rows already carry."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_id(prefix: str, moment: datetime | None = None) -> str:
    """PREFIX-<epoch ms>-<0..999>."""
    moment = moment or _utc_now()
    return f"{prefix}-{int(moment.timestamp() * 1000)}-{random.randint(0, 999)}"


def _same(left, right) -> bool:
    # query-string filters arrive as text while stored values may be numbers
    if left is None or right is None:
        return False
    return str(left) == str(right)


class LocalRecordStore(RecordStore):
    """Implements every action against one JSON list per entity key."""

    mode = "local"

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        clock: Callable[[], datetime] = _utc_now,
        today: Callable[[], date] = date.today,
    ):
        self._kv = kv
        self._clock = clock
        self._today = today
        self._locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._handlers: dict[Operation, Handler] = {
            Operation.LIST: self._list,
            Operation.CREATE: self._add,
            Operation.UPDATE: self._update,
            Operation.DELETE: self._delete,
            Operation.STATS: self._stats,
        }

    async def execute(self, action: Action, payload: dict | None = None) -> ApiResponse:
        payload = dict(payload or {})
        target = ACTION_TARGETS.get(action)
        if target is None:
            return ApiResponse.fail(f"Unknown action: {action}")
        entity, operation = target
        try:
            return await self._handlers[operation](entity, payload)
        except Exception as e:
            logger.exception("Local store failed on action %s", action.value)
            return ApiResponse.fail(str(e))

    # ─── Storage helpers ─────────────────────────────────────────────

    async def _load(self, entity: Entity) -> list[dict]:
        items = await self._kv.get(entity.storage_key, [])
        if not isinstance(items, list):
            logger.warning("Key '%s' does not hold a list, treating as empty", entity.storage_key)
            return []
        return items

    async def _save(self, entity: Entity, items: list[dict]) -> None:
        await self._kv.set(entity.storage_key, items)

    def _writing(self, entity: Entity) -> asyncio.Lock:
        # held from load to save; one lock per storage key
        return self._locks[entity.storage_key]

    # ─── Handlers ────────────────────────────────────────────────────

    async def _list(self, entity: Entity, payload: dict) -> ApiResponse:
        items = await self._load(entity)
        filters = {
            name: payload[name]
            for name in LIST_FILTERS.get(entity, ())
            if payload.get(name) not in (None, "")
        }
        if filters:
            items = [
                item for item in items
                if all(_same(item.get(name), value) for name, value in filters.items())
            ]
        return ApiResponse.ok(items)

    async def _add(self, entity: Entity, payload: dict) -> ApiResponse:
        async with self._writing(entity):
            items = await self._load(entity)
            now = self._clock()
            new_item = {**payload}
            new_item["id"] = payload.get("id") or generate_id(entity.id_prefix, now)
            new_item.setdefault("createdAt", iso_timestamp(now))
            items.append(new_item)
            await self._save(entity, items)
        return ApiResponse.ok(new_item, "Added successfully")

    async def _update(self, entity: Entity, payload: dict) -> ApiResponse:
        async with self._writing(entity):
            items = await self._load(entity)
            for index, item in enumerate(items):
                if _same(item.get("id"), payload.get("id")):
                    items[index] = {**item, **payload, "updatedAt": iso_timestamp(self._clock())}
                    await self._save(entity, items)
                    return ApiResponse.ok(items[index], "Updated successfully")
        return ApiResponse.fail(RECORD_NOT_FOUND)

    async def _delete(self, entity: Entity, payload: dict) -> ApiResponse:
        record_id = payload.get("id")
        async with self._writing(entity):
            items = await self._load(entity)
            remaining = [item for item in items if not _same(item.get("id"), record_id)]
            if len(remaining) == len(items):
                return ApiResponse.fail(RECORD_NOT_FOUND)
            await self._save(entity, remaining)
        return ApiResponse.ok(message="Deleted successfully")

    async def _stats(self, _entity: None, _payload: dict) -> ApiResponse:
        stats = compute_dashboard_stats(
            employees=await self._load(Entity.EMPLOYEE),
            clients=await self._load(Entity.CLIENT),
            guard_duty=await self._load(Entity.GUARD_DUTY),
            day_labor=await self._load(Entity.DAY_LABOR),
            vessel_orders=await self._load(Entity.VESSEL_ORDER),
            advances=await self._load(Entity.ADVANCE),
            invoices=await self._load(Entity.INVOICE),
            today=self._today(),
        )
        return ApiResponse.ok(stats.to_dict())
