"""Key-value store implementations (SQLAlchemy table and in-memory)."""

from __future__ import annotations

import copy
import json
import logging
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backoffice.adapters.persistence.models import KeyValueModel
from backoffice.application.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class SqlKeyValueStore(KeyValueStore):
    """JSON blobs in the ``kv_store`` table, one short session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get(self, key: str, default: Any = None) -> Any:
        async with self._sessions() as s:
            result = await s.execute(select(KeyValueModel).where(KeyValueModel.key == key))
            m = result.scalar_one_or_none()
        if m is None:
            return default
        try:
            return json.loads(m.value)
        except ValueError:
            logger.exception("Corrupt value under key '%s', using default", key)
            return default

    async def set(self, key: str, value: Any) -> None:
        encoded = json.dumps(value, ensure_ascii=False)
        async with self._sessions() as s:
            insert = _UPSERT_INSERTS[s.get_bind().dialect.name]
            stmt = insert(KeyValueModel).values(key=key, value=encoded)
            stmt = stmt.on_conflict_do_update(
                index_elements=[KeyValueModel.key],
                set_={"value": stmt.excluded.value, "updated_at": func.now()},
            )
            await s.execute(stmt)
            await s.commit()

    async def delete(self, key: str) -> None:
        async with self._sessions() as s:
            await s.execute(delete(KeyValueModel).where(KeyValueModel.key == key))
            await s.commit()


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store; values are deep-copied in and out."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)
