"""RecordsApi — entity-level facade over whichever RecordStore is active."""

from __future__ import annotations

from backoffice.application.ports.record_store import RecordStore
from backoffice.domain.value_objects.actions import Action, action_for
from backoffice.domain.value_objects.api_response import ApiResponse
from backoffice.domain.value_objects.enums import Entity, Operation


class RecordsApi:
    """Turns (entity, operation) calls into wire actions on the store."""

    def __init__(self, store: RecordStore):
        self._store = store

    @property
    def mode(self) -> str:
        return self._store.mode

    async def execute(self, action: Action, payload: dict | None = None) -> ApiResponse:
        return await self._store.execute(action, payload)

    async def list(self, entity: Entity, **params) -> ApiResponse:
        query = {k: v for k, v in params.items() if v not in (None, "")}
        return await self.execute(action_for(entity, Operation.LIST), query)

    async def create(self, entity: Entity, record: dict) -> ApiResponse:
        return await self.execute(action_for(entity, Operation.CREATE), record)

    async def update(self, entity: Entity, record: dict) -> ApiResponse:
        return await self.execute(action_for(entity, Operation.UPDATE), record)

    async def delete(self, entity: Entity, record_id: str) -> ApiResponse:
        return await self.execute(action_for(entity, Operation.DELETE), {"id": record_id})

    async def dashboard_stats(self) -> ApiResponse:
        return await self.execute(Action.GET_DASHBOARD_STATS)
