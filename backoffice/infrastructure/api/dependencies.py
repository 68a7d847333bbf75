"""FastAPI dependency injection — wires storage strategies into use cases."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fastapi import Depends

from backoffice.adapters.local_storage.local_record_store import LocalRecordStore
from backoffice.adapters.persistence.database import async_session_factory
from backoffice.adapters.persistence.kv_repository import SqlKeyValueStore
from backoffice.adapters.remote.fallback_store import build_record_store
from backoffice.adapters.remote.sheets_adapter import SheetsAdapter
from backoffice.application.ports.record_store import RecordStore
from backoffice.application.use_cases.dashboard import LoadDashboardUseCase
from backoffice.application.use_cases.records_api import RecordsApi
from backoffice.config import settings

# Singleton strategies; the resolver is chosen once at import time
_local_store = LocalRecordStore(SqlKeyValueStore(async_session_factory))
_record_store = build_record_store(
    settings.api_url,
    remote=SheetsAdapter(),
    local=_local_store,
)


def get_record_store() -> RecordStore:
    return _record_store


def get_local_store() -> RecordStore:
    return _local_store


def get_records_api(store: RecordStore = Depends(get_record_store)) -> RecordsApi:
    return RecordsApi(store)


def get_dashboard_uc(api: RecordsApi = Depends(get_records_api)) -> LoadDashboardUseCase:
    return LoadDashboardUseCase(api)


def get_clock() -> Callable[[], datetime]:
    return datetime.now
