"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest

from backoffice.adapters.local_storage.local_record_store import LocalRecordStore
from backoffice.adapters.persistence.kv_repository import InMemoryKeyValueStore
from backoffice.application.use_cases.records_api import RecordsApi

FIXED_NOW = datetime(2024, 3, 15, 10, 30, 0)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture
def local_store(kv):
    return LocalRecordStore(kv, today=FIXED_NOW.date)


@pytest.fixture
def records_api(local_store):
    return RecordsApi(local_store)


@pytest.fixture
def sample_assignment():
    return {
        "clientId": "CLI-1",
        "clientName": "ABC Shipping",
        "motherVessel": "MV Star",
        "lighterVessel": "LV One",
        "workerId": "EMP-1",
        "workerName": "Rahim Uddin",
        "startDate": "2024-01-01",
        "startShift": "day",
        "endDate": "2024-01-03",
        "endShift": "night",
        "ratePerDay": 500,
        "conveyance": 200,
        "status": "active",
    }
