"""Tests for SheetsAdapter and FallbackRecordStore using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from backoffice.adapters.local_storage.local_record_store import LocalRecordStore
from backoffice.adapters.persistence.kv_repository import InMemoryKeyValueStore
from backoffice.adapters.remote.fallback_store import FallbackRecordStore, build_record_store
from backoffice.adapters.remote.sheets_adapter import RemoteStoreError, SheetsAdapter
from backoffice.application.ports.record_store import RecordStore
from backoffice.domain.value_objects.actions import Action
from backoffice.domain.value_objects.api_response import ApiResponse

API_URL = "https://script.example.com/macros/s/abc/exec"


def _adapter(handler) -> SheetsAdapter:
    return SheetsAdapter(api_url=API_URL, timeout=1, transport=httpx.MockTransport(handler))


class CountingStore(RecordStore):
    mode = "local"

    def __init__(self):
        self.calls: list[tuple[Action, dict | None]] = []

    async def execute(self, action, payload=None):
        self.calls.append((action, payload))
        return ApiResponse.ok([{"id": "LOCAL-1"}])


# ─── SheetsAdapter ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_read_uses_query_string():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"success": True, "data": [{"id": "DUT-1"}]})

    result = await _adapter(handler).execute(Action.GET_GUARD_DUTY, {"date": "2024-03-15"})
    assert seen["method"] == "GET"
    assert seen["params"] == {"action": "getGuardDuty", "date": "2024-03-15"}
    assert result.records() == [{"id": "DUT-1"}]


@pytest.mark.asyncio
async def test_write_posts_action_and_data_as_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "data": {"id": "EMP-1"}, "message": "ok"})

    result = await _adapter(handler).execute(Action.ADD_EMPLOYEE, {"name": "Karim"})
    assert seen["method"] == "POST"
    assert seen["content_type"].startswith("text/plain")
    assert seen["body"] == {"action": "addEmployee", "data": {"name": "Karim"}}
    assert result.success and result.message == "ok"


@pytest.mark.asyncio
async def test_business_failure_is_not_an_error():
    def handler(request):
        return httpx.Response(200, json={"success": False, "message": "Record not found"})

    result = await _adapter(handler).execute(Action.DELETE_CLIENT, {"id": "x"})
    assert not result.success
    assert result.message == "Record not found"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"success": True}),
        httpx.Response(200, text="<html>login</html>"),
        httpx.Response(200, json={"data": []}),
        httpx.Response(200, json=[1, 2, 3]),
    ],
)
async def test_unusable_responses_raise(response):
    with pytest.raises(RemoteStoreError):
        await _adapter(lambda request: response).execute(Action.GET_CLIENTS)


@pytest.mark.asyncio
async def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    with pytest.raises(RemoteStoreError):
        await _adapter(handler).execute(Action.GET_CLIENTS)


@pytest.mark.asyncio
async def test_missing_url_raises():
    adapter = SheetsAdapter(api_url="", transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    adapter._api_url = ""
    with pytest.raises(RemoteStoreError):
        await adapter.execute(Action.GET_CLIENTS)


# ─── FallbackRecordStore ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_remote_success_skips_local():
    local = CountingStore()
    remote = _adapter(lambda r: httpx.Response(200, json={"success": True, "data": []}))
    store = FallbackRecordStore(remote, local)

    result = await store.execute(Action.GET_CLIENTS)
    assert result.success
    assert local.calls == []
    assert store.fallback_count == 0


@pytest.mark.asyncio
async def test_remote_failure_falls_back_exactly_once():
    remote_calls = []

    def handler(request):
        remote_calls.append(request)
        return httpx.Response(503)

    local = CountingStore()
    store = FallbackRecordStore(_adapter(handler), local)

    result = await store.execute(Action.GET_CLIENTS, {"status": "active"})
    assert result.records() == [{"id": "LOCAL-1"}]
    assert len(remote_calls) == 1
    assert local.calls == [(Action.GET_CLIENTS, {"status": "active"})]
    assert store.fallback_count == 1


@pytest.mark.asyncio
async def test_fallback_create_lands_in_local_store():
    local = LocalRecordStore(InMemoryKeyValueStore())
    store = FallbackRecordStore(_adapter(lambda r: httpx.Response(502)), local)

    created = await store.execute(Action.ADD_INVOICE, {"clientId": "CLI-1", "amount": 100})
    assert created.success
    listed = await local.execute(Action.GET_INVOICES)
    assert [r["id"] for r in listed.data] == [created.data["id"]]


def test_build_record_store_without_url_is_local():
    local = CountingStore()
    assert build_record_store("", remote=CountingStore(), local=local) is local


def test_build_record_store_with_url_wraps_remote():
    store = build_record_store(API_URL, remote=CountingStore(), local=CountingStore())
    assert isinstance(store, FallbackRecordStore)
    assert store.mode == "remote"
