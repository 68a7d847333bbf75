"""Action endpoint — serves the same wire protocol as the spreadsheet backend."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from backoffice.application.ports.record_store import RecordStore
from backoffice.domain.value_objects.actions import Action
from backoffice.domain.value_objects.api_response import ApiResponse
from backoffice.infrastructure.api.dependencies import get_local_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exec", tags=["exec"])


async def _run(store: RecordStore, name, payload) -> dict:
    action = Action.parse(str(name or ""))
    if action is None:
        return ApiResponse.fail(f"Unknown action: {name}").to_dict()
    result = await store.execute(action, payload)
    return result.to_dict()


@router.get("")
async def exec_read(request: Request, store: RecordStore = Depends(get_local_store)):
    """?action=<name>&<params>"""
    params = dict(request.query_params)
    name = params.pop("action", None)
    return await _run(store, name, params)


@router.post("")
async def exec_write(request: Request, store: RecordStore = Depends(get_local_store)):
    """Body {"action": name, "data": payload}, usually sent as text/plain."""
    raw = await request.body()
    try:
        body = json.loads(raw or b"null")
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body is not valid JSON") from None
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")

    payload = body.get("data") or {}
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="'data' must be a JSON object")
    logger.debug("exec %s", body.get("action"))
    return await _run(store, body.get("action"), payload)
