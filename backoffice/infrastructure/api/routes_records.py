"""Record endpoints — list/add/edit/delete for every entity slug."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request

from backoffice.application.use_cases.pages import build_controller
from backoffice.application.use_cases.record_page import Notice, RecordPageController
from backoffice.application.use_cases.records_api import RecordsApi
from backoffice.domain.value_objects.enums import Entity
from backoffice.infrastructure.api.dependencies import get_clock, get_records_api

logger = logging.getLogger(__name__)

router = APIRouter(tags=["records"])


def resolve_entity(slug: str) -> Entity:
    try:
        return Entity(slug)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown entity: {slug}") from None


def get_controller(
    entity: str,
    api: RecordsApi = Depends(get_records_api),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> RecordPageController:
    return build_controller(resolve_entity(entity), api, clock=clock)


async def read_json_object(request: Request) -> dict:
    """Decode the request body; anything but a JSON object is a 400."""
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body is not valid JSON") from None
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return body


def notice_response(notice: Notice) -> dict:
    return {"success": notice.ok, "data": notice.data, "message": notice.message}


@router.get("/{entity}")
async def list_records(request: Request, controller: RecordPageController = Depends(get_controller)):
    """List records; list params, search and exact filters come from the query string."""
    query = dict(request.query_params)
    notice = await controller.load(**query)
    if notice is not None:
        return {"success": False, "data": [], "message": notice.message}

    search = query.pop("search", None)
    visible = controller.filter(search, **query)
    return {
        "success": True,
        "data": visible,
        "total": len(controller.context.records),
        "summary": controller.summary(),
    }


@router.get("/{entity}/new")
async def new_record_form(controller: RecordPageController = Depends(get_controller)):
    """Default values for the add form."""
    await controller.load()
    return {"success": True, "data": controller.open_add()}


@router.get("/{entity}/{record_id}")
async def edit_record_form(record_id: str, controller: RecordPageController = Depends(get_controller)):
    """Values for the edit form of one record."""
    notice = await controller.load()
    if notice is not None:
        return notice_response(notice)
    form = controller.open_edit(record_id)
    if form is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return {"success": True, "data": form}


@router.post("/{entity}")
async def create_record(request: Request, controller: RecordPageController = Depends(get_controller)):
    form = await read_json_object(request)
    form.pop("id", None)
    notice = await controller.submit(form)
    return notice_response(notice)


@router.put("/{entity}/{record_id}")
async def update_record(
    record_id: str,
    request: Request,
    controller: RecordPageController = Depends(get_controller),
):
    form = await read_json_object(request)
    notice = await controller.submit(form, record_id=record_id)
    return notice_response(notice)


@router.delete("/{entity}/{record_id}")
async def delete_record(record_id: str, controller: RecordPageController = Depends(get_controller)):
    notice = await controller.delete(record_id)
    return notice_response(notice)
