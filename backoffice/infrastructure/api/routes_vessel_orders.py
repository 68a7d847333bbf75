"""Vessel-order endpoints — grouped report and billing quote."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from backoffice.application.use_cases.records_api import RecordsApi
from backoffice.application.use_cases.vessel_orders import VesselOrderController
from backoffice.infrastructure.api.dependencies import get_clock, get_records_api
from backoffice.infrastructure.api.routes_records import read_json_object

router = APIRouter(prefix="/vessel-orders", tags=["vessel-orders"])


def get_vessel_order_controller(
    api: RecordsApi = Depends(get_records_api),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> VesselOrderController:
    return VesselOrderController(api, clock=clock)


@router.get("/report")
async def assignment_report(
    search: str = "",
    status: str = "",
    client: str = "",
    controller: VesselOrderController = Depends(get_vessel_order_controller),
):
    """Assignments grouped by client, then mother vessel, with totals."""
    notice = await controller.load()
    if notice is not None:
        return {"success": False, "data": None, "message": notice.message}
    report = controller.report(search=search, status=status, client=client)
    return {"success": True, "data": report.to_dict()}


@router.post("/quote")
async def quote_assignment(
    request: Request,
    controller: VesselOrderController = Depends(get_vessel_order_controller),
):
    """Recompute duty days, revenue and total for the posted form values."""
    form = await read_json_object(request)
    billing = controller.quote(form)
    return {
        "dutyDays": billing.duty_days,
        "revenue": billing.revenue,
        "totalAmount": billing.total_amount,
    }
