"""Salary and invoice helpers that sit beside the generic record routes."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends

from backoffice.application.use_cases.modules import InvoiceController, SalaryController
from backoffice.application.use_cases.records_api import RecordsApi
from backoffice.config import settings
from backoffice.infrastructure.api.dependencies import get_clock, get_records_api
from backoffice.infrastructure.api.routes_records import notice_response

router = APIRouter(tags=["billing"])


@router.post("/salary/{record_id}/mark-paid")
async def mark_salary_paid(
    record_id: str,
    api: RecordsApi = Depends(get_records_api),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    notice = await SalaryController(api, clock=clock).mark_paid(record_id)
    return notice_response(notice)


@router.get("/invoices/next-number")
async def next_invoice_number(
    api: RecordsApi = Depends(get_records_api),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    """Next sequential number plus the letterhead the invoice is printed with."""
    controller = InvoiceController(api, clock=clock)
    notice = await controller.load()
    if notice is not None:
        return notice_response(notice)
    return {
        "success": True,
        "data": {
            "invoiceNumber": controller.next_number(),
            "company": settings.company.model_dump(),
            "currency": settings.currency,
        },
    }
