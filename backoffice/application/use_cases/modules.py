"""Module definitions: required fields, filters, defaults and summaries per page."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from backoffice.application.use_cases.record_page import (
    REQUIRED_FIELDS_MESSAGE,
    ModuleSpec,
    Notice,
    RecordPageController,
)
from backoffice.domain.policies.billing import (
    DEFAULT_LABOR_HOURS,
    DEFAULT_LABOR_RATE,
    compute_invoice_totals,
    compute_labor_amount,
    compute_net_pay,
    invoice_due_date,
    next_invoice_number,
)
from backoffice.domain.value_objects.coercion import parse_date, to_number
from backoffice.domain.value_objects.enums import Entity, InvoiceStatus, RecordStatus

logger = logging.getLogger(__name__)

SELECT_EMPLOYEE_MESSAGE = "Please select an employee from the dropdown"
SELECT_CLIENT_MESSAGE = "Please select a client from the dropdown"


def _count(records, status: str) -> int:
    return sum(1 for r in records if r.get("status") == status)


def _total(records, field: str) -> float:
    return sum(to_number(r.get(field)) for r in records)


# ─── Summaries ───────────────────────────────────────────────────────


def summarize_guard_duty(records: list[dict]) -> dict:
    present = sum(
        1 for r in records
        if r.get("status") in (RecordStatus.PRESENT.value, RecordStatus.LATE.value)
    )
    return {
        "total": len(records),
        "present": present,
        "absent": _count(records, RecordStatus.ABSENT.value),
    }


def summarize_day_labor(records: list[dict]) -> dict:
    return {
        "total": len(records),
        "totalHours": _total(records, "hours"),
        "totalPay": _total(records, "amount"),
        "clients": len({r.get("clientId") for r in records if r.get("clientId")}),
    }


def summarize_advances(records: list[dict]) -> dict:
    approved = [r for r in records if r.get("status") == RecordStatus.APPROVED.value]
    return {
        "total": len(records),
        "pending": _count(records, RecordStatus.PENDING.value),
        "approvedAmount": _total(approved, "amount"),
        "totalAmount": _total(records, "amount"),
    }


def summarize_salary(records: list[dict]) -> dict:
    return {
        "total": len(records),
        "paid": _count(records, RecordStatus.PAID.value),
        "pending": _count(records, RecordStatus.PENDING.value),
        "totalNetPay": _total(records, "netPay"),
    }


def summarize_invoices(records: list[dict]) -> dict:
    paid = [r for r in records if r.get("status") == InvoiceStatus.PAID.value]
    return {
        "total": len(records),
        "pending": len(records) - len(paid),
        "paidAmount": _total(paid, "total"),
        "totalAmount": _total(records, "total"),
    }


# ─── Derived fields ──────────────────────────────────────────────────


def derive_day_labor(form: dict) -> dict:
    return {"amount": compute_labor_amount(form.get("hours"), form.get("rate"))}


def derive_salary(form: dict) -> dict:
    return {"netPay": compute_net_pay(form.get("grossSalary"), form.get("advances"))}


def derive_invoice(form: dict) -> dict:
    totals = compute_invoice_totals(form.get("amount"), form.get("taxPercent"))
    return {
        "amount": totals.amount,
        "taxPercent": totals.tax_percent,
        "taxAmount": totals.tax_amount,
        "total": totals.total,
    }


# ─── Module specs ────────────────────────────────────────────────────

EMPLOYEES = ModuleSpec(
    entity=Entity.EMPLOYEE,
    noun="Employee",
    plural="employees",
    required=tuple((name, REQUIRED_FIELDS_MESSAGE) for name in ("name", "phone", "role")),
    search_fields=("name", "phone", "nid"),
    filter_fields=("status", "role"),
    defaults=lambda today: {"status": RecordStatus.ACTIVE.value},
)

CLIENTS = ModuleSpec(
    entity=Entity.CLIENT,
    noun="Client",
    plural="clients",
    required=tuple((name, REQUIRED_FIELDS_MESSAGE) for name in ("name", "phone")),
    search_fields=("name", "phone", "contactPerson"),
    filter_fields=("status",),
    defaults=lambda today: {"status": RecordStatus.ACTIVE.value},
)

GUARD_DUTY = ModuleSpec(
    entity=Entity.GUARD_DUTY,
    noun="Duty record",
    plural="duty records",
    required=(("employeeId", SELECT_EMPLOYEE_MESSAGE), ("clientId", SELECT_CLIENT_MESSAGE)),
    search_fields=("employeeName", "clientName"),
    filter_fields=("status",),
    defaults=lambda today: {"date": today.isoformat(), "status": RecordStatus.PRESENT.value},
    summarize=summarize_guard_duty,
)

DAY_LABOR = ModuleSpec(
    entity=Entity.DAY_LABOR,
    noun="Day labor record",
    plural="day labor records",
    required=(("employeeId", SELECT_EMPLOYEE_MESSAGE), ("clientId", SELECT_CLIENT_MESSAGE)),
    search_fields=("employeeName", "clientName"),
    filter_fields=("clientId",),
    defaults=lambda today: {
        "date": today.isoformat(),
        "hours": DEFAULT_LABOR_HOURS,
        "rate": DEFAULT_LABOR_RATE,
    },
    derive=derive_day_labor,
    summarize=summarize_day_labor,
)

DAY_LABOR_WORKERS = ModuleSpec(
    entity=Entity.DAY_LABOR_WORKER,
    noun="Worker",
    plural="workers",
    required=tuple((name, REQUIRED_FIELDS_MESSAGE) for name in ("dayLaborId", "name")),
    search_fields=("name",),
)

VESSEL_PERSONNEL = ModuleSpec(
    entity=Entity.VESSEL_PERSONNEL,
    noun="Crew member",
    plural="vessel personnel",
    required=(("orderId", REQUIRED_FIELDS_MESSAGE), ("employeeId", SELECT_EMPLOYEE_MESSAGE)),
    search_fields=("employeeName", "role"),
)

ADVANCES = ModuleSpec(
    entity=Entity.ADVANCE,
    noun="Advance",
    plural="advances",
    required=(("employeeId", SELECT_EMPLOYEE_MESSAGE), ("amount", REQUIRED_FIELDS_MESSAGE)),
    search_fields=("employeeName",),
    filter_fields=("status",),
    defaults=lambda today: {"date": today.isoformat(), "status": RecordStatus.PENDING.value},
    summarize=summarize_advances,
)

SALARY = ModuleSpec(
    entity=Entity.SALARY,
    noun="Salary",
    plural="salary records",
    required=(
        ("employeeId", SELECT_EMPLOYEE_MESSAGE),
        ("month", REQUIRED_FIELDS_MESSAGE),
        ("year", REQUIRED_FIELDS_MESSAGE),
    ),
    search_fields=("employeeName",),
    filter_fields=("status",),
    defaults=lambda today: {
        "month": today.month,
        "year": today.year,
        "advances": 0,
        "status": RecordStatus.PENDING.value,
    },
    derive=derive_salary,
    summarize=summarize_salary,
)

INVOICES = ModuleSpec(
    entity=Entity.INVOICE,
    noun="Invoice",
    plural="invoices",
    required=(("clientId", SELECT_CLIENT_MESSAGE), ("amount", REQUIRED_FIELDS_MESSAGE)),
    search_fields=("invoiceNumber", "clientName"),
    filter_fields=("clientId", "status"),
    derive=derive_invoice,
    summarize=summarize_invoices,
)


# ─── Controllers with extra page operations ──────────────────────────


class GuardDutyController(RecordPageController):
    """Guard duty is viewed one day at a time."""

    def __init__(self, api, spec: ModuleSpec = GUARD_DUTY, **kwargs):
        super().__init__(api, spec, **kwargs)
        self.current_date: date = self.today

    async def show_date(self, day) -> Notice | None:
        parsed = parse_date(day)
        self.current_date = parsed.date() if parsed else self.today
        return await self.load(date=self.current_date.isoformat())

    async def step(self, days: int) -> Notice | None:
        return await self.show_date(self.current_date + timedelta(days=days))

    async def go_today(self) -> Notice | None:
        return await self.show_date(self.today)


class SalaryController(RecordPageController):
    def __init__(self, api, spec: ModuleSpec = SALARY, **kwargs):
        super().__init__(api, spec, **kwargs)

    def prepare(self, form: dict) -> dict:
        record = super().prepare(form)
        paid = record.get("status") == RecordStatus.PAID.value
        record["paidDate"] = self.today.isoformat() if paid else ""
        return record

    async def mark_paid(self, record_id: str) -> Notice:
        try:
            result = await self._api.update(
                self.spec.entity,
                {
                    "id": record_id,
                    "status": RecordStatus.PAID.value,
                    "paidDate": self.today.isoformat(),
                },
            )
        except Exception:
            logger.exception("Marking salary %s paid failed", record_id)
            return Notice.error("Error updating salary")

        if not result.success:
            return Notice.error(result.message or "Operation failed")
        await self.load(**self.context.params)
        return Notice.success("Salary marked as paid", result.data)


class InvoiceController(RecordPageController):
    def __init__(self, api, spec: ModuleSpec = INVOICES, **kwargs):
        super().__init__(api, spec, **kwargs)

    def next_number(self) -> str:
        return next_invoice_number(len(self.context.records))

    def open_add(self) -> dict:
        self.context.editing_id = None
        return {
            "invoiceNumber": self.next_number(),
            "date": self.today.isoformat(),
            "dueDate": invoice_due_date(self.today).isoformat(),
            "status": InvoiceStatus.DRAFT.value,
            "taxPercent": 0,
        }

    async def submit(self, form: dict, record_id: str | None = None) -> Notice:
        if not (record_id or self.context.editing_id) and not form.get("invoiceNumber"):
            # numbering counts every stored invoice, not the filtered view
            await self.load()
            form = {**form, "invoiceNumber": self.next_number()}
        return await super().submit(form, record_id)


MODULES: dict[Entity, ModuleSpec] = {
    spec.entity: spec
    for spec in (
        EMPLOYEES,
        CLIENTS,
        GUARD_DUTY,
        DAY_LABOR,
        DAY_LABOR_WORKERS,
        VESSEL_PERSONNEL,
        ADVANCES,
        SALARY,
        INVOICES,
    )
}
