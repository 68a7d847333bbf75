"""BillingPolicy — amounts derived from form inputs before a record is saved.

None of these values are re-derived by the store: whatever the caller
computes is persisted as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from backoffice.domain.value_objects.coercion import round_half_up, to_number

INVOICE_DUE_DAYS = 30
DEFAULT_LABOR_HOURS = 8
DEFAULT_LABOR_RATE = 100


@dataclass(frozen=True)
class DutyBilling:
    duty_days: float
    revenue: float
    total_amount: float


def compute_duty_billing(duty_days, rate_per_day, conveyance) -> DutyBilling:
    """revenue = duty_days * rate; total = revenue + conveyance (no rounding)."""
    days = to_number(duty_days)
    revenue = days * to_number(rate_per_day)
    return DutyBilling(
        duty_days=days,
        revenue=revenue,
        total_amount=revenue + to_number(conveyance),
    )


@dataclass(frozen=True)
class InvoiceTotals:
    amount: float
    tax_percent: float
    tax_amount: int
    total: float


def compute_invoice_totals(amount, tax_percent) -> InvoiceTotals:
    """Tax is rounded half-up to a whole currency unit."""
    base = to_number(amount)
    percent = to_number(tax_percent)
    tax = round_half_up(base * percent / 100)
    return InvoiceTotals(amount=base, tax_percent=percent, tax_amount=tax, total=base + tax)


def next_invoice_number(existing_count: int) -> str:
    return f"INV-{existing_count + 1:04d}"


def invoice_due_date(issued: date) -> date:
    return issued + timedelta(days=INVOICE_DUE_DAYS)


def compute_net_pay(gross_salary, advances) -> float:
    return to_number(gross_salary) - to_number(advances)


def compute_labor_amount(hours, rate) -> float:
    return to_number(hours) * to_number(rate)
