"""DashboardPolicy — headline counters computed from raw record lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from datetime import date

from backoffice.domain.value_objects.coercion import parse_date, to_number
from backoffice.domain.value_objects.enums import RecordStatus


@dataclass(frozen=True)
class DashboardStats:
    activeEmployees: int
    activeClients: int
    presentGuards: int
    todayDayLabor: int
    vesselOrdersThisMonth: int
    pendingAdvances: int
    totalAdvances: int
    monthlyRevenue: float

    def to_dict(self) -> dict:
        return asdict(self)


def _in_month(value, today: date) -> bool:
    parsed = parse_date(value)
    return parsed is not None and parsed.year == today.year and parsed.month == today.month


def compute_dashboard_stats(
    *,
    employees: Sequence[dict],
    clients: Sequence[dict],
    guard_duty: Sequence[dict],
    day_labor: Sequence[dict],
    vessel_orders: Sequence[dict],
    advances: Sequence[dict],
    invoices: Sequence[dict],
    today: date,
) -> DashboardStats:
    today_iso = today.isoformat()
    active = RecordStatus.ACTIVE.value
    pending = sum(1 for a in advances if a.get("status") == RecordStatus.PENDING.value)

    return DashboardStats(
        activeEmployees=sum(1 for e in employees if e.get("status") == active),
        activeClients=sum(1 for c in clients if c.get("status") == active),
        presentGuards=sum(
            1
            for d in guard_duty
            if d.get("date") == today_iso
            and d.get("status") in (RecordStatus.PRESENT.value, RecordStatus.LATE.value)
        ),
        todayDayLabor=sum(1 for d in day_labor if d.get("date") == today_iso),
        vesselOrdersThisMonth=sum(1 for o in vessel_orders if _in_month(o.get("startDate"), today)),
        pendingAdvances=pending,
        totalAdvances=pending,
        monthlyRevenue=sum(
            to_number(i.get("total"))
            for i in invoices
            if i.get("status") == RecordStatus.PAID.value
            and _in_month(i.get("createdAt") or i.get("date"), today)
        ),
    )
