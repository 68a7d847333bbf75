"""DutyAssignment entity — a worker posted on a vessel for a client."""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.domain.value_objects.coercion import to_number

UNKNOWN_CLIENT = "Unknown Client"
UNKNOWN_VESSEL = "Unknown Vessel"


@dataclass
class DutyAssignment:
    id: str | None
    client_id: str | None = None
    client_name: str | None = None
    mother_vessel: str | None = None
    lighter_vessel: str | None = None
    vessel_name: str | None = None  # legacy single-vessel field
    cargo_type: str | None = None
    worker_id: str | None = None
    worker_name: str | None = None
    start_date: str | None = None
    start_shift: str = "day"
    end_date: str | None = None
    end_shift: str | None = None
    rate_per_day: float = 0.0
    conveyance: float = 0.0
    duty_days: float = 0.0
    revenue: float = 0.0
    total_amount: float = 0.0
    status: str = "pending"
    notes: str | None = None

    @property
    def is_ongoing(self) -> bool:
        return not self.end_date

    @property
    def client_label(self) -> str:
        return self.client_name or UNKNOWN_CLIENT

    @property
    def vessel_label(self) -> str:
        return self.mother_vessel or self.vessel_name or UNKNOWN_VESSEL

    @classmethod
    def from_record(cls, record: dict) -> "DutyAssignment":
        """Map a stored camelCase record; unparseable numbers become 0."""
        return cls(
            id=_text(record.get("id")),
            client_id=_text(record.get("clientId")),
            client_name=_text(record.get("clientName")),
            mother_vessel=_text(record.get("motherVessel")),
            lighter_vessel=_text(record.get("lighterVessel")),
            vessel_name=_text(record.get("vesselName")),
            cargo_type=_text(record.get("cargoType")),
            worker_id=_text(record.get("workerId")),
            worker_name=_text(record.get("workerName")),
            start_date=_text(record.get("startDate")),
            start_shift=_text(record.get("startShift")) or "day",
            end_date=_text(record.get("endDate")),
            end_shift=_text(record.get("endShift")),
            rate_per_day=to_number(record.get("ratePerDay")),
            conveyance=to_number(record.get("conveyance")),
            duty_days=to_number(record.get("dutyDays")),
            revenue=to_number(record.get("revenue")),
            total_amount=to_number(record.get("totalAmount")),
            status=_text(record.get("status")) or "pending",
            notes=_text(record.get("notes")),
        )

    def to_record(self) -> dict:
        record = {
            "clientId": self.client_id or "",
            "clientName": self.client_name or "",
            "motherVessel": self.mother_vessel or "",
            "lighterVessel": self.lighter_vessel or "",
            "workerId": self.worker_id or "",
            "workerName": self.worker_name or "",
            "startDate": self.start_date or "",
            "startShift": self.start_shift,
            "endDate": self.end_date or "",
            "endShift": self.end_shift or "",
            "ratePerDay": self.rate_per_day,
            "conveyance": self.conveyance,
            "dutyDays": self.duty_days,
            "revenue": self.revenue,
            "totalAmount": self.total_amount,
            "status": self.status,
            "notes": self.notes or "",
        }
        if self.vessel_name:
            record["vesselName"] = self.vessel_name
        if self.cargo_type:
            record["cargoType"] = self.cargo_type
        if self.id:
            record["id"] = self.id
        return record


def _text(value) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
