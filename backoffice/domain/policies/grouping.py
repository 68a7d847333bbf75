"""GroupingPolicy — client → mother vessel report layout for vessel orders."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from backoffice.domain.entities.duty_assignment import DutyAssignment
from backoffice.domain.value_objects.coercion import to_number
from backoffice.domain.value_objects.enums import AssignmentStatus


@dataclass
class VesselGroup:
    vessel_name: str
    assignments: list[dict] = field(default_factory=list)


@dataclass
class ClientGroup:
    client_name: str
    vessels: list[VesselGroup] = field(default_factory=list)

    @property
    def assignment_count(self) -> int:
        return sum(len(v.assignments) for v in self.vessels)


@dataclass(frozen=True)
class AssignmentSummary:
    active_count: int
    total_duty_days: float
    total_amount: float
    client_count: int


def client_key(record: dict) -> str:
    return DutyAssignment.from_record(record).client_label


def vessel_key(record: dict) -> str:
    return DutyAssignment.from_record(record).vessel_label


def group_assignments(records: Sequence[dict]) -> list[ClientGroup]:
    """Stable two-level partition.

    Client groups and, inside each, vessel groups appear in first-seen
    order; assignments keep their relative input order.
    """
    clients: dict[str, ClientGroup] = {}
    vessels: dict[tuple[str, str], VesselGroup] = {}

    for record in records:
        c_key = client_key(record)
        group = clients.get(c_key)
        if group is None:
            group = clients[c_key] = ClientGroup(client_name=c_key)

        v_key = vessel_key(record)
        vessel = vessels.get((c_key, v_key))
        if vessel is None:
            vessel = vessels[(c_key, v_key)] = VesselGroup(vessel_name=v_key)
            group.vessels.append(vessel)
        vessel.assignments.append(record)

    return list(clients.values())


def summarize_assignments(records: Sequence[dict]) -> AssignmentSummary:
    """Aggregates over the (possibly filtered) working set."""
    client_ids = {r.get("clientId") for r in records if r.get("clientId")}
    return AssignmentSummary(
        active_count=sum(1 for r in records if r.get("status") == AssignmentStatus.ACTIVE.value),
        total_duty_days=sum(to_number(r.get("dutyDays")) for r in records),
        total_amount=sum(to_number(r.get("totalAmount")) for r in records),
        client_count=len(client_ids),
    )
