"""Vessel orders: duty-day billing on every save, grouped client/vessel report."""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.application.use_cases.record_page import (
    REQUIRED_FIELDS_MESSAGE,
    ModuleSpec,
    Notice,
    RecordPageController,
)
from backoffice.domain.entities.duty_assignment import DutyAssignment
from backoffice.domain.policies.billing import DutyBilling, compute_duty_billing
from backoffice.domain.policies.duty_days import calculate_duty_days
from backoffice.domain.policies.grouping import (
    AssignmentSummary,
    ClientGroup,
    group_assignments,
    summarize_assignments,
)
from backoffice.domain.policies.record_filter import ASSIGNMENT_SEARCH_FIELDS
from backoffice.domain.value_objects.enums import AssignmentStatus, Entity, Shift


def summary_to_dict(summary: AssignmentSummary) -> dict:
    return {
        "activeCount": summary.active_count,
        "totalDutyDays": summary.total_duty_days,
        "totalAmount": summary.total_amount,
        "clientCount": summary.client_count,
    }


VESSEL_ORDERS = ModuleSpec(
    entity=Entity.VESSEL_ORDER,
    noun="Order",
    plural="orders",
    required=(
        ("clientId", "Please select a client from the dropdown"),
        ("startDate", REQUIRED_FIELDS_MESSAGE),
    ),
    search_fields=ASSIGNMENT_SEARCH_FIELDS,
    filter_fields=("status", "clientId"),
    defaults=lambda today: {
        "startDate": today.isoformat(),
        "startShift": Shift.DAY.value,
        "status": AssignmentStatus.ACTIVE.value,
        "conveyance": 0,
    },
    summarize=lambda records: summary_to_dict(summarize_assignments(records)),
)


@dataclass
class AssignmentReport:
    groups: list[ClientGroup]
    summary: AssignmentSummary

    def to_dict(self) -> dict:
        return {
            "groups": [
                {
                    "clientName": group.client_name,
                    "count": group.assignment_count,
                    "vessels": [
                        {"vesselName": vessel.vessel_name, "assignments": vessel.assignments}
                        for vessel in group.vessels
                    ],
                }
                for group in self.groups
            ],
            "summary": summary_to_dict(self.summary),
        }


class VesselOrderController(RecordPageController):
    """Vessel-order page.

    Duty days, revenue and total are recomputed from the form inputs
    before every create or update, and again whenever an ongoing order
    is opened for editing. The store keeps whatever is sent.
    """

    def __init__(self, api, spec: ModuleSpec = VESSEL_ORDERS, **kwargs):
        super().__init__(api, spec, **kwargs)

    def quote(self, form: dict) -> DutyBilling:
        """Recalculate the billing triple for the current form values."""
        assignment = DutyAssignment.from_record(form)
        duty_days = calculate_duty_days(
            assignment.start_date,
            assignment.start_shift,
            assignment.end_date,
            assignment.end_shift,
            now=self._clock(),
        )
        return compute_duty_billing(duty_days, assignment.rate_per_day, assignment.conveyance)

    async def submit(self, form: dict, record_id: str | None = None) -> Notice:
        target_id = record_id or self.context.editing_id
        if target_id:
            # billing needs the full order, so partial updates merge onto the stored one
            if self.find(target_id) is None:
                await self.load(**self.context.params)
            stored = self.find(target_id)
            if stored is not None:
                form = {**stored, **form}
        return await super().submit(form, record_id)

    def prepare(self, form: dict) -> dict:
        assignment = DutyAssignment.from_record(form)
        billing = self.quote(form)
        assignment.duty_days = billing.duty_days
        assignment.revenue = billing.revenue
        assignment.total_amount = billing.total_amount
        record = assignment.to_record()
        record.pop("id", None)
        return record

    def edit_form(self, record: dict) -> dict:
        form = dict(record)
        if DutyAssignment.from_record(record).is_ongoing:
            billing = self.quote(record)
            form.update(
                dutyDays=billing.duty_days,
                revenue=billing.revenue,
                totalAmount=billing.total_amount,
            )
        return form

    def report(
        self,
        search: str | None = None,
        status: str | None = None,
        client: str | None = None,
    ) -> AssignmentReport:
        """Group the filtered view by client, then by mother vessel."""
        visible = self.filter(search, status=status, clientId=client)
        return AssignmentReport(groups=group_assignments(visible), summary=summarize_assignments(visible))
