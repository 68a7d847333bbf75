"""Controller lookup by entity."""

from __future__ import annotations

from backoffice.application.use_cases.modules import (
    MODULES,
    GuardDutyController,
    InvoiceController,
    SalaryController,
)
from backoffice.application.use_cases.record_page import RecordPageController
from backoffice.application.use_cases.records_api import RecordsApi
from backoffice.application.use_cases.vessel_orders import VesselOrderController
from backoffice.domain.value_objects.enums import Entity

_SPECIALISED: dict[Entity, type[RecordPageController]] = {
    Entity.VESSEL_ORDER: VesselOrderController,
    Entity.GUARD_DUTY: GuardDutyController,
    Entity.SALARY: SalaryController,
    Entity.INVOICE: InvoiceController,
}


def build_controller(entity: Entity, api: RecordsApi, **kwargs) -> RecordPageController:
    controller_cls = _SPECIALISED.get(entity)
    if controller_cls is not None:
        return controller_cls(api, **kwargs)
    return RecordPageController(api, MODULES[entity], **kwargs)
