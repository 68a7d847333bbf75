"""Wire action vocabulary shared by the remote endpoint and the local store."""

from __future__ import annotations

from enum import Enum

from backoffice.domain.value_objects.enums import Entity, Operation


class Action(str, Enum):
    GET_EMPLOYEES = "getEmployees"
    ADD_EMPLOYEE = "addEmployee"
    UPDATE_EMPLOYEE = "updateEmployee"
    DELETE_EMPLOYEE = "deleteEmployee"

    GET_CLIENTS = "getClients"
    ADD_CLIENT = "addClient"
    UPDATE_CLIENT = "updateClient"
    DELETE_CLIENT = "deleteClient"

    GET_GUARD_DUTY = "getGuardDuty"
    GET_ALL_GUARD_DUTY = "getAllGuardDuty"
    ADD_GUARD_DUTY = "addGuardDuty"
    UPDATE_GUARD_DUTY = "updateGuardDuty"
    DELETE_GUARD_DUTY = "deleteGuardDuty"

    GET_VESSEL_ORDERS = "getVesselOrders"
    ADD_VESSEL_ORDER = "addVesselOrder"
    UPDATE_VESSEL_ORDER = "updateVesselOrder"
    DELETE_VESSEL_ORDER = "deleteVesselOrder"

    GET_VESSEL_PERSONNEL = "getVesselPersonnel"
    ADD_VESSEL_PERSONNEL = "addVesselPersonnel"
    UPDATE_VESSEL_PERSONNEL = "updateVesselPersonnel"
    DELETE_VESSEL_PERSONNEL = "deleteVesselPersonnel"

    GET_DAY_LABOR = "getDayLabor"
    GET_ALL_DAY_LABOR = "getAllDayLabor"
    ADD_DAY_LABOR = "addDayLabor"
    UPDATE_DAY_LABOR = "updateDayLabor"
    DELETE_DAY_LABOR = "deleteDayLabor"

    GET_DAY_LABOR_WORKERS = "getDayLaborWorkers"
    ADD_DAY_LABOR_WORKER = "addDayLaborWorker"
    UPDATE_DAY_LABOR_WORKER = "updateDayLaborWorker"
    DELETE_DAY_LABOR_WORKER = "deleteDayLaborWorker"

    GET_ADVANCES = "getAdvances"
    ADD_ADVANCE = "addAdvance"
    UPDATE_ADVANCE = "updateAdvance"
    DELETE_ADVANCE = "deleteAdvance"

    GET_SALARY = "getSalary"
    GET_ALL_SALARY = "getAllSalary"
    PROCESS_SALARY = "processSalary"
    UPDATE_SALARY = "updateSalary"
    DELETE_SALARY = "deleteSalary"

    GET_INVOICES = "getInvoices"
    ADD_INVOICE = "addInvoice"
    UPDATE_INVOICE = "updateInvoice"
    DELETE_INVOICE = "deleteInvoice"

    GET_DASHBOARD_DATA = "getDashboardData"
    GET_DASHBOARD_STATS = "getDashboardStats"

    @classmethod
    def parse(cls, name: str) -> "Action | None":
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def is_read(self) -> bool:
        return ACTION_TARGETS[self][1] in (Operation.LIST, Operation.STATS)


# action -> (entity, operation); dashboard stats span every entity
ACTION_TARGETS: dict[Action, tuple[Entity | None, Operation]] = {
    Action.GET_EMPLOYEES: (Entity.EMPLOYEE, Operation.LIST),
    Action.ADD_EMPLOYEE: (Entity.EMPLOYEE, Operation.CREATE),
    Action.UPDATE_EMPLOYEE: (Entity.EMPLOYEE, Operation.UPDATE),
    Action.DELETE_EMPLOYEE: (Entity.EMPLOYEE, Operation.DELETE),
    Action.GET_CLIENTS: (Entity.CLIENT, Operation.LIST),
    Action.ADD_CLIENT: (Entity.CLIENT, Operation.CREATE),
    Action.UPDATE_CLIENT: (Entity.CLIENT, Operation.UPDATE),
    Action.DELETE_CLIENT: (Entity.CLIENT, Operation.DELETE),
    Action.GET_GUARD_DUTY: (Entity.GUARD_DUTY, Operation.LIST),
    Action.GET_ALL_GUARD_DUTY: (Entity.GUARD_DUTY, Operation.LIST),
    Action.ADD_GUARD_DUTY: (Entity.GUARD_DUTY, Operation.CREATE),
    Action.UPDATE_GUARD_DUTY: (Entity.GUARD_DUTY, Operation.UPDATE),
    Action.DELETE_GUARD_DUTY: (Entity.GUARD_DUTY, Operation.DELETE),
    Action.GET_VESSEL_ORDERS: (Entity.VESSEL_ORDER, Operation.LIST),
    Action.ADD_VESSEL_ORDER: (Entity.VESSEL_ORDER, Operation.CREATE),
    Action.UPDATE_VESSEL_ORDER: (Entity.VESSEL_ORDER, Operation.UPDATE),
    Action.DELETE_VESSEL_ORDER: (Entity.VESSEL_ORDER, Operation.DELETE),
    Action.GET_VESSEL_PERSONNEL: (Entity.VESSEL_PERSONNEL, Operation.LIST),
    Action.ADD_VESSEL_PERSONNEL: (Entity.VESSEL_PERSONNEL, Operation.CREATE),
    Action.UPDATE_VESSEL_PERSONNEL: (Entity.VESSEL_PERSONNEL, Operation.UPDATE),
    Action.DELETE_VESSEL_PERSONNEL: (Entity.VESSEL_PERSONNEL, Operation.DELETE),
    Action.GET_DAY_LABOR: (Entity.DAY_LABOR, Operation.LIST),
    Action.GET_ALL_DAY_LABOR: (Entity.DAY_LABOR, Operation.LIST),
    Action.ADD_DAY_LABOR: (Entity.DAY_LABOR, Operation.CREATE),
    Action.UPDATE_DAY_LABOR: (Entity.DAY_LABOR, Operation.UPDATE),
    Action.DELETE_DAY_LABOR: (Entity.DAY_LABOR, Operation.DELETE),
    Action.GET_DAY_LABOR_WORKERS: (Entity.DAY_LABOR_WORKER, Operation.LIST),
    Action.ADD_DAY_LABOR_WORKER: (Entity.DAY_LABOR_WORKER, Operation.CREATE),
    Action.UPDATE_DAY_LABOR_WORKER: (Entity.DAY_LABOR_WORKER, Operation.UPDATE),
    Action.DELETE_DAY_LABOR_WORKER: (Entity.DAY_LABOR_WORKER, Operation.DELETE),
    Action.GET_ADVANCES: (Entity.ADVANCE, Operation.LIST),
    Action.ADD_ADVANCE: (Entity.ADVANCE, Operation.CREATE),
    Action.UPDATE_ADVANCE: (Entity.ADVANCE, Operation.UPDATE),
    Action.DELETE_ADVANCE: (Entity.ADVANCE, Operation.DELETE),
    Action.GET_SALARY: (Entity.SALARY, Operation.LIST),
    Action.GET_ALL_SALARY: (Entity.SALARY, Operation.LIST),
    Action.PROCESS_SALARY: (Entity.SALARY, Operation.CREATE),
    Action.UPDATE_SALARY: (Entity.SALARY, Operation.UPDATE),
    Action.DELETE_SALARY: (Entity.SALARY, Operation.DELETE),
    Action.GET_INVOICES: (Entity.INVOICE, Operation.LIST),
    Action.ADD_INVOICE: (Entity.INVOICE, Operation.CREATE),
    Action.UPDATE_INVOICE: (Entity.INVOICE, Operation.UPDATE),
    Action.DELETE_INVOICE: (Entity.INVOICE, Operation.DELETE),
    Action.GET_DASHBOARD_DATA: (None, Operation.STATS),
    Action.GET_DASHBOARD_STATS: (None, Operation.STATS),
}

# Canonical action for each (entity, operation); first entry in ACTION_TARGETS wins
ACTION_FOR: dict[tuple[Entity, Operation], Action] = {}
for _action, (_entity, _op) in ACTION_TARGETS.items():
    if _entity is not None:
        ACTION_FOR.setdefault((_entity, _op), _action)


def action_for(entity: Entity, operation: Operation) -> Action:
    """Resolve the wire action name for an entity operation.

    Raises:
        ValueError: if the entity does not support the operation.
    """
    try:
        return ACTION_FOR[(entity, operation)]
    except KeyError:
        raise ValueError(f"{entity.value} does not support {operation.value}") from None
