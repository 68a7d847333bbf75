"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Entity(str, Enum):
    """Record collections; the value doubles as the URL slug."""

    EMPLOYEE = "employees"
    CLIENT = "clients"
    GUARD_DUTY = "guard-duty"
    VESSEL_ORDER = "vessel-orders"
    VESSEL_PERSONNEL = "vessel-personnel"
    DAY_LABOR = "day-labor"
    DAY_LABOR_WORKER = "day-labor-workers"
    ADVANCE = "advances"
    SALARY = "salary"
    INVOICE = "invoices"

    @property
    def storage_key(self) -> str:
        return STORAGE_KEYS[self]

    @property
    def id_prefix(self) -> str:
        """EMP, CLI, DUT, ORD, ... taken from the storage key's last segment."""
        return self.storage_key.split("_")[-1][:3].upper()


STORAGE_KEYS: dict[Entity, str] = {
    Entity.EMPLOYEE: "al_aksha_employees",
    Entity.CLIENT: "al_aksha_clients",
    Entity.GUARD_DUTY: "al_aksha_guard_duty",
    Entity.VESSEL_ORDER: "al_aksha_vessel_orders",
    Entity.VESSEL_PERSONNEL: "al_aksha_vessel_personnel",
    Entity.DAY_LABOR: "al_aksha_day_labor",
    Entity.DAY_LABOR_WORKER: "al_aksha_day_labor_workers",
    Entity.ADVANCE: "al_aksha_advances",
    Entity.SALARY: "al_aksha_salary",
    Entity.INVOICE: "al_aksha_invoices",
}

# Optional list filters understood by the store, per entity
LIST_FILTERS: dict[Entity, tuple[str, ...]] = {
    Entity.GUARD_DUTY: ("date",),
    Entity.DAY_LABOR: ("date",),
    Entity.SALARY: ("month", "year"),
    Entity.VESSEL_PERSONNEL: ("orderId",),
    Entity.DAY_LABOR_WORKER: ("dayLaborId",),
    Entity.ADVANCE: ("employeeId",),
}


class Operation(str, Enum):
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    STATS = "stats"


class Shift(str, Enum):
    DAY = "day"
    NIGHT = "night"


class AssignmentStatus(str, Enum):
    """Known vessel-order statuses. Stored records may carry other values."""

    ACTIVE = "active"
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RecordStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PAID = "paid"
    UNPAID = "unpaid"
    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
