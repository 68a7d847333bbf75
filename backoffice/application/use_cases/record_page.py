"""RecordPageController — list/add/edit/delete workflow shared by every module."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime

from backoffice.application.use_cases.records_api import RecordsApi
from backoffice.domain.policies.record_filter import filter_records
from backoffice.domain.value_objects.coercion import is_blank
from backoffice.domain.value_objects.enums import LIST_FILTERS, Entity, NoticeLevel

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"


@dataclass(frozen=True)
class Notice:
    """Outcome of a page operation, shown to the user as a toast."""

    level: NoticeLevel
    message: str
    data: object = None

    @property
    def ok(self) -> bool:
        return self.level != NoticeLevel.ERROR

    @classmethod
    def success(cls, message: str, data: object = None) -> "Notice":
        return cls(NoticeLevel.SUCCESS, message, data)

    @classmethod
    def error(cls, message: str) -> "Notice":
        return cls(NoticeLevel.ERROR, message)


@dataclass
class PageContext:
    """State owned by one controller instance."""

    records: list[dict] = field(default_factory=list)
    filtered: list[dict] = field(default_factory=list)
    editing_id: str | None = None
    filters: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ModuleSpec:
    """Per-module configuration consumed by RecordPageController."""

    entity: Entity
    noun: str
    plural: str
    required: tuple[tuple[str, str], ...] = ()
    search_fields: tuple[str, ...] = ()
    filter_fields: tuple[str, ...] = ()
    defaults: Callable[[date], dict] | None = None
    derive: Callable[[dict], dict] | None = None
    summarize: Callable[[list[dict]], dict] | None = None

    @property
    def list_params(self) -> tuple[str, ...]:
        return LIST_FILTERS.get(self.entity, ())


class RecordPageController:
    """Drives one module page against the records API.

    Only the controller writes ``context``. ``load`` replaces the canonical
    list wholesale and ``filter`` derives the visible list from it without
    touching it. Every operation reports through a ``Notice``; none raises.
    """

    def __init__(
        self,
        api: RecordsApi,
        spec: ModuleSpec,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._api = api
        self.spec = spec
        self._clock = clock
        self.context = PageContext()

    @property
    def today(self) -> date:
        return self._clock().date()

    # ─── Listing ─────────────────────────────────────────────────────

    async def load(self, **params) -> Notice | None:
        """Fetch the canonical list; returns a Notice only on failure."""
        self.context.params = {
            name: str(params[name])
            for name in self.spec.list_params
            if not is_blank(params.get(name))
        }
        try:
            result = await self._api.list(self.spec.entity, **self.context.params)
        except Exception:
            logger.exception("Loading %s failed", self.spec.entity.value)
            return Notice.error(f"Error loading {self.spec.plural}")

        if not result.success:
            return Notice.error(result.message or f"Failed to load {self.spec.plural}")

        self.context.records = result.records()
        self._refilter()
        return None

    def filter(self, search: str | None = None, **exact) -> list[dict]:
        """Set the search token and exact filters; unknown filter names are ignored."""
        filters = {"search": search or ""}
        for name in self.spec.filter_fields:
            filters[name] = exact.get(name) or ""
        self.context.filters = filters
        return self._refilter()

    def _refilter(self) -> list[dict]:
        filters = self.context.filters
        self.context.filtered = filter_records(
            self.context.records,
            search=filters.get("search"),
            search_fields=self.spec.search_fields,
            exact={name: filters.get(name) for name in self.spec.filter_fields},
        )
        return self.context.filtered

    def summary(self) -> dict:
        if self.spec.summarize is None:
            return {"total": len(self.context.filtered)}
        return self.spec.summarize(self.context.filtered)

    def find(self, record_id: str) -> dict | None:
        for record in self.context.records:
            if str(record.get("id")) == str(record_id):
                return record
        return None

    # ─── Form ────────────────────────────────────────────────────────

    def open_add(self) -> dict:
        self.context.editing_id = None
        if self.spec.defaults is None:
            return {}
        return self.spec.defaults(self.today)

    def open_edit(self, record_id: str) -> dict | None:
        """Start editing a loaded record; returns the form values or None."""
        record = self.find(record_id)
        if record is None:
            return None
        self.context.editing_id = str(record_id)
        return self.edit_form(record)

    def edit_form(self, record: dict) -> dict:
        return dict(record)

    def close_form(self) -> None:
        self.context.editing_id = None

    def validate(self, form: dict) -> str | None:
        for name, message in self.spec.required:
            if is_blank(form.get(name)):
                return message
        return None

    def prepare(self, form: dict) -> dict:
        """Apply derived fields to the submitted values."""
        record = dict(form)
        if self.spec.derive is not None:
            record.update(self.spec.derive(record))
        return record

    async def submit(self, form: dict, record_id: str | None = None) -> Notice:
        """Create, or update when editing (or when *record_id* is given)."""
        target_id = record_id or self.context.editing_id
        problem = self.validate(form)
        if problem:
            return Notice.error(problem)

        try:
            record = self.prepare(form)
            if target_id:
                record["id"] = target_id
                result = await self._api.update(self.spec.entity, record)
            else:
                result = await self._api.create(self.spec.entity, record)
        except Exception:
            logger.exception("Saving %s failed", self.spec.noun.lower())
            return Notice.error(f"Error saving {self.spec.noun.lower()}")

        if not result.success:
            return Notice.error(result.message or "Operation failed")

        self.context.editing_id = None
        await self.load(**self.context.params)
        verb = "updated" if target_id else "added"
        return Notice.success(f"{self.spec.noun} {verb} successfully", result.data)

    async def delete(self, record_id: str) -> Notice:
        try:
            result = await self._api.delete(self.spec.entity, record_id)
        except Exception:
            logger.exception("Deleting %s %s failed", self.spec.noun.lower(), record_id)
            return Notice.error(f"Error deleting {self.spec.noun.lower()}")

        if not result.success:
            return Notice.error(result.message or "Delete failed")

        await self.load(**self.context.params)
        return Notice.success(f"{self.spec.noun} deleted successfully")
