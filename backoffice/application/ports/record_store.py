"""Port interface for the CRUD action endpoint (remote sheet or local store)."""

from abc import ABC, abstractmethod

from backoffice.domain.value_objects.actions import Action
from backoffice.domain.value_objects.api_response import ApiResponse


class RecordStore(ABC):
    mode: str = "unknown"

    @abstractmethod
    async def execute(self, action: Action, payload: dict | None = None) -> ApiResponse:
        """Run one named action.

        Reads take their filters from *payload*; writes take the record
        (or ``{"id": ...}`` for deletes). Business failures are reported as
        ``success=False`` responses, never raised.
        """
        ...
