"""Two-strategy record store: remote endpoint first, local store on failure."""

from __future__ import annotations

import logging

from backoffice.application.ports.record_store import RecordStore
from backoffice.domain.value_objects.actions import Action
from backoffice.domain.value_objects.api_response import ApiResponse

logger = logging.getLogger(__name__)


class FallbackRecordStore(RecordStore):
    """Resolve each call against *primary*, substituting *fallback* once.

    A failure is anything the primary raises. The substitution is silent
    to the caller (the response looks the same) but is logged and counted
    in ``fallback_count``.
    """

    mode = "remote"

    def __init__(self, primary: RecordStore, fallback: RecordStore):
        self._primary = primary
        self._fallback = fallback
        self.fallback_count = 0

    async def execute(self, action: Action, payload: dict | None = None) -> ApiResponse:
        try:
            return await self._primary.execute(action, payload)
        except Exception:
            logger.warning(
                "Remote call %s failed, answering from the local store",
                action.value,
                exc_info=True,
            )
        self.fallback_count += 1
        return await self._fallback.execute(action, payload)


def build_record_store(api_url: str, remote: RecordStore, local: RecordStore) -> RecordStore:
    """Pick the strategy once: no endpoint configured means local only."""
    if not api_url:
        logger.info("No API_URL configured, using the local store")
        return local
    logger.info("Using remote endpoint with local fallback")
    return FallbackRecordStore(remote, local)
