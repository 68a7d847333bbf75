"""Spreadsheet endpoint adapter — implements RecordStore over HTTP."""

from __future__ import annotations

import json
import logging

import httpx

from backoffice.application.ports.record_store import RecordStore
from backoffice.config import settings
from backoffice.domain.value_objects.actions import Action
from backoffice.domain.value_objects.api_response import ApiResponse

logger = logging.getLogger(__name__)


class RemoteStoreError(Exception):
    """The remote endpoint could not produce a usable response."""


class SheetsAdapter(RecordStore):
    """GET ?action=... for reads, POST {"action", "data"} for writes."""

    mode = "remote"

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_url = api_url or settings.api_url
        self._timeout = timeout if timeout is not None else settings.remote_timeout
        self._transport = transport

    async def execute(self, action: Action, payload: dict | None = None) -> ApiResponse:
        """Call the endpoint once.

        Raises:
            RemoteStoreError: on transport errors, non-2xx statuses or a
                body that is not a ``{success, data, message}`` envelope.
        """
        if not self._api_url:
            raise RemoteStoreError("No remote endpoint configured")

        payload = payload or {}
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
                follow_redirects=True,
            ) as client:
                if action.is_read:
                    params = {"action": action.value}
                    params.update({k: _query_value(v) for k, v in payload.items() if v is not None})
                    response = await client.get(self._api_url, params=params)
                else:
                    # the endpoint reads the JSON from a text/plain body
                    response = await client.post(
                        self._api_url,
                        content=json.dumps({"action": action.value, "data": payload}),
                        headers={"Content-Type": "text/plain"},
                    )
                response.raise_for_status()
                body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise RemoteStoreError(f"{action.value}: {e}") from e

        try:
            result = ApiResponse.from_dict(body)
        except ValueError as e:
            raise RemoteStoreError(f"{action.value}: {e}") from e

        logger.debug("Remote %s → success=%s", action.value, result.success)
        return result


def _query_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
