"""LoadDashboardUseCase — headline counters for the landing page."""

from __future__ import annotations

import logging

from backoffice.application.use_cases.record_page import Notice
from backoffice.application.use_cases.records_api import RecordsApi
from backoffice.domain.policies.dashboard import DashboardStats

logger = logging.getLogger(__name__)

EMPTY_STATS = DashboardStats(
    activeEmployees=0,
    activeClients=0,
    presentGuards=0,
    todayDayLabor=0,
    vesselOrdersThisMonth=0,
    pendingAdvances=0,
    totalAdvances=0,
    monthlyRevenue=0,
)


class LoadDashboardUseCase:
    """Fetch the stats; on failure show zeros alongside an error notice."""

    def __init__(self, api: RecordsApi):
        self._api = api

    async def execute(self) -> tuple[dict, Notice | None]:
        try:
            result = await self._api.dashboard_stats()
        except Exception:
            logger.exception("Loading dashboard data failed")
            return EMPTY_STATS.to_dict(), Notice.error("Error loading dashboard data")

        if not result.success or not isinstance(result.data, dict):
            return EMPTY_STATS.to_dict(), Notice.error(
                result.message or "Failed to load dashboard data"
            )
        # remote backends may omit counters; keep every key present
        return {**EMPTY_STATS.to_dict(), **result.data}, None
